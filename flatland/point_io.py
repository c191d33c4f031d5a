"""Plain-text point list input/output for the flatland CLI.

One point per line, ``x y`` or ``x y z``, separated by whitespace or commas.
Blank lines and ``#`` comments are ignored.
"""

import re
import sys
from typing import List, Optional

from .geometry import Point

_SEPARATOR = re.compile(r'[\s,]+')


def parse_points(text: str) -> List[Point]:
    """Parse point text into points.

    Raises:
        ValueError: if a line does not hold two or three numbers
    """
    points: List[Point] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.split('#', 1)[0].strip()
        if not line:
            continue
        fields = [f for f in _SEPARATOR.split(line) if f]
        if len(fields) not in (2, 3):
            raise ValueError(f"line {lineno}: expected 2 or 3 ordinates, got {len(fields)}")
        try:
            ordinates = [float(f) for f in fields]
        except ValueError:
            raise ValueError(f"line {lineno}: not a number in {line!r}") from None
        points.append(Point(*ordinates))
    return points


def format_point(p: Point, precision: Optional[int] = None) -> str:
    ordinates = [p.x, p.y, p.z] if p.has_z else [p.x, p.y]
    if precision is None:
        return ' '.join(repr(v) for v in ordinates)
    return ' '.join(f"{v:.{precision}f}" for v in ordinates)


def format_points(points: List[Point], precision: Optional[int] = None) -> str:
    """Format points one per line, with a trailing newline when non-empty."""
    if not points:
        return ''
    return '\n'.join(format_point(p, precision) for p in points) + '\n'


def read_text(path: Optional[str] = None) -> str:
    """Read text from a file, or from stdin when path is None or '-'."""
    if path is None or path == '-':
        return sys.stdin.read()
    with open(path, 'r') as f:
        return f.read()


def write_text(content: str, path: Optional[str] = None):
    """Write text to a file, or to stdout when path is None or '-'."""
    if path is None or path == '-':
        sys.stdout.write(content)
    else:
        with open(path, 'w') as f:
            f.write(content)

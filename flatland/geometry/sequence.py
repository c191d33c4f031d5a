"""Algorithms over ordered sequences of points.

Sequences are plain lists of Point owned by the caller. Functions either
read them, return a derived list, or (``reverse``, ``scroll``) modify them
in place.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from .envelope import Envelope
from .types import Point

logger = logging.getLogger(__name__)


def as_points(pairs: Iterable[Sequence[float]]) -> List[Point]:
    """Build points from (x, y) or (x, y, z) tuples."""
    return [Point(*pair) for pair in pairs]


def dimension(pts: Sequence[Point]) -> int:
    """Highest dimensionality among pts; 3 when it cannot be known."""
    if not pts:
        return 3
    return max(p.dimensions for p in pts)


def measures(pts: Sequence[Point]) -> int:
    if not pts:
        return 0
    return max(p.measure() for p in pts)


def is_ring(pts: Sequence[Point]) -> bool:
    """Test for at least four points with the first equal to the last.

    Self-intersection is not checked.
    """
    if len(pts) < 4:
        return False
    return pts[0].equals_2d(pts[-1])


def index_of(point: Point, pts: Sequence[Point]) -> int:
    """Index of the first point equal in x and y to point, or -1."""
    for i, p in enumerate(pts):
        if point.equals_2d(p):
            return i
    return -1


def point_not_in(test_pts: Sequence[Point], pts: Sequence[Point]) -> Optional[Point]:
    """First point of test_pts that does not occur in pts, or None."""
    for p in test_pts:
        if index_of(p, pts) < 0:
            return p
    return None


def compare(pts1: Sequence[Point], pts2: Sequence[Point]) -> int:
    """Lexicographic comparison in the forward direction.

    When one sequence is a prefix of the other the shorter one sorts first.
    """
    for a, b in zip(pts1, pts2):
        comp = a.compare_to(b)
        if comp != 0:
            return comp
    if len(pts1) < len(pts2):
        return -1
    if len(pts1) > len(pts2):
        return 1
    return 0


def increasing_direction(pts: Sequence[Point]) -> int:
    """Compare the sequence against itself read backwards.

    Walks inward from both ends and returns the first non-zero
    ``compare_to`` of a point with its mirror: -1 when the start is
    smaller, 1 when the end is smaller. A palindrome is defined to be
    positively oriented and gives 1.
    """
    n = len(pts)
    for i in range(n):
        comp = pts[i].compare_to(pts[n - 1 - i])
        if comp != 0:
            return comp
    return 1


def is_equal_reversed(pts1: Sequence[Point], pts2: Sequence[Point]) -> bool:
    """Compare two equal-length sequences position by position.

    Despite the name nothing is reversed: this is True when
    ``pts1[i].compare_to(pts2[i]) == 0`` for every i. Callers pass a
    reversed copy when they want the reversed comparison.
    """
    for a, b in zip(pts1, pts2):
        if a.compare_to(b) != 0:
            return False
    return True


def equal_sequences(pts1: Sequence[Point], pts2: Sequence[Point]) -> bool:
    """Planar element-wise equality; two empty sequences are equal."""
    if not pts1 and not pts2:
        return True
    if len(pts1) != len(pts2):
        return False
    return all(a.equals_2d(b) for a, b in zip(pts1, pts2))


def copy_deep(pts: Sequence[Point]) -> List[Point]:
    return [p.clone() for p in pts]


def _repeats(pts: Sequence[Point], wrap: bool):
    # yields True for each point equal to its predecessor
    start = 0 if wrap and len(pts) > 1 else 1
    for i in range(start, len(pts)):
        yield pts[i - 1].key() == pts[i].key()


def has_repeated_points(pts: Sequence[Point], wrap: bool = False) -> bool:
    """Test whether two consecutive points are identical.

    Identity is bit-for-bit on x, y and z. With ``wrap`` the first point is
    also compared against the last.
    """
    return any(_repeats(pts, wrap))


def remove_repeated_points(pts: List[Point], wrap: bool = False) -> List[Point]:
    """Drop points identical to their predecessor.

    Returns pts itself when it has no repeated points, otherwise a new list.
    With ``wrap`` a last point identical to the first is dropped as well.
    """
    if not has_repeated_points(pts, wrap):
        return pts

    result: List[Point] = []
    for p in pts:
        if result and result[-1].key() == p.key():
            continue
        result.append(p)
    if wrap and len(result) > 1 and result[-1].key() == result[0].key():
        result.pop()

    logger.debug("Removed %d repeated points", len(pts) - len(result))
    return result


def remove_none(pts: Iterable[Optional[Point]]) -> List[Point]:
    return [p for p in pts if p is not None]


def reverse(pts: List[Point]):
    """Reverse pts in place."""
    last = len(pts) - 1
    for i in range(len(pts) // 2):
        pts[i], pts[last - i] = pts[last - i], pts[i]


def scroll(pts: List[Point], first_index: int, ensure_ring: bool):
    """Rotate pts in place so the point at first_index comes first.

    With ``ensure_ring`` the last point is treated as the closing duplicate
    of the first: the rotation has period ``len - 1`` and the new last point
    is a clone of the new first point.
    """
    i = first_index
    n = len(pts)
    if i <= 0 or n < 2:
        return

    if not ensure_ring:
        pts[:] = pts[i:] + pts[:i]
        return

    last = n - 1
    result = [pts[(i + j) % last] for j in range(last)]
    result.append(result[0].clone())
    pts[:] = result
    logger.debug("Scrolled ring of %d points to start at %d", n, i)


def scroll_auto_ring(pts: List[Point], first_index: int):
    """Scroll, preserving ring closure when pts is a ring."""
    scroll(pts, first_index, is_ring(pts))


def extract(pts: Sequence[Point], start: int, end: int) -> List[Point]:
    """Points from start to end inclusive.

    Indices are clamped to the sequence; an inverted range gives an empty
    list.
    """
    n = len(pts)
    start = max(0, min(start, n))
    end = max(-1, min(end, n))
    if end < 0 or start >= n or end < start:
        return []
    return list(pts[start:end + 1])


def envelope_of(pts: Iterable[Point]) -> Envelope:
    env = Envelope()
    for p in pts:
        env.expand_to_include_point(p)
    return env


def filter_by_envelope(pts: Iterable[Point], env: Envelope) -> List[Point]:
    """Points lying in env, in their original order."""
    return [p for p in pts if env.intersects_point(p)]

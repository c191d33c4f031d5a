"""Axis-aligned bounding rectangles.

An Envelope is either null (the envelope of nothing) or a rectangle with
``min_x <= max_x`` and ``min_y <= max_y``. Null is represented solely by
``max_x < min_x``.

Note on containment: ``contains`` and friends include the boundary, exactly
like ``covers``. This differs from the strict-interior "contains" of the
OGC simple features model; a point on the edge of an envelope is contained.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .types import Point

logger = logging.getLogger(__name__)


def intersects_point_extent(p1: Point, p2: Point, q: Point) -> bool:
    """Test whether q lies in the extent defined by p1-p2."""
    return (min(p1.x, p2.x) <= q.x <= max(p1.x, p2.x) and
            min(p1.y, p2.y) <= q.y <= max(p1.y, p2.y))


def extents_intersect(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    """Test whether the extent p1-p2 intersects the extent q1-q2."""
    min_q = min(q1.x, q2.x)
    max_q = max(q1.x, q2.x)
    min_p = min(p1.x, p2.x)
    max_p = max(p1.x, p2.x)
    if min_p > max_q or max_p < min_q:
        return False

    min_q = min(q1.y, q2.y)
    max_q = max(q1.y, q2.y)
    min_p = min(p1.y, p2.y)
    max_p = max(p1.y, p2.y)
    if min_p > max_q or max_p < min_q:
        return False
    return True


@dataclass(eq=False)
class Envelope:
    """A rectangular region of the plane, possibly null.

    Envelopes are mutated in place by the expand, translate and null
    operations. They carry no locking; callers sharing one between threads
    must not mutate it concurrently.
    """
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __init__(self, x1: float = None, x2: float = None,
                 y1: float = None, y2: float = None):
        if x1 is None:
            self.set_to_null()
            return
        if x1 < x2:
            self.min_x, self.max_x = x1, x2
        else:
            self.min_x, self.max_x = x2, x1
        if y1 < y2:
            self.min_y, self.max_y = y1, y2
        else:
            self.min_y, self.max_y = y2, y1

    @classmethod
    def empty(cls) -> 'Envelope':
        return cls()

    @classmethod
    def from_points(cls, p1: Point, p2: Optional[Point] = None) -> 'Envelope':
        """Envelope of one point, or of the extent between two points."""
        if p2 is None:
            p2 = p1
        return cls(p1.x, p2.x, p1.y, p2.y)

    @classmethod
    def from_bounds(cls, bounds: Tuple[float, float, float, float]) -> 'Envelope':
        """Build from ``(min_x, min_y, max_x, max_y)`` as shapely orders them."""
        min_x, min_y, max_x, max_y = bounds
        return cls(min_x, max_x, min_y, max_y)

    @classmethod
    def copy_of(cls, other: 'Envelope') -> 'Envelope':
        return other.copy()

    def copy(self) -> 'Envelope':
        result = Envelope.__new__(Envelope)
        result.init(self)
        return result

    def init(self, other: 'Envelope'):
        """Overwrite this envelope with the bounds of other."""
        self.min_x = other.min_x
        self.max_x = other.max_x
        self.min_y = other.min_y
        self.max_y = other.max_y

    def set_to_null(self):
        self.min_x = 0.0
        self.max_x = -1.0
        self.min_y = 0.0
        self.max_y = -1.0

    def is_null(self) -> bool:
        return self.max_x < self.min_x

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def __eq__(self, other):
        if not isinstance(other, Envelope):
            return NotImplemented
        if self.is_null():
            return other.is_null()
        return (self.min_x == other.min_x and self.max_x == other.max_x and
                self.min_y == other.min_y and self.max_y == other.max_y)

    def __hash__(self):
        if self.is_null():
            return hash(None)
        return hash(self.bounds)

    def __lt__(self, other: 'Envelope') -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: 'Envelope') -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: 'Envelope') -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: 'Envelope') -> bool:
        return self.compare_to(other) >= 0

    def __str__(self):
        return f"Env[{self.min_x:g}:{self.max_x:g},{self.min_y:g}:{self.max_y:g}]"

    def width(self) -> float:
        if self.is_null():
            return 0.0
        return self.max_x - self.min_x

    def height(self) -> float:
        if self.is_null():
            return 0.0
        return self.max_y - self.min_y

    def diameter(self) -> float:
        """Length of the diagonal."""
        if self.is_null():
            return 0.0
        w = self.width()
        h = self.height()
        return math.sqrt(w * w + h * h)

    def area(self) -> float:
        return self.width() * self.height()

    def min_extent(self) -> float:
        if self.is_null():
            return 0.0
        return min(self.width(), self.height())

    def max_extent(self) -> float:
        if self.is_null():
            return 0.0
        return max(self.width(), self.height())

    def expand_to_include(self, x: float, y: float):
        """Grow to include (x, y). A null envelope becomes that point."""
        if self.is_null():
            self.min_x = self.max_x = x
            self.min_y = self.max_y = y
            return
        if x < self.min_x:
            self.min_x = x
        if x > self.max_x:
            self.max_x = x
        if y < self.min_y:
            self.min_y = y
        if y > self.max_y:
            self.max_y = y

    def expand_to_include_point(self, p: Point):
        self.expand_to_include(p.x, p.y)

    def expand_by(self, delta_x: float, delta_y: float = None):
        """Grow by a distance on each side. Negative distances shrink.

        If shrinking inverts either axis the envelope becomes null.
        """
        if delta_y is None:
            delta_y = delta_x
        if self.is_null():
            return
        self.min_x -= delta_x
        self.max_x += delta_x
        self.min_y -= delta_y
        self.max_y += delta_y
        if self.min_x > self.max_x or self.min_y > self.max_y:
            logger.debug("Envelope collapsed to null by expand_by(%g, %g)",
                         delta_x, delta_y)
            self.set_to_null()

    def expand_to_include_envelope(self, other: 'Envelope'):
        if other.is_null():
            return
        if self.is_null():
            self.init(other)
            return
        if other.min_x < self.min_x:
            self.min_x = other.min_x
        if other.max_x > self.max_x:
            self.max_x = other.max_x
        if other.min_y < self.min_y:
            self.min_y = other.min_y
        if other.max_y > self.max_y:
            self.max_y = other.max_y

    def translate(self, trans_x: float, trans_y: float):
        if self.is_null():
            return
        self.min_x += trans_x
        self.max_x += trans_x
        self.min_y += trans_y
        self.max_y += trans_y

    def centre(self) -> Optional[Point]:
        if self.is_null():
            return None
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def intersection(self, other: 'Envelope') -> 'Envelope':
        """The overlap of two envelopes; null if they do not intersect."""
        if self.is_null() or other.is_null() or not self.intersects_envelope(other):
            return Envelope()
        return Envelope(
            max(self.min_x, other.min_x),
            min(self.max_x, other.max_x),
            max(self.min_y, other.min_y),
            min(self.max_y, other.max_y),
        )

    def _separated_from(self, min_x, max_x, min_y, max_y) -> bool:
        return (min_x > self.max_x or max_x < self.min_x or
                min_y > self.max_y or max_y < self.min_y)

    def intersects_envelope(self, other: 'Envelope') -> bool:
        """Test for overlap. Touching boundaries count as intersecting."""
        if self.is_null() or other.is_null():
            return False
        return not self._separated_from(other.min_x, other.max_x,
                                        other.min_y, other.max_y)

    def intersects_extent(self, a: Point, b: Point) -> bool:
        """Test against the extent of two corner points without building an Envelope."""
        if self.is_null():
            return False
        return not self._separated_from(min(a.x, b.x), max(a.x, b.x),
                                        min(a.y, b.y), max(a.y, b.y))

    def disjoint(self, other: 'Envelope') -> bool:
        if self.is_null() or other.is_null():
            return True
        return self._separated_from(other.min_x, other.max_x,
                                    other.min_y, other.max_y)

    def intersects(self, x: float, y: float) -> bool:
        if self.is_null():
            return False
        return not (x > self.max_x or x < self.min_x or
                    y > self.max_y or y < self.min_y)

    def intersects_point(self, p: Point) -> bool:
        return self.intersects(p.x, p.y)

    def covers(self, x: float, y: float) -> bool:
        """Test whether (x, y) lies in the interior or on the boundary."""
        if self.is_null():
            return False
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def covers_point(self, p: Point) -> bool:
        return self.covers(p.x, p.y)

    def covers_envelope(self, other: 'Envelope') -> bool:
        """Test whether other lies wholly inside, boundary included."""
        if self.is_null() or other.is_null():
            return False
        return (other.min_x >= self.min_x and other.max_x <= self.max_x and
                other.min_y >= self.min_y and other.max_y <= self.max_y)

    def contains(self, x: float, y: float) -> bool:
        """Same as covers: the boundary is included."""
        return self.covers(x, y)

    def contains_point(self, p: Point) -> bool:
        """Same as covers_point: the boundary is included."""
        return self.covers(p.x, p.y)

    def contains_envelope(self, other: 'Envelope') -> bool:
        """Same as covers_envelope: the boundary is included."""
        return self.covers_envelope(other)

    def distance(self, other: 'Envelope') -> float:
        """Euclidean distance between the closest points; 0 if they intersect."""
        if self.intersects_envelope(other):
            return 0.0

        dx = 0.0
        if self.max_x < other.min_x:
            dx = other.min_x - self.max_x
        elif self.min_x > other.max_x:
            dx = self.min_x - other.max_x

        dy = 0.0
        if self.max_y < other.min_y:
            dy = other.min_y - self.max_y
        elif self.min_y > other.max_y:
            dy = self.min_y - other.max_y

        if dx == 0.0:
            return dy
        if dy == 0.0:
            return dx
        return math.sqrt(dx * dx + dy * dy)

    def compare_to(self, other: 'Envelope') -> int:
        """Null sorts first; otherwise compare (min_x, min_y, max_x, max_y)."""
        if self.is_null():
            return 0 if other.is_null() else -1
        if other.is_null():
            return 1
        for mine, theirs in ((self.min_x, other.min_x), (self.min_y, other.min_y),
                             (self.max_x, other.max_x), (self.max_y, other.max_y)):
            if mine < theirs:
                return -1
            if mine > theirs:
                return 1
        return 0

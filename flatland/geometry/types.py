"""Point value type for flatland geometry.

Points are 2.5-dimensional: x and y define planar identity, z is auxiliary
data carried alongside. A missing z is stored as ``NULL_ORDINATE`` (NaN).
"""

import math
import struct
from dataclasses import dataclass
from typing import Optional, Tuple

# Standard ordinate indices
X = 0
Y = 1
Z = 2

# Value of an ordinate that is not present, e.g. z on a 2D point
NULL_ORDINATE = float('nan')


class InvalidOrdinateIndexError(IndexError):
    """Raised when an ordinate index is not X, Y or Z."""

    def __init__(self, index: int):
        super().__init__(f"Invalid ordinate index: {index}")
        self.index = index


def equals_with_tolerance(a: float, b: float, tolerance: float) -> bool:
    return abs(a - b) <= tolerance


def _bits(value: float) -> int:
    # all NaNs share one key so that missing z values compare equal
    if math.isnan(value):
        return 0x7FF8000000000000
    return struct.unpack('<q', struct.pack('<d', value))[0]


@dataclass(eq=False)
class Point:
    """A planar point with an optional z ordinate.

    Equality (``==``) and hashing are structural: two points are equal when
    their ordinates have the same bit patterns and the same dimensionality,
    with a missing z equal to a missing z. Use ``equals_2d`` for planar
    identity. Points are mutable through ``set_ordinate`` and
    ``set_coordinate``; do not mutate a point while it is used as a dict key.
    """
    x: float
    y: float
    z: float
    dimensions: int

    def __init__(self, x: float, y: float, z: float = NULL_ORDINATE):
        self.x = x
        self.y = y
        self.z = z
        self.dimensions = 2 if math.isnan(z) else 3

    @classmethod
    def empty(cls) -> 'Point':
        """Point at (0, 0) with no z."""
        return cls(0.0, 0.0)

    def __iter__(self):
        yield self.x
        yield self.y

    @property
    def has_z(self) -> bool:
        return not math.isnan(self.z)

    def z_or_none(self) -> Optional[float]:
        return None if math.isnan(self.z) else self.z

    def key(self) -> Tuple[int, int, int, int]:
        """Hashable key built from the exact bit patterns of the ordinates."""
        return (_bits(self.x), _bits(self.y), _bits(self.z), self.dimensions)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __lt__(self, other: 'Point') -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: 'Point') -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: 'Point') -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: 'Point') -> bool:
        return self.compare_to(other) >= 0

    def __str__(self):
        return f"({self.x:g}, {self.y:g}, {self.z:g})"

    def set_coordinate(self, other: 'Point'):
        """Copy the ordinates of other into this point."""
        self.x = other.x
        self.y = other.y
        self.z = other.z

    def get_ordinate(self, index: int) -> float:
        if index == X:
            return self.x
        if index == Y:
            return self.y
        if index == Z:
            return self.z
        raise InvalidOrdinateIndexError(index)

    def set_ordinate(self, index: int, value: float):
        if index == X:
            self.x = value
        elif index == Y:
            self.y = value
        elif index == Z:
            self.z = value
        else:
            raise InvalidOrdinateIndexError(index)

    def equals_2d(self, other: 'Point') -> bool:
        return self.x == other.x and self.y == other.y

    def equals_2d_with_tolerance(self, other: 'Point', tolerance: float) -> bool:
        return (equals_with_tolerance(self.x, other.x, tolerance) and
                equals_with_tolerance(self.y, other.y, tolerance))

    def equals_3d(self, other: 'Point') -> bool:
        """Test x, y and z for equality; two missing z values are equal."""
        return (self.x == other.x and self.y == other.y and
                (self.z == other.z or (math.isnan(self.z) and math.isnan(other.z))))

    def equal_in_z(self, other: 'Point', tolerance: float) -> bool:
        return equals_with_tolerance(self.z, other.z, tolerance)

    def equals(self, other: 'Point') -> bool:
        """Planar equality; z is ignored."""
        return self.equals_2d(other)

    def compare_to(self, other: 'Point') -> int:
        """Order by x, then y. Ignores z.

        NaN ordinates are not handled; callers must not pass them.
        """
        if self.x < other.x:
            return -1
        if self.x > other.x:
            return 1
        if self.y < other.y:
            return -1
        if self.y > other.y:
            return 1
        return 0

    def distance(self, other: 'Point') -> float:
        """2D Euclidean distance, ignoring z."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def distance_3d(self, other: 'Point') -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def measure(self) -> int:
        # no M ordinate support
        return 0

    def clone(self) -> 'Point':
        result = Point(self.x, self.y, self.z)
        result.dimensions = self.dimensions
        return result

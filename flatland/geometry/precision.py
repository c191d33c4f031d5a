"""Precision models: rounding policies that snap ordinates onto a grid.

Three kinds of model are supported:

- FLOATING: full double precision, no rounding. The default.
- FLOATING_SINGLE: values are narrowed to IEEE single precision.
- FIXED: values are rounded to a grid of spacing ``1 / scale``.

For a FIXED model, a scale of 1000 keeps three decimal places, and a scale
of 0.001 rounds to the nearest thousand.
"""

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .types import Point


class ModelType(str, Enum):
    FIXED = "FIXED"
    FLOATING = "FLOATING"
    FLOATING_SINGLE = "FLOATING_SINGLE"


FIXED = ModelType.FIXED
FLOATING = ModelType.FLOATING
FLOATING_SINGLE = ModelType.FLOATING_SINGLE


def round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero.

    The builtin ``round`` rounds halves to even, which is not what a
    grid snap wants.
    """
    if math.isinf(value) or math.isnan(value):
        return value
    a = abs(value)
    f = math.floor(a)
    # a - f is exact, unlike a + 0.5
    if a - f >= 0.5:
        f += 1
    return math.copysign(float(f), value)


@dataclass(frozen=True)
class PrecisionModel:
    """Grid-snapping precision model.

    ``scale`` is only meaningful for FIXED models and is always stored as its
    absolute value.
    """
    model_type: ModelType
    scale: float

    def __init__(self, model_type: ModelType = FLOATING, scale: float = None):
        model_type = ModelType(model_type)
        if scale is None:
            scale = 1.0 if model_type == FIXED else 0.0
        if model_type == FIXED and scale == 0:
            raise ValueError("A fixed precision model needs a non-zero scale")
        object.__setattr__(self, 'model_type', model_type)
        object.__setattr__(self, 'scale', abs(scale))

    @classmethod
    def fixed(cls, scale: float) -> 'PrecisionModel':
        return cls(FIXED, scale)

    def __str__(self):
        if self.model_type == FLOATING:
            return "Floating"
        if self.model_type == FLOATING_SINGLE:
            return "Floating-Single"
        return f"Fixed (Scale={self.scale:g})"

    def is_floating(self) -> bool:
        return self.model_type in (FLOATING, FLOATING_SINGLE)

    def maximum_significant_digits(self) -> int:
        """Number of significant digits this model provides.

        Intended for code that prints decimal representations of precise
        values. For FIXED models this is a rough approximation: when the
        scale is a power of ten the result is one more than strictly needed.
        """
        if self.model_type == FLOATING_SINGLE:
            return 6
        if self.model_type == FIXED:
            return 1 + int(math.ceil(math.log10(self.scale)))
        return 16

    def make_precise(self, value: float) -> float:
        """Round a value to this model's grid. NaN is returned unchanged."""
        if math.isnan(value):
            return value
        if self.model_type == FLOATING_SINGLE:
            return float(np.float32(value))
        if self.model_type == FIXED:
            return round_half_away(value * self.scale) / self.scale
        return value

    def make_precise_point(self, point: Point):
        """Round x and y of point in place. z is never rounded."""
        if self.model_type == FLOATING:
            return
        point.x = self.make_precise(point.x)
        point.y = self.make_precise(point.y)

    def compare_to(self, other: 'PrecisionModel') -> int:
        """Order by significant digits.

        Models of different kinds may compare equal.
        """
        digits = self.maximum_significant_digits()
        other_digits = other.maximum_significant_digits()
        if digits > other_digits:
            return 1
        if digits < other_digits:
            return -1
        return 0


def most_precise(pm1: PrecisionModel, pm2: PrecisionModel) -> PrecisionModel:
    """Return the model allowing more significant digits; ties favour pm1."""
    if pm1.compare_to(pm2) >= 0:
        return pm1
    return pm2

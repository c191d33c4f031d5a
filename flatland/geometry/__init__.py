"""Geometry primitives for flatland."""

from .types import (
    X,
    Y,
    Z,
    NULL_ORDINATE,
    InvalidOrdinateIndexError,
    Point,
    equals_with_tolerance,
)
from .precision import (
    FIXED,
    FLOATING,
    FLOATING_SINGLE,
    ModelType,
    PrecisionModel,
    most_precise,
)
from .envelope import Envelope, extents_intersect, intersects_point_extent
from .sequence import (
    as_points,
    compare,
    copy_deep,
    dimension,
    envelope_of,
    equal_sequences,
    extract,
    filter_by_envelope,
    has_repeated_points,
    increasing_direction,
    index_of,
    is_equal_reversed,
    is_ring,
    measures,
    point_not_in,
    remove_none,
    remove_repeated_points,
    reverse,
    scroll,
    scroll_auto_ring,
)

__all__ = [
    "X",
    "Y",
    "Z",
    "NULL_ORDINATE",
    "InvalidOrdinateIndexError",
    "Point",
    "equals_with_tolerance",
    "FIXED",
    "FLOATING",
    "FLOATING_SINGLE",
    "ModelType",
    "PrecisionModel",
    "most_precise",
    "Envelope",
    "extents_intersect",
    "intersects_point_extent",
    "as_points",
    "compare",
    "copy_deep",
    "dimension",
    "envelope_of",
    "equal_sequences",
    "extract",
    "filter_by_envelope",
    "has_repeated_points",
    "increasing_direction",
    "index_of",
    "is_equal_reversed",
    "is_ring",
    "measures",
    "point_not_in",
    "remove_none",
    "remove_repeated_points",
    "reverse",
    "scroll",
    "scroll_auto_ring",
]

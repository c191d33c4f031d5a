"""flatland: planar geometry kernel of points, envelopes and precision models.

``flatland.interop`` converts points and envelopes to and from numpy arrays
and shapely geometries; its functions are also available from here.
"""

__version__ = "0.1.0"

from .geometry import Point, Envelope, PrecisionModel
from .interop import (
    envelope_of_geometry,
    envelope_to_box,
    from_array,
    points_of_geometry,
    to_array,
)

__all__ = [
    "Point",
    "Envelope",
    "PrecisionModel",
    "envelope_of_geometry",
    "envelope_to_box",
    "from_array",
    "points_of_geometry",
    "to_array",
]

"""Adapters between flatland types and numpy / shapely.

Usage:
    arr = to_array(points)            # (n, 2) or (n, 3) float array
    poly = envelope_to_box(env)       # shapely Polygon
    env = envelope_of_geometry(geom)  # Envelope from shapely bounds
"""

from typing import List, Sequence

import numpy as np
from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry

from .geometry import Envelope, Point


def to_array(pts: Sequence[Point]) -> np.ndarray:
    """Convert points to an array of shape (n, 2), or (n, 3) if any point has z.

    Missing z values are NaN in the third column.
    """
    if any(p.has_z for p in pts):
        return np.array([[p.x, p.y, p.z] for p in pts], dtype=float).reshape(-1, 3)
    return np.array([[p.x, p.y] for p in pts], dtype=float).reshape(-1, 2)


def from_array(arr) -> List[Point]:
    """Convert an (n, 2) or (n, 3) array to points. NaN z means no z."""
    arr = np.asarray(arr, dtype=float)
    if arr.ndim != 2 or arr.shape[1] not in (2, 3):
        raise ValueError(f"Expected an array of shape (n, 2) or (n, 3), got {arr.shape}")
    return [Point(*(float(v) for v in row)) for row in arr]


def envelope_to_box(env: Envelope) -> Polygon:
    """Shapely polygon covering env; empty for a null envelope."""
    if env.is_null():
        return Polygon()
    return box(env.min_x, env.min_y, env.max_x, env.max_y)


def envelope_of_geometry(geom: BaseGeometry) -> Envelope:
    if geom.is_empty:
        return Envelope()
    return Envelope.from_bounds(geom.bounds)


def points_of_geometry(geom: BaseGeometry) -> List[Point]:
    """Points of a shapely Point, LineString, LinearRing or Polygon exterior."""
    if geom.is_empty:
        return []
    if geom.geom_type == 'Polygon':
        coords = geom.exterior.coords
    elif geom.geom_type in ('Point', 'LineString', 'LinearRing'):
        coords = geom.coords
    else:
        raise ValueError(f"Unsupported geometry type: {geom.geom_type}")
    return [Point(*c) for c in coords]

"""Tests for the numpy and shapely adapters."""

import math

import numpy as np
import pytest
from shapely.geometry import LineString, MultiPoint, Polygon
from shapely.geometry import Point as ShapelyPoint

from flatland.geometry import Envelope, Point, as_points, envelope_of
from flatland.interop import (
    envelope_of_geometry,
    envelope_to_box,
    from_array,
    points_of_geometry,
    to_array,
)


def test_to_array_2d():
    """"""
    arr = to_array(as_points([(1, 2), (3, 4)]))
    assert arr.shape == (2, 2)
    assert arr.tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_to_array_with_z():
    """"""
    arr = to_array([Point(1, 2, 3), Point(4, 5)])
    assert arr.shape == (2, 3)
    assert arr[0, 2] == 3
    assert math.isnan(arr[1, 2])


def test_to_array_empty():
    """"""
    assert to_array([]).shape == (0, 2)


def test_from_array():
    """"""
    pts = from_array(np.array([[1.0, 2.0, np.nan], [3.0, 4.0, 5.0]]))
    assert pts[0] == Point(1.0, 2.0)
    assert pts[1] == Point(3.0, 4.0, 5.0)


def test_from_array_rejects_bad_shape():
    """"""
    with pytest.raises(ValueError):
        from_array(np.zeros((3, 4)))
    with pytest.raises(ValueError):
        from_array([1.0, 2.0])


def test_envelope_to_box():
    """"""
    poly = envelope_to_box(Envelope(0, 4, 0, 3))
    assert poly.area == 12
    assert poly.bounds == (0, 0, 4, 3)
    assert envelope_to_box(Envelope()).is_empty


def test_envelope_matches_shapely_bounds():
    """"""
    pairs = [(3, -1), (0, 7), (-2, 2), (5, 5)]
    assert envelope_of(as_points(pairs)).bounds == MultiPoint(pairs).bounds


def test_envelope_of_geometry():
    """"""
    assert envelope_of_geometry(LineString([(0, 0), (2, 5)])) == Envelope(0, 2, 0, 5)
    assert envelope_of_geometry(Polygon()).is_null()


def test_intersection_agrees_with_shapely():
    """"""
    a = Envelope(0, 10, 0, 10)
    b = Envelope(5, 15, -5, 5)
    overlap = envelope_to_box(a).intersection(envelope_to_box(b))
    assert envelope_of_geometry(overlap) == a.intersection(b)


def test_points_of_geometry():
    """"""
    square = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
    pts = points_of_geometry(square)
    assert len(pts) == 5
    assert pts[0] == pts[-1]
    assert points_of_geometry(ShapelyPoint(1, 2, 3)) == [Point(1, 2, 3)]
    assert points_of_geometry(Polygon()) == []


def test_points_of_geometry_rejects_collections():
    """"""
    with pytest.raises(ValueError):
        points_of_geometry(MultiPoint([(0, 0), (1, 1)]))


def test_adapters_exported_from_package():
    """Test that the adapters are reachable from the top-level package."""
    import flatland

    assert flatland.to_array is to_array
    assert flatland.envelope_of_geometry is envelope_of_geometry
    assert set(flatland.__all__) >= {"to_array", "from_array", "envelope_to_box",
                                     "envelope_of_geometry", "points_of_geometry"}

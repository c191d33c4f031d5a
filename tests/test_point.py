"""Tests for the Point value type."""

import math

import pytest
from flatland.geometry import (
    X, Y, Z, NULL_ORDINATE, InvalidOrdinateIndexError, Point,
)


def test_xy_constructor_has_no_z():
    """"""
    p = Point(1, 2)
    assert p.dimensions == 2
    assert math.isnan(p.z)
    assert not p.has_z
    assert p.z_or_none() is None


def test_xyz_constructor():
    """"""
    p = Point(1, 2, 3)
    assert p.dimensions == 3
    assert p.has_z
    assert p.z_or_none() == 3


def test_explicit_null_ordinate_is_2d():
    """"""
    assert Point(1, 2, NULL_ORDINATE).dimensions == 2


def test_empty():
    """"""
    p = Point.empty()
    assert (p.x, p.y) == (0, 0)
    assert math.isnan(p.z)
    assert p.dimensions == 2


def test_get_ordinate():
    """"""
    p = Point(1, 2, 3)
    assert p.get_ordinate(X) == 1
    assert p.get_ordinate(Y) == 2
    assert p.get_ordinate(Z) == 3


@pytest.mark.parametrize("index", [-1, 3, 42])
def test_get_ordinate_invalid_index(index):
    """"""
    with pytest.raises(InvalidOrdinateIndexError, match=f"Invalid ordinate index: {index}"):
        Point(1, 2).get_ordinate(index)


def test_set_ordinate():
    """"""
    p = Point(1, 2, 3)
    p.set_ordinate(X, 10)
    p.set_ordinate(Y, 20)
    p.set_ordinate(Z, 30)
    assert (p.x, p.y, p.z) == (10, 20, 30)


def test_failed_set_ordinate_leaves_point_unchanged():
    """"""
    p = Point(1, 2, 3)
    with pytest.raises(IndexError):
        p.set_ordinate(5, 99)
    assert (p.x, p.y, p.z) == (1, 2, 3)


def test_set_coordinate():
    """"""
    p = Point(1, 2)
    p.set_coordinate(Point(4, 5, 6))
    assert (p.x, p.y, p.z) == (4, 5, 6)


def test_equals_2d_ignores_z():
    """"""
    assert Point(1, 2, 3).equals_2d(Point(1, 2, 4))
    assert Point(1, 2, 3).equals(Point(1, 2))
    assert not Point(1, 2).equals_2d(Point(1, 3))


def test_equals_2d_with_tolerance():
    """"""
    assert Point(1, 2).equals_2d_with_tolerance(Point(1.05, 1.95), 0.1)
    assert not Point(1, 2).equals_2d_with_tolerance(Point(1.2, 2), 0.1)


def test_equals_3d_treats_missing_z_as_equal():
    """"""
    assert Point(1, 2).equals_3d(Point(1, 2))
    assert Point(1, 2, 3).equals_3d(Point(1, 2, 3))
    assert not Point(1, 2, 3).equals_3d(Point(1, 2))
    assert not Point(1, 2, 3).equals_3d(Point(1, 2, 4))


def test_equal_in_z():
    """"""
    assert Point(0, 0, 1.0).equal_in_z(Point(5, 5, 1.05), 0.1)
    assert not Point(0, 0, 1.0).equal_in_z(Point(0, 0, 2.0), 0.1)


def test_compare_to():
    """"""
    assert Point(1, 2).compare_to(Point(2, 0)) == -1
    assert Point(2, 0).compare_to(Point(1, 2)) == 1
    assert Point(1, 2).compare_to(Point(1, 3)) == -1
    assert Point(1, 3).compare_to(Point(1, 2)) == 1
    assert Point(1, 2, 7).compare_to(Point(1, 2, 8)) == 0


def test_sorting_follows_compare_to():
    """"""
    pts = [Point(2, 1), Point(1, 5), Point(1, 2)]
    assert [tuple(p) for p in sorted(pts)] == [(1, 2), (1, 5), (2, 1)]


def test_distance():
    """"""
    assert Point(0, 0, 0).distance(Point(3, 4, 100)) == 5.0


def test_distance_3d():
    """"""
    assert Point(0, 0, 0).distance_3d(Point(2, 3, 6)) == 7.0


def test_clone_is_independent():
    """"""
    p = Point(1, 2, 3)
    c = p.clone()
    assert c == p
    c.set_ordinate(X, 9)
    assert p.x == 1


def test_structural_equality_and_hash():
    """"""
    assert Point(1, 2) == Point(1, 2)
    assert hash(Point(1, 2)) == hash(Point(1, 2))
    assert Point(1, 2) != Point(1, 2, 0)
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


def test_iteration_yields_xy():
    """"""
    x, y = Point(3, 4, 5)
    assert (x, y) == (3, 4)


def test_str():
    """"""
    assert str(Point(1, 2.5)) == "(1, 2.5, nan)"
    assert str(Point(1, 2, 3)) == "(1, 2, 3)"


def test_measure_is_zero():
    """"""
    assert Point(1, 2).measure() == 0


def test_ordering_operators():
    """Test that every comparison operator follows compare_to."""
    a, b = Point(1, 1), Point(2, 2)
    assert a < b and a <= b
    assert b > a and b >= a
    assert not a > b and not a >= b
    assert a <= Point(1, 1) and a >= Point(1, 1)


def test_ordering_ignores_z():
    """Test that points differing only in z are neither above nor below each other."""
    low, high = Point(1, 1, 5), Point(1, 1, 7)
    assert low <= high and low >= high
    assert not low < high and not low > high
    assert low != high

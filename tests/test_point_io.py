"""Tests for point text parsing and formatting."""

import pytest
from flatland.geometry import Point
from flatland.point_io import format_points, parse_points, read_text, write_text


def test_parse_points():
    text = """
    # a comment
    1 2
    3,4
    5, 6, 7   # trailing comment
    """
    assert parse_points(text) == [Point(1.0, 2.0), Point(3.0, 4.0), Point(5.0, 6.0, 7.0)]


def test_parse_points_empty():
    """"""
    assert parse_points("") == []


def test_parse_points_wrong_count():
    """"""
    with pytest.raises(ValueError, match="line 2"):
        parse_points("1 2\n1 2 3 4\n")


def test_parse_points_not_a_number():
    """"""
    with pytest.raises(ValueError, match="line 1"):
        parse_points("1 two\n")


def test_format_points():
    """"""
    assert format_points([Point(1.0, 2.5), Point(3.0, 4.0, 5.0)]) == "1.0 2.5\n3.0 4.0 5.0\n"
    assert format_points([]) == ""
    assert format_points([Point(1.0, 2.0)], precision=2) == "1.00 2.00\n"


def test_read_write_file(tmp_path):
    """"""
    path = tmp_path / "pts.txt"
    write_text("1 2\n", str(path))
    assert read_text(str(path)) == "1 2\n"

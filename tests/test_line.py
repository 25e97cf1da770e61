import dataclasses

import pytest

from models.errors import InvalidLineError
from models.line import Line
from models.point import Point


SAMPLE_LINES = [
    Line(1, 0, 5),
    Line(0, 1, -3),
    Line(1, -1, 0),
    Line(2, 4, 1),
    Line(-3, 7, 12.5),
    Line(0.5, 0.25, -2),
]


def test_coefficients_round_trip_exactly():
    line = Line(1.5, -2.25, 3.125)

    assert line.a == 1.5
    assert line.b == -2.25
    assert line.c == 3.125


def test_zero_a_and_b_is_rejected():
    with pytest.raises(InvalidLineError):
        Line(0, 0, 5)

    with pytest.raises(ValueError):
        Line(1e-12, -1e-12, 0)


def test_line_is_immutable():
    line = Line(1, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        line.a = 4


def test_equal_coefficients_compare_equal():
    assert Line(1, 2, 3) == Line(1, 2, 3)
    assert Line(1, 2, 3) != Line(1, 2, 4)


def test_slope():
    assert Line(2, 4, 1).slope() == -0.5
    assert Line(0, 1, 7).slope() == 0
    assert Line(1, 0, 5).slope() is None
    assert Line(1, 1e-12, 5).slope() is None


@pytest.mark.parametrize("line", SAMPLE_LINES)
def test_line_is_parallel_to_itself_and_not_perpendicular(line):
    assert line.isParallel(line)
    assert not line.isPerpendicular(line)


@pytest.mark.parametrize("l1", SAMPLE_LINES)
@pytest.mark.parametrize("l2", SAMPLE_LINES)
def test_relationships_are_symmetric(l1, l2):
    assert l1.isParallel(l2) == l2.isParallel(l1)
    assert l1.isPerpendicular(l2) == l2.isPerpendicular(l1)


def test_two_vertical_lines_are_parallel_without_intersection():
    l1 = Line(1, 0, 5)
    l2 = Line(1, 0, 10)

    assert l1.isParallel(l2)
    assert not l1.isPerpendicular(l2)
    assert l1.intersectionPoint(l2) is None


def test_diagonals_through_origin_are_perpendicular():
    l1 = Line(1, -1, 0)
    l2 = Line(1, 1, 0)

    assert l1.isPerpendicular(l2)
    assert l1.intersectionPoint(l2) == Point(0, 0)


def test_vertical_line_is_perpendicular_only_to_horizontal():
    vertical = Line(1, 0, 2)

    assert vertical.isPerpendicular(Line(0, 3, 1))
    assert Line(0, 3, 1).isPerpendicular(vertical)
    assert not vertical.isPerpendicular(Line(1, -1, 0))
    assert not vertical.isPerpendicular(Line(2, 0, 9))


def test_vertical_and_sloped_lines_are_not_parallel():
    assert not Line(1, 0, 2).isParallel(Line(1, -1, 0))


def test_scaled_coefficients_are_parallel():
    assert Line(1, 2, 3).isParallel(Line(2, 4, 100))


@pytest.mark.parametrize("l1", SAMPLE_LINES)
@pytest.mark.parametrize("l2", SAMPLE_LINES)
def test_intersection_lies_on_both_lines(l1, l2):
    if l1.isParallel(l2):
        assert l1.intersectionPoint(l2) is None
        return

    p = l1.intersectionPoint(l2)
    assert l1.containsPoint(p)
    assert l2.containsPoint(p)


def test_intersection_coordinates():
    # x = 4 and y = 0 cross at (4, 0)
    assert Line(1, 0, 4).intersectionPoint(Line(0, 1, 0)) == Point(4, 0)
    # x + y = 2 and x - y = 2 cross at (2, 0)
    assert Line(1, 1, 2).intersectionPoint(Line(1, -1, 2)) == Point(2, 0)


def test_closest_point_to_origin():
    origin = Point(0, 0)

    assert Line(0, 1, 3).closestPointTo(origin) == Point(0, 3)
    assert Line(1, 0, -2).closestPointTo(origin) == Point(-2, 0)
    assert Line(1, 1, 2).closestPointTo(origin) == Point(1, 1)


def test_contains_point():
    line = Line(2, 3, 6)

    assert line.containsPoint(Point(3, 0))
    assert line.containsPoint(Point(0, 2))
    assert not line.containsPoint(Point(1, 1))


def test_str_uses_standard_form():
    assert str(Line(1, -1, 0)) == "1x + -1y = 0"
    assert str(Line(0.5, 2, 7.25)) == "0.5x + 2y = 7.25"


def test_point_equality_is_within_epsilon():
    assert Point(1, 2) == Point(1 + 1e-12, 2 - 1e-12)
    assert Point(1, 2) != Point(1.1, 2)
    assert Point(1, 2).as_tuple() == (1, 2)


def test_point_is_not_hashable():
    with pytest.raises(TypeError):
        hash(Point(0, 0))


def test_coefficients_are_stored_as_floats():
    line = Line(1, 2, 3)

    assert all(isinstance(v, float) for v in (line.a, line.b, line.c))
    assert line.slope() == -0.5


def test_coefficient_too_large_for_float_is_rejected():
    with pytest.raises(InvalidLineError):
        Line(10 ** 400, 1, 0)

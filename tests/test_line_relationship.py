from classifiers.line_relationship import (
    Relationship,
    analyze_line_set,
    classify_relationship,
)
from models.line import Line
from models.point import Point


def test_parallel_lines_have_no_intersection():
    result = classify_relationship(Line(1, 0, 5), Line(1, 0, 10))

    assert result.label is Relationship.PARALLEL
    assert result.intersection is None


def test_coincident_lines_are_reported_parallel():
    result = classify_relationship(Line(1, 2, 3), Line(2, 4, 6))

    assert result.label is Relationship.PARALLEL
    assert result.intersection is None


def test_perpendicular_lines_carry_intersection():
    result = classify_relationship(Line(1, -1, 0), Line(1, 1, 0))

    assert result.label is Relationship.PERPENDICULAR
    assert result.intersection == Point(0, 0)


def test_vertical_and_horizontal_are_perpendicular():
    result = classify_relationship(Line(1, 0, 3), Line(0, 2, -4))

    assert result.label is Relationship.PERPENDICULAR
    assert result.intersection == Point(3, -2)


def test_other_crossing_lines_are_intersecting():
    result = classify_relationship(Line(1, -1, 0), Line(0, 1, 2))

    assert result.label is Relationship.INTERSECTING
    assert result.intersection == Point(2, 2)


def test_relationship_label_is_symmetric():
    l1, l2 = Line(3, 1, 4), Line(-1, 3, 2)
    assert classify_relationship(l1, l2).label == classify_relationship(l2, l1).label


def test_analyze_line_set_square_frame():
    report = analyze_line_set([Line(0, 1, 0), Line(1, 0, 4), Line(0, 1, 4), Line(1, 0, 0)])

    assert report.slopes[0] == 0
    assert report.slopes[1] is None
    assert report.slopes[2] == 0
    assert report.slopes[3] is None
    assert report.parallel_pairs == ((0, 2), (1, 3))
    assert report.perpendicular_pairs == ((0, 1), (0, 3), (1, 2), (2, 3))


def test_analyze_line_set_without_relations():
    report = analyze_line_set([Line(1, 1, 2), Line(1, -2, 3), Line(3, 1, 9)])

    assert report.parallel_pairs == ()
    assert report.perpendicular_pairs == ()

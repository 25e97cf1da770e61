from classifiers.line_relationship import analyze_line_set, classify_relationship
from classifiers.quadrilateral_classifier import classify_quadrilateral
from models.line import Line
from visualization.reports import (
    format_line_set_report,
    format_line_sets,
    format_quadrilateral,
    format_relationship,
)


SQUARE = [Line(0, 1, 0), Line(1, 0, 4), Line(0, 1, 4), Line(1, 0, 0)]


def test_parallel_report_has_no_point():
    text = format_relationship(classify_relationship(Line(1, 0, 5), Line(1, 0, 10)))

    assert text == "The lines are parallel."


def test_perpendicular_report_shows_point_with_three_decimals():
    text = format_relationship(classify_relationship(Line(1, -1, 0), Line(1, 1, 0)))

    assert text.startswith("The lines are perpendicular.")
    assert "(0.000, 0.000)" in text


def test_intersecting_report():
    text = format_relationship(classify_relationship(Line(1, -1, 0), Line(0, 1, 2)))

    assert "neither parallel nor perpendicular" in text
    assert "(2.000, 2.000)" in text


def test_line_set_report():
    text = format_line_set_report(analyze_line_set(SQUARE))

    assert "Line 1: Slope = " in text
    assert "Line 2: Vertical line" in text
    assert "Lines 1 and 3 are parallel" in text
    assert "Lines 2 and 4 are parallel" in text
    assert "Lines 1 and 2 are perpendicular" in text


def test_line_set_report_without_pairs():
    text = format_line_set_report(analyze_line_set([Line(1, 1, 2), Line(1, -2, 3)]))

    assert "No parallel lines found." in text
    assert "No perpendicular lines found." in text


def test_quadrilateral_report_lists_lengths_and_verdict():
    text = format_quadrilateral(classify_quadrilateral(SQUARE))

    assert "The side lengths are: 4.000 4.000 4.000 4.000" in text
    assert "square!" in text


def test_undetermined_report_has_no_lengths():
    lines = [Line(0, 1, 0), Line(0, 1, 1), Line(0, 1, 2), Line(1, 0, 0)]
    text = format_quadrilateral(classify_quadrilateral(lines))

    assert "side lengths" not in text
    assert "Could not determine the shape" in text


def test_line_sets_listing():
    text = format_line_sets([SQUARE, SQUARE])

    assert "Line Set 1" in text
    assert "Line Set 2" in text
    assert "0x + 1y = 0" in text
    assert "1x + 0y = 4" in text


def test_negative_zero_coordinates_print_without_sign():
    text = format_relationship(classify_relationship(Line(0, 1, 0), Line(1, 0, 4)))

    assert "(4.000, 0.000)" in text

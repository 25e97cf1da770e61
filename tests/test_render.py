import numpy as np
import pytest

import visualization.render as render_module
from classifiers.line_relationship import classify_relationship
from config import get_active_params
from models.errors import InvalidInputError
from models.line import Line
from models.point import Point
from visualization.canvas import Canvas
from visualization.draw_intersections import draw_intersections, intersection_label
from visualization.draw_lines import draw_lines, draw_polygon
from visualization.render import render_quadrilateral, render_relationship


def lines_from(*triples):
    return [Line(*t) for t in triples]


def test_intersection_label_rounds_to_integers():
    assert intersection_label(Point(3.6, -2.5)) == "(4,-3)"
    assert intersection_label(Point(0, 0)) == "(0,0)"


def test_draw_lines_uses_one_glyph_per_line():
    canvas = Canvas()
    draw_lines(canvas, lines_from((0, 1, 5), (1, 0, 5)))

    assert "1" in canvas.grid
    assert "2" in canvas.grid


def test_draw_polygon_closes_the_outline():
    canvas = Canvas()
    square = [Point(-5, 5), Point(5, 5), Point(5, -5), Point(-5, -5)]
    draw_polygon(canvas, square)

    # the closing edge (-5,-5) -> (-5,5) is drawn too
    col, row = canvas.toScreen(-5, 0)
    assert canvas.grid[row, col] == "#"


def test_draw_intersections_counts_visible_points():
    canvas = Canvas()
    drawn = draw_intersections(canvas, [Point(1, 1), Point(50, 50)])

    assert drawn == 1
    assert (canvas.grid == "X").sum() == 1


def test_render_perpendicular_lines_marks_origin():
    canvas = render_relationship(Line(1, -1, 0), Line(1, 1, 0))

    assert canvas.grid.shape == (30, 70)
    assert canvas.viewport == (-10.0, 10.0, -10.0, 10.0)
    assert canvas.rows()[15][35:41] == "X(0,0)"
    assert "1" in canvas.grid
    assert "2" in canvas.grid


def test_render_parallel_lines_has_no_marker():
    canvas = render_relationship(Line(1, 0, 5), Line(1, 0, 10))

    assert "X" not in canvas.grid
    assert "1" in canvas.grid
    assert "2" in canvas.grid


def test_render_frames_distant_intersection():
    l1, l2 = Line(1, 0, 40), Line(0, 1, 30)
    canvas = render_relationship(l1, l2)

    x_min, x_max, y_min, y_max = canvas.viewport
    assert x_min < 0 < 40 < x_max
    assert y_min < 0 < 30 < y_max
    assert (canvas.grid == "X").sum() == 1


def test_render_square():
    lines = lines_from((0, 1, 0), (1, 0, 4), (0, 1, 4), (1, 0, 0))
    canvas = render_quadrilateral(lines)

    assert canvas.viewport == pytest.approx((-0.6, 4.6, -0.6, 4.6))
    assert (canvas.grid == "X").sum() == 4
    assert "#" in canvas.grid
    assert "(4,4)" in "\n".join(canvas.rows())


def test_render_keeps_shape_off_the_border():
    lines = lines_from((0, 1, 0), (1, 0, 6), (0, 1, 3), (1, 0, 0))
    canvas = render_quadrilateral(lines)

    rows, cols = np.nonzero(canvas.grid == "X")
    assert rows.min() > 0 and rows.max() < canvas.height - 1
    assert cols.min() > 0 and cols.max() < canvas.width - 1


def test_render_undetermined_shape_marks_crossings_only():
    lines = lines_from((0, 1, 0), (0, 1, 1), (0, 1, 2), (1, 0, 0))
    canvas = render_quadrilateral(lines)

    assert "#" not in canvas.grid
    assert (canvas.grid == "X").sum() == 3


def test_render_quadrilateral_rejects_wrong_count():
    with pytest.raises(InvalidInputError):
        render_quadrilateral(lines_from((0, 1, 0), (1, 0, 4), (0, 1, 4)))


def test_render_at_alternate_resolution():
    params = get_active_params(CANVAS_WIDTH=40, CANVAS_HEIGHT=20)
    canvas = render_relationship(Line(1, -1, 0), Line(1, 1, 0), params=params)

    assert canvas.grid.shape == (20, 40)
    assert (canvas.grid == "X").sum() == 1


def test_render_with_huge_coefficient_finishes():
    canvas = render_relationship(Line(1, 0, 1e9), Line(0, 1, 0))

    assert (canvas.grid == "X").sum() == 1
    assert "1" in canvas.grid
    assert "2" in canvas.grid


def test_render_relationship_uses_given_result(monkeypatch):
    l1, l2 = Line(1, -1, 0), Line(1, 1, 0)
    result = classify_relationship(l1, l2)

    def fail(*args):
        raise AssertionError("relationship classified twice")

    monkeypatch.setattr(render_module, "classify_relationship", fail)
    canvas = render_relationship(l1, l2, result=result)

    assert (canvas.grid == "X").sum() == 1

"""
Render entry points used by the menu program.

This module provides:
    • render_relationship(line1, line2, result=None)
    • render_quadrilateral(lines, result=None)

Each call builds its own Canvas, frames the interesting points, draws and
returns the Canvas. Nothing is kept between calls.
"""

from typing import Optional, Sequence

from classifiers.line_relationship import RelationshipResult, classify_relationship
from classifiers.quadrilateral_classifier import classify_quadrilateral
from models.line import Line
from models.point import Point
from models.quadrilateral import QuadrilateralResult
from visualization.canvas import Canvas
from visualization.draw_intersections import draw_intersections, intersection_label
from visualization.draw_lines import draw_lines, draw_polygon


ORIGIN = Point(0.0, 0.0)


def _anchor_points(lines: Sequence[Line]):
    """Origin plus the point of each line closest to it."""
    return [ORIGIN] + [ln.closestPointTo(ORIGIN) for ln in lines]


# -------------------------------------------------------------------------
#   Two lines
# -------------------------------------------------------------------------

def render_relationship(
    line1: Line,
    line2: Line,
    params: Optional[dict] = None,
    result: Optional[RelationshipResult] = None
) -> Canvas:
    """
    Draws both lines ('1' and '2') and, when they cross, the crossing point
    with its integer coordinates.
    """
    if result is None:
        result = classify_relationship(line1, line2)

    canvas = Canvas(params)

    frame = _anchor_points([line1, line2])
    if result.intersection is not None:
        frame.append(result.intersection)

    canvas.autoScale(frame)
    canvas.clear()

    draw_lines(canvas, [line1, line2])

    if result.intersection is not None:
        canvas.plotIntersection(result.intersection, intersection_label(result.intersection))

    return canvas


# -------------------------------------------------------------------------
#   Four lines
# -------------------------------------------------------------------------

def render_quadrilateral(
    lines: Sequence[Line],
    params: Optional[dict] = None,
    result: Optional[QuadrilateralResult] = None
) -> Canvas:
    """
    Draws the 4 lines ('1'..'4'), the outline through the ordered vertices
    ('#') and every vertex with its label.

    When no shape could be determined the frame falls back to all crossings
    plus the lines' anchor points, and only the crossings are marked.

    Raises:
        InvalidInputError: if the number of lines is not 4
    """
    if result is None:
        result = classify_quadrilateral(lines)

    canvas = Canvas(params)

    if result.determined:
        frame = list(result.vertices)
    else:
        frame = list(result.candidates) + _anchor_points(lines)

    canvas.autoScale(frame)
    canvas.clear()

    draw_lines(canvas, lines)

    if result.determined:
        draw_polygon(canvas, result.vertices)
        draw_intersections(canvas, result.vertices)
    else:
        draw_intersections(canvas, result.candidates)

    return canvas

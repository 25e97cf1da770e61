"""
Visualization utilities for marking intersection points.

This module provides:
    • intersection_label(point)
    • draw_intersections(canvas, points)

Used by:
    - visualization.render
"""

from typing import Sequence

from models.point import Point
from visualization.canvas import Canvas, round_half_away


def intersection_label(point: Point) -> str:
    """
    Integer-rounded coordinate text, e.g. '(4,-3)'.
    """
    return f"({round_half_away(point.x)},{round_half_away(point.y)})"


def draw_intersections(canvas: Canvas, points: Sequence[Point]) -> int:
    """
    Marks every point that falls inside the viewport.
    Returns the number of points actually drawn.
    """
    drawn = 0
    for p in points:
        if canvas.plotIntersection(p, intersection_label(p)):
            drawn += 1
    return drawn

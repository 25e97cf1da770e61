"""
Visualization Tools

Provides the ASCII canvas and drawing utilities for:
- Infinite lines and polygon outlines
- Intersection markers with coordinate labels
- Full relationship / quadrilateral renders
- Text verdicts
"""

from .canvas import Canvas, round_half_away
from .draw_lines import draw_lines, draw_polygon
from .draw_intersections import draw_intersections, intersection_label
from .render import render_relationship, render_quadrilateral
from .reports import (
    format_line_sets,
    format_relationship,
    format_line_set_report,
    format_quadrilateral,
)

__all__ = [
    "Canvas",
    "round_half_away",
    "draw_lines",
    "draw_polygon",
    "draw_intersections",
    "intersection_label",
    "render_relationship",
    "render_quadrilateral",
    "format_line_sets",
    "format_relationship",
    "format_line_set_report",
    "format_quadrilateral",
]

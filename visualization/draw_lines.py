"""
Visualization utilities for rendering lines onto a Canvas.

This module provides:
    • draw_lines(canvas, lines, glyphs)
    • draw_polygon(canvas, vertices, symbol)

It is used by:
    - visualization.render
"""

from typing import Optional, Sequence

from models.line import Line
from models.point import Point
from visualization.canvas import Canvas


# ---------------------------------------------------------------------
#  BASIC: Draw infinite lines, one glyph per line
# ---------------------------------------------------------------------

def draw_lines(
    canvas: Canvas,
    lines: Sequence[Line],
    glyphs: Optional[Sequence[str]] = None
):
    """
    Draws Line objects onto the canvas.

    Args:
        canvas: target Canvas (modified in-place)
        lines: list of Line objects
        glyphs: one character per line; defaults to LINE_GLYPHS ('1', '2', ...)
    """
    if glyphs is None:
        glyphs = canvas.params["LINE_GLYPHS"]

    for ln, symbol in zip(lines, glyphs):
        canvas.plotLine(ln, symbol)

    return canvas


# ---------------------------------------------------------------------
#  HIGH-LEVEL: Draw a closed outline through ordered vertices
# ---------------------------------------------------------------------

def draw_polygon(
    canvas: Canvas,
    vertices: Sequence[Point],
    symbol: Optional[str] = None
):
    """
    Connects consecutive vertices with segments, closing last -> first.
    """
    if symbol is None:
        symbol = canvas.glyphs["OUTLINE"]

    n = len(vertices)
    if n < 2:
        return canvas

    for i in range(n):
        canvas.plotSegment(vertices[i], vertices[(i + 1) % n], symbol)

    return canvas

"""
ASCII raster canvas.

A fixed-size character grid (numpy array of single characters) with a
logical viewport mapped onto it by an affine transform. Row 0 is the top of
the grid, so the y axis is flipped.

This module provides:
    • Canvas
    • round_half_away(value)
"""

import math
from typing import Iterable, List, Optional, Tuple

import numpy as np

from config import get_active_params
from models.line import Line
from models.point import Point


def round_half_away(value: float) -> int:
    """Round to nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _samples(start: float, stop: float, step: float, limit: int):
    """
    start, start + step, ... up to stop. The step is widened when more than
    'limit' samples would be needed. Values are computed from the index,
    never accumulated.
    """
    span = stop - start
    if not (math.isfinite(span) and span >= 0):
        return
    step = max(step, span / limit)
    count = int(math.floor(span / step + 1e-9))
    for i in range(count + 1):
        yield start + i * step


class Canvas:
    """
    Mutable character raster.

    Lifecycle:
      - created with the default viewport and cleared (axes drawn)
      - viewport reassigned (autoScale / setViewport), then clear() again
      - plot calls mutate the grid
      - display() reads it

    Attributes:
        width, height: grid size in cells
        x_min, x_max, y_min, y_max: logical viewport
        grid: (height, width) numpy array of single characters
    """

    def __init__(self, params: Optional[dict] = None):
        if params is None:
            params = get_active_params()
        self.params = params

        self.width: int = params["CANVAS_WIDTH"]
        self.height: int = params["CANVAS_HEIGHT"]
        self.glyphs: dict = params["GLYPHS"]
        self.eps: float = params["EPSILON"]

        self.x_min, self.x_max, self.y_min, self.y_max = params["DEFAULT_VIEWPORT"]

        self.grid = np.full((self.height, self.width), self.glyphs["BLANK"], dtype="<U1")
        self.clear()

    # ------------------------------------------------------------
    # Viewport
    # ------------------------------------------------------------
    def setViewport(self, x_min: float, x_max: float, y_min: float, y_max: float):
        if not (x_max > x_min and y_max > y_min):
            raise ValueError(
                f"Viewport must have positive extent, got "
                f"x=[{x_min}, {x_max}] y=[{y_min}, {y_max}]"
            )
        self.x_min, self.x_max = float(x_min), float(x_max)
        self.y_min, self.y_max = float(y_min), float(y_max)

    @property
    def viewport(self) -> Tuple[float, float, float, float]:
        return (self.x_min, self.x_max, self.y_min, self.y_max)

    def _padded_range(self, lo: float, hi: float) -> Tuple[float, float]:
        span = hi - lo
        if span < self.eps:
            half = self.params["DEFAULT_SPAN"] / 2.0
            return lo - half, hi + half
        pad = span * self.params["AUTOSCALE_PADDING"]
        return lo - pad, hi + pad

    def autoScale(self, points: Iterable[Point]):
        """
        Fit the viewport to the bounding box of the points plus padding on
        every side. An empty input leaves the viewport untouched.
        """
        coords = np.array([p.as_tuple() for p in points], dtype=float)
        if coords.size == 0:
            return

        lo = coords.min(axis=0)
        hi = coords.max(axis=0)

        x_min, x_max = self._padded_range(lo[0], hi[0])
        y_min, y_max = self._padded_range(lo[1], hi[1])
        self.setViewport(x_min, x_max, y_min, y_max)

    # ------------------------------------------------------------
    # Coordinate transform
    # ------------------------------------------------------------
    def _scaled(self, x: float, y: float) -> Tuple[float, float]:
        fx = (x - self.x_min) / (self.x_max - self.x_min) * (self.width - 1)
        fy = (self.y_max - y) / (self.y_max - self.y_min) * (self.height - 1)
        return fx, fy

    def toScreen(self, x: float, y: float) -> Tuple[int, int]:
        """(x, y) in world units -> (column, row) in cells."""
        fx, fy = self._scaled(x, y)
        return round_half_away(fx), round_half_away(fy)

    def _onGrid(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """Cell of (x, y), or None when it falls outside the grid."""
        fx, fy = self._scaled(x, y)
        if not (math.isfinite(fx) and math.isfinite(fy)):
            return None
        sx, sy = round_half_away(fx), round_half_away(fy)
        return (sx, sy) if self._inside(sx, sy) else None

    def _inside(self, sx: int, sy: int) -> bool:
        return 0 <= sx < self.width and 0 <= sy < self.height

    # ------------------------------------------------------------
    # Drawing primitives
    # ------------------------------------------------------------
    def clear(self):
        """
        Blank every cell and redraw the axes that fall inside the viewport.
        """
        self.grid[:, :] = self.glyphs["BLANK"]

        row = col = None
        if self.y_min <= 0.0 <= self.y_max:
            _, row = self.toScreen(0.0, 0.0)
            if 0 <= row < self.height:
                self.grid[row, :] = self.glyphs["AXIS_X"]
            else:
                row = None

        if self.x_min <= 0.0 <= self.x_max:
            col, _ = self.toScreen(0.0, 0.0)
            if 0 <= col < self.width:
                self.grid[:, col] = self.glyphs["AXIS_Y"]
            else:
                col = None

        if row is not None and col is not None:
            self.grid[row, col] = self.glyphs["ORIGIN"]

    def plotPoint(self, x: float, y: float, symbol: str) -> bool:
        """
        Set one cell. Points outside the grid are dropped.
        Returns True if a cell was written.
        """
        cell = self._onGrid(x, y)
        if cell is None:
            return False
        sx, sy = cell
        self.grid[sy, sx] = symbol
        return True

    def plotLine(self, line: Line, symbol: str):
        """
        Rasterize an infinite line by stepping the independent axis across
        the viewport in LINE_STEP increments, widened on large viewports so
        at most LINE_SAMPLES_PER_CELL samples land in each cell.
        """
        step = self.params["LINE_STEP"]
        per_cell = self.params["LINE_SAMPLES_PER_CELL"]
        x_limit = per_cell * self.width
        y_limit = per_cell * self.height

        if line.isVertical():
            x = line.c / line.a
            for y in _samples(self.y_min, self.y_max, step, y_limit):
                self.plotPoint(x, y, symbol)
        elif line.isHorizontal():
            y = line.c / line.b
            for x in _samples(self.x_min, self.x_max, step, x_limit):
                self.plotPoint(x, y, symbol)
        else:
            for x in _samples(self.x_min, self.x_max, step, x_limit):
                self.plotPoint(x, (line.c - line.a * x) / line.b, symbol)

    def plotSegment(self, start: Point, end: Point, symbol: str):
        """
        Parametric walk from start to end. The step count grows with the
        segment's extent so long segments stay gap-free, up to
        SEGMENT_SAMPLES_PER_CELL steps per cell of the larger grid side.
        """
        dx = end.x - start.x
        dy = end.y - start.y
        extent = max(abs(dx), abs(dy))
        if not math.isfinite(extent):
            return

        cap = self.params["SEGMENT_SAMPLES_PER_CELL"] * max(self.width, self.height)
        wanted = min(self.params["SEGMENT_STEP_FACTOR"] * extent, cap)
        steps = max(self.params["SEGMENT_MIN_STEPS"], int(wanted))

        for i in range(steps + 1):
            t = i / steps
            self.plotPoint(start.x + t * dx, start.y + t * dy, symbol)

    def plotIntersection(self, point: Point, label: str) -> bool:
        """
        Mark a point and write its label in the cells to its right.

        Each label character is checked against the right edge on its own,
        so a label near the border is clipped one character at a time.
        Returns False (and draws nothing) when the point is off-grid.
        """
        cell = self._onGrid(point.x, point.y)
        if cell is None:
            return False
        sx, sy = cell

        self.grid[sy, sx] = self.glyphs["INTERSECTION"]
        for i, ch in enumerate(label):
            col = sx + 1 + i
            if col < self.width:
                self.grid[sy, col] = ch
        return True

    # ------------------------------------------------------------
    # Output
    # ------------------------------------------------------------
    def rows(self) -> List[str]:
        return ["".join(row) for row in self.grid]

    def display(self) -> str:
        """
        The grid as bordered text rows, top row first.
        """
        g = self.glyphs
        border = g["BORDER_CORNER"] + g["BORDER_H"] * self.width + g["BORDER_CORNER"]
        body = [g["BORDER_V"] + row + g["BORDER_V"] for row in self.rows()]
        return "\n".join([border] + body + [border])

    def __str__(self):
        return self.display()

    def __repr__(self):
        return (
            f"Canvas({self.width}x{self.height}, "
            f"x=[{self.x_min:.2f}, {self.x_max:.2f}], y=[{self.y_min:.2f}, {self.y_max:.2f}])"
        )

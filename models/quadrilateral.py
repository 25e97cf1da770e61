from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from models.point import Point


class ShapeType(str, Enum):
    """
    Final quadrilateral label, in decreasing priority order.
    UNDETERMINED is used when fewer than 4 vertices could be found.
    """

    SQUARE = "square"
    RECTANGLE = "rectangle"
    RHOMBUS = "rhombus"
    PARALLELOGRAM = "parallelogram"
    TRAPEZOID = "trapezoid"
    IRREGULAR = "irregular quadrilateral"
    UNDETERMINED = "undetermined"


@dataclass(frozen=True)
class ShapeProperties:
    """
    Boolean predicates evaluated on one ordered set of vertices.
    """

    equal_sides: bool = False
    equal_opposites: bool = False
    is_parallelogram: bool = False
    is_rectangle: bool = False
    is_rhombus: bool = False
    is_square: bool = False
    is_trapezoid: bool = False

    def label(self) -> ShapeType:
        """
        Square > Rectangle > Rhombus > Parallelogram > Trapezoid > Irregular
        """
        if self.is_square:
            return ShapeType.SQUARE
        if self.is_rectangle:
            return ShapeType.RECTANGLE
        if self.is_rhombus:
            return ShapeType.RHOMBUS
        if self.is_parallelogram:
            return ShapeType.PARALLELOGRAM
        if self.is_trapezoid:
            return ShapeType.TRAPEZOID
        return ShapeType.IRREGULAR


@dataclass(frozen=True)
class QuadrilateralResult:
    """
    Outcome of classifying one set of 4 lines.

    Attributes:
        shape: final label
        side_lengths: lengths in traversal order (display order, not sorted)
        vertices: the ordered polygon vertices (empty if undetermined)
        candidates: every pairwise intersection that exists, in (i, j) order
        properties: the predicates the label was derived from
    """

    shape: ShapeType
    side_lengths: Tuple[float, ...] = ()
    vertices: Tuple[Point, ...] = ()
    candidates: Tuple[Point, ...] = ()
    properties: ShapeProperties = field(default_factory=ShapeProperties)

    @property
    def determined(self) -> bool:
        return self.shape is not ShapeType.UNDETERMINED

    def sorted_lengths(self) -> List[float]:
        return sorted(self.side_lengths)

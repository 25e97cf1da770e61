"""
Quadrilateral classifier for groups of 4 Line objects.

This module provides:
    • classify_quadrilateral(lines)
    • compute_side_lengths(vertices)
    • pair_opposite_lines(lines)
    • evaluate_properties(working_lines, sorted_lengths)
"""

from typing import List, Sequence

from config import LINES_PER_SET
from models.errors import InvalidInputError
from models.line import Line
from models.point import Point
from models.quadrilateral import QuadrilateralResult, ShapeProperties, ShapeType
from classifiers.vertex_ordering import find_candidate_vertices, order_vertices
from utils.geometry import calculateDistance, nearly_equal


# ========================================================================
# 1. SIDE LENGTHS
# ========================================================================

def compute_side_lengths(vertices: Sequence[Point]) -> List[float]:
    """
    Distances between consecutive vertices, wrapping from the last vertex
    back to the first. Returned in traversal order.
    """
    n = len(vertices)
    return [calculateDistance(vertices[i], vertices[(i + 1) % n]) for i in range(n)]


# ========================================================================
# 2. OPPOSITE-SIDE PAIRING
# ========================================================================

def pair_opposite_lines(lines: Sequence[Line]) -> List[Line]:
    """
    Returns a working copy where (0, 2) and (1, 3) are the candidate
    opposite pairs.

    Input order is assumed to list the sides around the shape. The only
    correction made: if line 0 is not parallel to line 2, lines 1 and 2
    trade places. Other orderings are not recovered.
    """
    working = list(lines)
    if not working[0].isParallel(working[2]):
        working[1], working[2] = working[2], working[1]
    return working


# ========================================================================
# 3. SHAPE PREDICATES
# ========================================================================

def _all_corners_square(working: Sequence[Line]) -> bool:
    return (
        working[0].isPerpendicular(working[1])
        and working[1].isPerpendicular(working[2])
        and working[2].isPerpendicular(working[3])
        and working[3].isPerpendicular(working[0])
    )


def evaluate_properties(working: Sequence[Line], sorted_lengths: Sequence[float]) -> ShapeProperties:
    """
    Evaluates every predicate on the paired lines and ascending side lengths.

    equal_sides only compares the shortest and the longest side.
    """
    first_pair = working[0].isParallel(working[2])
    second_pair = working[1].isParallel(working[3])
    right_angles = _all_corners_square(working)

    equal_sides = nearly_equal(sorted_lengths[0], sorted_lengths[3])
    equal_opposites = (
        nearly_equal(sorted_lengths[0], sorted_lengths[1])
        and nearly_equal(sorted_lengths[2], sorted_lengths[3])
    )

    is_parallelogram = first_pair and second_pair

    return ShapeProperties(
        equal_sides=equal_sides,
        equal_opposites=equal_opposites,
        is_parallelogram=is_parallelogram,
        is_rectangle=right_angles and is_parallelogram and equal_opposites,
        is_rhombus=first_pair and second_pair and equal_sides,
        is_square=right_angles and is_parallelogram and equal_sides,
        is_trapezoid=first_pair != second_pair,
    )


# ========================================================================
# 4. FULL CLASSIFICATION
# ========================================================================

def classify_quadrilateral(lines: Sequence[Line]) -> QuadrilateralResult:
    """
    Classifies the shape enclosed by 4 lines:

        - intersect every pair of lines
        - order 4 of the intersections into a path
        - measure the sides
        - pair opposite lines and evaluate the shape predicates

    Raises:
        InvalidInputError: if the number of lines is not 4
    """
    if len(lines) != LINES_PER_SET:
        raise InvalidInputError(
            f"Need exactly {LINES_PER_SET} lines to analyze a shape, got {len(lines)}"
        )

    candidates = find_candidate_vertices(lines)
    vertices = order_vertices(candidates, LINES_PER_SET)

    if len(vertices) < LINES_PER_SET:
        return QuadrilateralResult(
            shape=ShapeType.UNDETERMINED,
            candidates=tuple(candidates),
        )

    side_lengths = compute_side_lengths(vertices)
    working = pair_opposite_lines(lines)
    properties = evaluate_properties(working, sorted(side_lengths))

    return QuadrilateralResult(
        shape=properties.label(),
        side_lengths=tuple(side_lengths),
        vertices=tuple(vertices),
        candidates=tuple(candidates),
        properties=properties,
    )

"""
Pairwise line relationship analysis.

This module provides:
    • classify_relationship(line1, line2)
    • analyze_line_set(lines)
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from models.line import Line
from models.point import Point
from utils.geometry import checkIfParallel, checkIfPerpendicular, checkLinePairs


class Relationship(str, Enum):
    PARALLEL = "parallel"
    PERPENDICULAR = "perpendicular"
    INTERSECTING = "intersecting"


@dataclass(frozen=True)
class RelationshipResult:
    """
    label: how the two lines relate
    intersection: crossing point, None when the lines are parallel
    """

    label: Relationship
    intersection: Optional[Point] = None


@dataclass(frozen=True)
class LineSetReport:
    """
    Per-line and per-pair facts about a group of lines.

    slopes: one entry per line, None for vertical lines
    parallel_pairs / perpendicular_pairs: (i, j) index tuples with i < j
    """

    slopes: Tuple[Optional[float], ...]
    parallel_pairs: Tuple[Tuple[int, int], ...]
    perpendicular_pairs: Tuple[Tuple[int, int], ...]


# ========================================================================
# 1. TWO LINES
# ========================================================================

def classify_relationship(line1: Line, line2: Line) -> RelationshipResult:
    """
    Parallel is checked first, so coincident lines are reported as parallel
    and carry no intersection point.
    """
    if line1.isParallel(line2):
        return RelationshipResult(Relationship.PARALLEL)

    point = line1.intersectionPoint(line2)

    if line1.isPerpendicular(line2):
        return RelationshipResult(Relationship.PERPENDICULAR, point)

    return RelationshipResult(Relationship.INTERSECTING, point)


# ========================================================================
# 2. A GROUP OF LINES
# ========================================================================

def analyze_line_set(lines: Sequence[Line]) -> LineSetReport:
    slopes = tuple(line.slope() for line in lines)
    _, parallel_pairs = checkLinePairs(list(lines), checkIfParallel)
    _, perpendicular_pairs = checkLinePairs(list(lines), checkIfPerpendicular)

    return LineSetReport(
        slopes=slopes,
        parallel_pairs=tuple(parallel_pairs),
        perpendicular_pairs=tuple(perpendicular_pairs),
    )

"""
This module provides:
    - nearly_equal
    - calculateDistance
    - line_intersect       (standard-form 2x2 solve)
    - checkIfParallel
    - checkIfPerpendicular
    - checkLinePairs
"""

import math
from typing import Optional, Tuple

from config import EPSILON


# ----------------------------------------------------------------------
#  FLOATING-POINT COMPARISON
# ----------------------------------------------------------------------

def nearly_equal(v1: float, v2: float, eps: float = EPSILON) -> bool:
    """
    Absolute-tolerance comparison used everywhere in the geometry core.
    """
    return abs(v1 - v2) < eps


# ----------------------------------------------------------------------
#  DISTANCE
# ----------------------------------------------------------------------

def calculateDistance(p1, p2) -> float:
    """
    Euclidean distance between two objects exposing .x and .y.
    """
    return math.sqrt((p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2)


# ----------------------------------------------------------------------
#  LINE INTERSECTION
# ----------------------------------------------------------------------

def line_intersect(a1, b1, c1, a2, b2, c2) -> Optional[Tuple[float, float]]:
    """
    Compute the intersection of two lines given in standard form:
        a1 x + b1 y = c1
        a2 x + b2 y = c2

    Returns:
        (x, y) or None if the determinant vanishes (parallel or coincident)
    """
    det = a1 * b2 - a2 * b1
    if abs(det) < EPSILON:
        return None

    # Solves a x + b y = c as written (no mirrored point). With more than 4
    # crossings the ordering walk starts at the true topmost one.
    x = (c1 * b2 - c2 * b1) / det
    y = (a1 * c2 - a2 * c1) / det
    return x, y


# ----------------------------------------------------------------------
#  PAIRWISE RELATIONSHIP CHECKS
# ----------------------------------------------------------------------

def checkIfParallel(l1, l2) -> bool:
    """
    Returns True if two Line objects are parallel (coincident lines included).
    """
    return l1.isParallel(l2)


def checkIfPerpendicular(l1, l2) -> bool:
    """
    Returns True if two Line objects meet at a right angle.
    """
    return l1.isPerpendicular(l2)


def checkLinePairs(lines, predicate=checkIfParallel):
    """
    Checks every (i, j) pair with i < j against a pair predicate.

    Input:
        lines: list of Line objects
        predicate: checkIfParallel, checkIfPerpendicular or similar
    Output:
        count: number of matching pairs
        idx_pairs: list of (i, j) index tuples
    """
    count = 0
    idx_pairs = []

    for i in range(len(lines)):
        for j in range(i + 1, len(lines)):
            if predicate(lines[i], lines[j]):
                count += 1
                idx_pairs.append((i, j))

    return count, idx_pairs

"""
This module provides:
    • find_candidate_vertices()
    • order_vertices()
"""

import math
from typing import List, Sequence

from models.line import Line
from models.point import Point
from utils.geometry import calculateDistance


# -------------------------------------------------------------------------
#  PAIRWISE INTERSECTIONS
# -------------------------------------------------------------------------

def find_candidate_vertices(lines: Sequence[Line]) -> List[Point]:
    """
    Intersections of every (i, j) pair with i < j, in that order.
    Parallel pairs contribute nothing.
    """
    candidates = []

    for i in range(len(lines)):
        for j in range(i + 1, len(lines)):
            p = lines[i].intersectionPoint(lines[j])
            if p is not None:
                candidates.append(p)

    return candidates


# -------------------------------------------------------------------------
#  NEAREST-NEIGHBOUR WALK
# -------------------------------------------------------------------------

def order_vertices(candidates: Sequence[Point], count: int = 4) -> List[Point]:
    """
    Orders 'count' of the candidates into a polygon path:

        1. start at the topmost candidate (max y)
        2. repeatedly step to the closest unused candidate

    Ties go to the candidate seen first in both scans (strict comparisons).
    This is a heuristic, not a hull ordering: concave or unusual layouts can
    come out misordered.

    Returns an empty list when fewer than 'count' candidates exist.
    """
    if len(candidates) < count:
        return []

    topmost = 0
    for i in range(1, len(candidates)):
        if candidates[i].y > candidates[topmost].y:
            topmost = i

    ordered = [candidates[topmost]]
    used = [False] * len(candidates)
    used[topmost] = True

    for _ in range(count - 1):
        min_dist = math.inf
        next_idx = -1

        for j, p in enumerate(candidates):
            if used[j]:
                continue
            dist = calculateDistance(ordered[-1], p)
            if dist < min_dist:
                min_dist = dist
                next_idx = j

        if next_idx != -1:
            ordered.append(candidates[next_idx])
            used[next_idx] = True

    return ordered

"""
Classifiers Package

Contains the analysis stages of the line & quadrilateral analyzer:
- Pairwise line relationships
- Candidate vertex search & ordering
- Quadrilateral classification
"""

from .line_relationship import (
    Relationship,
    RelationshipResult,
    LineSetReport,
    classify_relationship,
    analyze_line_set,
)
from .vertex_ordering import find_candidate_vertices, order_vertices
from .quadrilateral_classifier import (
    classify_quadrilateral,
    compute_side_lengths,
    pair_opposite_lines,
    evaluate_properties,
)

__all__ = [
    "Relationship",
    "RelationshipResult",
    "LineSetReport",
    "classify_relationship",
    "analyze_line_set",
    "find_candidate_vertices",
    "order_vertices",
    "classify_quadrilateral",
    "compute_side_lengths",
    "pair_opposite_lines",
    "evaluate_properties",
]

"""
Utility Functions

Provides the floating-point comparison, distance, intersection and
pairwise-check helpers used across the models and classifiers.

The data loader lives in utils.data_io and is imported from there
directly (it depends on models, which depend on this package).
"""

from .geometry import (
    nearly_equal,
    calculateDistance,
    line_intersect,
    checkIfParallel,
    checkIfPerpendicular,
    checkLinePairs,
)

__all__ = [
    "nearly_equal",
    "calculateDistance",
    "line_intersect",
    "checkIfParallel",
    "checkIfPerpendicular",
    "checkLinePairs",
]

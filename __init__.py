"""
Line & Quadrilateral Analyzer

This package provides a modular implementation of the line-analysis tool,
including:

- Line model (standard form a*x + b*y = c)
- Pairwise relationship checks & intersections
- Quadrilateral vertex ordering & shape classification
- ASCII canvas rendering & text reports
- Menu program reading line sets from a data file
"""
__all__ = [
    "config",
    "main",
    "classifiers",
    "models",
    "utils",
    "visualization",
]

"""
Data Models

Defines the core data structures:
- Point
- Line
- ShapeType / ShapeProperties / QuadrilateralResult
- error types
"""

from .errors import GeometryError, InvalidLineError, InvalidInputError, LineDataError
from .point import Point
from .line import Line
from .quadrilateral import ShapeType, ShapeProperties, QuadrilateralResult

__all__ = [
    "GeometryError",
    "InvalidLineError",
    "InvalidInputError",
    "LineDataError",
    "Point",
    "Line",
    "ShapeType",
    "ShapeProperties",
    "QuadrilateralResult",
]

from dataclasses import dataclass
from typing import Tuple

from config import EPSILON


@dataclass(frozen=True, eq=False)
class Point:
    """
    Immutable 2D point.

    Equality is tolerance based (both coordinates within EPSILON), so
    points are deliberately unhashable.
    """

    x: float
    y: float

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return abs(self.x - other.x) <= EPSILON and abs(self.y - other.y) <= EPSILON

    __hash__ = None

    def as_tuple(self) -> Tuple[float, float]:
        """return (x, y) tuple"""
        return (self.x, self.y)

    def __repr__(self):
        return f"Point({self.x:.3f}, {self.y:.3f})"

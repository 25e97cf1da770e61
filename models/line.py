from dataclasses import dataclass
from typing import Optional

from config import EPSILON
from models.errors import InvalidLineError
from models.point import Point
from utils.geometry import line_intersect, nearly_equal


@dataclass(frozen=True)
class Line:
    """
    Infinite line in standard form: a*x + b*y = c.

    Supports:
      - slope computation (None for vertical lines)
      - parallel / perpendicular tests
      - intersection with another line
      - projection of a point onto the line
      - point-on-line test

    Two lines with the same coefficients are equal and interchangeable.
    """

    a: float
    b: float
    c: float

    def __post_init__(self):
        """Store the coefficients as floats and reject 0x + 0y = c."""
        for name in ("a", "b", "c"):
            try:
                object.__setattr__(self, name, float(getattr(self, name)))
            except OverflowError as exc:
                raise InvalidLineError(f"Coefficient {name} is too large: {exc}") from exc

        if abs(self.a) < EPSILON and abs(self.b) < EPSILON:
            raise InvalidLineError(
                f"Both a and b cannot be zero (got a={self.a}, b={self.b})"
            )

    # ------------------------------------------------------------
    # Basic geometric properties
    # ------------------------------------------------------------
    def slope(self) -> Optional[float]:
        """
        -a/b, or None for a vertical line (|b| < EPSILON).
        """
        if abs(self.b) < EPSILON:
            return None
        return -self.a / self.b

    def isVertical(self) -> bool:
        return abs(self.b) < EPSILON

    def isHorizontal(self) -> bool:
        return abs(self.a) < EPSILON

    # ------------------------------------------------------------
    # Relationship with another line
    # ------------------------------------------------------------
    def isParallel(self, other: "Line") -> bool:
        s1 = self.slope()
        s2 = other.slope()

        if s1 is None and s2 is None:
            return True
        if s1 is None or s2 is None:
            return False
        return nearly_equal(s1, s2)

    def isPerpendicular(self, other: "Line") -> bool:
        """
        A vertical line is perpendicular only to a line of slope ~0.
        Two vertical lines are never perpendicular.
        """
        s1 = self.slope()
        s2 = other.slope()

        if s1 is None and s2 is None:
            return False
        if s1 is None:
            return abs(s2) < EPSILON
        if s2 is None:
            return abs(s1) < EPSILON

        return abs(s1 * s2 + 1) < EPSILON

    def intersectionPoint(self, other: "Line") -> Optional[Point]:
        """
        Point where both lines meet, or None for parallel/coincident lines.
        """
        xy = line_intersect(self.a, self.b, self.c, other.a, other.b, other.c)
        if xy is None:
            return None
        return Point(*xy)

    # ------------------------------------------------------------
    # Point queries
    # ------------------------------------------------------------
    def closestPointTo(self, point: Point) -> Point:
        """
        Orthogonal projection of point onto the line.
        """
        norm = self.a * self.a + self.b * self.b
        offset = (self.a * point.x + self.b * point.y - self.c) / norm
        return Point(point.x - self.a * offset, point.y - self.b * offset)

    def containsPoint(self, point: Point, tolerance: float = EPSILON) -> bool:
        """
        Substitute the point back into a*x + b*y = c.

        The tolerance is scaled by the magnitude of the terms so large
        coefficients do not fail on rounding noise.
        """
        lhs = self.a * point.x + self.b * point.y
        scale = max(1.0, abs(self.a * point.x), abs(self.b * point.y), abs(self.c))
        return abs(lhs - self.c) <= tolerance * scale

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __str__(self):
        return f"{self.a:g}x + {self.b:g}y = {self.c:g}"

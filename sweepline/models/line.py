from dataclasses import dataclass
from typing import Optional

from sweepline.models.point import Point


@dataclass(frozen=True)
class Line:
    """
    Infinite line in implicit form:  a*x + b*y + c = 0

    Supports:
      - construction from two points (or four scalars)
      - horizontal lines used by the sweep state
      - signed-distance evaluation of a point
      - line-line intersection by Cramer's rule

    Two coincident input points give the zero line (0, 0, 0). It is not
    flagged: every determinant computed against it is zero, so it never
    intersects anything.
    """

    a: float
    b: float
    c: float

    # ------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------
    @classmethod
    def from_coordinates(cls, x1, y1, x2, y2) -> "Line":
        """
        a = y2 - y1
        b = x1 - x2
        c = (x2 - x1) * y1 - (y2 - y1) * x1
        """
        dx = x2 - x1
        dy = y2 - y1
        return cls(dy, -dx, dx * y1 - dy * x1)

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> "Line":
        return cls.from_coordinates(p1.x, p1.y, p2.x, p2.y)

    @classmethod
    def horizontal(cls, y: float) -> "Line":
        """Line through (0, y) and (1, y)."""
        return cls.from_coordinates(0.0, y, 1.0, y)

    # ------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------
    @property
    def is_degenerate(self) -> bool:
        return self.a == 0 and self.b == 0

    def evaluate(self, x: float, y: float) -> float:
        """
        a*x + b*y + c for the given point.

        The sign tells which side of the line the point lies on;
        zero means the point is on the line.
        """
        return self.a * x + self.b * y + self.c

    # ------------------------------------------------------------
    # Intersection
    # ------------------------------------------------------------
    def intersect(self, other: "Line") -> Optional[Point]:
        """
        Intersection point of two lines, or None.

            d = a1*b2 - a2*b1
            x = (b1*c2 - b2*c1) / d
            y = (a2*c1 - a1*c2) / d

        Parallel and coincident lines both give d == 0 (exact test, no
        epsilon) and return None.
        """
        d = self.a * other.b - other.a * self.b
        if d == 0:
            return None

        x = (self.b * other.c - other.b * self.c) / d
        y = (other.a * self.c - self.a * other.c) / d
        return Point(x, y)

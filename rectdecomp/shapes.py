"""
Basic shapes for rectilinear decomposition.

Points are integer coordinates ordered along the sweep direction (y first,
then x). Rectangles are the output of the decomposition.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Union


@total_ordering
@dataclass(frozen=True)
class Point:
    """A 2D integer point."""
    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y

    def __lt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def sort_key(self) -> tuple[int, int]:
        """Key for scan order: by y, ties broken by x."""
        return (self.y, self.x)

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self):
        return f"({self.x}, {self.y})"


PointLike = Union[Point, tuple[int, int], list[int]]


def as_point(value: PointLike) -> Point:
    """Convert an (x, y) pair to a Point. Points are returned as-is."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(int(x), int(y))


def as_points(values: Iterable[PointLike]) -> list[Point]:
    return [as_point(v) for v in values]


@dataclass(frozen=True)
class Rect:
    """
    An axis-aligned rectangle given by two opposite corners.

    The decomposer emits the bottom-left corner first and the top-right
    corner second, but any two opposite corners are accepted.
    """
    first: Point
    second: Point

    @property
    def min_x(self) -> int:
        return min(self.first.x, self.second.x)

    @property
    def min_y(self) -> int:
        return min(self.first.y, self.second.y)

    @property
    def max_x(self) -> int:
        return max(self.first.x, self.second.x)

    @property
    def max_y(self) -> int:
        return max(self.first.y, self.second.y)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """(min_x, min_y, max_x, max_y)"""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def corners(self) -> list[Point]:
        """Corners in clockwise order starting at the bottom-left (y up)."""
        return [
            Point(self.min_x, self.min_y),
            Point(self.min_x, self.max_y),
            Point(self.max_x, self.max_y),
            Point(self.max_x, self.min_y),
        ]

    def overlaps(self, other: "Rect") -> bool:
        """True if the two rectangles share interior area (touching edges don't count)."""
        return (
            self.min_x < other.max_x and other.min_x < self.max_x and
            self.min_y < other.max_y and other.min_y < self.max_y
        )

    def __repr__(self):
        return f"Rect({self.first!r}, {self.second!r})"


# =============================================================================
# Polygon helpers
# =============================================================================

def signed_area(polygon: list[Point]) -> float:
    """
    Calculate signed area of polygon using shoelace formula.

    Returns:
        Positive for CCW winding, negative for CW winding (y axis pointing up).
    """
    n = len(polygon)
    if n < 3:
        return 0.0
    area = 0
    for i in range(n):
        j = (i + 1) % n
        area += polygon[i].x * polygon[j].y
        area -= polygon[j].x * polygon[i].y
    return area / 2.0


def polygon_area(polygon: list[Point]) -> float:
    return abs(signed_area(polygon))


def ensure_clockwise(polygon: list[Point]) -> list[Point]:
    """Ensure polygon has clockwise winding order (y axis pointing up)."""
    if signed_area(polygon) > 0:
        return list(reversed(polygon))
    return list(polygon)


def total_area(rects: Iterable[Rect]) -> int:
    return sum(r.area for r in rects)


def bounding_box(points: Iterable[Point]) -> tuple[int, int, int, int]:
    """(min_x, min_y, max_x, max_y) of a point set."""
    points = list(points)
    if not points:
        return (0, 0, 0, 0)
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))

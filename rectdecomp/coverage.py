"""
Coverage check for a decomposition.

Rasterises the polygon and the rectangles on the unit grid of the polygon's
bounding box and compares cell by cell. Integer coordinates make the unit
grid exact: every cell is either fully inside or fully outside the polygon
and each rectangle.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .shapes import Point, PointLike, Rect, as_points, bounding_box, polygon_area, total_area


@dataclass
class CoverageReport:
    """Cell counts comparing a polygon with a set of rectangles."""
    polygon_area: float
    rect_area: int
    uncovered: int    # polygon cells not covered by any rectangle
    overlapping: int  # cells covered by more than one rectangle
    outside: int      # rectangle cells lying outside the polygon

    @property
    def ok(self) -> bool:
        return self.uncovered == 0 and self.overlapping == 0 and self.outside == 0

    def __repr__(self):
        return (
            f"CoverageReport(ok={self.ok}, polygon_area={self.polygon_area:g}, "
            f"rect_area={self.rect_area}, uncovered={self.uncovered}, "
            f"overlapping={self.overlapping}, outside={self.outside})"
        )


def polygon_mask(points: list[Point]) -> tuple[np.ndarray, int, int]:
    """
    Inside/outside mask of a rectilinear polygon on its unit grid.

    Returns:
        (mask, min_x, min_y) where mask[row, col] tells whether the cell with
        lower-left corner (min_x + col, min_y + row) lies inside the polygon.
    """
    min_x, min_y, max_x, max_y = bounding_box(points)
    cx = np.arange(min_x, max_x) + 0.5
    cy = np.arange(min_y, max_y) + 0.5
    grid_x, grid_y = np.meshgrid(cx, cy)

    # Ray casting towards +x: only vertical sides can be crossed
    inside = np.zeros(grid_x.shape, dtype=bool)
    n = len(points)
    for i in range(n):
        p, q = points[i], points[(i + 1) % n]
        if p.x != q.x or p.y == q.y:
            continue
        lo, hi = min(p.y, q.y), max(p.y, q.y)
        crosses = (grid_y > lo) & (grid_y < hi) & (grid_x < p.x)
        inside ^= crosses
    return inside, min_x, min_y


def coverage_counts(rects: Iterable[Rect], shape: tuple[int, int], min_x: int, min_y: int) -> tuple[np.ndarray, int]:
    """
    Number of rectangles covering each cell of the grid.

    Returns:
        (counts, clipped) where clipped is the rectangle area falling outside
        the grid.
    """
    counts = np.zeros(shape, dtype=np.int32)
    rows, cols = shape
    clipped = 0
    for rect in rects:
        x0 = max(rect.min_x - min_x, 0)
        x1 = min(rect.max_x - min_x, cols)
        y0 = max(rect.min_y - min_y, 0)
        y1 = min(rect.max_y - min_y, rows)
        inside_area = max(x1 - x0, 0) * max(y1 - y0, 0)
        clipped += rect.area - inside_area
        if inside_area:
            counts[y0:y1, x0:x1] += 1
    return counts, clipped


def check_coverage(points: Iterable[PointLike], rects: Iterable[Rect]) -> CoverageReport:
    """
    Compare a polygon with the rectangles meant to tile it.

    Args:
        points: Polygon vertices (any winding).
        rects: Rectangles to check.

    Returns:
        CoverageReport; report.ok is True for an exact, non-overlapping tiling.
    """
    points = as_points(points)
    rects = list(rects)
    mask, min_x, min_y = polygon_mask(points)
    counts, clipped = coverage_counts(rects, mask.shape, min_x, min_y)

    uncovered = int(np.count_nonzero(mask & (counts == 0)))
    overlapping = int(np.count_nonzero(counts > 1))
    outside = int(counts[~mask].sum()) + clipped

    return CoverageReport(
        polygon_area=polygon_area(points),
        rect_area=total_area(rects),
        uncovered=uncovered,
        overlapping=overlapping,
        outside=outside,
    )

"""Unit tests for shapes module."""

import pytest

from rectdecomp.shapes import (
    Point,
    Rect,
    as_point,
    as_points,
    signed_area,
    polygon_area,
    ensure_clockwise,
    total_area,
    bounding_box,
)


class TestPoint:
    """Tests for Point."""

    def test_scan_order_by_y_then_x(self):
        """Points sort by y first, x breaks ties."""
        points = [Point(2, 1), Point(0, 2), Point(1, 1), Point(5, 0)]
        assert sorted(points) == [Point(5, 0), Point(1, 1), Point(2, 1), Point(0, 2)]

    def test_comparison(self):
        assert Point(9, 0) < Point(0, 1)
        assert Point(0, 1) < Point(1, 1)
        assert Point(1, 1) <= Point(1, 1)

    def test_unpacking(self):
        x, y = Point(3, 4)
        assert (x, y) == (3, 4)
        assert Point(3, 4).to_tuple() == (3, 4)

    def test_hashable(self):
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2

    def test_as_point(self):
        p = Point(1, 2)
        assert as_point(p) is p
        assert as_point((1, 2)) == p
        assert as_point([1, 2]) == p

    def test_as_points(self):
        assert as_points([(0, 0), [1, 2]]) == [Point(0, 0), Point(1, 2)]


class TestRect:
    """Tests for Rect."""

    def test_dimensions(self):
        r = Rect(Point(1, 2), Point(4, 6))
        assert r.width == 3
        assert r.height == 4
        assert r.area == 12
        assert r.bounds == (1, 2, 4, 6)

    def test_any_opposite_corners(self):
        """Corners in either order describe the same extent."""
        a = Rect(Point(4, 6), Point(1, 2))
        assert a.bounds == (1, 2, 4, 6)
        assert a.area == 12

    def test_corners_clockwise(self):
        r = Rect(Point(0, 0), Point(2, 1))
        assert r.corners() == [Point(0, 0), Point(0, 1), Point(2, 1), Point(2, 0)]
        assert signed_area(r.corners()) < 0

    def test_overlaps(self):
        a = Rect(Point(0, 0), Point(2, 2))
        assert a.overlaps(Rect(Point(1, 1), Point(3, 3)))
        assert not a.overlaps(Rect(Point(2, 0), Point(3, 2)))  # shared side
        assert not a.overlaps(Rect(Point(2, 2), Point(3, 3)))  # shared corner

    def test_degenerate_rect_has_no_area(self):
        assert Rect(Point(0, 0), Point(0, 5)).area == 0


class TestPolygonHelpers:
    """Tests for winding and area helpers."""

    def test_signed_area_ccw_positive(self):
        ccw = as_points([(0, 0), (2, 0), (2, 2), (0, 2)])
        assert signed_area(ccw) == pytest.approx(4.0)

    def test_signed_area_cw_negative(self):
        cw = as_points([(0, 0), (0, 2), (2, 2), (2, 0)])
        assert signed_area(cw) == pytest.approx(-4.0)

    def test_signed_area_degenerate(self):
        assert signed_area(as_points([(0, 0), (1, 1)])) == 0.0

    def test_polygon_area(self, l_shape_points):
        assert polygon_area(as_points(l_shape_points)) == pytest.approx(3.0)

    def test_ensure_clockwise_reverses_ccw(self, l_shape_ccw_points):
        result = ensure_clockwise(as_points(l_shape_ccw_points))
        assert signed_area(result) < 0
        assert result == list(reversed(as_points(l_shape_ccw_points)))

    def test_ensure_clockwise_keeps_cw(self, l_shape_points):
        points = as_points(l_shape_points)
        result = ensure_clockwise(points)
        assert result == points
        assert result is not points

    def test_total_area(self):
        rects = [Rect(Point(0, 0), Point(2, 1)), Rect(Point(1, 1), Point(2, 2))]
        assert total_area(rects) == 3
        assert total_area([]) == 0

    def test_bounding_box(self, l_shape_points):
        assert bounding_box(as_points(l_shape_points)) == (0, 0, 2, 2)
        assert bounding_box([]) == (0, 0, 0, 0)

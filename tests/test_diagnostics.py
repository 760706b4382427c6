"""Unit tests for diagnostics module."""

from dataclasses import FrozenInstanceError

import pytest

from rectdecomp.active import ActiveEdges, ActiveNodes
from rectdecomp.decomposer import Decomposer
from rectdecomp.diagnostics import (
    Snapshot,
    format_active_edges,
    format_active_nodes,
    format_snapshot,
)
from rectdecomp.edge_scans import EdgeScans
from rectdecomp.geometry import Geometry


class TestFormatting:
    """Tests for log formatting of the sweep state."""

    def test_active_nodes_marks_cursor(self, square_points):
        geometry = Geometry(square_points)
        nodes = ActiveNodes([0, 3, 1, 2])
        nodes.advance()
        text = format_active_nodes(geometry, nodes)
        assert text == "[ n0(0, 0), >n3(2, 0), n1(0, 2), n2(2, 2) ]"

    def test_active_edges(self, square_points):
        geometry = Geometry(square_points)
        text = format_active_edges(geometry, ActiveEdges([0, 1]))
        assert text == "[ e0(0, 0)->(0, 2), e1(2, 2)->(2, 0) ]"

    def test_active_edges_tags_candidates(self, square_points):
        geometry = Geometry(square_points)
        scans = EdgeScans(left_edge=0, left_cursor=1, right_edge=1, right_cursor=2)
        text = format_active_edges(geometry, ActiveEdges([0, 1]), scans)
        assert "L:e0" in text
        assert "R:e1" in text

    def test_snapshot(self, l_shape_points):
        decomposer = Decomposer(Geometry(l_shape_points))
        decomposer.run()
        text = format_snapshot(decomposer.geometry, decomposer.snapshot())
        lines = text.splitlines()
        assert lines[0] == "Decomposer {"
        assert lines[1].strip() == "scanline: 2"
        assert lines[-2].strip() == "rects: 2"
        assert lines[-1] == "}"

    def test_snapshot_is_frozen(self):
        snap = Snapshot(1, (0,), 0, (), 0, 0)
        with pytest.raises(FrozenInstanceError):
            snap.scanline = 2

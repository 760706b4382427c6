"""
Plain-text rendering of the sweep state for logs.

Only reads from the geometry and active sets; the decomposer runs the same
whether or not any of this is called.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .active import ActiveEdges, ActiveNodes
from .edge_scans import EdgeScans
from .geometry import Geometry, WallKind


@dataclass(frozen=True)
class Snapshot:
    """Copy of the decomposer state at one moment of the sweep."""
    scanline: Optional[int]
    active_nodes: tuple[int, ...]
    node_cursor: int
    active_edges: tuple[int, ...]
    edge_cursor: int
    rect_count: int


def format_active_nodes(geometry: Geometry, active_nodes: ActiveNodes) -> str:
    """Nodes with their points; the node at the cursor is marked with '>'."""
    parts = []
    for index, node_id in enumerate(active_nodes.items):
        mark = ">" if index == active_nodes.cursor else ""
        parts.append(f"{mark}{geometry.node(node_id)!r}")
    return "[ " + ", ".join(parts) + " ]"


def format_active_edges(
    geometry: Geometry,
    active_edges: ActiveEdges,
    scans: Optional[EdgeScans] = None
) -> str:
    """
    Active edges with their endpoints.

    Candidates of an ongoing pairing attempt are tagged 'L:' and 'R:'.
    """
    parts = []
    for index, edge_id in enumerate(active_edges.items):
        edge = geometry.edge(edge_id)
        tag = ""
        if scans is not None:
            # candidate cursors point one past the candidate
            kind = scans.matches_cursor(index + 1) or scans.matches_edge(edge_id)
            if kind is WallKind.LEFT:
                tag = "L:"
            elif kind is WallKind.RIGHT:
                tag = "R:"
        source = geometry.source(edge_id).point
        target = geometry.target(edge_id).point
        parts.append(f"{tag}e{edge.id}{source!r}->{target!r}")
    return "[ " + ", ".join(parts) + " ]"


def format_snapshot(geometry: Geometry, snapshot: Snapshot) -> str:
    """Multi-line description of a snapshot."""
    nodes = ActiveNodes(list(snapshot.active_nodes))
    for _ in range(snapshot.node_cursor):
        nodes.advance()
    edges = ActiveEdges(list(snapshot.active_edges))
    for _ in range(snapshot.edge_cursor):
        edges.advance()

    lines = [
        "Decomposer {",
        f"    scanline: {snapshot.scanline}",
        f"    active_nodes: {format_active_nodes(geometry, nodes)}",
        f"    active_edges: {format_active_edges(geometry, edges)}",
        f"    rects: {snapshot.rect_count}",
        "}",
    ]
    return "\n".join(lines)

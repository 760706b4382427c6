"""
Boundary graph of a rectilinear polygon.

Nodes are polygon vertices; only vertical boundary segments are stored as
edges, horizontal runs stay implicit. Nodes and edges live in append-only
lists and reference each other by index, so an ID handed out once stays valid
while the sweep keeps adding nodes and edges.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from .errors import IsAlreadySimple, NotEnoughPoints
from .shapes import Point, PointLike, as_points, ensure_clockwise


# Type aliases
NodeId = int
EdgeId = int


class WallKind(Enum):
    """Direction of a vertical wall in boundary order."""
    LEFT = "left"    # source below target
    RIGHT = "right"  # source above target

    @classmethod
    def between(cls, source: Point, target: Point) -> Optional["WallKind"]:
        """Wall kind of the segment source -> target, None if it is horizontal."""
        if source.y < target.y:
            return cls.LEFT
        if source.y > target.y:
            return cls.RIGHT
        return None


@dataclass
class Node:
    """A boundary vertex with at most one incoming and one outgoing vertical edge."""
    id: NodeId
    point: Point
    incoming: Optional[EdgeId] = None
    outgoing: Optional[EdgeId] = None

    @property
    def x(self) -> int:
        return self.point.x

    @property
    def y(self) -> int:
        return self.point.y

    def set_incoming(self, edge_id: EdgeId) -> None:
        assert self.incoming is None, f"n{self.id} already has incoming edge e{self.incoming}"
        self.incoming = edge_id

    def set_outgoing(self, edge_id: EdgeId) -> None:
        assert self.outgoing is None, f"n{self.id} already has outgoing edge e{self.outgoing}"
        self.outgoing = edge_id

    def take_incoming(self) -> Optional[EdgeId]:
        edge_id, self.incoming = self.incoming, None
        return edge_id

    def take_outgoing(self) -> Optional[EdgeId]:
        edge_id, self.outgoing = self.outgoing, None
        return edge_id

    def edge_ids(self) -> list[EdgeId]:
        """Incident edges, incoming first."""
        return [e for e in (self.incoming, self.outgoing) if e is not None]

    def __repr__(self):
        return f"n{self.id}{self.point!r}"


@dataclass
class Edge:
    """
    A vertical wall between two nodes.

    Coordinates are resolved through the owning Geometry since the edge only
    stores node IDs.
    """
    id: EdgeId
    source: NodeId
    target: NodeId
    kind: WallKind

    def source_x(self, geometry: "Geometry") -> int:
        return geometry.node(self.source).x

    def source_y(self, geometry: "Geometry") -> int:
        return geometry.node(self.source).y

    def target_y(self, geometry: "Geometry") -> int:
        return geometry.node(self.target).y

    def min_y(self, geometry: "Geometry") -> int:
        return min(self.source_y(geometry), self.target_y(geometry))

    def max_y(self, geometry: "Geometry") -> int:
        return max(self.source_y(geometry), self.target_y(geometry))

    def contains(self, geometry: "Geometry", scanline: int) -> bool:
        """Scanline lies within the edge's y-range, endpoints included."""
        return self.min_y(geometry) <= scanline <= self.max_y(geometry)

    def strictly_contains(self, geometry: "Geometry", scanline: int) -> bool:
        """Scanline cuts through the edge's interior, not touching an endpoint."""
        return self.min_y(geometry) < scanline < self.max_y(geometry)

    def __repr__(self):
        return f"e{self.id}[n{self.source}->n{self.target} {self.kind.value}]"


# =============================================================================
# Geometry
# =============================================================================

class Geometry:
    """
    Arenas of nodes and vertical edges for one polygon.

    Example:
        >>> geometry = Geometry([(0, 0), (0, 1), (1, 1), (1, 0)])
        >>> geometry.len_nodes, geometry.len_edges
        (4, 2)
    """

    def __init__(self, points: Iterable[PointLike], normalize_winding: bool = True):
        """
        Build nodes for all points and vertical edges between consecutive points.

        Args:
            points: Polygon vertices in clockwise order. Must be more than 3.
            normalize_winding: Reverse counter-clockwise input (y axis up) so that
                left walls always have the interior on their right.

        Raises:
            IsAlreadySimple: Exactly 3 points.
            NotEnoughPoints: Fewer than 3 points.
        """
        points = as_points(points)
        if len(points) < 3:
            raise NotEnoughPoints(len(points))
        if len(points) == 3:
            raise IsAlreadySimple(len(points))
        if normalize_winding:
            points = ensure_clockwise(points)

        self._nodes: list[Node] = []
        self._edges: list[Edge] = []

        for point in points:
            self.new_node(point)

        n = len(points)
        for s in range(n):
            t = (s + 1) % n
            kind = WallKind.between(points[s], points[t])
            if kind is not None:
                self.new_edge(s, t, kind)

        self.boundary_len = n

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def new_node(
        self,
        point: Point,
        incoming: Optional[EdgeId] = None,
        outgoing: Optional[EdgeId] = None
    ) -> NodeId:
        """Append a node and return its ID."""
        node_id = len(self._nodes)
        self._nodes.append(Node(node_id, point, incoming, outgoing))
        return node_id

    def new_edge(self, source: NodeId, target: NodeId, kind: WallKind) -> EdgeId:
        """
        Append an edge and hook it into its endpoints.

        The source's outgoing slot and the target's incoming slot must be empty.
        """
        edge_id = len(self._edges)
        self._edges.append(Edge(edge_id, source, target, kind))
        self._nodes[source].set_outgoing(edge_id)
        self._nodes[target].set_incoming(edge_id)
        return edge_id

    def split(self, edge_id: EdgeId, scanline: int) -> EdgeId:
        """
        Split a wall where the scanline crosses it.

        The endpoint below the scanline (source of a left wall, target of a
        right wall) is detached from the edge and replaced by a new node on
        the scanline. The edge keeps its ID and now covers the part above the
        scanline. A new edge of the same kind joins the detached endpoint and
        the new node, covering the part below.

        Args:
            edge_id: Wall to split; the scanline should lie strictly inside it.
            scanline: y coordinate of the cut.

        Returns:
            ID of the new edge below the scanline.
        """
        edge = self._edges[edge_id]
        assert edge.strictly_contains(self, scanline), (
            f"cannot split {edge!r} at y={scanline}"
        )

        if edge.kind is WallKind.LEFT:
            old_id = edge.source
            old_node = self._nodes[old_id]
            new_id = self.new_node(Point(old_node.x, scanline))
            edge.source = new_id
            old_node.take_outgoing()
            self._nodes[new_id].set_outgoing(edge_id)
            return self.new_edge(old_id, new_id, WallKind.LEFT)

        old_id = edge.target
        old_node = self._nodes[old_id]
        new_id = self.new_node(Point(old_node.x, scanline))
        edge.target = new_id
        old_node.take_incoming()
        self._nodes[new_id].set_incoming(edge_id)
        return self.new_edge(new_id, old_id, WallKind.RIGHT)

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    def node(self, node_id: NodeId) -> Node:
        return self._nodes[node_id]

    def edge(self, edge_id: EdgeId) -> Edge:
        return self._edges[edge_id]

    def source(self, edge_id: EdgeId) -> Node:
        return self._nodes[self._edges[edge_id].source]

    def target(self, edge_id: EdgeId) -> Node:
        return self._nodes[self._edges[edge_id].target]

    @property
    def len_nodes(self) -> int:
        return len(self._nodes)

    @property
    def len_edges(self) -> int:
        return len(self._edges)

    def node_ids(self) -> range:
        return range(len(self._nodes))

    def edge_ids(self) -> range:
        return range(len(self._edges))

    def boundary_node_ids(self) -> range:
        """Nodes created from the input points (split nodes excluded)."""
        return range(self.boundary_len)

    def iter_nodes(self) -> Iterator[Node]:
        return iter(self._nodes)

    def iter_edges(self) -> Iterator[Edge]:
        return iter(self._edges)

    def points(self) -> list[Point]:
        """Boundary points in (normalised) boundary order."""
        return [self._nodes[i].point for i in self.boundary_node_ids()]

    def __repr__(self):
        return f"Geometry({self.len_nodes} nodes, {self.len_edges} edges)"

"""
Active working sets of the sweep.

Both sets are lists of arena IDs with an explicit cursor instead of a Python
iterator: the sweep needs to look ahead without consuming, consume only when a
condition holds, and read at computed offsets from a remembered position.
"""

from __future__ import annotations
from typing import Callable, Optional

from .geometry import EdgeId, Geometry, NodeId

Cursor = int


class ActiveSet:
    """Ordered list of IDs with a cursor."""

    def __init__(self, items: Optional[list[int]] = None):
        self._items: list[int] = list(items) if items else []
        self._cursor: Cursor = 0

    @property
    def items(self) -> tuple[int, ...]:
        """Read-only snapshot of the IDs."""
        return tuple(self._items)

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: int) -> bool:
        return item in self._items

    def peek_at(self, index: Cursor) -> Optional[int]:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def peek(self) -> Optional[int]:
        return self.peek_at(self._cursor)

    def advance(self) -> None:
        self._cursor += 1

    def next(self) -> Optional[int]:
        """Return the item at the cursor and move past it."""
        item = self.peek()
        if item is not None:
            self.advance()
        return item

    def next_if(self, predicate: Callable[[int], bool]) -> Optional[int]:
        """Consume the item at the cursor only if the predicate holds for it."""
        item = self.peek()
        if item is not None and predicate(item):
            self.advance()
            return item
        return None

    def reset_cursor(self) -> None:
        self._cursor = 0

    def finished(self) -> bool:
        return self._cursor >= len(self._items)

    def __repr__(self):
        return f"{type(self).__name__}({self._items}, cursor={self._cursor})"


class ActiveNodes(ActiveSet):
    """
    Boundary nodes in scan order.

    Filled once, sorted once, then consumed front to back.
    """

    def insert(self, node_id: NodeId) -> None:
        self._items.append(node_id)

    def sort(self, geometry: Geometry) -> None:
        self._items.sort(key=lambda node_id: geometry.node(node_id).point.sort_key())

    def scanline(self, geometry: Geometry) -> Optional[int]:
        """y of the node at the cursor, None once all nodes are consumed."""
        node_id = self.peek()
        if node_id is None:
            return None
        return geometry.node(node_id).y


class ActiveEdges(ActiveSet):
    """Walls crossing or touching the scanline, sorted by source x."""

    def insert(self, edge_id: EdgeId, geometry: Geometry) -> None:
        """
        Insert before the first edge (from the cursor on) with a greater source x.

        An edge that is already active is left where it is. The cursor ends up
        on the inserted edge so that a run of inserts in ascending x only
        scans the list once.
        """
        if edge_id in self._items:
            return

        x = geometry.edge(edge_id).source_x(geometry)
        index = min(self._cursor, len(self._items))
        while index > 0 and x < self._source_x(index - 1, geometry):
            index -= 1

        while index < len(self._items):
            if x < self._source_x(index, geometry):
                break
            index += 1

        self._items.insert(index, edge_id)
        self._cursor = index

    def insert_node_edges(self, node_id: NodeId, geometry: Geometry) -> None:
        """Insert the incoming and outgoing edges of a node, if any."""
        node = geometry.node(node_id)
        for edge_id in node.edge_ids():
            self.insert(edge_id, geometry)

    def retain_if(self, predicate: Callable[[EdgeId], bool]) -> None:
        """Drop every edge for which the predicate is false, keeping order."""
        self._items = [edge_id for edge_id in self._items if predicate(edge_id)]

    def is_sorted(self, geometry: Geometry) -> bool:
        xs = [self._source_x(i, geometry) for i in range(len(self._items))]
        return all(a <= b for a, b in zip(xs, xs[1:]))

    def _source_x(self, index: Cursor, geometry: Geometry) -> int:
        return geometry.edge(self._items[index]).source_x(geometry)

"""
Pairing of left and right walls on one scanline.

EdgeScans walks the active edges from the current cursor, picks the next
left wall and the right wall that closes it, splits whichever of them the
scanline cuts through, and emits the rectangle between them. Each phase
returns a ScanResult; CONTINUE_SPLIT hands over to the next phase, every
other outcome ends the call.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Optional

from .active import ActiveEdges, Cursor
from .geometry import EdgeId, Geometry, WallKind
from .shapes import Rect

logger = logging.getLogger(__name__)


class ScanOutcome(Enum):
    RETURN_RECTS = "return_rects"      # no further left wall on this scanline
    CONTINUE_LOOP = "continue_loop"    # walls are adjacent, restart pairing
    CONTINUE_SPLIT = "continue_split"  # go on with the next phase
    NEW_RECT = "new_rect"              # a rectangle was produced
    UNPAIRED_LEFT = "unpaired_left"    # left wall without a right wall


@dataclass
class ScanResult:
    outcome: ScanOutcome
    scans: Optional["EdgeScans"] = None
    rect: Optional[Rect] = None

    def __repr__(self):
        if self.rect is not None:
            return f"ScanResult({self.outcome.name}, {self.rect!r})"
        return f"ScanResult({self.outcome.name})"


@dataclass
class EdgeScans:
    """
    Candidate walls for one pairing attempt.

    Cursors are recorded after the candidate was consumed, i.e. they point one
    past the candidate in the active edge list.
    """
    left_edge: Optional[EdgeId] = None
    left_cursor: Optional[Cursor] = None
    right_edge: Optional[EdgeId] = None
    right_cursor: Optional[Cursor] = None

    def matches_edge(self, edge_id: EdgeId) -> Optional[WallKind]:
        """Which candidate the edge is, if any."""
        if self.left_edge == edge_id:
            return WallKind.LEFT
        if self.right_edge == edge_id:
            return WallKind.RIGHT
        return None

    def matches_cursor(self, cursor: Cursor) -> Optional[WallKind]:
        """Which candidate was consumed just before `cursor`, if any."""
        if self.left_cursor == cursor:
            return WallKind.LEFT
        if self.right_cursor == cursor:
            return WallKind.RIGHT
        return None

    # -------------------------------------------------------------------------
    # Phases
    # -------------------------------------------------------------------------

    def scan_for_edges(
        self,
        geometry: Geometry,
        active_edges: ActiveEdges,
        scanline: int
    ) -> ScanResult:
        """
        Find the next left wall reaching below the scanline and the right wall after it.
        """
        while True:
            edge_id = active_edges.next()
            if edge_id is None:
                return ScanResult(ScanOutcome.RETURN_RECTS, self)
            edge = geometry.edge(edge_id)
            if edge.kind is WallKind.LEFT and edge.source_y(geometry) != scanline:
                self.left_edge = edge_id
                self.left_cursor = active_edges.cursor
                break

        while True:
            edge_id = active_edges.next()
            if edge_id is None:
                return ScanResult(ScanOutcome.UNPAIRED_LEFT, self)
            edge = geometry.edge(edge_id)
            if edge.kind is WallKind.RIGHT and edge.target_y(geometry) != scanline:
                self.right_edge = edge_id
                self.right_cursor = active_edges.cursor
                break

        return ScanResult(ScanOutcome.CONTINUE_SPLIT, self)

    def check_both_splittable(self, geometry: Geometry, scanline: int) -> ScanResult:
        """
        Skip the pair when both walls pass straight through the scanline.

        If both walls strictly contain the scanline and nothing lies between
        them in the active list, the region between them is untouched by this
        scanline. Edges between them can only be walls starting on the
        scanline (a notch coming down from above), in which case both walls
        get split.
        """
        left = geometry.edge(self.left_edge)
        right = geometry.edge(self.right_edge)
        if left.strictly_contains(geometry, scanline) and right.strictly_contains(geometry, scanline):
            if self.left_cursor + 1 == self.right_cursor:
                return ScanResult(ScanOutcome.CONTINUE_LOOP, self)
            logger.debug(
                "walls e%d and e%d enclose %d edge(s) starting at y=%d",
                self.left_edge, self.right_edge,
                self.right_cursor - self.left_cursor - 1, scanline,
            )
        return ScanResult(ScanOutcome.CONTINUE_SPLIT, self)

    def split_and_emit(self, geometry: Geometry, scanline: int) -> ScanResult:
        """Split the walls the scanline cuts through and emit the rectangle below it."""
        if geometry.edge(self.left_edge).strictly_contains(geometry, scanline):
            self.left_edge = geometry.split(self.left_edge, scanline)
            logger.debug("split left wall at y=%d -> e%d", scanline, self.left_edge)

        if geometry.edge(self.right_edge).strictly_contains(geometry, scanline):
            self.right_edge = geometry.split(self.right_edge, scanline)
            logger.debug("split right wall at y=%d -> e%d", scanline, self.right_edge)

        rect = Rect(
            geometry.source(self.left_edge).point,
            geometry.source(self.right_edge).point,
        )
        return ScanResult(ScanOutcome.NEW_RECT, self, rect)

    def scan_and_split(
        self,
        geometry: Geometry,
        active_edges: ActiveEdges,
        scanline: int
    ) -> ScanResult:
        """Run all three phases, stopping at the first one that does not continue."""
        result = self.scan_for_edges(geometry, active_edges, scanline)
        if result.outcome is not ScanOutcome.CONTINUE_SPLIT:
            return result

        result = self.check_both_splittable(geometry, scanline)
        if result.outcome is not ScanOutcome.CONTINUE_SPLIT:
            return result

        return self.split_and_emit(geometry, scanline)

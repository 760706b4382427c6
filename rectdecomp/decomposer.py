"""
Scanline decomposition of a rectilinear polygon into rectangles.

Algorithm:
1. Build the boundary graph: one node per vertex, one edge per vertical side
2. Sort all nodes by (y, x); they are the events of the sweep
3. For every distinct y (the scanline), bottom to top:
   a. Drop active edges whose y-range no longer reaches the scanline
   b. Add the edges of all nodes lying on the scanline, in x order
   c. Pair left and right walls from left to right; for each pair, split the
      walls the scanline cuts through and emit the rectangle below the scanline
4. Stop when every node has been consumed

Rectangles come out in sweep order: by scanline, then left to right.
"""

from __future__ import annotations
import logging
import os
from typing import Iterable, Optional

from .active import ActiveEdges, ActiveNodes
from .config import DecompConfig
from .diagnostics import Snapshot, format_active_edges, format_snapshot
from .edge_scans import EdgeScans, ScanOutcome
from .errors import FailedScanlineUpdate, UnpairedWallError
from .geometry import Geometry
from .shapes import PointLike, Rect

logger = logging.getLogger(__name__)


def _snapshots_enabled(config: DecompConfig) -> bool:
    return config.log_snapshots or bool(os.getenv("RECTDECOMP_DEBUG"))


class Decomposer:
    """
    Owns the sweep state for one polygon.

    Example:
        >>> rects = Decomposer.decompose([(0, 0), (0, 1), (1, 1), (1, 2), (2, 2), (2, 0)])
        >>> len(rects)
        2
    """

    def __init__(self, geometry: Geometry, config: Optional[DecompConfig] = None):
        self.config = config or DecompConfig()
        self._geometry = geometry
        self._active_nodes = ActiveNodes()
        for node_id in geometry.boundary_node_ids():
            self._active_nodes.insert(node_id)
        self._active_nodes.sort(geometry)
        self._active_edges = ActiveEdges()
        self._scanline: Optional[int] = None
        self._rects: list[Rect] = []
        self._log_snapshots = _snapshots_enabled(self.config)

    @classmethod
    def decompose(
        cls,
        points: Iterable[PointLike],
        config: Optional[DecompConfig] = None
    ) -> list[Rect]:
        """
        Decompose a rectilinear polygon into rectangles.

        Args:
            points: Polygon vertices in clockwise order, at least 4.
            config: Optional settings; defaults are used when omitted.

        Returns:
            Rectangles whose union is the polygon interior, in sweep order.

        Raises:
            NotEnoughPoints: Fewer than 3 points.
            IsAlreadySimple: Exactly 3 points.
            FailedScanlineUpdate: No active node was left when one was needed.
            UnpairedWallError: A wall could not be paired (strict_pairing only).
        """
        config = config or DecompConfig()
        geometry = Geometry(points, normalize_winding=config.normalize_winding)
        return cls(geometry, config).run()

    # -------------------------------------------------------------------------
    # Read-only accessors
    # -------------------------------------------------------------------------

    @property
    def geometry(self) -> Geometry:
        return self._geometry

    @property
    def active_nodes(self) -> ActiveNodes:
        return self._active_nodes

    @property
    def active_edges(self) -> ActiveEdges:
        return self._active_edges

    @property
    def scanline(self) -> Optional[int]:
        return self._scanline

    @property
    def rects(self) -> list[Rect]:
        return list(self._rects)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            scanline=self._scanline,
            active_nodes=self._active_nodes.items,
            node_cursor=self._active_nodes.cursor,
            active_edges=self._active_edges.items,
            edge_cursor=self._active_edges.cursor,
            rect_count=len(self._rects),
        )

    # -------------------------------------------------------------------------
    # Sweep
    # -------------------------------------------------------------------------

    def run(self) -> list[Rect]:
        """Sweep until every active node is consumed and return the rectangles."""
        logger.debug(
            "decomposing %d nodes, %d edges",
            self._geometry.len_nodes, self._geometry.len_edges
        )
        while True:
            self.update_scanline()
            self.purge_active_edges()
            self.add_active_edges()
            self._log_state("after adding active edges")
            self.scan_edges()
            self._log_state("after scanning edges")
            if self._active_nodes.finished():
                break

        logger.debug("decomposition produced %d rectangles", len(self._rects))
        return list(self._rects)

    def update_scanline(self) -> int:
        scanline = self._active_nodes.scanline(self._geometry)
        if scanline is None:
            raise FailedScanlineUpdate(self._active_nodes.cursor, len(self._active_nodes))
        self._scanline = scanline
        logger.debug("scanline y=%d", scanline)
        return scanline

    def purge_active_edges(self) -> None:
        """Drop edges whose y-range does not reach the scanline anymore."""
        geometry, scanline = self._geometry, self._scanline
        self._active_edges.retain_if(
            lambda edge_id: geometry.edge(edge_id).contains(geometry, scanline)
        )

    def add_active_edges(self) -> None:
        """Consume all nodes on the scanline and activate their edges."""
        geometry, scanline = self._geometry, self._scanline
        self._active_edges.reset_cursor()
        while True:
            node_id = self._active_nodes.next_if(
                lambda node_id: geometry.node(node_id).y == scanline
            )
            if node_id is None:
                break
            self._active_edges.insert_node_edges(node_id, geometry)

    def scan_edges(self) -> None:
        """Pair walls on the current scanline until the active edges are exhausted."""
        self._active_edges.reset_cursor()
        while not self._active_edges.finished():
            scans = EdgeScans()
            result = scans.scan_and_split(self._geometry, self._active_edges, self._scanline)

            if result.outcome is ScanOutcome.NEW_RECT:
                logger.debug("rect %r", result.rect)
                self._rects.append(result.rect)
            elif result.outcome is ScanOutcome.CONTINUE_LOOP:
                continue
            elif result.outcome is ScanOutcome.RETURN_RECTS:
                break
            elif result.outcome is ScanOutcome.UNPAIRED_LEFT:
                self._handle_unpaired(scans)
                break

    def _handle_unpaired(self, scans: EdgeScans) -> None:
        if self.config.strict_pairing:
            raise UnpairedWallError(self._scanline, scans.left_edge)
        logger.warning(
            "no right wall after e%s on scanline y=%s, skipping rest of scanline: %s",
            scans.left_edge,
            self._scanline,
            format_active_edges(self._geometry, self._active_edges, scans),
        )

    def _log_state(self, label: str) -> None:
        if self._log_snapshots and logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s:\n%s", label, format_snapshot(self._geometry, self.snapshot()))


def decompose(
    points: Iterable[PointLike],
    config: Optional[DecompConfig] = None
) -> list[Rect]:
    """Decompose a rectilinear polygon into rectangles. See Decomposer.decompose."""
    return Decomposer.decompose(points, config)

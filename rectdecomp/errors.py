"""
Errors raised by the decomposition.

All of them end the current decompose() call; no partial result is returned.
"""

from typing import Optional


class DecompositionError(Exception):
    """Base class for decomposition failures."""


class NotEnoughPoints(DecompositionError):
    """Fewer than 3 points: not enough to define a polygon."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"need at least 3 points to define a polygon, got {count}")


class IsAlreadySimple(DecompositionError):
    """
    Exactly 3 points.

    A valid but trivial shape that needs no decomposition. What to do with it
    is up to the caller; the CLI reports it as an error.
    """

    def __init__(self, count: int = 3):
        self.count = count
        super().__init__(f"{count} points describe a trivial shape, nothing to decompose")


class FailedScanlineUpdate(DecompositionError):
    """The sweep needed the next scanline but no active node was left."""

    def __init__(self, cursor: int, remaining: int):
        self.cursor = cursor
        self.remaining = remaining
        super().__init__(
            f"no active node at cursor {cursor} ({remaining} active nodes in total)"
        )


class UnpairedWallError(DecompositionError):
    """A left wall found on a scanline had no right wall after it (strict mode)."""

    def __init__(self, scanline: int, left_edge: Optional[int]):
        self.scanline = scanline
        self.left_edge = left_edge
        super().__init__(
            f"left wall e{left_edge} has no matching right wall on scanline y={scanline}"
        )

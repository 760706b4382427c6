"""
rectdecomp - decompose rectilinear polygons into rectangles

A vertical sweep over the polygon's vertices pairs left and right walls and
emits the rectangles between them, splitting walls where the scanline cuts
through them.
"""

__version__ = "0.1.0"

from .config import DecompConfig
from .coverage import CoverageReport, check_coverage
from .decomposer import Decomposer, decompose
from .errors import (
    DecompositionError,
    FailedScanlineUpdate,
    IsAlreadySimple,
    NotEnoughPoints,
    UnpairedWallError,
)
from .geometry import Edge, Geometry, Node, WallKind
from .shapes import Point, Rect

__all__ = [
    "DecompConfig",
    "CoverageReport",
    "check_coverage",
    "Decomposer",
    "decompose",
    "DecompositionError",
    "FailedScanlineUpdate",
    "IsAlreadySimple",
    "NotEnoughPoints",
    "UnpairedWallError",
    "Edge",
    "Geometry",
    "Node",
    "WallKind",
    "Point",
    "Rect",
]

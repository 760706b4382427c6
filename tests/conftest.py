"""Pytest fixtures for rectdecomp tests."""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# Polygons in clockwise order (y up) with their expected decomposition,
# rectangles given as (first corner, second corner) in sweep order.
SHAPES = {
    "rectangle": (
        [(0, 0), (0, 2), (3, 2), (3, 0)],
        [((0, 0), (3, 2))],
    ),
    "l_shape": (
        [(0, 0), (0, 1), (1, 1), (1, 2), (2, 2), (2, 0)],
        [((0, 0), (2, 1)), ((1, 1), (2, 2))],
    ),
    "u_shape": (
        [(0, 0), (0, 2), (1, 2), (1, 1), (2, 1), (2, 2), (3, 2), (3, 0)],
        [((0, 0), (3, 1)), ((0, 1), (1, 2)), ((2, 1), (3, 2))],
    ),
    "inverted_u": (
        [(0, 0), (0, 2), (3, 2), (3, 0), (2, 0), (2, 1), (1, 1), (1, 0)],
        [((0, 0), (1, 1)), ((2, 0), (3, 1)), ((0, 1), (3, 2))],
    ),
    "z_shape": (
        [(0, 0), (0, 1), (1, 1), (1, 2), (3, 2), (3, 1), (2, 1), (2, 0)],
        [((0, 0), (2, 1)), ((1, 1), (3, 2))],
    ),
    "cross": (
        [(1, 0), (1, 1), (0, 1), (0, 2), (1, 2), (1, 3),
         (2, 3), (2, 2), (3, 2), (3, 1), (2, 1), (2, 0)],
        [((1, 0), (2, 1)), ((0, 1), (3, 2)), ((1, 2), (2, 3))],
    ),
    "staircase": (
        [(0, 0), (0, 3), (1, 3), (1, 2), (2, 2), (2, 1), (3, 1), (3, 0)],
        [((0, 0), (3, 1)), ((0, 1), (2, 2)), ((0, 2), (1, 3))],
    ),
    "comb": (
        [(0, 0), (0, 3), (1, 3), (1, 2), (2, 2), (2, 3), (3, 3),
         (3, 1), (4, 1), (4, 3), (5, 3), (5, 0)],
        [((0, 0), (5, 1)), ((0, 1), (3, 2)), ((0, 2), (1, 3)),
         ((2, 2), (3, 3)), ((4, 1), (5, 3))],
    ),
    "two_notches": (
        [(0, 0), (0, 2), (1, 2), (1, 1), (2, 1), (2, 2), (3, 2),
         (3, 1), (4, 1), (4, 2), (5, 2), (5, 0)],
        [((0, 0), (5, 1)), ((0, 1), (1, 2)), ((2, 1), (3, 2)), ((4, 1), (5, 2))],
    ),
    "collinear_left_wall": (
        [(0, 0), (0, 1), (0, 2), (2, 2), (2, 0)],
        [((0, 0), (2, 1)), ((0, 1), (2, 2))],
    ),
}


@pytest.fixture
def shapes() -> dict:
    """All test polygons keyed by name."""
    return SHAPES


@pytest.fixture
def l_shape_points() -> list:
    """L-shape: 2x1 base with a 1x1 block on its right half."""
    return list(SHAPES["l_shape"][0])


@pytest.fixture
def l_shape_ccw_points() -> list:
    """Same L-shape listed counter-clockwise."""
    return [(0, 0), (2, 0), (2, 2), (1, 2), (1, 1), (0, 1)]


@pytest.fixture
def square_points() -> list:
    return [(0, 0), (0, 2), (2, 2), (2, 0)]


@pytest.fixture
def polygon_txt(tmp_path, l_shape_points) -> Path:
    """L-shape written as a text polygon file."""
    path = tmp_path / "l_shape.txt"
    lines = ["# L-shape"] + [f"{x} {y}" for x, y in l_shape_points]
    path.write_text("\n".join(lines) + "\n")
    return path

"""
Rendering of a polygon and its rectangles with matplotlib.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .shapes import Point, PointLike, Rect, as_points, bounding_box


COLORS = ['cyan', 'lightgreen', 'orange', 'pink', 'yellow', 'lightblue', 'salmon']


def plot_decomposition(
    points: Iterable[PointLike],
    rects: Iterable[Rect],
    filename: Path | str,
    title: Optional[str] = None,
    dpi: int = 150,
    show_labels: bool = True
) -> Path:
    """
    Plot the polygon outline next to the rectangles it was split into.

    Args:
        points: Polygon vertices.
        rects: Decomposition of the polygon.
        filename: Output image path (format from the suffix, e.g. .png).
        title: Figure title.
        dpi: Output resolution.
        show_labels: Number each rectangle in sweep order.

    Returns:
        Path of the written image.
    """
    points: list[Point] = as_points(points)
    rects = list(rects)
    filename = Path(filename)

    fig, axes = plt.subplots(1, 2, figsize=(14, 7))

    # Left plot: polygon
    ax1 = axes[0]
    closed = points + [points[0]]
    xs = [p.x for p in closed]
    ys = [p.y for p in closed]
    ax1.fill(xs, ys, alpha=0.3, color='blue')
    ax1.plot(xs, ys, 'b-', linewidth=2, label='Outline')
    for i, p in enumerate(points):
        ax1.plot(p.x, p.y, 'ko', markersize=4)
        if show_labels:
            ax1.annotate(str(i), (p.x, p.y), textcoords='offset points', xytext=(4, 4), fontsize=8)
    ax1.set_title(f'Polygon ({len(points)} vertices)')
    ax1.legend(loc='upper right')

    # Right plot: rectangles
    ax2 = axes[1]
    for i, rect in enumerate(rects):
        color = COLORS[i % len(COLORS)]
        ax2.add_patch(Rectangle(
            (rect.min_x, rect.min_y), rect.width, rect.height,
            facecolor=color, alpha=0.6, edgecolor='black', linewidth=1.5
        ))
        if show_labels:
            ax2.text(
                rect.min_x + rect.width / 2, rect.min_y + rect.height / 2, str(i),
                ha='center', va='center', fontsize=9
            )
    ax2.plot(xs, ys, 'b--', linewidth=1, alpha=0.5)
    ax2.set_title(f'Rectangles ({len(rects)})')

    min_x, min_y, max_x, max_y = bounding_box(points)
    margin = max(max_x - min_x, max_y - min_y, 1) * 0.05
    for ax in axes:
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)
        ax.set_xlim(min_x - margin, max_x + margin)
        ax.set_ylim(min_y - margin, max_y + margin)

    if title:
        plt.suptitle(title)
    plt.tight_layout()
    plt.savefig(filename, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
    return filename

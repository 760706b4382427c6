"""
Reading polygons and writing rectangles.

Supported polygon files:
- JSON: {"points": [[x, y], ...]} or a bare list of [x, y] pairs
- Text: one point per line, "x y" or "x,y"; '#' starts a comment
"""

from __future__ import annotations
import json
from pathlib import Path
import re

from .shapes import Point, Rect


def _to_int(value, where: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{where}: expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and re.fullmatch(r"[+-]?\d+", value.strip()):
        return int(value)
    raise ValueError(f"{where}: expected an integer, got {value!r}")


def points_from_json(data) -> list[Point]:
    """Points from parsed JSON (dict with 'points' or a list of pairs)."""
    if isinstance(data, dict):
        if "points" not in data:
            raise ValueError("JSON object has no 'points' entry")
        data = data["points"]
    if not isinstance(data, list):
        raise ValueError(f"expected a list of points, got {type(data).__name__}")

    points = []
    for i, item in enumerate(data):
        if isinstance(item, dict):
            pair = (item.get("x"), item.get("y"))
        else:
            pair = item
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ValueError(f"point {i}: expected [x, y], got {item!r}")
        points.append(Point(_to_int(pair[0], f"point {i}"), _to_int(pair[1], f"point {i}")))
    return points


def parse_points_text(text: str) -> list[Point]:
    """Points from plain text, one 'x y' or 'x,y' pair per line."""
    points = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.split('#', 1)[0].strip()
        if not line:
            continue
        fields = [f for f in re.split(r"[,\s]+", line) if f]
        if len(fields) != 2:
            raise ValueError(f"line {line_no}: expected 'x y', got {raw.strip()!r}")
        where = f"line {line_no}"
        points.append(Point(_to_int(fields[0], where), _to_int(fields[1], where)))
    return points


def load_points(filepath: Path | str) -> list[Point]:
    """
    Load polygon points from a JSON or text file.

    Files ending in .json are parsed as JSON, everything else as text.
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        content = f.read()

    if filepath.suffix.lower() == '.json':
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"{filepath}: invalid JSON: {e}") from e
        return points_from_json(data)
    return parse_points_text(content)


def rects_to_dict(rects: list[Rect]) -> dict:
    """Serializable form of a decomposition."""
    return {
        "count": len(rects),
        "area": sum(r.area for r in rects),
        "rects": [
            {
                "min": [r.min_x, r.min_y],
                "max": [r.max_x, r.max_y],
                "corners": [list(r.first), list(r.second)],
            }
            for r in rects
        ],
    }


def rects_from_dict(data: dict) -> list[Rect]:
    rects = []
    for i, item in enumerate(data.get("rects", [])):
        (x0, y0), (x1, y1) = item["corners"]
        where = f"rect {i}"
        rects.append(Rect(
            Point(_to_int(x0, where), _to_int(y0, where)),
            Point(_to_int(x1, where), _to_int(y1, where)),
        ))
    return rects


def save_rects(rects: list[Rect], filepath: Path | str) -> None:
    """Save rectangles to a JSON file."""
    filepath = Path(filepath)
    with open(filepath, 'w') as f:
        json.dump(rects_to_dict(rects), f, indent=2)


def load_rects(filepath: Path | str) -> list[Rect]:
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        return rects_from_dict(json.load(f))

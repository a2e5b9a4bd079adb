"""Utilities built on top of occupancy grids and paths."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence, Tuple

from ..schemas import Obstacle
from .occupancy import OccupancyGrid
from .overlap import overlaps


_DEFAULT_SYMBOLS: Dict[str, str] = {
    "open": ".",
    "blocked": "#",
    "path": "*",
    "start": "S",
    "end": "E",
}


def is_contiguous(path: Sequence[Tuple[int, int]]) -> bool:
    """True if every consecutive pair of cells differs by one step on exactly one axis."""
    for (ax, ay), (bx, by) in zip(path, path[1:]):
        if abs(ax - bx) + abs(ay - by) != 1:
            return False
    return True


def validate_placement(
    candidate: Obstacle,
    existing: Iterable[Obstacle],
    width: int,
    height: int,
    *,
    ignore_id: Optional[str] = None,
) -> Optional[str]:
    """Check whether ``candidate`` may be committed to a ``width`` x ``height`` map.

    Checks two constraints:
    1. The rectangle lies fully inside the grid
    2. It does not overlap any existing obstacle (except ``ignore_id``, the
       obstacle being moved or resized)

    Returns:
        None if the placement is valid, otherwise a reason string.
    """
    if candidate.right > width or candidate.bottom > height:
        return (
            f"Obstacle at ({candidate.x}, {candidate.y}) size {candidate.w}x{candidate.h} "
            f"extends past the {width}x{height} grid"
        )

    for other in existing:
        if ignore_id is not None and other.obstacle_id == ignore_id:
            continue
        if overlaps(candidate, other):
            name = other.label or other.obstacle_id or f"({other.x}, {other.y})"
            return f"Obstacle overlaps {name}"
    return None


def render_ascii_grid(
    grid: OccupancyGrid,
    path: Optional[Sequence[Tuple[int, int]]] = None,
    *,
    symbols: Optional[Dict[str, str]] = None,
) -> str:
    """Render the grid one text row per grid row, top row first.

    Path cells are overlaid on top of the traversability map; the first and
    last path cells are drawn as start/end markers.
    """
    mapping = {**_DEFAULT_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    canvas = [
        [mapping["open"] if walkable else mapping["blocked"] for walkable in row]
        for row in grid.rows()
    ]
    if path:
        for x, y in path:
            canvas[y][x] = mapping["path"]
        sx, sy = path[0]
        ex, ey = path[-1]
        canvas[sy][sx] = mapping["start"]
        canvas[ey][ex] = mapping["end"]

    return "\n".join("".join(row) for row in canvas)

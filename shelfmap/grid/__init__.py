"""Grid shortest-path engine: occupancy snapshots, endpoint resolution and A*."""

from .occupancy import (
    CARDINAL_DIRECTIONS,
    GridCoordinate,
    OccupancyGrid,
    build_grid,
)
from .resolver import resolve_endpoint
from .astar import find_path, manhattan_distance
from .overlap import overlaps
from .helpers import is_contiguous, render_ascii_grid, validate_placement

__all__ = [
    "CARDINAL_DIRECTIONS",
    "GridCoordinate",
    "OccupancyGrid",
    "build_grid",
    "resolve_endpoint",
    "find_path",
    "manhattan_distance",
    "overlaps",
    "is_contiguous",
    "render_ascii_grid",
    "validate_placement",
]

"""Endpoint resolution: snap a requested cell onto a traversable one."""

from __future__ import annotations

from typing import Tuple

from ..errors import NonTraversableEndpoint, OutOfBounds
from .occupancy import CARDINAL_DIRECTIONS, GridCoordinate, OccupancyGrid


def resolve_endpoint(point: Tuple[int, int], grid: OccupancyGrid) -> GridCoordinate:
    """Return ``point`` if walkable, otherwise its first walkable cardinal neighbour.

    Neighbours are probed once, in Up, Down, Left, Right order. There is no
    wider search; callers wanting a larger radius must loop themselves.

    Raises:
        OutOfBounds: ``point`` lies outside the grid.
        NonTraversableEndpoint: ``point`` and all four neighbours are blocked.
    """
    x, y = point
    if not grid.in_bounds(x, y):
        raise OutOfBounds((x, y), grid.width, grid.height)
    if grid.is_traversable(x, y):
        return GridCoordinate(x, y)

    for dx, dy in CARDINAL_DIRECTIONS:
        # is_traversable already rejects out-of-range neighbours
        if grid.is_traversable(x + dx, y + dy):
            return GridCoordinate(x + dx, y + dy)
    raise NonTraversableEndpoint((x, y))

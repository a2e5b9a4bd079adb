"""Route planning service.

Glues the grid engine together for callers such as a map editor:
1. Build an occupancy snapshot (``plan_request`` only)
2. Resolve both endpoints onto walkable cells
3. Run A* on the snapshot
4. Wrap the outcome in a tagged ``RouteResult``

Nothing here raises for an expected outcome. Invalid dimensions, bad
endpoints and missing routes all come back as a ``RouteResult`` whose
``status`` the caller inspects.
"""

from __future__ import annotations

from typing import Optional, Tuple
from uuid import UUID

from .config import Config
from .errors import InvalidGrid, NonTraversableEndpoint, OutOfBounds
from .grid import OccupancyGrid, build_grid, find_path, render_ascii_grid, resolve_endpoint
from .logging_utils import log_error, log_search, log_success, log_warning
from .schemas import Obstacle, RouteRequest, RouteResult, RouteStatus


NO_PATH_MESSAGE = "No path found to the selected shelf"
NO_TRAVERSABLE_CELL_MESSAGE = "No traversable cell near the selected shelf"


def plan_route(
    start: Tuple[int, int],
    end: Tuple[int, int],
    grid: OccupancyGrid,
    *,
    request_id: Optional[UUID] = None,
) -> RouteResult:
    """Resolve ``start`` and ``end`` on ``grid`` and search for the shortest route."""
    try:
        resolved_start = resolve_endpoint(start, grid)
        resolved_end = resolve_endpoint(end, grid)
    except OutOfBounds as exc:
        log_error(f"[Planner] {exc}")
        return RouteResult(
            status=RouteStatus.OUT_OF_BOUNDS,
            message=str(exc),
            request_id=request_id,
        )
    except NonTraversableEndpoint as exc:
        log_error(f"[Planner] {exc}")
        return RouteResult(
            status=RouteStatus.NON_TRAVERSABLE_ENDPOINT,
            message=NO_TRAVERSABLE_CELL_MESSAGE,
            request_id=request_id,
        )

    for label, requested, resolved in (("start", start, resolved_start), ("end", end, resolved_end)):
        if tuple(requested) != resolved:
            log_warning(f"[Planner] Snapped {label} {tuple(requested)} -> {tuple(resolved)}")

    log_search(f"[Planner] Searching {tuple(resolved_start)} -> {tuple(resolved_end)}...")
    path = find_path(resolved_start, resolved_end, grid, max_expansions=Config.MAX_EXPANSIONS)

    if Config.DEBUG_GRID:
        print(render_ascii_grid(grid, path))

    if not path:
        log_error(f"[Planner] {NO_PATH_MESSAGE}")
        return RouteResult(
            status=RouteStatus.NO_PATH,
            start=resolved_start,
            end=resolved_end,
            message=NO_PATH_MESSAGE,
            request_id=request_id,
        )

    result = RouteResult(
        status=RouteStatus.FOUND,
        path=[tuple(cell) for cell in path],
        start=resolved_start,
        end=resolved_end,
        request_id=request_id,
    )
    log_success(f"[Planner] Path found: {result.format_steps()}")
    return result


def plan_request(request: RouteRequest) -> RouteResult:
    """Build a fresh snapshot for ``request`` and plan a route on it."""
    try:
        grid = build_grid(request.width, request.height, request.obstacles)
    except InvalidGrid as exc:
        log_error(f"[Planner] {exc}")
        return RouteResult(
            status=RouteStatus.INVALID_GRID,
            message=str(exc),
            request_id=request.request_id,
        )
    log_search(
        f"[Planner] Built {grid.width}x{grid.height} grid from {len(request.obstacles)} obstacle(s)"
    )
    return plan_route(request.start, request.end, grid, request_id=request.request_id)


def route_to_obstacle(
    start: Tuple[int, int],
    obstacle: Obstacle,
    grid: OccupancyGrid,
    *,
    request_id: Optional[UUID] = None,
) -> RouteResult:
    """Route from ``start`` to a shelf.

    The target is the shelf's top-left cell. That cell is normally blocked by
    the shelf itself, so the resolver snaps it to the first open neighbour.
    """
    return plan_route(start, obstacle.origin, grid, request_id=request_id)

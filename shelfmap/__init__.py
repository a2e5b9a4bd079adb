"""
Shelfmap - grid shortest-path engine for shelf map editors.

Place rectangular shelves on a grid and ask for the shortest walkable route
between two cells.

The core is pure and synchronous: build an immutable occupancy snapshot,
resolve endpoints against it, and run A* over it. Obstacle storage, routing
services and async sessions are thin layers on top.
"""

__version__ = "0.1.0"

# Core grid engine
from .grid import (
    CARDINAL_DIRECTIONS,
    GridCoordinate,
    OccupancyGrid,
    build_grid,
    resolve_endpoint,
    find_path,
    manhattan_distance,
    overlaps,
    is_contiguous,
    render_ascii_grid,
    validate_placement,
)

# Errors
from .errors import (
    ShelfMapError,
    InvalidGrid,
    OutOfBounds,
    NonTraversableEndpoint,
    PlacementRejected,
    ObstacleNotFound,
)

# Schemas
from .schemas import Obstacle, RouteRequest, RouteResult, RouteStatus

# Service layer
from .store import ObstacleStore
from .planner import plan_route, plan_request, route_to_obstacle
from .session import RouteSession
from .config import Config

__all__ = [
    # Core grid engine
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
    # Errors
    "ShelfMapError",
    "InvalidGrid",
    "OutOfBounds",
    "NonTraversableEndpoint",
    "PlacementRejected",
    "ObstacleNotFound",
    # Schemas
    "Obstacle",
    "RouteRequest",
    "RouteResult",
    "RouteStatus",
    # Service layer
    "ObstacleStore",
    "plan_route",
    "plan_request",
    "route_to_obstacle",
    "RouteSession",
    "Config",
]

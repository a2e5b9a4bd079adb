"""Exception types raised by the shelfmap core and obstacle store.

All errors derive from :class:`ShelfMapError` (itself a ``ValueError``) so
callers can catch the whole family at once. A missing route is never an
error: ``find_path`` returns an empty list for that case.
"""

from __future__ import annotations

from typing import Optional, Tuple


class ShelfMapError(ValueError):
    """Base class for every shelfmap failure."""


class InvalidGrid(ShelfMapError):
    """Raised when a grid is requested with non-positive dimensions."""

    def __init__(self, width: object, height: object) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Grid dimensions must be positive integers, got width={width!r}, height={height!r}"
        )


class OutOfBounds(ShelfMapError):
    """Raised when a coordinate falls outside the grid extent."""

    def __init__(self, point: Tuple[int, int], width: int, height: int) -> None:
        self.point = point
        self.width = width
        self.height = height
        super().__init__(f"Point {tuple(point)} is outside the {width}x{height} grid")


class NonTraversableEndpoint(ShelfMapError):
    """Raised when a point and all four of its cardinal neighbours are blocked."""

    def __init__(self, point: Tuple[int, int]) -> None:
        self.point = point
        super().__init__(f"No traversable cell at or next to {tuple(point)}")


class PlacementRejected(ShelfMapError):
    """Raised by the obstacle store when an edit would leave the grid or overlap."""

    def __init__(self, reason: str, *, conflict_id: Optional[str] = None) -> None:
        self.reason = reason
        self.conflict_id = conflict_id
        super().__init__(reason)


class ObstacleNotFound(ShelfMapError):
    """Raised when an obstacle id is not present in the store."""

    def __init__(self, obstacle_id: str) -> None:
        self.obstacle_id = obstacle_id
        super().__init__(f"Unknown obstacle '{obstacle_id}'")

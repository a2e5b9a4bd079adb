"""In-memory obstacle store for a fixed-size shelf map.

The store owns the only mutable state in a shelfmap setup: the ordered list
of shelves. Every edit is validated (in bounds, no overlap) before it is
committed, and searches never read the list directly. They work on an
immutable grid produced by :meth:`ObstacleStore.snapshot`.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from .config import Config
from .errors import InvalidGrid, ObstacleNotFound, PlacementRejected
from .grid import OccupancyGrid, build_grid, overlaps, validate_placement
from .logging_utils import log_error, log_info
from .schemas import Obstacle


class ObstacleStore:
    """Tracks shelves on a ``width`` x ``height`` grid and rejects overlapping edits.

    Obstacle ids are assigned sequentially ("0", "1", ...) and never reused.
    A lock serialises edits against snapshots so a snapshot always reflects a
    consistent list.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidGrid(width, height)
        self.width = width
        self.height = height
        # Insertion-ordered map of obstacle_id -> Obstacle.
        self._obstacles: Dict[str, Obstacle] = {}
        self._next_id = 0
        self._lock = threading.Lock()

    @property
    def obstacles(self) -> List[Obstacle]:
        """Copy of the current obstacle list in insertion order."""
        with self._lock:
            return list(self._obstacles.values())

    def __len__(self) -> int:
        return len(self._obstacles)

    def get(self, obstacle_id: str) -> Obstacle:
        try:
            return self._obstacles[obstacle_id]
        except KeyError:
            raise ObstacleNotFound(obstacle_id) from None

    def can_place(self, candidate: Obstacle, *, ignore_id: Optional[str] = None) -> bool:
        """Check a placement without committing it."""
        with self._lock:
            reason = validate_placement(
                candidate, self._obstacles.values(), self.width, self.height, ignore_id=ignore_id
            )
        return reason is None

    def add(
        self,
        x: int,
        y: int,
        w: Optional[int] = None,
        h: Optional[int] = None,
        *,
        label: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
    ) -> Obstacle:
        """Place a new shelf with its top-left corner at (x, y).

        Size defaults to the configured shelf footprint (2x1 cells); the label
        defaults to "Shelf N".

        Raises:
            PlacementRejected: the shelf would leave the grid or overlap another.
        """
        with self._lock:
            obstacle_id = str(self._next_id)
            candidate = Obstacle(
                x=x,
                y=y,
                w=w if w is not None else Config.SHELF_WIDTH,
                h=h if h is not None else Config.SHELF_HEIGHT,
                obstacle_id=obstacle_id,
                label=label or f"Shelf {len(self._obstacles) + 1}",
                metadata=metadata or {},
            )
            self._commit(candidate)
            self._next_id += 1
        log_info(f"[Store] Placed {candidate.label} at ({x}, {y}) size {candidate.w}x{candidate.h}")
        return candidate

    def move(self, obstacle_id: str, x: int, y: int) -> Obstacle:
        """Move a shelf so its top-left corner sits at (x, y)."""
        with self._lock:
            updated = self._require(obstacle_id).moved(x, y)
            self._commit(updated)
        return updated

    def resize(self, obstacle_id: str, w: int, h: int) -> Obstacle:
        """Change a shelf's footprint, keeping its top-left corner."""
        with self._lock:
            updated = self._require(obstacle_id).resized(w, h)
            self._commit(updated)
        return updated

    def remove(self, obstacle_id: str) -> Obstacle:
        with self._lock:
            removed = self._require(obstacle_id)
            del self._obstacles[obstacle_id]
        log_info(f"[Store] Removed {removed.label}")
        return removed

    def snapshot(self) -> OccupancyGrid:
        """Freeze the current obstacles into a new immutable occupancy grid."""
        with self._lock:
            obstacles = list(self._obstacles.values())
        return build_grid(self.width, self.height, obstacles)

    def _require(self, obstacle_id: str) -> Obstacle:
        obstacle = self._obstacles.get(obstacle_id)
        if obstacle is None:
            raise ObstacleNotFound(obstacle_id)
        return obstacle

    def _commit(self, candidate: Obstacle) -> None:
        # Caller holds the lock. Replacing an existing id keeps its position in the order.
        reason = validate_placement(
            candidate,
            self._obstacles.values(),
            self.width,
            self.height,
            ignore_id=candidate.obstacle_id,
        )
        if reason is not None:
            log_error(f"[Store] Rejected edit: {reason}")
            conflict = next(
                (
                    other.obstacle_id
                    for other in self._obstacles.values()
                    if other.obstacle_id != candidate.obstacle_id and overlaps(candidate, other)
                ),
                None,
            )
            raise PlacementRejected(reason, conflict_id=conflict)
        self._obstacles[candidate.obstacle_id] = candidate
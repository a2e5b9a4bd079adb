"""Pydantic schemas for obstacles, route requests and route results.

Obstacles are expressed in grid-cell units only. Converting pixel geometry
from a canvas or layout widget is the caller's job and must happen before an
obstacle reaches these models.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Obstacle(BaseModel):
    """Axis-aligned rectangle of blocked cells (a shelf)."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(..., ge=0, description="Left column of the rectangle")
    y: int = Field(..., ge=0, description="Top row of the rectangle")
    w: int = Field(1, ge=1, description="Width in cells")
    h: int = Field(1, ge=1, description="Height in cells")
    obstacle_id: Optional[str] = Field(None, description="Store-assigned identifier")
    label: Optional[str] = None
    metadata: Dict[str, str] = Field(
        default_factory=dict,
        description="Free-form view data (e.g., color)",
    )

    @property
    def right(self) -> int:
        """Exclusive right edge."""
        return self.x + self.w

    @property
    def bottom(self) -> int:
        """Exclusive bottom edge."""
        return self.y + self.h

    @property
    def origin(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every (x, y) cell covered by the rectangle, row by row."""
        for cy in range(self.y, self.bottom):
            for cx in range(self.x, self.right):
                yield cx, cy

    def moved(self, x: int, y: int) -> "Obstacle":
        # model_copy skips validation, so rebuild through the constructor
        return Obstacle(**{**self.model_dump(), "x": x, "y": y})

    def resized(self, w: int, h: int) -> "Obstacle":
        return Obstacle(**{**self.model_dump(), "w": w, "h": h})


class RouteStatus(str, Enum):
    """Outcome tag carried by every RouteResult."""

    FOUND = "found"
    NO_PATH = "no_path"
    INVALID_GRID = "invalid_grid"
    OUT_OF_BOUNDS = "out_of_bounds"
    NON_TRAVERSABLE_ENDPOINT = "non_traversable_endpoint"


class RouteRequest(BaseModel):
    """A single routing request against a map layout.

    The grid snapshot is built from ``width``, ``height`` and ``obstacles`` when
    the request is planned, so later edits to the caller's obstacle list never
    leak into an in-flight search.
    """

    width: int
    height: int
    obstacles: List[Obstacle] = Field(default_factory=list)
    start: Tuple[int, int]
    end: Tuple[int, int]
    request_id: UUID = Field(default_factory=uuid4)


class RouteResult(BaseModel):
    """Tagged result of a routing attempt, ready for a view layer to display."""

    status: RouteStatus
    path: List[Tuple[int, int]] = Field(
        default_factory=list,
        description="Cells from start to end inclusive; empty unless status is FOUND",
    )
    start: Optional[Tuple[int, int]] = Field(None, description="Resolved start cell")
    end: Optional[Tuple[int, int]] = Field(None, description="Resolved end cell")
    message: Optional[str] = None
    request_id: Optional[UUID] = None

    @property
    def found(self) -> bool:
        return self.status is RouteStatus.FOUND

    @property
    def steps(self) -> Optional[int]:
        """Number of moves along the path, or None when there is no path."""
        if not self.path:
            return None
        return len(self.path) - 1

    def format_steps(self) -> str:
        """Return the path length as shown in the editor ("1 step", "8 steps")."""
        steps = self.steps
        if steps is None:
            return "no path"
        return f"{steps} {'step' if steps == 1 else 'steps'}"

"""Occupancy grid snapshots.

A grid is rebuilt wholesale from the obstacle list whenever that list
changes. Once built it is never mutated, so any number of searches may read
the same snapshot concurrently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, NamedTuple, Sequence, Tuple

from ..errors import InvalidGrid
from ..schemas import Obstacle


class GridCoordinate(NamedTuple):
    """Integer cell coordinate; x is the column, y the row (y grows downward)."""

    x: int
    y: int


# Probe/expansion order shared by the resolver and the path finder: Up, Down, Left, Right.
CARDINAL_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))

_OPEN = 1
_BLOCKED = 0


@dataclass(frozen=True)
class OccupancyGrid:
    """Immutable W x H traversability map stored as a row-major byte buffer."""

    width: int
    height: int
    cells: bytes

    def __post_init__(self) -> None:
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Cell buffer holds {len(self.cells)} entries, expected {self.width * self.height}"
            )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_traversable(self, x: int, y: int) -> bool:
        """True when (x, y) lies inside the grid and is not covered by an obstacle."""
        if not self.in_bounds(x, y):
            return False
        return self.cells[y * self.width + x] == _OPEN

    def rows(self) -> List[List[bool]]:
        """Return the grid as ``rows[y][x]`` booleans."""
        w = self.width
        return [[cell == _OPEN for cell in self.cells[y * w:(y + 1) * w]] for y in range(self.height)]

    def blocked_cells(self) -> Iterator[GridCoordinate]:
        w = self.width
        for index, cell in enumerate(self.cells):
            if cell == _BLOCKED:
                yield GridCoordinate(index % w, index // w)

    @classmethod
    def from_ascii(cls, lines: Sequence[str], *, blocked: str = "#") -> "OccupancyGrid":
        """Build a grid from text rows where ``blocked`` marks an obstacle cell.

        Handy for fixtures and debugging:

            OccupancyGrid.from_ascii([
                "...",
                ".#.",
                "...",
            ])
        """
        if not lines or not lines[0]:
            raise InvalidGrid(len(lines[0]) if lines else 0, len(lines))
        width = len(lines[0])
        buffer = bytearray()
        for row in lines:
            if len(row) != width:
                raise ValueError("All rows must have the same length")
            buffer.extend(_BLOCKED if ch == blocked else _OPEN for ch in row)
        return cls(width=width, height=len(lines), cells=bytes(buffer))


def build_grid(width: int, height: int, obstacles: Iterable[Obstacle]) -> OccupancyGrid:
    """Convert obstacle rectangles into a fresh traversability snapshot.

    Every cell starts traversable; each obstacle blocks its rectangle, clipped
    to the grid. Overlapping obstacles simply block the same cells twice.

    Raises:
        InvalidGrid: if ``width`` or ``height`` is not a positive integer.
    """
    if (
        not isinstance(width, int)
        or not isinstance(height, int)
        or isinstance(width, bool)
        or isinstance(height, bool)
        or width <= 0
        or height <= 0
    ):
        raise InvalidGrid(width, height)

    cells = bytearray([_OPEN]) * (width * height)
    for obstacle in obstacles:
        x0 = max(obstacle.x, 0)
        x1 = min(obstacle.x + obstacle.w, width)
        if x0 >= x1:
            continue
        span = bytes(x1 - x0)
        for y in range(max(obstacle.y, 0), min(obstacle.y + obstacle.h, height)):
            row = y * width
            cells[row + x0:row + x1] = span
    return OccupancyGrid(width=width, height=height, cells=bytes(cells))

"""A* shortest-path search over an occupancy grid.

Movement is 4-connected with unit step cost, so Manhattan distance is an
admissible and consistent heuristic and the first time the goal is popped
its path is optimal.
"""

from __future__ import annotations

import heapq
from typing import List, Optional, Tuple

from .occupancy import CARDINAL_DIRECTIONS, GridCoordinate, OccupancyGrid


def manhattan_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """|dx| + |dy| between two cells."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def find_path(
    start: Tuple[int, int],
    end: Tuple[int, int],
    grid: OccupancyGrid,
    *,
    max_expansions: Optional[int] = None,
) -> List[GridCoordinate]:
    """Return the shortest walkable route from ``start`` to ``end``, inclusive.

    An empty list means no route: the goal is unreachable, either endpoint is
    blocked or outside the grid (no implicit resolution happens here), or the
    search expanded more than ``max_expansions`` cells (default W * H).

    The result depends only on the arguments. Successors are generated Up,
    Down, Left, Right and frontier ties on f are broken by insertion order, so
    equal-length alternatives always resolve to the same route.
    """
    sx, sy = start
    ex, ey = end
    if not (grid.is_traversable(sx, sy) and grid.is_traversable(ex, ey)):
        return []

    width = grid.width
    height = grid.height
    cells = grid.cells
    limit = width * height if max_expansions is None else max_expansions

    # Node arena: index i describes one frontier insertion. parent == -1 marks the root.
    node_x: List[int] = [sx]
    node_y: List[int] = [sy]
    node_g: List[int] = [0]
    node_parent: List[int] = [-1]

    unseen = width * height + 1
    best_g = [unseen] * (width * height)
    best_g[sy * width + sx] = 0
    closed = bytearray(width * height)

    # Entries are (f, node index); the index grows with every push, which
    # makes it the FIFO tie-break among equal f.
    frontier: List[Tuple[int, int]] = [(manhattan_distance(start, end), 0)]
    expansions = 0

    while frontier:
        _, index = heapq.heappop(frontier)
        x = node_x[index]
        y = node_y[index]
        key = y * width + x
        if closed[key]:
            continue
        closed[key] = 1

        if x == ex and y == ey:
            return _reconstruct(index, node_x, node_y, node_parent)

        expansions += 1
        if expansions > limit:
            return []

        g = node_g[index] + 1
        for dx, dy in CARDINAL_DIRECTIONS:
            nx = x + dx
            ny = y + dy
            if nx < 0 or ny < 0 or nx >= width or ny >= height:
                continue
            nkey = ny * width + nx
            if closed[nkey] or not cells[nkey]:
                continue
            # Only queue strictly better routes to a cell.
            if g >= best_g[nkey]:
                continue
            best_g[nkey] = g
            node_x.append(nx)
            node_y.append(ny)
            node_g.append(g)
            node_parent.append(index)
            heapq.heappush(frontier, (g + abs(nx - ex) + abs(ny - ey), len(node_x) - 1))

    return []


def _reconstruct(
    index: int,
    node_x: List[int],
    node_y: List[int],
    node_parent: List[int],
) -> List[GridCoordinate]:
    path: List[GridCoordinate] = []
    while index != -1:
        path.append(GridCoordinate(node_x[index], node_y[index]))
        index = node_parent[index]
    path.reverse()
    return path

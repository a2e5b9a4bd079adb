"""
Warehouse Shelf Routing

Lays out rows of shelves on a grid, then routes a picker from the entrance
to a chosen shelf and prints the map with the route overlaid.

Run: python examples/warehouse/run.py --shelf 5
"""

import argparse
import asyncio

from shelfmap import (
    Config,
    ObstacleStore,
    PlacementRejected,
    RouteRequest,
    RouteSession,
    render_ascii_grid,
    route_to_obstacle,
)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Route a picker to a shelf in a generated warehouse layout"
    )
    parser.add_argument(
        "--cols",
        type=int,
        default=Config.GRID_COLS,
        help=f"Grid columns (default: {Config.GRID_COLS})",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=Config.GRID_ROWS,
        help=f"Grid rows (default: {Config.GRID_ROWS})",
    )
    parser.add_argument(
        "--shelf",
        type=int,
        default=0,
        help="Index of the target shelf in placement order (default: 0)",
    )
    parser.add_argument(
        "--session",
        action="store_true",
        help="Plan through an async RouteSession instead of calling the planner directly",
    )
    return parser.parse_args()


def build_store(cols: int, rows: int) -> ObstacleStore:
    """Place 6-cell shelf runs separated by 2-cell aisles."""
    store = ObstacleStore(cols, rows)
    for y in range(2, rows - 2, 3):
        for x in range(2, cols - 7, 8):
            try:
                store.add(x, y, 6, 1, metadata={"color": "#ccc"})
            except PlacementRejected:
                continue
    return store


async def main() -> None:
    args = parse_args()
    Config.validate()

    store = build_store(args.cols, args.rows)
    obstacles = store.obstacles
    if not obstacles:
        print("Grid too small for any shelves")
        return

    target = obstacles[args.shelf % len(obstacles)]
    start = (0, 0)

    if args.session:
        session = RouteSession()
        request = RouteRequest(
            width=store.width,
            height=store.height,
            obstacles=obstacles,
            start=start,
            end=target.origin,
        )
        result = await session.submit(request)
    else:
        result = route_to_obstacle(start, target, store.snapshot())

    print()
    print(render_ascii_grid(store.snapshot(), result.path if result is not None else None))
    print()
    if result is not None and result.found:
        print(f"Route to {target.label}: {result.format_steps()}")
    elif result is not None:
        print(f"Error: {result.message}")


if __name__ == "__main__":
    asyncio.run(main())

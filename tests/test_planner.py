"""Tests for the route planning service and its log output."""

from __future__ import annotations

import contextlib
import io
from uuid import uuid4

import pytest

from shelfmap.config import Config
from shelfmap.grid import OccupancyGrid, build_grid
from shelfmap.planner import (
    NO_PATH_MESSAGE,
    NO_TRAVERSABLE_CELL_MESSAGE,
    plan_request,
    plan_route,
    route_to_obstacle,
)
from shelfmap.schemas import Obstacle, RouteRequest, RouteStatus
from shelfmap.store import ObstacleStore


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv("SHELFMAP_NO_COLOR", "1")
    monkeypatch.setattr(Config, "DEBUG_GRID", False)
    monkeypatch.setattr(Config, "MAX_EXPANSIONS", None)


def _run(fn, *args, **kwargs):
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        result = fn(*args, **kwargs)
    return result, buf.getvalue()


def test_plan_route_found():
    grid = build_grid(5, 5, [])
    request_id = uuid4()
    result, out = _run(plan_route, (0, 0), (4, 4), grid, request_id=request_id)

    assert result.status is RouteStatus.FOUND
    assert result.found
    assert result.steps == 8
    assert result.format_steps() == "8 steps"
    assert result.path[0] == (0, 0)
    assert result.path[-1] == (4, 4)
    assert result.request_id == request_id
    assert "[•] [Planner] Searching (0, 0) -> (4, 4)..." in out
    assert "[✓] [Planner] Path found: 8 steps" in out


def test_single_step_route_uses_singular_label():
    grid = build_grid(2, 1, [])
    result, _ = _run(plan_route, (0, 0), (1, 0), grid)
    assert result.format_steps() == "1 step"


def test_plan_route_no_path():
    grid = build_grid(3, 3, [Obstacle(x=0, y=1, w=3, h=1)])
    result, out = _run(plan_route, (0, 0), (2, 2), grid)

    assert result.status is RouteStatus.NO_PATH
    assert result.path == []
    assert result.steps is None
    assert result.format_steps() == "no path"
    assert result.message == NO_PATH_MESSAGE
    assert result.start == (0, 0)
    assert result.end == (2, 2)
    assert f"[!] [Planner] {NO_PATH_MESSAGE}" in out


def test_plan_route_out_of_bounds():
    grid = build_grid(3, 3, [])
    result, _ = _run(plan_route, (0, 0), (5, 1), grid)

    assert result.status is RouteStatus.OUT_OF_BOUNDS
    assert result.path == []
    assert "outside the 3x3 grid" in result.message


def test_plan_route_enclosed_endpoint():
    grid = OccupancyGrid.from_ascii([
        ".#.",
        "###",
        ".#.",
    ])
    result, _ = _run(plan_route, (0, 0), (1, 1), grid)

    assert result.status is RouteStatus.NON_TRAVERSABLE_ENDPOINT
    assert result.message == NO_TRAVERSABLE_CELL_MESSAGE


def test_plan_route_snaps_blocked_start():
    grid = OccupancyGrid.from_ascii([
        "...",
        ".#.",
        "...",
    ])
    result, out = _run(plan_route, (1, 1), (2, 2), grid)

    assert result.found
    assert result.start == (1, 0)
    assert result.path[0] == (1, 0)
    assert "[~] [Planner] Snapped start (1, 1) -> (1, 0)" in out


def test_route_to_obstacle_targets_snapped_top_left_cell():
    store = ObstacleStore(5, 5)
    shelf = store.add(2, 2, 2, 1)
    result, out = _run(route_to_obstacle, (0, 0), shelf, store.snapshot())

    assert result.found
    assert result.end == (2, 1)
    assert result.steps == 3
    assert "Snapped end (2, 2) -> (2, 1)" in out


def test_plan_request_builds_snapshot():
    request = RouteRequest(
        width=3,
        height=3,
        obstacles=[Obstacle(x=1, y=1)],
        start=(0, 0),
        end=(2, 2),
    )
    result, out = _run(plan_request, request)

    assert result.found
    assert (1, 1) not in result.path
    assert result.steps == 4
    assert result.request_id == request.request_id
    assert "Built 3x3 grid from 1 obstacle(s)" in out


def test_plan_request_invalid_grid():
    request = RouteRequest(width=0, height=4, start=(0, 0), end=(1, 1))
    result, _ = _run(plan_request, request)

    assert result.status is RouteStatus.INVALID_GRID
    assert result.request_id == request.request_id


def test_debug_grid_prints_snapshot(monkeypatch):
    monkeypatch.setattr(Config, "DEBUG_GRID", True)
    grid = build_grid(3, 3, [])
    _, out = _run(plan_route, (0, 0), (2, 0), grid)

    assert "S*E\n...\n..." in out


def test_configured_expansion_cap_applies(monkeypatch):
    monkeypatch.setattr(Config, "MAX_EXPANSIONS", 2)
    grid = build_grid(10, 10, [])
    result, _ = _run(plan_route, (0, 0), (9, 9), grid)

    assert result.status is RouteStatus.NO_PATH

"""Tests for RouteSession stale-result handling."""

from __future__ import annotations

import asyncio
import time

import pytest

from shelfmap.planner import plan_request
from shelfmap.schemas import RouteRequest
from shelfmap.session import RouteSession


def _request(start=(0, 0), end=(4, 4)) -> RouteRequest:
    return RouteRequest(width=5, height=5, start=start, end=end)


@pytest.mark.asyncio
async def test_submit_returns_latest_result():
    session = RouteSession()
    request = _request()

    result = await session.submit(request)

    assert result is not None
    assert result.found
    assert result.request_id == request.request_id
    assert session.latest_request_id == request.request_id
    assert session.last_result is result


@pytest.mark.asyncio
async def test_superseded_request_is_discarded():
    first = _request(start=(0, 0))
    second = _request(start=(1, 0))

    def slow_planner(request: RouteRequest):
        if request.request_id == first.request_id:
            time.sleep(0.2)
        return plan_request(request)

    session = RouteSession(planner=slow_planner)
    stale, fresh = await asyncio.gather(session.submit(first), session.submit(second))

    assert stale is None
    assert fresh is not None
    assert fresh.request_id == second.request_id
    assert session.last_result is fresh


@pytest.mark.asyncio
async def test_clear_discards_in_flight_result():
    request = _request()

    def slow_planner(req: RouteRequest):
        time.sleep(0.1)
        return plan_request(req)

    session = RouteSession(planner=slow_planner)
    task = asyncio.create_task(session.submit(request))
    await asyncio.sleep(0)
    session.clear()

    assert await task is None
    assert session.last_result is None
    assert session.latest_request_id is None

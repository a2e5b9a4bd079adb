"""Asynchronous route session for responsive front ends.

Searches are CPU-bound and cannot be cancelled midway, so the session runs
each one in a worker thread and keeps only the newest answer. Results for
requests that were superseded while in flight are discarded.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional
from uuid import UUID

from .logging_utils import log_warning
from .planner import plan_request
from .schemas import RouteRequest, RouteResult


class RouteSession:
    """Tracks the latest route request and drops stale results.

    Usage:
        session = RouteSession()
        result = await session.submit(request)
        if result is None:
            pass  # a newer request replaced this one
    """

    def __init__(self, planner: Callable[[RouteRequest], RouteResult] = plan_request):
        self._planner = planner
        self._latest_id: Optional[UUID] = None
        self.last_result: Optional[RouteResult] = None

    @property
    def latest_request_id(self) -> Optional[UUID]:
        return self._latest_id

    async def submit(self, request: RouteRequest) -> Optional[RouteResult]:
        """Plan ``request`` off the event loop.

        Returns the result, or None if another request was submitted before
        this one finished.
        """
        self._latest_id = request.request_id
        result = await asyncio.to_thread(self._planner, request)

        if request.request_id != self._latest_id:
            log_warning(f"[Session] Discarding stale result for request {request.request_id}")
            return None

        self.last_result = result
        return result

    def clear(self) -> None:
        """Forget the current route; in-flight results will be discarded."""
        self._latest_id = None
        self.last_result = None

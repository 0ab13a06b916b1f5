"""Metrics middleware for API."""

import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from core.metrics import api_request_duration


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware to collect API request duration per route."""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        started = time.perf_counter()
        response = await call_next(request)

        # Label by route template so unknown paths don't explode cardinality
        route = request.scope.get("route")
        endpoint = getattr(route, "path", "unmatched")

        api_request_duration.labels(
            method=request.method, endpoint=endpoint, status=response.status_code
        ).observe(time.perf_counter() - started)

        return response

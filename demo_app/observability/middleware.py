from __future__ import annotations

import re
import uuid
from collections.abc import Iterable
from time import perf_counter
from typing import Any, Callable

import structlog
from starlette.datastructures import Headers, MutableHeaders

from demo_app.observability.metrics import get_metrics

REQUEST_ID_HEADER = "X-Request-ID"
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,128}$")


def resolve_request_id(scope: dict[str, Any]) -> str:
    """Reuse a caller-supplied X-Request-ID when it is well formed, else mint a UUID4."""

    incoming = Headers(scope=scope).get(REQUEST_ID_HEADER)
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    return str(uuid.uuid4())


class RequestContextMiddleware:
    """Tags each HTTP request with an id, times it, counts it and emits one access event."""

    def __init__(self, app: Callable[..., Any], unmetered_paths: Iterable[str] = ("/api/metrics",)) -> None:
        self.app = app
        self.unmetered_paths = frozenset(unmetered_paths)

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = resolve_request_id(scope)
        path = scope.get("path")
        structlog.contextvars.bind_contextvars(request_id=request_id, path=path, method=scope.get("method"))

        status_code = 500
        start = perf_counter()

        async def send_with_request_id(message: dict[str, Any]) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                MutableHeaders(scope=message)[REQUEST_ID_HEADER] = request_id
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            elapsed_ms = (perf_counter() - start) * 1000.0
            if path not in self.unmetered_paths:
                get_metrics().observe_http_request(elapsed_ms=elapsed_ms, status_code=status_code)

            structlog.get_logger("demo_app").info(
                "http_request",
                status_code=status_code,
                elapsed_ms=round(elapsed_ms, 2),
                metered=path not in self.unmetered_paths,
            )
            structlog.contextvars.clear_contextvars()

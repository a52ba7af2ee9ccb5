from __future__ import annotations

import uuid
from time import perf_counter
from typing import Any, Callable

import structlog
from starlette.datastructures import MutableHeaders

from users_api.observability.metrics import get_metrics


class RequestLoggingMiddleware:
    """Logs method/path before the request and status after it, without touching either.

    The status line is written from a ``finally`` block, so it is emitted even
    when the wrapped app raises; the exception itself is re-raised as is.
    """

    def __init__(self, app: Callable[..., Any]) -> None:
        self.app = app
        # Avoid self-observing the metrics endpoint.
        self._excluded_metric_paths = {"/metrics"}

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())
        path = scope.get("path")
        method = scope.get("method")

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=path,
            method=method,
        )
        logger = structlog.get_logger("access")
        logger.info("http_request", method=method, path=path)

        start = perf_counter()
        # Reported when the app fails before starting a response.
        status_code: int = 500

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code

            if message.get("type") == "http.response.start":
                status_code = int(message.get("status", 500))
                headers = MutableHeaders(scope=message)
                headers["X-Request-ID"] = request_id

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            elapsed_ms = (perf_counter() - start) * 1000.0

            if path not in self._excluded_metric_paths:
                get_metrics().observe_http_request(elapsed_ms=elapsed_ms, status_code=status_code)

            logger.info(
                "http_response",
                method=method,
                path=path,
                status_code=status_code,
                elapsed_ms=round(elapsed_ms, 2),
            )

            structlog.contextvars.clear_contextvars()

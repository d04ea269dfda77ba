"""
Beverage API: Access Log Middleware
===================================

What:  Exactly one access-log record per request on the `beverage_api.access` logger.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Record:
    2026-01-15T12:00:00 [INFO] beverage_api.access: POST /api/beverages/tea -> 201 (1.4ms) rid=a1b2c3d4 client=127.0.0.1

    Level follows the status class (see _LEVEL_BY_CLASS). A request whose
    handler raised is recorded as 500 at ERROR before the exception moves on
    to RequestIDMiddleware, which answers it. Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from beverage_api.middleware.request_id import request_id_var

logger = logging.getLogger("beverage_api.access")

# Probes hit these every few seconds
SILENT_PATHS = frozenset({"/health"})

# Status class (first digit) → log level; anything unlisted logs at INFO
_LEVEL_BY_CLASS = {4: logging.WARNING, 5: logging.ERROR}


def access_level(status: int) -> int:
    return _LEVEL_BY_CLASS.get(status // 100, logging.INFO)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Records method, path, status, duration, request ID and client of each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SILENT_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._record(request, 500, started, error=True)
            raise

        self._record(request, response.status_code, started)
        return response

    @staticmethod
    def _record(request: Request, status: int, started: float, error: bool = False) -> None:
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        rid = request_id_var.get("")
        client = request.client.host if request.client else "unknown"

        logger.log(
            access_level(status),
            "%s %s -> %d (%.1fms) rid=%s client=%s%s",
            request.method,
            request.url.path,
            status,
            elapsed_ms,
            rid,
            client,
            " [unhandled exception]" if error else "",
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": elapsed_ms,
                "unhandled": bool(error),
            },
        )

"""
Beverage API: Request ID Middleware
===================================

What:  Assigns a correlation ID to each incoming request and returns it in a header.
How:   Reuses the client's X-Request-ID header or generates a short UUID, stores it
       in a ContextVar and in request.state, and echoes it on the response.
When:  Outermost application middleware, so every log line of a request can use the ID.

Unexpected errors:
    An exception that escapes the route and FastAPI's exception handlers is
    turned into the generic 500 payload HERE, while the request ID is still
    set. The response therefore carries both `request_id` and the
    X-Request-ID header like every other response.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


def internal_error_response(rid: str) -> JSONResponse:
    """Generic 500 body. Never includes exception text."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again or contact support.",
            "request_id": rid,
        },
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. If the client sent X-Request-ID, use it
        2. Otherwise generate the first 8 characters of a UUID4
        3. Store in ContextVar (loggers, exception handlers) and request.state (routes)
        4. Answer unhandled exceptions with the generic 500 payload
        5. Add the ID to response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
            response = internal_error_response(rid)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response

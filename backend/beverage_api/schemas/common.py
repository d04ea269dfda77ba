"""
Beverage API: Shared Response Schemas
=====================================

What:  Greeting payloads, the error envelope, and the health check response.
Who:   Used by route handlers as response models and by main.py for error bodies.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Greeting Models
# ══════════════════════════════════════════════════════════════════════════


class HelloResponse(BaseModel):
    """Body of GET /api/hello."""

    hello: str = Field(default="World!")


class GoodbyeResponse(BaseModel):
    """Body of GET /api/good-bye."""

    message: str = Field(default="Good Bye Visitor!")


# ══════════════════════════════════════════════════════════════════════════
# Error Response Model: Consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error")
        message: Human-readable description
        details: Optional extra context (e.g., the list of failed fields)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "validation_error",
            "message": "Request validation failed: query.milk: Input should be 'yes' or 'no'",
            "details": {"field": "query.milk", "errors": [...]},
            "request_id": "1f3a9c2b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""

    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since service started")

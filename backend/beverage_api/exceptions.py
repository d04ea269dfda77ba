"""
Beverage API: Custom Exception Hierarchy
========================================

What:  Application-specific exceptions and their HTTP mapping.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Built from framework validation failures; caught by global handlers.

Exception Hierarchy:
    BeverageAPIError (base)       → 500 Internal Server Error
    └── ValidationError           → 400 Bad Request (client can fix)

The service has no I/O, storage, or downstream dependencies, so validation is
the only failure a client can trigger. Anything else is a bug and is answered
by the catch-all handler in main.py.
"""

from typing import Any, Dict, Iterable, List, Optional


class BeverageAPIError(Exception):
    """
    Base exception for all Beverage API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional structured info attached to the error
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BeverageAPIError):
    """
    Raised when path, query, or body data does not match its declared schema.

    What:    Wrong enum value, missing required field, unexpected extra field, wrong type.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Request validation failed: path.drink: Input should be 'tea', 'coffee' or 'chai'",
            "details": {
                "field": "path.drink",
                "errors": [
                    {"location": "path.drink", "message": "...", "type": "literal_error"}
                ]
            }
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field

    @classmethod
    def from_pydantic_errors(cls, errors: Iterable[Dict[str, Any]]) -> "ValidationError":
        """
        Build a ValidationError from the error list of a pydantic/FastAPI validation failure.

        Each entry is reduced to a JSON-safe {location, message, type} triple.
        Locations are dotted paths such as "query.milk" or "body.kind".
        """
        problems: List[Dict[str, str]] = []
        for error in errors:
            location = ".".join(str(part) for part in error.get("loc", ()))
            problems.append(
                {
                    "location": location,
                    "message": str(error.get("msg", "Invalid value")),
                    "type": str(error.get("type", "value_error")),
                }
            )

        if not problems:
            return cls(message="Request validation failed", context={"errors": []})

        first = problems[0]
        message = f"Request validation failed: {first['location']}: {first['message']}"
        return cls(message=message, field=first["location"], context={"errors": problems})

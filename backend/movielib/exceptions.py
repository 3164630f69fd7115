"""
Movies Library Backend — Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions for the error cases an endpoint can hit.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": <message>}` with the matching HTTP status code.
Who:   Raised by services and the database module; caught by global handlers.

Exception Hierarchy:
    MovieLibError (base)
    ├── ValidationError   → 400 Bad Request (missing path parameter)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class MovieLibError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(MovieLibError):
    """
    Raised when a required request value is missing.

    When:    POST /movies/ or POST /genres/ without the path parameter.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Title is required."}
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


class NotFoundError(MovieLibError):
    """
    Raised when a lookup or delete target does not exist.

    HTTP:    404 Not Found

    The message is the resource name in sentence case, e.g. "Movie not found.",
    which is what clients see in the `error` field.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found."
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(MovieLibError):
    """
    Raised when a store operation fails.

    When:    Server unreachable, operation failure, malformed ObjectId,
             or the connection was never established.
    HTTP:    500 Internal Server Error

    Security Note:
        The client always receives the generic message. The driver error is
        kept in `context` and logged server-side only.
    """

    def __init__(
        self,
        message: str = "Internal server error.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

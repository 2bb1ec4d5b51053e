"""
Photo API: Custom Exception Hierarchy
=====================================

What:  Application-specific exceptions for the data-access layer and the API.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) turn the API-facing
       ones into structured JSON error responses.
Who:   FieldError and DatabaseError are raised by PhotoService; ValidationError
       and NotFoundError are produced by the photo controller's error_switch.

Exception Hierarchy:
    PhotoAPIError (base)
    ├── FieldError              → data-access failure on a named field
    ├── ValidationError         → 400 Bad Request
    ├── NotFoundError           → 404 Not Found
    ├── DatabaseError           → 500 Internal Server Error
    └── RateLimitExceededError  → 429 Too Many Requests

FieldError has no HTTP status of its own. The controller decides the status
from the field name alone: the identifier field means "not found", anything
else means "bad input".
"""

from typing import Any, Dict, Optional


class PhotoAPIError(Exception):
    """
    Base exception for all Photo API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class FieldError(PhotoAPIError):
    """
    Raised by the data-access layer when an operation fails on a specific field.

    When:
        - The photo id is malformed or no photo has that id (field == "id")
        - A payload field fails validation (field == the field name, e.g. "price")
        - A payload carries a field the model does not know (field == that name)
        - The payload is not a JSON object at all (field == "body")
    """

    def __init__(
        self,
        field: str,
        message: str = "Invalid value",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field

    def __repr__(self) -> str:
        return f"FieldError(field={self.field!r}, message={self.message!r})"


class ValidationError(PhotoAPIError):
    """
    Raised when client input cannot be accepted.

    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Check your input",
            "details": {"field": "price", "reason": "Input should be greater than or equal to 0"}
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


class NotFoundError(PhotoAPIError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PATCH/PUT/DELETE /api/photos/{id} with an unknown or malformed id.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(PhotoAPIError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Detailed error
    info (SQL, constraint names) is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(PhotoAPIError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests (Retry-After header set)
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after

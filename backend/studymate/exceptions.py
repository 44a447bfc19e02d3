"""
StudyMate Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"message": ..., "detail": ...}` JSON bodies with the right
       HTTP status code.
Who:   Raised by services and routes; caught by global handlers.

Exception Hierarchy:
    StudyMateError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class StudyMateError(Exception):
    """
    Base exception for all StudyMate application errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(StudyMateError):
    """
    Raised when client input is missing or unusable.

    When:    `requesterEmail` missing on request creation or request listing.
    HTTP:    400 Bad Request
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


class NotFoundError(StudyMateError):
    """
    Raised when an identifier resolves to no document.

    What:    None of the id clauses matched a document in the collection.
    HTTP:    404 Not Found

    The driver returns None for misses (never an exception); services turn
    that None into this error so routes stay free of status-code logic.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(StudyMateError):
    """
    Raised when a MongoDB operation fails.

    What:    Connectivity loss, server selection timeout, write error, etc.
    HTTP:    500 Internal Server Error with `message: "Server error"`

    Attributes:
        detail:  Driver failure text, echoed to the client as `detail`
    """

    def __init__(
        self,
        message: str = "Server error",
        detail: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.detail = detail

"""
Noteful Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the resource layer.
How:   Each exception carries a client-safe message and an optional context
       dict. Global handlers (registered in main.py) turn them into
       {"error": {"message": ...}} responses with the matching status code.
Who:   Raised by the validator, stores and services; caught by the handlers.

Exception Hierarchy:
    NotefulError (base)
    ├── ValidationError   → 400 Bad Request (missing/empty fields, too long)
    ├── NotFoundError     → 404 Not Found (unknown or malformed id)
    ├── ConstraintError   → 400 Bad Request (note references a missing folder)
    └── DatabaseError     → 500 Internal Server Error (details logged only)
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotefulError):
    """
    Raised when a request body fails the create/update field rules.

    Example response:
        400 {"error": {"message": "Missing 'name' in request body"}}
    """

    status_code = 400

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
    def missing_field(cls, field: str) -> "ValidationError":
        return cls(message=f"Missing '{field}' in request body", field=field)


class NotFoundError(NotefulError):
    """
    Raised when a requested entity does not exist.

    The message is deliberately generic per entity ("Folder doesn't exist");
    a malformed id and an unknown id produce the same response.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=f"{resource} doesn't exist", context=ctx)
        self.resource = resource


class ConstraintError(NotefulError):
    """
    Raised when a write would break referential integrity.

    When:  A note is created or moved with a folder_id that matches no folder.
    HTTP:  400 Bad Request. The raw IntegrityError never reaches the client.
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Referenced folder doesn't exist",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(NotefulError):
    """
    Raised when a database operation fails unexpectedly.

    The message returned to the client is always generic; the context
    (exception type, entity id) is logged server-side only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

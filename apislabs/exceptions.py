"""
ApisLabs Catalog API - Custom Exception Hierarchy
==================================================

What:  Application-specific exceptions for the client-caused error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return plain-text responses with the matching HTTP status code.
Who:   Raised by services; caught by global handlers only.

Exception Hierarchy:
    ApisLabsError (base)
    ├── ValidationError   → 400 Bad Request (body: first failing reason)
    └── NotFoundError     → 404 Not Found   (body: "<Resource> with ID <id> not found")

    Anything else (store failures, undecodable JSON, payload shape errors)
    is an unexpected failure → 500 with "Error: <message>".

No intermediate layer wraps or retries: every error travels unchanged from
where it is raised to the outermost handler.
"""

from typing import Any, Dict, Optional


class ApisLabsError(Exception):
    """
    Base exception for all ApisLabs application errors.

    Attributes:
        message:  Human-readable text returned as the response body
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


class ValidationError(ApisLabsError):
    """
    Raised when a creation or update payload fails validation.

    When:    Missing required field, null payload.
    HTTP:    400 Bad Request

    The message is the reason of the FIRST failing check, never an
    aggregate of all failures.
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


class NotFoundError(ApisLabsError):
    """
    Raised when a requested entity does not exist.

    When:    GET/PUT/DELETE /{collection}/{id} with an unknown id.
    HTTP:    404 Not Found

    The repository returns None for missing documents; services convert
    None → NotFoundError so routes never inspect it.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id

"""
DA Admin Backend — Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the different error scenarios.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error envelopes with the matching HTTP status code.
Who:   Raised by services, the request body parser and the database bootstrap.

Exception Hierarchy:
    AdminAPIError (base)
    ├── ValidationError           → 400 Bad Request
    │   ├── MissingFieldsError    → 400 (required body fields absent/empty)
    │   ├── MalformedBodyError    → 400 (JSON body could not be parsed)
    │   └── PayloadTooLargeError  → 413 Payload Too Large
    ├── CORSRejectedError         → 403 Forbidden (origin not allowlisted)
    └── DatabaseError             → startup only, never reaches a client
"""

from typing import Any, Dict, Optional, Sequence


class AdminAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Error description (safe to return in API response)
        context:  Additional debug info
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


class ValidationError(AdminAPIError):
    """
    Raised when client input cannot be accepted as sent.

    HTTP: 400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class MissingFieldsError(ValidationError):
    """
    Raised when required body fields are missing or empty.

    Example response:
        {
            "error": "Email and password are required",
            "details": {"missing": ["password"]}
        }
    """

    def __init__(
        self,
        message: str,
        missing: Sequence[str],
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["missing"] = list(missing)
        super().__init__(message=message, context=ctx)
        self.missing = list(missing)


class MalformedBodyError(ValidationError):
    """
    Raised when a JSON request body does not parse.

    The handler never runs; the response is a 400, not the generic 500.
    """

    def __init__(
        self,
        detail: str = "Request body is not valid JSON",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message="Malformed JSON body", context=context)
        self.detail = detail


class PayloadTooLargeError(ValidationError):
    """
    Raised when the request body exceeds the configured ceiling.

    HTTP: 413 Payload Too Large
    """

    status_code = 413

    def __init__(
        self,
        limit: int,
        size: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["limit"] = limit
        if size is not None:
            ctx["size"] = size
        super().__init__(message="Payload too large", context=ctx)
        self.limit = limit
        self.size = size


class CORSRejectedError(AdminAPIError):
    """
    Raised by the cross-origin gate when a production request carries an
    origin outside the allowlist.

    HTTP: 403 Forbidden
    """

    status_code = 403

    def __init__(self, origin: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["origin"] = origin
        super().__init__(message=f"Not allowed by CORS. Origin: {origin}", context=ctx)
        self.origin = origin


class DatabaseError(AdminAPIError):
    """
    Raised when the startup database connection cannot be established.

    When:  Missing connection URL, unreachable server, connect timeout.
    Only fatal outside production; see database.bootstrap_database().
    """

    def __init__(
        self,
        message: str = "Database connection failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

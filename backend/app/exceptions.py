"""
Clinic Booking API — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the failure modes of the booking API.
How:   Each exception carries a user-facing message, a list of error messages
       for the response envelope, the HTTP status it maps to, and an optional
       context dict that is logged but never returned to the client.
Who:   Raised by services, repositories and the auth layer; caught by the
       global handlers registered in main.py.

Exception Hierarchy:
    BookingError (base)
    ├── ValidationError        → 400 Bad Request (bad input shape or rule failure)
    ├── ConflictError          → 400 Bad Request (uniqueness violation)
    ├── NotFoundError          → 404 Not Found
    │   └── InvalidPageError   → 404 Not Found (page outside 1..total_pages)
    ├── AuthenticationError    → 401 Unauthorized
    └── DatabaseError          → 500 Internal Server Error (generic message only)
"""

from typing import Any, Dict, List, Optional


class BookingError(Exception):
    """
    Base exception for all booking API errors.

    Attributes:
        message:         User-facing description (safe to return in API response)
        error_messages:  One entry per failed rule; rendered as `errorMessages`
        context:         Debug info (logged but NOT returned to client)
        status_code:     HTTP status the global handler responds with
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        error_messages: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_messages = list(error_messages) if error_messages else [message]
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BookingError):
    """
    Raised when a request fails validation before any mutation happens.

    When:    Required appointment fields missing, page size not positive,
             referenced customer/employee/service does not exist, or the
             request body does not match its schema.
    HTTP:    400 Bad Request

    Example envelope:
        {
            "isSuccess": false,
            "message": "Validation failed",
            "result": null,
            "statusCode": 400,
            "errorMessages": ["Customer Id is required", "Status is required"]
        }
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        error_messages: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, error_messages=error_messages, context=context)


class ConflictError(BookingError):
    """
    Raised when a create or update would violate a uniqueness rule.

    When:    Appointment slot already taken, customer email already registered,
             employee or service name already in use. Also raised by
             `CRUDRepository.save()` when the store's unique index rejects a
             write that slipped past the application-level check.
    HTTP:    400 Bad Request (the public surface reports conflicts as 400)
    """

    status_code = 400

    def __init__(
        self,
        message: str = "The record conflicts with an existing record",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(BookingError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; services convert that None into
    this exception so the handler can answer 404.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        if resource_id is not None:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class InvalidPageError(NotFoundError):
    """Raised when a requested page number falls outside 1..total_pages."""

    def __init__(self, page_number: int, total_pages: int):
        super().__init__(resource="page", context={"total_pages": total_pages})
        self.message = "Invalid page number"
        self.error_messages = [self.message]
        self.context["page_number"] = page_number
        self.page_number = page_number
        self.total_pages = total_pages


class AuthenticationError(BookingError):
    """
    Raised when credentials or a bearer token are rejected.

    HTTP:    401 Unauthorized, with a `WWW-Authenticate: Bearer` header
    """

    status_code = 401

    def __init__(
        self,
        message: str = "Invalid credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(BookingError):
    """
    Raised when a store operation fails unexpectedly.

    The message returned to the client is always generic; the underlying
    exception type and details go to the server log through `context`.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

"""
Quote Service — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the store's failure modes.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right status code.
Who:   Raised by QuoteStore; caught by the handlers in main.py.

Exception Hierarchy:
    QuoteServiceError (base)     → 500 Internal Server Error
    ├── DatabaseError            → 500 Internal Server Error
    └── EmptyStoreError          → 500 Internal Server Error (no_data)

A missing quote is not an exception: QuoteStore.find_by_id returns None and
the route answers 404 itself. Malformed path parameters surface as FastAPI's
RequestValidationError, mapped to 400 in main.py.
"""

from typing import Any, Dict, Optional


class QuoteServiceError(Exception):
    """
    Base exception for all Quote Service errors.

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


class DatabaseError(QuoteServiceError):
    """
    Raised when a query cannot be executed.

    When:    Connection refused or lost, missing table, driver failure.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the driver error
    type and the failing operation are kept in `context` for the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class EmptyStoreError(QuoteServiceError):
    """
    Raised when a random quote is requested from an empty `quotes` table.

    HTTP:    500 Internal Server Error (error code `no_data`)
    """

    def __init__(
        self,
        message: str = "No quotes are available.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

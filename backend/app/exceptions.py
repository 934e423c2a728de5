"""
Records API - Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions raised by the service layer.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) turn them into
       JSON error responses; the context is logged, never returned.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    RecordsAPIError (base)     → 500 Internal Server Error
    └── DatabaseError          → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class RecordsAPIError(Exception):
    """
    Base exception for all Records API errors.

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


class DatabaseError(RecordsAPIError):
    """
    Raised when a store operation fails for any reason.

    When:    Connection refused or lost, SQL error, constraint violation.
    HTTP:    500 Internal Server Error

    The message is the generic text shown to the client, e.g.
    "Error inserting data". The original exception is chained as
    __cause__ and its type name is kept in `context` for the logs.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

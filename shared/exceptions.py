"""
Base exception classes for the Catalog Accounts backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base to an HTTP status (see api/errors.py).
"""

from typing import Optional, Any


class CatalogError(Exception):
    """
    Base exception for all Catalog errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(CatalogError):
    """Resource not found."""

    pass


class ValidationError(CatalogError):
    """Input validation failed."""

    pass


class AuthenticationError(CatalogError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(CatalogError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConflictError(CatalogError):
    """Resource already exists."""

    pass


class CapacityError(CatalogError):
    """A bounded collection is full."""

    pass


class MutationError(CatalogError):
    """A store update unexpectedly had no effect."""

    pass


class ExternalServiceError(CatalogError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service

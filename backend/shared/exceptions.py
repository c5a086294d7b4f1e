"""
Base exception classes for the Storefront backend.

Each module defines its own exceptions that inherit from these bases.
Every exception carries the HTTP status and client-visible message it
renders to, so route handlers can convert them without a lookup table.
"""

from typing import Optional, Any


class StorefrontError(Exception):
    """
    Base exception for all Storefront errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the response body sent to the client."""
        return {
            "success": False,
            "message": self.message,
        }


class NotFoundError(StorefrontError):
    """Resource not found."""

    status_code = 404


class ValidationError(StorefrontError):
    """Input validation failed."""

    status_code = 400


class ConflictError(StorefrontError):
    """Request conflicts with existing state."""

    status_code = 409


class AuthenticationError(StorefrontError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(StorefrontError):
    """Authorization failed (insufficient permissions)."""

    status_code = 401


class InvalidIdError(ValidationError):
    """A document id could not be parsed."""

    def __init__(self, value: Any):
        super().__init__(
            f"Invalid id: {value!r}",
            code="INVALID_ID",
            details={"id": str(value)},
        )


class ConfigurationError(StorefrontError):
    """Required process configuration is missing or invalid."""

    pass

"""
Authentication module.

Handles credential hashing, token issue and verification, registration,
login, password reset and profile updates.

Public API:
- IAuthService: Interface for auth operations
- ICredentialHasher / ITokenService: Interfaces for the auth primitives
- Request models: RegisterRequest, LoginRequest, ForgotPasswordRequest, UpdateProfileRequest
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService, ICredentialHasher, ITokenService
from .models import (
    ForgotPasswordRequest,
    LoginRequest,
    LoginResult,
    RegisterRequest,
    UpdateProfileRequest,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    FieldRequiredError,
    AlreadyRegisteredError,
    EmailNotRegisteredError,
    InvalidPasswordError,
    WrongAnswerError,
    PasswordTooShortError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "ICredentialHasher",
    "ITokenService",
    # Models
    "ForgotPasswordRequest",
    "LoginRequest",
    "LoginResult",
    "RegisterRequest",
    "UpdateProfileRequest",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "FieldRequiredError",
    "AlreadyRegisteredError",
    "EmailNotRegisteredError",
    "InvalidPasswordError",
    "WrongAnswerError",
    "PasswordTooShortError",
]

"""
Authentication module interfaces.

Route handlers and the auth middleware depend on these protocols, not the
concrete implementations, so tests can substitute mocks.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import TokenClaims

from .models import (
    ForgotPasswordRequest,
    LoginRequest,
    LoginResult,
    RegisterRequest,
    UpdateProfileRequest,
)


@runtime_checkable
class ICredentialHasher(Protocol):
    """One-way password hashing."""

    async def hash(self, plaintext: Optional[str]) -> Optional[str]:
        """Hash a password; None on failure."""
        ...

    async def compare(self, plaintext: str, hashed: str) -> bool:
        """Check a password against a hash."""
        ...


@runtime_checkable
class ITokenService(Protocol):
    """Bearer token issuing and verification."""

    def issue(self, user_id: str, role: Optional[Any] = None) -> str:
        """Sign a token for a user."""
        ...

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            AuthenticationError: If the token is absent, invalid or expired
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for account operations.

    Every method raises a StorefrontError subclass for expected failures
    (validation, not found, bad credentials); anything else is unexpected.
    """

    async def register(self, request: RegisterRequest) -> dict[str, Any]:
        """Create an account and return the stored user."""
        ...

    async def login(self, request: LoginRequest) -> LoginResult:
        """Check credentials and issue a token."""
        ...

    async def forgot_password(self, request: ForgotPasswordRequest) -> None:
        """Reset a password given the account's secret answer."""
        ...

    async def update_profile(
        self, user_id: Optional[str], request: UpdateProfileRequest
    ) -> Optional[dict[str, Any]]:
        """Update the caller's profile and return the updated user."""
        ...

"""
Bearer token issuing and verification.

Tokens are HS256 JWTs carrying the user's id (`_id`) and role, valid for
a fixed number of days. Nothing is stored server-side.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import ConfigurationError
from shared.models import TokenClaims

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError


class TokenService:
    """Signs and verifies bearer tokens with the server secret."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_days: int = 7):
        if not secret:
            raise ConfigurationError("Server authentication not configured")
        self._secret = secret
        self._algorithm = algorithm
        self._expires = timedelta(days=expires_days)

    def issue(self, user_id: str, role: Optional[Any] = None) -> str:
        """
        Create a signed token for a user.

        Args:
            user_id: The user's document id
            role: Role at issue time; informational only

        Returns:
            Encoded JWT string
        """
        now = datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "_id": user_id,
            "iat": now,
            "exp": now + self._expires,
        }
        if role is not None:
            payload["role"] = role
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Validate signature and expiry and return the claims.

        Raises:
            MissingTokenError: No token was presented
            ExpiredTokenError: Token is past its expiry
            InvalidTokenError: Token is malformed or wrongly signed
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        try:
            return TokenClaims.model_validate(payload)
        except PydanticValidationError as e:
            raise InvalidTokenError(f"Unreadable claims: {e.error_count()} error(s)")

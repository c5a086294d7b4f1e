"""Tests for modules/auth/tokens.py."""

import pytest
import jwt
from datetime import datetime, timedelta, timezone

from modules.auth.exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from modules.auth.interfaces import ITokenService
from modules.auth.tokens import TokenService
from shared.exceptions import AuthenticationError, ConfigurationError


SECRET = "test-secret"


class TestTokenService:
    @pytest.fixture
    def service(self):
        return TokenService(secret=SECRET)

    def test_implements_interface(self, service):
        assert isinstance(service, ITokenService)

    def test_requires_secret(self):
        with pytest.raises(ConfigurationError):
            TokenService(secret="")

    def test_issue_then_verify(self, service):
        token = service.issue("user-123", role=0)
        claims = service.verify(token)
        assert claims.id == "user-123"
        assert claims.role == 0

    def test_role_is_optional(self, service):
        claims = service.verify(service.issue("user-123"))
        assert claims.role is None
        assert "role" not in jwt.decode(service.issue("user-123"), SECRET, algorithms=["HS256"])

    def test_expires_after_seven_days(self, service):
        claims = service.verify(service.issue("user-123"))
        assert claims.exp - claims.iat == 7 * 24 * 3600

    def test_custom_expiry(self):
        service = TokenService(secret=SECRET, expires_days=1)
        claims = service.verify(service.issue("user-123"))
        assert claims.exp - claims.iat == 24 * 3600

    def test_verify_is_repeatable(self, service):
        """Nothing is consumed by verification."""
        token = service.issue("user-123")
        assert service.verify(token) == service.verify(token)

    def test_tokens_for_same_identity_verify_independently(self, service):
        first = service.issue("user-123", 1)
        second = service.issue("user-123", 1)

        first_claims = service.verify(first)
        second_claims = service.verify(second)

        assert (first_claims.id, first_claims.role) == ("user-123", 1)
        assert (second_claims.id, second_claims.role) == (first_claims.id, first_claims.role)
        assert second_claims.exp - second_claims.iat == first_claims.exp - first_claims.iat

    def test_expired_token(self, service):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"_id": "user-123", "iat": now - timedelta(days=8), "exp": now - timedelta(days=1)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(ExpiredTokenError) as exc_info:
            service.verify(token)
        assert exc_info.value.code == "TOKEN_EXPIRED"

    def test_wrong_secret(self, service):
        token = TokenService(secret="other-secret").issue("user-123")
        with pytest.raises(InvalidTokenError) as exc_info:
            service.verify(token)
        assert exc_info.value.code == "INVALID_TOKEN"

    def test_malformed_token(self, service):
        with pytest.raises(InvalidTokenError):
            service.verify("not-a-valid-token")

    @pytest.mark.parametrize("token", ["", None])
    def test_missing_token(self, service, token):
        with pytest.raises(MissingTokenError) as exc_info:
            service.verify(token)
        assert exc_info.value.code == "MISSING_TOKEN"

    def test_unreadable_claims(self, service):
        """A signed token whose id is not a string is rejected."""
        token = jwt.encode({"_id": 12345}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            service.verify(token)

    def test_token_failures_are_authentication_errors(self):
        for error in (ExpiredTokenError(), InvalidTokenError(), MissingTokenError()):
            assert isinstance(error, AuthenticationError)
            assert error.status_code == 401

"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Route tests run against the real application with the token service and
user repository swapped for test doubles, so no database is needed.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Any, Optional
from unittest.mock import MagicMock
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api import app
from api.dependencies import get_token_service, get_user_repository, reset_container
from modules.auth.tokens import TokenService


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

ADMIN_ID = "64b7f0c2a1b2c3d4e5f60718"
USER_ID = "64b7f0c2a1b2c3d4e5f60719"


def create_test_token(
    user_id: Optional[str] = USER_ID,
    role: Optional[Any] = None,
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token; None leaves it out
        role: Role claim to include, if any
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(days=7)

    payload: dict[str, Any] = {
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    if user_id is not None:
        payload["_id"] = user_id
    if role is not None:
        payload["role"] = role
    return jwt.encode(payload, secret, algorithm="HS256")


def make_user(user_id: str = USER_ID, role: Any = 0, **fields: Any) -> dict[str, Any]:
    """A stored user document as the repository returns it."""
    user = {
        "_id": user_id,
        "name": "Sheen",
        "email": "sheen@example.com",
        "password": "$2b$10$storedhash",
        "phone": "5550100",
        "address": "1 Main St",
        "answer": "blue",
        "role": role,
    }
    user.update(fields)
    return user


@pytest.fixture(autouse=True)
def reset_services():
    """Reset the service container and dependency overrides around each test."""
    reset_container()
    yield
    app.dependency_overrides.clear()
    reset_container()


@pytest.fixture
def token_service() -> TokenService:
    """Token service signing with the test secret."""
    return TokenService(secret=TEST_JWT_SECRET)


@pytest.fixture
def users() -> dict[str, dict[str, Any]]:
    """Stored users by id: one admin, one regular user."""
    return {
        ADMIN_ID: make_user(ADMIN_ID, role=1, name="Admin", email="admin@example.com"),
        USER_ID: make_user(USER_ID, role=0),
    }


@pytest.fixture
def user_repository(users) -> MagicMock:
    """User repository double backed by the `users` fixture."""
    repo = MagicMock()
    repo.get_by_id.side_effect = lambda user_id: users.get(user_id)
    return repo


@pytest.fixture
def client(token_service, user_repository) -> TestClient:
    """Test client with auth dependencies overridden."""
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_user_repository] = lambda: user_repository
    return TestClient(app)


@pytest.fixture
def user_headers() -> dict[str, str]:
    """Authorization header for the regular user (raw token, no scheme)."""
    return {"Authorization": create_test_token(USER_ID, role=0)}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Authorization header for the admin."""
    return {"Authorization": create_test_token(ADMIN_ID, role=1)}

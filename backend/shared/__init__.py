"""
Shared infrastructure for Storefront backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: MongoDB client factory
- repository: Base repository and document conversion helpers
- exceptions: Base exception classes
- logging_config: Root logger setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_database, get_mongo_client, reset_client_cache
from .exceptions import (
    StorefrontError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    InvalidIdError,
    ConfigurationError,
)
from .models import TokenClaims, ADMIN_ROLE, USER_ROLE, is_admin_role

__all__ = [
    "Settings",
    "get_settings",
    "get_database",
    "get_mongo_client",
    "reset_client_cache",
    "StorefrontError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "InvalidIdError",
    "ConfigurationError",
    "TokenClaims",
    "ADMIN_ROLE",
    "USER_ROLE",
    "is_admin_role",
]

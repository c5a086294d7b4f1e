"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

# Stored role values
USER_ROLE = 0
ADMIN_ROLE = 1


class TokenClaims(BaseModel):
    """
    Identity context attached to a request once its token has verified.

    This is whatever the signed token carried. No shape validation is done
    beyond signature and expiry, so `id` may be missing on tokens that
    were minted without one; handlers that need the id must check it.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
    )

    id: Optional[str] = Field(default=None, alias="_id", description="User ID")
    role: Optional[Any] = Field(default=None, description="Role at issue time (informational)")
    iat: Optional[int] = Field(default=None, description="Issued at timestamp")
    exp: Optional[int] = Field(default=None, description="Expiration timestamp")


def is_admin_role(role: Any) -> bool:
    """
    Strict admin check.

    Only the integer sentinel counts: "1", 2, True, None and missing
    roles are all rejected.
    """
    return type(role) is int and role == ADMIN_ROLE

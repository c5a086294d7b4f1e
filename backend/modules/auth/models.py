"""
Authentication module request and response models.

Request fields are all optional: presence and blankness are checked by
the service so that clients receive field-specific messages instead of
generic schema errors.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class _RequestModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)


class RegisterRequest(_RequestModel):
    """Body of POST /auth/register."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    answer: Optional[str] = None


class LoginRequest(_RequestModel):
    """Body of POST /auth/login."""

    email: Optional[str] = None
    password: Optional[str] = None


class ForgotPasswordRequest(_RequestModel):
    """Body of POST /auth/forgot-password."""

    email: Optional[str] = None
    answer: Optional[str] = None
    new_password: Optional[str] = Field(default=None, alias="newPassword")


class UpdateProfileRequest(_RequestModel):
    """Body of PUT /auth/profile. Email cannot be changed."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class LoginResult(BaseModel):
    """Token and public profile returned by a successful login."""

    user: dict[str, Any]
    token: str

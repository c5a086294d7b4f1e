"""
Auth API endpoints.

Registration, login, password reset, profile updates and the auth checks
the client uses to decide whether to render protected pages.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.dependencies import get_auth_service
from api.middleware.auth import is_admin, require_sign_in
from api.models.responses import (
    OkResponse,
    error_response,
    exception_response,
    success_response,
)
from shared.exceptions import StorefrontError
from shared.models import TokenClaims

from .exceptions import PasswordTooShortError
from .interfaces import IAuthService
from .models import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register")
async def register(
    request: Optional[RegisterRequest] = None,
    service: IAuthService = Depends(get_auth_service),
):
    """Create a new account."""
    try:
        user = await service.register(request or RegisterRequest())
    except StorefrontError as e:
        return exception_response(e)
    except Exception as e:
        logger.exception("Error in registration")
        return error_response(500, "Error in registration", e)

    return success_response(201, message="User registered successfully", user=user)


@router.post("/login")
async def login(
    request: Optional[LoginRequest] = None,
    service: IAuthService = Depends(get_auth_service),
):
    """
    Log in with email and password.

    Returns the public profile and a token to send back in the
    Authorization header.
    """
    try:
        result = await service.login(request or LoginRequest())
    except StorefrontError as e:
        return exception_response(e)
    except Exception as e:
        logger.exception("Error in login")
        return error_response(500, "Error in login", e)

    return success_response(
        200,
        message="Login successfully",
        user=result.user,
        token=result.token,
    )


@router.post("/forgot-password")
async def forgot_password(
    request: Optional[ForgotPasswordRequest] = None,
    service: IAuthService = Depends(get_auth_service),
):
    """Reset a password using the account's secret answer."""
    try:
        await service.forgot_password(request or ForgotPasswordRequest())
    except StorefrontError as e:
        return exception_response(e)
    except Exception as e:
        logger.exception("Error in forgot password")
        return error_response(500, "Something went wrong", e)

    return success_response(200, message="Password reset successfully")


@router.get("/test", response_class=PlainTextResponse, dependencies=[Depends(is_admin)])
async def protected_test() -> str:
    """Reachable only when both auth stages pass."""
    return "Protected Routes"


@router.get("/user-auth", response_model=OkResponse, dependencies=[Depends(require_sign_in)])
async def user_auth() -> OkResponse:
    """Auth check for signed-in pages."""
    return OkResponse(ok=True)


@router.get("/admin-auth", response_model=OkResponse, dependencies=[Depends(is_admin)])
async def admin_auth() -> OkResponse:
    """Auth check for admin pages."""
    return OkResponse(ok=True)


@router.put("/profile")
async def update_profile(
    request: Optional[UpdateProfileRequest] = None,
    user: TokenClaims = Depends(require_sign_in),
    service: IAuthService = Depends(get_auth_service),
):
    """Update the signed-in user's profile."""
    try:
        updated = await service.update_profile(user.id, request or UpdateProfileRequest())
    except PasswordTooShortError as e:
        return exception_response(e)
    except Exception as e:
        logger.exception("Error while updating profile")
        return error_response(400, "Error while updating profile", e)

    return success_response(200, message="Profile updated successfully", updatedUser=updated)

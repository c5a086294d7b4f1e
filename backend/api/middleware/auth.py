"""
Authentication middleware.

Two FastAPI dependencies form the pipeline for protected routes:

    require_sign_in -> is_admin -> route handler

`require_sign_in` verifies the raw Authorization header and attaches the
token claims to the request. `is_admin` depends on it and re-reads the
user's role from the store on every request, so a role change takes
effect without re-issuing tokens. Either stage short-circuits with 401.

FastAPI decodes a JSON body before it resolves dependencies, so a
malformed body on a protected route surfaces as a RequestValidationError.
`validation_error_handler` runs the same stages for such routes before
answering 422.
"""

import logging
from typing import Any, Callable, Optional

from fastapi import Depends, Request
from fastapi.dependencies.models import Dependant
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError

from shared.exceptions import AuthenticationError
from shared.models import TokenClaims, is_admin_role
from modules.auth.interfaces import ITokenService
from modules.users.exceptions import UserNotFoundError
from modules.users.repository import UserRepository

from ..dependencies import get_token_service, get_user_repository
from ..models.responses import ApiError, api_error_handler, serialize_error

logger = logging.getLogger(__name__)

UNAUTHORIZED = "Unauthorized"
UNAUTHORIZED_ACCESS = "Unauthorized Access"
ADMIN_MIDDLEWARE_ERROR = "Error in admin middleware"


def authenticate(token: Optional[str], tokens: ITokenService) -> TokenClaims:
    """Verify a raw header value, raising ApiError(401) on any failure."""
    try:
        return tokens.verify(token)
    except AuthenticationError as e:
        logger.info("Rejected token [%s]: %s", e.code, e.message)
        raise ApiError(401, {"success": False, "message": UNAUTHORIZED})
    except Exception:
        logger.exception("Token verification failed")
        raise ApiError(401, {"success": False, "message": UNAUTHORIZED})


def authorize_admin(claims: TokenClaims, users: UserRepository) -> TokenClaims:
    """Check the stored role for the claims' user, raising ApiError(401) if not admin."""
    try:
        user = users.get_by_id(claims.id)
        if user is None:
            raise UserNotFoundError(str(claims.id))
        role = user.get("role")
    except Exception as e:
        logger.exception(ADMIN_MIDDLEWARE_ERROR)
        raise ApiError(
            401,
            {
                "success": False,
                "error": serialize_error(e),
                "message": ADMIN_MIDDLEWARE_ERROR,
            },
        )

    if not is_admin_role(role):
        logger.info("User %s denied admin access (role=%r)", claims.id, role)
        raise ApiError(401, {"success": False, "message": UNAUTHORIZED_ACCESS})

    return claims


async def require_sign_in(
    request: Request,
    tokens: ITokenService = Depends(get_token_service),
) -> TokenClaims:
    """
    Dependency that requires a valid token.

    The header value is passed to verification as-is; there is no
    `Bearer ` scheme prefix. The claims are not checked for an id.

    Usage:
        @router.get("/protected")
        async def protected_route(user: TokenClaims = Depends(require_sign_in)):
            return {"user_id": user.id}
    """
    claims = authenticate(request.headers.get("Authorization"), tokens)
    request.state.user = claims
    return claims


async def is_admin(
    claims: TokenClaims = Depends(require_sign_in),
    users: UserRepository = Depends(get_user_repository),
) -> TokenClaims:
    """
    Dependency that requires the signed-in user to be an admin.

    Only the stored role counts; the role inside the token is ignored.
    """
    return authorize_admin(claims, users)


def _dependency_calls(dependant: Dependant) -> set[Callable[..., Any]]:
    calls: set[Callable[..., Any]] = set()
    for sub in dependant.dependencies:
        if sub.call is not None:
            calls.add(sub.call)
        calls |= _dependency_calls(sub)
    return calls


def _resolve(request: Request, dependency: Callable[..., Any]) -> Any:
    """Call a provider, honouring app.dependency_overrides."""
    return request.app.dependency_overrides.get(dependency, dependency)()


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Exception handler for RequestValidationError.

    On routes guarded by require_sign_in (directly or through is_admin)
    the auth stages answer first, so a caller without a valid token gets
    401 whatever the body looks like.
    """
    route = request.scope.get("route")
    dependant = getattr(route, "dependant", None)
    if dependant is not None:
        calls = _dependency_calls(dependant)
        try:
            if require_sign_in in calls or is_admin in calls:
                claims = authenticate(
                    request.headers.get("Authorization"),
                    _resolve(request, get_token_service),
                )
                if is_admin in calls:
                    authorize_admin(claims, _resolve(request, get_user_repository))
        except ApiError as e:
            return await api_error_handler(request, e)

    return await request_validation_exception_handler(request, exc)

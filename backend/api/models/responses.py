"""
Response helpers.

Every endpoint answers with a JSON object carrying a `success` flag and,
on failure, a `message` the client shows to the user. Unexpected errors
also carry an `error` object describing the exception.
"""

from typing import Any, Optional

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.exceptions import StorefrontError


class OkResponse(BaseModel):
    """Auth check response."""

    ok: bool = True


def serialize_error(exc: BaseException) -> dict[str, Any]:
    """Describe an exception for inclusion in a response body."""
    return {"name": type(exc).__name__, "message": str(exc)}


def error_response(
    status_code: int,
    message: str,
    error: Optional[BaseException] = None,
) -> JSONResponse:
    """Build a failure response, optionally carrying the error."""
    content: dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        content["error"] = serialize_error(error)
    return JSONResponse(status_code=status_code, content=content)


def success_response(status_code: int = 200, **content: Any) -> JSONResponse:
    """Build a success response with the given fields."""
    return JSONResponse(status_code=status_code, content={"success": True, **content})


def exception_response(exc: StorefrontError) -> JSONResponse:
    """Render an expected module error with its own status and body."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


class ApiError(HTTPException):
    """
    Short-circuits a request from a dependency with an exact JSON body.

    Rendered by `api_error_handler`, which create_app registers.
    """

    def __init__(self, status_code: int, body: dict[str, Any]):
        super().__init__(status_code=status_code, detail=body.get("message"))
        self.body = body


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Exception handler for ApiError."""
    return JSONResponse(status_code=exc.status_code, content=exc.body)

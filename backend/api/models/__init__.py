"""API models package."""

from .responses import (
    ApiError,
    OkResponse,
    api_error_handler,
    error_response,
    exception_response,
    serialize_error,
    success_response,
)

__all__ = [
    "ApiError",
    "OkResponse",
    "api_error_handler",
    "error_response",
    "exception_response",
    "serialize_error",
    "success_response",
]

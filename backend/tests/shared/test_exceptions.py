"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    StorefrontError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    InvalidIdError,
    ConfigurationError,
)


class TestStorefrontError:
    def test_storefront_error_message(self):
        """StorefrontError should store message."""
        error = StorefrontError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_storefront_error_default_code(self):
        """StorefrontError should default code to class name."""
        error = StorefrontError("Test error")
        assert error.code == "StorefrontError"

    def test_storefront_error_custom_code(self):
        error = StorefrontError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_storefront_error_default_details(self):
        error = StorefrontError("Test error")
        assert error.details == {}

    def test_default_status_is_500(self):
        assert StorefrontError("boom").status_code == 500

    def test_status_override_per_instance(self):
        """A status passed in wins over the class default."""
        error = NotFoundError("gone", status_code=410)
        assert error.status_code == 410
        assert NotFoundError("gone").status_code == 404

    def test_to_dict(self):
        """Rendered body has the success flag and message only."""
        error = StorefrontError("Test error", code="X", details={"a": 1})
        assert error.to_dict() == {"success": False, "message": "Test error"}


class TestSubclasses:
    @pytest.mark.parametrize(
        "cls,status",
        [
            (NotFoundError, 404),
            (ValidationError, 400),
            (ConflictError, 409),
            (AuthenticationError, 401),
            (AuthorizationError, 401),
            (ConfigurationError, 500),
        ],
    )
    def test_status_codes(self, cls, status):
        error = cls("message")
        assert isinstance(error, StorefrontError)
        assert error.status_code == status

    def test_invalid_id_error(self):
        error = InvalidIdError("not-an-id")
        assert isinstance(error, ValidationError)
        assert error.code == "INVALID_ID"
        assert error.details == {"id": "not-an-id"}
        assert error.status_code == 400

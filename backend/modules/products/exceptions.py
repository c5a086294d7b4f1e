"""
Products module exceptions.
"""

from typing import Any

from shared.exceptions import NotFoundError, StorefrontError


class ProductFieldError(StorefrontError):
    """
    A product form field is missing or unusable.

    Rendered as `{"error": message}` with status 500, which is what the
    admin client already handles.
    """

    def __init__(self, message: str):
        super().__init__(message, code="PRODUCT_FIELD")

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class ProductNotFoundError(NotFoundError):
    """Raised when a product id or slug does not exist."""

    def __init__(self, key: str, message: str = "Product not found"):
        super().__init__(message, code="PRODUCT_NOT_FOUND", details={"product": key})


class PhotoNotAvailableError(NotFoundError):
    """Raised when a product has no stored photo."""

    def __init__(self, product_id: str):
        super().__init__(
            "No photo available",
            code="PHOTO_NOT_AVAILABLE",
            details={"product_id": product_id},
        )

"""
Categories module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class CategoryNameRequiredError(ValidationError):
    """Raised when a category name is missing or blank."""

    status_code = 422

    def __init__(self, message: str = "Category name cannot be empty"):
        super().__init__(message, code="CATEGORY_NAME_REQUIRED")


class CategoryExistsError(ConflictError):
    """Raised when creating a category whose name is taken."""

    def __init__(self, name: str):
        super().__init__(
            "Category already exists",
            code="CATEGORY_EXISTS",
            details={"name": name},
        )


class CategoryNotFoundError(NotFoundError):
    """Raised when a category id does not exist."""

    def __init__(self, category_id: str):
        super().__init__(
            "Category not found",
            code="CATEGORY_NOT_FOUND",
            details={"category_id": category_id},
        )

"""
Category service implementation.
"""

from typing import Any, Optional

from pymongo.errors import DuplicateKeyError

from .exceptions import CategoryExistsError, CategoryNameRequiredError, CategoryNotFoundError
from .interfaces import ICategoryService
from .models import make_slug
from .repository import CategoryRepository


class CategoryService(ICategoryService):
    """Category CRUD. Names are trimmed before they are stored."""

    def __init__(self, repository: CategoryRepository):
        self._repository = repository

    async def create_category(self, name: Optional[str]) -> dict[str, Any]:
        if not name or not name.strip():
            raise CategoryNameRequiredError()
        name = name.strip()

        if self._repository.get_by_name(name):
            raise CategoryExistsError(name)

        try:
            return self._repository.create(name, make_slug(name))
        except DuplicateKeyError:
            # Different name, same slug
            raise CategoryExistsError(name)

    async def update_category(self, category_id: str, name: Optional[str]) -> dict[str, Any]:
        if not name or not name.strip():
            raise CategoryNameRequiredError("New category name cannot be empty")
        if not category_id:
            raise CategoryNameRequiredError("Category id cannot be empty")
        name = name.strip()

        try:
            category = self._repository.update(category_id, name, make_slug(name))
        except DuplicateKeyError:
            raise CategoryExistsError(name)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def list_categories(self) -> list[dict[str, Any]]:
        return self._repository.list_all()

    async def get_category(self, slug: str) -> Optional[dict[str, Any]]:
        return self._repository.get_by_slug(slug)

    async def delete_category(self, category_id: str) -> None:
        self._repository.delete(category_id)

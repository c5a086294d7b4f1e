"""
Products module interface.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import PhotoUpload, ProductFilters, ProductForm


@runtime_checkable
class IProductService(Protocol):
    """Interface for product operations."""

    async def create_product(self, form: ProductForm, photo: Optional[PhotoUpload]) -> dict[str, Any]:
        ...

    async def update_product(
        self, product_id: Optional[str], form: ProductForm, photo: Optional[PhotoUpload]
    ) -> dict[str, Any]:
        ...

    async def get_products(self) -> list[dict[str, Any]]:
        ...

    async def get_product(self, slug: str) -> dict[str, Any]:
        ...

    async def get_photo(self, product_id: str) -> PhotoUpload:
        ...

    async def delete_product(self, product_id: Optional[str]) -> dict[str, Any]:
        ...

    async def filter_products(self, filters: ProductFilters) -> list[dict[str, Any]]:
        ...

    async def count_products(self) -> int:
        ...

    async def list_page(self, page: int) -> list[dict[str, Any]]:
        ...

    async def search_products(self, keyword: str) -> list[dict[str, Any]]:
        ...

    async def related_products(self, product_id: str, category_id: str) -> list[dict[str, Any]]:
        ...

    async def products_by_category(self, slug: str) -> tuple[Optional[dict[str, Any]], list[dict[str, Any]]]:
        ...

"""
Product service implementation.

Create and update share one validation path: fields are checked in a
fixed order (name, description, price, category, quantity, photo) and
the first failure is reported.
"""

import logging
from typing import Any, Optional

from modules.categories.models import make_slug
from modules.categories.repository import CategoryRepository
from shared.config import Settings

from .exceptions import PhotoNotAvailableError, ProductFieldError, ProductNotFoundError
from .interfaces import IProductService
from .models import PhotoUpload, ProductFilters, ProductForm
from .repository import ProductRepository

logger = logging.getLogger(__name__)

# Number of products on the landing list
RECENT_PRODUCTS_LIMIT = 12

REQUIRED_FIELDS = [
    ("name", "Name"),
    ("description", "Description"),
    ("price", "Price"),
    ("category", "Category"),
    ("quantity", "Quantity"),
]

TRUE_VALUES = {"true", "1", "yes", "on"}


class ProductService(IProductService):
    """Product catalogue operations."""

    def __init__(
        self,
        repository: ProductRepository,
        categories: CategoryRepository,
        settings: Settings,
    ):
        self._repository = repository
        self._categories = categories
        self._max_photo_size = settings.max_photo_size
        self._per_page = settings.products_per_page
        self._related_limit = settings.related_products_limit

    def _validate(self, form: ProductForm, photo: Optional[PhotoUpload]) -> dict[str, Any]:
        """
        Check and convert the form into stored fields.

        Raises:
            ProductFieldError: For the first missing or unusable field
        """
        for attr, label in REQUIRED_FIELDS:
            value = getattr(form, attr)
            if value is None or not value.strip():
                raise ProductFieldError(f"{label} is Required")
        if photo is None or photo.size == 0:
            raise ProductFieldError("Photo is Required")
        if photo.size > self._max_photo_size:
            raise ProductFieldError("Photo Should Be Smaller Than 1MB")

        try:
            price = float(form.price)
        except ValueError:
            raise ProductFieldError("Price must be a number")
        try:
            quantity = int(form.quantity)
        except ValueError:
            raise ProductFieldError("Quantity must be a whole number")

        return {
            "name": form.name,
            "slug": make_slug(form.name),
            "description": form.description,
            "price": price,
            "category": form.category,
            "quantity": quantity,
            "shipping": (form.shipping or "").strip().lower() in TRUE_VALUES,
        }

    async def create_product(self, form: ProductForm, photo: Optional[PhotoUpload]) -> dict[str, Any]:
        fields = self._validate(form, photo)
        product = self._repository.create(fields, photo)
        logger.info("Created product %s", product["_id"])
        return product

    async def update_product(
        self, product_id: Optional[str], form: ProductForm, photo: Optional[PhotoUpload]
    ) -> dict[str, Any]:
        if not product_id:
            raise ProductFieldError("PID is Required")
        fields = self._validate(form, photo)
        product = self._repository.update(product_id, fields, photo)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def get_products(self) -> list[dict[str, Any]]:
        return self._repository.list_recent(RECENT_PRODUCTS_LIMIT)

    async def get_product(self, slug: str) -> dict[str, Any]:
        product = self._repository.get_by_slug(slug)
        if product is None:
            raise ProductNotFoundError(slug)
        return product

    async def get_photo(self, product_id: str) -> PhotoUpload:
        photo = self._repository.get_photo(product_id)
        if photo is None:
            raise ProductNotFoundError(product_id)
        if not photo.get("data"):
            raise PhotoNotAvailableError(product_id)
        return PhotoUpload(
            data=bytes(photo["data"]),
            content_type=photo.get("contentType") or "application/octet-stream",
        )

    async def delete_product(self, product_id: Optional[str]) -> dict[str, Any]:
        """
        Delete a product.

        Raises:
            ProductFieldError: No id given
            InvalidIdError: The id is malformed
            ProductNotFoundError: No such product
        """
        if not product_id:
            raise ProductFieldError("Product ID is required")
        product = self._repository.delete(product_id)
        if product is None:
            raise ProductNotFoundError(product_id, message="Product does not exist")
        return product

    async def filter_products(self, filters: ProductFilters) -> list[dict[str, Any]]:
        price_range = None
        if len(filters.radio) >= 2:
            price_range = (filters.radio[0], filters.radio[1])
        return self._repository.find_filtered(filters.checked, price_range)

    async def count_products(self) -> int:
        return self._repository.count()

    async def list_page(self, page: int) -> list[dict[str, Any]]:
        return self._repository.list_page(max(page, 1), self._per_page)

    async def search_products(self, keyword: str) -> list[dict[str, Any]]:
        return self._repository.search(keyword)

    async def related_products(self, product_id: str, category_id: str) -> list[dict[str, Any]]:
        return self._repository.find_related(product_id, category_id, self._related_limit)

    async def products_by_category(
        self, slug: str
    ) -> tuple[Optional[dict[str, Any]], list[dict[str, Any]]]:
        """Category by slug and its products; an unknown slug yields (None, [])."""
        category = self._categories.get_by_slug(slug)
        if category is None:
            return None, []
        return category, self._repository.find_by_category(category["_id"])

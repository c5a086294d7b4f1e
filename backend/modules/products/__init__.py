"""
Products module.

Product catalogue: admin CRUD with photo storage, public listing,
filtering, paging and search.
"""

from .interfaces import IProductService
from .models import PhotoUpload, ProductFilters, ProductForm
from .exceptions import (
    PhotoNotAvailableError,
    ProductFieldError,
    ProductNotFoundError,
)

__all__ = [
    "IProductService",
    "PhotoUpload",
    "ProductFilters",
    "ProductForm",
    "PhotoNotAvailableError",
    "ProductFieldError",
    "ProductNotFoundError",
]

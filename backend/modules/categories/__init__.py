"""
Categories module.

Product categories, addressed externally by slug.
"""

from .interfaces import ICategoryService
from .exceptions import CategoryExistsError, CategoryNameRequiredError, CategoryNotFoundError

__all__ = [
    "ICategoryService",
    "CategoryExistsError",
    "CategoryNameRequiredError",
    "CategoryNotFoundError",
]

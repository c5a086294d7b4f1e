"""
Category data models.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict
from slugify import slugify


class CategoryRequest(BaseModel):
    """Body of the create and update category endpoints."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None


def make_slug(name: str) -> str:
    """URL-safe, lowercase, hyphenated form of a name."""
    return slugify(name)

"""
Product data models.
"""

from dataclasses import dataclass
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ProductForm(BaseModel):
    """
    Multipart fields of the create and update product endpoints.

    Everything arrives as text; the service checks presence and converts.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[str] = None
    shipping: Optional[str] = None


@dataclass
class PhotoUpload:
    """An uploaded photo, kept as opaque bytes."""

    data: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.data)


class ProductFilters(BaseModel):
    """Body of POST /product/product-filters."""

    model_config = ConfigDict(extra="ignore")

    checked: list[str] = Field(default_factory=list, description="Category ids")
    radio: list[float] = Field(default_factory=list, description="[min, max] price")

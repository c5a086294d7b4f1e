"""
Order data models.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict


class OrderStatus(str, Enum):
    """Order lifecycle status. Admins may set any value at any time."""

    NOT_PROCESSED = "Not Processed"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class OrderStatusUpdate(BaseModel):
    """Body of PUT /auth/order-status/{order_id}."""

    model_config = ConfigDict(extra="ignore")

    # Validated by the service so unknown values get a specific message
    status: Optional[Any] = None

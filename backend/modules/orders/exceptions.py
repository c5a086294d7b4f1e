"""
Orders module exceptions.
"""

from typing import Any

from shared.exceptions import NotFoundError, ValidationError

from .models import OrderStatus


class OrderNotFoundError(NotFoundError):
    """Raised when an order id does not exist."""

    def __init__(self, order_id: str):
        super().__init__(
            "Order not found",
            code="ORDER_NOT_FOUND",
            details={"order_id": order_id},
        )


class InvalidOrderStatusError(ValidationError):
    """Raised when a status is not one of OrderStatus."""

    def __init__(self, status: Any):
        super().__init__(
            "Invalid order status",
            code="INVALID_ORDER_STATUS",
            details={
                "status": str(status),
                "allowed": [s.value for s in OrderStatus],
            },
        )

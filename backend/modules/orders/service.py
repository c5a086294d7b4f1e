"""
Order service implementation.
"""

from typing import Any

from .exceptions import InvalidOrderStatusError, OrderNotFoundError
from .interfaces import IOrderService
from .models import OrderStatus
from .repository import OrderRepository


class OrderService(IOrderService):
    """Order listing and admin status updates."""

    def __init__(self, repository: OrderRepository):
        self._repository = repository

    async def get_orders(self, buyer_id: str) -> list[dict[str, Any]]:
        return self._repository.list_by_buyer(buyer_id)

    async def get_all_orders(self) -> list[dict[str, Any]]:
        return self._repository.list_all()

    async def update_status(self, order_id: str, status: Any) -> dict[str, Any]:
        """
        Set an order's status.

        The value is checked against OrderStatus before the store is
        touched. Transitions are not ordered: any status may follow any
        other.
        """
        try:
            new_status = OrderStatus(status)
        except (ValueError, TypeError):
            raise InvalidOrderStatusError(status)

        order = self._repository.update_status(order_id, new_status)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

"""
Orders module interface.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IOrderService(Protocol):
    """Interface for order operations."""

    async def get_orders(self, buyer_id: str) -> list[dict[str, Any]]:
        """List a buyer's orders."""
        ...

    async def get_all_orders(self) -> list[dict[str, Any]]:
        """List every order, newest first."""
        ...

    async def update_status(self, order_id: str, status: Any) -> dict[str, Any]:
        """
        Set an order's status.

        Raises:
            InvalidOrderStatusError: If status is not an OrderStatus value
            OrderNotFoundError: If the order does not exist
        """
        ...

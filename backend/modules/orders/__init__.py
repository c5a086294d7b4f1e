"""
Orders module.

Order listing for buyers and admins, and admin status updates.

Public API:
- IOrderService: Interface for order operations
- OrderStatus: The allowed order statuses
- Order exceptions: OrderNotFoundError, InvalidOrderStatusError
"""

from .interfaces import IOrderService
from .models import OrderStatus, OrderStatusUpdate
from .exceptions import OrderNotFoundError, InvalidOrderStatusError

__all__ = [
    "IOrderService",
    "OrderStatus",
    "OrderStatusUpdate",
    "OrderNotFoundError",
    "InvalidOrderStatusError",
]

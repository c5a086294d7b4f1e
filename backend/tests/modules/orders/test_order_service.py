import pytest
from unittest.mock import MagicMock

from modules.orders.exceptions import InvalidOrderStatusError, OrderNotFoundError
from modules.orders.interfaces import IOrderService
from modules.orders.models import OrderStatus
from modules.orders.service import OrderService

ORDER_ID = "64b7f0c2a1b2c3d4e5f60800"


class TestOrderService:
    @pytest.fixture
    def repository(self):
        return MagicMock()

    @pytest.fixture
    def service(self, repository):
        return OrderService(repository)

    def test_implements_interface(self, service):
        assert isinstance(service, IOrderService)

    def test_status_values(self):
        assert [s.value for s in OrderStatus] == [
            "Not Processed",
            "Processing",
            "Shipped",
            "Delivered",
            "Cancelled",
        ]

    @pytest.mark.asyncio
    async def test_get_orders_for_buyer(self, service, repository):
        repository.list_by_buyer.return_value = [{"_id": ORDER_ID}]
        assert await service.get_orders("buyer-1") == [{"_id": ORDER_ID}]
        repository.list_by_buyer.assert_called_once_with("buyer-1")

    @pytest.mark.asyncio
    async def test_get_all_orders(self, service, repository):
        repository.list_all.return_value = []
        assert await service.get_all_orders() == []

    @pytest.mark.asyncio
    async def test_update_status(self, service, repository):
        repository.update_status.return_value = {"_id": ORDER_ID, "status": "Shipped"}

        order = await service.update_status(ORDER_ID, "Shipped")

        repository.update_status.assert_called_once_with(ORDER_ID, OrderStatus.SHIPPED)
        assert order["status"] == "Shipped"

    @pytest.mark.asyncio
    async def test_any_transition_is_allowed(self, service, repository):
        """Delivered back to Not Processed is accepted."""
        repository.update_status.return_value = {"_id": ORDER_ID, "status": "Not Processed"}
        order = await service.update_status(ORDER_ID, "Not Processed")
        assert order["status"] == "Not Processed"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["shipped", "Lost", "", None, 3, ["Shipped"]])
    async def test_invalid_status(self, service, repository, status):
        with pytest.raises(InvalidOrderStatusError) as exc_info:
            await service.update_status(ORDER_ID, status)
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid order status"
        repository.update_status.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_order(self, service, repository):
        repository.update_status.return_value = None
        with pytest.raises(OrderNotFoundError) as exc_info:
            await service.update_status(ORDER_ID, "Shipped")
        assert exc_info.value.status_code == 404

"""Tests for the order endpoints under /api/v1/auth."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from api import app
from api.dependencies import get_order_service
from modules.orders.exceptions import InvalidOrderStatusError, OrderNotFoundError
from modules.orders.repository import OrderRepository
from modules.orders.service import OrderService

from conftest import USER_ID

ORDER_ID = "64b7f0c2a1b2c3d4e5f60800"


@pytest.fixture
def order_service():
    service = MagicMock()
    service.get_orders = AsyncMock(return_value=[{"_id": ORDER_ID, "status": "Processing"}])
    service.get_all_orders = AsyncMock(return_value=[])
    service.update_status = AsyncMock(return_value={"_id": ORDER_ID, "status": "Shipped"})
    app.dependency_overrides[get_order_service] = lambda: service
    return service


class TestGetOrders:
    def test_lists_callers_orders(self, client, order_service, user_headers):
        response = client.get("/api/v1/auth/orders", headers=user_headers)
        assert response.status_code == 200
        assert response.json() == [{"_id": ORDER_ID, "status": "Processing"}]
        order_service.get_orders.assert_awaited_once_with(USER_ID)

    def test_requires_sign_in(self, client, order_service):
        response = client.get("/api/v1/auth/orders")
        assert response.status_code == 401
        order_service.get_orders.assert_not_awaited()

    def test_failure(self, client, order_service, user_headers):
        order_service.get_orders.side_effect = RuntimeError("boom")
        response = client.get("/api/v1/auth/orders", headers=user_headers)
        assert response.status_code == 500
        assert response.json()["message"] == "Error while getting orders"


class TestGetAllOrders:
    def test_admin(self, client, order_service, admin_headers):
        response = client.get("/api/v1/auth/all-orders", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == []

    def test_regular_user_rejected(self, client, order_service, user_headers):
        response = client.get("/api/v1/auth/all-orders", headers=user_headers)
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Unauthorized Access"}


class TestUpdateOrderStatus:
    def test_shipped(self, client, order_service, admin_headers):
        response = client.put(
            f"/api/v1/auth/order-status/{ORDER_ID}",
            json={"status": "Shipped"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json() == {"_id": ORDER_ID, "status": "Shipped"}
        order_service.update_status.assert_awaited_once_with(ORDER_ID, "Shipped")

    def test_invalid_status(self, client, order_service, admin_headers):
        order_service.update_status.side_effect = InvalidOrderStatusError("Lost")
        response = client.put(
            f"/api/v1/auth/order-status/{ORDER_ID}",
            json={"status": "Lost"},
            headers=admin_headers,
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid order status"}

    def test_unknown_order(self, client, order_service, admin_headers):
        order_service.update_status.side_effect = OrderNotFoundError(ORDER_ID)
        response = client.put(
            f"/api/v1/auth/order-status/{ORDER_ID}",
            json={"status": "Shipped"},
            headers=admin_headers,
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Order not found"

    def test_missing_body(self, client, order_service, admin_headers):
        client.put(f"/api/v1/auth/order-status/{ORDER_ID}", headers=admin_headers)
        order_service.update_status.assert_awaited_once_with(ORDER_ID, None)

    def test_failure(self, client, order_service, admin_headers):
        order_service.update_status.side_effect = RuntimeError("boom")
        response = client.put(
            f"/api/v1/auth/order-status/{ORDER_ID}",
            json={"status": "Shipped"},
            headers=admin_headers,
        )
        assert response.status_code == 500
        assert response.json()["message"] == "Error while updating order"

    def test_regular_user_rejected(self, client, order_service, user_headers):
        response = client.put(
            f"/api/v1/auth/order-status/{ORDER_ID}",
            json={"status": "Shipped"},
            headers=user_headers,
        )
        assert response.status_code == 401
        order_service.update_status.assert_not_awaited()

    def test_malformed_order_id(self, client, admin_headers):
        """A bad id fails like any other store error."""
        db = MagicMock()
        service = OrderService(OrderRepository(db))
        app.dependency_overrides[get_order_service] = lambda: service

        response = client.put(
            "/api/v1/auth/order-status/not-an-id",
            json={"status": "Shipped"},
            headers=admin_headers,
        )

        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Error while updating order"
        assert data["error"]["name"] == "InvalidIdError"
        db["orders"].find_one_and_update.assert_not_called()

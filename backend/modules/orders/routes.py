"""
Order API endpoints.

Mounted under the auth prefix: /api/v1/auth/orders and friends.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_order_service
from api.middleware.auth import is_admin, require_sign_in
from api.models.responses import error_response, exception_response
from shared.exceptions import InvalidIdError, StorefrontError
from shared.models import TokenClaims

from .interfaces import IOrderService
from .models import OrderStatusUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/orders")
async def get_orders(
    user: TokenClaims = Depends(require_sign_in),
    service: IOrderService = Depends(get_order_service),
):
    """List the signed-in user's orders."""
    try:
        orders = await service.get_orders(user.id)
    except Exception as e:
        logger.exception("Error while getting orders")
        return error_response(500, "Error while getting orders", e)
    return JSONResponse(content=orders)


@router.get("/all-orders", dependencies=[Depends(is_admin)])
async def get_all_orders(
    service: IOrderService = Depends(get_order_service),
):
    """List every order, newest first. Admin only."""
    try:
        orders = await service.get_all_orders()
    except Exception as e:
        logger.exception("Error while getting orders")
        return error_response(500, "Error while getting orders", e)
    return JSONResponse(content=orders)


@router.put("/order-status/{order_id}", dependencies=[Depends(is_admin)])
async def update_order_status(
    order_id: str,
    request: Optional[OrderStatusUpdate] = None,
    service: IOrderService = Depends(get_order_service),
):
    """Set an order's status. Admin only."""
    status = request.status if request else None
    try:
        order = await service.update_status(order_id, status)
    except InvalidIdError as e:
        logger.warning("Malformed order id %r", order_id)
        return error_response(500, "Error while updating order", e)
    except StorefrontError as e:
        return exception_response(e)
    except Exception as e:
        logger.exception("Error while updating order")
        return error_response(500, "Error while updating order", e)
    return JSONResponse(content=order)

"""
Category API endpoints.

Reads are public; writes require an admin.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_category_service
from api.middleware.auth import is_admin
from api.models.responses import error_response, exception_response, success_response
from shared.exceptions import InvalidIdError, StorefrontError

from .interfaces import ICategoryService
from .models import CategoryRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/create-category", dependencies=[Depends(is_admin)])
async def create_category(
    request: Optional[CategoryRequest] = None,
    service: ICategoryService = Depends(get_category_service),
):
    """Create a category. Admin only."""
    try:
        category = await service.create_category(request.name if request else None)
    except StorefrontError as e:
        return exception_response(e)
    except Exception as e:
        logger.exception("Error while creating category")
        return error_response(500, "Error while creating category", e)

    return success_response(201, message="New category created", category=category)


@router.put("/update-category/{category_id}", dependencies=[Depends(is_admin)])
async def update_category(
    category_id: str,
    request: Optional[CategoryRequest] = None,
    service: ICategoryService = Depends(get_category_service),
):
    """Rename a category. Admin only."""
    try:
        category = await service.update_category(category_id, request.name if request else None)
    except InvalidIdError as e:
        logger.warning("Malformed category id %r", category_id)
        return error_response(500, "Error while updating category", e)
    except StorefrontError as e:
        return exception_response(e)
    except Exception as e:
        logger.exception("Error while updating category")
        return error_response(500, "Error while updating category", e)

    return success_response(200, message="Category updated successfully", category=category)


@router.get("/get-category")
async def list_categories(service: ICategoryService = Depends(get_category_service)):
    try:
        categories = await service.list_categories()
    except Exception as e:
        logger.exception("Error while fetching categories")
        return error_response(500, "Error while fetching categories", e)

    return success_response(200, message="All categories fetched", category=categories)


@router.get("/single-category/{slug}")
async def get_category(slug: str, service: ICategoryService = Depends(get_category_service)):
    """Fetch one category by slug. The message spelling is what existing clients match on."""
    try:
        category = await service.get_category(slug)
    except Exception as e:
        logger.exception("Error While getting Single Category")
        return error_response(500, "Error While getting Single Category", e)

    return success_response(200, message="Get SIngle Category SUccessfully", category=category)


@router.delete("/delete-category/{category_id}", dependencies=[Depends(is_admin)])
async def delete_category(
    category_id: str,
    service: ICategoryService = Depends(get_category_service),
):
    """Delete a category. Admin only."""
    try:
        await service.delete_category(category_id)
    except Exception as e:
        logger.exception("error while deleting category")
        return error_response(500, "error while deleting category", e)

    return success_response(200, message="Categry Deleted Successfully")

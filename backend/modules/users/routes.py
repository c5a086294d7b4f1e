"""
User administration endpoints.
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_user_repository
from api.middleware.auth import is_admin
from api.models.responses import error_response, success_response

from .repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/all-users", dependencies=[Depends(is_admin)])
async def get_all_users(users: UserRepository = Depends(get_user_repository)):
    """List all users without their credentials. Admin only."""
    try:
        all_users = users.list_users()
    except Exception as e:
        logger.exception("Error in getting all users")
        return error_response(500, "Error in getting all users", e)

    return success_response(200, message="All users fetched successfully", users=all_users)

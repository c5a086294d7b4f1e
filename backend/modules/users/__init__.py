"""
Users module.

The identity store: user records, their repository and the admin user
listing endpoint.
"""

from .models import User, PublicUser
from .exceptions import UserNotFoundError

__all__ = ["User", "PublicUser", "UserNotFoundError"]

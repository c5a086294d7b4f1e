"""
User data models.

User documents are stored as plain dicts; these models describe their
shape and the safe projection returned to clients.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from shared.models import USER_ROLE


class User(BaseModel):
    """
    A stored user account.

    `password` holds the bcrypt hash and `answer` the secret answer used
    for password reset. Neither is ever returned to clients.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = Field(default=None, alias="_id")
    name: str
    email: str
    password: str
    phone: str
    address: Any
    answer: str
    role: int = USER_ROLE


class PublicUser(BaseModel):
    """User fields safe to return to clients."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = Field(default=None, alias="_id")
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Any = None
    role: Any = None

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> dict[str, Any]:
        """Project a user document to its public fields."""
        return cls.model_validate(doc).model_dump(by_alias=True)

"""
User repository for database access.

The identity store: lookups by id and email, account creation and
updates. Email uniqueness is enforced by a unique index.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pymongo import ASCENDING, ReturnDocument

from shared.repository import BaseRepository, serialize_document, to_object_id
from .models import User

# Never leave the store through listing endpoints
PRIVATE_FIELDS = {"password": 0, "answer": 0}


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    All methods return serialized documents (string `_id`) or None.
    """

    collection_name = "users"

    def ensure_indexes(self) -> None:
        """Create the unique email index."""
        self._collection.create_index([("email", ASCENDING)], unique=True)

    def get_by_id(self, user_id: Any) -> Optional[dict[str, Any]]:
        """
        Get a user by id.

        Raises:
            InvalidIdError: If the id is missing or malformed.
        """
        doc = self._collection.find_one({"_id": to_object_id(user_id)})
        return serialize_document(doc)

    def get_by_email(self, email: str) -> Optional[dict[str, Any]]:
        """Get a user by email address."""
        return serialize_document(self._collection.find_one({"email": email}))

    def get_by_email_and_answer(self, email: str, answer: str) -> Optional[dict[str, Any]]:
        """Get a user whose email and secret answer both match."""
        doc = self._collection.find_one({"email": email, "answer": answer})
        return serialize_document(doc)

    def create(self, user: User) -> dict[str, Any]:
        """
        Insert a new user.

        Returns:
            The stored document with its generated id.
        """
        now = datetime.now(timezone.utc)
        data = user.model_dump(exclude={"id"})
        data["createdAt"] = now
        data["updatedAt"] = now
        result = self._collection.insert_one(data)
        data["_id"] = result.inserted_id
        return serialize_document(data)

    def update(self, user_id: Any, fields: dict[str, Any]) -> Optional[dict[str, Any]]:
        """
        Apply a partial update and return the updated document.

        Returns:
            The updated document, or None if the id does not exist.
        """
        changes = dict(fields)
        changes["updatedAt"] = datetime.now(timezone.utc)
        doc = self._collection.find_one_and_update(
            {"_id": to_object_id(user_id)},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        return serialize_document(doc)

    def list_users(self) -> list[dict[str, Any]]:
        """List every user without credentials."""
        return [serialize_document(doc) for doc in self._collection.find({}, PRIVATE_FIELDS)]

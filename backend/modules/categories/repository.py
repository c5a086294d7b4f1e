"""
Category repository for database access.
"""

from typing import Any, Optional

from pymongo import ASCENDING, ReturnDocument

from shared.repository import BaseRepository, serialize_document, to_object_id


class CategoryRepository(BaseRepository[dict]):
    """Repository for category data access."""

    collection_name = "categories"

    def ensure_indexes(self) -> None:
        """Create the unique slug index."""
        self._collection.create_index([("slug", ASCENDING)], unique=True)

    def get_by_name(self, name: str) -> Optional[dict[str, Any]]:
        return serialize_document(self._collection.find_one({"name": name}))

    def get_by_slug(self, slug: str) -> Optional[dict[str, Any]]:
        return serialize_document(self._collection.find_one({"slug": slug}))

    def list_all(self) -> list[dict[str, Any]]:
        return [serialize_document(doc) for doc in self._collection.find({})]

    def create(self, name: str, slug: str) -> dict[str, Any]:
        data = {"name": name, "slug": slug}
        result = self._collection.insert_one(data)
        data["_id"] = result.inserted_id
        return serialize_document(data)

    def update(self, category_id: str, name: str, slug: str) -> Optional[dict[str, Any]]:
        """
        Rename a category.

        Returns:
            The updated category, or None if the id does not exist.
        """
        doc = self._collection.find_one_and_update(
            {"_id": to_object_id(category_id)},
            {"$set": {"name": name, "slug": slug}},
            return_document=ReturnDocument.AFTER,
        )
        return serialize_document(doc)

    def delete(self, category_id: str) -> None:
        self._collection.delete_one({"_id": to_object_id(category_id)})

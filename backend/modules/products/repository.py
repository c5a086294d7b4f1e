"""
Product repository for database access.

Photos are stored inline as `{"data": <bytes>, "contentType": <str>}`
and are excluded from every read except `get_photo`.
"""

import re
from datetime import datetime, timezone
from typing import Any, Optional

from bson import Binary
from pymongo import DESCENDING, ReturnDocument

from shared.repository import BaseRepository, serialize_document, to_object_id
from .models import PhotoUpload

WITHOUT_PHOTO = {"photo": 0}


class ProductRepository(BaseRepository[dict]):
    """
    Repository for product data access.

    Listing methods resolve the `category` reference to the category
    document where noted.
    """

    collection_name = "products"

    def create(self, fields: dict[str, Any], photo: PhotoUpload) -> dict[str, Any]:
        now = datetime.now(timezone.utc)
        data = self._prepare(fields)
        data["photo"] = {"data": Binary(photo.data), "contentType": photo.content_type}
        data["createdAt"] = now
        data["updatedAt"] = now
        result = self._collection.insert_one(data)
        data["_id"] = result.inserted_id
        data.pop("photo")
        return serialize_document(data)

    def update(
        self,
        product_id: str,
        fields: dict[str, Any],
        photo: Optional[PhotoUpload] = None,
    ) -> Optional[dict[str, Any]]:
        """
        Replace a product's fields and, if given, its photo.

        Returns:
            The updated product without photo, or None if it does not exist.
        """
        changes = self._prepare(fields)
        changes["updatedAt"] = datetime.now(timezone.utc)
        if photo is not None:
            changes["photo"] = {"data": Binary(photo.data), "contentType": photo.content_type}
        doc = self._collection.find_one_and_update(
            {"_id": to_object_id(product_id)},
            {"$set": changes},
            projection=WITHOUT_PHOTO,
            return_document=ReturnDocument.AFTER,
        )
        return serialize_document(doc)

    def list_recent(self, limit: int) -> list[dict[str, Any]]:
        """Newest products first, category resolved."""
        cursor = self._collection.find({}, WITHOUT_PHOTO).sort("createdAt", DESCENDING).limit(limit)
        return self._populate_categories(list(cursor))

    def get_by_slug(self, slug: str) -> Optional[dict[str, Any]]:
        """Get a product by slug, category resolved."""
        doc = self._collection.find_one({"slug": slug}, WITHOUT_PHOTO)
        if doc is None:
            return None
        return self._populate_categories([doc])[0]

    def get_photo(self, product_id: str) -> Optional[dict[str, Any]]:
        """
        Get a product's raw photo sub-document.

        Returns:
            `{"data", "contentType"}` (either may be missing), or None if the
            product does not exist.
        """
        doc = self._collection.find_one({"_id": to_object_id(product_id)}, {"photo": 1})
        if doc is None:
            return None
        return doc.get("photo") or {}

    def delete(self, product_id: str) -> Optional[dict[str, Any]]:
        """Delete a product and return it, or None if it did not exist."""
        doc = self._collection.find_one_and_delete(
            {"_id": to_object_id(product_id)},
            projection=WITHOUT_PHOTO,
        )
        return serialize_document(doc)

    def find_filtered(
        self,
        category_ids: list[str],
        price_range: Optional[tuple[float, float]],
    ) -> list[dict[str, Any]]:
        query: dict[str, Any] = {}
        if category_ids:
            query["category"] = {"$in": [to_object_id(cid) for cid in category_ids]}
        if price_range:
            query["price"] = {"$gte": price_range[0], "$lte": price_range[1]}
        return [serialize_document(doc) for doc in self._collection.find(query, WITHOUT_PHOTO)]

    def count(self) -> int:
        return self._collection.estimated_document_count()

    def list_page(self, page: int, per_page: int) -> list[dict[str, Any]]:
        cursor = (
            self._collection.find({}, WITHOUT_PHOTO)
            .sort("createdAt", DESCENDING)
            .skip((page - 1) * per_page)
            .limit(per_page)
        )
        return [serialize_document(doc) for doc in cursor]

    def search(self, keyword: str) -> list[dict[str, Any]]:
        """Case-insensitive substring match on name or description."""
        pattern = {"$regex": re.escape(keyword), "$options": "i"}
        query = {"$or": [{"name": pattern}, {"description": pattern}]}
        return [serialize_document(doc) for doc in self._collection.find(query, WITHOUT_PHOTO)]

    def find_related(self, product_id: str, category_id: str, limit: int) -> list[dict[str, Any]]:
        """Other products in the same category, category resolved."""
        query = {
            "category": to_object_id(category_id),
            "_id": {"$ne": to_object_id(product_id)},
        }
        cursor = self._collection.find(query, WITHOUT_PHOTO).limit(limit)
        return self._populate_categories(list(cursor))

    def find_by_category(self, category_id: str) -> list[dict[str, Any]]:
        cursor = self._collection.find({"category": to_object_id(category_id)}, WITHOUT_PHOTO)
        return self._populate_categories(list(cursor))

    def _prepare(self, fields: dict[str, Any]) -> dict[str, Any]:
        data = dict(fields)
        if data.get("category") is not None:
            data["category"] = to_object_id(data["category"])
        return data

    def _populate_categories(self, docs: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Replace category ids with the category documents."""
        ids = {doc["category"] for doc in docs if doc.get("category") is not None}
        categories = {
            c["_id"]: c for c in self._db["categories"].find({"_id": {"$in": list(ids)}})
        } if ids else {}

        populated = []
        for doc in docs:
            doc = dict(doc)
            if doc.get("category") in categories:
                doc["category"] = categories[doc["category"]]
            populated.append(serialize_document(doc))
        return populated

"""
Order repository for database access.

Orders reference their buyer and products by id. Reads resolve those
references: products without their photo bytes, buyers by name only.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pymongo import DESCENDING, ReturnDocument

from shared.repository import BaseRepository, serialize_document, to_object_id
from .models import OrderStatus


class OrderRepository(BaseRepository[dict]):
    """
    Repository for order data access.

    Status updates are single-document atomic and last-write-wins.
    """

    collection_name = "orders"

    def list_by_buyer(self, buyer_id: str) -> list[dict[str, Any]]:
        """List a buyer's orders with references resolved."""
        docs = list(self._collection.find({"buyer": to_object_id(buyer_id)}))
        return self._populate(docs)

    def list_all(self) -> list[dict[str, Any]]:
        """List all orders, newest first, with references resolved."""
        docs = list(self._collection.find({}).sort("createdAt", DESCENDING))
        return self._populate(docs)

    def update_status(self, order_id: str, status: OrderStatus) -> Optional[dict[str, Any]]:
        """
        Set an order's status.

        Returns:
            The updated order, or None if it does not exist.
        """
        doc = self._collection.find_one_and_update(
            {"_id": to_object_id(order_id)},
            {"$set": {"status": status.value, "updatedAt": datetime.now(timezone.utc)}},
            return_document=ReturnDocument.AFTER,
        )
        return serialize_document(doc)

    def _populate(self, docs: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Replace product and buyer ids with the referenced documents."""
        product_ids = {pid for doc in docs for pid in doc.get("products", [])}
        buyer_ids = {doc["buyer"] for doc in docs if doc.get("buyer") is not None}

        products = {
            p["_id"]: p
            for p in self._db["products"].find({"_id": {"$in": list(product_ids)}}, {"photo": 0})
        } if product_ids else {}
        buyers = {
            u["_id"]: u
            for u in self._db["users"].find({"_id": {"$in": list(buyer_ids)}}, {"name": 1})
        } if buyer_ids else {}

        populated = []
        for doc in docs:
            doc = dict(doc)
            doc["products"] = [products[pid] for pid in doc.get("products", []) if pid in products]
            doc["buyer"] = buyers.get(doc.get("buyer"))
            populated.append(serialize_document(doc))
        return populated

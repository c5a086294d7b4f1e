"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
collection access and the conversions between MongoDB documents and the
JSON-safe dicts handed to the service layer.
"""

from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collection import Collection
from pymongo.database import Database

from .exceptions import InvalidIdError


T = TypeVar("T")


def to_object_id(value: Any) -> ObjectId:
    """
    Parse a document id.

    Raises:
        InvalidIdError: If the value is not a valid ObjectId.
    """
    if isinstance(value, ObjectId):
        return value
    # ObjectId(None) would mint a fresh id
    if value is None:
        raise InvalidIdError(value)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidIdError(value) from e


def serialize_document(doc: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """
    Convert a MongoDB document into a JSON-safe dict.

    ObjectIds become strings, datetimes become ISO strings, binary
    payloads are dropped. Nested documents and lists are converted too.
    """
    if doc is None:
        return None
    return {key: _serialize_value(value) for key, value in doc.items() if not isinstance(value, bytes)}


def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return serialize_document(value)
    if isinstance(value, list):
        return [_serialize_value(item) for item in value]
    return value


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Collection access via self._collection
    - Database access via self._db for cross-collection lookups

    Subclasses set `collection_name` and implement domain-specific data
    access methods. Repositories return serialized dicts and perform no
    authorization checks.
    """

    collection_name: str = ""

    def __init__(self, db: Database) -> None:
        """
        Initialize the repository with a MongoDB database handle.

        Args:
            db: pymongo Database instance for database operations.
        """
        self._db = db
        self._collection: Collection = db[self.collection_name]

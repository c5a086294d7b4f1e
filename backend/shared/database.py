"""
Database client factory for MongoDB.

A single MongoClient is created per process and shared by every
repository. pymongo pools connections internally.
"""

import logging
from typing import Optional
from pymongo import MongoClient
from pymongo.database import Database

from .config import get_settings
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Module-level client cache
_client: Optional[MongoClient] = None


def get_mongo_client() -> MongoClient:
    """
    Get the shared MongoDB client.

    Returns:
        MongoClient connected to the configured MONGO_URL

    Raises:
        ConfigurationError: If MONGO_URL is not set
    """
    global _client

    if _client is None:
        settings = get_settings()
        if not settings.mongo_url:
            raise ConfigurationError(
                "MongoDB configuration missing. Set the MONGO_URL environment variable."
            )
        _client = MongoClient(settings.mongo_url)
        logger.info("Connected to MongoDB database %s", settings.mongo_db_name)

    return _client


def get_database() -> Database:
    """Get the configured application database."""
    return get_mongo_client()[get_settings().mongo_db_name]


def reset_client_cache() -> None:
    """
    Close and forget the cached database client.

    Useful for testing or when configuration changes.
    """
    global _client
    if _client is not None:
        _client.close()
    _client = None

"""
Database client factory for MongoDB.

Provides a process-wide async client and accessors for the database
and the users collection.
"""

from typing import Optional
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from .config import get_settings

# Module-level client cache
_client: Optional[AsyncMongoClient] = None


def get_mongo_client() -> AsyncMongoClient:
    """
    Get the shared MongoDB client.

    The client owns its own connection pool and is safe to share
    between concurrent requests.

    Returns:
        AsyncMongoClient configured from MONGODB_URL
    """
    global _client

    if _client is None:
        settings = get_settings()
        if not settings.mongodb_url:
            raise RuntimeError(
                "MongoDB configuration missing. "
                "Set the MONGODB_URL environment variable."
            )
        _client = AsyncMongoClient(settings.mongodb_url, tz_aware=True)

    return _client


def get_database() -> AsyncDatabase:
    """Get the application database."""
    settings = get_settings()
    return get_mongo_client()[settings.mongodb_database]


def get_users_collection() -> AsyncCollection:
    """Get the collection holding user documents."""
    settings = get_settings()
    return get_database()[settings.mongodb_users_collection]


async def close_client() -> None:
    """Close the cached client, if any."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _client
    _client = None

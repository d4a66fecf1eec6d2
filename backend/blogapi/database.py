"""
MongoDB connection management.

This module provides:
- MongoDB client connection via Motor (async driver)
- Index creation for the blog post collection
- Health check utilities
"""

import logging
from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from blogapi.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Global MongoDB client instance
_client: Optional[AsyncIOMotorClient] = None
_settings: Optional[Settings] = None


def create_client(url: str, settings: Optional[Settings] = None) -> AsyncIOMotorClient:
    """Create a tz-aware Motor client for the given URL."""
    settings = settings or get_settings()
    return AsyncIOMotorClient(
        url,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.mongo.server_selection_timeout_ms,
    )


async def init_db(settings: Optional[Settings] = None) -> None:
    """
    Initialize the MongoDB connection and ensure indexes exist.
    """
    global _client, _settings

    _settings = settings or get_settings()
    _client = create_client(_settings.mongo.url, _settings)

    try:
        await ensure_indexes(get_collection())
    except PyMongoError as e:
        # The server may come up later; requests surface StoreError until then
        logger.warning(f"Could not create indexes: {e}")


async def close_db() -> None:
    """
    Close MongoDB connection.
    """
    global _client
    if _client is not None:
        _client.close()
        _client = None


def get_client() -> AsyncIOMotorClient:
    """
    Get the MongoDB client instance.
    """
    if _client is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return _client


def get_database() -> AsyncIOMotorDatabase:
    """
    Get the MongoDB database instance.
    """
    settings = _settings or get_settings()
    return get_client()[settings.mongo.database]


def get_collection() -> AsyncIOMotorCollection:
    """
    Get the blog post collection.
    """
    settings = _settings or get_settings()
    return get_database()[settings.mongo.collection]


async def ensure_indexes(collection: AsyncIOMotorCollection) -> None:
    """Create the indexes the blog post collection relies on."""
    await collection.create_index([("created", ASCENDING)], name="created_asc")


async def check_db_connection() -> bool:
    """
    Check if MongoDB connection is healthy.
    """
    if _client is None:
        return False

    try:
        await _client.admin.command("ping")
        return True
    except PyMongoError:
        return False


def get_db_info() -> dict:
    """
    Get database connection information and status.
    """
    settings = _settings or get_settings()
    sanitized_url = sanitize_mongodb_url(settings.mongo.url)

    return {
        "status": "connected" if _client is not None else "disconnected",
        "url": sanitized_url,
        "database": settings.mongo.database,
        "environment": settings.environment,
    }


def sanitize_mongodb_url(url: str) -> str:
    """
    Hide password in MongoDB URL for safe logging.
    """
    if "@" not in url or "://" not in url:
        return url

    protocol, rest = url.split("://", 1)
    credentials, host = rest.rsplit("@", 1)
    if ":" in credentials:
        username = credentials.split(":", 1)[0]
        return f"{protocol}://{username}:***@{host}"
    return url

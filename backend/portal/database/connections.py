"""
Database connection management for MongoDB.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from portal.config import get_settings

logger = logging.getLogger(__name__)

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        logger.info("Connecting to MongoDB host: %s", settings.mongodb_host)
        _mongo_client = AsyncIOMotorClient(settings.mongodb_uri)
    return _mongo_client


async def close_connections():
    """Close the database connection."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None


async def get_database() -> AsyncIOMotorDatabase:
    """
    Get the application database.

    Used as a route dependency, so tests can swap it through
    ``app.dependency_overrides``.
    """
    client = await get_mongo_client()
    return client[get_settings().mongodb_database]

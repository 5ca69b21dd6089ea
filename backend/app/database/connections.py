"""
Database connection management for MongoDB.

The client is created once per application instance and owned by it;
nothing here is cached at module level.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.config import Settings

logger = logging.getLogger(__name__)


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """Create a MongoDB client for the configured connection string."""
    client = AsyncIOMotorClient(settings.mongo_url)
    logger.info("MongoDB client created")
    return client


def get_auth_database(
    client: AsyncIOMotorClient, settings: Settings
) -> AsyncIOMotorDatabase:
    """
    Get the database holding credential records.

    Uses the database named in the connection string, falling back to
    ``settings.mongo_db_name`` when the string names none.
    """
    db = client.get_default_database(default=settings.mongo_db_name)
    logger.info(f"Using database '{db.name}'")
    return db


def close_mongo_client(client: AsyncIOMotorClient | None) -> None:
    """Close a MongoDB client if one was opened."""
    if client is not None:
        client.close()
        logger.info("MongoDB client closed")

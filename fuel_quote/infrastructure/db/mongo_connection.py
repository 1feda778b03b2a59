# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import AccountFields, QuoteFields

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        tz_aware=True,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_account_collection() -> AsyncIOMotorCollection:
    """
    Get accounts collection from MongoDB

    Returns:
        MongoDB collection for accounts (credentials + profile)
    """
    return get_database()["accounts"]


def get_quote_collection() -> AsyncIOMotorCollection:
    """
    Get quotes collection from MongoDB

    Returns:
        MongoDB collection for fuel quotes
    """
    return get_database()["quotes"]


def get_counter_collection() -> AsyncIOMotorCollection:
    """
    Get counters collection from MongoDB

    Returns:
        MongoDB collection holding integer id sequences
    """
    return get_database()["counters"]


async def ensure_indexes() -> None:
    """
    Create the indexes the repositories rely on.

    The unique username index is what makes registration safe against two
    concurrent requests for the same username.
    """
    await get_account_collection().create_index(
        [(AccountFields.USERNAME, ASCENDING)], unique=True, name="uniq_username"
    )
    await get_account_collection().create_index(
        [(AccountFields.ID, ASCENDING)], unique=True, name="uniq_user_id"
    )
    await get_quote_collection().create_index(
        [(QuoteFields.QUOTE_ID, ASCENDING)], unique=True, name="uniq_quote_id"
    )
    await get_quote_collection().create_index(
        [(QuoteFields.USER_ID, ASCENDING), (QuoteFields.CREATED_AT, DESCENDING)],
        name="user_created_at",
    )
    logger.info("MongoDB indexes ensured")


def close_database() -> None:
    """Close the MongoDB client if one was opened"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None

"""
Database connection management
"""

import logging
from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from config.settings import MONGODB_URI, MONGODB_DATABASE, MONGODB_TIMEOUT_MS

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "users"

async def init_database(uri: str = MONGODB_URI) -> AsyncMongoClient:
    """Open the MongoDB client and verify the server is reachable.

    Any failure is logged and re-raised so application startup aborts.
    """
    client = AsyncMongoClient(uri, serverSelectionTimeoutMS=MONGODB_TIMEOUT_MS)

    try:
        # Test connection
        await client.admin.command("ping")
    except Exception as e:
        logger.error(f"Database connection error: {e}")
        await client.close()
        raise

    logger.info("Database connected")
    return client


async def close_database(client: AsyncMongoClient):
    """Close the MongoDB client"""
    if client is not None:
        await client.close()
    logger.info("Database connections closed")


def select_database(client: AsyncMongoClient) -> AsyncDatabase:
    """Pick the configured database, else the one named in the URI"""
    if MONGODB_DATABASE:
        return client[MONGODB_DATABASE]
    return client.get_default_database(default=DEFAULT_DATABASE)


def get_database(request: Request) -> AsyncDatabase:
    """FastAPI dependency returning the database opened at startup"""
    return request.app.state.database

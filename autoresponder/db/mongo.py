"""
autoresponder/db/mongo.py

Purpose: MongoDB connection setup

- Builds the Motor client with connection pooling
- Health checks and retry logic
- Proper connection lifecycle management (owned by the app lifespan)
"""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError
from typing import Optional
import asyncio
from autoresponder.core.config import Settings, settings
from autoresponder.core.logging import get_logger

logger = get_logger(__name__)


async def connect_to_mongo(current: Optional[Settings] = None, max_retries: int = 3) -> AsyncIOMotorClient:
    """
    Establishes connection to MongoDB with retry logic.
    Called during application startup; the caller owns the returned client.
    """
    current = current or settings
    retry_delay = 2

    for attempt in range(1, max_retries + 1):
        client = None
        try:
            logger.info(
                f"Attempting to connect to MongoDB (attempt {attempt}/{max_retries})"
            )

            client = AsyncIOMotorClient(
                current.MONGODB_URL,
                maxPoolSize=50,
                serverSelectionTimeoutMS=current.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
                connectTimeoutMS=10000,
                retryWrites=True,
                retryReads=True,
            )

            # Verify connection
            await client.admin.command("ping")

            logger.info(
                f"✅ Successfully connected to MongoDB: {current.MONGODB_DB_NAME}"
            )
            return client

        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            if client is not None:
                client.close()

            logger.error(
                f"Failed to connect to MongoDB (attempt {attempt}/{max_retries}): {e}"
            )

            if attempt < max_retries:
                logger.info(f"Retrying in {retry_delay} seconds...")
                await asyncio.sleep(retry_delay)
                retry_delay *= 2  # Exponential backoff
            else:
                logger.critical("Failed to connect to MongoDB after all retries")
                raise ConnectionError("Could not establish MongoDB connection") from e


async def close_mongo_connection(client: Optional[AsyncIOMotorClient]):
    """
    Closes the MongoDB connection.
    Called during application shutdown.
    """
    if client is not None:
        logger.info("Closing MongoDB connection")
        client.close()
        logger.info("MongoDB connection closed")


async def check_database_health(client: Optional[AsyncIOMotorClient]) -> bool:
    """
    Checks if the database connection is healthy.

    Returns:
        True if connection is healthy, False otherwise
    """
    try:
        if client is None:
            logger.error("MongoDB client not initialized")
            return False

        await client.admin.command("ping")
        return True

    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        return False


def get_users_collection(client: AsyncIOMotorClient, current: Optional[Settings] = None) -> AsyncIOMotorCollection:
    """
    Returns the users collection.

    Schema Fields:
    - user_id: str (unique key)
    - config: dict ({"reply_message": str})
    - created_at: datetime (set on insert only)
    """
    current = current or settings
    return client[current.MONGODB_DB_NAME][current.MONGODB_COLLECTION]

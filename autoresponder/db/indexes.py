"""
autoresponder/db/indexes.py

Purpose: Database index management

- Unique index guaranteeing one configuration per user
"""

from motor.motor_asyncio import AsyncIOMotorCollection
from autoresponder.core.logging import get_logger

logger = get_logger(__name__)


async def create_indexes(users: AsyncIOMotorCollection):
    """
    Creates the indexes the users collection relies on.
    This function is idempotent - safe to run multiple times.
    """
    logger.info("Creating database indexes...")

    # Unique index on user_id (primary identifier)
    await users.create_index("user_id", unique=True, name="user_id_unique")
    logger.debug("Created unique index on users.user_id")

    logger.info("✅ Database indexes created")

"""
autoresponder/services/configuration_store.py

Purpose: Reply configuration persistence

- Upsert one configuration document per user
- Point lookup by user_id
- Scoped session per operation with a client-side timeout
- Driver failures surface as StorageUnavailableError
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

import pymongo
from motor.motor_asyncio import AsyncIOMotorClient
from pydantic import ValidationError
from bson.errors import BSONError
from pymongo.errors import DuplicateKeyError, PyMongoError

from autoresponder.core.config import Settings, settings
from autoresponder.core.exceptions import StorageUnavailableError
from autoresponder.core.logging import get_logger, LogContext
from autoresponder.db.indexes import create_indexes
from autoresponder.db.mongo import get_users_collection
from autoresponder.models.user_configuration import (
    UserConfiguration,
    build_user_document,
    parse_user_document,
)

logger = get_logger(__name__)


class ConfigurationStore:
    """
    Key-value view over the users collection.

    The store holds no connection of its own: every call checks a session out
    of the client's pool and returns it when the call finishes, fails or is
    cancelled.
    """

    def __init__(self, client: AsyncIOMotorClient, current: Optional[Settings] = None):
        current = current or settings
        self.client = client
        self.settings = current
        self.operation_timeout = current.MONGODB_OPERATION_TIMEOUT_SECONDS

    @asynccontextmanager
    async def _connection(self, operation: str):
        try:
            with pymongo.timeout(self.operation_timeout):
                async with await self.client.start_session() as session:
                    yield get_users_collection(self.client, self.settings), session
        except (PyMongoError, BSONError) as e:
            logger.error(f"MongoDB {operation} failed: {e}")
            raise StorageUnavailableError(
                f"Configuration storage unavailable during {operation}",
                details={"operation": operation}
            ) from e

    async def put(self, user_id: str, config: UserConfiguration) -> bool:
        """
        Inserts or replaces the configuration for a user.

        Args:
            user_id: Slack user ID
            config: Configuration to store

        Returns:
            True if a document was inserted or changed, False if the stored
            configuration was already identical

        Raises:
            StorageUnavailableError: if MongoDB is unreachable or times out
        """
        with LogContext(user_id=user_id):
            update = {
                "$set": build_user_document(user_id, config),
                "$setOnInsert": {"created_at": datetime.utcnow()},
            }

            async with self._connection("put") as (users, session):
                try:
                    result = await users.update_one(
                        {"user_id": user_id}, update, upsert=True, session=session
                    )
                except DuplicateKeyError:
                    # A concurrent upsert inserted first; the document exists now
                    logger.warning("Concurrent insert detected, re-applying update")
                    result = await users.update_one(
                        {"user_id": user_id}, update, upsert=True, session=session
                    )

            changed = result.upserted_id is not None or result.modified_count > 0
            if changed:
                logger.info("Reply configuration stored")
            else:
                logger.info("Reply configuration unchanged")

            return changed

    async def get(self, user_id: str) -> Optional[UserConfiguration]:
        """
        Looks up the configuration for a user.

        Returns:
            The stored configuration, or None if the user never configured one

        Raises:
            StorageUnavailableError: if MongoDB is unreachable or times out
        """
        async with self._connection("get") as (users, session):
            document = await users.find_one(
                {"user_id": user_id},
                {"_id": 0, "config": 1},
                session=session
            )

        if not document or "config" not in document:
            return None

        try:
            return parse_user_document(document)
        except ValidationError as e:
            logger.warning(
                f"Ignoring malformed configuration: {e}",
                extra={"user_id": user_id}
            )
            return None

    async def ensure_indexes(self):
        """Creates the unique user_id index."""
        async with self._connection("create_indexes") as (users, _session):
            await create_indexes(users)

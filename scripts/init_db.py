"""
Database initialization script - reply configuration store

Run once to create the users collection indexes:
    python scripts/init_db.py
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from autoresponder.core.config import settings
from autoresponder.core.logging import setup_logging, get_logger
from autoresponder.db.mongo import connect_to_mongo, close_mongo_connection
from autoresponder.services.configuration_store import ConfigurationStore

setup_logging()
logger = get_logger("scripts.init_db")


async def main():
    """Main initialization"""
    logger.info("=" * 60)
    logger.info("  Auto Responder Database Setup")
    logger.info("=" * 60)

    client = await connect_to_mongo(settings)
    try:
        store = ConfigurationStore(client, settings)
        await store.ensure_indexes()
        logger.info(f"✅ Indexes ready on {settings.MONGODB_DB_NAME}.{settings.MONGODB_COLLECTION}")
    finally:
        await close_mongo_connection(client)


if __name__ == "__main__":
    asyncio.run(main())

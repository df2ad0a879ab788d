"""Optional MongoDB connection backing search analytics."""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from voice_search.core.config import settings

logger = logging.getLogger(__name__)

mongo_client: AsyncIOMotorClient | None = None
mongo_db: AsyncIOMotorDatabase | None = None


async def connect_mongo() -> None:
    """Open the analytics database, or do nothing when MONGO_URL is not configured."""
    global mongo_client, mongo_db
    if not settings.MONGO_URL:
        logger.warning("MONGO_URL not set, search analytics disabled")
        return

    mongo_client = AsyncIOMotorClient(settings.MONGO_URL, tz_aware=True)
    mongo_db = mongo_client[settings.MONGO_DB_NAME]
    logger.info(f"📊 Search analytics stored in MongoDB database {settings.MONGO_DB_NAME!r}")


async def close_mongo() -> None:
    global mongo_client, mongo_db
    if mongo_client is None:
        return
    mongo_client.close()
    mongo_client = None
    mongo_db = None
    logger.info("MongoDB connection closed")


def is_mongo_connected() -> bool:
    return mongo_db is not None


def get_mongo_db() -> AsyncIOMotorDatabase:
    if mongo_db is None:
        raise RuntimeError("MongoDB is not connected; set MONGO_URL to enable search analytics")
    return mongo_db

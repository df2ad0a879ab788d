"""Search analytics: voice queries logged to MongoDB and aggregated into insights"""

import logging
from collections import Counter
from datetime import UTC, datetime
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from voice_search.core.config import settings
from voice_search.schemas.voice import KeywordRecord, SearchInsights, TagCount

logger = logging.getLogger(__name__)

TOP_TAGS = 5
RECENT_QUERIES = 10


def _top(counter: Counter) -> list[TagCount]:
    # most_common keeps first-seen order among equal counts
    return [TagCount(name=name, count=count) for name, count in counter.most_common(TOP_TAGS)]


def summarize_logs(logs: list[dict[str, Any]]) -> SearchInsights:
    """Aggregate search logs (newest first) into per-tag counts and recent/failed lists."""
    product_types: Counter = Counter()
    skin_types: Counter = Counter()
    concerns: Counter = Counter()

    for log in logs:
        keywords = log.get("keywords") or {}
        if keywords.get("product_type"):
            product_types[keywords["product_type"]] += 1
        if keywords.get("skin_type"):
            skin_types[keywords["skin_type"]] += 1
        if keywords.get("concern"):
            concerns[keywords["concern"]] += 1

    return SearchInsights(
        total_queries=len(logs),
        top_product_types=_top(product_types),
        top_skin_types=_top(skin_types),
        top_concerns=_top(concerns),
        recent_queries=logs[:RECENT_QUERIES],
        failed_queries=[log for log in logs if log.get("results_count") == 0][:RECENT_QUERIES],
    )


class AnalyticsService:
    """Reads and writes the search log collection; Mongo failures never reach the caller."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[settings.SEARCH_LOGS_COLLECTION]

    async def log_query(self, transcript: str, keywords: KeywordRecord, results_count: int) -> str | None:
        """Store one voice search. Returns the log id, or None if it could not be written."""
        document = {
            "transcript": transcript,
            "keywords": keywords.model_dump(),
            "results_count": results_count,
            "timestamp": datetime.now(UTC),
            "platform": "app",
        }
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            # A lost log line must not fail the shopper's search
            logger.error(f"❌ Error logging voice search: {e}")
            return None
        logger.info(f"✅ Voice search logged: {result.inserted_id}")
        return str(result.inserted_id)

    async def get_insights(self, limit: int = 100) -> SearchInsights:
        """Aggregate the latest `limit` searches."""
        try:
            cursor = self.collection.find({}).sort("timestamp", -1).limit(limit)
            logs = await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error(f"Error fetching insights: {e}")
            return SearchInsights()

        for log in logs:
            log["id"] = str(log.pop("_id"))

        return summarize_logs(logs)

    async def clear(self, limit: int = 50) -> int:
        """Delete the most recent `limit` search logs."""
        try:
            cursor = self.collection.find({}, {"_id": 1}).sort("timestamp", -1).limit(limit)
            ids = [doc["_id"] for doc in await cursor.to_list(length=limit)]
            if not ids:
                return 0
            result = await self.collection.delete_many({"_id": {"$in": ids}})
        except PyMongoError as e:
            logger.error(f"Error clearing search logs: {e}")
            return 0
        logger.info(f"🧹 Cleared {result.deleted_count} search logs")
        return result.deleted_count

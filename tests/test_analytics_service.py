import asyncio
from types import SimpleNamespace

from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from voice_search.core.config import settings
from voice_search.schemas.voice import KeywordRecord, SearchInsights
from voice_search.services.analytics_service import AnalyticsService, summarize_logs


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs
        self.sort_args = None
        self.limit_value = None

    def sort(self, key, direction):
        self.sort_args = (key, direction)
        self.docs = sorted(self.docs, key=lambda d: d.get(key, 0), reverse=direction == -1)
        return self

    def limit(self, n):
        self.limit_value = n
        return self

    async def to_list(self, length):
        return [dict(doc) for doc in self.docs[: self.limit_value or length]]


class FakeCollection:
    """Just enough of a motor collection for the analytics service."""

    def __init__(self, docs=None, fail=False):
        self.docs = list(docs or [])
        self.fail = fail
        self.inserted = []

    async def insert_one(self, document):
        if self.fail:
            raise ServerSelectionTimeoutError("no servers")
        self.inserted.append(document)
        return SimpleNamespace(inserted_id="log-1")

    def find(self, query, projection=None):
        if self.fail:
            raise PyMongoError("find failed")
        return FakeCursor(self.docs)

    async def delete_many(self, query):
        ids = set(query["_id"]["$in"])
        before = len(self.docs)
        self.docs = [d for d in self.docs if d["_id"] not in ids]
        return SimpleNamespace(deleted_count=before - len(self.docs))


class FakeDb(dict):
    def __init__(self, collection):
        super().__init__({settings.SEARCH_LOGS_COLLECTION: collection})


def log(i, product_type=None, skin_type=None, concern=None, results_count=3):
    return {
        "_id": f"id-{i}",
        "transcript": f"query {i}",
        "keywords": {"product_type": product_type, "skin_type": skin_type, "concern": concern},
        "results_count": results_count,
        "timestamp": i,
    }


# Aggregation
def test_summarize_counts_tags_and_failures():
    logs = [
        log(3, "serum", "oily", results_count=0),
        log(2, "serum", "dry", "acne"),
        log(1, "cream", "oily"),
    ]
    insights = summarize_logs(logs)

    assert insights.total_queries == 3
    assert [(t.name, t.count) for t in insights.top_product_types] == [("serum", 2), ("cream", 1)]
    assert [(t.name, t.count) for t in insights.top_skin_types] == [("oily", 2), ("dry", 1)]
    assert [(t.name, t.count) for t in insights.top_concerns] == [("acne", 1)]
    assert [q["transcript"] for q in insights.failed_queries] == ["query 3"]


def test_summarize_caps_lists():
    logs = [log(i, product_type=f"type-{i}") for i in range(20)]
    insights = summarize_logs(logs)
    assert len(insights.top_product_types) == 5
    assert len(insights.recent_queries) == 10


def test_summarize_empty():
    assert summarize_logs([]) == SearchInsights()


# Service
def test_log_query_stores_document():
    collection = FakeCollection()
    service = AnalyticsService(FakeDb(collection))
    keywords = KeywordRecord(original_text="سيروم", product_type="serum")

    log_id = asyncio.run(service.log_query("سيروم", keywords, 4))

    assert log_id == "log-1"
    stored = collection.inserted[0]
    assert stored["transcript"] == "سيروم"
    assert stored["keywords"]["product_type"] == "serum"
    assert stored["results_count"] == 4
    assert "timestamp" in stored


def test_log_query_failure_returns_none():
    service = AnalyticsService(FakeDb(FakeCollection(fail=True)))
    assert asyncio.run(service.log_query("x", KeywordRecord(original_text="x"), 0)) is None


def test_get_insights_newest_first_with_string_ids():
    collection = FakeCollection([log(1, "cream"), log(2, "serum", results_count=0)])
    service = AnalyticsService(FakeDb(collection))

    insights = asyncio.run(service.get_insights(limit=10))

    assert insights.total_queries == 2
    assert [q["id"] for q in insights.recent_queries] == ["id-2", "id-1"]
    assert all("_id" not in q for q in insights.recent_queries)
    assert [q["id"] for q in insights.failed_queries] == ["id-2"]


def test_get_insights_failure_returns_empty():
    service = AnalyticsService(FakeDb(FakeCollection(fail=True)))
    assert asyncio.run(service.get_insights()) == SearchInsights()


def test_clear_deletes_most_recent_logs():
    collection = FakeCollection([log(i) for i in range(5)])
    service = AnalyticsService(FakeDb(collection))

    deleted = asyncio.run(service.clear(limit=2))

    assert deleted == 2
    assert sorted(d["_id"] for d in collection.docs) == ["id-0", "id-1", "id-2"]


def test_clear_on_empty_collection():
    service = AnalyticsService(FakeDb(FakeCollection()))
    assert asyncio.run(service.clear()) == 0


def test_clear_failure_returns_zero():
    service = AnalyticsService(FakeDb(FakeCollection(fail=True)))
    assert asyncio.run(service.clear()) == 0

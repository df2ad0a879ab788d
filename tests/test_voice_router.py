import pytest
from fastapi.testclient import TestClient

from voice_search.core.exceptions import CatalogUnavailable
from voice_search.main import app
from voice_search.routers.voice import get_analytics_service
from voice_search.schemas.voice import SearchInsights, TagCount
from voice_search.services.catalog_service import InMemoryCatalog
from voice_search.services.response_service import CANNED_REPLIES
from voice_search.services.voice_search_service import VoiceSearchService, get_voice_search_service


class FakeAnalytics:
    def __init__(self):
        self.logged = []
        self.cleared_limit = None

    async def log_query(self, transcript, keywords, results_count):
        self.logged.append((transcript, keywords.product_type, results_count))
        return "log-1"

    async def get_insights(self, limit=100):
        return SearchInsights(total_queries=1, top_product_types=[TagCount(name="serum", count=1)])

    async def clear(self, limit=50):
        self.cleared_limit = limit
        return 1


class DownCatalog:
    async def search_products(self, query):
        raise CatalogUnavailable("Catalog returned HTTP 502")


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def analytics():
    return FakeAnalytics()


@pytest.fixture
def with_catalog(sample_products, analytics):
    app.dependency_overrides[get_voice_search_service] = lambda: VoiceSearchService(InMemoryCatalog(sample_products))
    app.dependency_overrides[get_analytics_service] = lambda: analytics


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_voice_search_returns_ranked_products_and_reply(client, with_catalog, analytics):
    resp = client.post("/api/v1/voice/search", json={"transcript": "أريد سيروم", "user_name": "Salma"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["search_query"] == "سيروم"
    assert body["keywords"]["product_type"] == "serum"
    assert body["description"] == "serum"
    assert body["total_results"] == 2
    assert [p["id"] for p in body["products"]] == [102, 101]
    assert all("relevance_score" in p for p in body["products"])
    assert body["reply"].startswith("تفضلي يا Salma،")
    assert analytics.logged == [("أريد سيروم", "serum", 2)]


def test_zero_results_is_ok(client, with_catalog):
    resp = client.post("/api/v1/voice/search", json={"transcript": "ريتينول"})
    assert resp.status_code == 200
    assert resp.json()["total_results"] == 0


def test_blank_transcript_asks_to_repeat(client, with_catalog, analytics):
    resp = client.post("/api/v1/voice/search", json={"transcript": "   "})
    assert resp.status_code == 400
    assert resp.json()["detail"] == CANNED_REPLIES["no_speech"]
    assert analytics.logged == []


def test_catalog_outage_returns_503(client):
    app.dependency_overrides[get_voice_search_service] = lambda: VoiceSearchService(DownCatalog())
    app.dependency_overrides[get_analytics_service] = lambda: None

    resp = client.post("/api/v1/voice/search", json={"transcript": "سيروم"})

    assert resp.status_code == 503
    assert resp.json()["detail"] == CANNED_REPLIES["error"]


def test_search_works_without_analytics(client, sample_products):
    app.dependency_overrides[get_voice_search_service] = lambda: VoiceSearchService(InMemoryCatalog(sample_products))
    app.dependency_overrides[get_analytics_service] = lambda: None

    resp = client.post("/api/v1/voice/search", json={"transcript": "سيروم"})
    assert resp.status_code == 200


def test_insights_unavailable_without_mongo(client):
    app.dependency_overrides[get_analytics_service] = lambda: None
    assert client.get("/api/v1/voice/insights").status_code == 503
    assert client.delete("/api/v1/voice/insights").status_code == 503


def test_insights_and_clear(client, with_catalog, analytics):
    insights = client.get("/api/v1/voice/insights").json()
    assert insights["total_queries"] == 1
    assert insights["top_product_types"] == [{"name": "serum", "count": 1}]

    resp = client.delete("/api/v1/voice/insights", params={"limit": 5})
    assert resp.json() == {"message": "Search logs cleared", "deleted": 1}
    assert analytics.cleared_limit == 5

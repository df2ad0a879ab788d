"""
Product catalog clients used by voice search.

WooCommerceCatalog talks to the store's REST API over httpx. InMemoryCatalog
serves a fixed product list for local development and tests.
"""

import logging
from functools import lru_cache
from typing import Any, Protocol

import httpx

from voice_search.core.config import settings
from voice_search.core.exceptions import CatalogUnavailable

logger = logging.getLogger(__name__)


class ProductCatalog(Protocol):
    async def search_products(self, query: str) -> list[dict[str, Any]]:
        ...


class WooCommerceCatalog:
    """
    WooCommerce REST client (wp-json/wc/v3).

    Authentication goes in the query string (consumer_key / consumer_secret),
    which some WooCommerce hosts require instead of basic auth.
    """

    def __init__(
        self,
        base_url: str,
        consumer_key: str,
        consumer_secret: str,
        timeout: float = 15.0,
        per_page: int = 20,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = f"{base_url.rstrip('/')}/wp-json/wc/v3"
        self.auth_params = {
            "consumer_key": consumer_key,
            "consumer_secret": consumer_secret,
        }
        self.timeout = timeout
        self.per_page = per_page
        self.transport = transport

    async def search_products(self, query: str, page: int = 1) -> list[dict[str, Any]]:
        """
        Search published products.

        Args:
            query: Search string passed to WooCommerce's `search` parameter
            page: 1-based result page

        Returns:
            Raw WooCommerce product dicts (possibly empty)

        Raises:
            CatalogUnavailable: transport error, non-2xx status or unexpected body
        """
        params = {
            **self.auth_params,
            "search": query,
            "page": page,
            "per_page": self.per_page,
            "status": "publish",
        }
        logger.info(f"🔍 Searching WooCommerce: {query!r}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(f"{self.api_url}/products", params=params)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"❌ WooCommerce returned HTTP {e.response.status_code}: {e.response.text[:500]}"
            )
            raise CatalogUnavailable(f"Catalog returned HTTP {e.response.status_code}", e) from e
        except httpx.HTTPError as e:
            logger.error(f"❌ WooCommerce request failed: {e}")
            raise CatalogUnavailable(f"Catalog request failed: {e}", e) from e
        except ValueError as e:
            logger.error(f"❌ WooCommerce returned invalid JSON: {e}")
            raise CatalogUnavailable("Catalog returned invalid JSON", e) from e

        if not isinstance(data, list):
            logger.error(f"❌ Unexpected WooCommerce payload type: {type(data).__name__}")
            raise CatalogUnavailable("Catalog returned an unexpected payload")

        logger.info(f"✅ Found {len(data)} products")
        return data


class InMemoryCatalog:
    """Catalog over a fixed product list; matches the query inside name or description."""

    def __init__(self, products: list[dict[str, Any]] | None = None, per_page: int = 20):
        self.products = list(products or [])
        self.per_page = per_page

    async def search_products(self, query: str, page: int = 1) -> list[dict[str, Any]]:
        needle = query.lower()
        matches = [
            product
            for product in self.products
            if needle in (product.get("name") or "").lower()
            or needle in (product.get("description") or "").lower()
        ]
        start = (page - 1) * self.per_page
        return matches[start:start + self.per_page]


@lru_cache
def get_catalog() -> ProductCatalog:
    """Get cached catalog instance for the configured backend"""
    if settings.CATALOG_BACKEND == "memory":
        logger.info("Using in-memory product catalog")
        return InMemoryCatalog(per_page=settings.CATALOG_PER_PAGE)

    return WooCommerceCatalog(
        base_url=settings.WOOCOMMERCE_URL,
        consumer_key=settings.WOOCOMMERCE_CONSUMER_KEY,
        consumer_secret=settings.WOOCOMMERCE_CONSUMER_SECRET,
        timeout=settings.CATALOG_TIMEOUT,
        per_page=settings.CATALOG_PER_PAGE,
    )

"""Voice search orchestration: keywords -> catalog query -> price filter -> ranking"""

import asyncio
import logging
import math
from functools import lru_cache
from typing import Any

from voice_search.core.config import Settings, settings
from voice_search.core.exceptions import CatalogUnavailable
from voice_search.schemas.voice import KeywordRecord, SearchResult
from voice_search.services.catalog_service import ProductCatalog, get_catalog
from voice_search.services.keyword_extractor import build_search_query, extract_keywords

logger = logging.getLogger(__name__)


def _to_float(value: Any) -> float | None:
    """Parse a catalog numeric field; WooCommerce sends most of them as strings."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def _tag_names(product: dict[str, Any]) -> list[str]:
    return [
        (tag.get("name") or "").lower()
        for tag in product.get("tags") or []
        if isinstance(tag, dict)
    ]


def check_price_range(price: float, price_range: str | None, config: Settings = settings) -> bool:
    """Whether price falls in the named tier; unknown tiers accept everything."""
    if price_range == "low":
        return price < config.LOW_PRICE_MAX
    if price_range == "medium":
        return config.LOW_PRICE_MAX <= price <= config.HIGH_PRICE_MIN
    if price_range == "high":
        return price > config.HIGH_PRICE_MIN
    return True


def filter_by_price(
    products: list[dict[str, Any]],
    price_range: str | None,
    config: Settings = settings,
) -> list[dict[str, Any]]:
    """
    Keep products inside the requested price tier.

    Products without a parseable price are exempt from the tier check and kept,
    so a catalog entry with a missing price is never silently dropped.
    """
    if not price_range:
        return products

    kept = []
    for product in products:
        price = _to_float(product.get("price"))
        if price is None or check_price_range(price, price_range, config):
            kept.append(product)
    return kept


def filter_products(
    products: list[dict[str, Any]],
    keywords: KeywordRecord,
    config: Settings = settings,
) -> list[dict[str, Any]]:
    """
    Strict narrowing on skin type, concern and price.

    Keywords are English tags while most descriptions are Arabic, so this drops
    valid products on real catalogs. search_by_voice ranks on these signals
    instead; this stays available for callers with English product data.
    """

    def matches(product: dict[str, Any]) -> bool:
        description = (product.get("description") or "").lower()
        name = (product.get("name") or "").lower()

        if keywords.skin_type:
            in_attributes = any(
                "skin" in (attr.get("name") or "").lower()
                and any(keywords.skin_type in str(option).lower() for option in attr.get("options") or [])
                for attr in product.get("attributes") or []
                if isinstance(attr, dict)
            )
            if not in_attributes and keywords.skin_type not in description:
                return False

        if keywords.concern:
            concern = keywords.concern
            if not (
                any(concern in tag for tag in _tag_names(product))
                or concern in description
                or concern in name
            ):
                return False

        if keywords.price_range:
            price = _to_float(product.get("price"))
            if price is not None and not check_price_range(price, keywords.price_range, config):
                return False

        return True

    return [product for product in products if matches(product)]


def score_product(product: dict[str, Any], keywords: KeywordRecord, config: Settings = settings) -> float:
    """Additive relevance score; missing or malformed fields contribute nothing."""
    score = 0.0
    name = (product.get("name") or "").lower()
    description = (product.get("description") or "").lower()

    if keywords.product_type and keywords.product_type in name:
        score += config.PRODUCT_TYPE_WEIGHT

    if keywords.concern and (
        keywords.concern in name or any(keywords.concern in tag for tag in _tag_names(product))
    ):
        score += config.CONCERN_WEIGHT

    if keywords.skin_type and keywords.skin_type in description:
        score += config.SKIN_TYPE_WEIGHT

    rating = _to_float(product.get("average_rating"))
    if rating and rating > 0:
        score += rating

    total_sales = _to_float(product.get("total_sales"))
    if total_sales and total_sales > 0:
        score += min(total_sales / config.SALES_DIVISOR, config.SALES_BOOST_CAP)

    return score


def rank_products(
    products: list[dict[str, Any]],
    keywords: KeywordRecord,
    config: Settings = settings,
) -> list[dict[str, Any]]:
    """
    Attach relevance_score to each product and sort by it, highest first.

    sorted() is stable, so products with equal scores keep the catalog's order.
    """
    scored = [
        {**product, "relevance_score": score_product(product, keywords, config)}
        for product in products
    ]
    return sorted(scored, key=lambda product: product["relevance_score"], reverse=True)


class VoiceSearchService:
    """
    Turns a transcript into a ranked product list.

    One catalog call per search. The only hard filter is the price tier, which
    is numeric and language independent; product type, concern and skin type
    boost the ranking instead of excluding products.
    """

    def __init__(self, catalog: ProductCatalog, config: Settings = settings):
        self.catalog = catalog
        self.config = config

    async def search_by_voice(self, transcript: str | None) -> SearchResult:
        """
        Run the voice search pipeline.

        Args:
            transcript: Raw speech-to-text output

        Returns:
            SearchResult with ranked products, extracted keywords and the catalog query

        Raises:
            CatalogUnavailable: the catalog failed or did not answer within CATALOG_TIMEOUT
        """
        keywords = extract_keywords(transcript)
        search_query = build_search_query(keywords)

        logger.info(f"🎙️ Voice query: {search_query!r}")
        logger.info(f"🎙️ Keywords: {keywords.model_dump(exclude={'original_text'})}")

        try:
            results = await asyncio.wait_for(
                self.catalog.search_products(search_query),
                timeout=self.config.CATALOG_TIMEOUT,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Voice search error: catalog timed out after {self.config.CATALOG_TIMEOUT}s")
            raise CatalogUnavailable(
                f"Catalog did not answer within {self.config.CATALOG_TIMEOUT}s", e
            ) from e
        except CatalogUnavailable as e:
            logger.error(f"Voice search error: {e.message}")
            raise

        filtered = filter_by_price(results, keywords.price_range, self.config)
        ranked = rank_products(filtered, keywords, self.config)

        logger.info(f"✅ Catalog: {len(results)} results, {len(ranked)} after price filter")

        return SearchResult(products=ranked, keywords=keywords, search_query=search_query)


@lru_cache
def get_voice_search_service() -> VoiceSearchService:
    """Get cached voice search service instance"""
    return VoiceSearchService(catalog=get_catalog())

from typing import Any

from pydantic import BaseModel, Field


class KeywordRecord(BaseModel):
    """Tags extracted from a single utterance"""

    product_type: str | None = None
    skin_type: str | None = None
    concern: str | None = None
    price_range: str | None = None
    ingredient: str | None = None
    intent: str | None = None  # Informational only, never used for filtering
    original_text: str = ""

    def has_structured_tags(self) -> bool:
        return bool(self.product_type or self.skin_type or self.concern)


class SearchResult(BaseModel):
    """Ranked products for one voice search, with the keywords and query that produced them"""

    products: list[dict[str, Any]]  # Catalog products, each with an added relevance_score
    keywords: KeywordRecord
    search_query: str


class VoiceSearchRequest(BaseModel):
    transcript: str = Field(..., description="Speech-to-text transcription")
    user_name: str | None = Field(default=None, description="Shopper name used to personalize the reply")


class VoiceSearchResponse(BaseModel):
    transcript: str
    search_query: str  # What was actually sent to the catalog
    description: str  # Human-readable summary of the detected keywords
    keywords: KeywordRecord
    products: list[dict[str, Any]]
    total_results: int
    reply: str  # Text handed to text-to-speech


class TagCount(BaseModel):
    name: str
    count: int


class SearchInsights(BaseModel):
    total_queries: int = 0
    top_product_types: list[TagCount] = []
    top_skin_types: list[TagCount] = []
    top_concerns: list[TagCount] = []
    recent_queries: list[dict[str, Any]] = []
    failed_queries: list[dict[str, Any]] = []

"""Keyword extraction and search query building for voice transcripts"""

import logging
import re

from voice_search.schemas.voice import KeywordRecord
from voice_search.services.lexicon import (
    CONCERNS,
    INGREDIENTS,
    INTENTS,
    PRICES,
    PRODUCTS,
    SKIN_TYPES,
    find_match,
)

logger = logging.getLogger(__name__)

# Conversational filler, Standard Arabic then Darija
STOP_WORDS = (
    "أريد", "بغيت", "أبحث", "عن", "البي", "عندكم", "في", "من", "ممكن", "بدي", "احتاج", "ابحث",
    "عطيني", "ورينا", "فينا", "شي", "ديال", "لي", "مزيان", "السلام", "عليكم", "هل", "لديكم",
    "اسألك", "نسولك", "بغيتك", "توريني", "عافاك", "شكرا", "لو", "سمحت",
    "كاين", "كاينة", "واش", "حاجة", "بغين", "خصني", "خاصني", "عفاك", "الله", "يخليك",
    "نسول", "نسال", "بغى",
)

# Attached definite-article forms. Conjunction prefixes (و, ف, ب) are left alone
# because they start too many real words ("واقي", "بشرة").
STRIPPABLE_PREFIXES = ("لل", "ال", "كال", "فال", "بال")

# Characters that must remain after a prefix is stripped
MIN_STEM_LENGTH = 3

_STOP_WORD_PATTERNS = tuple(re.compile(rf"\b{re.escape(word)}\b") for word in STOP_WORDS)


def extract_keywords(text: str | None) -> KeywordRecord:
    """
    Extract product type, skin type, concern, price range, ingredient and intent
    from a speech-to-text transcript.

    Matching is plain substring containment against the lexicon, first hit per
    category. Empty input is a normal case and yields an empty record.

    Args:
        text: Raw transcription

    Returns:
        KeywordRecord with one tag (or None) per category
    """
    if not text:
        return KeywordRecord(original_text="")

    normalized = text.lower().strip()

    return KeywordRecord(
        product_type=find_match(normalized, PRODUCTS),
        skin_type=find_match(normalized, SKIN_TYPES),
        concern=find_match(normalized, CONCERNS),
        price_range=find_match(normalized, PRICES),
        ingredient=find_match(normalized, INGREDIENTS),
        intent=find_match(normalized, INTENTS),
        original_text=text,
    )


def _strip_prefix(word: str) -> str:
    for prefix in STRIPPABLE_PREFIXES:
        if word.startswith(prefix) and len(word) - len(prefix) >= MIN_STEM_LENGTH:
            return word[len(prefix):]
    return word


def build_search_query(keywords: KeywordRecord) -> str:
    """
    Build the catalog search string from extracted keywords.

    Filler words are removed from the transcript and definite articles are
    lightly stemmed so the remaining words match Arabic product titles. When
    nothing survives, falls back to the English tags, then to the transcript.

    Args:
        keywords: Output of extract_keywords

    Returns:
        Search string (empty only for an empty transcript without tags)
    """
    remaining_text = keywords.original_text.lower()

    for pattern in _STOP_WORD_PATTERNS:
        remaining_text = pattern.sub(" ", remaining_text)

    cleaned_search = " ".join(_strip_prefix(word) for word in remaining_text.split()).strip()
    if cleaned_search:
        return cleaned_search

    parts = [tag for tag in (keywords.product_type, keywords.concern) if tag]
    fallback = " ".join(parts) or keywords.original_text
    logger.debug(f"Nothing left after stop-word removal, falling back to: {fallback!r}")
    return fallback


def get_search_description(keywords: KeywordRecord) -> str:
    """Readable summary of what was understood, e.g. "serum for acne (oily skin)"."""
    if not keywords.has_structured_tags():
        return keywords.original_text

    parts = []
    if keywords.product_type:
        parts.append(keywords.product_type)
    if keywords.concern:
        parts.append(f"for {keywords.concern}")
    if keywords.skin_type:
        parts.append(f"({keywords.skin_type} skin)")

    return " ".join(parts)

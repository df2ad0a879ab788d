from voice_search.schemas.voice import KeywordRecord
from voice_search.services.keyword_extractor import (
    build_search_query,
    extract_keywords,
    get_search_description,
)
from voice_search.services.lexicon import (
    CONCERNS,
    INGREDIENTS,
    INTENTS,
    PRICE_TAGS,
    PRICES,
    PRODUCTS,
    SKIN_TYPE_TAGS,
    SKIN_TYPES,
)


# Extraction
def test_extract_serum_for_oily_skin():
    k = extract_keywords("أريد سيروم للبشرة الدهنية")
    assert k.product_type == "serum"
    assert k.skin_type == "oily"
    assert k.intent == "want"
    assert k.original_text == "أريد سيروم للبشرة الدهنية"


def test_extract_empty_and_none_are_blank_records():
    for text in ("", None):
        k = extract_keywords(text)
        assert k == KeywordRecord(original_text="")
        assert k.product_type is None and k.skin_type is None and k.concern is None
        assert k.price_range is None and k.ingredient is None and k.intent is None


def test_extract_is_deterministic():
    text = "بغيت كريم مرطب للبشرة الجافة"
    assert extract_keywords(text) == extract_keywords(text)


def test_specific_phrase_beats_generic_one():
    assert extract_keywords("كريم مرطب").product_type == "moisturizer"
    assert extract_keywords("كريم").product_type == "cream"
    assert extract_keywords("واقي من الشمس").product_type == "sunscreen"


def test_extract_lowercases_latin_script():
    k = extract_keywords("  Serum فيتامين C  ")
    assert k.ingredient == "vitamin c"
    # original text is kept verbatim, including surrounding spaces
    assert k.original_text == "  Serum فيتامين C  "


def test_extract_price_and_concern():
    k = extract_keywords("أحتاج كريم رخيص لحب الشباب")
    assert k.price_range == "low"
    assert k.concern == "acne"
    assert k.intent == "need"


def test_extract_darija_skin_type():
    assert extract_keywords("بشرتي ميدة بزاف").skin_type == "oily"


def test_lexicon_tags_stay_in_their_sets():
    assert SKIN_TYPE_TAGS == {"oily", "dry", "sensitive", "combination", "normal", "mature", "dull"}
    assert PRICE_TAGS == {"low", "medium", "high"}


def test_lexicon_checks_longer_forms_first():
    for lexicon in (PRODUCTS, SKIN_TYPES, CONCERNS, PRICES, INTENTS, INGREDIENTS):
        lengths = [len(surface) for surface, _ in lexicon]
        assert lengths == sorted(lengths, reverse=True)


# Query building
def test_build_strips_stop_words_and_articles():
    k = extract_keywords("بغيت كريم مرطب للبشرة الجافة")
    assert k.product_type == "moisturizer"
    assert k.skin_type == "dry"
    assert build_search_query(k) == "كريم مرطب بشرة جافة"


def test_build_keeps_stop_word_inside_longer_word():
    # "عن" is a stop word but must survive inside "عندي"
    assert build_search_query(KeywordRecord(original_text="عندي")) == "عندي"


def test_build_does_not_overstem_short_words():
    assert build_search_query(KeywordRecord(original_text="الفم الورد")) == "الفم ورد"


def test_build_strips_prefix_when_three_letters_remain():
    # "للون" keeps only two letters after "لل"; "الماء" keeps three
    assert build_search_query(KeywordRecord(original_text="للون الماء")) == "للون ماء"


def test_build_falls_back_to_tags():
    k = KeywordRecord(original_text="", product_type="serum", concern="acne")
    assert build_search_query(k) == "serum acne"
    assert build_search_query(KeywordRecord(original_text="", concern="acne")) == "acne"


def test_build_falls_back_to_original_text():
    # Only filler words and no tags: the transcript is used as is
    k = extract_keywords("بغيت عافاك")
    assert build_search_query(k) == "بغيت عافاك"


def test_build_empty_record_gives_empty_query():
    assert build_search_query(KeywordRecord(original_text="")) == ""


# Description
def test_description_lists_detected_parts():
    k = KeywordRecord(original_text="x", product_type="serum", concern="acne", skin_type="oily")
    assert get_search_description(k) == "serum for acne (oily skin)"


def test_description_without_tags_is_transcript():
    k = KeywordRecord(original_text="شي حاجة زوينة", price_range="low")
    assert get_search_description(k) == "شي حاجة زوينة"

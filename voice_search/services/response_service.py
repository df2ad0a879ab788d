"""
Spoken reply generation for voice search.

Replies are written in the voice of a beauty consultant addressing the shopper
in the feminine form, and are kept to a few sentences so text-to-speech stays
short.
"""

import logging
from datetime import datetime
from typing import Any

from voice_search.core.config import Settings, settings
from voice_search.schemas.voice import KeywordRecord

logger = logging.getLogger(__name__)

# Trigger words scanned in the lowercased transcript, checked in this order
GREETING_WORDS = ("سلام", "مرحبا", "أهلا", "صباح", "مساء", "hello", "hi")
QUESTION_WORDS = ("نسول", "سؤال", "ممكن", "عفاك", "الله يخليك", "plz", "please")
GRATITUDE_WORDS = ("شكرا", "الله يحفظك", "merci", "thanks")
PRICE_QUERY_WORDS = ("بشحال", "سعر", "ثمن", "price")

SKIN_TYPE_NAMES = {
    "oily": "الدهنية",
    "dry": "الجافة",
    "sensitive": "الحساسة",
}

SKIN_TYPE_ADVICE = {
    "oily": "للبشرة الدهنية، اخترت لكِ منتجات خفيفة وخالية من الزيوت. تساعد على التحكم في اللمعان دون أن تسدّ المسام.",
    "dry": "للبشرة الجافة، هذه المنتجات غنية بالمرطبات الطبيعية. ستشعرين بالنعومة والترطيب طوال اليوم.",
    "sensitive": "للبشرة الحساسة، اخترت منتجات لطيفة خالية من العطور والمواد المهيجة. آمنة ومريحة لبشرتك.",
    "combination": "للبشرة المختلطة، هذه المنتجات توازن بين الترطيب والتحكم في الزيوت. مثالية لمنطقة T-zone.",
    "normal": "بشرتك عادية رائعة! هذه المنتجات ستحافظ على توازنها الطبيعي وتزيد من نضارتها.",
    "mature": "للبشرة الناضجة، اخترت منتجات غنية بمضادات الأكسدة والكولاجين. تساعد على شد البشرة ومكافحة علامات التقدم في العمر.",
}

CONCERN_ADVICE = {
    "acne": "لمشكلة حب الشباب، هذه المنتجات تحتوي على حمض الساليسيليك والنياسيناميد. تساعد على تنقية البشرة وتقليل الحبوب دون تجفيفها.",
    "brightening": "للتفتيح والإشراق، اخترت منتجات غنية بفيتامين سي وحمض الكوجيك. ستلاحظين الفرق خلال أسابيع قليلة.",
    "whitening": "لتوحيد لون البشرة، هذه المنتجات تعمل على تفتيح التصبغات ومنع ظهورها مجدداً.",
    "hydration": "للترطيب العميق، هذه المنتجات تحتوي على حمض الهيالورونيك والسيراميد. ترطيب يدوم ٢٤ ساعة!",
    "glow": "للنضارة والإشراق، هذه المنتجات ستعطي بشرتك لمعاناً صحياً وطبيعياً.",
    "anti-aging": "لمكافحة التجاعيد، اخترت منتجات تحتوي على الريتينول والببتيدات. تقلل الخطوط الدقيقة وتشد البشرة.",
    "dark spots": "للبقع الداكنة والتصبغات، هذه المنتجات تعمل على توحيد لون البشرة تدريجياً.",
    "dark circles": "للهالات السوداء، اخترت منتجات تحتوي على فيتامين K والكافيين. تقلل الانتفاخ وتفتح المنطقة حول العين.",
    "pores": "لتصغير المسام، هذه المنتجات تحتوي على حمض الجليكوليك والنياسيناميد. تنظف المسام وتضيقها.",
    "firming": "لشد البشرة، هذه المنتجات غنية بالكولاجين والإيلاستين. تعيد للبشرة مرونتها وشبابها.",
    "redness": "لتهدئة الاحمرار، هذه المنتجات تحتوي على الألوفيرا والكاموميل. لطيفة ومهدئة للبشرة.",
}

CANNED_REPLIES = {
    "greeting": "مرحباً بكِ! أنا مساعدتك الذكية للجمال. كيف يمكنني مساعدتك اليوم؟",
    "ask_for_more": "هل تريدين البحث عن شيء آخر؟ أنا هنا لمساعدتك.",
    "no_speech": "عذراً، لم أتمكن من سماعك بوضوح. هل يمكنك تكرار طلبك؟",
    "error": "عذراً، حدث خطأ. دعينا نحاول مرة أخرى.",
    "thanks": "شكراً لتسوقك معنا! إذا كان لديكِ أي استفسار، لا تترددي في السؤال.",
}


def get_time_greeting(hour: int) -> str:
    if hour < 12:
        return "صباح الخير"
    if hour < 18:
        return "مساء الخير"
    return "مساء النور"


def found_products_message(count: int, product_type: str | None = None, skin_type: str | None = None) -> str:
    """Result sentence picked by count band: 0, 1, 2-5, 6+."""
    if count == 0:
        return "عذراً، لم أجد منتجات مطابقة لطلبك حالياً. لكن لا تقلقي، يمكنك تجربة البحث بكلمات أخرى أو التواصل معنا مباشرة لمساعدتك."

    if count == 1:
        type_msg = f" من نوع {product_type}" if product_type else ""
        skin_name = SKIN_TYPE_NAMES.get(skin_type or "")
        skin_msg = f" مناسب للبشرة {skin_name}" if skin_name else ""
        return f"وجدت لكِ منتج واحد رائع{type_msg}{skin_msg}. إنه اختيار ممتاز!"

    if count <= 5:
        type_msg = f" من {product_type}" if product_type else ""
        return f"وجدت لكِ {count} منتجات مميزة{type_msg}. اخترتها لكِ بعناية!"

    type_msg = f" في قسم {product_type}" if product_type else ""
    return f"لدينا تشكيلة رائعة! وجدت {count} منتج{type_msg}. إليكِ أفضلها حسب تقييمات عملائنا."


def _opening(raw_input: str, user_name: str | None, hour: int) -> str | None:
    name_part = f" يا {user_name}" if user_name else ""

    if any(word in raw_input for word in GREETING_WORDS):
        return f"{get_time_greeting(hour)}{name_part}!"
    if any(word in raw_input for word in QUESTION_WORDS):
        return f"أهلاً بكِ{name_part}! يسعدني جداً الرد على سؤالك."
    if any(word in raw_input for word in GRATITUDE_WORDS):
        return f"العفو{name_part}! أنا هنا دائماً لمساعدتك."
    if user_name:
        return f"تفضلي يا {user_name}،"
    return None


def generate_response(
    products: list[dict[str, Any]],
    keywords: KeywordRecord,
    search_query: str | None = None,
    user_name: str | None = None,
    hour: int | None = None,
    config: Settings = settings,
) -> str:
    """
    Build the spoken reply for a voice search.

    Parts are assembled in order (opening, main result, skin advice, concern
    advice) and only the first RESPONSE_MAX_PARTS are kept, so later advice is
    dropped when the opening and main result already fill the reply.

    Args:
        products: Ranked products
        keywords: Keywords extracted from the transcript
        search_query: Cleaned catalog query, echoed back to the shopper
        user_name: Optional name for personalization
        hour: Local hour for the time-of-day greeting (defaults to now)

    Returns:
        Arabic reply text
    """
    if hour is None:
        hour = datetime.now().hour

    raw_input = keywords.original_text.lower()
    query_text = search_query or keywords.original_text

    parts: list[str | None] = [_opening(raw_input, user_name, hour)]

    is_specific_search = bool(query_text) or not keywords.has_structured_tags()
    is_price_query = any(word in raw_input for word in PRICE_QUERY_WORDS)

    if products:
        if is_price_query and len(products) == 1:
            product = products[0]
            price = product.get("sale_price") or product.get("price")
            parts.append(f"بخصوص ثمن {product.get('name', '')}، فهو {price} {config.CURRENCY_LABEL}.")
            parts.append("إنه منتج رائع ويستحق التجربة!")
        elif is_specific_search:
            best = "أفضل " if len(products) > 1 else ""
            parts.append(f'بخصوص طلبك عن "{query_text}"، وجدت لكِ تشكيلة رائعة.')
            parts.append(f"إليكِ {best}{len(products)} خيارات تتماشى مع ذوقك.")
        else:
            parts.append(found_products_message(len(products), keywords.product_type, keywords.skin_type))

        if keywords.skin_type in SKIN_TYPE_ADVICE:
            parts.append(SKIN_TYPE_ADVICE[keywords.skin_type])
        if keywords.concern in CONCERN_ADVICE:
            parts.append(CONCERN_ADVICE[keywords.concern])
    else:
        parts.append(found_products_message(0))

    spoken_parts = [part for part in parts if part][: config.RESPONSE_MAX_PARTS]
    return " ".join(spoken_parts)

"""
Surface-form lexicon for voice search.

Maps Standard Arabic, Moroccan Darija and a few French/English transliterations
to canonical tags. Each category is an ordered tuple of (surface_form, tag)
pairs and is checked in that order: longest surface form first, authoring
order among equal lengths. A multi-word phrase such as "كريم مرطب" therefore
wins over the bare "كريم" it contains.
"""

Lexicon = tuple[tuple[str, str], ...]


def _most_specific_first(entries: list[tuple[str, str]]) -> Lexicon:
    """Order entries longest surface form first; sorted() is stable so ties keep authoring order."""
    return tuple(sorted(entries, key=lambda entry: len(entry[0]), reverse=True))


PRODUCTS: Lexicon = _most_specific_first([
    # Creams
    ("كريم", "cream"),
    ("كريمات", "cream"),
    ("كريم مرطب", "moisturizer"),
    ("كريم ترطيب", "moisturizer"),
    ("كريم واقي", "sunscreen"),
    ("كريم أساس", "foundation"),
    ("كريم عيون", "eye cream"),
    ("كريم ليلي", "night cream"),
    ("كريم نهاري", "day cream"),
    ("كريم تفتيح", "brightening cream"),
    ("كريم مضاد للتجاعيد", "anti-aging cream"),
    ("كريم حب الشباب", "acne cream"),
    ("كريم يدين", "hand cream"),
    ("كريم قدمين", "foot cream"),
    # Makeup
    ("مكياج", "makeup"),
    ("ميكب", "makeup"),
    ("ماسكارا", "mascara"),
    ("مسكرة", "mascara"),
    ("أحمر شفاه", "lipstick"),
    ("احمر شفاه", "lipstick"),
    ("روج", "lipstick"),
    ("ليب ستيك", "lipstick"),
    ("ملمع شفاه", "lip gloss"),
    ("غلوس", "lip gloss"),
    ("آيلاينر", "eyeliner"),
    ("ايلاينر", "eyeliner"),
    ("كحل", "eyeliner"),
    ("كحل سائل", "liquid liner"),
    ("ظل عيون", "eyeshadow"),
    ("ظلال عيون", "eyeshadow"),
    ("ظلال", "eyeshadow"),
    ("باليت", "palette"),
    ("باليت ظلال", "eyeshadow palette"),
    ("بودرة", "powder"),
    ("باودر", "powder"),
    ("بودرة مضغوطة", "pressed powder"),
    ("بودرة سائبة", "loose powder"),
    ("فاونديشن", "foundation"),
    ("أساس", "foundation"),
    ("كونسيلر", "concealer"),
    ("خافي عيوب", "concealer"),
    ("كونتور", "contour"),
    ("بلاشر", "blush"),
    ("أحمر خدود", "blush"),
    ("احمر خدود", "blush"),
    ("برونزر", "bronzer"),
    ("هايلايتر", "highlighter"),
    ("اضاءة", "highlighter"),
    ("إضاءة", "highlighter"),
    ("برايمر", "primer"),
    ("تمهيد", "primer"),
    ("سيتينغ سبراي", "setting spray"),
    ("مثبت مكياج", "setting spray"),
    ("رموش صناعية", "false lashes"),
    ("رموش", "lashes"),
    ("قلم حواجب", "brow pencil"),
    ("حواجب", "brow"),
    # Skincare
    ("سيروم", "serum"),
    ("سيرم", "serum"),
    ("غسول", "cleanser"),
    ("غسول وجه", "face cleanser"),
    ("منظف", "cleanser"),
    ("منظف وجه", "face cleanser"),
    ("صابون", "soap"),
    ("صابونة", "soap"),
    ("صابونة طبيعية", "natural soap"),
    ("تونر", "toner"),
    ("تونيك", "toner"),
    ("مرطب", "moisturizer"),
    ("موستورايزر", "moisturizer"),
    ("لوشن", "lotion"),
    ("زيت", "oil"),
    ("زيت وجه", "facial oil"),
    ("زيت أرغان", "argan oil"),
    ("زيت الأرغان", "argan oil"),
    ("جل", "gel"),
    ("جل مرطب", "hydrating gel"),
    ("مقشر", "exfoliator"),
    ("سكراب", "scrub"),
    ("بيلينغ", "peel"),
    ("ماسك", "mask"),
    ("قناع", "mask"),
    ("قناع وجه", "face mask"),
    ("ماسك ورقي", "sheet mask"),
    ("ماسك طين", "clay mask"),
    ("أمبولات", "ampoules"),
    ("ايسنس", "essence"),
    # Sun protection
    ("واقي شمس", "sunscreen"),
    ("واقي من الشمس", "sunscreen"),
    ("صن بلوك", "sunscreen"),
    ("صن سكرين", "sunscreen"),
    ("حماية من الشمس", "sunscreen"),
    ("كريم حماية", "sunscreen"),
    ("اس بي اف", "spf"),
    # Eye care
    ("كريم عين", "eye cream"),
    ("سيروم عين", "eye serum"),
    ("جل عيون", "eye gel"),
    ("باتش عيون", "eye patches"),
    ("أقنعة عيون", "eye masks"),
    # Hair
    ("شامبو", "shampoo"),
    ("بلسم", "conditioner"),
    ("بلسم شعر", "conditioner"),
    ("زيت شعر", "hair oil"),
    ("ماسك شعر", "hair mask"),
    ("سيروم شعر", "hair serum"),
    ("صبغة شعر", "hair dye"),
    ("صبغة", "hair dye"),
    ("مثبت شعر", "hair spray"),
    ("جل شعر", "hair gel"),
    # Body
    ("لوشن جسم", "body lotion"),
    ("كريم جسم", "body cream"),
    ("زبدة جسم", "body butter"),
    ("مقشر جسم", "body scrub"),
    ("زيت جسم", "body oil"),
    ("مزيل عرق", "deodorant"),
    ("ديودورانت", "deodorant"),
    # Perfume
    ("عطر", "perfume"),
    ("بارفيوم", "perfume"),
    ("عطور", "perfume"),
    ("بودي سبلاش", "body splash"),
    ("بودي ميست", "body mist"),
    # Lips
    ("مقشر شفاه", "lip scrub"),
    ("مرطب شفاه", "lip balm"),
    ("بلسم شفاه", "lip balm"),
])

SKIN_TYPES: Lexicon = _most_specific_first([
    ("دهنية", "oily"),
    ("بشرة دهنية", "oily"),
    ("زيتية", "oily"),
    ("جافة", "dry"),
    ("بشرة جافة", "dry"),
    ("ناشفة", "dry"),
    ("حساسة", "sensitive"),
    ("بشرة حساسة", "sensitive"),
    ("متهيجة", "sensitive"),
    ("مختلطة", "combination"),
    ("بشرة مختلطة", "combination"),
    ("عادية", "normal"),
    ("بشرة عادية", "normal"),
    ("طبيعية", "normal"),
    ("مركبة", "combination"),
    ("ناضجة", "mature"),
    ("بشرة ناضجة", "mature"),
    ("متقدمة في العمر", "mature"),
    ("باهتة", "dull"),
    ("بشرة باهتة", "dull"),
    ("ميدة", "oily"),  # Darija: greasy
    ("حرشة", "dry"),  # Darija: rough
    ("حمراء", "sensitive"),
])

CONCERNS: Lexicon = _most_specific_first([
    # Acne
    ("حب الشباب", "acne"),
    ("حبوب", "acne"),
    ("بثور", "acne"),
    ("حب شباب", "acne"),
    ("بثرات", "acne"),
    ("رؤوس سوداء", "blackheads"),
    ("رؤوس بيضاء", "whiteheads"),
    ("مسام واسعة", "large pores"),
    # Brightening
    ("تفتيح", "brightening"),
    ("تبييض", "whitening"),
    ("توحيد لون", "even tone"),
    ("توحيد اللون", "even tone"),
    ("تفتيح البشرة", "skin brightening"),
    ("إشراقة", "radiance"),
    # Hydration
    ("ترطيب", "hydration"),
    ("جفاف", "hydration"),
    ("ترطيب عميق", "deep hydration"),
    ("نعومة", "softness"),
    # Glow
    ("نضارة", "glow"),
    ("إشراق", "glow"),
    ("لمعان", "glow"),
    ("حيوية", "vitality"),
    ("بشرة متوهجة", "glowing skin"),
    # Anti-aging
    ("تجاعيد", "anti-aging"),
    ("خطوط", "anti-aging"),
    ("خطوط رفيعة", "fine lines"),
    ("شيخوخة", "anti-aging"),
    ("مكافحة الشيخوخة", "anti-aging"),
    ("مضاد للشيخوخة", "anti-aging"),
    ("مكافحة التجاعيد", "anti-wrinkle"),
    ("شد", "firming"),
    ("شد البشرة", "skin firming"),
    ("مرونة", "elasticity"),
    ("كولاجين", "collagen"),
    # Dark spots
    ("تصبغات", "pigmentation"),
    ("بقع", "dark spots"),
    ("بقع داكنة", "dark spots"),
    ("كلف", "melasma"),
    ("نمش", "freckles"),
    ("آثار حبوب", "acne scars"),
    ("ندوب", "scars"),
    # Dark circles
    ("هالات", "dark circles"),
    ("هالات سوداء", "dark circles"),
    ("انتفاخ العين", "eye puffiness"),
    ("انتفاخات", "puffiness"),
    # Pores
    ("مسام", "pores"),
    ("مسامات", "pores"),
    ("تضييق المسام", "pore minimizing"),
    # Other
    ("تقشير", "exfoliation"),
    ("تنظيف", "cleansing"),
    ("تنظيف عميق", "deep cleansing"),
    ("تنعيم", "smoothing"),
    ("حماية", "protection"),
    ("تغذية", "nourishment"),
    ("علاج", "treatment"),
    ("احمرار", "redness"),
    ("حساسية", "sensitivity"),
    ("التهاب", "inflammation"),
    ("حبوب رقيقة", "small bumps"),
    ("لي بوان نوار", "blackheads"),  # French via Darija: "les points noirs"
    ("ليكرو", "sunscreen"),  # Darija for "l'écran"
])

PRICES: Lexicon = _most_specific_first([
    ("رخيص", "low"),
    ("اقتصادي", "low"),
    ("بسعر معقول", "low"),
    ("غير مكلف", "low"),
    ("متوسط", "medium"),
    ("متوسط السعر", "medium"),
    ("معقول", "medium"),
    ("غالي", "high"),
    ("فاخر", "high"),
    ("ثمين", "high"),
    ("برستيج", "high"),
    ("هاي اند", "high"),
])

INTENTS: Lexicon = _most_specific_first([
    ("أريد", "want"),
    ("اريد", "want"),
    ("أبغى", "want"),
    ("ابغى", "want"),
    ("أحتاج", "need"),
    ("احتاج", "need"),
    ("أبحث عن", "search"),
    ("ابحث عن", "search"),
    ("عندي", "have"),
    ("لدي", "have"),
    ("أعطني", "give"),
    ("اعطني", "give"),
    ("اقترح", "suggest"),
    ("اقترح لي", "suggest"),
    ("اقتراح", "suggest"),
    ("نصيحة", "advice"),
    ("انصحني", "advice"),
    ("أفضل", "best"),
    ("افضل", "best"),
    ("أحسن", "best"),
    ("احسن", "best"),
    ("ممتاز", "excellent"),
    ("جيد", "good"),
    ("مناسب", "suitable"),
    ("يناسب", "suitable"),
    ("لبشرتي", "for my skin"),
    ("لوجهي", "for my face"),
    ("لعيوني", "for my eyes"),
    ("للشفاه", "for lips"),
    ("للجسم", "for body"),
    ("للشعر", "for hair"),
    ("فين", "where"),
    ("أين", "where"),
    ("كيف", "how"),
    ("شنو", "what"),
    ("ماذا", "what"),
    ("هل", "question"),
    ("مشكلة", "problem"),
    ("مشكلتي", "my problem"),
    ("بغيت", "want"),  # Darija
    ("خصني", "need"),  # Darija
    ("بشحال", "how much"),  # Darija
    ("بغيت شي حاجة", "want something"),
    ("كاين شي", "is there any"),
    ("عندكم", "do you have"),
    ("عافاك", "please"),
    ("يخليك", "please"),
])

INGREDIENTS: Lexicon = _most_specific_first([
    ("فيتامين سي", "vitamin c"),
    ("فيتامين c", "vitamin c"),
    ("ريتينول", "retinol"),
    ("هيالورونيك", "hyaluronic acid"),
    ("حمض الهيالورونيك", "hyaluronic acid"),
    ("نياسيناميد", "niacinamide"),
    ("ساليسيليك", "salicylic acid"),
    ("جليكوليك", "glycolic acid"),
    ("الألوفيرا", "aloe vera"),
    ("الوفيرا", "aloe vera"),
    ("زيت الأرغان", "argan oil"),
    ("زبدة الشيا", "shea butter"),
    ("زيت جوز الهند", "coconut oil"),
    ("زيت الورد", "rose oil"),
    ("ماء الورد", "rose water"),
    ("شاي أخضر", "green tea"),
    ("كافيين", "caffeine"),
    ("بيبتيدات", "peptides"),
    ("سيراميد", "ceramides"),
])

# Canonical tag sets, one per category
PRODUCT_TAGS = frozenset(tag for _, tag in PRODUCTS)
SKIN_TYPE_TAGS = frozenset(tag for _, tag in SKIN_TYPES)
CONCERN_TAGS = frozenset(tag for _, tag in CONCERNS)
PRICE_TAGS = frozenset(tag for _, tag in PRICES)
INTENT_TAGS = frozenset(tag for _, tag in INTENTS)
INGREDIENT_TAGS = frozenset(tag for _, tag in INGREDIENTS)


def find_match(text: str, lexicon: Lexicon) -> str | None:
    """Return the tag of the first surface form contained in text, or None."""
    for surface_form, tag in lexicon:
        if surface_form in text:
            return tag
    return None

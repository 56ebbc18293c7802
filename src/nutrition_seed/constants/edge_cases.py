"""
Edge-case corpus used only when edge-case seeding is enabled.

Values are injected into a small, bounded subset of generated rows to
stress text rendering, parsing and numeric formatting. They never replace
the statistical bulk of the data.
"""

_LONG_NOTE = (
    "Had this at a friend's birthday dinner and honestly could not tell how big the "
    "portion was, so this is a rough estimate based on the plate size and what I "
    "remember eating. There was also a side of bread that I mostly skipped, a small "
    "salad with an oily dressing, and some of the dessert that was shared around the "
    "table. Logging it anyway so the weekly average is not thrown off too much by a "
    "missing day. Next time I should take a photo before eating so the estimate is "
    "better, or ask the restaurant for nutrition information if they have it online. "
    "Overall it was a good night and I do not regret it at all."
)

EDGE_CASE_STRINGS: dict[str, list[str]] = {
    "unicode": [
        "Crème brûlée",
        "Jalapeño poppers",
        "Phở bò",
        "Smørrebrød",
        "Ñoquis con salsa",
        "Käsespätzle",
        "Bánh mì",
        "寿司 (sushi)",
        "Пельмени",
        "خبز عربي",
    ],
    "emoji": [
        "🍕 Pizza night",
        "🥗 Salad bowl 🥑",
        "☕️ Morning coffee",
        "🍎🍌🍇 Fruit mix",
        "💪 Post-workout shake",
    ],
    "special_chars": [
        "Mac & Cheese",
        "Ben & Jerry's",
        'Chicken "tenders"',
        "50/50 mix <homemade>",
        "Salad; no dressing",
        "100% whole wheat (2 slices)",
        "O'Doul's, non-alcoholic",
        "Rice -- extra",
    ],
    "long_text": [_LONG_NOTE],
    "whitespace": [
        "  Leading spaces",
        "Trailing spaces   ",
        "Multiple   internal   spaces",
        "Tab\tseparated",
        "Line\nbreak",
    ],
}

EDGE_CASE_FOOD_NOTES = [
    EDGE_CASE_STRINGS["unicode"][0],
    EDGE_CASE_STRINGS["emoji"][0],
    EDGE_CASE_STRINGS["special_chars"][1],
    EDGE_CASE_STRINGS["long_text"][0],
    EDGE_CASE_STRINGS["whitespace"][0],
    EDGE_CASE_STRINGS["unicode"][7],
    EDGE_CASE_STRINGS["emoji"][3],
    EDGE_CASE_STRINGS["special_chars"][2],
    EDGE_CASE_STRINGS["whitespace"][4],
]

EDGE_CASE_QUICK_ADD_DESCRIPTIONS = [
    EDGE_CASE_STRINGS["emoji"][1],
    EDGE_CASE_STRINGS["unicode"][2],
    EDGE_CASE_STRINGS["special_chars"][0],
    EDGE_CASE_STRINGS["long_text"][0],
    EDGE_CASE_STRINGS["whitespace"][2],
    EDGE_CASE_STRINGS["unicode"][8],
]

# Fractional, tiny and very large serving multipliers
EDGE_CASE_SERVINGS = [0.01, 0.1, 0.125, 0.33, 2.75, 10, 25, 99.5]

# Extreme but representable body weights (kg)
EDGE_CASE_WEIGHTS = [30.0, 35.5, 199.9, 250.0, 300.0]

# Year boundaries, leap days and month ends
EDGE_CASE_DATES = [
    "2023-12-31",
    "2024-01-01",
    "2024-02-29",
    "2024-04-30",
    "2024-12-31",
    "2025-01-01",
]

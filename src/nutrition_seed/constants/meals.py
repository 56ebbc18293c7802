"""
Meal building blocks for generated food logs and meal plans.

Each template is one plausible meal: an ordered list of
(food_id, serving multiplier) pairs drawn from the bundled catalog.
"""

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")

MEAL_TEMPLATES: dict[str, list[dict]] = {
    "breakfast": [
        {"name": "Oats with banana and shake", "items": [("seed-057", 0.5), ("seed-024", 1), ("seed-104", 1)]},
        {"name": "Eggs on toast", "items": [("seed-004", 3), ("seed-059", 0.5), ("seed-120", 1)]},
        {"name": "Yogurt parfait", "items": [("seed-063", 2), ("seed-028", 1), ("seed-106", 0.3)]},
        {"name": "Bagel and latte", "items": [("seed-115", 1), ("seed-074", 0.3), ("seed-121", 1)]},
    ],
    "lunch": [
        {"name": "Chicken, rice and broccoli", "items": [("seed-001", 1.5), ("seed-054", 1.5), ("seed-037", 1)]},
        {"name": "Tuna sandwich", "items": [("seed-015", 1), ("seed-059", 1), ("seed-038", 0.5), ("seed-043", 0.5)]},
        {"name": "Turkey wrap", "items": [("seed-011", 1), ("seed-061", 1), ("seed-034", 0.5), ("seed-071", 0.3)]},
        {"name": "Chicken caesar salad", "items": [("seed-103", 3)]},
    ],
    "dinner": [
        {"name": "Salmon and sweet potato", "items": [("seed-013", 1.5), ("seed-044", 1.5), ("seed-046", 1)]},
        {"name": "Steak and potatoes", "items": [("seed-008", 1.5), ("seed-045", 1.5), ("seed-047", 1)]},
        {"name": "Turkey pasta", "items": [("seed-058", 2), ("seed-012", 1), ("seed-082", 1)]},
        {"name": "Chicken thigh quinoa bowl", "items": [("seed-002", 1.5), ("seed-055", 1.5), ("seed-041", 1), ("seed-049", 0.5)]},
    ],
    "snack": [
        {"name": "Protein bar", "items": [("seed-105", 1)]},
        {"name": "Apple and peanut butter", "items": [("seed-025", 1), ("seed-080", 0.15)]},
        {"name": "Greek yogurt", "items": [("seed-063", 1.5)]},
        {"name": "Almonds", "items": [("seed-076", 0.3)]},
    ],
}

# All present in the bundled catalog
FAVORITE_FOOD_IDS = [
    "seed-001",
    "seed-004",
    "seed-013",
    "seed-024",
    "seed-044",
    "seed-054",
    "seed-059",
    "seed-063",
    "seed-076",
    "seed-105",
]

QUICK_ADD_DESCRIPTIONS = [
    "Trail mix handful",
    "Chipotle bowl",
    "Granola bar",
    "Office snack",
    "Smoothie",
    "Leftovers",
    "Restaurant meal estimate",
]

# Zero-calorie quick adds injected with edge cases
ZERO_CALORIE_QUICK_ADDS = ["Black coffee, 0 cal", "Water with lemon"]

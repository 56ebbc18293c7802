"""
Constants Package - Static reference data for nutrition seeding.

Modules:
- catalog: Bundled foods, restaurants and restaurant menu items
- meals: Meal templates, favorites, quick-add descriptions
- edge_cases: Unicode/emoji/long/whitespace strings, extreme numbers and dates
- nutrients: Nutrient personas and per-food nutrient profiles
- photos: Progress photo images and schedule

Usage:
    from nutrition_seed.constants import (
        BUNDLED_FOODS, FOODS_BY_ID, MEAL_TEMPLATES, SEED_NUTRIENTS,
    )
"""

from .catalog import BUNDLED_FOODS, BUNDLED_RESTAURANT_FOODS, BUNDLED_RESTAURANTS, FOODS_BY_ID
from .edge_cases import (
    EDGE_CASE_DATES,
    EDGE_CASE_FOOD_NOTES,
    EDGE_CASE_QUICK_ADD_DESCRIPTIONS,
    EDGE_CASE_SERVINGS,
    EDGE_CASE_STRINGS,
    EDGE_CASE_WEIGHTS,
)
from .meals import (
    FAVORITE_FOOD_IDS,
    MEAL_TEMPLATES,
    MEAL_TYPES,
    QUICK_ADD_DESCRIPTIONS,
    ZERO_CALORIE_QUICK_ADDS,
)
from .nutrients import FOOD_NUTRIENT_PROFILES, NUTRIENTS_BY_ID, SEED_NUTRIENTS, intake_status
from .photos import (
    FULL_IMAGE_URL,
    MAX_COMPARISONS,
    PHOTO_SCHEDULE,
    SCHEDULE_SPAN_DAYS,
    SEED_IMAGES,
    SEED_PHOTO_PREFIX,
    THUMBNAIL_URL,
)

__all__ = [
    # Catalog
    "BUNDLED_FOODS",
    "FOODS_BY_ID",
    "BUNDLED_RESTAURANTS",
    "BUNDLED_RESTAURANT_FOODS",
    # Meals
    "MEAL_TYPES",
    "MEAL_TEMPLATES",
    "FAVORITE_FOOD_IDS",
    "QUICK_ADD_DESCRIPTIONS",
    "ZERO_CALORIE_QUICK_ADDS",
    # Edge cases
    "EDGE_CASE_STRINGS",
    "EDGE_CASE_FOOD_NOTES",
    "EDGE_CASE_QUICK_ADD_DESCRIPTIONS",
    "EDGE_CASE_SERVINGS",
    "EDGE_CASE_WEIGHTS",
    "EDGE_CASE_DATES",
    # Nutrients
    "SEED_NUTRIENTS",
    "NUTRIENTS_BY_ID",
    "FOOD_NUTRIENT_PROFILES",
    "intake_status",
    # Photos
    "SEED_IMAGES",
    "PHOTO_SCHEDULE",
    "SEED_PHOTO_PREFIX",
    "SCHEDULE_SPAN_DAYS",
    "FULL_IMAGE_URL",
    "THUMBNAIL_URL",
    "MAX_COMPARISONS",
]

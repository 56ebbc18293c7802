"""
Schema installation and bundled reference data.

install_schema() creates every table the seed engine writes (from
schema.sql), inserts the singleton/default rows the app expects after its
migrations, and loads the bundled food and restaurant catalogs. It is
idempotent: tables use CREATE TABLE IF NOT EXISTS and rows are upserted.
"""

from pathlib import Path

from .batch_writer import batch_insert
from .constants.catalog import BUNDLED_FOODS, BUNDLED_RESTAURANT_FOODS, BUNDLED_RESTAURANTS
from .helpers import now_iso
from .storage import Storage

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

PROFILE_ID = "singleton"

# Baseline values restored by the clear engine
DEFAULT_SETTINGS: dict[str, str] = {
    "daily_calorie_goal": "2000",
    "daily_protein_goal": "150",
    "daily_carbs_goal": "200",
    "daily_fat_goal": "65",
    "has_seen_onboarding": "false",
    "weight_unit": "kg",
    "water_goal_glasses": "8",
}

TABLES = [
    "user_profile",
    "user_settings",
    "goals",
    "weight_entries",
    "daily_metabolism",
    "weekly_reflections",
    "food_items",
    "log_entries",
    "quick_add_entries",
    "water_log",
    "favorite_foods",
    "fasting_config",
    "fasting_sessions",
    "macro_cycle_config",
    "macro_cycle_overrides",
    "meal_plan_settings",
    "planned_meals",
    "restaurants",
    "restaurant_foods",
    "restaurant_food_logs",
    "user_restaurant_usage",
    "nutrient_settings",
    "custom_nutrient_targets",
    "food_item_nutrients",
    "daily_nutrient_intake",
    "nutrient_contributors",
    "progress_photos",
    "photo_comparisons",
    "health_sync_log",
]


def load_schema_statements(path: Path = SCHEMA_PATH) -> list[str]:
    """
    Split schema.sql into individual statements.

    Strips '--' comment lines; statements are separated by ';'.
    """
    lines = [
        line for line in path.read_text(encoding="utf-8").splitlines()
        if not line.strip().startswith("--")
    ]
    return [stmt.strip() for stmt in "\n".join(lines).split(";") if stmt.strip()]


def install_defaults(storage: Storage) -> None:
    """Insert the default singleton rows (profile, settings, config tables)."""
    now = now_iso()
    batch_insert(
        storage,
        "user_profile",
        ["id", "has_completed_onboarding", "onboarding_skipped", "created_at", "updated_at"],
        [[PROFILE_ID, 0, 0, now, now]],
    )
    batch_insert(
        storage,
        "user_settings",
        ["key", "value", "updated_at"],
        [[key, value, now] for key, value in DEFAULT_SETTINGS.items()],
    )
    batch_insert(
        storage,
        "fasting_config",
        ["id", "enabled", "protocol", "created_at", "last_modified"],
        [[1, 0, "16:8", now, now]],
    )
    batch_insert(
        storage,
        "macro_cycle_config",
        ["id", "enabled", "pattern_type", "marked_days", "day_targets", "created_at", "last_modified"],
        [[1, 0, None, "[]", "{}", now, now]],
    )
    batch_insert(
        storage,
        "meal_plan_settings",
        ["id", "enabled", "show_on_today", "created_at", "last_modified"],
        [[1, 0, 1, now, now]],
    )


def install_catalog(storage: Storage) -> int:
    """
    Load the bundled food and restaurant catalogs.

    Returns:
        Number of catalog rows written
    """
    now = now_iso()
    food_rows = [
        [
            food["id"],
            food["name"],
            None,
            food["calories"],
            food["protein"],
            food["carbs"],
            food["fat"],
            food["serving_size"],
            food["serving_unit"],
            "bundled",
            0,
            None,
            now,
            now,
        ]
        for food in BUNDLED_FOODS
    ]
    count = batch_insert(
        storage,
        "food_items",
        [
            "id", "name", "brand", "calories", "protein", "carbs", "fat",
            "serving_size", "serving_unit", "source", "usage_count",
            "last_used_at", "created_at", "updated_at",
        ],
        food_rows,
    )
    count += batch_insert(
        storage,
        "restaurants",
        ["id", "name", "slug", "source", "created_at"],
        [[r["id"], r["name"], r["slug"], "bundled", now] for r in BUNDLED_RESTAURANTS],
    )
    count += batch_insert(
        storage,
        "restaurant_foods",
        ["id", "restaurant_id", "name", "calories", "protein", "carbohydrates", "fat", "created_at"],
        [
            [f["id"], f["restaurant_id"], f["name"], f["calories"], f["protein"], f["carbohydrates"], f["fat"], now]
            for f in BUNDLED_RESTAURANT_FOODS
        ],
    )
    return count


def install_schema(storage: Storage, with_catalog: bool = True) -> None:
    """
    Create all tables, default rows and (optionally) the bundled catalog.

    Args:
        storage: Storage backend
        with_catalog: Also load bundled foods and restaurants
    """
    for statement in load_schema_statements():
        storage.execute(statement)
    install_defaults(storage)
    if with_catalog:
        install_catalog(storage)

"""
Clear engine: remove generated data while keeping the bundled catalog.

Statements run in a fixed order, most-dependent tables first, so a
database with foreign keys enforced can be cleared without cascades:

    contributors -> daily intake -> food-item nutrients -> ... -> goals -> user foods -> user restaurants

After the deletes, shared rows are reset instead of removed: catalog usage
counters, the singleton configs, the profile and the default settings keys.

Each statement is independent. A failure (typically "no such table" on a
database whose migrations have not created it yet) is reported as a
warning and the next statement still runs.
"""

from dataclasses import dataclass, field
from typing import Any

from .generators.progress_photos import clear_seed_progress_photos
from .helpers import now_iso
from .reporting import ConsoleListener, SeedReporter
from .schema import DEFAULT_SETTINGS, PROFILE_ID
from .storage import Storage, StorageError


@dataclass
class ClearStatement:
    """One delete or reset statement against a single table."""

    table: str
    sql: str
    params: list[Any] = field(default_factory=list)


# Deleted in this order
DELETE_ORDER = [
    "nutrient_contributors",
    "daily_nutrient_intake",
    "food_item_nutrients",
    "custom_nutrient_targets",
    "nutrient_settings",
    "photo_comparisons",
    "progress_photos",
    "health_sync_log",
    "weekly_reflections",
    "daily_metabolism",
    "planned_meals",
    "macro_cycle_overrides",
    "fasting_sessions",
    "restaurant_food_logs",
    "user_restaurant_usage",
    "favorite_foods",
    "water_log",
    "quick_add_entries",
    "log_entries",
    "weight_entries",
    "goals",
]


def build_clear_statements(now: str | None = None) -> list[ClearStatement]:
    """
    The ordered clear plan.

    Args:
        now: Timestamp written to reset rows (defaults to the current time)
    """
    now = now or now_iso()
    statements = [ClearStatement(table, f"DELETE FROM {table}") for table in DELETE_ORDER]

    # Catalog rows stay; only user-created foods go
    statements.append(ClearStatement("food_items", "DELETE FROM food_items WHERE source = ?", ["user"]))
    statements.append(ClearStatement(
        "food_items",
        "UPDATE food_items SET usage_count = 0, last_used_at = NULL WHERE source <> ?",
        ["user"],
    ))
    statements.append(ClearStatement(
        "restaurant_foods",
        "DELETE FROM restaurant_foods WHERE restaurant_id IN (SELECT id FROM restaurants WHERE source = ?)",
        ["user"],
    ))
    statements.append(ClearStatement("restaurants", "DELETE FROM restaurants WHERE source = ?", ["user"]))

    statements.extend([
        ClearStatement(
            "fasting_config",
            "UPDATE fasting_config SET enabled = 0, protocol = ?, custom_fast_hours = NULL, "
            "typical_eat_start = NULL, typical_eat_end = NULL, last_modified = ? WHERE id = 1",
            ["16:8", now],
        ),
        ClearStatement(
            "macro_cycle_config",
            "UPDATE macro_cycle_config SET enabled = 0, pattern_type = NULL, marked_days = ?, "
            "day_targets = ?, last_modified = ? WHERE id = 1",
            ["[]", "{}", now],
        ),
        ClearStatement(
            "meal_plan_settings",
            "UPDATE meal_plan_settings SET enabled = 0, show_on_today = 1, last_modified = ? WHERE id = 1",
            [now],
        ),
        ClearStatement(
            "user_profile",
            "UPDATE user_profile SET sex = NULL, date_of_birth = NULL, height_cm = NULL, "
            "activity_level = NULL, eating_style = NULL, protein_priority = NULL, "
            "has_completed_onboarding = 0, onboarding_skipped = 0, updated_at = ? WHERE id = ?",
            [now, PROFILE_ID],
        ),
    ])
    statements.extend(
        ClearStatement(
            "user_settings",
            "UPDATE user_settings SET value = ?, updated_at = ? WHERE key = ?",
            [value, now, key],
        )
        for key, value in DEFAULT_SETTINGS.items()
    )
    return statements


def clear_all_data(
    storage: Storage,
    verbose: bool = False,
    reporter: SeedReporter | None = None,
) -> list[str]:
    """
    Delete generated data and reset shared rows to defaults.

    Args:
        storage: Storage backend
        verbose: Print progress and warnings (only used when no reporter is given)
        reporter: Event sink; warnings for failed statements are reported here

    Returns:
        Warning messages produced while clearing
    """
    if reporter is None:
        reporter = SeedReporter()
        reporter.subscribe(ConsoleListener(verbose))
    warnings_before = len(reporter.warnings)

    reporter.info("[clear] Clearing seed data...")
    clear_seed_progress_photos(storage, reporter)

    for statement in build_clear_statements():
        try:
            storage.execute(statement.sql, statement.params)
        except StorageError as e:
            reporter.warning(f"Could not clear {statement.table}: {e}", table=statement.table)

    reporter.info("[clear] Done")
    return reporter.warnings[warnings_before:]

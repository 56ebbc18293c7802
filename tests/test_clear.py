"""
Tests for the clear engine.
"""

from unittest.mock import MagicMock

from nutrition_seed.clear import DELETE_ORDER, build_clear_statements, clear_all_data
from nutrition_seed.constants import BUNDLED_FOODS
from nutrition_seed.reporting import SeedReporter
from nutrition_seed.schema import DEFAULT_SETTINGS
from nutrition_seed.seeder import seed_database


def seeded(storage):
    """Seed one month of history without touching the network."""
    result = seed_database(
        storage,
        {"months_of_history": 1, "seed": 3, "download_photos": False, "clear_existing": False},
    )
    assert result.success, result.errors
    return result


class TestClearPlan:
    """Tests for statement ordering."""

    def test_dependents_deleted_first(self):
        tables = [s.table for s in build_clear_statements()]
        assert tables.index("nutrient_contributors") < tables.index("daily_nutrient_intake")
        assert tables.index("daily_nutrient_intake") < tables.index("food_item_nutrients")
        assert tables.index("photo_comparisons") < tables.index("progress_photos")
        assert tables.index("log_entries") < tables.index("goals")
        assert tables.index("goals") < tables.index("food_items")

    def test_catalog_never_deleted_outright(self):
        """Every statement touching a catalog table is filtered or an update."""
        for statement in build_clear_statements():
            if statement.table in ("food_items", "restaurants", "restaurant_foods"):
                assert "WHERE" in statement.sql
                assert statement.params == ["user"]

    def test_statements_run_in_order(self):
        storage = MagicMock()
        storage.query.return_value = []

        clear_all_data(storage, reporter=SeedReporter())

        deletes = [
            call.args[0].split()[2]
            for call in storage.execute.call_args_list
            if call.args[0].startswith("DELETE FROM") and "photo" not in call.args[0]
        ]
        assert deletes[: len(DELETE_ORDER) - 2] == [t for t in DELETE_ORDER if "photo" not in t]


class TestClearAllData:
    """Tests for clear_all_data against a seeded database."""

    def test_preserves_catalog_and_resets_usage(self, storage):
        seeded(storage)
        storage.execute(
            "INSERT INTO food_items (id, name, calories, protein, carbs, fat, source) VALUES (?, ?, ?, ?, ?, ?, ?)",
            ["user-food-1", "Grandma's Soup", 200, 10, 20, 5, "user"],
        )
        assert storage.query("SELECT MAX(usage_count) AS n FROM food_items")[0]["n"] > 0

        warnings = clear_all_data(storage)

        assert warnings == []
        foods = storage.query("SELECT id, source, usage_count, last_used_at FROM food_items")
        assert len(foods) == len(BUNDLED_FOODS)
        assert all(f["source"] != "user" for f in foods)
        assert all(f["usage_count"] == 0 and f["last_used_at"] is None for f in foods)

    def test_generated_rows_removed(self, storage):
        seeded(storage)
        clear_all_data(storage)
        for table in DELETE_ORDER:
            assert storage.query(f"SELECT COUNT(*) AS n FROM {table}")[0]["n"] == 0, table

    def test_profile_and_settings_reset(self, storage):
        seeded(storage)
        clear_all_data(storage)

        profile = storage.query("SELECT has_completed_onboarding, sex FROM user_profile")
        assert profile == [{"has_completed_onboarding": 0, "sex": None}]
        settings = {r["key"]: r["value"] for r in storage.query("SELECT key, value FROM user_settings")}
        assert settings == DEFAULT_SETTINGS
        assert storage.query("SELECT enabled FROM fasting_config") == [{"enabled": 0}]
        assert storage.query("SELECT enabled, marked_days FROM macro_cycle_config") == [
            {"enabled": 0, "marked_days": "[]"}
        ]

    def test_restaurant_catalog_kept(self, storage):
        """Bundled restaurants stay; user-created restaurants and their menus go."""
        seeded(storage)
        before = storage.query("SELECT COUNT(*) AS n FROM restaurant_foods")[0]["n"]
        bundled = storage.query("SELECT COUNT(*) AS n FROM restaurants")[0]["n"]
        storage.execute(
            "INSERT INTO restaurants (id, name, source) VALUES (?, ?, ?)",
            ["r-user", "Corner Taqueria", "user"],
        )
        storage.execute(
            "INSERT INTO restaurant_foods (id, restaurant_id, name, calories) VALUES (?, ?, ?, ?)",
            ["rf-user", "r-user", "Al Pastor Taco", 210],
        )

        clear_all_data(storage)

        assert storage.query("SELECT id FROM restaurants WHERE id = ?", ["r-user"]) == []
        assert storage.query("SELECT id FROM restaurant_foods WHERE id = ?", ["rf-user"]) == []
        assert storage.query("SELECT COUNT(*) AS n FROM restaurants")[0]["n"] == bundled
        assert storage.query("SELECT COUNT(*) AS n FROM restaurant_foods")[0]["n"] == before

    def test_missing_table_is_warning(self, storage):
        """A missing table is reported and the remaining statements still run."""
        seeded(storage)
        storage.execute("DROP TABLE water_log")
        reporter = SeedReporter()

        warnings = clear_all_data(storage, reporter=reporter)

        assert len(warnings) == 1
        assert warnings[0].startswith("Could not clear water_log:")
        assert storage.query("SELECT COUNT(*) AS n FROM log_entries")[0]["n"] == 0
        assert storage.query("SELECT COUNT(*) AS n FROM goals")[0]["n"] == 0

    def test_verbose_prints_warnings(self, storage, capsys):
        storage.execute("DROP TABLE water_log")
        clear_all_data(storage, verbose=True)
        assert "WARNING: Could not clear water_log" in capsys.readouterr().out

    def test_empty_database_clears_cleanly(self, storage):
        assert clear_all_data(storage) == []

"""
Tests for storage backends and schema installation.

PostgreSQL is exercised against a mocked psycopg2 connection; only the SQL
it would send and its commit/rollback behavior are checked.
"""

from decimal import Decimal
from unittest.mock import MagicMock, patch

import psycopg2
import pytest

from nutrition_seed.constants import BUNDLED_FOODS, BUNDLED_RESTAURANT_FOODS, BUNDLED_RESTAURANTS
from nutrition_seed.schema import DEFAULT_SETTINGS, TABLES, install_schema, load_schema_statements
from nutrition_seed.storage import (
    PostgresStorage,
    SQLiteStorage,
    Storage,
    StorageError,
    open_storage,
)


@pytest.fixture
def pg():
    """PostgresStorage wrapping a mock connection; yields (storage, conn, cursor)."""
    conn = MagicMock()
    cursor = conn.cursor.return_value.__enter__.return_value
    yield PostgresStorage(connection=conn), conn, cursor


class TestSQLiteStorage:
    """Tests for the SQLite backend."""

    def test_satisfies_protocol(self):
        assert isinstance(SQLiteStorage(), Storage)

    def test_query_returns_dicts(self):
        storage = SQLiteStorage()
        storage.execute("CREATE TABLE t (id TEXT PRIMARY KEY, n INTEGER)")
        storage.execute("INSERT INTO t VALUES (?, ?)", ["a", 1])
        assert storage.query("SELECT id, n FROM t") == [{"id": "a", "n": 1}]

    def test_errors_wrapped(self):
        """Driver errors surface as StorageError carrying the SQL."""
        storage = SQLiteStorage()
        with pytest.raises(StorageError, match="no such table") as exc_info:
            storage.execute("DELETE FROM missing_table")
        assert exc_info.value.sql == "DELETE FROM missing_table"

    def test_upsert_sql(self):
        sql = SQLiteStorage().upsert_sql("water_log", ["id", "date"], 2)
        assert sql == "INSERT OR REPLACE INTO water_log (id, date) VALUES (?, ?), (?, ?)"


class TestPostgresStorage:
    """Tests for the PostgreSQL backend."""

    def test_translate_markers(self):
        """'?' becomes %s and literal % is escaped."""
        assert PostgresStorage.translate("SELECT * FROM t WHERE a = ? AND b LIKE 'x%'") == (
            "SELECT * FROM t WHERE a = %s AND b LIKE 'x%%'"
        )

    def test_execute_commits(self, pg):
        storage, conn, cursor = pg
        storage.execute("DELETE FROM goals WHERE id = ?", ["g1"])
        cursor.execute.assert_called_once_with("DELETE FROM goals WHERE id = %s", ("g1",))
        conn.commit.assert_called_once()

    def test_execute_rolls_back_on_error(self, pg):
        storage, conn, cursor = pg
        cursor.execute.side_effect = psycopg2.Error("relation does not exist")

        with pytest.raises(StorageError, match="relation does not exist"):
            storage.execute("DELETE FROM missing_table")
        conn.rollback.assert_called_once()
        conn.commit.assert_not_called()

    def test_query_converts_decimal(self, pg):
        """NUMERIC values come back as float."""
        storage, _, cursor = pg
        cursor.description = [("id",), ("weight_kg",)]
        cursor.fetchall.return_value = [("w1", Decimal("82.5"))]

        rows = storage.query("SELECT id, weight_kg FROM weight_entries")

        assert rows == [{"id": "w1", "weight_kg": 82.5}]
        assert isinstance(rows[0]["weight_kg"], float)

    def test_upsert_updates_non_key_columns(self, pg):
        storage, _, _ = pg
        sql = storage.upsert_sql("water_log", ["id", "glasses"], 1)
        assert sql == (
            "INSERT INTO water_log (id, glasses) VALUES (?, ?) "
            "ON CONFLICT (id) DO UPDATE SET glasses = EXCLUDED.glasses"
        )

    def test_upsert_uses_table_conflict_key(self, pg):
        storage, _, _ = pg
        assert "ON CONFLICT (key)" in storage.upsert_sql("user_settings", ["key", "value"], 1)
        assert "ON CONFLICT (restaurant_id)" in storage.upsert_sql(
            "user_restaurant_usage", ["restaurant_id", "use_count"], 1
        )

    def test_upsert_key_only_does_nothing(self, pg):
        storage, _, _ = pg
        assert storage.upsert_sql("t", ["id"], 1).endswith("ON CONFLICT (id) DO NOTHING")

    def test_requires_dsn_or_connection(self):
        with pytest.raises(ValueError):
            PostgresStorage()


class TestOpenStorage:
    """Tests for URL-based backend selection."""

    def test_sqlite_memory(self):
        storage = open_storage("sqlite://")
        assert isinstance(storage, SQLiteStorage)
        assert storage.path == ":memory:"

    def test_sqlite_relative_and_absolute(self, tmp_path):
        absolute = tmp_path / "seed.db"
        assert open_storage(f"sqlite:///{absolute}").path == str(absolute)

        with patch("nutrition_seed.storage.SQLiteStorage") as mock_sqlite:
            open_storage("sqlite:///relative.db")
        mock_sqlite.assert_called_once_with("relative.db")

    def test_postgres(self):
        with patch("nutrition_seed.storage.psycopg2.connect") as mock_connect:
            storage = open_storage("postgresql://localhost/nutrition")
        mock_connect.assert_called_once_with("postgresql://localhost/nutrition")
        assert isinstance(storage, PostgresStorage)

    def test_unknown_scheme(self):
        with pytest.raises(ValueError, match="Unsupported"):
            open_storage("mysql://localhost/db")


class TestSchema:
    """Tests for schema installation."""

    def test_statements_cover_all_tables(self):
        statements = load_schema_statements()
        for table in TABLES:
            assert any(f"CREATE TABLE IF NOT EXISTS {table} " in s for s in statements), table

    def test_install_loads_catalog_and_defaults(self, storage):
        assert storage.query("SELECT COUNT(*) AS n FROM food_items")[0]["n"] == len(BUNDLED_FOODS)
        assert storage.query("SELECT COUNT(*) AS n FROM restaurants")[0]["n"] == len(BUNDLED_RESTAURANTS)
        assert storage.query("SELECT COUNT(*) AS n FROM restaurant_foods")[0]["n"] == len(BUNDLED_RESTAURANT_FOODS)
        settings = {r["key"]: r["value"] for r in storage.query("SELECT key, value FROM user_settings")}
        assert settings == DEFAULT_SETTINGS

    def test_install_is_idempotent(self, storage):
        install_schema(storage)
        assert storage.query("SELECT COUNT(*) AS n FROM food_items")[0]["n"] == len(BUNDLED_FOODS)

    def test_catalog_sources_are_bundled(self, storage):
        sources = {r["source"] for r in storage.query("SELECT DISTINCT source FROM food_items")}
        assert sources == {"bundled"}

"""
Tests for batched upserts.
"""

import pytest

from nutrition_seed.batch_writer import batch_insert
from nutrition_seed.storage import SQLiteStorage


class RecordingStorage:
    """Storage fake that records every statement instead of running it."""

    def __init__(self):
        self.executed = []

    def execute(self, sql, params=()):
        self.executed.append((sql, list(params)))

    def query(self, sql, params=()):
        return []

    def upsert_sql(self, table, columns, row_count):
        return f"UPSERT {table} {len(columns)}x{row_count}"


class TestBatchInsert:
    """Tests for batch_insert."""

    def test_empty_rows_no_io(self):
        """No rows means no statements and a count of 0."""
        storage = RecordingStorage()
        assert batch_insert(storage, "water_log", ["id", "date"], []) == 0
        assert storage.executed == []

    def test_chunks_by_batch_size(self):
        """Rows are split into chunks with row-major parameters."""
        storage = RecordingStorage()
        rows = [[f"id-{i}", i] for i in range(5)]

        count = batch_insert(storage, "t", ["id", "n"], rows, batch_size=2)

        assert count == 5
        assert [sql for sql, _ in storage.executed] == ["UPSERT t 2x2", "UPSERT t 2x2", "UPSERT t 2x1"]
        assert storage.executed[0][1] == ["id-0", 0, "id-1", 1]
        assert storage.executed[2][1] == ["id-4", 4]

    def test_rejects_bad_batch_size(self):
        with pytest.raises(ValueError, match="batch_size"):
            batch_insert(RecordingStorage(), "t", ["id"], [["a"]], batch_size=0)

    def test_rejects_wrong_row_width(self):
        with pytest.raises(ValueError, match="expected 2"):
            batch_insert(RecordingStorage(), "t", ["id", "n"], [["a", 1], ["b"]])

    def test_idempotent_on_sqlite(self):
        """Writing the same rows twice leaves the same row count."""
        storage = SQLiteStorage()
        storage.execute("CREATE TABLE t (id TEXT PRIMARY KEY, n INTEGER)")
        rows = [[f"id-{i}", i] for i in range(450)]

        batch_insert(storage, "t", ["id", "n"], rows)
        batch_insert(storage, "t", ["id", "n"], rows)

        assert storage.query("SELECT COUNT(*) AS n FROM t")[0]["n"] == 450
        storage.close()

    def test_replace_overwrites_values(self):
        storage = SQLiteStorage()
        storage.execute("CREATE TABLE t (id TEXT PRIMARY KEY, n INTEGER)")

        batch_insert(storage, "t", ["id", "n"], [["a", 1]])
        batch_insert(storage, "t", ["id", "n"], [["a", 2]])

        assert storage.query("SELECT n FROM t WHERE id = ?", ["a"]) == [{"n": 2}]
        storage.close()

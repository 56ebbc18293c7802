"""
Storage interface and backends for the seed engine.

Generators only need three operations from a database:
- execute(sql, params): write/DDL with positional '?' parameters
- query(sql, params): read, returning a list of row dicts
- upsert_sql(table, columns, row_count): dialect-specific insert-or-replace

Backends:
- SQLiteStorage: standard-library sqlite3 (file or in-memory)
- PostgresStorage: psycopg2, '?' markers rewritten to '%s',
  INSERT ... ON CONFLICT DO UPDATE keyed by CONFLICT_KEYS

Connections are owned by the backend; the generators never open, commit
or close anything themselves.
"""

import sqlite3
from decimal import Decimal
from typing import Any, Protocol, Sequence, runtime_checkable

import psycopg2
from psycopg2.extensions import connection as PgConnection

# Conflict target per table for backends that need one (default: id)
CONFLICT_KEYS: dict[str, tuple[str, ...]] = {
    "user_settings": ("key",),
    "user_restaurant_usage": ("restaurant_id",),
}
DEFAULT_CONFLICT_KEY = ("id",)


class StorageError(Exception):
    """Raised when a storage backend rejects a statement."""

    def __init__(self, message: str, sql: str | None = None) -> None:
        super().__init__(message)
        self.sql = sql


@runtime_checkable
class Storage(Protocol):
    """The narrow read/write surface every generator is written against."""

    def execute(self, sql: str, params: Sequence[Any] = ()) -> None: ...

    def query(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]: ...

    def upsert_sql(self, table: str, columns: Sequence[str], row_count: int) -> str: ...


def values_clause(column_count: int, row_count: int, marker: str = "?") -> str:
    """Build '(?, ?), (?, ?)' for row_count rows of column_count columns."""
    row = "(" + ", ".join(marker for _ in range(column_count)) + ")"
    return ", ".join(row for _ in range(row_count))


def conflict_key(table: str) -> tuple[str, ...]:
    """Primary-key columns used as the upsert conflict target for a table."""
    return CONFLICT_KEYS.get(table, DEFAULT_CONFLICT_KEY)


class SQLiteStorage:
    """
    SQLite backend using the standard library driver.

    Runs in autocommit mode: each statement is durable once execute()
    returns.

    Args:
        path: Database file path, or ":memory:" for a throwaway database
    """

    def __init__(self, path: str = ":memory:") -> None:
        self.path = path
        self.conn = sqlite3.connect(path, isolation_level=None)
        self.conn.row_factory = sqlite3.Row

    def execute(self, sql: str, params: Sequence[Any] = ()) -> None:
        try:
            self.conn.execute(sql, tuple(params))
        except sqlite3.Error as e:
            raise StorageError(str(e), sql) from e

    def query(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        try:
            rows = self.conn.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as e:
            raise StorageError(str(e), sql) from e
        return [dict(row) for row in rows]

    def upsert_sql(self, table: str, columns: Sequence[str], row_count: int) -> str:
        return (
            f"INSERT OR REPLACE INTO {table} ({', '.join(columns)}) "
            f"VALUES {values_clause(len(columns), row_count)}"
        )

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "SQLiteStorage":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


class PostgresStorage:
    """
    PostgreSQL backend using psycopg2.

    Each statement is committed on success and rolled back on failure so a
    failed statement never poisons the rest of the run.

    Args:
        dsn: libpq connection string / URL (ignored when connection is given)
        connection: An existing psycopg2 connection to wrap
    """

    def __init__(self, dsn: str | None = None, connection: PgConnection | None = None) -> None:
        if connection is None:
            if dsn is None:
                raise ValueError("PostgresStorage needs a dsn or a connection")
            try:
                connection = psycopg2.connect(dsn)
            except psycopg2.Error as e:
                raise StorageError(f"Could not connect to PostgreSQL: {e}") from e
        self.conn = connection

    @staticmethod
    def translate(sql: str) -> str:
        """Rewrite '?' markers to psycopg2's '%s' (escaping literal '%')."""
        return sql.replace("%", "%%").replace("?", "%s")

    def execute(self, sql: str, params: Sequence[Any] = ()) -> None:
        try:
            with self.conn.cursor() as cur:
                cur.execute(self.translate(sql), tuple(params))
            self.conn.commit()
        except psycopg2.Error as e:
            self.conn.rollback()
            raise StorageError(str(e).strip(), sql) from e

    def query(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        try:
            with self.conn.cursor() as cur:
                cur.execute(self.translate(sql), tuple(params))
                col_names = [desc[0] for desc in cur.description]
                rows = cur.fetchall()
            self.conn.commit()
        except psycopg2.Error as e:
            self.conn.rollback()
            raise StorageError(str(e).strip(), sql) from e

        results = []
        for row in rows:
            record = dict(zip(col_names, row))
            # NUMERIC comes back as Decimal; generators do float arithmetic
            for key, value in record.items():
                if isinstance(value, Decimal):
                    record[key] = float(value)
            results.append(record)
        return results

    def upsert_sql(self, table: str, columns: Sequence[str], row_count: int) -> str:
        keys = conflict_key(table)
        updates = [col for col in columns if col not in keys]
        if updates:
            action = "DO UPDATE SET " + ", ".join(f"{col} = EXCLUDED.{col}" for col in updates)
        else:
            action = "DO NOTHING"
        return (
            f"INSERT INTO {table} ({', '.join(columns)}) "
            f"VALUES {values_clause(len(columns), row_count)} "
            f"ON CONFLICT ({', '.join(keys)}) {action}"
        )

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "PostgresStorage":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


def open_storage(url: str) -> SQLiteStorage | PostgresStorage:
    """
    Open a storage backend from a URL.

    Supported forms:
        sqlite://                  in-memory SQLite
        sqlite:///relative.db      SQLite file
        sqlite:////abs/path.db     SQLite file (absolute)
        postgresql://user:pw@host/db  (or postgres://)

    Raises:
        ValueError: For any other scheme
    """
    if url.startswith("sqlite://"):
        path = url[len("sqlite://") :]
        if path.startswith("/"):
            path = path[1:]
        return SQLiteStorage(path or ":memory:")
    if url.startswith(("postgresql://", "postgres://")):
        return PostgresStorage(dsn=url)
    raise ValueError(f"Unsupported database URL: {url!r}")

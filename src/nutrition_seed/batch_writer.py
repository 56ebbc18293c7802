"""
Batched insert-or-replace writes.

Every generator writes through batch_insert(), so the only I/O pattern in
the seed engine is "one upsert statement per chunk of rows". Re-running a
step after a partial failure overwrites rows by primary key instead of
duplicating them.
"""

from typing import Any, Sequence

from .storage import Storage

DEFAULT_BATCH_SIZE = 200


def batch_insert(
    storage: Storage,
    table: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> int:
    """
    Upsert rows into table in chunks of at most batch_size rows.

    Args:
        storage: Storage backend
        table: Target table name
        columns: Column names, in the order values appear in each row
        rows: Row value sequences (one value per column)
        batch_size: Maximum rows per statement

    Returns:
        Number of rows written (0 with no I/O when rows is empty)

    Raises:
        ValueError: If batch_size < 1 or a row has the wrong width
        StorageError: If the backend rejects a statement
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")
    if not rows:
        return 0

    width = len(columns)
    inserted = 0
    for start in range(0, len(rows), batch_size):
        chunk = rows[start : start + batch_size]
        params: list[Any] = []
        for row in chunk:
            if len(row) != width:
                raise ValueError(
                    f"Row for {table} has {len(row)} values, expected {width}"
                )
            params.extend(row)
        storage.execute(storage.upsert_sql(table, columns, len(chunk)), params)
        inserted += len(chunk)
    return inserted

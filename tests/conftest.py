"""Shared fixtures: an in-memory database with the schema installed and a context factory."""

from datetime import date, datetime

import pytest

from nutrition_seed.generators import SeedContext
from nutrition_seed.schema import install_schema
from nutrition_seed.storage import SQLiteStorage

TODAY = date(2024, 6, 15)
NOW = datetime(2024, 6, 15, 9, 30, 0)


@pytest.fixture
def storage():
    """In-memory SQLite database with tables, defaults and the bundled catalog."""
    db = SQLiteStorage()
    install_schema(db)
    yield db
    db.close()


@pytest.fixture
def make_ctx(storage, tmp_path):
    """Build a SeedContext pinned to a fixed calendar and seed."""

    def _make(**kwargs):
        params = {
            "seed": 42,
            "months_of_history": 1,
            "today": TODAY,
            "now": NOW,
            "download_photos": False,
            "photo_dir": str(tmp_path / "photos"),
        }
        params.update(kwargs)
        return SeedContext.create(storage, **params)

    return _make

"""
Base classes for seed generators.

This module provides:
- SeedContext: Shared run state passed to every generator
- BaseSeedGenerator: Base class with convenience accessors and the
  batched-write helper every generator uses

Design Principles:
- Context owns the storage handle, random state and clock
- Generators read upstream rows through storage and write their own rows
  through batch_insert; they keep no state between steps
- Values another step needs (the active goal id) are returned and passed
  on explicitly by the orchestrator
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Sequence

import numpy as np
import requests
from faker import Faker

from ..batch_writer import batch_insert
from ..helpers import days_ago, make_rng, now_iso
from ..options import DEFAULT_PHOTO_DIR
from ..reporting import SeedReporter
from ..storage import Storage


@dataclass
class SeedContext:
    """
    Shared state for all seed generators.

    Attributes:
        storage: Storage backend rows are read from and written to
        rng: NumPy random generator (all randomness flows through it)
        fake: Faker instance for free text (seeded alongside rng)
        months_of_history: History window in months (30 days each)
        include_edge_cases: Inject the edge-case corpus into a few rows
        reporter: Event sink for inserted/warning/info events
        today: Calendar "today" the history is anchored to
        now: Timestamp used for created_at/updated_at columns
        photo_dir: Directory downloaded progress photos are written to
        download_photos: Fetch real images (False stores remote URLs only)
        session: HTTP session used for photo downloads
    """

    storage: Storage
    rng: np.random.Generator
    fake: Faker
    months_of_history: int = 6
    include_edge_cases: bool = False
    reporter: SeedReporter = field(default_factory=SeedReporter)
    today: date = field(default_factory=date.today)
    now: datetime = field(default_factory=datetime.now)
    photo_dir: str = DEFAULT_PHOTO_DIR
    download_photos: bool = True
    session: requests.Session | None = None

    @classmethod
    def create(
        cls,
        storage: Storage,
        seed: int | None = None,
        **kwargs: Any,
    ) -> "SeedContext":
        """
        Build a context with rng and Faker derived from one seed.

        Args:
            storage: Storage backend
            seed: Random seed (None = fresh OS entropy)
            **kwargs: Any other SeedContext field
        """
        rng = make_rng(seed)
        fake = Faker()
        fake.seed_instance(int(rng.integers(0, 2**31 - 1)))
        return cls(storage=storage, rng=rng, fake=fake, **kwargs)

    @property
    def total_days(self) -> int:
        return self.months_of_history * 30

    @property
    def now_str(self) -> str:
        return now_iso(self.now)

    def day(self, offset: int) -> str:
        """Calendar date ``offset`` days before today."""
        return days_ago(offset, self.today)


class BaseSeedGenerator:
    """
    Base class for domain generators.

    Each subclass groups the steps for one data domain as ``seed_*``
    methods. Every step returns the number of rows it wrote.

    Example:
        class WaterGenerator(BaseSeedGenerator):
            def seed_water_log(self) -> int:
                rows = [...]
                return self._insert("water_log", COLUMNS, rows, "water log entries")
    """

    def __init__(self, ctx: SeedContext) -> None:
        """
        Initialize generator with shared context.

        Args:
            ctx: Shared SeedContext instance
        """
        self.ctx = ctx

    @property
    def rng(self) -> np.random.Generator:
        """Convenience accessor for NumPy random generator."""
        return self.ctx.rng

    @property
    def fake(self) -> Faker:
        """Convenience accessor for Faker instance."""
        return self.ctx.fake

    @property
    def storage(self) -> Storage:
        """Convenience accessor for the storage backend."""
        return self.ctx.storage

    @property
    def reporter(self) -> SeedReporter:
        return self.ctx.reporter

    def _insert(
        self,
        table: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        label: str,
    ) -> int:
        """Batch-upsert rows and report '[seed] Inserted N <label>'."""
        count = batch_insert(self.storage, table, columns, rows)
        self.reporter.inserted(label, count, table=table)
        return count

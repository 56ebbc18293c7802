"""
Nutrition Seed - Deterministic synthetic history for a nutrition tracking app.

Fills a nutrition tracking database with months of realistic, internally
consistent data (weight trend, food log, fasting, macro cycling, meal
planning, restaurant meals, micronutrients, progress photos) for
development and manual testing. Runs are reproducible from a seed.
"""

from .clear import clear_all_data
from .options import SeedOptions, load_options, resolve_options
from .reporting import ConsoleListener, SeedEvent, SeedProgress, SeedReporter
from .schema import install_schema
from .seeder import SeedResult, SeedStep, build_seed_steps, seed_database
from .storage import PostgresStorage, SQLiteStorage, Storage, StorageError, open_storage

__version__ = "0.1.0"

__all__ = [
    "seed_database",
    "build_seed_steps",
    "SeedStep",
    "SeedResult",
    "clear_all_data",
    "SeedOptions",
    "resolve_options",
    "load_options",
    "SeedReporter",
    "SeedEvent",
    "SeedProgress",
    "ConsoleListener",
    "install_schema",
    "Storage",
    "StorageError",
    "SQLiteStorage",
    "PostgresStorage",
    "open_storage",
]

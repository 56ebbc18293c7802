"""
Seed run options: defaults, merging and YAML loading.

Options can come from three places, later ones winning:
1. SeedOptions defaults
2. A YAML file (load_options)
3. Explicit overrides (resolve_options / command-line flags)

Keys are snake_case; the camelCase spellings used by app-side callers
(monthsOfHistory, clearExisting, ...) are accepted as aliases.
"""

import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

DATABASE_URL_ENV = "NUTRITION_SEED_DATABASE_URL"
DEFAULT_DATABASE_URL = "sqlite:///nutrition_seed.db"
DEFAULT_PHOTO_DIR = "progress-photos"

# Recommended range for months_of_history; larger values work but are slow
RECOMMENDED_MAX_MONTHS = 24

_ALIASES = {
    "clearExisting": "clear_existing",
    "includeEdgeCases": "include_edge_cases",
    "monthsOfHistory": "months_of_history",
    "verboseLogging": "verbose_logging",
    "downloadPhotos": "download_photos",
    "photoDir": "photo_dir",
}


@dataclass
class SeedOptions:
    """Options controlling a seed run."""

    clear_existing: bool = True
    include_edge_cases: bool = False
    months_of_history: int = 6
    verbose_logging: bool = False

    # Reproducibility: same seed, same rows (None = fresh entropy)
    seed: int | None = None

    # Progress photos: download real images, or store remote URLs only
    download_photos: bool = True
    photo_dir: str = DEFAULT_PHOTO_DIR

    def validate(self) -> "SeedOptions":
        """
        Check option values.

        Raises:
            ValueError: If months_of_history is negative or not an integer
        """
        if isinstance(self.months_of_history, bool) or not isinstance(self.months_of_history, int):
            raise ValueError(f"months_of_history must be an integer, got {self.months_of_history!r}")
        if self.months_of_history < 0:
            raise ValueError(f"months_of_history must be >= 0, got {self.months_of_history}")
        return self

    @property
    def total_days(self) -> int:
        """History window in days (30 per month)."""
        return self.months_of_history * 30

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _normalize_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(SeedOptions)}
    normalized = {}
    for key, value in overrides.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            raise ValueError(f"Unknown seed option: {key!r}")
        normalized[name] = value
    return normalized


def resolve_options(
    overrides: SeedOptions | Mapping[str, Any] | None = None,
    base: SeedOptions | None = None,
) -> SeedOptions:
    """
    Merge caller overrides onto defaults.

    Args:
        overrides: A SeedOptions (used as-is) or a partial mapping of option
                   names to values; None-valued entries are ignored
        base: Options to merge onto (defaults to SeedOptions())

    Returns:
        Validated SeedOptions

    Raises:
        ValueError: For unknown option names or invalid values
    """
    if isinstance(overrides, SeedOptions):
        return overrides.validate()

    options = base or SeedOptions()
    if overrides:
        values = {k: v for k, v in _normalize_keys(overrides).items() if v is not None}
        options = replace(options, **values)
    return options.validate()


def load_options(path: str | Path) -> SeedOptions:
    """
    Read SeedOptions from a YAML mapping.

    Example file:
        months_of_history: 3
        include_edge_cases: true
        seed: 42

    Raises:
        ValueError: If the file is not a mapping or has unknown keys
    """
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of seed options")
    return resolve_options(data)


def database_url_from_env(default: str = DEFAULT_DATABASE_URL) -> str:
    """Storage URL from NUTRITION_SEED_DATABASE_URL, or the default."""
    return os.environ.get(DATABASE_URL_ENV, default)

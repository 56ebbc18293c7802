"""
Macro cycling.

Tables generated:
- macro_cycle_config (singleton id=1): training/rest pattern, training on
  Mon/Tue/Thu/Fri, per-weekday targets stored as JSON
- macro_cycle_overrides: manual day overrides on ~7% of days

Weekdays are numbered 0=Sunday .. 6=Saturday.
"""

import json

from ..helpers import dates_between, random_int, should_skip, weekday_of
from .base import BaseSeedGenerator
from .profile import INITIAL_MACROS, INITIAL_TARGET_CALORIES

TRAINING_DAYS = [1, 2, 4, 5]
TRAINING_ADJUSTMENT = {"calories": 250, "protein": 15, "carbs": 45, "fat": 0}
SKIP_OVERRIDE_DAY = 0.93
# Override calorie range keyed by "is a training weekday"
OVERRIDE_CALORIES = {True: (2050, 2800), False: (1800, 2550)}


def build_day_targets(base: dict[str, int], marked_days: list[int], adjustment: dict[str, int]) -> dict[str, dict]:
    """Training days get base + adjustment, rest days get the base targets."""
    targets = {}
    for weekday in range(7):
        if weekday in marked_days:
            targets[str(weekday)] = {key: base[key] + adjustment[key] for key in base}
        else:
            targets[str(weekday)] = dict(base)
    return targets


class MacroCycleGenerator(BaseSeedGenerator):
    def seed_macro_cycle_config(self) -> int:
        base = {"calories": INITIAL_TARGET_CALORIES, **INITIAL_MACROS}
        now = self.ctx.now_str
        row = [
            1,
            1,
            "training_rest",
            json.dumps(TRAINING_DAYS),
            json.dumps(build_day_targets(base, TRAINING_DAYS, TRAINING_ADJUSTMENT)),
            now,
            now,
        ]
        return self._insert(
            "macro_cycle_config",
            ["id", "enabled", "pattern_type", "marked_days", "day_targets", "created_at", "last_modified"],
            [row],
            "macro cycle config",
        )

    def seed_macro_cycle_overrides(self) -> int:
        """
        Sparse manual overrides with independently drawn macros.

        Calories are drawn from a higher range on training weekdays than on
        rest days.
        """
        rows = []
        for day in dates_between(self.ctx.total_days, 0, self.ctx.today):
            if should_skip(self.rng, SKIP_OVERRIDE_DAY):
                continue
            low, high = OVERRIDE_CALORIES[weekday_of(day) in TRAINING_DAYS]
            rows.append([
                f"mco-{day}",
                day,
                random_int(self.rng, low, high),
                random_int(self.rng, 120, 200),
                random_int(self.rng, 150, 320),
                random_int(self.rng, 50, 100),
                f"{day}T07:30:00",
            ])
        return self._insert(
            "macro_cycle_overrides",
            ["id", "date", "calories", "protein", "carbs", "fat", "created_at"],
            rows,
            "macro cycle overrides",
        )

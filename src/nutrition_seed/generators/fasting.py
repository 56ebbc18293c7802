"""
Intermittent fasting.

Tables generated:
- fasting_config (singleton id=1, 16:8 protocol enabled)
- fasting_sessions: overnight fasts on ~43% of days

A cancelled session has end_time and actual_hours NULL; a completed
session has both set.
"""

from datetime import datetime, timedelta

from ..helpers import generate_id, random_between, random_int, round_to, should_skip
from .base import BaseSeedGenerator

SKIP_FAST_DAY = 0.57
CANCEL_PROBABILITY = 0.1
TARGET_HOURS = 16


class FastingGenerator(BaseSeedGenerator):
    """Generate the fasting configuration and session history."""

    def seed_fasting_config(self) -> int:
        now = self.ctx.now_str
        row = [1, 1, "16:8", None, "12:00", "20:00", 1, 1, 30, 1, now, now]
        return self._insert(
            "fasting_config",
            [
                "id", "enabled", "protocol", "custom_fast_hours", "typical_eat_start",
                "typical_eat_end", "notify_window_opens", "notify_window_closes_soon",
                "notify_closes_reminder_mins", "notify_fast_complete",
                "created_at", "last_modified",
            ],
            [row],
            "fasting config",
        )

    def seed_fasting_sessions(self) -> int:
        """
        Overnight fasts: start 19:00-21:59 the evening before, end 11:00-13:59.

        actual_hours is round(U(14, 18), 1), independent of the clock times.
        """
        rows = []
        for offset in range(self.ctx.total_days, 0, -1):
            if should_skip(self.rng, SKIP_FAST_DAY):
                continue
            evening = datetime.fromisoformat(self.ctx.day(offset))
            start = evening.replace(hour=random_int(self.rng, 19, 21), minute=random_int(self.rng, 0, 59))
            end = (evening + timedelta(days=1)).replace(
                hour=random_int(self.rng, 11, 13), minute=random_int(self.rng, 0, 59)
            )
            start_time = start.isoformat(timespec="seconds")

            if should_skip(self.rng, CANCEL_PROBABILITY):
                rows.append([
                    generate_id("fast", self.rng), start_time, None, TARGET_HOURS, None, "cancelled", start_time,
                ])
            else:
                actual = round_to(random_between(self.rng, 14, 18), 1)
                rows.append([
                    generate_id("fast", self.rng),
                    start_time,
                    end.isoformat(timespec="seconds"),
                    TARGET_HOURS,
                    actual,
                    "completed",
                    start_time,
                ])

        return self._insert(
            "fasting_sessions",
            ["id", "start_time", "end_time", "target_hours", "actual_hours", "status", "created_at"],
            rows,
            "fasting sessions",
        )

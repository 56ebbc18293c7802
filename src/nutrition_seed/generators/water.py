"""Water log: daily glass counts for ~90% of days."""

from ..helpers import clamp, gaussian_random, should_skip
from .base import BaseSeedGenerator

SKIP_WATER_DAY = 0.1
MEAN_GLASSES = 8
STDDEV_GLASSES = 2
MAX_GLASSES = 16
NOTE_PROBABILITY = 0.1


class WaterGenerator(BaseSeedGenerator):
    def seed_water_log(self) -> int:
        rows = []
        for offset in range(self.ctx.total_days, -1, -1):
            if should_skip(self.rng, SKIP_WATER_DAY):
                continue
            day = self.ctx.day(offset)
            glasses = int(clamp(round(gaussian_random(self.rng, MEAN_GLASSES, STDDEV_GLASSES)), 0, MAX_GLASSES))
            notes = None
            if self.rng.random() < NOTE_PROBABILITY:
                notes = self.fake.sentence(nb_words=5)
            stamp = f"{day}T21:00:00"
            rows.append([f"water-{day}", day, glasses, notes, stamp, stamp])

        return self._insert(
            "water_log",
            ["id", "date", "glasses", "notes", "created_at", "updated_at"],
            rows,
            "water log entries",
        )

"""
Weight series and derived daily metabolism.

Tables generated:
- weight_entries: daily weigh-ins with gaps (linear drift + Gaussian noise)
- daily_metabolism: smoothed trend weight and estimated daily burn,
  derived from the weight entries already written
"""

from ..constants import EDGE_CASE_WEIGHTS
from ..helpers import clamp, gaussian_random, random_int, random_time_of_day, round_to, should_skip
from .base import BaseSeedGenerator
from .profile import START_WEIGHT_KG

DAILY_DRIFT_KG = -0.05
NOISE_STDDEV_KG = 0.3
MIN_WEIGHT_KG = 45.0
MAX_WEIGHT_KG = 200.0
SKIP_WEIGH_IN = 0.15

TREND_ALPHA = 0.1
KCAL_PER_KG_BODYWEIGHT = 31
SKIP_METABOLISM = 0.2

WEIGHT_COLUMNS = ["id", "date", "weight_kg", "notes", "created_at", "updated_at"]


class WeightGenerator(BaseSeedGenerator):
    """Generate the weigh-in series and the metabolism estimates built on it."""

    def seed_weight_entries(self) -> int:
        """
        One weigh-in per day for ~85% of days, today always included.

        Edge-case weights are written as separate rows dated just before
        the history window so they never distort the trend.
        """
        total_days = self.ctx.total_days
        rows = []

        for offset in range(total_days, -1, -1):
            if offset > 0 and should_skip(self.rng, SKIP_WEIGH_IN):
                continue
            day = self.ctx.day(offset)
            elapsed = total_days - offset
            weight = START_WEIGHT_KG + DAILY_DRIFT_KG * elapsed + gaussian_random(self.rng, 0, NOISE_STDDEV_KG)
            weight = round_to(clamp(weight, MIN_WEIGHT_KG, MAX_WEIGHT_KG), 1)
            stamp = random_time_of_day(self.rng, day, 6, 8)
            rows.append([f"weight-{day}", day, weight, None, stamp, stamp])

        if self.ctx.include_edge_cases:
            for i, weight in enumerate(EDGE_CASE_WEIGHTS):
                day = self.ctx.day(total_days + 1 + i)
                stamp = f"{day}T07:00:00"
                rows.append([f"weight-edge-{i}", day, weight, "Edge case weight", stamp, stamp])

        return self._insert("weight_entries", WEIGHT_COLUMNS, rows, "weight entries")

    def seed_daily_metabolism(self) -> int:
        """
        Daily trend weight (exponential smoothing) and estimated burn.

        Reads the weigh-ins inside the history window; days without a
        weigh-in carry the trend forward. ~20% of days are skipped
        (today never is).
        """
        total_days = self.ctx.total_days
        window_start = self.ctx.day(total_days)
        entries = self.storage.query(
            "SELECT date, weight_kg FROM weight_entries WHERE date >= ? ORDER BY date ASC",
            [window_start],
        )
        weights = {row["date"]: float(row["weight_kg"]) for row in entries}

        now = self.ctx.now_str
        trend: float | None = None
        rows = []
        for offset in range(total_days, -1, -1):
            day = self.ctx.day(offset)
            weighed = day in weights
            if weighed:
                weight = weights[day]
                trend = weight if trend is None else trend + TREND_ALPHA * (weight - trend)
            if offset > 0 and should_skip(self.rng, SKIP_METABOLISM):
                continue

            trend_kg = trend if trend is not None else START_WEIGHT_KG
            intake = random_int(self.rng, 1950, 2250)
            burn = round(trend_kg * KCAL_PER_KG_BODYWEIGHT + gaussian_random(self.rng, 0, 60))
            rows.append([
                f"metab-{day}",
                day,
                round_to(trend_kg, 2),
                intake,
                burn,
                "good" if weighed else "estimated",
                now,
                now,
            ])

        return self._insert(
            "daily_metabolism",
            [
                "id", "date", "trend_weight_kg", "calorie_intake",
                "estimated_daily_burn", "data_quality", "created_at", "updated_at",
            ],
            rows,
            "daily metabolism records",
        )

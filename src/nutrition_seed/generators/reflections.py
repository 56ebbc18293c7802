"""
Weekly reflections and the health platform sync log.

Tables generated:
- weekly_reflections: one row per full week since the active goal started
- health_sync_log: a fixed set of 11 sync records
"""

from ..helpers import gaussian_random, generate_id, random_int, random_pick, round_to, should_skip
from .base import BaseSeedGenerator
from .profile import INITIAL_MACROS, INITIAL_TARGET_CALORIES, INITIAL_TDEE, START_WEIGHT_KG
from .weight import DAILY_DRIFT_KG

WEEKLY_NOTES = {
    3: "Feeling good, energy levels stable",
    7: "Busy week, hard to hit protein some days",
}
WEEKLY_TARGET_STEP_KCAL = 10
KCAL_PER_KG = 7700
WEEKLY_DRIFT_KG = DAILY_DRIFT_KG * 7
WEEKLY_DRIFT_STDDEV_KG = 0.15

HEALTH_SYNC_RECORDS = 11
HEALTH_SYNC_PLATFORMS = ("healthkit", "health_connect")
HEALTH_SYNC_ERROR_INDEX = 5
HEALTH_SYNC_ERROR_MESSAGE = "Network timeout"
HEALTH_SYNC_DATA_TYPES = ("weight", "nutrition", "water", "steps")

REFLECTION_COLUMNS = [
    "id", "goal_id", "week_number", "week_start_date", "week_end_date",
    "avg_calorie_intake", "days_logged", "days_weighed",
    "start_trend_weight_kg", "end_trend_weight_kg", "weight_change_kg",
    "calculated_daily_burn", "previous_tdee_estimate", "previous_target_calories",
    "new_tdee_estimate", "new_target_calories", "new_protein_g", "new_carbs_g",
    "new_fat_g", "was_accepted", "user_notes", "data_quality", "created_at",
]


class ReflectionGenerator(BaseSeedGenerator):
    """Generate weekly check-ins for the active goal and health sync history."""

    def seed_weekly_reflections(self, active_goal_id: str) -> int:
        """
        One reflection per full week of history, oldest first.

        Start and end trend weights come from the daily_metabolism rows
        already written, and days_weighed counts that week's weigh-ins.
        A week end with no metabolism row falls back to the previous trend
        plus N(weekly drift, 0.15) kg. The calorie target steps down 10 kcal
        each week. Notes appear on weeks 3 and 7 only.

        Args:
            active_goal_id: Goal the reflections belong to
        """
        total_days = self.ctx.total_days
        weeks = total_days // 7
        window_start = self.ctx.day(total_days)

        trends = {
            row["date"]: float(row["trend_weight_kg"])
            for row in self.storage.query(
                "SELECT date, trend_weight_kg FROM daily_metabolism "
                "WHERE date >= ? AND trend_weight_kg IS NOT NULL",
                [window_start],
            )
        }
        weigh_days = [
            row["date"]
            for row in self.storage.query("SELECT date FROM weight_entries WHERE date >= ?", [window_start])
        ]

        protein = INITIAL_MACROS["protein"]
        trend = trends.get(window_start, START_WEIGHT_KG)
        tdee = INITIAL_TDEE
        target = INITIAL_TARGET_CALORIES
        rows = []

        for week in range(1, weeks + 1):
            start_offset = total_days - (week - 1) * 7
            week_start = self.ctx.day(start_offset)
            week_end = self.ctx.day(start_offset - 6)

            start_trend = trends.get(week_start, trend)
            end_trend = trends.get(week_end)
            if end_trend is None:
                end_trend = start_trend + gaussian_random(self.rng, WEEKLY_DRIFT_KG, WEEKLY_DRIFT_STDDEV_KG)
            change = round_to(end_trend - start_trend, 2)
            trend = end_trend

            avg_intake = random_int(self.rng, 1950, 2200)
            days_logged = random_int(self.rng, 5, 7)
            if weigh_days:
                days_weighed = sum(1 for d in weigh_days if week_start <= d <= week_end)
            else:
                days_weighed = random_int(self.rng, 4, 7)
            burn = round(avg_intake - change * KCAL_PER_KG / 7)

            new_tdee = round(tdee * 0.8 + burn * 0.2)
            new_target = target - WEEKLY_TARGET_STEP_KCAL
            fat = round(new_target * 0.25 / 9)
            carbs = round((new_target - protein * 4 - fat * 9) / 4)
            was_accepted = 0 if should_skip(self.rng, 0.15) else 1

            rows.append([
                generate_id("refl", self.rng),
                active_goal_id,
                week,
                week_start,
                week_end,
                avg_intake,
                days_logged,
                days_weighed,
                round_to(start_trend, 2),
                round_to(end_trend, 2),
                change,
                burn,
                tdee,
                target,
                new_tdee,
                new_target,
                protein,
                carbs,
                fat,
                was_accepted,
                WEEKLY_NOTES.get(week),
                "good" if days_weighed >= 5 else "partial",
                f"{week_end}T20:00:00",
            ])
            tdee, target = new_tdee, new_target

        return self._insert("weekly_reflections", REFLECTION_COLUMNS, rows, "weekly reflections")

    def seed_health_sync_log(self) -> int:
        """
        Exactly 11 sync records alternating healthkit / health_connect.

        Record 5 is always a failed sync with error_message "Network timeout".
        """
        rows = []
        for i in range(HEALTH_SYNC_RECORDS):
            day = self.ctx.day(i * 2)
            failed = i == HEALTH_SYNC_ERROR_INDEX
            rows.append([
                f"sync-{i}",
                HEALTH_SYNC_PLATFORMS[i % 2],
                "write" if i % 3 == 0 else "read",
                random_pick(self.rng, HEALTH_SYNC_DATA_TYPES),
                0 if failed else random_int(self.rng, 1, 40),
                "error" if failed else "success",
                HEALTH_SYNC_ERROR_MESSAGE if failed else None,
                f"{day}T{random_int(self.rng, 6, 22):02d}:00:00",
            ])
        return self._insert(
            "health_sync_log",
            [
                "id", "platform", "direction", "data_type", "records_processed",
                "status", "error_message", "synced_at",
            ],
            rows,
            "health sync log entries",
        )

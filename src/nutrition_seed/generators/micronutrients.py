"""
Micronutrient tracking data.

Tables generated:
- nutrient_settings (singleton id=1: male, 19-30y, normal)
- food_item_nutrients: per-food amounts for catalog foods with a profile
- daily_nutrient_intake: one row per nutrient on ~88% of days
- nutrient_contributors: per-log-entry breakdown of where intake came from

Everything derives from constants.nutrients. Daily intake samples each
nutrient's persona as a clamped Gaussian percent of target; contributors
scale the logged food's profile by the logged servings, and no single
contributor may exceed 60% of a day's target.
"""

from ..constants import FOOD_NUTRIENT_PROFILES, FOODS_BY_ID, NUTRIENTS_BY_ID, SEED_NUTRIENTS, intake_status
from ..helpers import clamp, gaussian_random, random_between, random_int, round_to, shuffle_array, should_skip
from .base import BaseSeedGenerator

FOOD_NUTRIENT_LIMIT = 60
EXTRA_NUTRIENTS_PER_FOOD = 3
SKIP_INTAKE_DAY = 0.12
MIN_DAILY_PERCENT = 10
MAX_DAILY_PERCENT = 250
CONTRIBUTOR_LOG_LIMIT = 300
SKIP_CONTRIBUTOR = 0.1
MIN_CONTRIBUTOR_PERCENT = 1
MAX_CONTRIBUTOR_PERCENT = 60


def food_profile(food_id: str) -> dict[str, float] | None:
    """Nutrient profile for a catalog food, or None if it has none."""
    food = FOODS_BY_ID.get(food_id)
    if food is None or food["profile"] is None:
        return None
    return FOOD_NUTRIENT_PROFILES[food["profile"]]


class MicronutrientGenerator(BaseSeedGenerator):
    """Generate nutrient settings, per-food nutrients, daily intake and contributors."""

    def seed_nutrient_settings(self) -> int:
        return self._insert(
            "nutrient_settings",
            ["id", "gender", "age_group", "life_stage", "updated_at"],
            [[1, "male", "19-30y", "normal", self.ctx.now_str]],
            "nutrient settings",
        )

    def seed_food_item_nutrients(self) -> int:
        """
        Profile nutrients at 80-120% of the profile amount, plus a few
        nutrients outside the profile at trace levels.
        """
        foods = self.storage.query(
            "SELECT id FROM food_items WHERE source <> ? ORDER BY id LIMIT ?",
            ["user", FOOD_NUTRIENT_LIMIT],
        )
        now = self.ctx.now_str
        rows = []
        for food in foods:
            profile = food_profile(food["id"])
            if profile is None:
                continue
            for nutrient_id, base_amount in profile.items():
                amount = round_to(base_amount * random_between(self.rng, 0.8, 1.2), 2)
                rows.append([f"fn-{food['id']}-{nutrient_id}", food["id"], nutrient_id, amount, now])

            others = [n for n in SEED_NUTRIENTS if n["id"] not in profile]
            for nutrient in shuffle_array(self.rng, others)[:EXTRA_NUTRIENTS_PER_FOOD]:
                low, high = nutrient["per_food_range"]
                amount = round_to(random_between(self.rng, low * 0.3, high * 0.5), 2)
                rows.append([f"fn-{food['id']}-{nutrient['id']}", food["id"], nutrient["id"], amount, now])

        return self._insert(
            "food_item_nutrients",
            ["id", "food_item_id", "nutrient_id", "amount", "created_at"],
            rows,
            "food item nutrients",
        )

    def seed_daily_nutrient_intake(self) -> int:
        total_days = self.ctx.total_days
        logged = self.storage.query(
            "SELECT date, COUNT(*) AS foods FROM log_entries WHERE date >= ? GROUP BY date",
            [self.ctx.day(total_days)],
        )
        foods_per_day = {row["date"]: int(row["foods"]) for row in logged}

        now = self.ctx.now_str
        rows = []
        for offset in range(total_days, -1, -1):
            if should_skip(self.rng, SKIP_INTAKE_DAY):
                continue
            day = self.ctx.day(offset)
            foods_logged = foods_per_day.get(day) or random_int(self.rng, 3, 8)

            for nutrient in SEED_NUTRIENTS:
                percent = clamp(
                    gaussian_random(self.rng, nutrient["mean_percent"], nutrient["std_dev_percent"]),
                    MIN_DAILY_PERCENT,
                    MAX_DAILY_PERCENT,
                )
                percent_of_target = round_to(percent, 0)
                rows.append([
                    f"dni-{day}-{nutrient['id']}",
                    day,
                    nutrient["id"],
                    round_to(percent / 100 * nutrient["target"], 2),
                    percent_of_target,
                    intake_status(percent_of_target),
                    foods_logged,
                    1,
                    now,
                ])

        return self._insert(
            "daily_nutrient_intake",
            [
                "id", "date", "nutrient_id", "total_amount", "percent_of_target",
                "status", "foods_logged", "has_complete_data", "calculated_at",
            ],
            rows,
            "daily nutrient intake records",
        )

    def seed_nutrient_contributors(self) -> int:
        """
        Attribute nutrients to the most recent logged foods.

        amount = profile amount x servings x U(0.7, 1.3); percent_of_daily
        is clamped to [1, 60] and a clamped row's amount is rescaled to
        match it. Foods without a profile contribute nothing.
        """
        entries = self.storage.query(
            "SELECT id, date, food_item_id, servings FROM log_entries ORDER BY date DESC, id LIMIT ?",
            [CONTRIBUTOR_LOG_LIMIT],
        )
        if not entries:
            self.reporter.inserted("nutrient contributors", 0, table="nutrient_contributors")
            return 0
        names = {row["id"]: row["name"] for row in self.storage.query("SELECT id, name FROM food_items")}

        now = self.ctx.now_str
        rows = []
        for entry in entries:
            if should_skip(self.rng, SKIP_CONTRIBUTOR):
                continue
            profile = food_profile(entry["food_item_id"])
            if profile is None:
                continue
            servings = float(entry["servings"])
            for nutrient_id, base_amount in profile.items():
                target = NUTRIENTS_BY_ID[nutrient_id]["target"]
                amount = round_to(base_amount * servings * random_between(self.rng, 0.7, 1.3), 2)
                raw_percent = round_to(amount / target * 100, 1)
                percent = clamp(raw_percent, MIN_CONTRIBUTOR_PERCENT, MAX_CONTRIBUTOR_PERCENT)
                if percent != raw_percent:
                    amount = round_to(target * percent / 100, 2)
                rows.append([
                    f"nc-{entry['id']}-{nutrient_id}",
                    entry["date"],
                    entry["id"],
                    nutrient_id,
                    names.get(entry["food_item_id"], "Unknown Food"),
                    amount,
                    percent,
                    now,
                ])

        return self._insert(
            "nutrient_contributors",
            ["id", "date", "log_entry_id", "nutrient_id", "food_name", "amount", "percent_of_daily", "created_at"],
            rows,
            "nutrient contributors",
        )

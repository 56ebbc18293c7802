"""
Food log entries and quick adds.

Tables generated:
- log_entries: every day's meals assembled from meal templates
- quick_add_entries: sporadic free-form calorie entries

Log entry nutrition is always the catalog food's per-serving values times
the logged servings; it is never sampled independently. After writing,
usage_count / last_used_at on the touched catalog foods are recomputed
from the logs.
"""

from ..constants import (
    EDGE_CASE_DATES,
    EDGE_CASE_FOOD_NOTES,
    EDGE_CASE_QUICK_ADD_DESCRIPTIONS,
    EDGE_CASE_SERVINGS,
    MEAL_TEMPLATES,
    MEAL_TYPES,
    QUICK_ADD_DESCRIPTIONS,
    ZERO_CALORIE_QUICK_ADDS,
)
from ..helpers import generate_id, meal_time_of_day, random_between, random_pick, round_to, should_skip
from .base import BaseSeedGenerator

SKIP_LOG_DAY = 0.1
SKIP_FIRST_SNACK = 0.3
SKIP_SECOND_SNACK = 0.8
SKIP_EDGE_NOTE = 0.9
SKIP_EDGE_SERVINGS = 0.95
SKIP_QUICK_ADD_DAY = 0.83

LOG_COLUMNS = [
    "id", "food_item_id", "date", "meal_type", "servings",
    "calories", "protein", "carbs", "fat", "notes",
    "created_at", "updated_at",
]
QUICK_ADD_COLUMNS = [
    "id", "date", "meal_type", "calories", "protein", "carbs", "fat",
    "description", "created_at", "updated_at",
]


def scaled_nutrition(food: dict, servings: float) -> tuple[int, float, float, float]:
    """Nutrition for ``servings`` of a catalog food: calories whole, macros to 0.1 g."""
    return (
        int(round_to(float(food["calories"]) * servings, 0)),
        round_to(float(food["protein"]) * servings),
        round_to(float(food["carbs"]) * servings),
        round_to(float(food["fat"]) * servings),
    )


def load_catalog_foods(generator: BaseSeedGenerator) -> dict[str, dict]:
    """Catalog (non-user) foods keyed by id."""
    rows = generator.storage.query(
        "SELECT id, name, calories, protein, carbs, fat FROM food_items WHERE source <> ?",
        ["user"],
    )
    return {row["id"]: row for row in rows}


class FoodLogGenerator(BaseSeedGenerator):
    """Generate template-based food logs and free-form quick adds."""

    def seed_log_entries(self) -> int:
        foods = load_catalog_foods(self)
        if not foods:
            self.reporter.info("[seed] No catalog foods found, skipping log entries", table="log_entries")
            return 0

        include_edge = self.ctx.include_edge_cases
        edge_note_idx = 0
        rows = []

        for offset in range(self.ctx.total_days, -1, -1):
            if offset > 0 and should_skip(self.rng, SKIP_LOG_DAY):
                continue
            day = self.ctx.day(offset)

            meal_types = ["breakfast", "lunch", "dinner"]
            if not should_skip(self.rng, SKIP_FIRST_SNACK):
                meal_types.append("snack")
            if not should_skip(self.rng, SKIP_SECOND_SNACK):
                meal_types.append("snack")

            for meal_type in meal_types:
                template = random_pick(self.rng, MEAL_TEMPLATES[meal_type])
                stamp = meal_time_of_day(self.rng, day, meal_type)

                for food_id, servings in template["items"]:
                    food = foods.get(food_id)
                    if food is None:
                        continue

                    notes = None
                    if include_edge:
                        if edge_note_idx < len(EDGE_CASE_FOOD_NOTES) and not should_skip(self.rng, SKIP_EDGE_NOTE):
                            notes = EDGE_CASE_FOOD_NOTES[edge_note_idx]
                            edge_note_idx += 1
                        if not should_skip(self.rng, SKIP_EDGE_SERVINGS):
                            servings = random_pick(self.rng, EDGE_CASE_SERVINGS)

                    calories, protein, carbs, fat = scaled_nutrition(food, servings)
                    rows.append([
                        generate_id("log", self.rng),
                        food_id,
                        day,
                        meal_type,
                        servings,
                        calories,
                        protein,
                        carbs,
                        fat,
                        notes,
                        stamp,
                        stamp,
                    ])

        count = self._insert("log_entries", LOG_COLUMNS, rows, "log entries")
        self._refresh_usage()
        return count

    def _refresh_usage(self) -> None:
        """Recompute usage_count / last_used_at for every food that has logs."""
        self.storage.execute(
            """
            UPDATE food_items SET
                last_used_at = (SELECT MAX(created_at) FROM log_entries
                                WHERE log_entries.food_item_id = food_items.id),
                usage_count = (SELECT COUNT(*) FROM log_entries
                               WHERE log_entries.food_item_id = food_items.id),
                updated_at = ?
            WHERE id IN (SELECT DISTINCT food_item_id FROM log_entries)
            """,
            [self.ctx.now_str],
        )

    def seed_quick_add_entries(self) -> int:
        """
        Quick adds on roughly one day in six.

        With edge cases enabled the first descriptions come from the edge
        corpus, and boundary-date and zero-calorie entries are appended.
        """
        include_edge = self.ctx.include_edge_cases
        edge_idx = 0
        rows = []

        for offset in range(self.ctx.total_days, -1, -1):
            if should_skip(self.rng, SKIP_QUICK_ADD_DAY):
                continue
            day = self.ctx.day(offset)
            meal_type = random_pick(self.rng, MEAL_TYPES)
            calories = int(round_to(random_between(self.rng, 100, 500), 0))
            protein = int(round_to(random_between(self.rng, 0, 30), 0))
            carbs = int(round_to(random_between(self.rng, 0, 50), 0))
            fat = int(round_to(random_between(self.rng, 0, 20), 0))

            description = random_pick(self.rng, QUICK_ADD_DESCRIPTIONS)
            if include_edge and edge_idx < len(EDGE_CASE_QUICK_ADD_DESCRIPTIONS):
                description = EDGE_CASE_QUICK_ADD_DESCRIPTIONS[edge_idx]
                edge_idx += 1

            stamp = meal_time_of_day(self.rng, day, meal_type)
            rows.append([
                generate_id("qa", self.rng),
                day,
                meal_type,
                calories,
                protein or None,
                carbs or None,
                fat or None,
                description,
                stamp,
                stamp,
            ])

        if include_edge:
            for day in EDGE_CASE_DATES:
                stamp = meal_time_of_day(self.rng, day, "dinner")
                rows.append([
                    generate_id("qa", self.rng), day, "dinner", 650, 30, 70, 25,
                    f"Boundary date meal ({day})", stamp, stamp,
                ])

            recent = self.ctx.day(2)
            stamp = meal_time_of_day(self.rng, recent, "snack")
            coffee, water = ZERO_CALORIE_QUICK_ADDS
            rows.append([generate_id("qa", self.rng), recent, "snack", 0, 0, 0, 0, coffee, stamp, stamp])
            rows.append([generate_id("qa", self.rng), recent, "snack", 0, None, None, None, water, stamp, stamp])

        return self._insert("quick_add_entries", QUICK_ADD_COLUMNS, rows, "quick add entries")

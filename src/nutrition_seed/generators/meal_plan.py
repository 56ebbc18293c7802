"""
Meal planning.

Tables generated:
- meal_plan_settings (singleton id=1)
- planned_meals: for ~50% of weeks (history plus the current and next
  week), 3-5 days with breakfast/lunch/dinner planned from templates

Status follows the calendar: past meals are 'logged' (70%) or 'skipped'
(30%); meals dated today or later stay 'planned'.
"""

from ..constants import MEAL_TEMPLATES
from ..helpers import generate_id, meal_time_of_day, random_int, random_pick, shuffle_array, should_skip
from .base import BaseSeedGenerator
from .food_log import load_catalog_foods, scaled_nutrition

PLANNED_SLOTS = ("breakfast", "lunch", "dinner")
SKIP_PLAN_WEEK = 0.5
SKIP_LOGGING_PLANNED = 0.3
WEEKS_AHEAD = 1

PLANNED_MEAL_COLUMNS = [
    "id", "date", "meal_slot", "food_id", "food_name", "servings",
    "calories", "protein", "carbs", "fat", "status", "logged_at", "created_at",
]


class MealPlanGenerator(BaseSeedGenerator):
    """Generate meal-plan settings and planned meals."""

    def seed_meal_plan_settings(self) -> int:
        now = self.ctx.now_str
        return self._insert(
            "meal_plan_settings",
            ["id", "enabled", "show_on_today", "created_at", "last_modified"],
            [[1, 1, 1, now, now]],
            "meal plan settings",
        )

    def seed_planned_meals(self) -> int:
        foods = load_catalog_foods(self)
        if not foods:
            self.reporter.info("[seed] No catalog foods found, skipping planned meals", table="planned_meals")
            return 0

        now = self.ctx.now_str
        rows = []
        # Week start offsets in days-ago; negative offsets are in the future
        for week_start in range(self.ctx.total_days, -7 * WEEKS_AHEAD - 1, -7):
            if should_skip(self.rng, SKIP_PLAN_WEEK):
                continue
            day_count = random_int(self.rng, 3, 5)
            for weekday in sorted(shuffle_array(self.rng, range(7))[:day_count]):
                offset = week_start - weekday
                day = self.ctx.day(offset)

                for slot in PLANNED_SLOTS:
                    template = random_pick(self.rng, MEAL_TEMPLATES[slot])
                    if offset > 0:
                        status = "skipped" if should_skip(self.rng, SKIP_LOGGING_PLANNED) else "logged"
                    else:
                        status = "planned"
                    logged_at = meal_time_of_day(self.rng, day, slot) if status == "logged" else None

                    for food_id, servings in template["items"]:
                        food = foods.get(food_id)
                        if food is None:
                            continue
                        calories, protein, carbs, fat = scaled_nutrition(food, servings)
                        rows.append([
                            generate_id("plan", self.rng),
                            day,
                            slot,
                            food_id,
                            food["name"],
                            servings,
                            calories,
                            protein,
                            carbs,
                            fat,
                            status,
                            logged_at,
                            now,
                        ])

        return self._insert("planned_meals", PLANNED_MEAL_COLUMNS, rows, "planned meals")

"""
Restaurant food logs and per-restaurant usage.

Tables generated:
- restaurant_food_logs: items from the bundled restaurant catalog on ~20% of days
- user_restaurant_usage: log counts and last use, aggregated per restaurant
"""

from ..helpers import generate_id, meal_time_of_day, random_pick, round_to, should_skip, weighted_pick
from .base import BaseSeedGenerator

SKIP_RESTAURANT_DAY = 0.8
RESTAURANT_MEALS = ("lunch", "dinner", "snack")
RESTAURANT_MEAL_WEIGHTS = (0.4, 0.4, 0.2)
QUANTITIES = (0.5, 1, 1, 1, 1.5)

LOG_COLUMNS = [
    "id", "restaurant_food_id", "restaurant_name", "food_name", "variant_id",
    "logged_at", "date", "meal", "quantity", "notes", "calories", "protein",
    "carbohydrates", "fat", "created_at",
]


class RestaurantGenerator(BaseSeedGenerator):
    """Generate restaurant meals from the bundled menus."""

    def seed_restaurant_food_logs(self) -> int:
        foods = self.storage.query(
            "SELECT id, restaurant_id, name, calories, protein, carbohydrates, fat FROM restaurant_foods"
        )
        if not foods:
            self.reporter.info(
                "[seed] No restaurant foods found, skipping restaurant logs", table="restaurant_food_logs"
            )
            return 0
        restaurants = {row["id"]: row["name"] for row in self.storage.query("SELECT id, name FROM restaurants")}

        rows = []
        for offset in range(self.ctx.total_days, -1, -1):
            if should_skip(self.rng, SKIP_RESTAURANT_DAY):
                continue
            day = self.ctx.day(offset)
            food = random_pick(self.rng, foods)
            meal = weighted_pick(self.rng, RESTAURANT_MEALS, RESTAURANT_MEAL_WEIGHTS)
            quantity = random_pick(self.rng, QUANTITIES)
            stamp = meal_time_of_day(self.rng, day, meal)
            rows.append([
                generate_id("rlog", self.rng),
                food["id"],
                restaurants.get(food["restaurant_id"], "Unknown Restaurant"),
                food["name"],
                None,
                stamp,
                day,
                meal,
                quantity,
                None,
                int(round_to(float(food["calories"]) * quantity, 0)),
                round_to(float(food["protein"] or 0) * quantity),
                round_to(float(food["carbohydrates"] or 0) * quantity),
                round_to(float(food["fat"] or 0) * quantity),
                stamp,
            ])

        return self._insert("restaurant_food_logs", LOG_COLUMNS, rows, "restaurant food logs")

    def seed_user_restaurant_usage(self) -> int:
        """One usage row per restaurant that appears in the food logs."""
        usage = self.storage.query(
            """
            SELECT restaurant_food_id, COUNT(*) AS cnt, MAX(logged_at) AS last_used
            FROM restaurant_food_logs
            GROUP BY restaurant_food_id
            """
        )
        if not usage:
            self.reporter.inserted("restaurant usage records", 0, table="user_restaurant_usage")
            return 0
        food_to_restaurant = {
            row["id"]: row["restaurant_id"]
            for row in self.storage.query("SELECT id, restaurant_id FROM restaurant_foods")
        }

        per_restaurant: dict[str, dict] = {}
        for row in usage:
            restaurant_id = food_to_restaurant.get(row["restaurant_food_id"])
            if restaurant_id is None:
                continue
            entry = per_restaurant.setdefault(restaurant_id, {"count": 0, "last": None})
            entry["count"] += int(row["cnt"])
            if entry["last"] is None or (row["last_used"] and row["last_used"] > entry["last"]):
                entry["last"] = row["last_used"]

        rows = [[rid, entry["last"], entry["count"]] for rid, entry in per_restaurant.items()]
        return self._insert(
            "user_restaurant_usage",
            ["restaurant_id", "last_used", "use_count"],
            rows,
            "restaurant usage records",
        )

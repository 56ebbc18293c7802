"""Favorite foods: the curated favorites list, limited to foods in the catalog."""

from ..constants import FAVORITE_FOOD_IDS
from .base import BaseSeedGenerator


class FavoriteGenerator(BaseSeedGenerator):
    def seed_favorite_foods(self) -> int:
        placeholders = ", ".join("?" for _ in FAVORITE_FOOD_IDS)
        present = {
            row["id"]
            for row in self.storage.query(
                f"SELECT id FROM food_items WHERE id IN ({placeholders})", FAVORITE_FOOD_IDS
            )
        }
        now = self.ctx.now_str
        rows = [
            [f"fav-{food_id}", food_id, order, now]
            for order, food_id in enumerate(f for f in FAVORITE_FOOD_IDS if f in present)
        ]
        return self._insert(
            "favorite_foods",
            ["id", "food_id", "sort_order", "created_at"],
            rows,
            "favorite foods",
        )

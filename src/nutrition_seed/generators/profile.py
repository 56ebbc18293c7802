"""
Profile, settings and goals.

Tables generated:
- user_profile (singleton row, onboarding complete)
- user_settings (7 key/value pairs matching the active goal's targets)
- goals (one completed historical goal + one active weight-loss goal)

The active goal starts at the beginning of the history window; its id is
returned so reflections can reference it.
"""

from dataclasses import dataclass

from ..helpers import datetime_ago, generate_id
from ..schema import PROFILE_ID
from .base import BaseSeedGenerator

# Active goal baseline (kg, kcal, grams)
START_WEIGHT_KG = 88.0
TARGET_WEIGHT_KG = 80.0
INITIAL_TDEE = 2650
INITIAL_TARGET_CALORIES = 2150
INITIAL_MACROS = {"protein": 135, "carbs": 201, "fat": 89}

# The maintenance goal ran this many days before the history window
PREVIOUS_GOAL_DAYS = 60

GOAL_COLUMNS = [
    "id", "type", "target_weight_kg", "target_rate_percent", "start_date",
    "start_weight_kg", "initial_tdee_estimate", "initial_target_calories",
    "initial_protein_g", "initial_carbs_g", "initial_fat_g",
    "current_tdee_estimate", "current_target_calories", "current_protein_g",
    "current_carbs_g", "current_fat_g", "eating_style", "protein_priority",
    "is_active", "completed_at", "created_at", "updated_at",
]


@dataclass
class GoalSeedResult:
    """Rows written by the goals step plus the id later steps need."""

    count: int
    active_goal_id: str


class ProfileGenerator(BaseSeedGenerator):
    """Generate the user's profile, settings and goal history."""

    def seed_profile(self) -> int:
        """Singleton profile, created when the earlier maintenance goal started."""
        now = self.ctx.now_str
        created_at = datetime_ago(self.ctx.total_days + PREVIOUS_GOAL_DAYS, self.ctx.now)
        row = [
            PROFILE_ID, "male", "1994-06-15", 180.0, "moderately_active",
            "flexible", "active", 1, 0, created_at, now,
        ]
        return self._insert(
            "user_profile",
            [
                "id", "sex", "date_of_birth", "height_cm", "activity_level",
                "eating_style", "protein_priority", "has_completed_onboarding",
                "onboarding_skipped", "created_at", "updated_at",
            ],
            [row],
            "user profile",
        )

    def seed_user_settings(self) -> int:
        now = self.ctx.now_str
        settings = {
            "daily_calorie_goal": str(INITIAL_TARGET_CALORIES),
            "daily_protein_goal": str(INITIAL_MACROS["protein"]),
            "daily_carbs_goal": str(INITIAL_MACROS["carbs"]),
            "daily_fat_goal": str(INITIAL_MACROS["fat"]),
            "has_seen_onboarding": "true",
            "weight_unit": "kg",
            "water_goal_glasses": "8",
        }
        rows = [[key, value, now] for key, value in settings.items()]
        return self._insert("user_settings", ["key", "value", "updated_at"], rows, "user settings")

    def seed_goals(self) -> GoalSeedResult:
        """
        Write a completed maintenance goal followed by the active loss goal.

        Returns:
            GoalSeedResult with the row count (2) and the active goal id
        """
        now = self.ctx.now_str
        total_days = self.ctx.total_days
        active_start = self.ctx.day(total_days)
        previous_start = self.ctx.day(total_days + PREVIOUS_GOAL_DAYS)

        previous_id = generate_id("goal", self.rng)
        active_id = generate_id("goal", self.rng)

        previous = [
            previous_id, "maintain", START_WEIGHT_KG, 0.0, previous_start,
            START_WEIGHT_KG + 0.5, 2600, 2600, 130, 300, 85,
            2600, 2600, 130, 300, 85, "flexible", "moderate",
            0, f"{active_start}T08:00:00", f"{previous_start}T08:00:00", f"{active_start}T08:00:00",
        ]
        active = [
            active_id, "lose", TARGET_WEIGHT_KG, 0.5, active_start,
            START_WEIGHT_KG, INITIAL_TDEE, INITIAL_TARGET_CALORIES,
            INITIAL_MACROS["protein"], INITIAL_MACROS["carbs"], INITIAL_MACROS["fat"],
            INITIAL_TDEE, INITIAL_TARGET_CALORIES,
            INITIAL_MACROS["protein"], INITIAL_MACROS["carbs"], INITIAL_MACROS["fat"],
            "flexible", "active", 1, None, f"{active_start}T08:00:00", now,
        ]
        # Only one goal may be active, including goals left by an earlier run
        self.storage.execute("UPDATE goals SET is_active = 0, updated_at = ? WHERE is_active = 1", [now])
        count = self._insert("goals", GOAL_COLUMNS, [previous, active], "goals")
        return GoalSeedResult(count=count, active_goal_id=active_id)

"""
Generators Package - Domain generators for nutrition seed data.

Base Classes:
- SeedContext: Shared state dataclass passed to all generators
- BaseSeedGenerator: Base class with accessors and the batched-write helper

Domain Generators:
- ProfileGenerator: Profile, settings, goals
- WeightGenerator: Weight entries, daily metabolism
- ReflectionGenerator: Weekly reflections, health sync log
- FoodLogGenerator: Food log and quick-add entries
- WaterGenerator: Water log
- FavoriteGenerator: Favorite foods
- FastingGenerator: Fasting config and sessions
- MacroCycleGenerator: Macro cycle config and overrides
- MealPlanGenerator: Meal plan settings and planned meals
- RestaurantGenerator: Restaurant food logs and usage
- MicronutrientGenerator: Nutrient settings, per-food nutrients, intake, contributors
- ProgressPhotoGenerator: Progress photos and comparisons
"""

from .base import BaseSeedGenerator, SeedContext
from .fasting import FastingGenerator
from .favorites import FavoriteGenerator
from .food_log import FoodLogGenerator
from .macro_cycle import MacroCycleGenerator
from .meal_plan import MealPlanGenerator
from .micronutrients import MicronutrientGenerator
from .profile import GoalSeedResult, ProfileGenerator
from .progress_photos import (
    PhotoDownloader,
    PhotoDownloadError,
    ProgressPhotoGenerator,
    clear_seed_progress_photos,
)
from .reflections import ReflectionGenerator
from .restaurant import RestaurantGenerator
from .water import WaterGenerator
from .weight import WeightGenerator

__all__ = [
    # Base classes
    "SeedContext",
    "BaseSeedGenerator",
    # Profile and body
    "ProfileGenerator",
    "GoalSeedResult",
    "WeightGenerator",
    "ReflectionGenerator",
    # Food logging
    "FoodLogGenerator",
    "WaterGenerator",
    "FavoriteGenerator",
    # Planning
    "FastingGenerator",
    "MacroCycleGenerator",
    "MealPlanGenerator",
    "RestaurantGenerator",
    # Micronutrients
    "MicronutrientGenerator",
    # Photos
    "ProgressPhotoGenerator",
    "PhotoDownloader",
    "PhotoDownloadError",
    "clear_seed_progress_photos",
]

"""
Seeding orchestrator.

seed_database() runs the full pipeline:

    1. Resolve options (caller overrides onto defaults)
    2. Clear existing data (optional)
    3. Run every seed step in a fixed order
    4. Return a SeedResult with per-step counts, errors and warnings

Steps run strictly one after another because later steps read what earlier
ones wrote: Weekly Reflections needs the active goal id from Goals, Daily
Metabolism reads the weight series, Nutrient Contributors reads the food
log, Photo Comparisons reads the photos. A step that raises is recorded as
"Failed to seed <step>: <error>" and the run moves on to the next step.

Usage:
    from nutrition_seed import SQLiteStorage, install_schema, seed_database

    storage = SQLiteStorage("nutrition.db")
    install_schema(storage)
    result = seed_database(storage, {"months_of_history": 3, "seed": 42})
"""

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .clear import clear_all_data
from .generators import (
    FastingGenerator,
    FavoriteGenerator,
    FoodLogGenerator,
    MacroCycleGenerator,
    MealPlanGenerator,
    MicronutrientGenerator,
    ProfileGenerator,
    ProgressPhotoGenerator,
    ReflectionGenerator,
    RestaurantGenerator,
    SeedContext,
    WaterGenerator,
    WeightGenerator,
)
from .options import SeedOptions, resolve_options
from .reporting import ConsoleListener, ProgressCallback, SeedProgress, SeedReporter
from .storage import Storage

PHASE_CLEARING = "Clearing..."
PHASE_SEEDING = "Seeding..."
PHASE_COMPLETE = "Complete"


@dataclass
class SeedRunState:
    """Values handed from one step to a later one within a single run."""

    ctx: SeedContext
    active_goal_id: str | None = None


@dataclass
class SeedStep:
    """
    One named unit of the pipeline.

    Attributes:
        name: Display name, also the key in SeedResult.counts
        estimated_count: Rows expected for a given months_of_history (progress only)
        run: Performs the step and returns the number of rows written
    """

    name: str
    estimated_count: Callable[[int], int]
    run: Callable[[SeedRunState], int]


@dataclass
class SeedResult:
    """Outcome of a seed run; duration is in milliseconds."""

    success: bool
    duration: int
    counts: dict[str, int] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def total_rows(self) -> int:
        return sum(self.counts.values())


def _seed_goals(state: SeedRunState) -> int:
    result = ProfileGenerator(state.ctx).seed_goals()
    state.active_goal_id = result.active_goal_id
    return result.count


def _seed_weekly_reflections(state: SeedRunState) -> int:
    if not state.active_goal_id:
        raise ValueError("no active goal id (Goals step did not complete)")
    return ReflectionGenerator(state.ctx).seed_weekly_reflections(state.active_goal_id)


def build_seed_steps() -> list[SeedStep]:
    """The ordered pipeline; estimates mirror typical row counts per month of history."""
    return [
        SeedStep("User Profile", lambda m: 1, lambda s: ProfileGenerator(s.ctx).seed_profile()),
        SeedStep("User Settings", lambda m: 7, lambda s: ProfileGenerator(s.ctx).seed_user_settings()),
        SeedStep("Goals", lambda m: 2, _seed_goals),
        SeedStep(
            "Weight Entries",
            lambda m: round(m * 30 * 0.85),
            lambda s: WeightGenerator(s.ctx).seed_weight_entries(),
        ),
        SeedStep(
            "Daily Metabolism",
            lambda m: round(m * 30 * 0.8),
            lambda s: WeightGenerator(s.ctx).seed_daily_metabolism(),
        ),
        SeedStep("Weekly Reflections", lambda m: round(m * 4.3), _seed_weekly_reflections),
        SeedStep(
            "Food Log Entries",
            lambda m: round(m * 30 * 0.9 * 4),
            lambda s: FoodLogGenerator(s.ctx).seed_log_entries(),
        ),
        SeedStep("Quick Add Entries", lambda m: m * 5, lambda s: FoodLogGenerator(s.ctx).seed_quick_add_entries()),
        SeedStep("Water Log", lambda m: round(m * 30 * 0.9), lambda s: WaterGenerator(s.ctx).seed_water_log()),
        SeedStep("Favorite Foods", lambda m: 10, lambda s: FavoriteGenerator(s.ctx).seed_favorite_foods()),
        SeedStep("Fasting Config", lambda m: 1, lambda s: FastingGenerator(s.ctx).seed_fasting_config()),
        SeedStep(
            "Fasting Sessions",
            lambda m: round(m * 4.3 * 3),
            lambda s: FastingGenerator(s.ctx).seed_fasting_sessions(),
        ),
        SeedStep("Macro Cycle Config", lambda m: 1, lambda s: MacroCycleGenerator(s.ctx).seed_macro_cycle_config()),
        SeedStep(
            "Macro Cycle Overrides",
            lambda m: m * 2,
            lambda s: MacroCycleGenerator(s.ctx).seed_macro_cycle_overrides(),
        ),
        SeedStep("Meal Plan Settings", lambda m: 1, lambda s: MealPlanGenerator(s.ctx).seed_meal_plan_settings()),
        SeedStep(
            "Planned Meals",
            lambda m: round(m * 4.3 * 0.5 * 4 * 3),
            lambda s: MealPlanGenerator(s.ctx).seed_planned_meals(),
        ),
        SeedStep(
            "Restaurant Food Logs",
            lambda m: round(m * 30 * 0.2),
            lambda s: RestaurantGenerator(s.ctx).seed_restaurant_food_logs(),
        ),
        SeedStep("Restaurant Usage", lambda m: 5, lambda s: RestaurantGenerator(s.ctx).seed_user_restaurant_usage()),
        SeedStep("Nutrient Settings", lambda m: 1, lambda s: MicronutrientGenerator(s.ctx).seed_nutrient_settings()),
        SeedStep(
            "Food Item Nutrients",
            lambda m: 200,
            lambda s: MicronutrientGenerator(s.ctx).seed_food_item_nutrients(),
        ),
        SeedStep(
            "Daily Nutrient Intake",
            lambda m: round(m * 30 * 0.4 * 6),
            lambda s: MicronutrientGenerator(s.ctx).seed_daily_nutrient_intake(),
        ),
        SeedStep(
            "Nutrient Contributors",
            lambda m: 100,
            lambda s: MicronutrientGenerator(s.ctx).seed_nutrient_contributors(),
        ),
        SeedStep("Progress Photos", lambda m: m * 2, lambda s: ProgressPhotoGenerator(s.ctx).seed_progress_photos()),
        SeedStep("Photo Comparisons", lambda m: 4, lambda s: ProgressPhotoGenerator(s.ctx).seed_photo_comparisons()),
        SeedStep("Health Sync Log", lambda m: 11, lambda s: ReflectionGenerator(s.ctx).seed_health_sync_log()),
    ]


def seed_database(
    storage: Storage | Callable[[], Storage],
    options: SeedOptions | Mapping[str, Any] | None = None,
    on_progress: ProgressCallback | None = None,
    *,
    reporter: SeedReporter | None = None,
    steps: list[SeedStep] | None = None,
) -> SeedResult:
    """
    Clear (optionally) and seed the database.

    Args:
        storage: Storage backend, or a zero-argument factory returning one
        options: SeedOptions or a partial mapping merged onto the defaults
        on_progress: Called before each step and once at the end
        reporter: Event sink (defaults to one printing to stdout when verbose)
        steps: Override the pipeline (defaults to build_seed_steps())

    Returns:
        SeedResult; success is True only when no step failed

    Raises:
        ValueError: If options are invalid
    """
    opts = resolve_options(options)
    if reporter is None:
        reporter = SeedReporter()
        reporter.subscribe(ConsoleListener(opts.verbose_logging))
    warnings_before = len(reporter.warnings)

    start_time = time.time()
    counts: dict[str, int] = {}
    errors: list[str] = []
    steps = build_seed_steps() if steps is None else steps

    def progress(entity: str, current: int, total: int, phase: str) -> None:
        if on_progress is not None:
            on_progress(SeedProgress(entity, current, total, phase, start_time))

    try:
        db = storage() if callable(storage) and not hasattr(storage, "execute") else storage

        if opts.clear_existing:
            progress("Clearing data", 0, 0, PHASE_CLEARING)
            clear_all_data(db, verbose=opts.verbose_logging, reporter=reporter)

        ctx = SeedContext.create(
            db,
            seed=opts.seed,
            months_of_history=opts.months_of_history,
            include_edge_cases=opts.include_edge_cases,
            reporter=reporter,
            photo_dir=opts.photo_dir,
            download_photos=opts.download_photos,
        )
        state = SeedRunState(ctx)

        total_estimated = sum(step.estimated_count(opts.months_of_history) for step in steps)
        running_count = 0

        for step in steps:
            progress(step.name, running_count, total_estimated, PHASE_SEEDING)
            try:
                count = step.run(state)
            except Exception as e:
                message = f"Failed to seed {step.name}: {e}"
                errors.append(message)
                reporter.error(message)
                continue
            counts[step.name] = count
            running_count += count

        progress(PHASE_COMPLETE, running_count, running_count, PHASE_COMPLETE)
    except Exception as e:
        message = f"Fatal error: {e}"
        errors.append(message)
        reporter.error(message)

    return SeedResult(
        success=not errors,
        duration=int((time.time() - start_time) * 1000),
        counts=counts,
        errors=errors,
        warnings=reporter.warnings[warnings_before:],
    )

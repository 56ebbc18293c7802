"""
Random and temporal primitives shared by every seed generator.

Contains:
- Bounded random numbers, Gaussian sampling, weighted/uniform picks
- Bernoulli skip decisions and Fisher-Yates shuffling
- Calendar helpers relative to "today" (dates are YYYY-MM-DD strings,
  timestamps are naive ISO-8601 strings without fractional seconds)
- generate_id(): {prefix}-{base36 ms timestamp}-{base36 random}

All randomness comes from an explicit numpy Generator so that a seeded
run produces the same rows every time. Clock-dependent helpers accept an
optional ``today`` / ``now`` so tests can pin the calendar.
"""

import math
import time
from datetime import date, datetime, timedelta
from typing import Sequence, TypeVar

import numpy as np

T = TypeVar("T")

# Hour windows (inclusive) used for meal timestamps
MEAL_HOUR_WINDOWS: dict[str, tuple[int, int]] = {
    "breakfast": (6, 9),
    "lunch": (11, 13),
    "dinner": (17, 20),
    "snack": (14, 16),
}
DEFAULT_HOUR_WINDOW = (8, 20)

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the run's random generator (fresh OS entropy when seed is None)."""
    return np.random.default_rng(seed)


# =============================================================================
# Random numbers
# =============================================================================


def random_between(rng: np.random.Generator, low: float, high: float) -> float:
    """Uniform float in [low, high)."""
    return low + float(rng.random()) * (high - low)


def random_int(rng: np.random.Generator, low: int, high: int) -> int:
    """
    Uniform integer in [low, high].

    Unlike random_between, the upper bound is inclusive.
    """
    return int(rng.integers(low, high + 1))


def gaussian_random(rng: np.random.Generator, mean: float, stddev: float) -> float:
    """
    Normally distributed sample via the Box-Muller transform.

    Each call draws two fresh uniforms; the paired second sample is discarded.
    """
    u1 = 0.0
    while u1 == 0.0:
        u1 = float(rng.random())
    u2 = float(rng.random())
    z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
    return mean + z * stddev


def clamp(value: float, low: float, high: float) -> float:
    """Constrain value to [low, high]."""
    return max(low, min(high, value))


def round_to(value: float, decimals: int = 1) -> float:
    """
    Round half-up to the given number of decimal places.

    Python's round() uses banker's rounding; seed data rounds 0.5 upward.
    """
    factor = 10**decimals
    result = math.floor(value * factor + 0.5) / factor
    return float(int(result)) if decimals == 0 else result


def should_skip(rng: np.random.Generator, probability: float) -> bool:
    """Bernoulli trial: True with the given probability (0 never, 1 always)."""
    return float(rng.random()) < probability


# =============================================================================
# Sampling
# =============================================================================


def weighted_pick(rng: np.random.Generator, items: Sequence[T], weights: Sequence[float]) -> T:
    """
    Pick one item with probability proportional to its weight.

    Falls back to the last item if floating-point drift leaves a remainder.
    """
    if not items:
        raise ValueError("weighted_pick() requires at least one item")
    if len(items) != len(weights):
        raise ValueError("items and weights must have the same length")

    remaining = float(rng.random()) * sum(weights)
    for item, weight in zip(items, weights):
        remaining -= weight
        if remaining < 0:
            return item
    return items[-1]


def random_pick(rng: np.random.Generator, items: Sequence[T]) -> T:
    """Uniformly pick one item."""
    if not items:
        raise ValueError("random_pick() requires at least one item")
    return items[int(rng.integers(0, len(items)))]


def shuffle_array(rng: np.random.Generator, items: Sequence[T]) -> list[T]:
    """Fisher-Yates shuffle into a new list; the input is left untouched."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        result[i], result[j] = result[j], result[i]
    return result


# =============================================================================
# Calendar
# =============================================================================


def today_iso(today: date | None = None) -> str:
    """Today's date as YYYY-MM-DD."""
    return (today or date.today()).isoformat()


def now_iso(now: datetime | None = None) -> str:
    """Current timestamp as an ISO-8601 string."""
    return (now or datetime.now()).isoformat(timespec="seconds")


def days_ago(n: int, today: date | None = None) -> str:
    """Calendar date n days before today (n=0 is today)."""
    return ((today or date.today()) - timedelta(days=n)).isoformat()


def datetime_ago(n: int, now: datetime | None = None) -> str:
    """Timestamp n days before now, at the current time of day."""
    return ((now or datetime.now()) - timedelta(days=n)).isoformat(timespec="seconds")


def dates_between(start_offset: int, end_offset: int, today: date | None = None) -> list[str]:
    """
    Calendar dates from start_offset days ago to end_offset days ago.

    Inclusive on both ends, oldest first. dates_between(3, 0) yields four
    dates ending today.
    """
    return [days_ago(offset, today) for offset in range(start_offset, end_offset - 1, -1)]


def random_time_of_day(
    rng: np.random.Generator,
    day: str,
    start_hour: int = DEFAULT_HOUR_WINDOW[0],
    end_hour: int = DEFAULT_HOUR_WINDOW[1],
) -> str:
    """Timestamp on ``day`` with hour in [start_hour, end_hour] and random minute/second."""
    hour = random_int(rng, start_hour, end_hour)
    minute = random_int(rng, 0, 59)
    second = random_int(rng, 0, 59)
    return f"{day}T{hour:02d}:{minute:02d}:{second:02d}"


def meal_time_of_day(rng: np.random.Generator, day: str, meal_type: str) -> str:
    """Timestamp on ``day`` inside the hour window for the meal type."""
    start_hour, end_hour = MEAL_HOUR_WINDOWS.get(meal_type, DEFAULT_HOUR_WINDOW)
    return random_time_of_day(rng, day, start_hour, end_hour)


def weekday_of(day: str) -> int:
    """Day of week for a YYYY-MM-DD string, 0=Sunday .. 6=Saturday."""
    return (date.fromisoformat(day).weekday() + 1) % 7


# =============================================================================
# Identifiers
# =============================================================================


def to_base36(value: int) -> str:
    """Lower-case base-36 representation of a non-negative integer."""
    if value < 0:
        raise ValueError("to_base36() requires a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def generate_id(prefix: str = "dev", rng: np.random.Generator | None = None) -> str:
    """
    Generate a row id of the form {prefix}-{base36 ms timestamp}-{base36 random}.

    Unique in practice, not collision-proof.

    Args:
        prefix: Leading id segment (must not contain '-')
        rng: numpy random generator (uses a fresh one if None)
    """
    if rng is None:
        rng = np.random.default_rng()
    timestamp = to_base36(time.time_ns() // 1_000_000)
    suffix = to_base36(int(rng.integers(0, 36**8)))
    return f"{prefix}-{timestamp}-{suffix}"

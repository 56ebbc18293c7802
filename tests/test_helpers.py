"""
Tests for the random and temporal primitives.
"""

import re
from datetime import date, datetime

import pytest

from nutrition_seed.helpers import (
    clamp,
    dates_between,
    datetime_ago,
    days_ago,
    gaussian_random,
    generate_id,
    make_rng,
    meal_time_of_day,
    now_iso,
    random_between,
    random_int,
    random_pick,
    random_time_of_day,
    round_to,
    should_skip,
    shuffle_array,
    to_base36,
    weekday_of,
    weighted_pick,
)

TODAY = date(2024, 6, 15)


@pytest.fixture
def rng():
    return make_rng(1234)


def _hour(stamp: str) -> int:
    return int(stamp.split("T")[1][:2])


class TestRandomNumbers:
    """Bounds and distribution of the random primitives."""

    def test_random_int_inclusive_bounds(self, rng):
        """random_int stays in [low, high] and reaches both ends."""
        values = {random_int(rng, 3, 6) for _ in range(500)}
        assert values == {3, 4, 5, 6}
        assert all(isinstance(v, int) for v in values)

    def test_random_between_half_open(self, rng):
        """random_between stays in [low, high)."""
        for _ in range(1000):
            value = random_between(rng, 2.0, 3.0)
            assert 2.0 <= value < 3.0

    def test_gaussian_empirical_mean(self, rng):
        """1000 samples land close to the requested mean."""
        samples = [gaussian_random(rng, 10.0, 2.0) for _ in range(1000)]
        mean = sum(samples) / len(samples)
        assert abs(mean - 10.0) < 0.3

    def test_should_skip_boundaries(self, rng):
        """Probability 0 never skips, probability 1 always does."""
        assert not any(should_skip(rng, 0) for _ in range(500))
        assert all(should_skip(rng, 1) for _ in range(500))

    def test_clamp(self):
        assert clamp(5, 0, 3) == 3
        assert clamp(-1, 0, 3) == 0
        assert clamp(2, 0, 3) == 2

    def test_round_to_half_up(self):
        """Halves round upward rather than to even."""
        assert round_to(2.5, 0) == 3.0
        assert round_to(1.25, 1) == 1.3
        assert round_to(88.04) == 88.0
        assert round_to(12.345, 0) == 12.0

    def test_same_seed_same_sequence(self):
        """Two generators from one seed agree."""
        a, b = make_rng(7), make_rng(7)
        assert [random_int(a, 0, 1000) for _ in range(20)] == [random_int(b, 0, 1000) for _ in range(20)]


class TestSampling:
    """Tests for pick and shuffle helpers."""

    def test_weighted_pick_zero_weight_never_chosen(self, rng):
        picks = {weighted_pick(rng, ["a", "b", "c"], [1, 0, 1]) for _ in range(300)}
        assert "b" not in picks

    def test_weighted_pick_rejects_bad_input(self, rng):
        with pytest.raises(ValueError, match="at least one"):
            weighted_pick(rng, [], [])
        with pytest.raises(ValueError, match="same length"):
            weighted_pick(rng, ["a"], [1, 2])

    def test_random_pick_empty(self, rng):
        with pytest.raises(ValueError):
            random_pick(rng, [])

    def test_shuffle_returns_new_permutation(self, rng):
        """shuffle_array keeps every element and leaves the input alone."""
        items = list(range(20))
        shuffled = shuffle_array(rng, items)
        assert sorted(shuffled) == items
        assert items == list(range(20))


class TestCalendar:
    """Tests for date and time-of-day helpers."""

    def test_days_ago(self):
        assert days_ago(0, TODAY) == "2024-06-15"
        assert days_ago(15, TODAY) == "2024-05-31"
        assert days_ago(-1, TODAY) == "2024-06-16"

    def test_dates_between_inclusive_oldest_first(self):
        assert dates_between(3, 0, TODAY) == ["2024-06-12", "2024-06-13", "2024-06-14", "2024-06-15"]

    def test_datetime_ago_keeps_time_of_day(self):
        now = datetime(2024, 3, 1, 22, 15, 0, 500)
        assert datetime_ago(0, now) == "2024-03-01T22:15:00"
        assert datetime_ago(1, now) == "2024-02-29T22:15:00"
        assert datetime_ago(30, now) == "2024-01-31T22:15:00"

    def test_now_iso_has_no_fraction(self):
        assert now_iso(datetime(2024, 6, 15, 9, 30, 5, 123456)) == "2024-06-15T09:30:05"

    @pytest.mark.parametrize(
        "meal_type,low,high",
        [
            ("breakfast", 6, 9),
            ("lunch", 11, 13),
            ("dinner", 17, 20),
            ("snack", 14, 16),
            ("brunch", 8, 20),
        ],
    )
    def test_meal_time_windows(self, rng, meal_type, low, high):
        """Meal timestamps fall inside the meal's hour window."""
        for _ in range(200):
            stamp = meal_time_of_day(rng, "2024-06-15", meal_type)
            assert stamp.startswith("2024-06-15T")
            assert low <= _hour(stamp) <= high

    def test_random_time_format(self, rng):
        stamp = random_time_of_day(rng, "2024-06-15")
        assert re.fullmatch(r"2024-06-15T\d{2}:\d{2}:\d{2}", stamp)

    def test_weekday_sunday_is_zero(self):
        assert weekday_of("2024-06-16") == 0
        assert weekday_of("2024-06-17") == 1
        assert weekday_of("2024-06-15") == 6


class TestIdentifiers:
    """Tests for id generation."""

    def test_to_base36(self):
        assert to_base36(0) == "0"
        assert to_base36(35) == "z"
        assert to_base36(36) == "10"
        with pytest.raises(ValueError):
            to_base36(-1)

    def test_generate_id_shape(self, rng):
        assert re.fullmatch(r"log-[0-9a-z]+-[0-9a-z]+", generate_id("log", rng))
        assert generate_id().startswith("dev-")

    def test_generate_id_unique_in_practice(self, rng):
        ids = {generate_id("x", rng) for _ in range(1000)}
        assert len(ids) == 1000

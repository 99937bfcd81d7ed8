"""Unit tests for calorie and cook-time estimation."""

import random

import pytest

from recipe_suggester.engine.estimators import (
    estimate_calories,
    estimate_cook_minutes,
    estimate_cook_time,
    format_cook_time,
)


class FixedRandom:
    """Randomness stub returning fixed jitter values."""

    def __init__(self, uniform: float = 0.0, randint: int = 0):
        self._uniform = uniform
        self._randint = randint

    def uniform(self, a, b):
        return self._uniform

    def randint(self, a, b):
        return self._randint

    def choice(self, seq):
        return seq[0]


class TestEstimateCalories:
    """Test calorie base values, adjustments, jitter and floor."""

    def test_base_value_by_type(self):
        assert estimate_calories(["chicken"], "curry", rng=FixedRandom()) == 450

    def test_unknown_type_uses_default(self):
        assert estimate_calories(["chicken"], "mystery dish", rng=FixedRandom()) == 400

    def test_fatty_dairy_and_sweet_adjustments(self):
        assert estimate_calories(["beef", "butter", "sugar"], "roast", rng=FixedRandom()) == 630

    def test_lean_protein_reduces(self):
        assert estimate_calories(["tofu"], "curry", rng=FixedRandom()) == 430

    def test_vegetables_beyond_two_reduce(self):
        ingredients = ["carrot", "potato", "spinach", "kale"]
        assert estimate_calories(ingredients, "vegetable medley", rng=FixedRandom()) == 190

    def test_grains_beyond_one_increase(self):
        assert estimate_calories(["rice", "quinoa", "bread"], "rice dish", rng=FixedRandom()) == 510

    def test_jitter_is_applied(self):
        assert estimate_calories(["beef", "butter", "sugar"], "roast", rng=FixedRandom(uniform=0.1)) == 693

    def test_offset_added_after_jitter(self):
        assert estimate_calories(["tofu"], "curry", rng=FixedRandom(), offset=25) == 455

    def test_floor_applies(self):
        assert estimate_calories(["chicken breast"], "spice blend", rng=FixedRandom(uniform=-0.1), offset=-25) == 150

    @pytest.mark.parametrize("seed", range(25))
    def test_never_below_floor(self, seed):
        rng = random.Random(seed)
        ingredients = rng.sample(["chicken breast", "fish", "tofu", "shrimp", "egg white", "carrot", "kale"], k=4)
        assert estimate_calories(ingredients, "dipping sauce", rng=rng, offset=-30) >= 150

    def test_seeded_rng_is_deterministic(self):
        first = estimate_calories(["chicken", "rice"], "biryani", rng=random.Random(42))
        second = estimate_calories(["chicken", "rice"], "biryani", rng=random.Random(42))
        assert first == second


class TestEstimateCookMinutes:
    """Test cook-time base values and adjustments."""

    def test_slow_cooking_meat_adds_time(self):
        assert estimate_cook_minutes("curry", ["beef"], rng=FixedRandom()) == 55

    def test_seafood_reduces_time(self):
        assert estimate_cook_minutes("stir-fry", ["shrimp"], rng=FixedRandom()) == 15

    def test_rice_adds_time_for_non_rice_dish(self):
        assert estimate_cook_minutes("curry", ["chicken", "rice"], rng=FixedRandom()) == 50

    def test_rice_dish_not_penalized(self):
        assert estimate_cook_minutes("biryani", ["chicken", "rice"], rng=FixedRandom()) == 60

    def test_jitter_is_added(self):
        assert estimate_cook_minutes("curry", [], rng=FixedRandom(randint=9)) == 49

    def test_never_below_minimum(self):
        assert estimate_cook_minutes("dipping sauce", ["fish"], rng=FixedRandom(), offset=-10) == 5


class TestFormatCookTime:
    """Test human-readable cook time rendering."""

    @pytest.mark.parametrize(
        "minutes,expected",
        [
            (60, "1 hour "),
            (75, "1 hour 15 minutes"),
            (120, "2 hours "),
            (135, "2 hours 15 minutes"),
            (59, "59 minutes"),
            (5, "5 minutes"),
        ],
    )
    def test_format(self, minutes, expected):
        assert format_cook_time(minutes) == expected

    def test_estimate_cook_time_composes(self):
        assert estimate_cook_time("curry", ["beef"], rng=FixedRandom(randint=5)) == "1 hour "

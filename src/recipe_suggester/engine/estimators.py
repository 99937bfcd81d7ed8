"""Calorie and cook-time estimation for rule-engine recipes.

Both estimators start from a per-recipe-type base value and apply fixed
ingredient-driven adjustments followed by random jitter. The randomness
source is injected (anything with `uniform`/`randint`, e.g. `random.Random`)
so tests can pin the output; it defaults to the `random` module.
"""

import random
from typing import Optional, Sequence

from recipe_suggester.engine import data
from recipe_suggester.engine.classifier import default_classifier
from recipe_suggester.models.models import CALORIE_FLOOR

MIN_COOK_MINUTES = 5


def _count_matching(lowered: Sequence[str], terms: Sequence[str]) -> int:
    return sum(1 for item in lowered if any(term in item for term in terms))


def estimate_calories(
    ingredients: Sequence[str],
    recipe_type: str,
    rng: Optional[random.Random] = None,
    offset: int = 0,
) -> int:
    """Estimate calories per serving.

    Args:
        ingredients: The user's ingredients, before the list is completed.
        recipe_type: Inferred recipe type, used for the base value.
        rng: Randomness source for the +/-10% jitter.
        offset: Fixed preset offset added after the jitter.

    Returns:
        Integer calories, never below CALORIE_FLOOR.
    """
    rng = rng or random
    lowered = [item.lower() for item in ingredients]

    calories = float(data.BASE_CALORIES.get(recipe_type, data.DEFAULT_CALORIES))
    calories -= 20 * _count_matching(lowered, data.LEAN_PROTEIN_TERMS)
    calories += 40 * _count_matching(lowered, data.FATTY_PROTEIN_TERMS)
    calories += 50 * _count_matching(lowered, data.RICH_FAT_TERMS)
    calories += 40 * _count_matching(lowered, data.SWEET_TERMS)

    vegetables = sum(1 for item in ingredients if default_classifier.classify(item).is_vegetable)
    grains = sum(1 for item in ingredients if default_classifier.classify(item).is_grain)
    if vegetables > 2:
        calories -= 20 * (vegetables - 2)
    if grains > 1:
        calories += 30 * (grains - 1)

    calories *= 1 + rng.uniform(-0.1, 0.1)
    calories += offset
    return max(CALORIE_FLOOR, round(calories))


def estimate_cook_minutes(
    recipe_type: str,
    ingredients: Sequence[str],
    rng: Optional[random.Random] = None,
    offset: int = 0,
) -> int:
    """Estimate total cooking time in minutes (at least MIN_COOK_MINUTES)."""
    rng = rng or random
    lowered = [item.lower() for item in ingredients]

    minutes = data.BASE_COOK_MINUTES.get(recipe_type, data.DEFAULT_COOK_MINUTES)
    if _count_matching(lowered, data.SLOW_COOK_TERMS):
        minutes += 15
    if _count_matching(lowered, data.QUICK_COOK_TERMS):
        minutes -= 5
    if recipe_type not in data.RICE_DISH_TYPES and _count_matching(lowered, data.RICE_KEYWORDS):
        minutes += 10

    minutes += rng.randint(0, 9) + offset
    return max(MIN_COOK_MINUTES, minutes)


def format_cook_time(minutes: int) -> str:
    """Render minutes as text.

    60 -> "1 hour ", 75 -> "1 hour 15 minutes", 120 -> "2 hours ", 45 -> "45 minutes".
    The trailing space on whole hours is kept for compatibility with stored recipes.
    """
    if minutes >= 60:
        hours, remainder = divmod(minutes, 60)
        hour_text = f"{hours} hour{'s' if hours > 1 else ''}"
        minute_text = f"{remainder} minutes" if remainder else ""
        return f"{hour_text} {minute_text}"
    return f"{minutes} minutes"


def estimate_cook_time(
    recipe_type: str,
    ingredients: Sequence[str],
    rng: Optional[random.Random] = None,
    offset: int = 0,
) -> str:
    return format_cook_time(estimate_cook_minutes(recipe_type, ingredients, rng=rng, offset=offset))

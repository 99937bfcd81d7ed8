"""Ingredient list completion.

User ingredients always come first, verbatim and in order. Supporting
ingredients are appended after them.
"""

from typing import Iterable, Sequence

from recipe_suggester.engine import data


def _candidate_name(candidate: str) -> str:
    """Name used for duplicate checks: the text before the first comma."""
    return candidate.split(",", 1)[0].strip().lower()


def _already_covered(existing: Sequence[str], candidate: str) -> bool:
    name = _candidate_name(candidate)
    return any(name in item.lower() for item in existing)


def complete_ingredients(user_ingredients: Sequence[str], cuisine: str, recipe_type: str) -> list[str]:
    """Return the user's ingredients followed by seasonings and support items.

    Base seasonings are skipped on a case-insensitive exact match. Support and
    recipe-type items are skipped when any ingredient already in the list
    contains their name, so "garlic, minced" is not added next to "2 cloves garlic".

    Args:
        user_ingredients: Ingredients supplied by the user.
        cuisine: Cuisine name, matched case-insensitively.
        recipe_type: Inferred recipe type selecting type-specific extras.

    Returns:
        Completed ingredient list.
    """
    completed = list(user_ingredients)

    present = {item.strip().lower() for item in completed}
    for seasoning in data.BASE_SEASONINGS:
        if seasoning not in present:
            completed.append(seasoning)
            present.add(seasoning)

    cuisine_key = (cuisine or "").strip().lower()
    support = data.CUISINE_SUPPORT_INGREDIENTS.get(cuisine_key, data.DEFAULT_SUPPORT_INGREDIENTS)
    extras = data.RECIPE_TYPE_EXTRAS.get(recipe_type, ())

    for candidate in (*support, *extras):
        if not _already_covered(completed, candidate):
            completed.append(candidate)

    return completed


def merge_ingredient_lists(user_ingredients: Sequence[str], extra: Iterable[str]) -> list[str]:
    """Prepend user ingredients to a generated list, dropping exact duplicates (case-insensitive)."""
    merged = list(user_ingredients)
    seen = {item.strip().lower() for item in merged}
    for item in extra:
        key = item.strip().lower()
        if key and key not in seen:
            merged.append(item.strip())
            seen.add(key)
    return merged

"""Recipe-type inference from cuisine and ingredients.

Rules are evaluated in priority order and the first match wins, so a
rice-and-chicken indian request is a biryani rather than a curry.
"""

from typing import Sequence

from recipe_suggester.engine import data
from recipe_suggester.engine.classifier import IngredientProfile, default_classifier

DEFAULT_RECIPE_TYPE = "recipe"


def _any_contains(lowered: Sequence[str], keywords: Sequence[str]) -> bool:
    return any(keyword in item for item in lowered for keyword in keywords)


def _rice_type(cuisine: str, has_protein: bool) -> str:
    if cuisine == "indian":
        return "biryani"
    if cuisine == "chinese":
        return "fried rice"
    if cuisine in ("japanese", "mexican"):
        return "rice bowl"
    if cuisine == "american" and has_protein:
        return "rice casserole"
    return "rice dish"


def _noodle_type(cuisine: str, lowered: Sequence[str]) -> str:
    if cuisine == "italian":
        return "pasta"
    if cuisine == "chinese":
        return "lo mein"
    if cuisine == "japanese":
        return "ramen"
    if cuisine == "american" and _any_contains(lowered, ("cheese",)):
        return "mac and cheese"
    return "noodle dish"


def _bread_type(cuisine: str, has_protein: bool) -> str:
    if cuisine == "italian":
        return "pizza" if has_protein else "flatbread"
    if cuisine == "indian":
        return "naan"
    if cuisine == "mexican":
        return "tortilla"
    if cuisine == "american":
        return "sandwich"
    return "bread dish"


def _protein_type(cuisine: str, has_vegetable: bool, has_spice: bool) -> str:
    if cuisine == "indian":
        return "curry" if has_spice else "masala"
    if cuisine == "chinese":
        return "stir-fry" if has_vegetable else "roast"
    if cuisine == "italian":
        return "sauté" if has_vegetable else "roast"
    if cuisine == "mexican":
        return "taco filling"
    if cuisine == "japanese":
        return "teriyaki"
    if cuisine == "american":
        return "grill"
    return "main dish"


def infer_recipe_type(cuisine: str, ingredients: Sequence[str]) -> str:
    """Return the dish label for a cuisine and ingredient set.

    Args:
        cuisine: Cuisine name, matched case-insensitively.
        ingredients: Ingredient strings as supplied by the user.

    Returns:
        A recipe type label such as "biryani", "stir-fry" or "recipe".
    """
    cuisine_key = (cuisine or "").strip().lower()
    lowered = [item.lower() for item in ingredients]
    profiles: list[IngredientProfile] = [default_classifier.classify(item) for item in ingredients]

    has_protein = any(p.is_protein for p in profiles)
    has_vegetable = any(p.is_vegetable for p in profiles)
    has_grain = any(p.is_grain for p in profiles)
    has_spice = any(p.is_spice_or_herb for p in profiles)

    if _any_contains(lowered, data.RICE_KEYWORDS):
        return _rice_type(cuisine_key, has_protein)
    if _any_contains(lowered, data.PASTA_KEYWORDS):
        return _noodle_type(cuisine_key, lowered)
    if _any_contains(lowered, data.SOUP_KEYWORDS):
        return data.SOUP_LABELS.get(cuisine_key, "soup")
    if _any_contains(lowered, data.BREAD_KEYWORDS):
        return _bread_type(cuisine_key, has_protein)
    if has_protein:
        return _protein_type(cuisine_key, has_vegetable, has_spice)
    if has_vegetable:
        return data.VEGETABLE_DISH_LABELS.get(cuisine_key, "vegetable medley")
    if has_spice and not has_grain and len(ingredients) < 4:
        return data.APPETIZER_LABELS.get(cuisine_key, "spice blend")
    return DEFAULT_RECIPE_TYPE

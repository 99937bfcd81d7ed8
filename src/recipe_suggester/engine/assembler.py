"""Rule-based recipe assembly.

One parametrized pipeline builds all three recipes of a request; the style
preset family only varies title phrasing, tone and small numeric offsets.
This is the guaranteed fallback of the generation orchestrator, so it
performs no I/O and has no expected failure modes.
"""

import random
from typing import Optional, Sequence

from recipe_suggester.engine import data
from recipe_suggester.engine.classifier import sort_protein_first
from recipe_suggester.engine.completer import complete_ingredients
from recipe_suggester.engine.dietary import infer_dietary_flags, merge_dietary_flags, normalize_dietary_tags
from recipe_suggester.engine.estimators import estimate_calories, estimate_cook_time
from recipe_suggester.engine.inference import infer_recipe_type
from recipe_suggester.engine.instructions import synthesize_instructions
from recipe_suggester.engine.presets import DEFAULT_STYLE, PRESET_FAMILIES, StylePreset
from recipe_suggester.models.models import DietaryFlags, NewRecipe
from recipe_suggester.utils.logger import logger

TITLE_INGREDIENT_LIMIT = 2
TITLE_MAX_LENGTH = 200
_LOWERCASE_WORDS = frozenset({"and", "of", "with"})


def select_image_url(cuisine: str, position: int) -> str:
    """Pick an image for the recipe at `position`, cycling through the cuisine's list."""
    images = data.IMAGES_BY_CUISINE.get((cuisine or "").strip().lower(), data.DEFAULT_IMAGES)
    return images[position % len(images)]


def _capitalize_words(text: str) -> str:
    words = []
    for index, word in enumerate(text.split()):
        if index and word in _LOWERCASE_WORDS:
            words.append(word)
        else:
            words.append("-".join(part[:1].upper() + part[1:] for part in word.split("-")))
    return " ".join(words)


def _ingredient_label(ingredient: str) -> str:
    return ingredient.split(",", 1)[0].strip()


def resolve_style(style: Optional[str]) -> str:
    """Return a known preset family name, falling back to the default with a warning."""
    name = (style or DEFAULT_STYLE).strip().lower()
    if name not in PRESET_FAMILIES:
        logger.warning(f"Unknown style preset '{style}', using '{DEFAULT_STYLE}'")
        return DEFAULT_STYLE
    return name


class RecipeAssembler:
    """Builds three complete recipe drafts from user input.

    Args:
        rng: Randomness source (`random.Random` or compatible). Seeding it pins
            descriptions, chef notes, calories and cook times.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def build_title(self, preset: StylePreset, cuisine: str, sorted_ingredients: Sequence[str], recipe_type: str) -> str:
        leading = []
        for ingredient in sorted_ingredients:
            label = _ingredient_label(ingredient)
            if not label or label.lower() in recipe_type:
                continue
            leading.append(_capitalize_words(label))
            if len(leading) == TITLE_INGREDIENT_LIMIT:
                break

        parts = [preset.title_prefix, _capitalize_words(cuisine.strip()), *leading, _capitalize_words(recipe_type)]
        title = " ".join(part for part in parts if part) + preset.suffix_for(cuisine)
        return title[:TITLE_MAX_LENGTH].rstrip()

    def build_recipe(
        self,
        preset: StylePreset,
        position: int,
        ingredients: Sequence[str],
        cuisine: str,
        user_flags: dict[str, bool],
    ) -> NewRecipe:
        sorted_ingredients = sort_protein_first(ingredients)
        recipe_type = infer_recipe_type(cuisine, sorted_ingredients)
        full_ingredients = complete_ingredients(ingredients, cuisine, recipe_type)

        description = self.rng.choice(preset.descriptions).format(
            cuisine=cuisine.strip().title(),
            recipe_type=recipe_type,
            ingredients=", ".join(_ingredient_label(item) for item in sorted_ingredients[:3]),
        )

        instructions = synthesize_instructions(ingredients, cuisine, recipe_type, full_ingredients)
        if preset.closing_tip:
            instructions.append(preset.closing_tip)

        flags = merge_dietary_flags(infer_dietary_flags(full_ingredients), user_flags)

        return NewRecipe(
            title=self.build_title(preset, cuisine, sorted_ingredients, recipe_type),
            description=description,
            ingredients=full_ingredients,
            instructions=instructions,
            cuisine=cuisine.strip(),
            calories=estimate_calories(sorted_ingredients, recipe_type, rng=self.rng, offset=preset.calorie_offset),
            cook_time=estimate_cook_time(recipe_type, sorted_ingredients, rng=self.rng, offset=preset.minutes_offset),
            image_url=select_image_url(cuisine, position),
            chef_note=self.rng.choice(preset.chef_notes),
            dietary_flags=DietaryFlags(**flags),
        )

    def assemble(
        self,
        ingredients: Sequence[str],
        cuisine: str,
        dietary: Sequence[str] = (),
        style: Optional[str] = None,
    ) -> list[NewRecipe]:
        """Return exactly three recipe drafts, one per preset of the style family."""
        family = PRESET_FAMILIES[resolve_style(style)]
        user_flags = normalize_dietary_tags(dietary)
        return [
            self.build_recipe(preset, position, ingredients, cuisine, user_flags)
            for position, preset in enumerate(family)
        ]


def assemble_recipes(
    ingredients: Sequence[str],
    cuisine: str,
    dietary: Sequence[str] = (),
    style: Optional[str] = None,
    seed: Optional[int] = None,
) -> list[NewRecipe]:
    """Convenience wrapper using a fresh `random.Random(seed)`."""
    return RecipeAssembler(random.Random(seed)).assemble(ingredients, cuisine, dietary, style)

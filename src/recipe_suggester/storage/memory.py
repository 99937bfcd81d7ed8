"""In-process recipe storage (default when DATABASE_URL is unset)."""

import itertools
import threading
from typing import Optional

from recipe_suggester.models.models import NewRecipe, Recipe
from recipe_suggester.storage.base import RecipeNotFoundError, RecipeStorage


class MemoryRecipeStorage(RecipeStorage):
    """Dict-backed storage. Contents are lost when the process exits."""

    def __init__(self) -> None:
        self._recipes: dict[int, Recipe] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create_recipe(self, draft: NewRecipe) -> Recipe:
        with self._lock:
            recipe = Recipe(id=next(self._ids), saved=False, **draft.model_dump())
            self._recipes[recipe.id] = recipe
            return recipe

    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        return self._recipes.get(recipe_id)

    def list_recipes(self) -> list[Recipe]:
        return [self._recipes[key] for key in sorted(self._recipes)]

    def get_saved_recipes(self) -> list[Recipe]:
        return [recipe for recipe in self.list_recipes() if recipe.saved]

    def save_recipe(self, recipe_id: int) -> Recipe:
        with self._lock:
            recipe = self._recipes.get(recipe_id)
            if recipe is None:
                raise RecipeNotFoundError(recipe_id)
            if not recipe.saved:
                recipe = recipe.model_copy(update={"saved": True})
                self._recipes[recipe_id] = recipe
            return recipe

    def remove_saved_recipe(self, recipe_id: int) -> None:
        with self._lock:
            recipe = self._recipes.get(recipe_id)
            if recipe is not None and recipe.saved:
                self._recipes[recipe_id] = recipe.model_copy(update={"saved": False})

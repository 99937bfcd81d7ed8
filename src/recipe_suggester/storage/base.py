"""Storage interface for generated recipes.

Recipes are never deleted or edited after creation; the only mutation is the
`saved` flag.
"""

from abc import ABC, abstractmethod
from typing import Optional

from recipe_suggester.models.models import NewRecipe, Recipe


class RecipeNotFoundError(LookupError):
    """No recipe exists with the requested id."""

    def __init__(self, recipe_id: int) -> None:
        super().__init__(f"Recipe with ID {recipe_id} does not exist")
        self.recipe_id = recipe_id


class RecipeStorage(ABC):
    """Persistence collaborator used by the API and the orchestrator."""

    @abstractmethod
    def create_recipe(self, draft: NewRecipe) -> Recipe:
        """Store a draft and return it with a new id and saved=False."""

    @abstractmethod
    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        """Return the recipe or None."""

    @abstractmethod
    def list_recipes(self) -> list[Recipe]:
        """Return every stored recipe in id order."""

    @abstractmethod
    def get_saved_recipes(self) -> list[Recipe]:
        """Return saved recipes in id order."""

    @abstractmethod
    def save_recipe(self, recipe_id: int) -> Recipe:
        """Mark a recipe as saved. Idempotent.

        Raises:
            RecipeNotFoundError: If the id is unknown.
        """

    @abstractmethod
    def remove_saved_recipe(self, recipe_id: int) -> None:
        """Clear the saved flag. Unknown or unsaved ids are ignored."""

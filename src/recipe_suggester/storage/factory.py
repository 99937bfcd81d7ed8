"""Storage backend selection."""

from typing import Optional

from recipe_suggester.storage.base import RecipeStorage
from recipe_suggester.storage.memory import MemoryRecipeStorage
from recipe_suggester.storage.sql import SqlRecipeStorage
from recipe_suggester.utils.logger import logger


def configure_storage(database_url: Optional[str] = None) -> RecipeStorage:
    """Return SQL storage when a database URL is given, in-memory storage otherwise."""
    if not database_url:
        logger.info("Using in-memory recipe storage (recipes are lost on restart)")
        return MemoryRecipeStorage()

    # Hide credentials when logging
    location = database_url.split("@")[1] if "@" in database_url else database_url
    logger.info(f"Using SQL recipe storage: {location}")
    return SqlRecipeStorage(database_url)

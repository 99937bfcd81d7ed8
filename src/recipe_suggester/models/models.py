"""Data models and schemas for the recipe suggestion service.

Defines Pydantic models for request/response validation and domain objects.
All models use Pydantic v2. Python attributes are snake_case; the JSON wire
format uses camelCase aliases (cookTime, imageUrl, dietaryFlags, ...) and both
spellings are accepted on input.
"""

import re
from typing import List, Optional, Annotated

from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic.alias_generators import to_camel

# Every persisted recipe reports at least this many calories
CALORIE_FLOOR = 150

# Number of suggestions returned per generation request
RECIPES_PER_REQUEST = 3


class DietaryFlags(BaseModel):
    """Diet compliance booleans attached to every recipe."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False
    low_carb: bool = False
    dairy_free: bool = False
    keto: bool = False


class RecipeGenerationRequest(BaseModel):
    """Input schema for recipe generation.

    Ingredients are trimmed and empty entries dropped; at least one ingredient
    must remain. Dietary tags are free text and are normalized later by the
    dietary synonym table.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    ingredients: Annotated[
        List[str],
        Field(min_length=1, max_length=50, description="Ingredients on hand (1-50 items)"),
    ]
    cuisine: Annotated[str, Field(min_length=1, max_length=50, description="Cuisine type, e.g. indian")]
    dietary: Annotated[
        List[str], Field(default_factory=list, description="Optional dietary preference tags")
    ]
    style: Annotated[
        Optional[str],
        Field(None, description="Optional style preset family: classic, skill or cultural"),
    ]

    @field_validator("ingredients", mode="before")
    @classmethod
    def clean_ingredients(cls, ingredients) -> list[str]:
        """Strip whitespace and drop blank ingredients. Non-string items are left for type validation."""
        if not isinstance(ingredients, list) or not all(isinstance(item, str) for item in ingredients):
            return ingredients
        cleaned = [item.strip() for item in ingredients if item.strip()]
        if not cleaned:
            raise ValueError("At least one ingredient is required")
        return cleaned

    @field_validator("dietary", mode="before")
    @classmethod
    def clean_dietary(cls, dietary) -> list[str]:
        """Treat a missing dietary list as empty and drop blank tags."""
        if dietary is None:
            return []
        if isinstance(dietary, list) and all(isinstance(tag, str) for tag in dietary):
            return [tag.strip() for tag in dietary if tag.strip()]
        return dietary


class NewRecipe(BaseModel):
    """A fully formed recipe that has not been stored yet (no id)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Annotated[str, Field(min_length=1, max_length=200)]
    description: Annotated[str, Field(min_length=1)]
    ingredients: Annotated[List[str], Field(min_length=1)]
    instructions: Annotated[List[str], Field(min_length=1)]
    cuisine: Annotated[str, Field(min_length=1)]
    calories: Annotated[int, Field(ge=CALORIE_FLOOR, description=f"Calories per serving (>= {CALORIE_FLOOR})")]
    cook_time: Annotated[str, Field(min_length=1, description="Human readable time, e.g. '1 hour 15 minutes'")]
    image_url: str
    chef_note: Optional[str] = None
    dietary_flags: DietaryFlags = Field(default_factory=DietaryFlags)


class Recipe(NewRecipe):
    """Stored recipe. Only `saved` changes after creation."""

    id: Annotated[int, Field(gt=0, description="Identifier assigned by storage")]
    saved: bool = False


class GeneratedRecipe(BaseModel):
    """One recipe as returned by an LLM provider.

    Lenient on purpose: calories may arrive as text ("450 kcal") and optional
    fields may be missing. The orchestrator fills defaults.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    title: Annotated[str, Field(min_length=1, max_length=200)]
    description: Annotated[str, Field(min_length=1)]
    ingredients: Annotated[List[str], Field(min_length=1)]
    instructions: Annotated[List[str], Field(min_length=1)]
    calories: Optional[int] = None
    cook_time: Optional[str] = None
    chef_note: Optional[str] = None
    dietary_flags: dict[str, bool] = Field(default_factory=dict)

    @field_validator("calories", mode="before")
    @classmethod
    def parse_calories(cls, value) -> Optional[int]:
        """Accept ints, floats and strings with a leading number; anything else becomes None."""
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return int(value)
        if isinstance(value, str):
            match = re.search(r"\d+", value)
            return int(match.group()) if match else None
        return None

    @field_validator("dietary_flags", mode="before")
    @classmethod
    def keep_boolean_flags(cls, value) -> dict:
        """Drop non-boolean flag values instead of failing the whole batch."""
        if not isinstance(value, dict):
            return {}
        return {key: flag for key, flag in value.items() if isinstance(flag, bool)}


class GeneratedRecipeBatch(BaseModel):
    """Top-level JSON object requested from LLM providers."""

    recipes: Annotated[List[GeneratedRecipe], Field(min_length=1)]


class GenerationResponse(BaseModel):
    """Response schema for POST /api/recipes/generate."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    recipes: List[Recipe]
    source: Annotated[str, Field(description="Model name that produced the recipes, or 'rule-engine'")]


class SaveRecipeRequest(BaseModel):
    """Body of POST /api/recipes/save."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recipe_id: Annotated[int, Field(gt=0, strict=True)]


class ApiMessage(BaseModel):
    """Generic success/failure envelope for message-only responses."""

    success: bool
    message: str

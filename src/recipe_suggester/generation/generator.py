"""Recipe generation orchestrator.

Tries each configured LLM provider once, in order, and falls back to the
rule-based assembler when all of them fail:

    ATTEMPT_EXTERNAL(model A) -> ATTEMPT_EXTERNAL(model B) -> FALLBACK_RULE_ENGINE -> DONE

A failed stage is never retried. With no providers configured the run starts
at FALLBACK_RULE_ENGINE. The rule engine has no expected failure modes, so
anything it raises is a bug and propagates to the caller.
"""

import asyncio
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol, Sequence

from recipe_suggester.engine.assembler import RecipeAssembler, select_image_url
from recipe_suggester.engine.completer import merge_ingredient_lists
from recipe_suggester.engine.dietary import coerce_flag_keys, merge_dietary_flags, normalize_dietary_tags
from recipe_suggester.models.models import (
    CALORIE_FLOOR,
    RECIPES_PER_REQUEST,
    DietaryFlags,
    GeneratedRecipe,
    GenerationResponse,
    NewRecipe,
    RecipeGenerationRequest,
)
from recipe_suggester.providers.gemini import GeminiRecipeProvider, ProviderError
from recipe_suggester.storage.base import RecipeStorage
from recipe_suggester.utils.config import Config, config
from recipe_suggester.utils.logger import logger

RULE_ENGINE_SOURCE = "rule-engine"

# Fallbacks for fields an LLM left out
DEFAULT_LLM_CALORIES = 400
DEFAULT_LLM_COOK_TIME = "30 minutes"
DEFAULT_CHEF_NOTE = "Enjoy with your favorite side dish!"


class GenerationStage(str, Enum):
    ATTEMPT_EXTERNAL = "attempt_external"
    FALLBACK_RULE_ENGINE = "fallback_rule_engine"
    DONE = "done"


class RecipeProvider(Protocol):
    """Anything that can produce recipe ideas asynchronously."""

    name: str

    async def generate(
        self, ingredients: Sequence[str], cuisine: str, dietary: Sequence[str] = ()
    ) -> list[GeneratedRecipe]: ...


@dataclass
class GenerationResult:
    """Outcome of one orchestrator run."""

    recipes: list[NewRecipe]
    source: str
    failed_providers: list[str] = field(default_factory=list)


def _format_generated_recipes(
    recipes: Sequence[GeneratedRecipe],
    ingredients: Sequence[str],
    cuisine: str,
    dietary: Sequence[str],
) -> list[NewRecipe]:
    """Normalize LLM output into drafts: user ingredients first, defaults filled, flags merged."""
    user_flags = normalize_dietary_tags(dietary)
    drafts = []
    for position, recipe in enumerate(recipes[:RECIPES_PER_REQUEST]):
        flags = merge_dietary_flags(coerce_flag_keys(recipe.dietary_flags), user_flags)
        drafts.append(
            NewRecipe(
                title=recipe.title,
                description=recipe.description,
                ingredients=merge_ingredient_lists(ingredients, recipe.ingredients),
                instructions=recipe.instructions,
                cuisine=cuisine.strip(),
                calories=max(CALORIE_FLOOR, recipe.calories or DEFAULT_LLM_CALORIES),
                cook_time=recipe.cook_time or DEFAULT_LLM_COOK_TIME,
                image_url=select_image_url(cuisine, position),
                chef_note=recipe.chef_note or DEFAULT_CHEF_NOTE,
                dietary_flags=DietaryFlags(**flags),
            )
        )
    return drafts


class RecipeGenerator:
    """Runs the provider chain with the rule engine as the last resort.

    Args:
        providers: Providers in the order they should be attempted.
        seed: Optional seed for the rule engine. A fresh `random.Random(seed)`
            is created per request.
        style: Default style preset family for rule-engine recipes.
    """

    def __init__(
        self,
        providers: Sequence[RecipeProvider] = (),
        seed: Optional[int] = None,
        style: str = "classic",
    ) -> None:
        self.providers = list(providers)
        self.seed = seed
        self.style = style

    async def _attempt_provider(
        self,
        provider: RecipeProvider,
        ingredients: Sequence[str],
        cuisine: str,
        dietary: Sequence[str],
    ) -> list[NewRecipe]:
        generated = await provider.generate(ingredients, cuisine, dietary)
        if len(generated) < RECIPES_PER_REQUEST:
            raise ProviderError(
                provider.name, f"returned {len(generated)} recipes, expected {RECIPES_PER_REQUEST}"
            )
        return _format_generated_recipes(generated, ingredients, cuisine, dietary)

    def run_rule_engine(
        self,
        ingredients: Sequence[str],
        cuisine: str,
        dietary: Sequence[str],
        style: Optional[str] = None,
    ) -> list[NewRecipe]:
        assembler = RecipeAssembler(random.Random(self.seed))
        return assembler.assemble(ingredients, cuisine, dietary, style or self.style)

    async def generate(
        self,
        ingredients: Sequence[str],
        cuisine: str,
        dietary: Sequence[str] = (),
        style: Optional[str] = None,
    ) -> GenerationResult:
        """Produce exactly three recipe drafts.

        Args:
            ingredients: User ingredients (already validated and trimmed).
            cuisine: Requested cuisine.
            dietary: Free-text dietary tags.
            style: Optional preset family overriding the generator default.

        Returns:
            GenerationResult with the drafts, the name of the source that
            produced them and the providers that failed along the way.
        """
        failed: list[str] = []
        stage = GenerationStage.ATTEMPT_EXTERNAL if self.providers else GenerationStage.FALLBACK_RULE_ENGINE

        if stage is GenerationStage.ATTEMPT_EXTERNAL:
            for provider in self.providers:
                extra = {"stage": stage.value, "provider": provider.name}
                logger.info(f"Requesting recipes from {provider.name}", extra=extra)
                try:
                    recipes = await self._attempt_provider(provider, ingredients, cuisine, dietary)
                except Exception as e:
                    logger.warning(f"Provider {provider.name} failed: {e}", extra=extra)
                    failed.append(provider.name)
                    continue
                logger.info(
                    f"✓ {len(recipes)} recipes from {provider.name}",
                    extra={"stage": GenerationStage.DONE.value, "provider": provider.name},
                )
                return GenerationResult(recipes=recipes, source=provider.name, failed_providers=failed)
            stage = GenerationStage.FALLBACK_RULE_ENGINE
            logger.warning("All providers failed, falling back to rule engine", extra={"stage": stage.value})
        else:
            logger.info("No providers configured, using rule engine", extra={"stage": stage.value})

        recipes = self.run_rule_engine(ingredients, cuisine, dietary, style)
        logger.info(
            f"✓ {len(recipes)} recipes from {RULE_ENGINE_SOURCE}",
            extra={"stage": GenerationStage.DONE.value, "provider": RULE_ENGINE_SOURCE},
        )
        return GenerationResult(recipes=recipes, source=RULE_ENGINE_SOURCE, failed_providers=failed)


def build_providers(settings: Config = config) -> list[GeminiRecipeProvider]:
    """Create the provider chain from configuration (primary model, then fallback model)."""
    if not settings.llm_enabled:
        return []

    models = [settings.GEMINI_MODEL]
    if settings.GEMINI_FALLBACK_MODEL and settings.GEMINI_FALLBACK_MODEL != settings.GEMINI_MODEL:
        models.append(settings.GEMINI_FALLBACK_MODEL)

    return [
        GeminiRecipeProvider(
            api_key=settings.GEMINI_API_KEY,
            model=model,
            temperature=settings.TEMPERATURE,
            max_output_tokens=settings.MAX_OUTPUT_TOKENS,
            timeout_seconds=settings.PROVIDER_TIMEOUT_SECONDS,
        )
        for model in models
    ]


def initialize_recipe_generator(settings: Config = config) -> RecipeGenerator:
    """Factory that builds the orchestrator from configuration.

    Steps:
    1. Configure LLM providers (none when GEMINI_API_KEY is unset or USE_LLM=false)
    2. Configure the rule engine (style preset and optional seed)
    """
    logger.info("=== Initializing Recipe Generator ===")

    logger.info("Step 1/2: Configuring LLM providers...")
    providers = build_providers(settings)
    if providers:
        logger.info(f"✓ {len(providers)} provider(s): {', '.join(p.name for p in providers)}")
    else:
        logger.info("✓ No LLM providers configured - rule engine only")

    logger.info("Step 2/2: Configuring rule engine...")
    generator = RecipeGenerator(providers, seed=settings.RANDOM_SEED, style=settings.STYLE_PRESET)
    seed_text = settings.RANDOM_SEED if settings.RANDOM_SEED is not None else "random"
    logger.info(f"✓ Rule engine ready (style={settings.STYLE_PRESET}, seed={seed_text})")

    logger.info("=== Recipe generator initialization complete ===")
    return generator


async def generate_and_store(
    generator: RecipeGenerator, storage: RecipeStorage, request: RecipeGenerationRequest
) -> GenerationResponse:
    """Run the orchestrator and persist every draft.

    Returns:
        GenerationResponse with the stored recipes (ids assigned, saved=False).
    """
    result = await generator.generate(request.ingredients, request.cuisine, request.dietary, request.style)
    # Commits block on the SQL backend
    stored = [await asyncio.to_thread(storage.create_recipe, draft) for draft in result.recipes]
    return GenerationResponse(recipes=stored, source=result.source)

#!/usr/bin/env python3
"""Ad hoc query runner for Recipe Suggester.

Generate recipes directly without starting the API server.

Usage:
    python query.py indian chicken rice
    python query.py --dietary vegan chinese tofu broccoli "soy sauce"
    python query.py --style skill --seed 7 italian pasta tomato
    python query.py --debug mexican beans corn  # Show full JSON response

Features:
- Runs the same provider chain and rule engine as the API
- Stores results in a throwaway in-memory storage
- Markdown rendering with rich
- Debug mode to display the full JSON response
"""

import asyncio
import sys
from typing import Optional

from rich.console import Console
from rich.markdown import Markdown

from recipe_suggester.engine.presets import PRESET_FAMILIES
from recipe_suggester.generation.generator import build_providers, generate_and_store, RecipeGenerator
from recipe_suggester.models.models import Recipe, RecipeGenerationRequest
from recipe_suggester.storage.memory import MemoryRecipeStorage
from recipe_suggester.utils.config import config
from recipe_suggester.utils.logger import logger

console = Console()

USAGE = "Usage: python query.py [--debug] [--style NAME] [--dietary a,b] [--seed N] CUISINE INGREDIENT..."


def render_recipe(recipe: Recipe) -> str:
    """Render one recipe as markdown."""
    flags = [name.replace("_", " ") for name, value in recipe.dietary_flags.model_dump().items() if value]
    lines = [
        f"## {recipe.title}",
        "",
        f"*{recipe.description}*",
        "",
        f"**Calories:** {recipe.calories} | **Cook time:** {recipe.cook_time.strip()}",
    ]
    if flags:
        lines.append(f"**Dietary:** {', '.join(flags)}")
    lines += ["", "### Ingredients", *[f"- {item}" for item in recipe.ingredients]]
    lines += ["", "### Instructions", *[f"{i}. {step}" for i, step in enumerate(recipe.instructions, 1)]]
    if recipe.chef_note:
        lines += ["", f"> **Chef's note:** {recipe.chef_note}"]
    return "\n".join(lines)


def run_query(
    cuisine: str,
    ingredients: list[str],
    dietary: list[str],
    style: Optional[str] = None,
    seed: Optional[int] = None,
    debug: bool = False,
) -> None:
    """Generate recipes for one request and print them.

    Args:
        cuisine: Requested cuisine.
        ingredients: Ingredients on hand.
        dietary: Dietary tags.
        style: Style preset family for rule-engine recipes.
        seed: Seed for the rule engine (overrides RANDOM_SEED).
        debug: If True, display the full JSON response.
    """
    try:
        request = RecipeGenerationRequest(ingredients=ingredients, cuisine=cuisine, dietary=dietary, style=style)
        generator = RecipeGenerator(
            build_providers(),
            seed=seed if seed is not None else config.RANDOM_SEED,
            style=config.STYLE_PRESET,
        )

        logger.info(f"Generating {cuisine} recipes with: {', '.join(request.ingredients)}")
        response = asyncio.run(generate_and_store(generator, MemoryRecipeStorage(), request))
        logger.info(f"Source: {response.source}")
        console.print()

        if debug:
            console.print("[bold cyan]Debug Mode: Full Response[/bold cyan]")
            console.print("[dim]" + "=" * 60 + "[/dim]")
            console.print_json(data=response.model_dump(mode="json", by_alias=True))
            console.print("[dim]" + "=" * 60 + "[/dim]")
            console.print()

        for recipe in response.recipes:
            console.print(Markdown(render_recipe(recipe)))
            console.print()

    except KeyboardInterrupt:
        logger.info("\nQuery interrupted by user.")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Query execution failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    debug_mode = False
    style_name = None
    dietary_tags: list[str] = []
    seed_value = None
    argv_start = 1

    while argv_start < len(sys.argv) and sys.argv[argv_start].startswith("--"):
        flag = sys.argv[argv_start]
        if flag == "--debug":
            debug_mode = True
            argv_start += 1
            continue
        if flag not in ("--style", "--dietary", "--seed"):
            print(f"Unknown flag: {flag}")
            sys.exit(1)
        if argv_start + 1 >= len(sys.argv):
            print(f"Error: {flag} flag requires a value")
            sys.exit(1)
        value = sys.argv[argv_start + 1]
        if flag == "--style":
            if value not in PRESET_FAMILIES:
                print(f"Error: unknown style '{value}' (choose from {', '.join(PRESET_FAMILIES)})")
                sys.exit(1)
            style_name = value
        elif flag == "--dietary":
            dietary_tags = [tag.strip() for tag in value.split(",") if tag.strip()]
        else:
            try:
                seed_value = int(value)
            except ValueError:
                print("Error: --seed requires an integer")
                sys.exit(1)
        argv_start += 2

    if len(sys.argv) - argv_start < 2:
        print("Error: a cuisine and at least one ingredient are required")
        print(USAGE)
        sys.exit(1)

    run_query(
        cuisine=sys.argv[argv_start],
        ingredients=sys.argv[argv_start + 1:],
        dietary=dietary_tags,
        style=style_name,
        seed=seed_value,
        debug=debug_mode,
    )

"""Prompts for LLM recipe generation.

Provides factory functions that build the system instruction and the user
prompt sent to each Gemini provider. The prompt asks for a JSON object with a
`recipes` array whose items match `GeneratedRecipe`.
"""

from typing import Sequence

from recipe_suggester.models.models import RECIPES_PER_REQUEST


def _get_dietary_section(dietary: Sequence[str]) -> str:
    """Generate the dietary restriction section of the user prompt.

    Args:
        dietary: Dietary tags exactly as the user supplied them.

    Returns:
        str: Restriction instructions, or an empty string when no tags were given.
    """
    if not dietary:
        return ""
    return f"""
The recipes MUST strictly comply with the following dietary restrictions: {", ".join(dietary)}.
Make sure every ingredient and cooking method adheres to these restrictions.
Be precise with the dietaryFlags object to accurately reflect these restrictions.
"""


def build_system_prompt(cuisine: str) -> str:
    """Build the system instruction for a cuisine."""
    return f"""
You are a professional chef specialized in creating recipes from available ingredients.
You excel at {cuisine} cuisine and understanding dietary restrictions.
Always provide detailed, accurate recipes with precise instructions.
Make sure your dietaryFlags object is accurate and reflects the exact dietary needs.
""".strip()


def build_recipe_prompt(ingredients: Sequence[str], cuisine: str, dietary: Sequence[str] = ()) -> str:
    """Build the user prompt requesting recipe ideas as JSON.

    Args:
        ingredients: Ingredients the user has on hand.
        cuisine: Requested cuisine.
        dietary: Optional dietary tags.

    Returns:
        str: Complete prompt text.
    """
    return f"""
Create {RECIPES_PER_REQUEST} different delicious {cuisine} recipe ideas using these ingredients: {", ".join(ingredients)}.
{_get_dietary_section(dietary)}
For each recipe, provide the following information in a structured JSON format:

1. title: A creative, appealing title
2. description: A vibrant description (1-2 sentences) highlighting flavors and appearance
3. ingredients: List of all needed ingredients (including the ones provided and additional common ingredients)
4. instructions: Detailed step-by-step cooking instructions, one step per list item
5. calories: Approximate calories per serving (integer)
6. cookTime: Total cooking time in format "X minutes" or "X hours Y minutes"
7. chefNote: A professional tip to enhance the dish
8. dietaryFlags: An object with boolean flags for:
   - vegetarian (true if no meat/fish)
   - vegan (true if no animal products)
   - glutenFree (true if no gluten)
   - lowCarb (true if low in carbohydrates)
   - dairyFree (true if no dairy products)
   - keto (true if keto-friendly)

Return ONLY a valid JSON object with a 'recipes' array containing exactly {RECIPES_PER_REQUEST} recipes with all the fields mentioned above.
""".strip()

"""End-to-end tests against the live Gemini API.

Run with: pytest -m integration tests/integration
"""

import pytest
from fastapi.testclient import TestClient

from recipe_suggester.api.app import create_app
from recipe_suggester.generation.generator import RULE_ENGINE_SOURCE, RecipeGenerator
from recipe_suggester.models.models import CALORIE_FLOOR, RECIPES_PER_REQUEST
from recipe_suggester.providers.gemini import GeminiRecipeProvider, ProviderError
from recipe_suggester.storage.memory import MemoryRecipeStorage
from recipe_suggester.utils.config import config

pytestmark = pytest.mark.integration


@pytest.fixture
def provider(gemini_api_key) -> GeminiRecipeProvider:
    return GeminiRecipeProvider(
        api_key=gemini_api_key,
        model=config.GEMINI_MODEL,
        temperature=config.TEMPERATURE,
        max_output_tokens=config.MAX_OUTPUT_TOKENS,
        timeout_seconds=60,
    )


class TestGeminiProvider:
    """Test a single live provider call."""

    @pytest.mark.asyncio
    async def test_returns_structured_recipes(self, provider):
        recipes = await provider.generate(["chicken", "rice", "spinach"], "indian", [])

        assert len(recipes) >= RECIPES_PER_REQUEST
        for recipe in recipes:
            assert recipe.title
            assert recipe.ingredients
            assert recipe.instructions

    @pytest.mark.asyncio
    async def test_invalid_model_raises_provider_error(self, gemini_api_key):
        broken = GeminiRecipeProvider(api_key=gemini_api_key, model="no-such-model", timeout_seconds=30)
        with pytest.raises(ProviderError):
            await broken.generate(["tofu"], "chinese", [])


class TestGenerationFlow:
    """Test the full API with live providers and in-memory storage."""

    def test_generate_save_and_list(self, provider):
        app = create_app(generator=RecipeGenerator([provider]), storage=MemoryRecipeStorage())
        client = TestClient(app)

        response = client.post(
            "/api/recipes/generate",
            json={"ingredients": ["tofu", "broccoli", "soy sauce"], "cuisine": "chinese", "dietary": ["vegan"]},
        )

        assert response.status_code == 200
        payload = response.json()
        assert len(payload["recipes"]) == RECIPES_PER_REQUEST
        assert payload["source"] in (config.GEMINI_MODEL, RULE_ENGINE_SOURCE)
        for recipe in payload["recipes"]:
            assert recipe["calories"] >= CALORIE_FLOOR
            assert recipe["dietaryFlags"]["vegan"] is True
            assert recipe["ingredients"][:3] == ["tofu", "broccoli", "soy sauce"]

        first_id = payload["recipes"][0]["id"]
        assert client.post("/api/recipes/save", json={"recipeId": first_id}).status_code == 200
        assert [recipe["id"] for recipe in client.get("/api/recipes/saved").json()] == [first_id]

"""HTTP API for the recipe suggestion service.

Routes:
- POST   /api/recipes/generate       Generate and store three recipes
- GET    /api/recipes                All stored recipes
- GET    /api/recipes/saved          Saved recipes
- GET    /api/recipes/{recipe_id}    One recipe
- POST   /api/recipes/save           Mark a recipe as saved
- DELETE /api/recipes/saved/{id}     Remove a recipe from saved
- GET    /health                     Liveness check

Validation failures return 400 with {"success": false, "message": ...};
response bodies use camelCase field names.
"""

from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from recipe_suggester.generation.generator import RecipeGenerator, generate_and_store, initialize_recipe_generator
from recipe_suggester.models.models import (
    ApiMessage,
    GenerationResponse,
    Recipe,
    RecipeGenerationRequest,
    SaveRecipeRequest,
)
from recipe_suggester.storage.base import RecipeNotFoundError, RecipeStorage
from recipe_suggester.storage.factory import configure_storage
from recipe_suggester.utils.config import config
from recipe_suggester.utils.logger import logger


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ApiMessage(success=False, message=message).model_dump())


def _format_validation_error(exc: RequestValidationError) -> str:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query"))
        details.append(f"{error.get('msg')} at \"{location}\"" if location else str(error.get("msg")))
    return "Validation error: " + "; ".join(details)


def get_storage(request: Request) -> RecipeStorage:
    return request.app.state.storage


def get_generator(request: Request) -> RecipeGenerator:
    return request.app.state.generator


def create_app(generator: Optional[RecipeGenerator] = None, storage: Optional[RecipeStorage] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        generator: Orchestrator to use. Built from configuration when omitted.
        storage: Storage backend. Chosen from DATABASE_URL when omitted.

    Returns:
        Configured FastAPI app.
    """
    app = FastAPI(title="Recipe Suggester API", version="0.1.0")
    app.state.generator = generator if generator is not None else initialize_recipe_generator()
    app.state.storage = storage if storage is not None else configure_storage(config.DATABASE_URL)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _format_validation_error(exc)
        logger.info(f"Rejected {request.method} {request.url.path}: {message}")
        return _error(400, message)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post("/api/recipes/generate", response_model=GenerationResponse)
    async def generate_recipes(
        body: RecipeGenerationRequest,
        generator: RecipeGenerator = Depends(get_generator),
        storage: RecipeStorage = Depends(get_storage),
    ):
        try:
            return await generate_and_store(generator, storage, body)
        except Exception:
            logger.exception("Error generating recipes")
            return _error(500, "Failed to generate recipes. Please try again.")

    @app.get("/api/recipes", response_model=list[Recipe])
    def list_recipes(storage: RecipeStorage = Depends(get_storage)):
        return storage.list_recipes()

    # Registered before /api/recipes/{recipe_id} so "saved" is not parsed as an id
    @app.get("/api/recipes/saved", response_model=list[Recipe])
    def saved_recipes(storage: RecipeStorage = Depends(get_storage)):
        return storage.get_saved_recipes()

    @app.get("/api/recipes/{recipe_id}", response_model=Recipe)
    def get_recipe(recipe_id: int, storage: RecipeStorage = Depends(get_storage)):
        recipe = storage.get_recipe(recipe_id)
        if recipe is None:
            return _error(404, "Recipe not found")
        return recipe

    @app.post("/api/recipes/save", response_model=ApiMessage)
    def save_recipe(body: SaveRecipeRequest, storage: RecipeStorage = Depends(get_storage)):
        try:
            storage.save_recipe(body.recipe_id)
        except RecipeNotFoundError:
            return _error(404, "Recipe not found")
        return ApiMessage(success=True, message="Recipe saved successfully")

    @app.delete("/api/recipes/saved/{recipe_id}", response_model=ApiMessage)
    def remove_saved_recipe(recipe_id: int, storage: RecipeStorage = Depends(get_storage)):
        if recipe_id <= 0:
            return _error(400, "Invalid recipe ID")
        storage.remove_saved_recipe(recipe_id)
        return ApiMessage(success=True, message="Recipe removed from saved recipes")

    return app

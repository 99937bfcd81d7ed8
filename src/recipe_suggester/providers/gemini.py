"""Recipe generation with the Gemini API.

Each `GeminiRecipeProvider` wraps one model. The orchestrator tries providers
in order and treats any `ProviderError` as a signal to move on, so this module
never retries on its own.

Core Functions:
- safe_execute_sync(): Run a callable, log failures, return a default
- parse_provider_response(): Lenient JSON parsing into GeneratedRecipeBatch
- GeminiRecipeProvider.generate(): Single Gemini call (async, bounded by a timeout)
"""

import asyncio
import json
import re
from typing import Optional, Sequence

from google import genai
from google.genai import types

from recipe_suggester.models.models import GeneratedRecipe, GeneratedRecipeBatch
from recipe_suggester.prompts.prompts import build_recipe_prompt, build_system_prompt
from recipe_suggester.utils.logger import logger


class ProviderError(Exception):
    """An external provider failed: network error, timeout, empty or malformed response."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider


# ============================================================================
# Error Handling Helpers
# ============================================================================


def _log_error(operation_name: str, exception: Exception, log_level: str = "warning") -> None:
    """Log error with appropriate level.

    Args:
        operation_name: Description for logging
        exception: Exception that occurred
        log_level: Logging level ("debug", "warning", "error"). Default: "warning".
    """
    msg = f"{operation_name}: {exception}"
    if log_level == "debug":
        logger.debug(msg)
    elif log_level == "error":
        logger.error(msg)
    else:
        logger.warning(msg)


def safe_execute_sync(
    func,
    operation_name: str,
    log_level: str = "warning",
    default_return=None,
):
    """Safely execute sync operation with consistent error logging.

    Used for optional steps that should degrade gracefully, such as trying
    one JSON parsing strategy before another.

    Args:
        func: Callable to execute (no args).
        operation_name: Description for logging.
        log_level: Logging level ("debug", "warning", "error"). Default: "warning".
        default_return: Value to return on exception. Default: None.

    Returns:
        Result of func if successful, otherwise default_return.
    """
    try:
        return func()
    except Exception as e:
        _log_error(operation_name, e, log_level)
        return default_return


def parse_provider_response(response_text: str) -> Optional[GeneratedRecipeBatch]:
    """Parse JSON from a model response into a validated GeneratedRecipeBatch.

    Tries multiple parsing strategies, since models sometimes wrap the JSON in
    prose or markdown fences:
    1. Direct json.loads() on the full response
    2. Regex extraction of the outermost {...} block
    3. Returns None if both fail

    Args:
        response_text: Raw response text from the model.

    Returns:
        Validated GeneratedRecipeBatch, or None if no valid JSON was found or
        schema validation failed.
    """

    def _parse_json_direct():
        return json.loads(response_text)

    def _parse_json_regex():
        json_match = re.search(r"\{.*\}", response_text, re.DOTALL)
        if json_match:
            return json.loads(json_match.group())
        return None

    parsed_dict = safe_execute_sync(
        _parse_json_direct,
        "Direct JSON parse",
        log_level="debug",
        default_return=None,
    )

    if not isinstance(parsed_dict, dict):
        parsed_dict = safe_execute_sync(
            _parse_json_regex,
            "Regex JSON extraction",
            log_level="debug",
            default_return=None,
        )

    if not isinstance(parsed_dict, dict):
        logger.warning("Failed to parse JSON from Gemini response")
        return None

    return safe_execute_sync(
        lambda: GeneratedRecipeBatch.model_validate(parsed_dict),
        "Validate GeneratedRecipeBatch schema",
        log_level="warning",
        default_return=None,
    )


class GeminiRecipeProvider:
    """One Gemini model used as a recipe source.

    Args:
        api_key: Gemini API key.
        model: Model name, e.g. "gemini-2.5-flash". Also used as the provider name.
        temperature: Sampling temperature.
        max_output_tokens: Response token limit.
        timeout_seconds: Upper bound for the whole call.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: float = 0.7,
        max_output_tokens: int = 4096,
        timeout_seconds: float = 30.0,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.timeout_seconds = timeout_seconds

    @property
    def name(self) -> str:
        return self.model

    async def generate(
        self, ingredients: Sequence[str], cuisine: str, dietary: Sequence[str] = ()
    ) -> list[GeneratedRecipe]:
        """Request recipe ideas from the model (single attempt, no retries).

        Returns:
            Recipes parsed from the response, in the order the model produced them.

        Raises:
            ProviderError: On timeout, API failure, empty response or unparseable JSON.

        Note:
            Uses asyncio.to_thread to call the sync Gemini client in async context.
        """
        client = genai.Client(api_key=self.api_key)
        generation_config = types.GenerateContentConfig(
            system_instruction=build_system_prompt(cuisine),
            response_mime_type="application/json",
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
        )

        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    client.models.generate_content,
                    model=self.model,
                    contents=build_recipe_prompt(ingredients, cuisine, dietary),
                    config=generation_config,
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise ProviderError(self.name, f"timed out after {self.timeout_seconds}s") from e
        except Exception as e:
            raise ProviderError(self.name, f"API call failed: {e}") from e

        text = getattr(response, "text", None)
        if not text:
            raise ProviderError(self.name, "empty response")

        batch = parse_provider_response(text)
        if batch is None:
            raise ProviderError(self.name, "malformed recipe JSON")

        logger.debug(f"{self.name} returned {len(batch.recipes)} recipes")
        return batch.recipes

"""Configuration management for Recipe Suggester.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os
from typing import Optional

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()

# Style preset families understood by the recipe assembler
STYLE_PRESETS = ("classic", "skill", "cultural")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Gemini API Key: when empty, recipes come from the rule-based engine only
        self.GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
        # USE_LLM: set to false to skip the external providers even with a key
        self.USE_LLM: bool = _env_bool("USE_LLM", "true")
        # Primary model, tried first
        self.GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        # Secondary model, tried once if the primary fails. Empty string disables it.
        self.GEMINI_FALLBACK_MODEL: str = os.getenv("GEMINI_FALLBACK_MODEL", "gemini-2.5-flash-lite")
        # Temperature: 0.7 gives varied recipe ideas while keeping JSON well-formed
        self.TEMPERATURE: float = float(os.getenv("TEMPERATURE", "0.7"))
        # Three full recipes with instructions fit comfortably in 4096 tokens
        self.MAX_OUTPUT_TOKENS: int = int(os.getenv("MAX_OUTPUT_TOKENS", "4096"))
        # Per-provider request timeout in seconds
        self.PROVIDER_TIMEOUT_SECONDS: float = float(os.getenv("PROVIDER_TIMEOUT_SECONDS", "30"))
        # Style preset family for rule-based recipes: classic, skill or cultural
        self.STYLE_PRESET: str = os.getenv("STYLE_PRESET", "classic").lower()
        # Optional seed that pins rule-engine output (titles, calories, cook times)
        seed = os.getenv("RANDOM_SEED")
        self.RANDOM_SEED: Optional[int] = int(seed) if seed not in (None, "") else None
        # Database URL: SQLAlchemy URL for persistent storage, in-memory storage when unset
        self.DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL") or None
        # Server Port
        self.PORT: int = int(os.getenv("PORT", "7777"))

    @property
    def llm_enabled(self) -> bool:
        """True when at least one external provider can be attempted."""
        return self.USE_LLM and bool(self.GEMINI_API_KEY)

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a setting is outside its allowed range.
        """
        if self.USE_LLM and self.GEMINI_API_KEY and not self.GEMINI_MODEL:
            raise ValueError("GEMINI_MODEL must be set when GEMINI_API_KEY is provided")
        if not (0.0 <= self.TEMPERATURE <= 1.0):
            raise ValueError(
                f"TEMPERATURE must be between 0.0 and 1.0, got: {self.TEMPERATURE}"
            )
        if self.MAX_OUTPUT_TOKENS < 512:
            raise ValueError(
                f"MAX_OUTPUT_TOKENS must be at least 512, got: {self.MAX_OUTPUT_TOKENS}"
            )
        if self.PROVIDER_TIMEOUT_SECONDS <= 0:
            raise ValueError(
                f"PROVIDER_TIMEOUT_SECONDS must be positive, got: {self.PROVIDER_TIMEOUT_SECONDS}"
            )
        if self.STYLE_PRESET not in STYLE_PRESETS:
            raise ValueError(
                f"STYLE_PRESET must be one of {', '.join(STYLE_PRESETS)}, got: {self.STYLE_PRESET}"
            )
        if not (1 <= self.PORT <= 65535):
            raise ValueError(f"PORT must be between 1 and 65535, got: {self.PORT}")


# Create module-level config instance and validate immediately
config = Config()
config.validate()

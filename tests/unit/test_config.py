"""Unit tests for configuration management."""

import pytest

from recipe_suggester.utils.config import STYLE_PRESETS, Config

ENV_VARS = (
    "GEMINI_API_KEY",
    "USE_LLM",
    "GEMINI_MODEL",
    "GEMINI_FALLBACK_MODEL",
    "TEMPERATURE",
    "MAX_OUTPUT_TOKENS",
    "PROVIDER_TIMEOUT_SECONDS",
    "STYLE_PRESET",
    "RANDOM_SEED",
    "DATABASE_URL",
    "PORT",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every setting so defaults apply (a developer .env may already be loaded)."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfigInitialization:
    """Test Config loading from environment variables."""

    def test_config_loads_default_values(self, clean_env):
        config = Config()

        assert config.GEMINI_API_KEY == ""
        assert config.USE_LLM is True
        assert config.GEMINI_MODEL == "gemini-2.5-flash"
        assert config.GEMINI_FALLBACK_MODEL == "gemini-2.5-flash-lite"
        assert config.TEMPERATURE == 0.7
        assert config.MAX_OUTPUT_TOKENS == 4096
        assert config.PROVIDER_TIMEOUT_SECONDS == 30
        assert config.STYLE_PRESET == "classic"
        assert config.RANDOM_SEED is None
        assert config.DATABASE_URL is None
        assert config.PORT == 7777

    def test_config_loads_from_environment(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "test_gemini_key")
        clean_env.setenv("GEMINI_MODEL", "custom-model")
        clean_env.setenv("TEMPERATURE", "0.3")
        clean_env.setenv("MAX_OUTPUT_TOKENS", "2048")
        clean_env.setenv("PROVIDER_TIMEOUT_SECONDS", "12.5")
        clean_env.setenv("STYLE_PRESET", "Cultural")
        clean_env.setenv("RANDOM_SEED", "42")
        clean_env.setenv("DATABASE_URL", "sqlite:///recipes.db")
        clean_env.setenv("PORT", "8888")

        config = Config()

        assert config.GEMINI_API_KEY == "test_gemini_key"
        assert config.GEMINI_MODEL == "custom-model"
        assert config.TEMPERATURE == 0.3
        assert config.MAX_OUTPUT_TOKENS == 2048
        assert config.PROVIDER_TIMEOUT_SECONDS == 12.5
        assert config.STYLE_PRESET == "cultural"
        assert config.RANDOM_SEED == 42
        assert config.DATABASE_URL == "sqlite:///recipes.db"
        assert config.PORT == 8888

    @pytest.mark.parametrize("value,expected", [("true", True), ("1", True), ("YES", True), ("false", False), ("0", False)])
    def test_use_llm_parsing(self, clean_env, value, expected):
        clean_env.setenv("USE_LLM", value)
        assert Config().USE_LLM is expected

    def test_empty_seed_and_database_url_mean_unset(self, clean_env):
        clean_env.setenv("RANDOM_SEED", "")
        clean_env.setenv("DATABASE_URL", "")
        config = Config()
        assert config.RANDOM_SEED is None
        assert config.DATABASE_URL is None

    def test_invalid_number_raises(self, clean_env):
        clean_env.setenv("PORT", "not-a-port")
        with pytest.raises(ValueError):
            Config()


class TestLlmEnabled:
    """Test when external providers are attempted."""

    def test_disabled_without_key(self, clean_env):
        assert Config().llm_enabled is False

    def test_enabled_with_key(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "key")
        assert Config().llm_enabled is True

    def test_use_llm_false_overrides_key(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "key")
        clean_env.setenv("USE_LLM", "false")
        assert Config().llm_enabled is False


class TestConfigValidation:
    """Test Config.validate range checks."""

    def test_defaults_are_valid(self, clean_env):
        Config().validate()

    @pytest.mark.parametrize(
        "name,value,message",
        [
            ("TEMPERATURE", "1.5", "TEMPERATURE must be between 0.0 and 1.0"),
            ("TEMPERATURE", "-0.1", "TEMPERATURE must be between 0.0 and 1.0"),
            ("MAX_OUTPUT_TOKENS", "100", "MAX_OUTPUT_TOKENS must be at least 512"),
            ("PROVIDER_TIMEOUT_SECONDS", "0", "PROVIDER_TIMEOUT_SECONDS must be positive"),
            ("STYLE_PRESET", "gourmet", "STYLE_PRESET must be one of"),
            ("PORT", "70000", "PORT must be between 1 and 65535"),
        ],
    )
    def test_out_of_range_values(self, clean_env, name, value, message):
        clean_env.setenv(name, value)
        with pytest.raises(ValueError, match=message):
            Config().validate()

    def test_model_required_with_key(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "key")
        clean_env.setenv("GEMINI_MODEL", "")
        with pytest.raises(ValueError, match="GEMINI_MODEL must be set"):
            Config().validate()

    def test_empty_model_allowed_without_key(self, clean_env):
        clean_env.setenv("GEMINI_MODEL", "")
        Config().validate()

    @pytest.mark.parametrize("style", STYLE_PRESETS)
    def test_every_style_preset_is_valid(self, clean_env, style):
        clean_env.setenv("STYLE_PRESET", style)
        Config().validate()

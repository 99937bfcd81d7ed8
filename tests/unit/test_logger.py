"""Unit tests for logging infrastructure."""

import json
import logging
import sys

import pytest

from recipe_suggester.utils.logger import JSONFormatter, RichTextFormatter, get_logger, logger


def _record(msg="Test message", level=logging.INFO, name="test_logger", exc_info=None, **extra):
    record = logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test JSONFormatter produces valid JSON output."""

    def test_json_formatter_outputs_valid_json(self):
        parsed = json.loads(JSONFormatter().format(_record()))

        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "test_logger"
        assert parsed["message"] == "Test message"
        assert "timestamp" in parsed

    def test_json_formatter_includes_exception_traceback(self):
        try:
            raise ValueError("Test error")
        except ValueError:
            record = _record("Error occurred", level=logging.ERROR, exc_info=sys.exc_info())

        parsed = json.loads(JSONFormatter().format(record))

        assert "ValueError" in parsed["exception"]

    def test_json_formatter_includes_generation_context(self):
        """Provider and stage extras are copied so logs can be filtered per attempt."""
        record = _record(request_id="req-123", provider="gemini-2.5-flash", stage="provider")

        parsed = json.loads(JSONFormatter().format(record))

        assert parsed["request_id"] == "req-123"
        assert parsed["provider"] == "gemini-2.5-flash"
        assert parsed["stage"] == "provider"

    def test_json_formatter_ignores_unknown_extras(self):
        parsed = json.loads(JSONFormatter().format(_record(session_id="sess-456")))
        assert "session_id" not in parsed


class TestRichTextFormatter:
    """Test RichTextFormatter produces colored text output."""

    @pytest.mark.parametrize(
        "level,icon",
        [
            (logging.DEBUG, "🔍"),
            (logging.INFO, "ℹ️"),
            (logging.WARNING, "⚠️"),
            (logging.ERROR, "❌"),
        ],
    )
    def test_rich_text_formatter_includes_icon(self, level, icon):
        assert icon in RichTextFormatter().format(_record(level=level))

    def test_rich_text_formatter_includes_name_level_and_message(self):
        output = RichTextFormatter().format(_record("Custom message", name="my_logger"))

        assert "INFO" in output
        assert "my_logger" in output
        assert "Custom message" in output

    def test_rich_text_formatter_prefixes_stage(self):
        output = RichTextFormatter().format(_record("Trying provider", stage="provider"))
        assert "[provider] Trying provider" in output

    def test_rich_text_formatter_without_stage(self):
        output = RichTextFormatter().format(_record("Plain"))
        assert "] Plain" not in output
        assert "[None]" not in output

    def test_rich_text_formatter_includes_exception_traceback(self):
        try:
            raise RuntimeError("Test error")
        except RuntimeError:
            record = _record("Error occurred", level=logging.ERROR, exc_info=sys.exc_info())

        output = RichTextFormatter().format(record)

        assert "RuntimeError" in output
        assert "Test error" in output


class TestGetLogger:
    """Test get_logger configuration from environment variables."""

    @staticmethod
    def _fresh(name):
        logging.getLogger(name).handlers.clear()
        return name

    def test_get_logger_reuses_configured_logger(self):
        first = get_logger("recipe_test_reuse")
        second = get_logger("recipe_test_reuse")
        assert first is second
        assert len(second.handlers) == 1

    def test_log_level_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert get_logger(self._fresh("recipe_test_debug")).level == logging.DEBUG

    def test_invalid_log_level_defaults_to_info(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "INVALID")
        assert get_logger(self._fresh("recipe_test_invalid")).level == logging.INFO

    def test_log_type_json(self, monkeypatch):
        monkeypatch.setenv("LOG_TYPE", "json")
        test_logger = get_logger(self._fresh("recipe_test_json"))
        assert isinstance(test_logger.handlers[0].formatter, JSONFormatter)

    def test_log_type_defaults_to_text(self, monkeypatch):
        monkeypatch.delenv("LOG_TYPE", raising=False)
        test_logger = get_logger(self._fresh("recipe_test_text"))
        assert isinstance(test_logger.handlers[0].formatter, RichTextFormatter)


class TestModuleLevelLogger:
    def test_logger_name(self):
        assert logger.name == "recipe_suggester"
        assert logger.handlers

    def test_third_party_loggers_quieted(self):
        assert logging.getLogger("google.genai").level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

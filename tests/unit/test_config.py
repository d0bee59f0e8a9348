"""
Unit tests for configuration and logging setup.
"""

import json
import logging

import pytest

from restassert.config import AssertConfig, JsonLogFormatter, setup_logging


@pytest.fixture
def restore_logger():
    """Restore the package logger after a test configures it."""
    logger = logging.getLogger("restassert")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers


class TestAssertConfig:
    """Tests for AssertConfig."""

    def test_defaults(self):
        """Test default values."""
        config = AssertConfig()

        assert config.log_level == "WARNING"
        assert config.log_format == "text"
        assert config.single_value_headers == ()

    def test_from_env(self, monkeypatch):
        """Test reading environment variables."""
        monkeypatch.setenv("RESTASSERT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RESTASSERT_LOG_FORMAT", "json")
        monkeypatch.setenv("RESTASSERT_SINGLE_VALUE_HEADERS", "X-Request-Id, ,X-Trace-Id")

        config = AssertConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.single_value_headers == ("X-Request-Id", "X-Trace-Id")

    def test_from_env_defaults(self, monkeypatch):
        """Test that unset variables keep the defaults."""
        for name in ("RESTASSERT_LOG_LEVEL", "RESTASSERT_LOG_FORMAT", "RESTASSERT_SINGLE_VALUE_HEADERS"):
            monkeypatch.delenv(name, raising=False)

        assert AssertConfig.from_env() == AssertConfig()

    @pytest.mark.parametrize("kwargs", [
        {"log_level": "LOUD"},
        {"log_format": "xml"},
        {"single_value_headers": ("X-Ok", " ")},
    ])
    def test_validate(self, kwargs):
        """Test that invalid settings are rejected."""
        with pytest.raises(ValueError):
            AssertConfig(**kwargs).validate()

    def test_validate_lowercase_level(self):
        """Test that levels are case-insensitive."""
        AssertConfig(log_level="debug").validate()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level(self, restore_logger):
        """Test that the package logger gets the configured level."""
        logger = setup_logging(AssertConfig(log_level="DEBUG"))

        assert logger is restore_logger
        assert logger.level == logging.DEBUG

    def test_handler_replaced(self, restore_logger):
        """Test that calling twice does not stack handlers."""
        setup_logging(AssertConfig())
        setup_logging(AssertConfig())

        tagged = [h for h in restore_logger.handlers if getattr(h, "_restassert", False)]
        assert len(tagged) == 1

    def test_json_format(self, restore_logger):
        """Test the JSON formatter is installed."""
        setup_logging(AssertConfig(log_format="json"))

        tagged = [h for h in restore_logger.handlers if getattr(h, "_restassert", False)]
        assert isinstance(tagged[0].formatter, JsonLogFormatter)

    def test_json_formatter_output(self):
        """Test one JSON object per record."""
        record = logging.LogRecord("restassert.x", logging.INFO, __file__, 1, "hello %s", ("world",), None)

        data = json.loads(JsonLogFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "restassert.x"
        assert data["message"] == "hello world"

"""
=============================================================================
CONFIGURATION
=============================================================================

Settings shared by every assertion of a test session.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Explicit AssertConfig passed to an assertion                   │
    │      └── is_header_equal_to(..., config=AssertConfig(...))         │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── RESTASSERT_LOG_LEVEL=DEBUG pytest                         │
    │                                                                      │
    │   3. Default values (in this dataclass)                            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The library never configures logging on import. A test suite that wants
to see how values are parsed calls setup_logging() once, typically from
a conftest.py:

    from restassert.config import AssertConfig, setup_logging

    setup_logging(AssertConfig.from_env())

=============================================================================
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Tuple

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass
class AssertConfig:
    """
    Configuration for restassert.

    Example:
        AssertConfig(
            log_level="DEBUG",                          # Show parsing steps
            single_value_headers=("X-Request-Id",),     # Custom header
        )
    """

    log_level: str = "WARNING"
    """
    Logging level of the "restassert" logger.
    DEBUG shows every parsed value and every assertion stage.
    """

    log_format: str = "text"
    """
    Log format: 'json' or 'text'.
    """

    single_value_headers: Tuple[str, ...] = field(default=())
    """
    Header names to treat as single-valued, on top of the well-known
    ones (Content-Type, ETag, Location, ...). Useful for custom headers
    such as X-Request-Id that a server must send only once.
    """

    @classmethod
    def from_env(cls) -> "AssertConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        RESTASSERT_LOG_LEVEL            Logging level (default: WARNING)
        RESTASSERT_LOG_FORMAT           text or json (default: text)
        RESTASSERT_SINGLE_VALUE_HEADERS Comma-separated header names

        =====================================================================
        """
        headers = os.getenv("RESTASSERT_SINGLE_VALUE_HEADERS", "")
        return cls(
            log_level=os.getenv("RESTASSERT_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("RESTASSERT_LOG_FORMAT", "text"),
            single_value_headers=tuple(h.strip() for h in headers.split(",") if h.strip()),
        )

    def validate(self) -> None:
        """Fail fast on values that cannot work."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}. Must be one of {', '.join(LOG_LEVELS)}.")

        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"Invalid log_format: {self.log_format}. Must be 'text' or 'json'.")

        for name in self.single_value_headers:
            if not name or not name.strip():
                raise ValueError("single_value_headers must not contain blank names")


class JsonLogFormatter(logging.Formatter):
    """One JSON object per log record, for log aggregators."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps({
            "time": self.formatTime(record, "%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(config: AssertConfig) -> logging.Logger:
    """
    Configure the "restassert" logger from a config.

    Adds a single stream handler; calling it again replaces the handler
    instead of stacking another one.

    Returns:
        The configured logger.
    """
    config.validate()
    level = getattr(logging, config.log_level.upper(), logging.WARNING)

    logger = logging.getLogger("restassert")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_restassert", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._restassert = True
    if config.log_format == "json":
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
    logger.addHandler(handler)
    return logger

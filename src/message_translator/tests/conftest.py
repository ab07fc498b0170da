"""
Core pytest configuration for the test suite.

Installs the library's logging configuration once per session so formatters
and filters are active while tests run. Tests that assert on log records use
`caplog.set_level(logging.DEBUG, logger="message_translator")`.
"""

from __future__ import annotations

import logging

import pytest

from message_translator.config.settings import Settings
from message_translator.core.logging.builder import setup_logging

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Deterministic settings for tests: ignore any local .env file and log to stderr only.
    """
    return Settings(
        _env_file=None,
        ENV="testing",
        LOG_LEVEL="INFO",
        LOG_FORMAT="text",
        LOG_TO_STDOUT=True,
    )


# autouse: every test runs with the library logging config installed.
@pytest.fixture(scope="session", autouse=True)
def configure_logging(test_settings: Settings):
    setup_logging(test_settings)
    logger.debug("Test session logging configured")
    yield


@pytest.fixture
def restore_logging(test_settings: Settings):
    """
    For tests that reconfigure logging themselves: put the session config back afterwards.
    """
    yield
    setup_logging(test_settings)

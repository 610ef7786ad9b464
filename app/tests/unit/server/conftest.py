"""Fixtures for server module unit tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_settings():
    """Create a mock settings object."""
    settings = MagicMock()
    settings.is_production = False
    settings.PREFIX = "dev-"
    settings.GIT_SHA = "abc123"
    settings.LOG_LEVEL = "INFO"
    settings.model_dump.return_value = {
        "PREFIX": "dev-",
        "LOG_LEVEL": "INFO",
        "greetings": {"DEFAULT_LOCALE": "en", "CATALOG_DOMAIN": "greetings"},
        "server": {"HOST": "127.0.0.1", "PORT": 8080},
    }
    return settings


@pytest.fixture
def mock_logger():
    return MagicMock()

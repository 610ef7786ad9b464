"""
Root-level conftest.py for integration tests.

Runs the real application, lifespan included, against the catalogs shipped
in ``app/locales``.
"""

import pytest
from fastapi.testclient import TestClient

from server import server


@pytest.fixture
def app_with_lifespan(monkeypatch, clear_provider_caches):
    """TestClient whose context runs the application lifespan.

    Greetings settings are reset to their defaults so a developer ``.env``
    cannot point the test run at another catalog.
    """
    monkeypatch.delenv("GREETINGS_LOCALES_DIR", raising=False)
    monkeypatch.delenv("GREETINGS_DEFAULT_LOCALE", raising=False)
    monkeypatch.delenv("GREETINGS_CATALOG_DOMAIN", raising=False)
    with TestClient(server.handler) as client:
        yield client


@pytest.fixture
def client(app_with_lifespan):
    return app_with_lifespan

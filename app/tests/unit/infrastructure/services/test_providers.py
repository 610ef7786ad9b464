"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings(), get_translator() and get_locale_resolver() caching
- Annotated dependency aliases with FastAPI dependency injection
- Dependency override pattern for testing
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from infrastructure.i18n import Locale, LocaleResolver, Translator
from infrastructure.services.dependencies import (
    LocaleResolverDep,
    SettingsDep,
    TranslatorDep,
)
from infrastructure.services.providers import (
    get_locale_resolver,
    get_settings,
    get_translator,
)


@pytest.fixture(autouse=True)
def _reset_providers(clear_provider_caches):
    yield


@pytest.mark.unit
class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_returns_settings_instance(self):
        assert isinstance(get_settings(), Settings)

    def test_returns_cached_instance(self):
        assert get_settings() is get_settings()

    def test_cache_can_be_cleared(self):
        instance1 = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not instance1


@pytest.mark.unit
class TestGetTranslator:
    """Tests for get_translator() provider function."""

    def test_loads_shipped_catalogs(self, monkeypatch):
        monkeypatch.delenv("GREETINGS_LOCALES_DIR", raising=False)

        translator = get_translator()

        assert isinstance(translator, Translator)
        assert Locale("en") in translator.catalogs
        assert translator is get_translator()

    def test_uses_configured_directory(self, monkeypatch, temp_locales_dir):
        monkeypatch.setenv("GREETINGS_LOCALES_DIR", str(temp_locales_dir))

        translator = get_translator()

        assert set(translator.catalogs) == {Locale("en")}


@pytest.mark.unit
def test_get_locale_resolver_is_cached():
    resolver = get_locale_resolver()
    assert isinstance(resolver, LocaleResolver)
    assert resolver.param_name == "lang"
    assert get_locale_resolver() is resolver


@pytest.mark.unit
class TestDependencyOverridePattern:
    """Tests for FastAPI dependency override pattern."""

    def test_settings_dep_with_dependency_override(self):
        app = FastAPI()

        @app.get("/config")
        def get_config(settings: SettingsDep) -> dict:
            return {"git_sha": settings.GIT_SHA}

        mock_settings = MagicMock(spec=Settings)
        mock_settings.GIT_SHA = "override"
        app.dependency_overrides[get_settings] = lambda: mock_settings

        with TestClient(app) as client:
            response = client.get("/config")

        assert response.status_code == 200
        assert response.json() == {"git_sha": "override"}
        app.dependency_overrides.clear()

    def test_translator_and_resolver_deps(self):
        app = FastAPI()

        @app.get("/deps")
        def deps(translator: TranslatorDep, resolver: LocaleResolverDep) -> dict:
            return {
                "locales": [locale.tag for locale in translator.get_available_locales()],
                "param": resolver.param_name,
            }

        fake_translator = MagicMock(spec=Translator)
        fake_translator.get_available_locales.return_value = [Locale("es")]
        app.dependency_overrides[get_translator] = lambda: fake_translator

        with TestClient(app) as client:
            response = client.get("/deps")

        assert response.json() == {"locales": ["es"], "param": "lang"}
        app.dependency_overrides.clear()

"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleResolver, Translator, create_translator


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Infrastructure packages should use this directly:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator() -> Translator:
    """
    Get the application-scoped message catalog.

    Catalogs are loaded once from ``settings.greetings.LOCALES_DIR`` and are
    read-only afterwards, so the instance is shared across requests.

    Returns:
        Translator: Preloaded translator for the configured catalog domain.
    """
    settings = get_settings()
    return create_translator(
        translations_dir=settings.greetings.LOCALES_DIR,
        domain=settings.greetings.CATALOG_DOMAIN,
    )


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """Get the resolver for the ``lang`` request parameter."""
    return LocaleResolver(param_name="lang")

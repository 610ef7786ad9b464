"""Providers and FastAPI dependency aliases for the greetings module."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from infrastructure.i18n import Locale
from infrastructure.services.providers import get_settings, get_translator
from modules.greetings.errors import CatalogConfigurationError
from modules.greetings.resolver import (
    GreetingResolver,
    GreetingsConfig,
    build_greetings_config,
)


@lru_cache
def get_greetings_config() -> GreetingsConfig:
    """Build the resolver configuration from the default locale catalog.

    Raises:
        CatalogConfigurationError: If the catalogs cannot be loaded or the
            default locale catalog is incomplete.
    """
    settings = get_settings()
    try:
        translator = get_translator()
        default_locale = Locale.from_string(settings.greetings.DEFAULT_LOCALE)
    except ValueError as exc:
        raise CatalogConfigurationError(str(exc)) from exc
    return build_greetings_config(translator, default_locale)


@lru_cache
def get_greeting_resolver() -> GreetingResolver:
    """Get the application-scoped greeting resolver."""
    return GreetingResolver(get_translator(), get_greetings_config())


GreetingResolverDep = Annotated[GreetingResolver, Depends(get_greeting_resolver)]

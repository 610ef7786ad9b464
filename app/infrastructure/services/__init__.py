"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    TranslatorDep,
    LocaleResolverDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_translator,
    get_locale_resolver,
)

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "LocaleResolverDep",
    "get_settings",
    "get_translator",
    "get_locale_resolver",
]

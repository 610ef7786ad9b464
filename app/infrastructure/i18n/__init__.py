"""i18n system - message catalogs and locale resolution.

Main components:
- models: Locale, TranslationKey, TranslationCatalog, LocaleResolution
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator with Option-style lookup and variable interpolation
- resolvers: LocaleResolver for the ``lang`` request parameter
- factory: create_translator()
"""

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import (
    Locale,
    LocaleResolution,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import Translator, interpolate

__all__ = [
    "Locale",
    "LocaleResolution",
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "LocaleResolver",
    "create_translator",
    "interpolate",
]

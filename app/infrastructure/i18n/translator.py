"""Translation service for retrieving and interpolating translated messages.

Lookups walk the locale candidate chain (``en-AU`` then ``en``) and report a
missing message as ``None`` rather than echoing the key back, so an absent
entry can never be confused with real content.
"""

import re
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import structlog

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import Locale, TranslationCatalog, TranslationKey

logger = structlog.get_logger(component="i18n.translator")

_DOUBLE_BRACE = re.compile(r"\{\{(\w+)\}\}")
_SINGLE_BRACE = re.compile(r"\{(\w+)\}")


def interpolate(message: str, variables: Optional[Mapping[str, Any]] = None) -> str:
    """Replace ``{{name}}`` and ``{name}`` placeholders with values.

    Raises:
        ValueError: If a placeholder has no matching variable.
    """
    variables = variables or {}
    double_matches = _DOUBLE_BRACE.findall(message)
    single_matches = _SINGLE_BRACE.findall(message)

    for var_name in dict.fromkeys(double_matches + single_matches):
        if var_name not in variables:
            logger.error(
                "missing_interpolation_variable",
                variable=var_name,
                available_variables=list(variables.keys()),
            )
            raise ValueError(f"Missing interpolation variable: {var_name}")

    # Double-brace first so "{{x}}" is not left as "{value}"
    for var_name in double_matches:
        message = message.replace(f"{{{{{var_name}}}}}", str(variables[var_name]))
    for var_name in single_matches:
        message = message.replace(f"{{{var_name}}}", str(variables[var_name]))

    return message


class Translator:
    """Read-only message catalog over every loaded locale.

    Attributes:
        loader: TranslationLoader used to populate the catalogs.
        catalogs: Loaded TranslationCatalogs by locale. Replaced wholesale by
            load_all(), never mutated in place.
    """

    def __init__(self, loader: TranslationLoader):
        self.loader = loader
        self.catalogs: Mapping[Locale, TranslationCatalog] = MappingProxyType({})

    def load_all(self) -> None:
        """Load all available locales from loader."""
        self.catalogs = MappingProxyType(dict(self.loader.load_all()))
        logger.info(
            "loaded_all_translations",
            locales=sorted(locale.tag for locale in self.catalogs),
        )

    def lookup(self, key: TranslationKey, locale: Locale) -> Optional[str]:
        """Find a message for ``key`` in ``locale`` or its language-only parent.

        Returns:
            The message (possibly an empty string), or None if no candidate
            catalog defines the key.
        """
        for candidate in locale.candidates():
            catalog = self.catalogs.get(candidate)
            if catalog is None:
                continue
            message = catalog.get_message(key)
            if message is not None:
                return message
        return None

    def translate_message(
        self,
        key: TranslationKey,
        locale: Locale,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Raises:
            KeyError: If no candidate catalog defines the key.
            ValueError: If a placeholder has no matching variable.
        """
        message = self.lookup(key, locale)
        if message is None:
            logger.error("translation_not_found", key=str(key), locale=locale.tag)
            raise KeyError(f"Translation not found for key {key} in {locale.tag}")
        return interpolate(message, variables)

    def has_message(self, key: TranslationKey, locale: Locale) -> bool:
        return self.lookup(key, locale) is not None

    def get_available_locales(self) -> list[Locale]:
        """Loaded locales sorted by tag."""
        return sorted(self.catalogs.keys(), key=lambda locale: locale.tag)

    def get_catalog(self, locale: Locale) -> Optional[TranslationCatalog]:
        """Exact catalog for a locale, without candidate fallback."""
        return self.catalogs.get(locale)

"""Test data factories for the i18n system and greeting catalogs.

Provides deterministic builders for:
- Locale / TranslationKey / TranslationCatalog
- Greeting catalog YAML files
"""

from pathlib import Path
from typing import Optional

import yaml

from infrastructure.i18n import Locale, TranslationCatalog, TranslationKey


def make_locale(language: str = "en", region: str = "US") -> Locale:
    return Locale(language=language, region=region)


def make_translation_key(
    namespace: str = "greeting", message_key: str = "timesensitive.morning"
) -> TranslationKey:
    return TranslationKey(namespace=namespace, message_key=message_key)


def make_translation_catalog(
    locale: Optional[Locale] = None,
    messages: Optional[dict] = None,
    loaded_at: Optional[str] = None,
) -> TranslationCatalog:
    """Create a read-only TranslationCatalog.

    Args:
        locale: Locale for the catalog (default: en-US).
        messages: Flat dict {namespace: {key: message}}.
        loaded_at: ISO 8601 timestamp.
    """
    if messages is None:
        messages = {
            "greeting": {
                "timesensitive.morning": "Good morning",
                "timesinsensitive.general": "Hi",
            }
        }
    return TranslationCatalog.from_dict(
        locale or make_locale(), messages, loaded_at=loaded_at
    )


def make_greeting_messages(
    morning: Optional[str] = "Good morning",
    afternoon: Optional[str] = "Good afternoon",
    evening: Optional[str] = "Good evening",
    general: Optional[str] = "Hello",
    time_insensitive: Optional[str] = "Hi",
    with_errors: bool = False,
) -> dict:
    """Nested catalog data as written in the YAML files.

    Passing None for a text leaves the key out entirely.
    """
    timesensitive = {
        key: value
        for key, value in (
            ("morning", morning),
            ("afternoon", afternoon),
            ("evening", evening),
            ("general", general),
        )
        if value is not None
    }
    greeting: dict = {}
    if timesensitive:
        greeting["timesensitive"] = timesensitive
    if time_insensitive is not None:
        greeting["timesinsensitive"] = {"general": time_insensitive}
    if with_errors:
        greeting["error"] = {
            "language_not_supported": "Greetings in language '{{language}}' are not supported.",
            "general": "The greeting cannot be returned.",
        }
    return {"greeting": greeting}


def write_catalog(
    directory: Path, locale_tag: str, data: dict, domain: str = "greetings"
) -> Path:
    """Write ``<domain>.<locale_tag>.yml`` and return its path."""
    path = Path(directory) / f"{domain}.{locale_tag}.yml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, allow_unicode=True)
    return path

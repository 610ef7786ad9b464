"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_greeting_messages,
    make_locale,
    make_translation_catalog,
    make_translation_key,
    write_catalog,
)

__all__ = [
    "make_greeting_messages",
    "make_locale",
    "make_translation_catalog",
    "make_translation_key",
    "write_catalog",
]

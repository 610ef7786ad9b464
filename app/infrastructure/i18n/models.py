"""Translation models for i18n system.

Defines core data structures for managing translations and locales.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

LOCALE_PATTERN = re.compile(
    r"^(?P<language>[A-Za-z]{2})(?:[-_](?P<region>[A-Za-z]{2}))?$"
)


@dataclass(frozen=True)
class Locale:
    """A (language, region) pair identifying a set of translated messages.

    Language is a lowercase 2-letter code, region an uppercase 2-letter code
    or empty. Values are case-normalized on construction, so ``Locale("EN", "us")``
    equals ``Locale("en", "US")``.
    """

    language: str
    region: str = ""

    def __post_init__(self) -> None:
        language = (self.language or "").lower()
        region = (self.region or "").upper()
        if not re.fullmatch(r"[a-z]{2}", language):
            raise ValueError(f"Invalid language code: {self.language!r}")
        if region and not re.fullmatch(r"[A-Z]{2}", region):
            raise ValueError(f"Invalid region code: {self.region!r}")
        object.__setattr__(self, "language", language)
        object.__setattr__(self, "region", region)

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Parse ``xx``, ``xx-YY`` or ``xx_YY`` (case-insensitive).

        Args:
            locale_str: Locale string (e.g., "en-US", "cs_CZ", "es").

        Returns:
            Parsed Locale.

        Raises:
            ValueError: If locale string is not in one of the accepted forms.
        """
        match = LOCALE_PATTERN.match((locale_str or "").strip())
        if match is None:
            raise ValueError(f"Unsupported locale: {locale_str}")
        return cls(match.group("language"), match.group("region") or "")

    @property
    def tag(self) -> str:
        """Hyphenated tag used in catalog file names (e.g. "en-US", "es")."""
        if self.region:
            return f"{self.language}-{self.region}"
        return self.language

    def candidates(self) -> tuple["Locale", ...]:
        """Locales to search for a message, most specific first.

        ``en-AU`` yields ``(en-AU, en)``; a language-only locale yields itself.
        """
        if self.region:
            return (self, Locale(self.language))
        return (self,)

    def __str__(self) -> str:
        return self.tag


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key for accessing translated messages.

    Keys are hierarchical (e.g., "greeting.timesensitive.morning").
    Frozen to ensure immutability and hashability.

    Attributes:
        namespace: Top-level namespace (e.g., "greeting").
        message_key: Message identifier inside the namespace, possibly dotted
            (e.g., "timesensitive.morning").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Args:
            key_string: Dot-separated key (e.g., "greeting.error.general").

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If key_string does not contain at least one dot.
        """
        parts = key_string.split(".", 1)
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                f"Translation key must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=parts[0], message_key=parts[1])


@dataclass(frozen=True)
class TranslationCatalog:
    """Read-only container for the translations of a single locale.

    Attributes:
        locale: The Locale this catalog is for.
        messages: Read-only mapping {namespace: {key: message_string}}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    locale: Locale
    messages: Mapping[str, Mapping[str, str]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    loaded_at: Optional[str] = None

    @classmethod
    def from_dict(
        cls,
        locale: Locale,
        messages: Mapping[str, Mapping[str, str]],
        loaded_at: Optional[str] = None,
    ) -> "TranslationCatalog":
        """Build a catalog whose message mappings cannot be mutated."""
        frozen = {
            namespace: MappingProxyType(dict(entries))
            for namespace, entries in messages.items()
        }
        return cls(locale=locale, messages=MappingProxyType(frozen), loaded_at=loaded_at)

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a translation message by key.

        Returns:
            Translated message string (possibly empty), or None if absent.
        """
        return self.get_namespace(key.namespace).get(key.message_key)

    def has_message(self, key: TranslationKey) -> bool:
        return key.message_key in self.get_namespace(key.namespace)

    def get_namespace(self, namespace: str) -> Mapping[str, str]:
        return self.messages.get(namespace, MappingProxyType({}))

    def __len__(self) -> int:
        return sum(len(entries) for entries in self.messages.values())


@dataclass(frozen=True)
class LocaleResolution:
    """Outcome of parsing a ``lang`` request parameter.

    Attributes:
        raw: The parameter value as received ("" when absent).
        locale: Parsed Locale, or None when the value was absent or unparsable.
    """

    raw: str
    locale: Optional[Locale] = None

    @property
    def has_lang(self) -> bool:
        return self.locale is not None

"""Greeting lookup with a two-level fallback chain.

A locale may define only the coarse general greetings while other locales
also carry one greeting per period of the day. Lookups degrade from the
specific key to ``greeting.timesensitive.general`` before a locale is
reported as unsupported.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from infrastructure.i18n import Locale, TranslationKey, Translator, interpolate
from infrastructure.logging import get_module_logger
from modules.greetings.errors import (
    CatalogConfigurationError,
    LanguageNotSupportedError,
)
from modules.greetings.time_periods import TimePeriod

logger = get_module_logger()


class GreetingKey(str, Enum):
    """Catalog keys of the greeting texts."""

    MORNING = "greeting.timesensitive.morning"
    AFTERNOON = "greeting.timesensitive.afternoon"
    EVENING = "greeting.timesensitive.evening"
    GENERAL_TIME_SENSITIVE = "greeting.timesensitive.general"
    GENERAL_TIME_INSENSITIVE = "greeting.timesinsensitive.general"

    @property
    def translation_key(self) -> TranslationKey:
        return TranslationKey.from_string(self.value)


class ErrorMessageKey(str, Enum):
    """Catalog keys of the error texts, read from the default locale."""

    LANGUAGE_NOT_SUPPORTED = "greeting.error.language_not_supported"
    GENERAL = "greeting.error.general"

    @property
    def translation_key(self) -> TranslationKey:
        return TranslationKey.from_string(self.value)


PERIOD_KEYS: dict[TimePeriod, GreetingKey] = {
    TimePeriod.MORNING: GreetingKey.MORNING,
    TimePeriod.AFTERNOON: GreetingKey.AFTERNOON,
    TimePeriod.EVENING: GreetingKey.EVENING,
    TimePeriod.GENERAL: GreetingKey.GENERAL_TIME_SENSITIVE,
}


@dataclass(frozen=True)
class GreetingsConfig:
    """Startup-time configuration of the resolver.

    Attributes:
        default_locale: Locale whose catalog defines every key.
        general_error_message: Text used when a greeting cannot be returned.
        language_not_supported_template: Template with a ``{{language}}``
            placeholder for LanguageNotSupportedError messages.
    """

    default_locale: Locale
    general_error_message: str
    language_not_supported_template: str

    def language_not_supported_message(self, language: str) -> str:
        return interpolate(
            self.language_not_supported_template, {"language": language}
        )


def build_greetings_config(
    translator: Translator, default_locale: Locale
) -> GreetingsConfig:
    """Check the default locale catalog and read the error texts from it.

    Raises:
        CatalogConfigurationError: If the default locale is missing any
            greeting or error key.
    """
    required = [key.translation_key for key in GreetingKey] + [
        key.translation_key for key in ErrorMessageKey
    ]
    missing = [
        str(key) for key in required if not translator.has_message(key, default_locale)
    ]
    if missing:
        logger.error(
            "default_locale_incomplete",
            default_locale=default_locale.tag,
            missing_keys=missing,
        )
        raise CatalogConfigurationError(
            f"Default locale {default_locale.tag} is missing keys: {', '.join(missing)}"
        )

    return GreetingsConfig(
        default_locale=default_locale,
        general_error_message=translator.translate_message(
            ErrorMessageKey.GENERAL.translation_key, default_locale
        ),
        # Raw template, rendered per request
        language_not_supported_template=translator.lookup(
            ErrorMessageKey.LANGUAGE_NOT_SUPPORTED.translation_key, default_locale
        )
        or "",
    )


class GreetingResolver:
    """Finds the best matching greeting text for a locale.

    Holds no mutable state; one instance serves all requests.
    """

    def __init__(self, translator: Translator, config: GreetingsConfig):
        self.translator = translator
        self.config = config

    def _lookup(self, key: GreetingKey, locale: Locale) -> Optional[str]:
        return self.translator.lookup(key.translation_key, locale)

    def _not_supported(self, locale: Locale) -> LanguageNotSupportedError:
        message = self.config.language_not_supported_message(locale.language)
        logger.warning(
            "language_not_supported", locale=locale.tag, language=locale.language
        )
        return LanguageNotSupportedError(locale.language, message)

    def resolve_time_sensitive(self, period: TimePeriod, locale: Locale) -> str:
        """Greeting for a period of the day.

        Falls back to the general time sensitive greeting of the same locale
        when the period specific one is missing.

        Raises:
            LanguageNotSupportedError: If neither text exists for the locale.
        """
        key = PERIOD_KEYS[period]
        greeting = self._lookup(key, locale)
        if greeting is not None:
            logger.info("greeting_resolved", locale=locale.tag, key=key.value)
            return greeting

        if key is not GreetingKey.GENERAL_TIME_SENSITIVE:
            greeting = self._lookup(GreetingKey.GENERAL_TIME_SENSITIVE, locale)
            if greeting is not None:
                logger.warning(
                    "greeting_fallback_used",
                    locale=locale.tag,
                    period=period.value,
                    requested_key=key.value,
                    fallback_key=GreetingKey.GENERAL_TIME_SENSITIVE.value,
                )
                return greeting

        raise self._not_supported(locale)

    def resolve_time_insensitive(self, locale: Locale) -> str:
        """Greeting that does not depend on the time of day.

        Falls back to the general time sensitive greeting of the same locale.

        Raises:
            LanguageNotSupportedError: If neither text exists for the locale.
        """
        greeting = self._lookup(GreetingKey.GENERAL_TIME_INSENSITIVE, locale)
        if greeting is not None:
            logger.info(
                "greeting_resolved",
                locale=locale.tag,
                key=GreetingKey.GENERAL_TIME_INSENSITIVE.value,
            )
            return greeting

        greeting = self._lookup(GreetingKey.GENERAL_TIME_SENSITIVE, locale)
        if greeting is not None:
            logger.warning(
                "greeting_fallback_used",
                locale=locale.tag,
                requested_key=GreetingKey.GENERAL_TIME_INSENSITIVE.value,
                fallback_key=GreetingKey.GENERAL_TIME_SENSITIVE.value,
            )
            return greeting

        raise self._not_supported(locale)

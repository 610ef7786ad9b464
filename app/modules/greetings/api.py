"""HTTP endpoints of the greetings module."""

from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from infrastructure.i18n import Locale, LocaleResolution
from infrastructure.logging import get_module_logger
from infrastructure.services import LocaleResolverDep, SettingsDep, TranslatorDep
from modules.greetings.dependencies import GreetingResolverDep
from modules.greetings.errors import MissingParameterError
from modules.greetings.time_periods import USERS_TIME_PARAM, classify

logger = get_module_logger()

router = APIRouter(prefix="/api/greeting", tags=["Greetings"])

LANG_PARAM = "lang"


def _require_locale(resolution: LocaleResolution) -> Locale:
    """Reject requests without a usable ``lang`` before any catalog lookup."""
    if resolution.locale is None:
        logger.error("missing_lang_parameter", value=resolution.raw)
        raise MissingParameterError(LANG_PARAM, resolution.raw)
    return resolution.locale


# Example: /api/greeting/timesensitive?usersTime=17:10&lang=en-US
@router.get("/timesensitive", response_class=PlainTextResponse)
def get_greeting_time_sensitive(
    resolver: GreetingResolverDep,
    locale_resolver: LocaleResolverDep,
    users_time: Annotated[str, Query(alias=USERS_TIME_PARAM)] = "",
    lang: str = "",
) -> str:
    """Greeting for the user's time of day in the requested language."""
    locale = _require_locale(locale_resolver.resolve_from_param(lang))
    if not users_time:
        logger.error("missing_users_time_parameter")
        raise MissingParameterError(USERS_TIME_PARAM, users_time)

    greeting = resolver.resolve_time_sensitive(classify(users_time), locale)
    logger.info("time_sensitive_greeting_retrieved", locale=locale.tag)
    return greeting


# Example: /api/greeting/timeinsensitive?lang=cs_CS
@router.get("/timeinsensitive", response_class=PlainTextResponse)
def get_greeting_time_insensitive(
    resolver: GreetingResolverDep,
    locale_resolver: LocaleResolverDep,
    lang: str = "",
) -> str:
    """Greeting independent of the time of day in the requested language."""
    locale = _require_locale(locale_resolver.resolve_from_param(lang))

    greeting = resolver.resolve_time_insensitive(locale)
    logger.info("time_insensitive_greeting_retrieved", locale=locale.tag)
    return greeting


@router.get("/locales")
def list_locales(translator: TranslatorDep, settings: SettingsDep):
    """Locales with a loaded catalog."""
    return {
        "default_locale": settings.greetings.DEFAULT_LOCALE,
        "locales": [locale.tag for locale in translator.get_available_locales()],
    }

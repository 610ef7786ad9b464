"""Locale resolution for incoming requests.

Turns the free-form ``lang`` request parameter into a LocaleResolution that
states explicitly whether a usable language was supplied.
"""

from typing import Optional

import structlog

from infrastructure.i18n.models import Locale, LocaleResolution


class LocaleResolver:
    """Resolves the request locale from the ``lang`` query parameter.

    Accepted forms are ``xx``, ``xx-YY`` and ``xx_YY`` in any letter case.
    Anything else, including an absent or blank value, resolves to a
    LocaleResolution with ``has_lang`` False.
    """

    def __init__(self, param_name: str = "lang"):
        self.param_name = param_name
        self.log = structlog.get_logger(
            component="i18n.resolver", param_name=param_name
        )

    def resolve_from_param(self, value: Optional[str]) -> LocaleResolution:
        raw = value or ""
        if not raw.strip():
            self.log.info("locale_parameter_missing")
            return LocaleResolution(raw=raw)

        try:
            locale = Locale.from_string(raw)
        except ValueError:
            self.log.warning("invalid_locale_string", value=raw)
            return LocaleResolution(raw=raw)

        return LocaleResolution(raw=raw, locale=locale)

"""Greetings module - localized greetings by language and time of day.

Public API:
    - classify(): ``HH:mm`` string to TimePeriod
    - GreetingResolver: catalog lookup with fallback
    - router: FastAPI routes under /api/greeting
"""

from modules.greetings.api import router
from modules.greetings.errors import (
    CatalogConfigurationError,
    GreetingsError,
    InvalidParameterError,
    LanguageNotSupportedError,
    MissingParameterError,
)
from modules.greetings.resolver import (
    GreetingKey,
    GreetingResolver,
    GreetingsConfig,
    build_greetings_config,
)
from modules.greetings.time_periods import TimePeriod, classify

__all__ = [
    "router",
    "classify",
    "TimePeriod",
    "GreetingKey",
    "GreetingResolver",
    "GreetingsConfig",
    "build_greetings_config",
    "GreetingsError",
    "MissingParameterError",
    "InvalidParameterError",
    "LanguageNotSupportedError",
    "CatalogConfigurationError",
]

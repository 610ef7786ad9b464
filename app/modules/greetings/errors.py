"""Errors for the greetings module.

Every error is raised where it is detected and rendered by the API layer;
none of them is retried, they depend only on the request input.
"""

from typing import Any


class GreetingsError(Exception):
    """Base exception for all greetings errors."""


class MissingParameterError(GreetingsError):
    """A required request parameter is absent or empty.

    Attributes:
        name: Request parameter name (e.g. "lang").
        value: Value as received, "" when absent.
    """

    def __init__(self, name: str, value: Any = ""):
        super().__init__(f"Missing required parameter '{name}'.")
        self.name = name
        self.value = value


class InvalidParameterError(GreetingsError):
    """A request parameter is present but malformed.

    Attributes:
        name: Request parameter name (e.g. "usersTime").
        value: The offending raw value.
    """

    def __init__(self, name: str, value: Any):
        super().__init__(f"Invalid value '{value}' for parameter '{name}'.")
        self.name = name
        self.value = value


class LanguageNotSupportedError(GreetingsError):
    """No greeting exists for a locale, even after fallback.

    Attributes:
        language: Language code of the rejected locale (e.g. "ch").
    """

    def __init__(self, language: str, message: str = ""):
        super().__init__(message or f"Language '{language}' is not supported.")
        self.language = language


class CatalogConfigurationError(GreetingsError):
    """The message catalog cannot serve as the greetings source.

    Raised at startup, e.g. when the default locale lacks a required key.
    """

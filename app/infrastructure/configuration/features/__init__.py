"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.greetings import GreetingsFeatureSettings

__all__ = [
    "GreetingsFeatureSettings",
]

"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the greetings
service using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    GreetingsFeatureSettings: Greeting catalog settings class
    ServerSettings: HTTP server settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    locales_dir = settings.greetings.LOCALES_DIR
    port = settings.server.PORT

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features import GreetingsFeatureSettings
from infrastructure.configuration.infrastructure import ServerSettings

__all__ = ["Settings", "GreetingsFeatureSettings", "ServerSettings"]

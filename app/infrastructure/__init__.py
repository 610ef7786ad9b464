"""Infrastructure modules for the greetings service.

Centralized infrastructure components:
- configuration: Settings management (Settings and its sections)
- logging: Structured logging setup and request context binding
- i18n: Message catalogs and locale resolution
- services: Dependency injection services (SettingsDep, TranslatorDep, get_settings)
"""

from infrastructure.logging import get_module_logger
from infrastructure.services import (
    SettingsDep,
    TranslatorDep,
    get_settings,
    get_translator,
)

__all__ = [
    "get_module_logger",
    "SettingsDep",
    "TranslatorDep",
    "get_settings",
    "get_translator",
]

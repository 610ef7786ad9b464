"""Greetings feature settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class GreetingsFeatureSettings(FeatureSettings):
    """Greeting catalog configuration.

    Environment Variables:
        GREETINGS_LOCALES_DIR: Directory holding the YAML message catalogs.
            Defaults to the ``locales`` directory shipped with the application.
        GREETINGS_DEFAULT_LOCALE: Locale tag whose catalog must define every
            greeting and error message (default: en)
        GREETINGS_CATALOG_DOMAIN: File name prefix of the catalog files,
            e.g. ``greetings`` for ``greetings.en-US.yml`` (default: greetings)

    Example:
        ```python
        from infrastructure.services import get_settings

        default_locale = get_settings().greetings.DEFAULT_LOCALE
        ```
    """

    LOCALES_DIR: Optional[Path] = Field(default=None, alias="GREETINGS_LOCALES_DIR")
    DEFAULT_LOCALE: str = Field(default="en", alias="GREETINGS_DEFAULT_LOCALE")
    CATALOG_DOMAIN: str = Field(default="greetings", alias="GREETINGS_CATALOG_DOMAIN")

    @field_validator("DEFAULT_LOCALE", mode="before")
    @classmethod
    def normalize_default_locale(cls, v: Optional[str]) -> str:
        """Accept ``en_US`` as well as ``en-US``."""
        if not v:
            return "en"
        return str(v).strip().replace("_", "-")

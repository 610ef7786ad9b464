"""Translation loading interface and implementations.

Defines the contract for loading translations and provides YAML-based loader.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml

from infrastructure.i18n.models import Locale, TranslationCatalog

logger = structlog.get_logger(component="i18n.loader")


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to load and parse translation files
    for different locales.
    """

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Load translations for a specific locale.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load translations for all locales the source provides."""


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML-based translation files.

    Expects files named ``<domain>.<locale>.yml`` (e.g. ``greetings.en-US.yml``)
    in the translations directory. Nested mappings below the namespace are
    flattened into dotted message keys::

        greeting:
          timesensitive:
            morning: Good morning

    becomes namespace ``greeting``, key ``timesensitive.morning``.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        domain: Optional file name prefix; other files are ignored.
        cache: Loaded catalogs (locale -> catalog) when caching is enabled.
    """

    def __init__(
        self,
        translations_dir: Path,
        domain: Optional[str] = None,
        use_cache: bool = True,
    ):
        self.translations_dir = Path(translations_dir)
        self.domain = domain
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            domain=domain,
            use_cache=use_cache,
        )

    def _pattern(self, locale_tag: str) -> str:
        prefix = self.domain if self.domain else "*"
        return f"{prefix}.{locale_tag}.yml"

    def load(self, locale: Locale) -> TranslationCatalog:
        """Load translations for a locale from YAML files.

        Merges every matching file into a single catalog; later files
        (in name order) override earlier ones.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            return self.cache[locale]

        yaml_files = sorted(self.translations_dir.glob(self._pattern(locale.tag)))
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.tag} in {self.translations_dir}"
            )

        messages: Dict[str, Dict[str, str]] = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e
            if data:
                self._merge_yaml_data(messages, data, yaml_file)

        catalog = TranslationCatalog.from_dict(
            locale,
            messages,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        logger.info(
            "loaded_translations",
            locale=locale.tag,
            file_count=len(yaml_files),
            message_count=len(catalog),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Detect available locales from file names and load each.

        Raises:
            ValueError: If no translation files found at all.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob(self._pattern("*")):
            # "greetings.en-US.yml" -> "en-US"
            parts = yaml_file.stem.split(".")
            if len(parts) < 2:
                continue
            try:
                locales_found.add(Locale.from_string(parts[-1]))
            except ValueError:
                logger.warning("skipped_unrecognized_locale_file", file=yaml_file.name)

        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return {locale: self.load(locale) for locale in locales_found}

    def _merge_yaml_data(
        self,
        messages: Dict[str, Dict[str, str]],
        data: Any,
        source_file: Path,
    ) -> None:
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for namespace, entries in data.items():
            if not isinstance(entries, dict):
                logger.warning(
                    "invalid_namespace_format",
                    file=str(source_file),
                    namespace=namespace,
                    expected="dict",
                )
                continue
            target = messages.setdefault(str(namespace), {})
            self._flatten(target, entries, prefix="", source_file=source_file)

    def _flatten(
        self,
        target: Dict[str, str],
        entries: Dict[Any, Any],
        prefix: str,
        source_file: Path,
    ) -> None:
        for key, value in entries.items():
            full_key = f"{prefix}{key}"
            if isinstance(value, dict):
                self._flatten(target, value, f"{full_key}.", source_file)
            elif value is None:
                # An empty message must be written as "" to count as present
                logger.warning(
                    "null_translation_skipped", file=str(source_file), key=full_key
                )
            else:
                target[full_key] = str(value)

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()

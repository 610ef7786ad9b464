"""Factory functions for creating i18n components."""

from pathlib import Path
from typing import Optional

import structlog

from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger(component="i18n.factory")

DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parents[2] / "locales"


def create_translator(
    translations_dir: Optional[Path] = None,
    domain: Optional[str] = None,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    If no translations_dir is provided, uses the ``locales`` directory
    shipped next to the application packages.

    Args:
        translations_dir: Path to YAML translation files (default: app/locales)
        domain: Catalog file prefix to load (default: every ``*.yml`` file)
        preload: Whether to load all locales immediately (default: True)

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist or holds no catalogs

    Usage:
        translator = create_translator(domain="greetings")
    """
    if translations_dir is None:
        translations_dir = DEFAULT_TRANSLATIONS_DIR

    loader = YAMLTranslationLoader(translations_dir=translations_dir, domain=domain)
    translator = Translator(loader=loader)

    if preload:
        translator.load_all()

    logger.info(
        "translator_created",
        translations_dir=str(translations_dir),
        domain=domain,
        preload=preload,
        locale_count=len(translator.catalogs),
    )
    return translator

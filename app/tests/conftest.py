import sys
from pathlib import Path

# Make the application packages importable regardless of how pytest is invoked.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.services import providers  # noqa: E402
from modules.greetings import dependencies as greetings_dependencies  # noqa: E402
from tests.factories.i18n import make_greeting_messages, write_catalog  # noqa: E402


@pytest.fixture
def clear_provider_caches():
    """Drop cached singletons so a test can change the environment."""

    def _clear():
        providers.get_settings.cache_clear()
        providers.get_translator.cache_clear()
        providers.get_locale_resolver.cache_clear()
        greetings_dependencies.get_greetings_config.cache_clear()
        greetings_dependencies.get_greeting_resolver.cache_clear()

    _clear()
    yield _clear
    _clear()


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Locales directory holding a complete default ``en`` catalog only."""
    write_catalog(tmp_path, "en", make_greeting_messages(with_errors=True))
    return tmp_path

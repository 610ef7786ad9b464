"""Feature-level fixtures for i18n system tests."""

import pytest

from infrastructure.i18n import YAMLTranslationLoader
from tests.factories.i18n import make_greeting_messages, write_catalog


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Temporary directory with sample YAML catalogs.

    - greetings.en.yml     full greetings plus error texts
    - greetings.en-US.yml  full greetings
    - greetings.de.yml     general greetings only
    - other.en.yml         a second domain
    - README.yml           no locale in the name
    """
    write_catalog(tmp_path, "en", make_greeting_messages(with_errors=True))
    write_catalog(
        tmp_path,
        "en-US",
        make_greeting_messages(
            morning="Good morning!",
            afternoon="Good afternoon!",
            evening="Good evening!",
            general="Hello!",
            time_insensitive="Hi there!",
        ),
    )
    write_catalog(
        tmp_path,
        "de",
        make_greeting_messages(
            morning=None,
            afternoon=None,
            evening=None,
            general="Guten Tag",
            time_insensitive="Hallo",
        ),
    )
    write_catalog(tmp_path, "en", {"farewell": {"general": "Bye"}}, domain="other")
    (tmp_path / "README.yml").write_text("note: not a catalog\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Loader restricted to the greetings domain, without caching."""
    return YAMLTranslationLoader(
        temp_translations_dir, domain="greetings", use_cache=False
    )

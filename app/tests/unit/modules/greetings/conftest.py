"""Fixtures for greetings module tests."""

import pytest

from infrastructure.i18n import Locale, create_translator
from modules.greetings import GreetingResolver, build_greetings_config
from tests.factories.i18n import make_greeting_messages, write_catalog


@pytest.fixture
def greetings_catalog_dir(tmp_path):
    """Catalogs covering the fallback cases.

    - en     complete default locale with error texts
    - en-US  complete, distinct texts
    - de     general greetings only
    - fr     empty time insensitive greeting, no general greeting
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
    write_catalog(
        tmp_path,
        "fr",
        make_greeting_messages(
            morning="Bonjour",
            afternoon=None,
            evening=None,
            general=None,
            time_insensitive="",
        ),
    )
    return tmp_path


@pytest.fixture
def translator(greetings_catalog_dir):
    return create_translator(greetings_catalog_dir, domain="greetings")


@pytest.fixture
def greetings_config(translator):
    return build_greetings_config(translator, Locale("en"))


@pytest.fixture
def resolver(translator, greetings_config):
    return GreetingResolver(translator, greetings_config)

"""Shared fixtures for langstore tests.

Provides stub fetchers and store fixtures for loading scenarios.
"""

import pytest
import structlog

from langstore import LocaleStore
from tests.factories.fetchers import ExplodingFetcher, StubFetcher


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def language_files():
    """Language file contents keyed by default resource path."""
    return {
        "assets/lang/en-US.lang": (
            "greeting = Hello {name}\n\n"
            "farewell = Goodbye\n"
            "shared = from english\n"
            "only_english = English only"
        ),
        "assets/lang/fr-FR.lang": (
            "greeting = Bonjour {name}\n"
            "farewell = Au revoir\n"
            "empty_in_french = \n"
            "shared =   de francais   "
        ),
    }


@pytest.fixture
def stub_fetcher(language_files):
    return StubFetcher(language_files)


@pytest.fixture
def exploding_fetcher():
    return ExplodingFetcher()


@pytest.fixture
def store(stub_fetcher):
    """Store with default config and the stub fetcher."""
    return LocaleStore(fetcher=stub_fetcher)


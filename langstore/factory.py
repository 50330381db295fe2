"""Factory functions for creating locale stores.

Provides a configured-from-environment constructor and the process-wide
default store accessor.
"""

from typing import Optional

from langstore.fetchers import (
    AutoLanguageFetcher,
    HttpLanguageFetcher,
    LanguageFetcher,
)
from langstore.logging import get_module_logger
from langstore.models import StoreConfig
from langstore.settings import LangstoreSettings, get_settings
from langstore.store import LocaleStore, Options

logger = get_module_logger()

_default_store: Optional[LocaleStore] = None


def create_store(
    options: Options = None,
    settings: Optional[LangstoreSettings] = None,
    fetcher: Optional[LanguageFetcher] = None,
) -> LocaleStore:
    """Create a LocaleStore configured from settings.

    Location, extension and locale come from the LANGSTORE_* settings unless
    options names them explicitly.

    Args:
        options: Explicit store options, layered over the settings.
        settings: Settings to use (default: loaded from the environment).
        fetcher: Language fetcher (default: AutoLanguageFetcher using the
            configured HTTP timeout).

    Returns:
        LocaleStore: Configured store. Nothing is fetched until init,
        set_current or load_lang is awaited.

    Usage:
        store = create_store({"langs": ["en-US", "fr-FR"]})
        await store.init()
        store.get("greeting", {"name": "Ada"})
    """
    settings = settings or get_settings()
    merged = {
        "location": settings.LOCATION,
        "extension": settings.EXTENSION,
        "locale": settings.LOCALE,
        **_explicit_options(options),
    }
    if fetcher is None:
        fetcher = AutoLanguageFetcher(
            http=HttpLanguageFetcher(timeout=settings.FETCH_TIMEOUT)
        )

    store = LocaleStore(merged, fetcher=fetcher)
    logger.info(
        "store_created",
        location=store.config.location,
        locale=store.locale,
    )
    return store


def _explicit_options(options: Options) -> dict:
    if isinstance(options, StoreConfig):
        return options.model_dump(exclude_unset=True)
    return dict(options or {})


def get_default_store() -> LocaleStore:
    """Return the process-wide default store, creating it on first use."""
    global _default_store  # pylint: disable=global-statement
    if _default_store is None:
        _default_store = create_store()
    return _default_store


def reset_default_store() -> None:
    """Discard the process-wide default store."""
    global _default_store  # pylint: disable=global-statement
    _default_store = None

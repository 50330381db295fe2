"""langstore - flat-file i18n string resolution.

Loads ``key = value`` language files, merges them with preloaded data and
per-locale overrides, and resolves keys with ``{token}`` interpolation and
fallback across every loaded locale.

Main components:
- models: LocaleTable, StoreConfig
- parser: parse() for the flat language file format
- interpolation: token substitution
- fetchers: LanguageFetcher and file/HTTP implementations
- store: LocaleStore
- factory: create_store() and the process-wide get_default_store()
"""

from langstore.exceptions import LangstoreError, LanguageFetchError
from langstore.factory import create_store, get_default_store, reset_default_store
from langstore.fetchers import (
    AutoLanguageFetcher,
    FileLanguageFetcher,
    HttpLanguageFetcher,
    LanguageFetcher,
)
from langstore.models import LocaleTable, StoreConfig
from langstore.parser import parse
from langstore.store import LocaleStore

__all__ = [
    "LocaleTable",
    "StoreConfig",
    "LocaleStore",
    "parse",
    "LanguageFetcher",
    "FileLanguageFetcher",
    "HttpLanguageFetcher",
    "AutoLanguageFetcher",
    "LangstoreError",
    "LanguageFetchError",
    "create_store",
    "get_default_store",
    "reset_default_store",
]

"""Locale store: configuration, language loading and string resolution.

A LocaleStore owns one table per locale. Tables are seeded from preloaded
config data, filled from fetched language files or add_language calls, and
always topped with the configured overrides for their locale.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from langstore.fetchers import AutoLanguageFetcher, LanguageFetcher
from langstore.interpolation import interpolate, is_keyed
from langstore.logging import get_module_logger
from langstore.models import DEFAULT_LOCALE, LocaleTable, StoreConfig
from langstore.parser import parse

logger = get_module_logger()

Options = Union[StoreConfig, Mapping[str, Any], None]


class LocaleStore:
    """Translation store with fallback lookup and token interpolation.

    Attributes:
        tables: Locale id -> LocaleTable, in first-reference order.
        loaded: Locale ids that have completed at least one load.
        locale: Active locale id.
        current: Active LocaleTable, the same object as tables[locale].
        config: Current StoreConfig.
        fetcher: Collaborator used by load_lang to retrieve language files.
    """

    def __init__(
        self,
        options: Options = None,
        fetcher: Optional[LanguageFetcher] = None,
    ):
        """Initialize the store and apply configured locales.

        Args:
            options: Store options layered over the built-in defaults.
            fetcher: Language fetcher (default: AutoLanguageFetcher).
        """
        self.tables: Dict[str, LocaleTable] = {}
        self.loaded: List[str] = []
        self.locale: Optional[str] = None
        self.current: Optional[LocaleTable] = None
        self.fetcher = fetcher or AutoLanguageFetcher()
        self.config = StoreConfig()
        self.process_config(options)

    parse = staticmethod(parse)

    @property
    def langs(self) -> Tuple[str, ...]:
        """Configured locale ids, in order."""
        return tuple(self.config.langs)

    def process_config(self, options: Options = None) -> None:
        """Merge options over the built-in defaults and apply configured data.

        Every locale named in preloaded or override is re-applied with its
        preloaded data first and its override on top. No I/O is performed.

        Args:
            options: Store options, as a mapping or a StoreConfig.
        """
        self.config = StoreConfig.merge(None, options)

        configured = list(
            dict.fromkeys([*self.config.preloaded, *self.config.override])
        )
        for locale in configured:
            lang = {
                **self.config.preloaded.get(locale, {}),
                **self.config.override.get(locale, {}),
            }
            self.apply_language(locale, lang)

        self.locale = self.config.initial_locale()
        logger.debug(
            "store_configured",
            location=self.config.location,
            extension=self.config.extension,
            locale=self.locale,
            configured_locales=configured,
        )

    async def init(self, options: Options = None) -> LocaleTable:
        """Reconfigure the store and activate the resulting locale.

        Args:
            options: Options layered over the current config.

        Returns:
            The active locale's table.
        """
        self.process_config(StoreConfig.merge(self.config, options))
        return await self.set_current(self.locale)

    def apply_language(
        self, locale: str, lang: Optional[Mapping[str, str]] = None
    ) -> LocaleTable:
        """Merge lang and the configured override into a locale's table.

        The table is updated in place so existing references stay valid.

        Args:
            locale: Locale id.
            lang: Entries to merge in. Override entries still win.

        Returns:
            The locale's table.
        """
        table = self.tables.setdefault(locale, {})
        table.update(lang or {})
        table.update(self.config.override.get(locale, {}))
        self._mark_loaded(locale)
        return table

    def add_language(
        self, locale: str, lang: Union[str, Mapping[str, str], None] = None
    ) -> None:
        """Add a language from raw file text or a ready table.

        The locale is appended to the configured langs.

        Args:
            locale: Locale id.
            lang: Language file text, or a key -> value mapping.
        """
        if isinstance(lang, str):
            lang = parse(lang)
        self.apply_language(locale, lang)
        self.config.langs.append(locale)

    async def load_lang(self, locale: str, use_cache: bool = True) -> LocaleTable:
        """Load a locale's language file through the fetcher.

        Fetch failures are logged and degrade to a table holding only the
        locale's configured overrides; they never reach the caller.

        Args:
            locale: Locale id.
            use_cache: Return the stored table without I/O if already loaded.

        Returns:
            The locale's table.
        """
        if use_cache and locale in self.loaded:
            logger.debug("loaded_from_cache", locale=locale)
            return self.tables[locale]

        path = f"{self.config.location}{locale}{self.config.extension}"
        try:
            text = await self.fetcher.fetch(path)
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "language_fetch_failed",
                locale=locale,
                path=path,
                error=str(e),
            )
            return self.apply_language(locale)

        table = self.apply_language(locale, parse(text))
        logger.info(
            "language_loaded",
            locale=locale,
            path=path,
            key_count=len(table),
        )
        return table

    async def set_current(self, locale: Optional[str] = DEFAULT_LOCALE) -> LocaleTable:
        """Make a locale active, loading it first if needed.

        Args:
            locale: Locale id (default: en-US).

        Returns:
            The now active table, possibly empty.
        """
        locale = locale or DEFAULT_LOCALE
        if locale not in self.loaded:
            await self.load_lang(locale)

        self.locale = locale
        self.current = self.tables.setdefault(locale, {})
        logger.debug("current_locale_set", locale=locale)
        return self.current

    def get_value(self, key: str, locale: Optional[str] = None) -> Optional[str]:
        """Look up a raw value, falling back across all tables.

        Empty strings count as missing.

        Args:
            key: Translation key.
            locale: Locale to check first (default: active locale).

        Returns:
            The value, or None if no table has a non-empty value for key.
        """
        locale = self.locale if locale is None else locale
        value = self.tables.get(locale, {}).get(key) if locale is not None else None
        return value or self.get_fallback_value(key)

    def get_fallback_value(self, key: str) -> Optional[str]:
        """Return the first non-empty value for key across all tables."""
        for table in self.tables.values():
            if table.get(key):
                return table[key]
        return None

    def get(self, key: str, args: Any = None) -> Optional[str]:
        """Resolve a key for the active locale and fill in its tokens.

        Args:
            key: Translation key.
            args: Mapping (or list indexed by {0}-style tokens) of token
                values, or one value for every token. None or a falsy
                primitive skips substitution.

        Returns:
            The resolved string, or None if the key is unknown.
        """
        value = self.get_value(key)
        if not value:
            return None

        if args is None or (not is_keyed(args) and not args):
            return value

        return interpolate(value, args)

    def put(self, key: str, value: str) -> str:
        """Write a string into the active locale's table.

        Args:
            key: Translation key.
            value: String to store.

        Returns:
            The stored string.
        """
        if self.current is None:
            self.current = self.tables.setdefault(self.locale or DEFAULT_LOCALE, {})
        self.current[key] = value
        return value

    def _mark_loaded(self, locale: str) -> None:
        if locale not in self.loaded:
            self.loaded.append(locale)

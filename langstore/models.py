"""Data models for the locale store.

Defines the locale table type and the store configuration record.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

LocaleTable = Dict[str, str]
"""Flat key -> translated string mapping for a single locale."""

DEFAULT_EXTENSION = ".lang"
DEFAULT_LOCATION = "assets/lang/"
DEFAULT_LOCALE = "en-US"


def normalize_location(location: str) -> str:
    """Ensure a resource location ends with a path separator.

    Args:
        location: Local directory or remote base URL.

    Returns:
        The location with a single trailing "/" guaranteed.
    """
    return location if location.endswith("/") else f"{location}/"


class StoreConfig(BaseModel):
    """Configuration for a LocaleStore.

    Attributes:
        extension: Suffix appended to a locale id to build its resource path.
        location: Base path or URL of the language files, trailing "/" included.
        langs: Ordered locale ids considered available.
        locale: Initial active locale. Falls back to the first of langs when empty.
        override: Per-locale tables that always win over fetched and preloaded data.
        preloaded: Per-locale seed tables applied at configuration time.
    """

    model_config = ConfigDict(extra="ignore")

    extension: str = DEFAULT_EXTENSION
    location: str = DEFAULT_LOCATION
    langs: List[str] = Field(default_factory=lambda: [DEFAULT_LOCALE])
    locale: Optional[str] = DEFAULT_LOCALE
    override: Dict[str, LocaleTable] = Field(default_factory=dict)
    preloaded: Dict[str, LocaleTable] = Field(default_factory=dict)

    @field_validator("location")
    @classmethod
    def _normalize_location(cls, value: str) -> str:
        return normalize_location(value)

    @field_validator("override", "preloaded", mode="before")
    @classmethod
    def _default_tables(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def merge(
        cls,
        base: Optional["StoreConfig"],
        options: Union["StoreConfig", Mapping[str, Any], None] = None,
    ) -> "StoreConfig":
        """Build a new config from explicit options layered over a base.

        Only fields explicitly present in options replace the base value,
        including fields explicitly set to None.

        Args:
            base: Config to start from. Built-in defaults when None.
            options: Explicit options, as a mapping or another StoreConfig.

        Returns:
            A freshly validated StoreConfig. Neither input is mutated.
        """
        if isinstance(options, StoreConfig):
            explicit = options.model_dump(exclude_unset=True)
        else:
            explicit = dict(options or {})

        merged: Dict[str, Any] = {}
        for name in cls.model_fields:
            if name in explicit:
                merged[name] = explicit[name]
            elif base is not None:
                merged[name] = getattr(base, name)
        return cls.model_validate(_copy_fields(merged))

    def initial_locale(self) -> Optional[str]:
        """Return the explicit locale, or the first available one."""
        if self.locale:
            return self.locale
        return self.langs[0] if self.langs else None


def _copy_fields(values: Dict[str, Any]) -> Dict[str, Any]:
    # Configs never share list or table objects with their inputs.
    copied = dict(values)
    if isinstance(copied.get("langs"), list):
        copied["langs"] = list(copied["langs"])
    for name in ("override", "preloaded"):
        tables = copied.get(name)
        if isinstance(tables, Mapping):
            copied[name] = {
                locale: dict(table) if isinstance(table, Mapping) else table
                for locale, table in tables.items()
            }
    return copied

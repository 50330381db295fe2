"""Custom exceptions for the locale store.

Fetchers raise these; LocaleStore.load_lang absorbs them and degrades to an
override-only table.
"""


class LangstoreError(Exception):
    """Base exception for all langstore errors.

    Example:
        try:
            text = await fetcher.fetch(path)
        except LangstoreError as e:
            logger.error("langstore_error", error=str(e))
    """

    pass


class LanguageFetchError(LangstoreError):
    """Raised when a language resource cannot be retrieved.

    Covers missing files, non-2xx HTTP responses, transport errors and
    undecodable content.

    Attributes:
        path: Resource path or URL that failed.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to fetch language resource {path}: {reason}")

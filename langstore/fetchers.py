"""Language resource fetching interface and implementations.

Defines the contract a LocaleStore uses to retrieve raw language file text,
plus local file and HTTP implementations.
"""

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import httpx

from langstore.exceptions import LanguageFetchError
from langstore.logging import get_module_logger

logger = get_module_logger()

DEFAULT_FETCH_TIMEOUT = 10.0


class LanguageFetcher(ABC):
    """Abstract base for language resource fetchers.

    Implementations return the full text of the resource at a path and raise
    on any retrieval problem.
    """

    @abstractmethod
    async def fetch(self, path: str) -> str:
        """Fetch the text contents of a language resource.

        Args:
            path: Resource path or URL (location + locale + extension).

        Returns:
            Raw file text.

        Raises:
            LanguageFetchError: If the resource cannot be retrieved or decoded.
        """
        pass


class FileLanguageFetcher(LanguageFetcher):
    """Reads language files from the local filesystem.

    The blocking read runs in a worker thread.

    Attributes:
        encoding: Text encoding of the language files.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    async def fetch(self, path: str) -> str:
        return await asyncio.to_thread(self._read, path)

    def _read(self, path: str) -> str:
        try:
            text = Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise LanguageFetchError(path, str(e)) from e
        logger.debug("read_language_file", path=path, size=len(text))
        return text


class HttpLanguageFetcher(LanguageFetcher):
    """Fetches language files over HTTP(S) with httpx.

    Attributes:
        timeout: Request timeout in seconds, used when no client is injected.
        client: Optional shared AsyncClient. When omitted a short-lived
            client is opened per request.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.timeout = timeout
        self.client = client

    async def fetch(self, path: str) -> str:
        if self.client is not None:
            return await self._get(self.client, path)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._get(client, path)

    async def _get(self, client: httpx.AsyncClient, path: str) -> str:
        try:
            response = await client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LanguageFetchError(
                path, f"HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise LanguageFetchError(path, str(e) or type(e).__name__) from e

        logger.debug(
            "downloaded_language_file",
            url=path,
            status_code=response.status_code,
        )
        return response.text


class AutoLanguageFetcher(LanguageFetcher):
    """Routes http(s) URLs to an HTTP fetcher and everything else to files.

    Default fetcher of LocaleStore.
    """

    def __init__(
        self,
        http: Optional[LanguageFetcher] = None,
        files: Optional[LanguageFetcher] = None,
    ):
        self.http = http or HttpLanguageFetcher()
        self.files = files or FileLanguageFetcher()

    async def fetch(self, path: str) -> str:
        if path.lower().startswith(("http://", "https://")):
            return await self.http.fetch(path)
        return await self.files.fetch(path)

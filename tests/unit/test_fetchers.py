"""Tests for langstore.fetchers module."""

import httpx
import pytest

from langstore import LocaleStore
from langstore.exceptions import LangstoreError, LanguageFetchError
from langstore.fetchers import (
    AutoLanguageFetcher,
    FileLanguageFetcher,
    HttpLanguageFetcher,
)
from tests.factories.fetchers import StubFetcher


def make_http_client(routes: dict) -> httpx.AsyncClient:
    """Create an AsyncClient answering from a {url: text} route table."""

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url not in routes:
            return httpx.Response(404, text="missing")
        return httpx.Response(200, text=routes[url])

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.unit
class TestFileLanguageFetcher:
    """Tests for FileLanguageFetcher."""

    @pytest.mark.asyncio
    async def test_reads_file(self, tmp_path):
        lang_file = tmp_path / "fr-FR.lang"
        lang_file.write_text("greeting = Bonjour ça va", encoding="utf-8")

        text = await FileLanguageFetcher().fetch(str(lang_file))

        assert text == "greeting = Bonjour ça va"

    @pytest.mark.asyncio
    async def test_missing_file_raises(self, tmp_path):
        missing = str(tmp_path / "nope.lang")
        with pytest.raises(LanguageFetchError) as exc_info:
            await FileLanguageFetcher().fetch(missing)
        assert exc_info.value.path == missing
        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.asyncio
    async def test_undecodable_file_raises(self, tmp_path):
        lang_file = tmp_path / "bad.lang"
        lang_file.write_bytes(b"key = \xff\xfe\xfa")
        with pytest.raises(LanguageFetchError):
            await FileLanguageFetcher(encoding="utf-8").fetch(str(lang_file))

    @pytest.mark.asyncio
    async def test_store_loads_from_directory(self, tmp_path):
        (tmp_path / "de-DE.lang").write_text("hallo = Hallo {name}\n\ntschuss = Tschüss", encoding="utf-8")
        store = LocaleStore({"location": str(tmp_path)}, fetcher=FileLanguageFetcher())

        lang = await store.set_current("de-DE")

        assert lang == {"hallo": "Hallo {name}", "tschuss": "Tschüss"}
        assert store.get("hallo", {"name": "Ada"}) == "Hallo Ada"


@pytest.mark.unit
class TestHttpLanguageFetcher:
    """Tests for HttpLanguageFetcher."""

    @pytest.mark.asyncio
    async def test_fetches_text(self):
        url = "https://example.com/lang/en-US.lang"
        async with make_http_client({url: "k = v"}) as client:
            text = await HttpLanguageFetcher(client=client).fetch(url)
        assert text == "k = v"

    @pytest.mark.asyncio
    async def test_not_found_raises(self):
        url = "https://example.com/lang/xx-XX.lang"
        async with make_http_client({}) as client:
            with pytest.raises(LanguageFetchError) as exc_info:
                await HttpLanguageFetcher(client=client).fetch(url)
        assert "404" in str(exc_info.value)
        assert isinstance(exc_info.value, LangstoreError)

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with client:
            with pytest.raises(LanguageFetchError) as exc_info:
                await HttpLanguageFetcher(client=client).fetch("https://example.com/a.lang")
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_default_timeout(self):
        fetcher = HttpLanguageFetcher()
        assert fetcher.timeout == 10.0
        assert fetcher.client is None

    @pytest.mark.asyncio
    async def test_store_degrades_on_http_error(self):
        async with make_http_client({}) as client:
            store = LocaleStore(
                {
                    "location": "https://example.com/lang",
                    "override": {"fr-FR": {"kept": "oui"}},
                },
                fetcher=HttpLanguageFetcher(client=client),
            )
            lang = await store.load_lang("fr-FR", use_cache=False)
        assert lang == {"kept": "oui"}


@pytest.mark.unit
class TestAutoLanguageFetcher:
    """Tests for AutoLanguageFetcher routing."""

    @pytest.mark.asyncio
    async def test_routes_urls_to_http(self):
        http = StubFetcher({"https://example.com/en-US.lang": "from = http"})
        files = StubFetcher()
        fetcher = AutoLanguageFetcher(http=http, files=files)

        assert await fetcher.fetch("https://example.com/en-US.lang") == "from = http"
        assert files.calls == []

    @pytest.mark.asyncio
    async def test_routes_paths_to_files(self):
        http = StubFetcher()
        files = StubFetcher({"assets/lang/en-US.lang": "from = disk"})
        fetcher = AutoLanguageFetcher(http=http, files=files)

        assert await fetcher.fetch("assets/lang/en-US.lang") == "from = disk"
        assert http.calls == []

    def test_defaults(self):
        fetcher = AutoLanguageFetcher()
        assert isinstance(fetcher.http, HttpLanguageFetcher)
        assert isinstance(fetcher.files, FileLanguageFetcher)

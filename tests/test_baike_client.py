import httpx
import pytest

from baikebot.agent.tools.baike.client import BaikeClient
from baikebot.agent.tools.baike.errors import FetchError
from baikebot.config.schema import BaikeConfig


class FakeResponse:
    def __init__(self, content: bytes, url: str, error: Exception | None = None):
        self.content = content
        self.url = httpx.URL(url)
        self._error = error

    def raise_for_status(self) -> None:
        if self._error:
            raise self._error


def _stub_client(calls: dict, response: FakeResponse | None = None, error: Exception | None = None):
    class StubClient:
        def __init__(self, **kwargs):
            calls["client_kwargs"] = kwargs

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def get(self, url, headers=None, timeout=None):
            calls["url"] = url
            calls["headers"] = headers
            calls["timeout"] = timeout
            if error:
                raise error
            return response

    return StubClient


def test_search_url_percent_encodes_keyword() -> None:
    client = BaikeClient()

    assert client.search_url("苹果") == "https://baike.baidu.com/search?word=%E8%8B%B9%E6%9E%9C"
    assert client.search_url("a&b c") == "https://baike.baidu.com/search?word=a%26b%20c"


def test_search_url_uses_configured_base() -> None:
    client = BaikeClient(BaikeConfig(base_url="https://mirror.example/"))

    assert client.base_url == "https://mirror.example"
    assert client.search_url("x") == "https://mirror.example/search?word=x"


@pytest.mark.asyncio
async def test_fetch_success(monkeypatch) -> None:
    calls: dict = {}
    response = FakeResponse(b"<html></html>", "https://baike.baidu.com/item/x/1")
    monkeypatch.setattr(
        "baikebot.agent.tools.baike.client.httpx.AsyncClient",
        _stub_client(calls, response=response),
    )

    client = BaikeClient(BaikeConfig(request_timeout=3.0, user_agent="test-agent"))
    page = await client.fetch("https://baike.baidu.com/search?word=x")

    assert page.url == "https://baike.baidu.com/item/x/1"
    assert page.content == b"<html></html>"
    assert calls["url"] == "https://baike.baidu.com/search?word=x"
    assert calls["headers"] == {"User-Agent": "test-agent"}
    assert calls["timeout"] == 3.0
    assert calls["client_kwargs"] == {"follow_redirects": True}


@pytest.mark.asyncio
async def test_fetch_http_status_error_becomes_fetch_error(monkeypatch) -> None:
    calls: dict = {}
    response = FakeResponse(b"", "https://baike.baidu.com/item/x", error=httpx.HTTPError("503 Service Unavailable"))
    monkeypatch.setattr(
        "baikebot.agent.tools.baike.client.httpx.AsyncClient",
        _stub_client(calls, response=response),
    )

    with pytest.raises(FetchError) as exc_info:
        await BaikeClient().fetch("https://baike.baidu.com/item/x")

    assert exc_info.value.url == "https://baike.baidu.com/item/x"
    assert "503" in exc_info.value.reason


@pytest.mark.asyncio
async def test_fetch_transport_error_becomes_fetch_error(monkeypatch) -> None:
    monkeypatch.setattr(
        "baikebot.agent.tools.baike.client.httpx.AsyncClient",
        _stub_client({}, error=httpx.ConnectError("connection refused")),
    )

    with pytest.raises(FetchError, match="connection refused"):
        await BaikeClient().fetch("https://baike.baidu.com/search?word=x")


@pytest.mark.asyncio
async def test_fetch_document_parses_content(monkeypatch) -> None:
    response = FakeResponse("<h1>标题</h1>".encode("utf-8"), "https://baike.baidu.com/item/t")
    monkeypatch.setattr(
        "baikebot.agent.tools.baike.client.httpx.AsyncClient",
        _stub_client({}, response=response),
    )

    url, tree = await BaikeClient().fetch_document("https://baike.baidu.com/item/t")

    assert url == "https://baike.baidu.com/item/t"
    assert tree.text("h1") == "标题"

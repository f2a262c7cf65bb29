"""HTTP client for Baidu Baike pages."""

from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx

from baikebot.agent.tools.baike.document import DocumentTree
from baikebot.agent.tools.baike.errors import FetchError
from baikebot.agent.tools.baike.models import FetchedPage

if TYPE_CHECKING:
    from baikebot.config.schema import BaikeConfig


class BaikeClient:
    """Fetch search and entry pages from the configured site."""

    _SEARCH_PATH = "/search?word="

    def __init__(self, config: "BaikeConfig | None" = None):
        from baikebot.config.schema import BaikeConfig

        self.config = config or BaikeConfig()

    @property
    def base_url(self) -> str:
        return self.config.base_url.rstrip("/")

    def search_url(self, keyword: str) -> str:
        return self.base_url + self._SEARCH_PATH + quote(keyword, safe="")

    async def fetch(self, url: str) -> FetchedPage:
        """GET a page, following redirects. Raises FetchError on any transport or HTTP failure."""
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                response = await client.get(
                    url,
                    headers={"User-Agent": self.config.user_agent},
                    timeout=self.config.request_timeout,
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise FetchError(url, str(e)) from e

        return FetchedPage(url=str(response.url), content=response.content)

    async def fetch_document(self, url: str) -> tuple[str, DocumentTree]:
        """Fetch and parse a page. Returns the final URL and its tree."""
        page = await self.fetch(url)
        return page.url, DocumentTree.parse(page.content)

"""Search, disambiguate, fetch and render one encyclopedia entry."""

import asyncio
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from loguru import logger

from baikebot.agent.tools.baike.client import BaikeClient
from baikebot.agent.tools.baike.document import DocumentTree
from baikebot.agent.tools.baike.errors import (
    ChoiceTimeout,
    FetchError,
    InvalidChoiceError,
    NoResultError,
)
from baikebot.agent.tools.baike.extract import (
    DEFAULT_SELECTORS,
    PageSelectors,
    count_results,
    extract_content,
    extract_results,
    has_no_result,
    resolve_link,
)
from baikebot.agent.tools.baike.models import EntryRecord
from baikebot.agent.tools.baike.render import render
from baikebot.channels.base import ChannelSession
from baikebot.i18n import Localizer

if TYPE_CHECKING:
    from baikebot.config.schema import BaikeConfig

# ASCII digits only, optional sign
_CHOICE_RE = re.compile(r"[+-]?\d+", re.ASCII)


class LookupState(str, Enum):
    USAGE = "usage"
    SEARCHING = "searching"
    NO_RESULT = "no_result"
    SINGLE_RESULT = "single_result"
    MULTI_RESULT = "multi_result"
    FETCHING = "fetching"
    DONE = "done"
    FAILED = "failed"
    INVALID_CHOICE = "invalid_choice"
    ABANDONED = "abandoned"


@dataclass(slots=True)
class LookupResult:
    """Terminal state of a lookup and the text to show, if any."""

    state: LookupState
    text: str | None = None
    record: EntryRecord | None = None


class BaikeLookup:
    """
    Run the lookup flow for one keyword.

    Searching -> NoResult | SingleResult | MultiResult -> Fetching -> Done | Failed.
    A multi-result search asks the session for a 1-based choice; no reply
    ends the lookup silently and a bad reply ends it with an error message.
    Every failure ends as a localized message, never as a raised exception.
    """

    def __init__(
        self,
        config: "BaikeConfig | None" = None,
        client: BaikeClient | None = None,
        localizer: Localizer | None = None,
        selectors: PageSelectors = DEFAULT_SELECTORS,
    ):
        from baikebot.config.schema import BaikeConfig

        self.config = config or BaikeConfig()
        self.client = client or BaikeClient(self.config)
        self.localizer = localizer or Localizer()
        self.selectors = selectors

    async def run(
        self,
        keyword: str,
        session: ChannelSession,
        choice: int | None = None,
    ) -> LookupResult:
        """
        Look up ``keyword``.

        Args:
            keyword: Free-text query.
            session: Channel used to show candidates and read the user's choice.
            choice: Optional 1-based pick that replaces the interactive prompt.

        Returns:
            The terminal state with the message to show (None when abandoned).
        """
        keyword = (keyword or "").strip()
        if not keyword:
            return LookupResult(LookupState.USAGE, self._text("baike.usage"))

        search_url = self.client.search_url(keyword)
        try:
            return await self._run(keyword, search_url, session, choice)
        except NoResultError:
            return LookupResult(LookupState.NO_RESULT, self._text("baike.article-not-exist", keyword))
        except InvalidChoiceError as e:
            logger.debug("Invalid choice for {}: {}", keyword, e)
            return LookupResult(LookupState.INVALID_CHOICE, self._text("baike.incorrect-index"))
        except ChoiceTimeout:
            logger.debug("No choice received for {}, abandoning", keyword)
            return LookupResult(LookupState.ABANDONED)
        except FetchError as e:
            logger.warning("Baike fetch failed for {}: {}", keyword, e)
            return LookupResult(LookupState.FAILED, self._text("baike.error-with-link", search_url))
        except Exception as e:
            logger.warning("Baike lookup failed for {}: {}", keyword, e)
            return LookupResult(LookupState.FAILED, self._text("baike.error-with-link", search_url))

    async def _run(
        self,
        keyword: str,
        search_url: str,
        session: ChannelSession,
        choice: int | None,
    ) -> LookupResult:
        logger.debug("Baike {}: {}", LookupState.SEARCHING.value, search_url)
        final_url, search_page = await self.client.fetch_document(search_url)

        # The site redirects exact matches straight to the entry page
        if urlparse(final_url).path.startswith(self.selectors.entry_path_prefix):
            logger.debug("Baike search for {} landed on entry {}", keyword, final_url)
            return self._finish(search_page, final_url)

        if has_no_result(search_page, self.selectors):
            raise NoResultError(keyword)

        count = min(count_results(search_page, self.selectors), self.config.max_result_count)
        if choice is not None:
            rank = self._parse_choice(str(choice), max(count, 1))
        elif count > 1:
            logger.debug("Baike {}: {} candidates for {}", LookupState.MULTI_RESULT.value, count, keyword)
            rank = await self._ask_choice(keyword, search_page, count, session)
        else:
            logger.debug("Baike {}: {}", LookupState.SINGLE_RESULT.value, keyword)
            rank = 0

        link = resolve_link(search_page, rank, self.client.base_url, self.selectors)
        if not link:
            raise FetchError(search_url, f"no entry link at rank {rank}")

        logger.debug("Baike {}: {}", LookupState.FETCHING.value, link)
        _, entry_page = await self.client.fetch_document(link)
        return self._finish(entry_page, link)

    async def _ask_choice(
        self,
        keyword: str,
        search_page: DocumentTree,
        count: int,
        session: ChannelSession,
    ) -> int:
        """Show the candidates and wait for a pick. Returns the zero-based rank."""
        lines = [self._text("baike.has-multi-result", keyword, count)]
        for item in extract_results(search_page, count, self.selectors):
            lines.append(f"{item.rank + 1}. {item.title}\n  {item.description}")
        lines.append(self._text("baike.await-choose-result", count))
        await session.send("\n".join(lines))

        try:
            reply = await session.prompt(self.config.prompt_timeout)
        except asyncio.TimeoutError as e:
            raise ChoiceTimeout() from e
        if reply is None or not reply.strip():
            raise ChoiceTimeout()
        return self._parse_choice(reply, count)

    @staticmethod
    def _parse_choice(reply: str, count: int) -> int:
        text = reply.strip()
        if not _CHOICE_RE.fullmatch(text):
            raise InvalidChoiceError(reply, count)
        index = int(text) - 1
        if index < 0 or index >= count:
            raise InvalidChoiceError(reply, count)
        return index

    def _finish(self, entry_page: DocumentTree, link: str) -> LookupResult:
        record = extract_content(entry_page, link, self.config.max_summary_length, self.selectors)
        text = render(record, self.config.format, unknown=self.config.unknown_placeholder)
        return LookupResult(LookupState.DONE, text, record)

    def _text(self, key: str, *args: object) -> str:
        return self.localizer.text(key, args)


async def lookup(
    keyword: str,
    session: ChannelSession,
    config: "BaikeConfig | None" = None,
    *,
    choice: int | None = None,
    client: BaikeClient | None = None,
    localizer: Localizer | None = None,
) -> str | None:
    """Run one lookup and return the text to show, or None when the user never answered."""
    result = await BaikeLookup(config, client=client, localizer=localizer).run(keyword, session, choice)
    return result.text

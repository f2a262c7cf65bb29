"""Baike lookup tool."""

from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from baikebot.agent.tools.base import Tool
from baikebot.agent.tools.baike.client import BaikeClient
from baikebot.agent.tools.baike.lookup import BaikeLookup, LookupState
from baikebot.channels.base import ChannelSession, DetachedSession
from baikebot.i18n import Localizer

if TYPE_CHECKING:
    from baikebot.config.schema import BaikeConfig


class BaikeTool(Tool):
    """Look up a Baidu Baike entry, asking the user to pick when the search is ambiguous."""

    name = "baike"
    description = (
        "Look up a keyword on Baidu Baike and return the entry summary. "
        "If several entries match, pass `choice` (1-based) to pick one."
    )
    parameters = {
        "type": "object",
        "properties": {
            "keyword": {"type": "string", "minLength": 1, "description": "Keyword to look up"},
            "choice": {
                "type": "integer",
                "minimum": 1,
                "description": "Which candidate to open when the search has several",
            },
        },
        "required": ["keyword"],
    }

    def __init__(
        self,
        baike_config: "BaikeConfig | None" = None,
        localizer: Localizer | None = None,
        client: BaikeClient | None = None,
    ):
        self._lookup = BaikeLookup(baike_config, client=client, localizer=localizer)
        # Scoped to the current asyncio task
        self._session: ContextVar[ChannelSession | None] = ContextVar(f"baike_session_{id(self)}", default=None)

    def set_context(self, session: ChannelSession | None) -> None:
        """Set the session for the current task (and tasks it spawns afterwards)."""
        self._session.set(session)

    async def execute(self, keyword: str, choice: int | None = None, **kwargs: Any) -> str:
        session = self._session.get() or DetachedSession()
        result = await self._lookup.run(keyword, session, choice)
        if result.state is LookupState.ABANDONED:
            # Nobody answered: hand the candidate list back so the caller can retry with choice
            if isinstance(session, DetachedSession) and session.sent:
                return session.sent[-1]
            return ""
        return result.text or ""

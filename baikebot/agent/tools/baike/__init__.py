"""Baidu Baike lookup: search, disambiguation, extraction and rendering."""

from baikebot.agent.tools.baike.errors import (
    BaikeError,
    ChoiceTimeout,
    FetchError,
    InvalidChoiceError,
    NoResultError,
)
from baikebot.agent.tools.baike.lookup import BaikeLookup, LookupResult, LookupState, lookup
from baikebot.agent.tools.baike.models import EntryRecord, ResultSummary
from baikebot.agent.tools.baike.tool import BaikeTool

__all__ = [
    "BaikeError",
    "BaikeLookup",
    "BaikeTool",
    "ChoiceTimeout",
    "EntryRecord",
    "FetchError",
    "InvalidChoiceError",
    "LookupResult",
    "LookupState",
    "NoResultError",
    "ResultSummary",
    "lookup",
]

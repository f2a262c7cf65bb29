"""Field extraction for baike search and entry pages."""

import re
from dataclasses import dataclass

from baikebot.agent.tools.baike.document import DocumentTree
from baikebot.agent.tools.baike.models import EntryRecord, ResultSummary

DEFAULT_BASE_URL = "https://baike.baidu.com"
ELLIPSIS = "..."

_BRANDING_RE = re.compile(r"[_\-]?\s*百度百科\s*$")


@dataclass(frozen=True, slots=True)
class PageSelectors:
    """CSS selectors locating each region on search and entry pages."""

    result_item: str = ".search-list dd"
    result_title: str = ".result-title"
    result_link: str = "a.result-title"
    result_summary: str = ".result-summary"
    no_result: str = ".create-entrance, .no-result"
    entry_path_prefix: str = "/item/"
    summary: str = ".lemma-summary"
    citation: str = "sup"
    title: str = "h1"
    thumbnail: str = ".summary-pic img"
    tip: str = ".view-tip-panel"


DEFAULT_SELECTORS = PageSelectors()


def strip_branding(title: str) -> str:
    """Drop the trailing site name (e.g. ``"百度_百度百科"`` -> ``"百度"``)."""
    return _BRANDING_RE.sub("", title).strip()


def has_no_result(tree: DocumentTree, selectors: PageSelectors = DEFAULT_SELECTORS) -> bool:
    """Whether the search page says there is nothing to show."""
    return tree.count(selectors.no_result) > 0


def count_results(tree: DocumentTree, selectors: PageSelectors = DEFAULT_SELECTORS) -> int:
    return tree.count(selectors.result_item)


def extract_results(
    tree: DocumentTree,
    limit: int,
    selectors: PageSelectors = DEFAULT_SELECTORS,
) -> list[ResultSummary]:
    """Summarize at most ``limit`` entries of a search result list, in page order."""
    items = tree.select(selectors.result_item)[: max(0, limit)]
    return [
        ResultSummary(
            rank=rank,
            title=strip_branding(item.text(selectors.result_title)),
            description=item.text(selectors.result_summary).strip(),
        )
        for rank, item in enumerate(items)
    ]


def resolve_link(
    tree: DocumentTree,
    rank: int,
    base_url: str = DEFAULT_BASE_URL,
    selectors: PageSelectors = DEFAULT_SELECTORS,
) -> str | None:
    """
    Return the entry URL at ``rank`` on a search page, or None.

    Negative ranks are treated as 0. Site-relative entry paths are made
    absolute against ``base_url``; any other href is returned as is.
    """
    items = tree.select(selectors.result_item)
    rank = max(rank, 0)
    if not items or rank >= len(items):
        return None

    url = items[rank].attr("href", selectors.result_link)
    if not url:
        return None
    if url.startswith(selectors.entry_path_prefix):
        url = base_url.rstrip("/") + url
    return url


def truncate_summary(text: str, max_length: int) -> str:
    """Hard character cut at ``max_length``, marked with an ellipsis."""
    if len(text) > max_length:
        return text[:max_length] + ELLIPSIS
    return text


def extract_content(
    tree: DocumentTree,
    link: str,
    max_summary_length: int,
    selectors: PageSelectors = DEFAULT_SELECTORS,
) -> EntryRecord:
    """
    Build an EntryRecord from an entry page.

    Citation markers are removed from the summary region first, so the
    tree is mutated. Missing regions yield empty fields, never errors.
    """
    tree.remove(f"{selectors.summary} {selectors.citation}")
    summary = truncate_summary(tree.text(selectors.summary).strip(), max_summary_length)

    return EntryRecord(
        title=tree.text(selectors.title).strip(),
        summary=summary,
        link=link,
        thumbnail=tree.attr("src", selectors.thumbnail) or None,
        tip=tree.text(selectors.tip).strip(),
    )

"""Shared baike lookup models."""

from dataclasses import dataclass


@dataclass(slots=True)
class ResultSummary:
    """One candidate entry on a search result page."""

    rank: int
    title: str
    description: str = ""


@dataclass(slots=True)
class EntryRecord:
    """Structured fields extracted from an entry page."""

    title: str
    summary: str
    link: str
    thumbnail: str | None = None
    tip: str = ""

    def to_context(self) -> dict[str, str | None]:
        return {
            "title": self.title,
            "thumbnail": self.thumbnail,
            "tips": self.tip,
            "summary": self.summary,
            "link": self.link,
        }


@dataclass(frozen=True, slots=True)
class FetchedPage:
    """Raw page payload together with the URL it was finally served from."""

    url: str
    content: bytes

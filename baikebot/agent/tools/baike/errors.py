"""Errors raised while running a baike lookup."""


class BaikeError(Exception):
    """Base error for baike lookups."""


class FetchError(BaikeError):
    """Raised when a page could not be fetched."""

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        super().__init__(f"failed to fetch {url}: {reason}" if reason else f"failed to fetch {url}")


class NoResultError(BaikeError):
    """Raised when the search page reports zero entries."""

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f"no entry for {keyword!r}")


class InvalidChoiceError(BaikeError):
    """Raised when a disambiguation reply is malformed or out of range."""

    def __init__(self, reply: str, count: int):
        self.reply = reply
        self.count = count
        super().__init__(f"invalid choice {reply!r}, expected 1..{count}")


class ChoiceTimeout(BaikeError):
    """Raised when no disambiguation reply arrives in time."""

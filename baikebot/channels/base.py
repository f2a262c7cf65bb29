"""Session interface a lookup uses to talk to the user."""

from typing import Protocol


class ChannelSession(Protocol):
    """One user's conversation on a channel."""

    async def send(self, text: str) -> None:
        """Deliver a message to the user."""
        ...

    async def prompt(self, timeout: float) -> str | None:
        """Wait up to ``timeout`` seconds for the next reply. None when nothing arrives."""
        ...


class DetachedSession:
    """Session with nobody on the other end: keeps what was sent, never gets a reply."""

    def __init__(self):
        self.sent: list[str] = []

    async def send(self, text: str) -> None:
        self.sent.append(text)

    async def prompt(self, timeout: float) -> str | None:
        return None

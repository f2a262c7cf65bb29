"""Chat channel sessions."""

from baikebot.channels.base import ChannelSession, DetachedSession
from baikebot.channels.console import ConsoleSession

__all__ = ["ChannelSession", "ConsoleSession", "DetachedSession"]

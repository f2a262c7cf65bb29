"""Agent tools module."""

from baikebot.agent.tools.base import Tool
from baikebot.agent.tools.registry import ToolRegistry

__all__ = ["Tool", "ToolRegistry"]

"""Localized user-facing messages."""

from baikebot.i18n.localizer import Localizer

__all__ = ["Localizer"]

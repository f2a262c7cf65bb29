"""Message lookup with locale fallback."""

from collections.abc import Sequence
from typing import Any

from baikebot.i18n.locales import LOCALES


class Localizer:
    """Resolve message keys for one locale, falling back to another."""

    def __init__(
        self,
        locale: str = "zh",
        fallback: str = "zh",
        messages: dict[str, dict[str, str]] | None = None,
    ):
        self.locale = locale
        self.fallback = fallback
        self._messages = messages if messages is not None else LOCALES

    def text(self, key: str, args: Sequence[Any] = ()) -> str:
        """Format the message for ``key``. Unknown keys come back as the key itself."""
        for locale in (self.locale, self.fallback):
            template = self._messages.get(locale, {}).get(key)
            if template is not None:
                return template.format(*args)
        return key

"""Template rendering for entry records."""

import html
import re
from typing import Literal

from baikebot.agent.tools.baike.models import EntryRecord

UnknownPlaceholderPolicy = Literal["empty", "keep"]

DEFAULT_FORMAT = "{{ thumbnail }}\n{{ title }}\n{{ tips }}\n{{ summary }}\n来自：{{ link }}"

_PLACEHOLDER_RE = re.compile(r"\{\{([\s\S]+?)\}\}")
_NEWLINES_RE = re.compile(r"\n+")


def image_marker(url: str | None) -> str:
    """Media element understood by chat channels, or "" without a URL."""
    if not url:
        return ""
    return f'<img src="{html.escape(url, quote=True)}"/>'


def render(
    record: EntryRecord,
    template: str,
    *,
    unknown: UnknownPlaceholderPolicy = "empty",
) -> str:
    """
    Fill ``{{ name }}`` placeholders from the record.

    Known names are title, thumbnail, tips, summary and link. Unknown names
    become "" under the "empty" policy or stay verbatim under "keep".
    Runs of newlines are collapsed afterwards so empty fields leave no
    blank lines behind.
    """
    values = record.to_context()
    values["thumbnail"] = image_marker(record.thumbnail)

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1).strip()
        if name in values:
            return values[name] or ""
        return match.group(0) if unknown == "keep" else ""

    return _NEWLINES_RE.sub("\n", _PLACEHOLDER_RE.sub(_substitute, template))

"""Queryable markup tree backed by BeautifulSoup."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag


class DocumentTree:
    """Thin selector API over a parsed page or one of its nodes.

    Queries are scoped to the wrapped node, so ``tree.select("dd")[0].text("a")``
    only looks inside the first ``dd``.
    """

    def __init__(self, node: Tag):
        self._node = node

    @classmethod
    def parse(cls, markup: str | bytes) -> DocumentTree:
        return cls(BeautifulSoup(markup, "lxml"))

    def select(self, selector: str) -> list[DocumentTree]:
        return [DocumentTree(node) for node in self._node.select(selector)]

    def count(self, selector: str) -> int:
        return len(self._node.select(selector))

    def text(self, selector: str | None = None) -> str:
        """Concatenated text of every match, or of this node when no selector is given."""
        if selector is None:
            return self._node.get_text()
        return "".join(node.get_text() for node in self._node.select(selector))

    def attr(self, name: str, selector: str | None = None) -> str | None:
        """Attribute of the first match, or of this node when no selector is given."""
        node = self._node if selector is None else self._node.select_one(selector)
        if node is None:
            return None
        value = node.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def remove(self, selector: str) -> int:
        """Detach every match from the tree. Returns how many nodes were removed."""
        nodes = self._node.select(selector)
        for node in nodes:
            node.extract()
        return len(nodes)

"""Rendering of parsed description markup as plain text."""

from __future__ import annotations

from collections.abc import Iterator

from .xml_text_parser import NodeType, TextNode


def _plain_chunks(node: TextNode) -> Iterator[str]:
    """Yield the text of a node tree: text runs, newlines after code lines, spaces."""
    if node.type is NodeType.TEXT:
        yield node.data
    for child in node.children:
        yield from _plain_chunks(child)
    if node.type is NodeType.CODELINE:
        yield "\n"
    elif node.type is NodeType.SP:
        yield " "


class TextPlainPrinter:
    """Prints a text node tree as unformatted text."""

    def print(self, node: TextNode) -> str:
        """Return the plain text of `node` without trailing newlines."""
        return "".join(_plain_chunks(node)).rstrip("\n")
"""A small element-oriented view of doxygen XML files."""

from __future__ import annotations

import os
from collections.abc import Iterator

from lxml import etree


class XmlError(Exception):
    """Raised when an XML file cannot be loaded or lacks expected content."""


_MISSING = object()


def _is_element(raw) -> bool:
    return isinstance(raw.tag, str)


def _element_name(raw) -> str:
    local = etree.QName(raw).localname
    return f"{raw.prefix}:{local}" if raw.prefix else local


def _keep_text(text: str | None) -> bool:
    # Whitespace-only runs between tags carry no content and are dropped.
    return bool(text) and not text.isspace()


class Element:
    """An element of a loaded document."""

    __slots__ = ("_raw", "_document")

    def __init__(self, raw, document: Xml):
        self._raw = raw
        self._document = document

    def __repr__(self) -> str:
        return f"Element({self.name!r}, line={self.line})"

    def _wrap(self, raw) -> Element:
        return Element(raw, self._document)

    @staticmethod
    def _matches(raw, name: str | None) -> bool:
        return _is_element(raw) and (not name or _element_name(raw) == name)

    @property
    def name(self) -> str:
        return _element_name(self._raw)

    @property
    def line(self) -> int:
        return self._raw.sourceline or 0

    @property
    def document(self) -> Xml:
        return self._document

    @property
    def has_text(self) -> bool:
        """Whether the element starts with a text node."""
        return _keep_text(self._raw.text)

    @property
    def text(self) -> str:
        """The leading text of the element, or an empty string."""
        return self._raw.text if self.has_text else ""

    def attr(self, name: str, default=_MISSING) -> str:
        """Return an attribute, its default, or raise XmlError if absent."""
        value = self._raw.get(name)
        if value is not None:
            return value
        if default is _MISSING:
            raise XmlError(f"Attribute {name} does not exist in element {self.name}")
        return default

    def first_child_element(self, name: str | None = None) -> Element | None:
        """The first child element, optionally with the given name."""
        for raw in self._raw:
            if self._matches(raw, name):
                return self._wrap(raw)
        return None

    def next_sibling_element(self, name: str | None = None) -> Element | None:
        """The next sibling element, optionally with the given name."""
        for raw in self._raw.itersiblings():
            if self._matches(raw, name):
                return self._wrap(raw)
        return None

    def child_elements(self, name: str | None = None) -> Iterator[Element]:
        """All child elements, optionally only those with the given name."""
        for raw in self._raw:
            if self._matches(raw, name):
                yield self._wrap(raw)

    def nodes(self) -> Iterator[str | Element]:
        """Child elements and text runs in document order."""
        if _keep_text(self._raw.text):
            yield self._raw.text
        for raw in self._raw:
            if _is_element(raw):
                yield self._wrap(raw)
            if _keep_text(raw.tail):
                yield raw.tail


class Xml:
    """A parsed XML file."""

    def __init__(self, path: str | os.PathLike):
        self.path = os.fspath(path)
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            tree = etree.parse(self.path, parser)
        except (OSError, etree.XMLSyntaxError) as exc:
            raise XmlError(str(exc)) from exc
        self._root = tree.getroot()

    def __repr__(self) -> str:
        return f"Xml({self.path!r})"

    def first_child_element(self, name: str | None = None) -> Element | None:
        """The root element if it has the given name (or any name)."""
        if Element._matches(self._root, name):
            return Element(self._root, self)
        return None
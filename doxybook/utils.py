"""String and filesystem helpers shared by the printers and the renderer."""

from __future__ import annotations

import os
import re
import string
import time

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_ESCAPES = str.maketrans({
    "<": "&lt;",
    ">": "&gt;",
    "*": "&#42;",
    "_": "&#95;",
})

_OPENING = "([<"
_CLOSING = ")]>"

_ANCHOR_RE = re.compile(r"_[a-z0-9]{34,67}\Z")

_FUNCTION_DEFINITION_RE = re.compile(
    r"[^\n\r\u2028\u2029]* ([a-zA-Z0-9_:+*/%^&|~!=<>()\[\],-]+)"
)


def title(text: str) -> str:
    """Return the text with its first character upper-cased (ASCII only)."""
    if text and text[0] in string.ascii_lowercase:
        return text[0].upper() + text[1:]
    return text


def to_lower(text: str) -> str:
    """Lower-case ASCII letters, leaving every other character untouched."""
    return text.translate(_ASCII_LOWER)


def safe_anchor_id(text: str) -> str:
    """Turn a name into an anchor id: lower case, no '::', spaces as dashes."""
    return to_lower(text).replace("::", "").replace(" ", "-")


def date(fmt: str) -> str:
    """Format the current local time with a strftime format."""
    return time.strftime(fmt, time.localtime())


def strip_namespace(text: str) -> str:
    """Drop everything up to the last ':' that is not inside brackets."""
    depth = 0
    offset = None
    for index, char in enumerate(text):
        if char in _OPENING:
            depth += 1
        elif char in _CLOSING:
            depth -= 1
        elif char == ":" and depth == 0:
            offset = index + 1
    return text if offset is None else text[offset:]


def strip_anchor(text: str) -> str:
    """Remove a trailing doxygen member hash such as '_1a0123...'."""
    return _ANCHOR_RE.sub("", text)


def extract_qualified_name_from_function_definition(text: str) -> str:
    """Return the last space-separated qualified name of a definition."""
    match = _FUNCTION_DEFINITION_RE.fullmatch(text)
    if match:
        return match.group(1)
    return text


def escape(text: str) -> str:
    """Escape characters that markdown or HTML would otherwise interpret."""
    return text.translate(_ESCAPES)


def split(text: str, delim: str) -> list[str]:
    """Split text on a delimiter, dropping a trailing empty token."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    tokens = []
    last = 0
    pos = text.find(delim)
    while pos != -1:
        # Each token spans as many characters as the delimiter's offset.
        tokens.append(text[last:last + pos])
        pos += len(delim)
        last = pos
        pos = text.find(delim, pos)
    if last < len(text):
        tokens.append(text[last:])
    return tokens


def create_directory(path: str | os.PathLike) -> None:
    """Create a single directory unless it already exists."""
    if os.path.isdir(path):
        return
    os.mkdir(path, 0o775)
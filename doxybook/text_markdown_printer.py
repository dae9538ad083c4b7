"""Rendering of parsed description markup as markdown."""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from dataclasses import dataclass, field

from .text_plain_printer import _plain_chunks
from .utils import escape
from .xml_text_parser import NodeType, TextNode


@dataclass
class MarkdownOptions:
    """Settings that affect how markdown is produced."""

    link_and_inline_code_as_html: bool = False
    base_url: str = ""
    images_folder: str = "images"
    copy_images: bool = True
    use_folders: bool = True
    output_dir: str = ""
    formula_inline_start: str = "\\("
    formula_inline_end: str = "\\)"
    formula_block_start: str = "\\["
    formula_block_end: str = "\\]"


@dataclass
class _ListState:
    ordered: bool
    counter: int = 0


@dataclass
class _State:
    out: list[str] = field(default_factory=list)
    eol: bool = False
    valid_link: bool = False
    in_computer_output: bool = False
    table_header: bool = False
    lists: list[_ListState] = field(default_factory=list)

    def write(self, *parts: str) -> None:
        self.out.extend(parts)


# Fixed text written before a node's children, and the resulting end-of-line flag.
_OPENING = {
    NodeType.SECT1: ("\n# ", False),
    NodeType.SECT2: ("\n## ", False),
    NodeType.SECT3: ("\n### ", False),
    NodeType.SECT4: ("\n#### ", False),
    NodeType.SECT5: ("\n##### ", False),
    NodeType.SECT6: ("\n###### ", False),
    NodeType.BOLD: ("**", False),
    NodeType.EMPHASIS: ("_", False),
    NodeType.STRIKE: ("~~", False),
    NodeType.PROGRAMLISTING: ("\n\n```cpp\n", False),
    NodeType.VERBATIM: ("\n\n```\n", False),
    NodeType.SP: (" ", False),
    NodeType.HRULER: ("\n\n------------------\n\n", True),
    NodeType.VARLISTENTRY: ("\n", True),
    NodeType.SUPERSCRIPT: ("<sup>", False),
    NodeType.NONBREAKSPACE: ("&nbsp;", False),
    NodeType.TABLE: ("\n", True),
    NodeType.TABLE_ROW: ("|", True),
    NodeType.TABLE_CELL: (" ", True),
    NodeType.SQUO: ('"', False),
    NodeType.NDASH: ("&ndash;", False),
    NodeType.MDASH: ("&mdash;", False),
    NodeType.LINEBREAK: ("\n", True),
    NodeType.ONLYFOR: ("(", False),
}

# Fixed text written after a node's children, and the resulting end-of-line flag.
_CLOSING = {
    NodeType.TITLE: ("\n\n", True),
    NodeType.BOLD: ("**", False),
    NodeType.EMPHASIS: ("_", False),
    NodeType.STRIKE: ("~~", False),
    NodeType.CODELINE: ("\n", False),
    NodeType.VERBATIM: ("```\n\n", True),
    NodeType.VARLISTENTRY: ("\n\n", True),
    NodeType.SUPERSCRIPT: ("</sup>", False),
    NodeType.TABLE_CELL: (" |", False),
    NodeType.ONLYFOR: (")", False),
}

_LISTS = (NodeType.ITEMIZEDLIST, NodeType.VARIABLELIST, NodeType.ORDEREDLIST)


class TextMarkdownPrinter:
    """Prints a text node tree as markdown.

    `urls` maps reference ids to the URLs of the pages they point at;
    `input_dir` is where images named in the markup are looked up for copying.
    """

    def __init__(
        self,
        options: MarkdownOptions | None = None,
        input_dir: str | os.PathLike = "",
        urls: Mapping[str, str] | None = None,
    ):
        self.options = options if options is not None else MarkdownOptions()
        self.input_dir = os.fspath(input_dir)
        self.urls = dict(urls) if urls is not None else {}

    def print(self, node: TextNode) -> str:
        """Return the markdown for `node` without trailing newlines."""
        state = _State()
        self._print(state, None, node)
        return "".join(state.out).rstrip("\n")

    def _print(self, state: _State, parent: TextNode | None, node: TextNode) -> None:
        self._open(state, node)
        if node.type is NodeType.PROGRAMLISTING:
            state.write(*_plain_chunks(node))
        elif node.type is NodeType.FORMULA:
            self._formula(state, node)
        else:
            for child in node.children:
                self._print(state, node, child)
        self._close(state, parent, node)

    def _open(self, state: _State, node: TextNode) -> None:
        html = self.options.link_and_inline_code_as_html
        kind = node.type
        if kind in _OPENING:
            text, state.eol = _OPENING[kind]
            state.write(text)
        elif kind is NodeType.TEXT:
            state.write(escape(node.data) if html and state.in_computer_output else node.data)
            state.eol = False
        elif kind in _LISTS:
            if not state.lists:
                state.write("\n")
            state.write("\n")
            state.eol = True
            state.lists.append(_ListState(ordered=kind is NodeType.ORDEREDLIST))
        elif kind is NodeType.LISTITEM:
            self._list_item(state)
        elif kind is NodeType.ULINK:
            if html:
                if node.extra:
                    state.write(f'<a href="{node.extra}">')
                    state.valid_link = True
            else:
                state.write("[")
            state.eol = False
        elif kind is NodeType.REF:
            if html:
                url = self.urls.get(node.extra)
                if url:
                    state.write(f'<a href="{url}">')
                    state.valid_link = True
            else:
                state.write("[")
            state.eol = False
        elif kind is NodeType.IMAGE:
            self._image(state, node)
        elif kind is NodeType.COMPUTEROUTPUT:
            state.write("<code>" if html else "`")
            state.in_computer_output = True
            state.eol = False

    def _list_item(self, state: _State) -> None:
        depth = len(state.lists)
        if depth > 1:
            state.write(" " * ((depth - 1) * 4))
        current = state.lists[-1] if state.lists else None
        if current is not None:
            current.counter += 1
        if current is not None and current.ordered and depth == 1:
            state.write(f"{current.counter}. ")
        else:
            state.write("* ")
        state.eol = False

    def _image(self, state: _State, node: TextNode) -> None:
        opts = self.options
        prefix = opts.base_url + opts.images_folder
        separator = "/" if prefix else ""
        state.write(f"![{node.extra}]({prefix}{separator}{node.extra})")
        state.eol = False
        if not opts.copy_images:
            return
        source = os.path.join(self.input_dir, node.extra)
        if not os.path.isfile(source):
            return
        if opts.use_folders and opts.images_folder:
            target = os.path.join(opts.output_dir, opts.images_folder, node.extra)
        else:
            target = os.path.join(opts.output_dir, node.extra)
        try:
            shutil.copyfile(source, target)
        except OSError:
            pass

    def _formula(self, state: _State, node: TextNode) -> None:
        if not node.children:
            return
        formula = node.children[0].data
        opts = self.options
        if formula.startswith("$") and len(formula) >= 3:
            state.write(opts.formula_inline_start, formula[1:-1], opts.formula_inline_end)
        elif formula.startswith("\\[") and len(formula) >= 5:
            state.write(opts.formula_block_start, formula[2:-2], opts.formula_block_end)

    def _close(self, state: _State, parent: TextNode | None, node: TextNode) -> None:
        html = self.options.link_and_inline_code_as_html
        kind = node.type
        if kind in _CLOSING:
            text, state.eol = _CLOSING[kind]
            state.write(text)
        elif kind is NodeType.ULINK:
            if html:
                if state.valid_link:
                    state.write("</a>")
            else:
                state.write("]")
                if node.extra:
                    state.write(f"({node.extra})")
            state.valid_link = False
            state.eol = False
        elif kind is NodeType.REF:
            if html:
                if state.valid_link:
                    state.write("</a>")
            else:
                state.write("]")
                if node.extra in self.urls:
                    state.write(f"({self.urls[node.extra]})")
            state.valid_link = False
            state.eol = False
        elif kind is NodeType.PARA:
            if parent is not None and parent.type is NodeType.TABLE_CELL:
                return
            if not state.eol:
                in_item = parent is not None and parent.type is NodeType.LISTITEM
                state.write("\n" if in_item else "\n\n")
                state.eol = True
        elif kind is NodeType.COMPUTEROUTPUT:
            state.write("</code>" if html else "`")
            state.in_computer_output = False
            state.eol = False
        elif kind in _LISTS:
            if state.lists:
                state.lists.pop()
        elif kind is NodeType.PROGRAMLISTING:
            state.write("```\n\n")
            if node.extra:
                state.write(f"_Filename: {node.extra}_\n\n")
            state.eol = True
        elif kind is NodeType.TABLE:
            state.write("\n\n")
            state.eol = True
            state.table_header = False
        elif kind is NodeType.TABLE_ROW:
            if not state.table_header:
                state.write("\n| ", " -------- |" * len(node.children))
                state.table_header = True
            state.write("\n")
            state.eol = True
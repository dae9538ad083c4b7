"""Parsing of doxygen description markup into a tree of text nodes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from . import log
from .xml import Element


class NodeType(enum.Enum):
    UNKNOWN = enum.auto()
    PARAS = enum.auto()
    PARA = enum.auto()
    TEXT = enum.auto()
    BOLD = enum.auto()
    EMPHASIS = enum.auto()
    STRIKE = enum.auto()
    HRULER = enum.auto()
    IMAGE = enum.auto()
    ULINK = enum.auto()
    REF = enum.auto()
    LISTITEM = enum.auto()
    ITEMIZEDLIST = enum.auto()
    VARIABLELIST = enum.auto()
    ORDEREDLIST = enum.auto()
    VARLISTENTRY = enum.auto()
    TERM = enum.auto()
    ANCHOR = enum.auto()
    SIMPLESEC = enum.auto()
    COMPUTEROUTPUT = enum.auto()
    PARAMETERDESCRIPTION = enum.auto()
    PARAMETERNAME = enum.auto()
    PARAMETERLIST = enum.auto()
    PARAMETERITEM = enum.auto()
    PARAMETERNAMELIST = enum.auto()
    XREFSECT = enum.auto()
    XREFTITLE = enum.auto()
    XREFDESCRIPTION = enum.auto()
    PROGRAMLISTING = enum.auto()
    CODELINE = enum.auto()
    SP = enum.auto()
    HIGHLIGHT = enum.auto()
    TITLE = enum.auto()
    SECT1 = enum.auto()
    SECT2 = enum.auto()
    SECT3 = enum.auto()
    SECT4 = enum.auto()
    SECT5 = enum.auto()
    SECT6 = enum.auto()
    SUPERSCRIPT = enum.auto()
    NONBREAKSPACE = enum.auto()
    TABLE = enum.auto()
    TABLE_ROW = enum.auto()
    TABLE_CELL = enum.auto()
    VERBATIM = enum.auto()
    SQUO = enum.auto()
    LINEBREAK = enum.auto()
    NDASH = enum.auto()
    MDASH = enum.auto()
    ONLYFOR = enum.auto()
    FORMULA = enum.auto()


@dataclass
class TextNode:
    """One node of parsed description markup."""

    type: NodeType
    data: str = ""
    extra: str = ""
    children: list[TextNode] = field(default_factory=list)


_TAGS = {
    "para": NodeType.PARA,
    "bold": NodeType.BOLD,
    "emphasis": NodeType.EMPHASIS,
    "strike": NodeType.STRIKE,
    "hruler": NodeType.HRULER,
    "image": NodeType.IMAGE,
    "ulink": NodeType.ULINK,
    "ref": NodeType.REF,
    "listitem": NodeType.LISTITEM,
    "itemizedlist": NodeType.ITEMIZEDLIST,
    "variablelist": NodeType.VARIABLELIST,
    "orderedlist": NodeType.ORDEREDLIST,
    "varlistentry": NodeType.VARLISTENTRY,
    "term": NodeType.TERM,
    "anchor": NodeType.ANCHOR,
    "simplesect": NodeType.SIMPLESEC,
    "computeroutput": NodeType.COMPUTEROUTPUT,
    "parameterdescription": NodeType.PARAMETERDESCRIPTION,
    "parametername": NodeType.PARAMETERNAME,
    "parameterlist": NodeType.PARAMETERLIST,
    "parameteritem": NodeType.PARAMETERITEM,
    "parameternamelist": NodeType.PARAMETERNAMELIST,
    "type": NodeType.PARA,
    "argsstring": NodeType.PARA,
    "defval": NodeType.PARA,
    "declname": NodeType.PARA,
    "xrefsect": NodeType.XREFSECT,
    "xreftitle": NodeType.XREFTITLE,
    "xrefdescription": NodeType.XREFDESCRIPTION,
    "initializer": NodeType.PARA,
    "programlisting": NodeType.PROGRAMLISTING,
    "codeline": NodeType.CODELINE,
    "sp": NodeType.SP,
    "highlight": NodeType.HIGHLIGHT,
    "defname": NodeType.PARA,
    "title": NodeType.TITLE,
    "sect1": NodeType.SECT1,
    "sect2": NodeType.SECT2,
    "sect3": NodeType.SECT3,
    "sect4": NodeType.SECT4,
    "sect5": NodeType.SECT5,
    "sect6": NodeType.SECT6,
    "heading": NodeType.SECT1,
    "superscript": NodeType.SUPERSCRIPT,
    "nonbreakablespace": NodeType.NONBREAKSPACE,
    "table": NodeType.TABLE,
    "row": NodeType.TABLE_ROW,
    "entry": NodeType.TABLE_CELL,
    "verbatim": NodeType.VERBATIM,
    "lsquo": NodeType.SQUO,
    "linebreak": NodeType.LINEBREAK,
    "ndash": NodeType.NDASH,
    "mdash": NodeType.MDASH,
    "onlyfor": NodeType.ONLYFOR,
    "formula": NodeType.FORMULA,
}

_HEADINGS = {
    1: NodeType.SECT1,
    2: NodeType.SECT2,
    3: NodeType.SECT3,
    4: NodeType.SECT4,
    5: NodeType.SECT5,
    6: NodeType.SECT6,
}

# Node types that carry one attribute in `extra`: (attribute, default or None if required).
_EXTRA_ATTRS = {
    NodeType.SIMPLESEC: ("kind", None),
    NodeType.PARAMETERLIST: ("kind", None),
    NodeType.REF: ("refid", None),
    NodeType.ULINK: ("url", None),
    NodeType.IMAGE: ("name", None),
    NodeType.TABLE: ("cols", ""),
    NodeType.PROGRAMLISTING: ("filename", ""),
}


def str_to_type(name: str) -> NodeType:
    """Map a markup tag name to its node type, warning on unknown tags."""
    node_type = _TAGS.get(name)
    if node_type is None:
        log.warning(f'Text tag "{name}" not recognised')
        return NodeType.UNKNOWN
    return node_type


def _extra_for(node_type: NodeType, element: Element) -> str:
    if node_type is NodeType.XREFSECT:
        return element.attr("id").partition("_")[0]
    spec = _EXTRA_ATTRS.get(node_type)
    if spec is None:
        return ""
    attribute, default = spec
    return element.attr(attribute) if default is None else element.attr(attribute, default)


def _traverse(parent: TextNode, item: str | Element) -> None:
    if isinstance(item, str):
        if item:
            parent.children.append(TextNode(NodeType.TEXT, data=item))
        return

    node = TextNode(str_to_type(item.name))
    parent.children.append(node)
    if item.name == "heading":
        node.type = _HEADINGS.get(int(item.attr("level", "1")), NodeType.SECT1)
    node.extra = _extra_for(node.type, item)

    for child in item.nodes():
        _traverse(node, child)


def parse_paras(element: Element) -> TextNode:
    """Parse every child element of `element` under a PARAS root."""
    result = TextNode(NodeType.PARAS)
    for child in element.child_elements():
        _traverse(result, child)
    return result


def parse_para(element: Element) -> TextNode:
    """Parse `element` itself under a PARA root."""
    result = TextNode(NodeType.PARA)
    _traverse(result, element)
    return result
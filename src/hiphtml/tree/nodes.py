"""Node model over BeautifulSoup trees.

BeautifulSoup represents a parsed document as ``PageElement`` objects linked
by ``parent``, ``contents``, ``next_sibling`` and ``previous_sibling``. This
module exposes those links as uniform lookups that return ``None`` when a
relative does not exist, together with the node-kind discriminant the
cursor filters on.
"""

from enum import Enum, auto
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)

from hiphtml.tree.atom import Atom

# Length of text shown by describe_node before truncation
_TEXT_PREVIEW_LENGTH = 20


class NodeKind(Enum):
    """Kinds of node found in a parsed HTML tree."""

    DOCUMENT = auto()
    ELEMENT = auto()
    TEXT = auto()
    COMMENT = auto()
    DOCTYPE = auto()
    CDATA = auto()
    PROCESSING_INSTRUCTION = auto()
    DECLARATION = auto()


# Checked in order: Doctype, Comment and the rest all subclass NavigableString
_STRING_KINDS = (
    (Doctype, NodeKind.DOCTYPE),
    (Comment, NodeKind.COMMENT),
    (CData, NodeKind.CDATA),
    (ProcessingInstruction, NodeKind.PROCESSING_INSTRUCTION),
    (Declaration, NodeKind.DECLARATION),
)


def node_kind(node: PageElement) -> NodeKind:
    """Return the kind of a tree node.

    Raises:
        TypeError: If ``node`` is not part of a BeautifulSoup tree
    """
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    for string_class, kind in _STRING_KINDS:
        if isinstance(node, string_class):
            return kind
    if isinstance(node, NavigableString):
        return NodeKind.TEXT
    raise TypeError(f"Not a tree node: {type(node).__name__}")


def is_element(node: PageElement) -> bool:
    return node_kind(node) is NodeKind.ELEMENT


def is_text(node: PageElement) -> bool:
    return node_kind(node) is NodeKind.TEXT


def tag_atom(node: PageElement) -> Optional[Atom]:
    """Return the tag identifier of an element, None for anything else."""
    if not is_element(node):
        return None
    return Atom.lookup(node.name)


def parent_of(node: PageElement) -> Optional[PageElement]:
    return getattr(node, "parent", None)


def first_child_of(node: PageElement) -> Optional[PageElement]:
    if isinstance(node, Tag) and node.contents:
        return node.contents[0]
    return None


def last_child_of(node: PageElement) -> Optional[PageElement]:
    if isinstance(node, Tag) and node.contents:
        return node.contents[-1]
    return None


def next_sibling_of(node: PageElement) -> Optional[PageElement]:
    return getattr(node, "next_sibling", None)


def prev_sibling_of(node: PageElement) -> Optional[PageElement]:
    return getattr(node, "previous_sibling", None)


def describe_node(node: PageElement) -> str:
    """Short label for a node, used in log messages."""
    kind = node_kind(node)
    if kind is NodeKind.DOCUMENT:
        return "#document"
    if kind is NodeKind.ELEMENT:
        return f"<{node.name}>"
    text = str(node)
    if len(text) > _TEXT_PREVIEW_LENGTH:
        text = text[:_TEXT_PREVIEW_LENGTH] + "..."
    return f"#{kind.name.lower()} {text!r}"

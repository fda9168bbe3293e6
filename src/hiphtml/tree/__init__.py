"""Tree model for parsed HTML documents.

Key Components:
    Atom: Registry of canonical HTML element identifiers
    NodeKind: Node-kind discriminant for BeautifulSoup nodes
    node_kind, is_element, is_text, tag_atom: Node predicates
    parent_of, first_child_of, last_child_of, next_sibling_of,
    prev_sibling_of: Relative lookups returning None when absent
"""

from .atom import Atom
from .nodes import (
    NodeKind,
    describe_node,
    first_child_of,
    is_element,
    is_text,
    last_child_of,
    next_sibling_of,
    node_kind,
    parent_of,
    prev_sibling_of,
    tag_atom,
)

__all__ = [
    "Atom",
    "NodeKind",
    "describe_node",
    "first_child_of",
    "is_element",
    "is_text",
    "last_child_of",
    "next_sibling_of",
    "node_kind",
    "parent_of",
    "prev_sibling_of",
    "tag_atom",
]

"""Stateful cursor for navigating a parsed HTML document.

A ``Cursor`` points at one node of a BeautifulSoup tree and tracks its depth
below the root (the document is depth 0, ``<html>`` depth 1). Five primitive
moves follow single tree edges; ``next`` and ``prev`` compose them into
document-order (pre-order) stepping; the element and tag searches repeat
those steps until a predicate holds.

Every operation returns a ``MoveResult``. Running out of document or asking
for a missing relative is reported through ``MoveResult.condition`` and never
raised.

Rollback differs by layer, and callers depend on it:

- Primitive moves, ``next`` and ``prev`` are all-or-nothing. When they fail
  the cursor is exactly where it was before the call.
- ``next_element``, ``prev_element`` and the tag searches do not roll back.
  When they fail the cursor stays on the last node they reached, which for a
  forward search is the last node of the document.

Example:
    >>> cursor = Cursor.parse("<html><head></head><body><p>x</p></body></html>")
    >>> cursor.body().node.name
    'body'
    >>> cursor.depth
    2
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Union

from bs4.element import PageElement

from hiphtml.api.parser import InputType, parse
from hiphtml.shared import (
    HipHTMLConfig,
    MoveResult,
    TraversalCondition,
    get_logger,
)
from hiphtml.tree import (
    Atom,
    describe_node,
    first_child_of,
    is_element,
    last_child_of,
    next_sibling_of,
    node_kind,
    parent_of,
    prev_sibling_of,
    tag_atom,
)

TagLike = Union[Atom, str]


@dataclass(frozen=True, eq=False)
class Position:
    """Snapshot of where a cursor stands.

    Nodes are compared by identity; BeautifulSoup compares tags by markup,
    which would make two identical ``<p>`` elements the same position.
    """

    node: Any
    depth: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.node is other.node and self.depth == other.depth

    def __hash__(self) -> int:
        return hash((id(self.node), self.depth))


class Cursor:
    """Navigational cursor over a BeautifulSoup document tree.

    The cursor never leaves the subtree of the node it was bound to: at the
    root, ``parent``, ``next_sibling`` and ``prev_sibling`` fail. For a
    document root this changes nothing, since a document has no parent or
    siblings.

    A cursor is plain mutable state with no locking. Use one cursor per
    traversal; ``fork`` makes an independent copy at the same position.
    """

    def __init__(
        self, root: PageElement, config: Optional[HipHTMLConfig] = None
    ) -> None:
        """Bind a cursor to ``root``.

        Args:
            root: Document (or subtree) node to traverse
            config: Optional configuration

        Raises:
            TypeError: If ``root`` is not a BeautifulSoup tree node
        """
        node_kind(root)
        self._root = root
        self._node = root
        self._depth = 0
        self._config = config or HipHTMLConfig()
        self._logger = get_logger(__name__, self._config.correlation_id, "cursor")

        self._logger.debug(
            "Cursor bound to tree", extra={"root": describe_node(root)}
        )

    @classmethod
    def parse(
        cls, input_data: InputType, config: Optional[HipHTMLConfig] = None
    ) -> "Cursor":
        """Parse HTML and return a cursor on the resulting document.

        Parse and read errors propagate unchanged.
        """
        return cls(parse(input_data, config), config)

    @property
    def root(self) -> PageElement:
        return self._root

    @property
    def node(self) -> PageElement:
        """The node the cursor currently stands on."""
        return self._node

    @property
    def depth(self) -> int:
        """Depth of the current node; the root is 0."""
        return self._depth

    @property
    def position(self) -> Position:
        return Position(self._node, self._depth)

    @property
    def config(self) -> HipHTMLConfig:
        return self._config

    def reset(self) -> PageElement:
        """Return to the root at depth 0."""
        self._restore(Position(self._root, 0))
        self._logger.debug("Cursor reset to root")
        return self._node

    def fork(self) -> "Cursor":
        """Create an independent cursor over the same tree at the same position."""
        forked = Cursor(self._root, self._config)
        forked._restore(self.position)
        return forked

    # Primitive moves

    def parent(self) -> MoveResult:
        target = None if self._at_root else parent_of(self._node)
        return self._step(target, -1, "parent")

    def first_child(self) -> MoveResult:
        return self._step(first_child_of(self._node), 1, "first_child")

    def last_child(self) -> MoveResult:
        return self._step(last_child_of(self._node), 1, "last_child")

    def next_sibling(self) -> MoveResult:
        target = None if self._at_root else next_sibling_of(self._node)
        return self._step(target, 0, "next_sibling")

    def prev_sibling(self) -> MoveResult:
        target = None if self._at_root else prev_sibling_of(self._node)
        return self._step(target, 0, "prev_sibling")

    # Document-order stepping

    def next(self) -> MoveResult:
        """Advance to the next node in document order.

        Descends into the first child when there is one, otherwise moves to
        the nearest following sibling of the node or of an ancestor. Fails
        with ``END_OF_DOCUMENT`` and leaves the cursor where it was when no
        node follows.
        """
        if self.first_child():
            return self._current()
        if self._next_sibling_ascending():
            return self._current()
        return MoveResult.failed(TraversalCondition.END_OF_DOCUMENT)

    def prev(self) -> MoveResult:
        """Retreat to the previous node in document order.

        Moves to the deepest last descendant of the previous sibling, or to
        the parent when there is no previous sibling. Fails with
        ``BEGINNING_OF_DOCUMENT`` at the root, leaving the cursor unchanged.
        """
        if self._prev_sibling_descending():
            return self._current()
        if self.parent():
            return self._current()
        return MoveResult.failed(TraversalCondition.BEGINNING_OF_DOCUMENT)

    def _next_sibling_ascending(self) -> MoveResult:
        start = self.position
        while True:
            if self.next_sibling():
                return self._current()
            if not self.parent():
                break
        self._restore(start)
        return MoveResult.failed(TraversalCondition.NO_SUCH_RELATIVE)

    def _prev_sibling_descending(self) -> MoveResult:
        if not self.prev_sibling():
            return MoveResult.failed(TraversalCondition.NO_SUCH_RELATIVE)
        while self.last_child():
            pass
        return self._current()

    # Filtered traversal

    def next_element(self) -> MoveResult:
        """Advance until the cursor stands on an element.

        Returns immediately when the current node already is an element. On
        ``END_OF_DOCUMENT`` the cursor stays on the last node it reached.
        """
        while not is_element(self._node):
            if not self.next():
                return MoveResult.failed(TraversalCondition.END_OF_DOCUMENT)
        return self._current()

    def prev_element(self) -> MoveResult:
        """Retreat until the cursor stands on an element.

        Returns immediately when the current node already is an element. On
        ``BEGINNING_OF_DOCUMENT`` the cursor stays on the root.
        """
        while not is_element(self._node):
            if not self.prev():
                return MoveResult.failed(TraversalCondition.BEGINNING_OF_DOCUMENT)
        return self._current()

    def first_element_by_tag(self, tag: TagLike) -> MoveResult:
        """Move to the first element in the document carrying ``tag``.

        Starts over from the root. On failure the cursor is left on the last
        node of the document.

        Raises:
            ValueError: If ``tag`` is not a registered tag name
        """
        atom = Atom.coerce(tag)
        self.reset()
        return self._search_forward(atom, "first_element_by_tag")

    def next_element_by_tag(self, tag: TagLike) -> MoveResult:
        """Move to the next element after the current node carrying ``tag``.

        The current node itself is never matched. On failure the cursor is
        left on the last node of the document.

        Raises:
            ValueError: If ``tag`` is not a registered tag name
        """
        atom = Atom.coerce(tag)
        return self._search_forward(atom, "next_element_by_tag")

    def body(self) -> MoveResult:
        return self.first_element_by_tag(Atom.BODY)

    def head(self) -> MoveResult:
        return self.first_element_by_tag(Atom.HEAD)

    def first_meta(self) -> MoveResult:
        return self.first_element_by_tag(Atom.META)

    def next_meta(self) -> MoveResult:
        return self.next_element_by_tag(Atom.META)

    def _search_forward(self, atom: Atom, operation: str) -> MoveResult:
        result = self.next()
        while result and tag_atom(self._node) is not atom:
            result = self.next()

        if self._config.cursor.log_searches:
            self._logger.debug(
                "Tag search matched" if result else "Tag search exhausted",
                extra={
                    "operation": operation,
                    "tag": atom.value,
                    "depth": self._depth,
                    "condition": result.condition.name if result.condition else None,
                }
            )
        return result

    # Iteration

    def walk(self) -> Iterator[PageElement]:
        """Yield every node after the current one in document order.

        The cursor advances with each node yielded and ends on the last node
        of the document.
        """
        while self.next():
            yield self._node

    def iter_elements_by_tag(self, tag: TagLike) -> Iterator[PageElement]:
        """Yield every element carrying ``tag`` in document order.

        Restarts from the root. Raises ``ValueError`` immediately for an
        unregistered tag name.
        """
        atom = Atom.coerce(tag)
        return self._iter_elements_by_atom(atom)

    def _iter_elements_by_atom(self, atom: Atom) -> Iterator[PageElement]:
        result = self.first_element_by_tag(atom)
        while result:
            yield result.node
            result = self.next_element_by_tag(atom)

    # Internal state handling

    @property
    def _at_root(self) -> bool:
        return self._node is self._root

    def _step(
        self, target: Optional[PageElement], depth_delta: int, operation: str
    ) -> MoveResult:
        if target is None:
            return MoveResult.failed(TraversalCondition.NO_SUCH_RELATIVE)

        self._node = target
        self._depth += depth_delta
        tracing = self._config.cursor.trace_moves
        if tracing and self._logger.is_enabled_for(logging.DEBUG):
            self._logger.debug(
                f"{operation} -> {describe_node(target)}",
                extra={"operation": operation, "depth": self._depth}
            )
        return self._current()

    def _current(self) -> MoveResult:
        return MoveResult.moved(self._node, self._depth)

    def _restore(self, position: Position) -> None:
        self._node = position.node
        self._depth = position.depth

    def __repr__(self) -> str:
        return f"Cursor(node={describe_node(self._node)}, depth={self._depth})"

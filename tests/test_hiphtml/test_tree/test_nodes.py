"""Tests for the node model over BeautifulSoup trees."""

import pytest
from bs4 import BeautifulSoup

from hiphtml.tree import (
    Atom,
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

HTML = (
    "<!DOCTYPE html><html><head></head>"
    "<body><p>hello</p><!--remark--><custom-tag></custom-tag></body></html>"
)


@pytest.fixture
def soup() -> BeautifulSoup:
    return BeautifulSoup(HTML, "html5lib")


class TestNodeKind:
    """Test node kind classification."""

    def test_document(self, soup):
        """Test the document node."""
        assert node_kind(soup) is NodeKind.DOCUMENT
        assert not is_element(soup)

    def test_doctype(self, soup):
        """Test the doctype node."""
        assert node_kind(soup.contents[0]) is NodeKind.DOCTYPE

    def test_element(self, soup):
        """Test element nodes."""
        assert node_kind(soup.body) is NodeKind.ELEMENT
        assert is_element(soup.p)

    def test_text(self, soup):
        """Test text nodes."""
        text = soup.p.contents[0]

        assert node_kind(text) is NodeKind.TEXT
        assert is_text(text)
        assert not is_element(text)

    def test_comment(self, soup):
        """Test comment nodes are not text."""
        comment = soup.body.contents[1]

        assert node_kind(comment) is NodeKind.COMMENT
        assert not is_text(comment)

    def test_non_node_rejected(self):
        """Test that arbitrary objects are rejected."""
        with pytest.raises(TypeError, match="Not a tree node"):
            node_kind("plain string")


class TestTagAtom:
    """Test tag identifiers of nodes."""

    def test_known_element(self, soup):
        """Test a registered element."""
        assert tag_atom(soup.body) is Atom.BODY

    def test_unknown_element(self, soup):
        """Test an element missing from the registry."""
        assert tag_atom(soup.body.contents[2]) is None

    def test_legacy_element(self):
        """Test that obsolete elements still map to their atoms."""
        legacy = BeautifulSoup("<marquee><tt>x</tt></marquee>", "html5lib")

        assert tag_atom(legacy.marquee) is Atom.MARQUEE
        assert tag_atom(legacy.tt) is Atom.TT

    def test_non_element(self, soup):
        """Test that non-elements have no tag identifier."""
        assert tag_atom(soup) is None
        assert tag_atom(soup.p.contents[0]) is None


class TestRelatives:
    """Test relative lookups."""

    def test_parent(self, soup):
        """Test parent lookups up to the document."""
        assert parent_of(soup.p) is soup.body
        assert parent_of(soup.html) is soup
        assert parent_of(soup) is None

    def test_children(self, soup):
        """Test first and last child lookups."""
        assert first_child_of(soup.html) is soup.head
        assert last_child_of(soup.html) is soup.body
        assert first_child_of(soup.head) is None
        assert last_child_of(soup.p.contents[0]) is None

    def test_siblings(self, soup):
        """Test sibling lookups."""
        assert next_sibling_of(soup.head) is soup.body
        assert prev_sibling_of(soup.body) is soup.head
        assert prev_sibling_of(soup.head) is None
        assert next_sibling_of(soup.body) is None


class TestDescribeNode:
    """Test node labels used in logs."""

    def test_labels(self, soup):
        """Test labels for each kind of node."""
        assert describe_node(soup) == "#document"
        assert describe_node(soup.body) == "<body>"
        assert describe_node(soup.p.contents[0]) == "#text 'hello'"
        assert describe_node(soup.body.contents[1]) == "#comment 'remark'"

    def test_long_text_is_truncated(self):
        """Test truncation of long text."""
        soup = BeautifulSoup("<p>" + "a" * 50 + "</p>", "html5lib")

        assert describe_node(soup.p.contents[0]) == "#text '" + "a" * 20 + "...'"

"""HipHTML: a navigational cursor for parsed HTML.

HipHTML wraps an HTML5 parser (BeautifulSoup driving html5lib) and replaces
hand-written recursive descent with a cursor that walks the tree in document
order, ascends and descends, and finds elements by tag.

Progressive API Disclosure:
- Level 1: Cursor.parse(html) followed by body(), head(), first_meta(), ...
- Level 2: Document-order stepping with next() / prev() and primitive moves
- Level 3: Configured parsing and tracing through HipHTMLConfig
"""

__version__ = "0.1.0"
__author__ = "HipHTML Team"

from .api import Cursor, Position, parse, parse_file, parse_string
from .shared import (
    HipHTMLConfig,
    MoveResult,
    TraversalCondition,
    TraversalError,
)
from .tree import Atom, NodeKind, is_element, is_text, node_kind

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Parsing
    "parse",
    "parse_string",
    "parse_file",

    # Traversal
    "Cursor",
    "Position",
    "MoveResult",
    "TraversalCondition",
    "TraversalError",

    # Tree model
    "Atom",
    "NodeKind",
    "is_element",
    "is_text",
    "node_kind",

    # Configuration
    "HipHTMLConfig",
]

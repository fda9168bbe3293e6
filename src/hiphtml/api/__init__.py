"""Public API for parsing HTML and traversing the resulting tree.

- parse(), parse_string(), parse_file(): build a BeautifulSoup document
- Cursor: stateful navigation over a document tree
"""

from .cursor import Cursor, Position
from .parser import parse, parse_file, parse_string

__all__ = [
    "Cursor",
    "Position",
    "parse",
    "parse_file",
    "parse_string",
]

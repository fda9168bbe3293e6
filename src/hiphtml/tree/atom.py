"""Canonical identifiers for HTML element names.

Each ``Atom`` is also a ``str`` equal to its lowercase tag name, so
``Atom.BODY == "body"`` and atoms can be used anywhere a tag name is expected.
"""

from enum import Enum
from typing import Optional, Union


class Atom(str, Enum):
    """Registry of HTML element names.

    Covers the current element set plus the obsolete and non-conforming
    elements (``tt``, ``marquee``, ``noframes``, ...) that HTML5 parsers still
    build into the tree.
    """

    A = "a"
    ABBR = "abbr"
    ACRONYM = "acronym"
    ADDRESS = "address"
    APPLET = "applet"
    AREA = "area"
    ARTICLE = "article"
    ASIDE = "aside"
    AUDIO = "audio"
    B = "b"
    BASE = "base"
    BASEFONT = "basefont"
    BDI = "bdi"
    BDO = "bdo"
    BGSOUND = "bgsound"
    BIG = "big"
    BLINK = "blink"
    BLOCKQUOTE = "blockquote"
    BODY = "body"
    BR = "br"
    BUTTON = "button"
    CANVAS = "canvas"
    CAPTION = "caption"
    CENTER = "center"
    CITE = "cite"
    CODE = "code"
    COL = "col"
    COLGROUP = "colgroup"
    COMMAND = "command"
    DATA = "data"
    DATALIST = "datalist"
    DD = "dd"
    DEL = "del"
    DETAILS = "details"
    DFN = "dfn"
    DIALOG = "dialog"
    DIR = "dir"
    DIV = "div"
    DL = "dl"
    DT = "dt"
    EM = "em"
    EMBED = "embed"
    FIELDSET = "fieldset"
    FIGCAPTION = "figcaption"
    FIGURE = "figure"
    FONT = "font"
    FOOTER = "footer"
    FORM = "form"
    FRAME = "frame"
    FRAMESET = "frameset"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    HEAD = "head"
    HEADER = "header"
    HGROUP = "hgroup"
    HR = "hr"
    HTML = "html"
    I = "i"
    IFRAME = "iframe"
    IMAGE = "image"
    IMG = "img"
    INPUT = "input"
    INS = "ins"
    ISINDEX = "isindex"
    KBD = "kbd"
    KEYGEN = "keygen"
    LABEL = "label"
    LEGEND = "legend"
    LI = "li"
    LINK = "link"
    LISTING = "listing"
    MAIN = "main"
    MAP = "map"
    MARK = "mark"
    MARQUEE = "marquee"
    MATH = "math"
    MENU = "menu"
    MENUITEM = "menuitem"
    META = "meta"
    METER = "meter"
    NAV = "nav"
    NOBR = "nobr"
    NOEMBED = "noembed"
    NOFRAMES = "noframes"
    NOSCRIPT = "noscript"
    OBJECT = "object"
    OL = "ol"
    OPTGROUP = "optgroup"
    OPTION = "option"
    OUTPUT = "output"
    P = "p"
    PARAM = "param"
    PICTURE = "picture"
    PLAINTEXT = "plaintext"
    PRE = "pre"
    PROGRESS = "progress"
    Q = "q"
    RB = "rb"
    RP = "rp"
    RT = "rt"
    RTC = "rtc"
    RUBY = "ruby"
    S = "s"
    SAMP = "samp"
    SCRIPT = "script"
    SEARCH = "search"
    SECTION = "section"
    SELECT = "select"
    SLOT = "slot"
    SMALL = "small"
    SOURCE = "source"
    SPACER = "spacer"
    SPAN = "span"
    STRIKE = "strike"
    STRONG = "strong"
    STYLE = "style"
    SUB = "sub"
    SUMMARY = "summary"
    SUP = "sup"
    SVG = "svg"
    TABLE = "table"
    TBODY = "tbody"
    TD = "td"
    TEMPLATE = "template"
    TEXTAREA = "textarea"
    TFOOT = "tfoot"
    TH = "th"
    THEAD = "thead"
    TIME = "time"
    TITLE = "title"
    TR = "tr"
    TRACK = "track"
    TT = "tt"
    U = "u"
    UL = "ul"
    VAR = "var"
    VIDEO = "video"
    WBR = "wbr"
    XMP = "xmp"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def lookup(cls, name: Optional[str]) -> Optional["Atom"]:
        """Return the atom for a tag name, or None if it is not registered."""
        if not name:
            return None
        return _BY_NAME.get(name.lower())

    @classmethod
    def coerce(cls, tag: Union["Atom", str]) -> "Atom":
        """Accept an atom or a tag name and return the atom.

        Raises:
            ValueError: If ``tag`` names an element missing from the registry
        """
        if isinstance(tag, Atom):
            return tag
        if not isinstance(tag, str):
            raise TypeError("Tag must be an Atom or a tag name string")
        atom = cls.lookup(tag)
        if atom is None:
            raise ValueError(f"Unknown tag name: {tag!r}")
        return atom


_BY_NAME = {atom.value: atom for atom in Atom}

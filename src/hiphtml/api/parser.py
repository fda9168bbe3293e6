"""Parse entry points that build the document tree a cursor walks.

Tree construction is delegated to BeautifulSoup; by default it drives the
html5lib tree builder so the result always has the implied ``<html>``,
``<head>`` and ``<body>`` elements of an HTML5 document. Errors from the
parser or from reading the input are raised unchanged.
"""

import time
from pathlib import Path
from typing import BinaryIO, Optional, TextIO, Tuple, Union

from bs4 import BeautifulSoup
from bs4.dammit import UnicodeDammit

from hiphtml.shared import HipHTMLConfig, ParserConfig, get_logger
from hiphtml.shared.logging import CorrelationLogger

# Type definitions for input data
InputType = Union[str, bytes, BinaryIO, TextIO, Path]
Markup = Union[str, bytes]

# Constants for API operations
PREVIEW_LENGTH = 100  # Max length for content preview in logs
MS_PER_SECOND = 1000  # Milliseconds per second conversion

# Tree builders that ignore from_encoding and exclude_encodings
_PREDECODED_BACKENDS = ("html5lib",)


def parse(
    input_data: InputType, config: Optional[HipHTMLConfig] = None
) -> BeautifulSoup:
    """Parse HTML from various input sources with automatic type detection.

    Args:
        input_data: HTML content as string, bytes, file-like object, or Path
        config: Optional configuration; defaults to html5lib

    Returns:
        The BeautifulSoup document node

    Raises:
        TypeError: If the input type is not supported
        OSError: If reading a file or stream fails

    Examples:
        >>> soup = parse('<p>hello</p>')
        >>> soup.body.p.string
        'hello'
    """
    config = config or HipHTMLConfig()
    logger = get_logger(__name__, config.correlation_id, "parse")

    logger.info(
        "Starting universal parse operation",
        extra={"input_type": type(input_data).__name__}
    )

    if isinstance(input_data, (str, bytes)):
        return _build_tree(input_data, config, logger)
    if isinstance(input_data, Path):
        return parse_file(input_data, config=config)
    if hasattr(input_data, "read"):
        return _build_tree(input_data.read(), config, logger)
    raise TypeError(
        f"Unsupported input type {type(input_data).__name__}; "
        "expected str, bytes, Path or a file-like object"
    )


def parse_string(
    html_string: str, config: Optional[HipHTMLConfig] = None
) -> BeautifulSoup:
    """Parse HTML from a string.

    Args:
        html_string: HTML content
        config: Optional configuration

    Returns:
        The BeautifulSoup document node
    """
    if not isinstance(html_string, str):
        raise TypeError("parse_string expects a str")

    config = config or HipHTMLConfig()
    logger = get_logger(__name__, config.correlation_id, "parse_string")
    logger.info(
        "Starting string parse operation",
        extra={
            "content_length": len(html_string),
            "preview": (
                html_string[:PREVIEW_LENGTH] + "..."
                if len(html_string) > PREVIEW_LENGTH else html_string
            )
        }
    )
    return _build_tree(html_string, config, logger)


def parse_file(
    file_path: Union[str, Path],
    encoding: Optional[str] = None,
    config: Optional[HipHTMLConfig] = None
) -> BeautifulSoup:
    """Parse HTML from a file.

    Without ``encoding`` the raw bytes are handed to the parser, which
    detects the encoding itself (honoring ``ParserConfig.from_encoding``).

    Args:
        file_path: Path to the HTML file
        encoding: Optional text encoding used to decode the file first
        config: Optional configuration

    Returns:
        The BeautifulSoup document node

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be read
    """
    config = config or HipHTMLConfig()
    logger = get_logger(__name__, config.correlation_id, "parse_file")
    path = Path(file_path)

    logger.info(
        "Starting file parse operation",
        extra={"file_path": str(path), "encoding": encoding}
    )

    markup: Markup
    if encoding:
        markup = path.read_text(encoding=encoding)
    else:
        markup = path.read_bytes()
    return _build_tree(markup, config, logger)


def _build_tree(
    markup: Markup, config: HipHTMLConfig, logger: CorrelationLogger
) -> BeautifulSoup:
    start_time = time.time()
    parser_config = config.parser

    options = {}
    original_encoding = None
    try:
        if isinstance(markup, bytes):
            if parser_config.backend in _PREDECODED_BACKENDS:
                if parser_config.from_encoding or parser_config.exclude_encodings:
                    markup, original_encoding = _decode(markup, parser_config)
            else:
                if parser_config.from_encoding:
                    options["from_encoding"] = parser_config.from_encoding
                if parser_config.exclude_encodings:
                    options["exclude_encodings"] = list(
                        parser_config.exclude_encodings
                    )
        elif parser_config.from_encoding:
            logger.warning(
                "from_encoding ignored for text input",
                extra={"from_encoding": parser_config.from_encoding}
            )

        soup = BeautifulSoup(markup, parser_config.backend, **options)
    except Exception:
        logger.exception(
            "Tree construction failed",
            extra={"backend": parser_config.backend}
        )
        raise

    if original_encoding:
        soup.original_encoding = original_encoding

    logger.debug(
        "Tree construction complete",
        extra={
            "backend": parser_config.backend,
            "original_encoding": soup.original_encoding,
            "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
        }
    )
    return soup


def _decode(markup: bytes, parser_config: ParserConfig) -> Tuple[str, str]:
    """Decode bytes with the configured encodings.

    html5lib sniffs ``<meta charset>`` itself and ignores the encodings
    BeautifulSoup is given, so the configured choice is applied before the
    tree builder sees the markup.

    Raises:
        ValueError: If no candidate encoding decodes the markup
    """
    known = [parser_config.from_encoding] if parser_config.from_encoding else []
    dammit = UnicodeDammit(
        markup,
        known,
        is_html=True,
        exclude_encodings=list(parser_config.exclude_encodings),
    )
    if dammit.unicode_markup is None:
        raise ValueError("Markup could not be decoded with the configured encodings")
    return dammit.unicode_markup, dammit.original_encoding

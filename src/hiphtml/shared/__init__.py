"""Shared utilities for HTML tree traversal.

This module provides configuration objects, result types, and logging
helpers used across the parsing and cursor layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    CursorConfig,
    HipHTMLConfig,
    ParserConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import (
    MoveResult,
    TraversalCondition,
    TraversalError,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "CursorConfig",
    "HipHTMLConfig",
    "ParserConfig",
    "CorrelationLogger",
    "get_logger",
    "MoveResult",
    "TraversalCondition",
    "TraversalError",
]

"""Structured logging utilities for HTML traversal.

Records emitted by a parse call and by the cursors walking its tree share the
``correlation_id`` taken from ``HipHTMLConfig``, so one page's parse, searches
and traced moves can be pulled out of a busy log together. Each record also
names its ``component``: the parse entry point (``parse``,
``parse_string`` or ``parse_file``) or ``cursor``.

The package never installs handlers; applications decide where records go.
"""

import logging
from typing import Any, Dict, Optional


class CorrelationLogger:
    """Wrapper over a stdlib logger that stamps traversal context on records.

    Every call merges ``component`` and ``correlation_id`` into ``extra``
    ahead of any caller-supplied keys such as ``operation``, ``tag`` or
    ``depth``, so formatters and filters can rely on both being present.
    """

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        """Initialize correlation logger.

        Args:
            name: Logger name, the emitting module's ``__name__``
            correlation_id: Identifier shared by a parse and its cursors
            component: Entry point or ``cursor``; defaults to the last part
                of ``name``
        """
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.split(".")[-1]

    def _get_extra(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        combined_extra = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }
        if extra:
            combined_extra.update(extra)
        return combined_extra

    def is_enabled_for(self, level: int) -> bool:
        """Check whether a record at ``level`` would be emitted.

        Per-move tracing calls this first so that walking a large document
        does not format a node description for every discarded record.
        """
        return self.logger.isEnabledFor(level)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self.logger.debug(message, extra=self._get_extra(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self.logger.info(message, extra=self._get_extra(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a misconfiguration that parsing recovers from."""
        self.logger.warning(message, extra=self._get_extra(extra))

    def exception(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log a tree construction failure with its traceback before re-raising."""
        self.logger.exception(message, extra=self._get_extra(extra))


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Build the logger for a parse call or a cursor.

    Example:
        >>> logger = get_logger("hiphtml.api.cursor", "req-7", "cursor")
        >>> logger.component
        'cursor'
    """
    return CorrelationLogger(name, correlation_id, component)

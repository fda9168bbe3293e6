"""Tests for correlation-aware logging."""

import logging

from hiphtml.api.cursor import Cursor
from hiphtml.shared import HipHTMLConfig
from hiphtml.shared.logging import CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Test CorrelationLogger behavior."""

    def test_component_defaults_to_last_name_part(self):
        """Test the default component name."""
        logger = get_logger("hiphtml.api.cursor")

        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "cursor"
        assert logger.correlation_id is None

    def test_records_carry_correlation_info(self, caplog):
        """Test that records include component and correlation id."""
        logger = get_logger("hiphtml.test", correlation_id="abc", component="unit")

        with caplog.at_level(logging.INFO, logger="hiphtml.test"):
            logger.info("hello", extra={"answer": 42})

        record = caplog.records[-1]
        assert record.getMessage() == "hello"
        assert record.component == "unit"
        assert record.correlation_id == "abc"
        assert record.answer == 42

    def test_is_enabled_for(self):
        """Test level checks delegate to the wrapped logger."""
        logger = get_logger("hiphtml.test.levels")
        logger.logger.setLevel(logging.WARNING)

        assert logger.is_enabled_for(logging.ERROR)
        assert not logger.is_enabled_for(logging.DEBUG)

    def test_parse_and_cursor_share_correlation_id(self, caplog):
        """Test that one configuration ties parse and cursor records together."""
        config = HipHTMLConfig(correlation_id="req-7")

        with caplog.at_level(logging.DEBUG, logger="hiphtml"):
            Cursor.parse("<p>x</p>", config).body()

        records = [r for r in caplog.records if r.name.startswith("hiphtml")]
        assert {"parse", "cursor"} <= {r.component for r in records}
        assert all(r.correlation_id == "req-7" for r in records)

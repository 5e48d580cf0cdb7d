"""
Tests for structured logging
"""

import json
import logging

from ledger_values.logging_config import (
    JSONFormatter, setup_logging, get_logger, log_rejection
)


class TestJSONFormatter:
    """Test JSON log lines"""

    def test_format_with_extras(self):
        """Test that value_type and input are included"""
        record = logging.LogRecord("ledger_values.amount", logging.DEBUG, __file__, 1,
                                   "Rejected amount input", (), None)
        record.value_type = "amount"
        record.input = "'abc'"

        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "DEBUG"
        assert entry["message"] == "Rejected amount input"
        assert entry["value_type"] == "amount"
        assert entry["input"] == "'abc'"
        assert "timestamp" in entry

    def test_none_fields_dropped(self):
        """Test that missing extras are omitted"""
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", (), None)
        entry = json.loads(JSONFormatter().format(record))
        assert "value_type" not in entry
        assert "input" not in entry


class TestSetupLogging:
    """Test logger setup"""

    def test_json_handler(self):
        """Test the default JSON setup"""
        logger = setup_logging("DEBUG", logger_name="ledger_values.test_json")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.propagate is False

    def test_text_handler_replaces_previous(self):
        """Test that repeated setup does not stack handlers"""
        setup_logging("INFO", logger_name="ledger_values.test_text")
        logger = setup_logging("WARNING", logger_name="ledger_values.test_text", fmt="text")
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.WARNING

    def test_get_logger(self):
        """Test logger lookup"""
        assert get_logger().name == "ledger_values"
        assert get_logger("other").name == "other"


class TestLogRejection:
    """Test rejection logging"""

    def test_debug_record(self, caplog):
        """Test that rejections are logged at DEBUG with extras"""
        logger = logging.getLogger("test.rejections")
        with caplog.at_level(logging.DEBUG, logger="test.rejections"):
            log_rejection(logger, "amount", "abc", "not native notation")

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.DEBUG
        assert record.value_type == "amount"
        assert record.input == "'abc'"
        assert "not native notation" in record.getMessage()

    def test_skipped_above_debug(self, caplog):
        """Test that nothing is emitted when DEBUG is disabled"""
        logger = logging.getLogger("test.rejections.quiet")
        with caplog.at_level(logging.INFO, logger="test.rejections.quiet"):
            log_rejection(logger, "currency", "X")
        assert caplog.records == []

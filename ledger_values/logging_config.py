"""
Structured Logging Configuration Module

Provides JSON-formatted (or plain text) logging for the value codecs.
Library modules only create loggers; handlers are attached by
setup_logging, which applications and the command-line tool call once.
"""

import logging
import json
from datetime import datetime, timezone
from typing import Any, Optional


TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.module if hasattr(record, 'module') else record.name,
            "logger": record.name,
            "message": record.getMessage(),
            "value_type": getattr(record, 'value_type', None),
            "input": getattr(record, 'input', None),
        }

        # Remove None values
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        # Add exception info if present
        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO", logger_name: str = "ledger_values",
                  fmt: str = "json") -> logging.Logger:
    """
    Setup logging for the package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Name of the logger
        fmt: "json" for structured lines, "text" for plain lines

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    if fmt == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(JSONFormatter())

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))

    # Prevent propagation to avoid duplicate logs
    logger.propagate = False

    return logger


def get_logger(name: str = "ledger_values") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


def log_rejection(logger: logging.Logger, value_type: str, raw: Any,
                  reason: Optional[str] = None):
    """
    Record that an input was parsed into an invalid value.

    Rejections are routine for untrusted input, so they go to DEBUG.

    Args:
        logger: Logger instance
        value_type: "amount", "account" or "currency"
        raw: The rejected input
        reason: Optional short explanation
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    message = f"Rejected {value_type} input"
    if reason:
        message = f"{message}: {reason}"

    logger.debug(message, extra={"value_type": value_type, "input": repr(raw)})

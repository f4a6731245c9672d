"""Structured logging configuration for Orchestra actors.

Provides key=value formatted logs carrying playback and radio context.
"""

import logging
import sys
from typing import Any

from orchestra.config import get_config

# Extra fields passed through logger calls via `extra=`
CONTEXT_FIELDS = ("actor", "pitch", "duration_ms", "signal")


class StructuredFormatter(logging.Formatter):
    """Key=value structured log formatter with playback context."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as key=value pairs.

        Args:
            record: Log record to format

        Returns:
            Structured log string
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        pairs = [f"{k}={v}" for k, v in log_data.items()]
        return " ".join(pairs)


def setup_logging() -> None:
    """Configure structured logging for the application.

    Sets up handlers, formatters, and log levels based on configuration.
    """
    config = get_config()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, config.log_level))
    console_handler.setFormatter(StructuredFormatter(datefmt="%Y-%m-%dT%H:%M:%S"))
    root_logger.addHandler(console_handler)

    # Library log levels
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("websockets").setLevel(logging.WARNING)

    logging.getLogger("orchestra").setLevel(getattr(logging, config.log_level))
    logging.getLogger("notation").setLevel(getattr(logging, config.log_level))


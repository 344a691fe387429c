"""Logging configuration for Sounds Like Home.

Configures the root logger from settings:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL
- LOG_FORMAT: simple, detailed, json
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def build_formatter(format_style: str) -> logging.Formatter:
    """Return the formatter matching ``format_style``."""
    style = format_style.lower()
    if style == "json":
        return JSONFormatter()
    if style == "detailed":
        return logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    return logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s")


def configure_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """Configure the root logger with a single stream handler.

    Args:
        level: Log level name. Unknown names fall back to INFO.
        format_style: One of ``simple``, ``detailed`` or ``json``.
    """
    log_level = level.upper()
    if log_level not in _VALID_LEVELS:
        sys.stderr.write(f"Warning: Invalid LOG_LEVEL '{level}', defaulting to INFO\n")
        log_level = "INFO"

    global _handler
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))
    # Repeated startups replace our handler instead of stacking another one.
    if _handler is not None:
        root_logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(build_formatter(format_style))
    root_logger.addHandler(_handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

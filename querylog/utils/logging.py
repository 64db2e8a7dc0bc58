"""Centralized logging configuration for querylog.

All loggers live under the ``querylog`` namespace. A ``TRACE`` level below
``DEBUG`` is registered so the verbose detail tier of the query channels maps
onto an ordinary logging level.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Final

from querylog._serialization import encode_json

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = ("ROOT_LOGGER_NAME", "TRACE", "StructuredFormatter", "configure_logging", "get_logger")

ROOT_LOGGER_NAME: Final = "querylog"
TRACE: Final = 5

logging.addLevelName(TRACE, "TRACE")

# LogRecord attributes that are never copied into the structured payload
_RESERVED_ATTRS: Final = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys() | {"message", "asctime", "extra_fields"}
)


class StructuredFormatter(logging.Formatter):
    """Structured JSON formatter, one object per line."""

    def format(self, record: LogRecord) -> str:
        """Format log record as structured JSON.

        Args:
            record: The log record to format

        Returns:
            JSON formatted log entry
        """
        log_entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Values passed through ``extra=`` land on the record itself
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_entry[key] = value

        if hasattr(record, "extra_fields"):
            log_entry.update(record.extra_fields)  # pyright: ignore

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return encode_json(log_entry)


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance under the querylog namespace.

    Args:
        name: Logger name. If not provided, returns the root querylog logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)


def configure_logging(
    level: str | int = "INFO",
    format_style: str = "structured",
    log_to_file: str | None = None,
    extra_handlers: list[logging.Handler] | None = None,
) -> logging.Logger:
    """Configure logging for the whole querylog namespace.

    Args:
        level: Logging level name (TRACE, DEBUG, INFO, ...) or number
        format_style: ``"structured"`` for JSON lines, ``"simple"`` for text
        log_to_file: Optional file path to log to, always structured
        extra_handlers: Additional handlers to add

    Returns:
        The configured root querylog logger.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            msg = f"Unknown logging level {level!r}"
            raise ValueError(msg)
        level = resolved
    root_logger.setLevel(level)

    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    if format_style == "structured":
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        file_handler = logging.FileHandler(log_to_file)
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    if extra_handlers:
        for handler in extra_handlers:
            root_logger.addHandler(handler)

    # Don't propagate to the root Python logger
    root_logger.propagate = False

    root_logger.debug(
        "querylog logging configured",
        extra={
            "extra_fields": {
                "level": logging.getLevelName(level),
                "format_style": format_style,
                "handlers_count": len(root_logger.handlers),
            }
        },
    )
    return root_logger

"""Logging helpers for quadbench.

quadbench is silent by default: the package logger carries only a
NullHandler. Call one of the helpers below to see what the estimators and
the report driver are doing.

Example usage:
    import quadbench

    quadbench.enable_console_logging(level="DEBUG")
    quadbench.set_module_level("numerics", "WARNING")
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
DEFAULT_BACKUP_COUNT = 3

LOGGER_NAME = "quadbench"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Example output:
        {"timestamp": "2026-01-15T10:30:00.123456+00:00", "level": "INFO",
         "logger": "quadbench.report", "message": "Built table for Gaussian"}
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _get_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _attach(handler: logging.Handler, level: LogLevel | int) -> None:
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    logger.addHandler(handler)


def _clear_handlers() -> None:
    """Remove and close every handler except NullHandler."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Log quadbench records to stderr.

    Stdout is left alone so the convergence tables stay clean.

    Args:
        level: Log level name or int.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.

    Returns:
        The created StreamHandler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format, date_format))
    _attach(handler, level)
    return handler


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> RotatingFileHandler:
    """Log quadbench records to a size-capped rotating file.

    Args:
        path: Log file path. Parent directories are created.
        level: Log level name or int.
        max_bytes: Size at which the file is rolled over.
        backup_count: Number of rolled files to keep.

    Returns:
        The created RotatingFileHandler.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
    _attach(handler, level)
    return handler


def enable_json_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Log quadbench records to stderr as JSON lines."""
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    _attach(handler, level)
    return handler


def set_level(level: LogLevel | int) -> None:
    """Set the level of the package logger."""
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Set the level of one quadbench submodule, e.g. ``"numerics.monte_carlo"``."""
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def disable_logging() -> None:
    """Drop all handlers and silence the package logger."""
    logger = _get_logger()
    _clear_handlers()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)

"""
Logging for the mapper.

The Mapper accepts any object satisfying the ``Logger`` protocol. When none
is given it writes to the ``sql_mapper`` stdlib logger. ``configure_logging``
is for applications and examples; the library never installs handlers.

Usage:
    from sql_mapper.core.logging import configure_logging, StdLogger

    configure_logging(level="INFO", json_logs=False)
    mapper = new(config, logger=StdLogger())
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Protocol, runtime_checkable

LOGGER_NAME = "sql_mapper"


@runtime_checkable
class Logger(Protocol):
    """Pluggable logging capability accepted by the Mapper."""

    def log(self, *values: Any) -> None:
        ...

    def error(self, *values: Any) -> None:
        ...

    def fatal(self, *values: Any) -> None:
        ...


def join_values(values: tuple[Any, ...]) -> str:
    return " ".join(str(v) for v in values)


class StdLogger:
    """Logger protocol over a stdlib ``logging.Logger``.

    ``fatal`` logs at CRITICAL and returns; it never exits the process.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    def log(self, *values: Any) -> None:
        self._logger.info(join_values(values))

    def error(self, *values: Any) -> None:
        self._logger.error(join_values(values))

    def fatal(self, *values: Any) -> None:
        self._logger.critical(join_values(values))


def _json_formatter(record: logging.LogRecord) -> str:
    """Render a log record as JSON string."""
    payload: dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    return json.dumps(payload)


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
) -> None:
    """
    Configure root logging.

    Parameters
    ----------
    level : str
        Logging level name (e.g., "DEBUG", "INFO", "WARNING").
    json_logs : bool
        Whether to emit logs as JSON. If False, uses a concise human formatter.
    """
    formatter_name = "json" if json_logs else "console"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "level": level,
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )


__all__ = [
    "Logger",
    "StdLogger",
    "JsonFormatter",
    "configure_logging",
    "LOGGER_NAME",
]

"""Structured logging for timehash.

Library modules log through get_logger(__name__). Loggers are structlog
wrappers around stdlib loggers, so nothing is emitted until the
application enables the "timehash" logger (directly, or through
configure_logging()). Calls below the stdlib logger's effective level
return before any structlog processor runs.

    configure_logging(level="DEBUG")
    hash_time(value)   # [debug] timehash.hash length=8 precision=MILLIS
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars

_METHOD_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}


class LevelGatedLogger(structlog.stdlib.BoundLogger):
    """stdlib BoundLogger that skips the processor chain for disabled levels."""

    def _proxy_to_logger(
        self, method_name: str, event: str | None = None, *event_args: Any, **event_kw: Any
    ) -> Any:
        level = _METHOD_LEVELS.get(method_name)
        if level is not None and not self._logger.isEnabledFor(level):
            return None
        return super()._proxy_to_logger(method_name, event, *event_args, **event_kw)


def get_logger(name: str) -> Any:
    """structlog BoundLogger backed by the stdlib logger `name`."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=LevelGatedLogger,
    )


def configure_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure structlog + stdlib logging for scripts and applications.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON lines, False for plain console output
    """
    renderer: Any
    if json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=LevelGatedLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )

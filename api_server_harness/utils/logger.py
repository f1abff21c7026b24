"""Logging configuration for the API server harness."""

import logging
import os
import sys
import structlog
from typing import Any, List
from enum import IntEnum


class LogLevel(IntEnum):
    """Log levels for the harness."""
    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3


def configure_logging(verbose: int = 0) -> structlog.stdlib.BoundLogger:
    """
    Configure structlog for the harness.

    Args:
        verbose: Verbosity level (0-3)

    Returns:
        Configured logger instance
    """
    log_level = "ERROR"
    if verbose >= 3:
        log_level = "DEBUG"
    elif verbose >= 2:
        log_level = "INFO"
    elif verbose >= 1:
        log_level = "WARNING"

    is_tty = sys.stderr.isatty()

    processors: List[Any] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if is_tty and os.getenv("NO_COLOR") is None:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level),
    )

    logger = structlog.get_logger("api_server_harness")
    return logger.bind(verbose=verbose)


# structlog method for each harness level
_LEVEL_METHODS = {
    LogLevel.ERROR: "error",
    LogLevel.WARN: "warning",
    LogLevel.INFO: "info",
    LogLevel.DEBUG: "debug",
}


class HarnessLogger:
    """
    Category logger gated by verbosity.

    Every event carries a category such as "session:create" or "fetch".
    Session and request context is bound once via for_session() and
    for_request() rather than repeated on each call.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger, verbose: int = 0):
        self.logger = logger
        self.verbose = verbose

    def log(self, level: LogLevel, category: str, message: str, **fields: Any) -> None:
        """Emit message unless level is above the configured verbosity."""
        if level.value > self.verbose:
            return
        getattr(self.logger, _LEVEL_METHODS[level])(message, category=category, **fields)

    def error(self, category: str, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.ERROR, category, message, **kwargs)

    def warn(self, category: str, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.WARN, category, message, **kwargs)

    def info(self, category: str, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.INFO, category, message, **kwargs)

    def debug(self, category: str, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.DEBUG, category, message, **kwargs)

    def child(self, **bindings: Any) -> 'HarnessLogger':
        """Create a child logger with additional context."""
        return HarnessLogger(self.logger.bind(**bindings), self.verbose)

    def for_session(self, session_id: str) -> 'HarnessLogger':
        """Logger whose events all carry session_id."""
        return self.child(session_id=session_id)

    def for_request(self, method: str, url: str) -> 'HarnessLogger':
        """Logger whose events all carry the request method and URL."""
        return self.child(method=method, url=url)


def get_logger(verbose: int = 0) -> HarnessLogger:
    """Build a configured HarnessLogger."""
    return HarnessLogger(configure_logging(verbose), verbose)

"""
Logging configuration using structlog for structured, JSON-based logging.

Loggers wrap stdlib ``logging`` loggers under the ``detect_git_service``
namespace, so library events are dropped until an application configures
logging. The bundled CLI calls configure_logging to get JSON on stderr.
"""

import logging
import sys
from typing import Any

import structlog

PACKAGE_LOGGER = "detect_git_service"


def configure_logging(log_level: str = "WARNING") -> None:
    """Configure structured logging with JSON output on stderr.

    Replaces any handler a previous call attached to the package logger.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level = getattr(logging, log_level.upper())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a logger instance backed by the stdlib logger of the same name.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        A structlog logger instance

    Example:
        >>> log = get_logger(__name__)
        >>> log.debug("git_command_started", command="git", args=["config"])
    """
    return structlog.wrap_logger(logging.getLogger(name or PACKAGE_LOGGER))

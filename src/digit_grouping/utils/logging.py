"""Structured logging on top of the standard ``logging`` backend.

Loggers handed out by :func:`get_logger` wrap stdlib loggers, so nothing is
emitted until the embedding application configures logging, either with
:func:`setup_logging` or its own handlers.
"""

from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(log_level: str = "INFO"):
    """Render structlog events as JSON lines on stdout via the root logger.

    Replaces any handlers already on the root logger.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level.upper())


def setup_logging_from_settings(settings=None):
    """Configure logging at the level named by ``DIGIT_GROUPING_LOG_LEVEL``."""
    if settings is None:
        from digit_grouping.config import Settings

        settings = Settings()
    setup_logging(settings.log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by the stdlib logger *name*."""
    return structlog.wrap_logger(logging.getLogger(name))

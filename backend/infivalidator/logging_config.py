"""Structured logging setup for services embedding the validator.

The library itself only calls ``structlog.get_logger()``; configuring
processors and renderers is left to the host application.
"""

import logging
from typing import Optional

import structlog

from infivalidator.config import get_settings


def configure_logging(debug: Optional[bool] = None, log_level: Optional[str] = None) -> None:
    """Configure structlog for console (debug) or JSON output."""
    settings = get_settings()
    debug = settings.DEBUG if debug is None else debug
    level_name = (log_level or settings.LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )

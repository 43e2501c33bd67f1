"""structlog configuration.

Call :func:`setup_logging` once at process start (the FastAPI app and the
poller entry point both do).
"""

import logging
import sys

import structlog

from .config import settings


def setup_logging(level: str | None = None):
    """Configure structlog for readable console output."""
    level_name = (level or settings.log_level).upper()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name, logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

"""Structured logging for the gateway.

structlog renders every event as one line on stdout, JSON by default and
human-readable when ``OTEL_LOG_RECORD_FORMAT=console``. Stdlib loggers
(uvicorn, SQLAlchemy, this package's ``logging.getLogger`` users) write to
the same stream at the same level.
"""

import logging
import sys
from typing import Any

import structlog

from app.core.config import Settings

# Libraries that are chatty at INFO and only useful when debugging queries
NOISY_LOGGERS = ("aiomysql", "sqlalchemy.pool")


def _render(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(settings: Settings) -> None:
    """Configure structlog and stdlib logging from ``settings``."""
    level: int = logging.getLevelName(str(settings.app.log_level.upper()))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _render(settings.observability.log_record_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    if level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)

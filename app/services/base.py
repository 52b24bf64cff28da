"""Shared service helpers."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import StoreError
from app.core.logging import get_logger

logger = get_logger(__name__)


def describe_store_error(exc: SQLAlchemyError) -> str:
    """Driver message without the SQL statement or its bound parameters."""
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return f"{type(orig).__name__}: {orig}"
    return type(exc).__name__


@asynccontextmanager
async def translate_store_errors(message: str, **context: Any) -> AsyncIterator[None]:
    """Log database failures and re-raise them as ``StoreError(message)``.

    ``message`` is what the client sees; the driver error stays in the logs.
    Bound parameters (login passwords among them) are never logged.
    Domain errors raised inside the block propagate unchanged.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(
            message,
            error_type=type(exc).__name__,
            error=describe_store_error(exc),
            **context,
        )
        raise StoreError(message) from exc

"""Async engine and per-request sessions for the fraud_detection store."""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.ext.asyncio import create_async_engine as sqlalchemy_create_async_engine

from app.core.config import DatabaseConfig, get_settings

logger = logging.getLogger(__name__)

# Shared by every request; built lazily on first use
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def create_async_engine(config: DatabaseConfig) -> AsyncEngine:
    """Build the MySQL engine.

    With ``max_overflow`` at 0 the pool never grows past ``pool_size``;
    callers beyond that wait up to ``pool_timeout`` seconds for a connection.
    """
    engine = sqlalchemy_create_async_engine(
        config.url,
        echo=config.echo,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
        pool_recycle=config.pool_recycle,
        pool_pre_ping=True,
        # Statement errors would otherwise carry request values such as passwords
        hide_parameters=True,
        connect_args={"charset": "utf8mb4"},
    )
    logger.info(
        "MySQL engine ready",
        extra={
            "driver": config.driver,
            "host": config.host,
            "port": config.port,
            "database": config.name,
            "pool_size": config.pool_size,
        },
    )
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Rows are returned as plain mappings, so nothing needs refreshing after commit
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


def get_engine() -> AsyncEngine:
    """Return the process-wide engine, creating it from settings if needed."""
    global _engine
    if _engine is None:
        _engine = create_async_engine(get_settings().database)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the process-wide session factory bound to ``get_engine()``."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(get_engine())
    return _session_factory


async def reset_engine() -> None:
    """Close pooled connections and drop the cached engine and factory."""
    global _engine, _session_factory
    engine, _engine, _session_factory = _engine, None, None
    if engine is not None:
        await engine.dispose()
        logger.info("MySQL engine disposed")


async def get_session() -> AsyncGenerator[AsyncSession]:
    """FastAPI dependency: one session per request.

    Commits when the handler returns normally; any exception rolls the
    session back and propagates to the app's error handlers.
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        await session.commit()

"""Base class for repository layer."""

from typing import Any

from sqlalchemy import TextClause
from sqlalchemy.ext.asyncio import AsyncSession


class BaseRepository:
    """Holds the request session and shared row helpers."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _fetch_all(
        self, statement: TextClause, params: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Execute a query and return every row as a dictionary."""
        result = await self.session.execute(statement, params or {})
        return [dict(row) for row in result.mappings().all()]

    async def _fetch_one(
        self, statement: TextClause, params: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """Execute a query and return the first row, or None.

        Statements that produce no result set (e.g. a procedure that only
        writes) also yield None.
        """
        result = await self.session.execute(statement, params or {})
        if not result.returns_rows:
            return None
        row = result.mappings().first()
        if row is None:
            return None
        return dict(row)

"""Merchant repository using SQLAlchemy 2.0 async.

Table: merchants
"""

from typing import Any

from sqlalchemy import text

from app.persistence.base import BaseRepository


class MerchantRepository(BaseRepository):
    """Repository for merchants data access."""

    async def list_all(self) -> list[dict[str, Any]]:
        """List all merchants."""
        return await self._fetch_all(
            text("""
                SELECT merchant_id, name, category, risk_category, registered_at
                FROM merchants
            """)
        )

    async def create(self, name: str | None, category: str | None, risk_category: str) -> int:
        """Insert a merchant and return the assigned merchant_id."""
        result = await self.session.execute(
            text("""
                INSERT INTO merchants (name, category, risk_category)
                VALUES (:name, :category, :risk_category)
            """),
            {"name": name, "category": category, "risk_category": risk_category},
        )
        return result.lastrowid

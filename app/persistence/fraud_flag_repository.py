"""Fraud flag repository using SQLAlchemy 2.0 async.

Table: fraud_flags
"""

from typing import Any

from sqlalchemy import text

from app.persistence.base import BaseRepository

FRAUD_FLAG_LIST_LIMIT = 100


class FraudFlagRepository(BaseRepository):
    """Repository for fraud_flags data access."""

    async def list_recent(self, limit: int = FRAUD_FLAG_LIST_LIMIT) -> list[dict[str, Any]]:
        """List the newest flags with rule, transaction, user, merchant and location."""
        return await self._fetch_all(
            text("""
                SELECT f.flag_id, f.transaction_id, f.flagged_at, f.is_confirmed,
                       f.investigation_status, f.notes, r.rule_name, r.severity_level,
                       t.amount, u.username, m.name AS merchant_name,
                       ST_X(t.location) AS longitude, ST_Y(t.location) AS latitude
                FROM fraud_flags f
                JOIN transactions t ON f.transaction_id = t.transaction_id
                JOIN users u ON t.user_id = u.user_id
                JOIN merchants m ON t.merchant_id = m.merchant_id
                JOIN fraud_rules r ON f.rule_id = r.rule_id
                ORDER BY f.flagged_at DESC
                LIMIT :limit
            """),
            {"limit": limit},
        )

    async def update(
        self,
        flag_id: int,
        is_confirmed: bool | None,
        investigation_status: str | None,
        notes: str | None,
    ) -> None:
        """Record an investigation outcome."""
        await self.session.execute(
            text("""
                UPDATE fraud_flags
                SET is_confirmed = :is_confirmed,
                    investigation_status = :investigation_status,
                    notes = :notes
                WHERE flag_id = :flag_id
            """),
            {
                "is_confirmed": is_confirmed,
                "investigation_status": investigation_status,
                "notes": notes,
                "flag_id": flag_id,
            },
        )

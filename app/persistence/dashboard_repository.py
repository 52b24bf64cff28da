"""Aggregate queries backing the dashboard."""

from typing import Any

from sqlalchemy import text

from app.persistence.base import BaseRepository

HIGH_RISK_THRESHOLD = 0.75
RECENT_FLAGS_LIMIT = 5


class DashboardRepository(BaseRepository):
    """Read-only counts across transactions, flags and users."""

    async def _count(self, sql: str, params: dict[str, Any] | None = None) -> int:
        result = await self.session.execute(text(sql), params or {})
        return int(result.scalar_one())

    async def count_transactions(self) -> int:
        return await self._count("SELECT COUNT(*) AS count FROM transactions")

    async def count_flags(self) -> int:
        return await self._count("SELECT COUNT(*) AS count FROM fraud_flags")

    async def count_confirmed_flags(self) -> int:
        return await self._count(
            "SELECT COUNT(*) AS count FROM fraud_flags WHERE is_confirmed = TRUE"
        )

    async def count_high_risk_users(self, threshold: float = HIGH_RISK_THRESHOLD) -> int:
        return await self._count(
            "SELECT COUNT(*) AS count FROM users WHERE risk_score > :threshold",
            {"threshold": threshold},
        )

    async def recent_flags(self, limit: int = RECENT_FLAGS_LIMIT) -> list[dict[str, Any]]:
        """The newest flags in condensed form."""
        return await self._fetch_all(
            text("""
                SELECT f.flagged_at, r.rule_name, r.severity_level, t.amount,
                       u.username, m.name AS merchant_name
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

"""Fraud rule repository using SQLAlchemy 2.0 async.

Table: fraud_rules (``condition`` is a reserved word and must be quoted)
Procedure: UpdateFraudRule(rule_id, condition, is_active)
"""

from typing import Any

from sqlalchemy import text

from app.persistence.base import BaseRepository


class FraudRuleRepository(BaseRepository):
    """Repository for fraud_rules data access."""

    async def list_all(self) -> list[dict[str, Any]]:
        """List all fraud rules."""
        return await self._fetch_all(
            text("""
                SELECT rule_id, rule_name, description, `condition`,
                       severity_level, is_active, created_at, updated_at
                FROM fraud_rules
            """)
        )

    async def create(
        self,
        rule_name: str | None,
        description: str | None,
        condition: str | None,
        severity_level: str | None,
    ) -> int:
        """Insert a fraud rule and return the assigned rule_id."""
        result = await self.session.execute(
            text("""
                INSERT INTO fraud_rules (rule_name, description, `condition`, severity_level)
                VALUES (:rule_name, :description, :condition, :severity_level)
            """),
            {
                "rule_name": rule_name,
                "description": description,
                "condition": condition,
                "severity_level": severity_level,
            },
        )
        return result.lastrowid

    async def update(self, rule_id: int, condition: str | None, is_active: bool | None) -> None:
        """Update a rule through the UpdateFraudRule procedure."""
        await self.session.execute(
            text("CALL UpdateFraudRule(:rule_id, :condition, :is_active)"),
            {"rule_id": rule_id, "condition": condition, "is_active": is_active},
        )

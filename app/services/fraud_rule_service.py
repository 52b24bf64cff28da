"""Fraud rule service."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.fraud_rule_repository import FraudRuleRepository
from app.services.base import translate_store_errors


class FraudRuleService:
    """Service for fraud rule operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = FraudRuleRepository(session)

    async def list_rules(self) -> list[dict[str, Any]]:
        async with translate_store_errors("Failed to fetch fraud rules"):
            return await self.repo.list_all()

    async def create_rule(
        self,
        rule_name: str | None,
        description: str | None,
        condition: str | None,
        severity_level: str | None,
    ) -> dict[str, Any]:
        async with translate_store_errors("Failed to create fraud rule"):
            rule_id = await self.repo.create(
                rule_name=rule_name,
                description=description,
                condition=condition,
                severity_level=severity_level,
            )
            await self.session.commit()

        return {
            "id": rule_id,
            "rule_name": rule_name,
            "description": description,
            "condition": condition,
            "severity_level": severity_level,
        }

    async def update_rule(
        self, rule_id: int, condition: str | None, is_active: bool | None
    ) -> dict[str, str]:
        """Update condition and active flag via UpdateFraudRule."""
        async with translate_store_errors("Failed to update fraud rule", rule_id=rule_id):
            await self.repo.update(rule_id, condition=condition, is_active=is_active)
            await self.session.commit()

        return {"message": "Fraud rule updated successfully"}

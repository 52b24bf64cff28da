"""Fraud flag service for investigators."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.fraud_flag_repository import FraudFlagRepository
from app.services.base import translate_store_errors


class FraudFlagService:
    """Service for fraud flag operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = FraudFlagRepository(session)

    async def list_flags(self) -> list[dict[str, Any]]:
        """Latest flags, newest first."""
        async with translate_store_errors("Failed to fetch fraud flags"):
            return await self.repo.list_recent()

    async def update_flag(
        self,
        flag_id: int,
        is_confirmed: bool | None,
        investigation_status: str | None,
        notes: str | None,
    ) -> dict[str, str]:
        """Record the investigation outcome for a flag."""
        async with translate_store_errors("Failed to update fraud flag", flag_id=flag_id):
            await self.repo.update(
                flag_id,
                is_confirmed=is_confirmed,
                investigation_status=investigation_status,
                notes=notes,
            )
            await self.session.commit()

        return {"message": "Fraud flag updated successfully"}

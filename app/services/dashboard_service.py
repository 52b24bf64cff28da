"""Dashboard statistics service."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.dashboard_repository import DashboardRepository
from app.services.base import translate_store_errors


class DashboardService:
    """Aggregates counts and recent flags for the dashboard."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = DashboardRepository(session)

    async def get_stats(self) -> dict[str, Any]:
        async with translate_store_errors("Failed to fetch dashboard stats"):
            return {
                "total_transactions": await self.repo.count_transactions(),
                "flagged_transactions": await self.repo.count_flags(),
                "confirmed_fraud": await self.repo.count_confirmed_flags(),
                "high_risk_users": await self.repo.count_high_risk_users(),
                "recent_flags": await self.repo.recent_flags(),
            }

"""Merchant service."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.merchant_repository import MerchantRepository
from app.schemas.merchant import DEFAULT_RISK_CATEGORY
from app.services.base import translate_store_errors


class MerchantService:
    """Service for merchant operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = MerchantRepository(session)

    async def list_merchants(self) -> list[dict[str, Any]]:
        async with translate_store_errors("Failed to fetch merchants"):
            return await self.repo.list_all()

    async def create_merchant(
        self,
        name: str | None,
        category: str | None,
        risk_category: str | None = None,
    ) -> dict[str, Any]:
        """Create a merchant, defaulting risk_category to LOW."""
        risk_category = risk_category or DEFAULT_RISK_CATEGORY

        async with translate_store_errors("Failed to create merchant"):
            merchant_id = await self.repo.create(
                name=name, category=category, risk_category=risk_category
            )
            await self.session.commit()

        return {
            "id": merchant_id,
            "name": name,
            "category": category,
            "risk_category": risk_category,
        }

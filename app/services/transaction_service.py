"""Transaction service backed by the CreateTransaction procedure."""

from decimal import Decimal
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import StoreError
from app.core.logging import get_logger
from app.persistence.transaction_repository import TransactionRepository
from app.services.base import translate_store_errors

logger = get_logger(__name__)

CREATE_FAILED = "Failed to create transaction"


class TransactionService:
    """Service for transaction operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = TransactionRepository(session)

    async def list_transactions(self) -> list[dict[str, Any]]:
        """Latest transactions, newest first."""
        async with translate_store_errors("Failed to fetch transactions"):
            return await self.repository.list_recent()

    async def create_transaction(
        self,
        user_id: int | None,
        merchant_id: int | None,
        amount: Decimal | None,
        latitude: float | None,
        longitude: float | None,
        device_hash: str | None,
    ) -> dict[str, Any]:
        """Submit a transaction to the store and return its new id.

        Raises:
            StoreError: If the procedure fails or reports no transaction_id.
        """
        async with translate_store_errors(CREATE_FAILED, user_id=user_id, merchant_id=merchant_id):
            row = await self.repository.create(
                user_id=user_id,
                merchant_id=merchant_id,
                amount=amount,
                latitude=latitude,
                longitude=longitude,
                device_hash=device_hash,
            )
            transaction_id = row.get("transaction_id") if row else None
            if not transaction_id:
                logger.error(
                    "Transaction ID not returned from stored procedure",
                    user_id=user_id,
                    merchant_id=merchant_id,
                )
                raise StoreError(CREATE_FAILED)

            await self.session.commit()

        return {
            "message": "Transaction processed successfully",
            "transaction_id": transaction_id,
        }

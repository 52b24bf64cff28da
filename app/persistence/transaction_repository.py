"""Transaction repository using SQLAlchemy 2.0 async.

Table: transactions (location is a POINT; ST_X is longitude, ST_Y latitude)
Procedure: CreateTransaction(user_id, merchant_id, amount, latitude, longitude, device_hash)

Transactions are never inserted directly: CreateTransaction applies the
store's validation and fraud scoring and reports the new id in the first row
of its first result set.
"""

import logging
from decimal import Decimal
from typing import Any

from sqlalchemy import text

from app.persistence.base import BaseRepository

logger = logging.getLogger(__name__)

TRANSACTION_LIST_LIMIT = 100


class TransactionRepository(BaseRepository):
    """Repository for transactions data access."""

    async def list_recent(self, limit: int = TRANSACTION_LIST_LIMIT) -> list[dict[str, Any]]:
        """List the newest transactions with user and merchant names."""
        return await self._fetch_all(
            text("""
                SELECT t.transaction_id, t.amount, t.currency, t.transaction_time,
                       t.status, t.device_hash,
                       ST_X(t.location) AS longitude, ST_Y(t.location) AS latitude,
                       u.username, m.name AS merchant_name
                FROM transactions t
                JOIN users u ON t.user_id = u.user_id
                JOIN merchants m ON t.merchant_id = m.merchant_id
                ORDER BY t.transaction_time DESC
                LIMIT :limit
            """),
            {"limit": limit},
        )

    async def create(
        self,
        user_id: int | None,
        merchant_id: int | None,
        amount: Decimal | None,
        latitude: float | None,
        longitude: float | None,
        device_hash: str | None,
    ) -> dict[str, Any] | None:
        """Run CreateTransaction and return its first result row, if any."""
        row = await self._fetch_one(
            text("""
                CALL CreateTransaction(
                    :user_id, :merchant_id, :amount, :latitude, :longitude, :device_hash
                )
            """),
            {
                "user_id": user_id,
                "merchant_id": merchant_id,
                "amount": amount,
                "latitude": latitude,
                "longitude": longitude,
                "device_hash": device_hash,
            },
        )
        logger.debug("CreateTransaction result", extra={"row": row})
        return row

"""Transaction schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel


class TransactionCreate(BaseModel):
    """Arguments forwarded to the CreateTransaction procedure."""

    user_id: int | None = None
    merchant_id: int | None = None
    amount: Decimal | None = None
    latitude: float | None = None
    longitude: float | None = None
    device_hash: str | None = None


class TransactionCreatedResponse(BaseModel):
    """Response schema after CreateTransaction succeeds."""

    message: str = "Transaction processed successfully"
    transaction_id: int


class TransactionResponse(BaseModel):
    """A transaction joined with its user and merchant names."""

    transaction_id: int
    amount: Decimal
    currency: str | None = None
    transaction_time: datetime | None = None
    status: str | None = None
    device_hash: str | None = None
    longitude: float | None = None
    latitude: float | None = None
    username: str
    merchant_name: str

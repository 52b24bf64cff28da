"""Merchant schemas."""

from datetime import datetime

from pydantic import BaseModel

DEFAULT_RISK_CATEGORY = "LOW"


class MerchantCreate(BaseModel):
    """Schema for creating a merchant.

    An omitted or empty ``risk_category`` is stored as LOW.
    """

    name: str | None = None
    category: str | None = None
    risk_category: str | None = None


class MerchantResponse(BaseModel):
    """Response schema for a merchant row."""

    merchant_id: int
    name: str
    category: str | None = None
    risk_category: str | None = None
    registered_at: datetime | None = None


class MerchantCreatedResponse(BaseModel):
    """Response schema after a merchant is inserted."""

    id: int
    name: str | None = None
    category: str | None = None
    risk_category: str

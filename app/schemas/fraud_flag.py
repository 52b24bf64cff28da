"""Fraud flag schemas for investigator workflow."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel


class FraudFlagUpdate(BaseModel):
    """Investigation outcome recorded against a flag."""

    is_confirmed: bool | None = None
    investigation_status: str | None = None
    notes: str | None = None


class FraudFlagResponse(BaseModel):
    """A fraud flag joined with its rule, transaction, user and merchant."""

    flag_id: int
    transaction_id: int
    flagged_at: datetime | None = None
    is_confirmed: bool | None = None
    investigation_status: str | None = None
    notes: str | None = None

    # Triggered rule
    rule_name: str
    severity_level: str | None = None

    # Flagged transaction
    amount: Decimal
    username: str
    merchant_name: str
    longitude: float | None = None
    latitude: float | None = None

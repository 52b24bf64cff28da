"""Dashboard schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class RecentFlag(BaseModel):
    """Condensed fraud flag shown on the dashboard."""

    flagged_at: datetime | None = None
    rule_name: str
    severity_level: str | None = None
    amount: Decimal
    username: str
    merchant_name: str


class DashboardStatsResponse(BaseModel):
    """Aggregate counts plus the most recent flags."""

    total_transactions: int
    flagged_transactions: int
    confirmed_fraud: int
    high_risk_users: int = Field(..., description="Users with risk_score above 0.75")
    recent_flags: list[RecentFlag]

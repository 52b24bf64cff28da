"""Fraud rule schemas."""

from datetime import datetime

from pydantic import BaseModel


class FraudRuleCreate(BaseModel):
    """Schema for creating a fraud rule.

    ``condition`` is an opaque expression evaluated by the store.
    """

    rule_name: str | None = None
    description: str | None = None
    condition: str | None = None
    severity_level: str | None = None


class FraudRuleUpdate(BaseModel):
    """Arguments forwarded to the UpdateFraudRule procedure."""

    condition: str | None = None
    is_active: bool | None = None


class FraudRuleResponse(BaseModel):
    """Response schema for a fraud rule row."""

    rule_id: int
    rule_name: str
    description: str | None = None
    condition: str | None = None
    severity_level: str | None = None
    is_active: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FraudRuleCreatedResponse(BaseModel):
    """Response schema after a fraud rule is inserted."""

    id: int
    rule_name: str | None = None
    description: str | None = None
    condition: str | None = None
    severity_level: str | None = None

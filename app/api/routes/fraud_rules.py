"""API routes for fraud rules."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.fraud_rule import (
    FraudRuleCreate,
    FraudRuleCreatedResponse,
    FraudRuleResponse,
    FraudRuleUpdate,
)
from app.services.fraud_rule_service import FraudRuleService

router = APIRouter(
    prefix="/fraud-rules",
    tags=["fraud-rules"],
    responses={500: {"model": ErrorResponse}},
)


def get_fraud_rule_service(session: AsyncSession = Depends(get_session)) -> FraudRuleService:
    """Get fraud rule service instance."""
    return FraudRuleService(session)


@router.get("", response_model=list[FraudRuleResponse])
async def list_fraud_rules(
    fraud_rule_service: FraudRuleService = Depends(get_fraud_rule_service),
) -> list[dict]:
    return await fraud_rule_service.list_rules()


@router.post("", response_model=FraudRuleCreatedResponse, status_code=201)
async def create_fraud_rule(
    request: FraudRuleCreate,
    fraud_rule_service: FraudRuleService = Depends(get_fraud_rule_service),
) -> dict:
    return await fraud_rule_service.create_rule(
        rule_name=request.rule_name,
        description=request.description,
        condition=request.condition,
        severity_level=request.severity_level,
    )


@router.put("/{rule_id}", response_model=MessageResponse)
async def update_fraud_rule(
    rule_id: int,
    request: FraudRuleUpdate,
    fraud_rule_service: FraudRuleService = Depends(get_fraud_rule_service),
) -> dict:
    """Update a rule's condition and active flag."""
    return await fraud_rule_service.update_rule(
        rule_id, condition=request.condition, is_active=request.is_active
    )

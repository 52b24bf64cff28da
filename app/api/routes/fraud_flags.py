"""API routes for fraud flags."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.fraud_flag import FraudFlagResponse, FraudFlagUpdate
from app.services.fraud_flag_service import FraudFlagService

router = APIRouter(
    prefix="/fraud-flags",
    tags=["fraud-flags"],
    responses={500: {"model": ErrorResponse}},
)


def get_fraud_flag_service(session: AsyncSession = Depends(get_session)) -> FraudFlagService:
    """Get fraud flag service instance."""
    return FraudFlagService(session)


@router.get("", response_model=list[FraudFlagResponse])
async def list_fraud_flags(
    fraud_flag_service: FraudFlagService = Depends(get_fraud_flag_service),
) -> list[dict]:
    """List the 100 most recent flags with transaction location, newest first."""
    return await fraud_flag_service.list_flags()


@router.put("/{flag_id}", response_model=MessageResponse)
async def update_fraud_flag(
    flag_id: int,
    request: FraudFlagUpdate,
    fraud_flag_service: FraudFlagService = Depends(get_fraud_flag_service),
) -> dict:
    """Record an investigator's decision on a flag."""
    return await fraud_flag_service.update_flag(
        flag_id,
        is_confirmed=request.is_confirmed,
        investigation_status=request.investigation_status,
        notes=request.notes,
    )

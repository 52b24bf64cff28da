"""API routes for transactions."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.schemas.common import ErrorResponse
from app.schemas.transaction import (
    TransactionCreate,
    TransactionCreatedResponse,
    TransactionResponse,
)
from app.services.transaction_service import TransactionService

router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
    responses={500: {"model": ErrorResponse}},
)


def get_transaction_service(session: AsyncSession = Depends(get_session)) -> TransactionService:
    """Get transaction service instance."""
    return TransactionService(session)


@router.get("", response_model=list[TransactionResponse])
async def list_transactions(
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> list[dict]:
    """List the 100 most recent transactions, newest first."""
    return await transaction_service.list_transactions()


@router.post("", response_model=TransactionCreatedResponse, status_code=201)
async def create_transaction(
    request: TransactionCreate,
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> dict:
    """Submit a transaction through the store's CreateTransaction procedure.

    Scoring and fraud flagging happen inside the store.
    """
    return await transaction_service.create_transaction(
        user_id=request.user_id,
        merchant_id=request.merchant_id,
        amount=request.amount,
        latitude=request.latitude,
        longitude=request.longitude,
        device_hash=request.device_hash,
    )

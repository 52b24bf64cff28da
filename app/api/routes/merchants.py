"""API routes for merchants."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.schemas.common import ErrorResponse
from app.schemas.merchant import MerchantCreate, MerchantCreatedResponse, MerchantResponse
from app.services.merchant_service import MerchantService

router = APIRouter(
    prefix="/merchants",
    tags=["merchants"],
    responses={500: {"model": ErrorResponse}},
)


def get_merchant_service(session: AsyncSession = Depends(get_session)) -> MerchantService:
    """Get merchant service instance."""
    return MerchantService(session)


@router.get("", response_model=list[MerchantResponse])
async def list_merchants(
    merchant_service: MerchantService = Depends(get_merchant_service),
) -> list[dict]:
    return await merchant_service.list_merchants()


@router.post("", response_model=MerchantCreatedResponse, status_code=201)
async def create_merchant(
    request: MerchantCreate,
    merchant_service: MerchantService = Depends(get_merchant_service),
) -> dict:
    """Create a merchant. risk_category defaults to LOW."""
    return await merchant_service.create_merchant(
        name=request.name,
        category=request.category,
        risk_category=request.risk_category,
    )

"""Dashboard routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.schemas.common import ErrorResponse
from app.schemas.dashboard import DashboardStatsResponse
from app.services.dashboard_service import DashboardService

router = APIRouter(
    prefix="/dashboard",
    tags=["dashboard"],
    responses={500: {"model": ErrorResponse}},
)


def get_dashboard_service(session: AsyncSession = Depends(get_session)) -> DashboardService:
    """Get dashboard service instance."""
    return DashboardService(session)


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_dashboard_stats(
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> dict:
    """Aggregate fraud counts and the five most recent flags."""
    return await dashboard_service.get_stats()

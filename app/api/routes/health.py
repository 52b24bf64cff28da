"""Health check routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app import __version__
from app.core.database import get_session
from app.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


class ReadyResponse(BaseModel):
    """Readiness check response."""

    status: str
    database: str


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is running.",
)
async def health_check() -> HealthResponse:
    """Return service health status."""
    return HealthResponse(status="healthy", version=__version__)


@router.get(
    "/ready",
    response_model=ReadyResponse,
    responses={503: {"model": ReadyResponse}},
    summary="Readiness check",
    description="Check that the database answers before receiving traffic.",
)
async def readiness_check(
    session: AsyncSession = Depends(get_session),
) -> ReadyResponse | JSONResponse:
    """Return service readiness status."""
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Database not reachable", error=str(exc))
        await session.rollback()
        return JSONResponse(
            status_code=503,
            content=ReadyResponse(status="not_ready", database="disconnected").model_dump(),
        )
    return ReadyResponse(status="ready", database="connected")


@router.get(
    "/live",
    summary="Liveness check",
    description="Liveness probe endpoint.",
)
async def liveness_check() -> dict:
    """Return liveness status."""
    return {"status": "alive"}

"""Login route."""

from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.schemas.common import ErrorResponse
from app.schemas.user import LoginRequest
from app.services.user_service import UserService

router = APIRouter(tags=["auth"])


def get_user_service(session: AsyncSession = Depends(get_session)) -> UserService:
    """Get user service instance."""
    return UserService(session)


@router.post(
    "/login",
    responses={
        400: {"model": ErrorResponse, "description": "Email or password missing"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        500: {"model": ErrorResponse},
    },
)
async def login(
    request: LoginRequest | None = None,
    user_service: UserService = Depends(get_user_service),
) -> dict[str, Any]:
    """Check credentials and return the matching user row.

    A successful login also updates the user's last_login timestamp.
    """
    request = request or LoginRequest()
    return await user_service.login(email=request.email, password=request.password)

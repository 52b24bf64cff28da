"""API routes for user management."""

from fastapi import APIRouter, Depends

from app.api.routes.auth import get_user_service
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.user import (
    UserCreate,
    UserCreatedResponse,
    UserResponse,
    UserStatusUpdate,
)
from app.services.user_service import UserService

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("", response_model=list[UserResponse])
async def list_users(
    user_service: UserService = Depends(get_user_service),
) -> list[dict]:
    """List users ordered by risk score, highest first."""
    return await user_service.list_users()


@router.post("", response_model=UserCreatedResponse, status_code=201)
async def create_user(
    request: UserCreate,
    user_service: UserService = Depends(get_user_service),
) -> dict:
    """Create a user. Duplicate emails are rejected by the store."""
    return await user_service.create_user(username=request.username, email=request.email)


@router.put("/{user_id}/status", response_model=MessageResponse)
async def update_user_status(
    user_id: int,
    request: UserStatusUpdate,
    user_service: UserService = Depends(get_user_service),
) -> dict:
    """Change a user's account status."""
    return await user_service.update_status(user_id, request.status)

"""User service: login and account management."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import StoreError, UnauthorizedError, ValidationError
from app.core.logging import get_logger
from app.persistence.user_repository import UserRepository
from app.services.base import translate_store_errors

logger = get_logger(__name__)


class UserService:
    """Service for user operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repo = UserRepository(session)

    async def login(self, email: str | None, password: str | None) -> dict[str, Any]:
        """Authenticate against UserLogin and stamp last_login.

        Returns the user row produced by the procedure.
        """
        if not email or not password:
            raise ValidationError("Email and password are required.")

        async with translate_store_errors("Failed to login user"):
            user = await self.repo.login(email, password)
            if user is None:
                logger.info("Login rejected", email=email)
                raise UnauthorizedError("Invalid credentials")

            user_id = user.get("user_id")
            if user_id is None:
                logger.error("UserLogin row has no user_id", columns=sorted(user))
                raise StoreError("Failed to login user")

            await self.repo.touch_last_login(user_id)
            await self.session.commit()

        return user

    async def list_users(self) -> list[dict[str, Any]]:
        """List users ordered by risk score, highest first."""
        async with translate_store_errors("Failed to fetch users"):
            return await self.repo.list_all()

    async def create_user(self, username: str | None, email: str | None) -> dict[str, Any]:
        """Create a user."""
        async with translate_store_errors("Failed to create user"):
            user_id = await self.repo.create(username=username, email=email)
            await self.session.commit()

        return {"id": user_id, "username": username, "email": email}

    async def update_status(self, user_id: int, status: str | None) -> dict[str, str]:
        """Change a user's account status."""
        async with translate_store_errors("Failed to update user status", user_id=user_id):
            await self.repo.update_status(user_id, status)
            await self.session.commit()

        return {"message": "User status updated successfully"}

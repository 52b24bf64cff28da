"""User repository using SQLAlchemy 2.0 async.

Table: users
Procedure: UserLogin(email, password)
"""

import logging
from typing import Any

from sqlalchemy import text

from app.persistence.base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    """Repository for users data access."""

    async def login(self, email: str, password: str) -> dict[str, Any] | None:
        """Check credentials with the UserLogin procedure.

        Returns the first row of the procedure's result set, or None when the
        credentials match no user.
        """
        return await self._fetch_one(
            text("CALL UserLogin(:email, :password)"),
            {"email": email, "password": password},
        )

    async def touch_last_login(self, user_id: int) -> None:
        """Set last_login to the store's current time."""
        await self.session.execute(
            text("UPDATE users SET last_login = NOW() WHERE user_id = :user_id"),
            {"user_id": user_id},
        )

    async def list_all(self) -> list[dict[str, Any]]:
        """List all users, riskiest first."""
        return await self._fetch_all(
            text("""
                SELECT user_id, username, email, created_at, last_login,
                       account_status, risk_score
                FROM users
                ORDER BY risk_score DESC
            """)
        )

    async def create(self, username: str | None, email: str | None) -> int:
        """Insert a user and return the assigned user_id."""
        result = await self.session.execute(
            text("INSERT INTO users (username, email) VALUES (:username, :email)"),
            {"username": username, "email": email},
        )
        return result.lastrowid

    async def update_status(self, user_id: int, status: str | None) -> None:
        """Set account_status. No matching row is not an error."""
        await self.session.execute(
            text("UPDATE users SET account_status = :status WHERE user_id = :user_id"),
            {"status": status, "user_id": user_id},
        )

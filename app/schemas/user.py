"""User schemas for login and account management."""

from datetime import datetime

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials for POST /login.

    Both fields are optional at the schema level so that a missing field is
    reported as 400 by the service rather than 422 by the framework.
    """

    email: str | None = None
    password: str | None = None


class UserCreate(BaseModel):
    """Schema for creating a user."""

    username: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)


class UserStatusUpdate(BaseModel):
    """New account status; allowed values are enforced by the store."""

    status: str | None = None


class UserResponse(BaseModel):
    """Response schema for a user row."""

    user_id: int
    username: str
    email: str
    created_at: datetime | None = None
    last_login: datetime | None = None
    account_status: str | None = None
    risk_score: float | None = None


class UserCreatedResponse(BaseModel):
    """Response schema after a user is inserted."""

    id: int
    username: str | None = None
    email: str | None = None

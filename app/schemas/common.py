"""Shared response schemas."""

from typing import Any

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Confirmation returned by update endpoints."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned for every non-2xx response."""

    error: str
    details: dict[str, Any] | None = None

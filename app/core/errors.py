"""
Domain-specific exceptions for the Fraud Monitoring Gateway.

These exceptions are raised by the service layer and mapped to HTTP status
codes by the exception handler registered in ``app.main``.
"""

from typing import Any


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(GatewayError):
    """
    Raised when required input is missing.

    Examples:
    - Login without email or password

    HTTP Status: 400 Bad Request
    """

    pass


class UnauthorizedError(GatewayError):
    """
    Raised when credentials do not match a stored user.

    HTTP Status: 401 Unauthorized
    """

    pass


class StoreError(GatewayError):
    """
    Raised when the database or one of its stored procedures fails.

    The message is the generic, endpoint-specific text returned to clients;
    the underlying driver error is chained and logged, never exposed.

    Examples:
    - Duplicate email on user creation
    - CreateTransaction returned no transaction_id
    - Connection refused

    HTTP Status: 500 Internal Server Error
    """

    pass


ERROR_STATUS_MAP = {
    ValidationError: 400,
    UnauthorizedError: 401,
    StoreError: 500,
}


def get_status_code(error: Exception) -> int:
    """
    Get the HTTP status code for a given exception.

    Args:
        error: The exception instance

    Returns:
        HTTP status code (defaults to 500 for unknown errors)
    """
    return ERROR_STATUS_MAP.get(type(error), 500)

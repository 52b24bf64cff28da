"""Schemas package for request/response models."""

from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.dashboard import DashboardStatsResponse, RecentFlag
from app.schemas.fraud_flag import FraudFlagResponse, FraudFlagUpdate
from app.schemas.fraud_rule import (
    FraudRuleCreate,
    FraudRuleCreatedResponse,
    FraudRuleResponse,
    FraudRuleUpdate,
)
from app.schemas.merchant import (
    DEFAULT_RISK_CATEGORY,
    MerchantCreate,
    MerchantCreatedResponse,
    MerchantResponse,
)
from app.schemas.transaction import (
    TransactionCreate,
    TransactionCreatedResponse,
    TransactionResponse,
)
from app.schemas.user import (
    LoginRequest,
    UserCreate,
    UserCreatedResponse,
    UserResponse,
    UserStatusUpdate,
)

__all__ = [
    "DEFAULT_RISK_CATEGORY",
    "DashboardStatsResponse",
    "ErrorResponse",
    "FraudFlagResponse",
    "FraudFlagUpdate",
    "FraudRuleCreate",
    "FraudRuleCreatedResponse",
    "FraudRuleResponse",
    "FraudRuleUpdate",
    "LoginRequest",
    "MerchantCreate",
    "MerchantCreatedResponse",
    "MerchantResponse",
    "MessageResponse",
    "RecentFlag",
    "TransactionCreate",
    "TransactionCreatedResponse",
    "TransactionResponse",
    "UserCreate",
    "UserCreatedResponse",
    "UserResponse",
    "UserStatusUpdate",
]

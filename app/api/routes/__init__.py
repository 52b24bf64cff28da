"""API routes package."""

from fastapi import APIRouter

from app.api.routes.auth import router as auth_router
from app.api.routes.dashboard import router as dashboard_router
from app.api.routes.fraud_flags import router as fraud_flags_router
from app.api.routes.fraud_rules import router as fraud_rules_router
from app.api.routes.health import router as health_router
from app.api.routes.merchants import router as merchants_router
from app.api.routes.transactions import router as transactions_router
from app.api.routes.users import router as users_router

# Create API router with all sub-routers
api_router = APIRouter()

# Register all route modules
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(merchants_router)
api_router.include_router(transactions_router)
api_router.include_router(fraud_rules_router)
api_router.include_router(fraud_flags_router)
api_router.include_router(dashboard_router)


__all__ = [
    "api_router",
    "auth_router",
    "dashboard_router",
    "fraud_flags_router",
    "fraud_rules_router",
    "health_router",
    "merchants_router",
    "transactions_router",
    "users_router",
]

"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import structlog

ROOT = Path(__file__).resolve().parents[1]

# Add app to path for imports
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Unit tests use mocks, so these are just defaults
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_NAME", "fraud_detection_test")

from app.api.routes.auth import get_user_service  # noqa: E402
from app.api.routes.dashboard import get_dashboard_service  # noqa: E402
from app.api.routes.fraud_flags import get_fraud_flag_service  # noqa: E402
from app.api.routes.fraud_rules import get_fraud_rule_service  # noqa: E402
from app.api.routes.merchants import get_merchant_service  # noqa: E402
from app.api.routes.transactions import get_transaction_service  # noqa: E402
from app.main import create_app  # noqa: E402


def _make_result(
    rows: list[dict] | None = None,
    *,
    lastrowid: int | None = None,
    rowcount: int = 1,
    scalar: int | None = None,
    returns_rows: bool = True,
) -> MagicMock:
    """Build a fake SQLAlchemy result for ``session.execute`` to return."""
    rows = rows or []
    result = MagicMock()
    result.returns_rows = returns_rows
    result.mappings.return_value.all.return_value = rows
    result.mappings.return_value.first.return_value = rows[0] if rows else None
    result.lastrowid = lastrowid
    result.rowcount = rowcount
    result.scalar_one.return_value = scalar
    return result


@pytest.fixture
def mock_session():
    """Mock async database session."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


# =============================================================================
# Sample rows as the store returns them
# =============================================================================


@pytest.fixture
def sample_user_row() -> dict:
    """User row as returned by UserLogin / SELECT FROM users."""
    return {
        "user_id": 42,
        "username": "jdoe",
        "email": "jdoe@example.com",
        "created_at": datetime(2024, 1, 10, 9, 0, 0),
        "last_login": datetime(2024, 3, 1, 12, 30, 0),
        "account_status": "ACTIVE",
        "risk_score": Decimal("0.82"),
    }


@pytest.fixture
def sample_transaction_row() -> dict:
    """Joined transaction row from the transactions listing."""
    return {
        "transaction_id": 1001,
        "amount": Decimal("249.99"),
        "currency": "USD",
        "transaction_time": datetime(2024, 3, 2, 18, 45, 0),
        "status": "COMPLETED",
        "device_hash": "a1b2c3",
        "longitude": -73.9857,
        "latitude": 40.7484,
        "username": "jdoe",
        "merchant_name": "Acme",
    }


@pytest.fixture
def sample_flag_row() -> dict:
    """Joined fraud flag row from the fraud flags listing."""
    return {
        "flag_id": 7,
        "transaction_id": 1001,
        "flagged_at": datetime(2024, 3, 2, 18, 46, 0),
        "is_confirmed": 0,
        "investigation_status": "PENDING",
        "notes": None,
        "rule_name": "High amount",
        "severity_level": "HIGH",
        "amount": Decimal("249.99"),
        "username": "jdoe",
        "merchant_name": "Acme",
        "longitude": -73.9857,
        "latitude": 40.7484,
    }


# =============================================================================
# App and client with services replaced by mocks
# =============================================================================


@pytest.fixture
def mock_services() -> dict[str, AsyncMock]:
    """One AsyncMock per service, keyed by resource."""
    return {
        "users": AsyncMock(),
        "merchants": AsyncMock(),
        "transactions": AsyncMock(),
        "fraud_rules": AsyncMock(),
        "fraud_flags": AsyncMock(),
        "dashboard": AsyncMock(),
    }


@pytest.fixture
def app(mock_services):
    """FastAPI app whose service dependencies return the mocks."""
    application = create_app()
    application.dependency_overrides[get_user_service] = lambda: mock_services["users"]
    application.dependency_overrides[get_merchant_service] = lambda: mock_services["merchants"]
    application.dependency_overrides[get_transaction_service] = lambda: mock_services[
        "transactions"
    ]
    application.dependency_overrides[get_fraud_rule_service] = lambda: mock_services[
        "fraud_rules"
    ]
    application.dependency_overrides[get_fraud_flag_service] = lambda: mock_services[
        "fraud_flags"
    ]
    application.dependency_overrides[get_dashboard_service] = lambda: mock_services["dashboard"]
    return application


@pytest.fixture
async def test_client(app):
    """Create httpx.AsyncClient for testing async routes."""
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def make_result():
    """Factory for fake SQLAlchemy results."""
    return _make_result


@pytest.fixture(autouse=True)
def reset_logging_config():
    """Undo structlog configuration made by a test."""
    yield
    structlog.reset_defaults()

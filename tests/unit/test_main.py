"""Unit tests for main application module."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI

from app.core.config import AppEnvironment
from app.main import (
    API_PREFIX,
    configure_tracing,
    create_app,
    lifespan,
    run,
)


def make_settings(env: AppEnvironment = AppEnvironment.LOCAL) -> MagicMock:
    mock_settings = MagicMock()
    mock_settings.app.name = "test-app"
    mock_settings.app.version = "1.0.0"
    mock_settings.app.env = env
    mock_settings.app.log_level = "INFO"
    mock_settings.server.host = "0.0.0.0"
    mock_settings.server.port = 3001
    mock_settings.server.workers = 4
    mock_settings.security.cors_allowed_origins = ["*"]
    mock_settings.security.cors_allow_credentials = False
    mock_settings.security.cors_allow_methods = ["*"]
    mock_settings.security.cors_allow_headers = ["*"]
    mock_settings.observability.otlp_endpoint = None
    mock_settings.observability.service_name = "test-service"
    return mock_settings


class TestCreateApp:
    """Test create_app function."""

    def test_create_app_returns_fastapi(self):
        with patch("app.main.get_settings", return_value=make_settings()):
            app = create_app()
        assert isinstance(app, FastAPI)
        assert app.title == "Fraud Monitoring Gateway API"

    def test_create_app_registers_all_endpoints(self):
        with patch("app.main.get_settings", return_value=make_settings()):
            app = create_app()

        routes = {(r.path, method) for r in app.routes for method in getattr(r, "methods", ())}
        expected = {
            ("/api/login", "POST"),
            ("/api/users", "GET"),
            ("/api/users", "POST"),
            ("/api/users/{user_id}/status", "PUT"),
            ("/api/merchants", "GET"),
            ("/api/merchants", "POST"),
            ("/api/transactions", "GET"),
            ("/api/transactions", "POST"),
            ("/api/fraud-rules", "GET"),
            ("/api/fraud-rules", "POST"),
            ("/api/fraud-rules/{rule_id}", "PUT"),
            ("/api/fraud-flags", "GET"),
            ("/api/fraud-flags/{flag_id}", "PUT"),
            ("/api/dashboard/stats", "GET"),
            ("/api/health", "GET"),
        }
        assert expected <= routes
        assert API_PREFIX == "/api"

    def test_create_app_exception_handlers(self):
        from app.core.errors import GatewayError

        with patch("app.main.get_settings", return_value=make_settings()):
            app = create_app()
        assert GatewayError in app.exception_handlers
        assert Exception in app.exception_handlers

    def test_create_app_docs_disabled_in_production(self):
        with patch("app.main.get_settings", return_value=make_settings(AppEnvironment.PROD)):
            app = create_app()
        assert app.docs_url is None
        assert app.redoc_url is None


class TestLifespan:
    """Test lifespan context manager."""

    @pytest.mark.asyncio
    async def test_lifespan_startup_and_shutdown(self):
        mock_settings = make_settings()

        with (
            patch("app.main.get_settings", return_value=mock_settings),
            patch("app.main.get_session_factory") as mock_get_session_factory,
            patch("app.main.reset_engine", new_callable=AsyncMock) as mock_reset,
            patch("app.main.setup_logging") as mock_setup_logging,
        ):
            app = FastAPI()
            async with lifespan(app):
                mock_get_session_factory.assert_called_once_with()
                mock_reset.assert_not_awaited()

            mock_reset.assert_awaited_once()
            mock_setup_logging.assert_called_once_with(mock_settings)


class TestConfigureTracing:
    """Test configure_tracing function."""

    def test_configure_tracing_returns_early_without_endpoint(self):
        mock_settings = MagicMock()
        mock_settings.observability.otlp_endpoint = None

        with patch("app.main.FastAPIInstrumentor") as instrumentor:
            configure_tracing(FastAPI(), mock_settings)
        instrumentor.instrument_app.assert_not_called()

    def test_configure_tracing_with_endpoint(self):
        mock_settings = MagicMock()
        mock_settings.observability.otlp_endpoint = "http://localhost:4317"
        mock_settings.observability.service_name = "test-service"

        with (
            patch("app.main.OTLPSpanExporter"),
            patch("app.main.TracerProvider"),
            patch("app.main.BatchSpanProcessor"),
            patch("app.main.trace"),
            patch("app.main.FastAPIInstrumentor") as instrumentor,
        ):
            app = FastAPI()
            configure_tracing(app, mock_settings)
        instrumentor.instrument_app.assert_called_once_with(app, excluded_urls="/api/health")


class TestRun:
    """Test run function."""

    def test_run_uses_configured_port(self):
        mock_settings = make_settings(AppEnvironment.PROD)
        mock_settings.server.port = 5000

        with (
            patch("app.main.get_settings", return_value=mock_settings),
            patch("uvicorn.run") as uvicorn_run,
        ):
            run()

        kwargs = uvicorn_run.call_args.kwargs
        assert uvicorn_run.call_args.args[0] == "app.main:create_app"
        assert kwargs["factory"] is True
        assert kwargs["port"] == 5000
        assert kwargs["reload"] is False
        assert kwargs["workers"] == 4

"""Fraud Monitoring Gateway.

This service exposes users, merchants, transactions, fraud rules and fraud
flags over HTTP. Scoring and rule evaluation run inside the database's
stored procedures.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from app.api.routes import api_router
from app.core.config import AppEnvironment, Settings, get_settings
from app.core.database import get_session_factory, reset_engine
from app.core.errors import GatewayError, get_status_code
from app.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

API_PREFIX = "/api"

# Probe traffic is not worth a span
UNTRACED_URLS = f"{API_PREFIX}/health"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Configure logging, open the store engine, and dispose it on shutdown."""
    settings = get_settings()
    setup_logging(settings)

    # Requests reach the store through get_session; build the pool up front
    get_session_factory()

    logger.info(
        "Gateway listening",
        app=settings.app.name,
        env=settings.app.env,
        version=settings.app.version,
        port=settings.server.port,
    )

    yield

    await reset_engine()
    logger.info("Gateway stopped", app=settings.app.name)


async def handle_gateway_error(request: Request, exc: GatewayError) -> JSONResponse:
    """Render a domain error as ``{"error": message}`` with its mapped status."""
    body: dict = {"error": exc.message}
    if exc.details:
        body["details"] = exc.details
    return JSONResponse(status_code=get_status_code(exc), content=body)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app() -> FastAPI:
    """Build the gateway application."""
    settings = get_settings()
    public_docs = settings.app.env != AppEnvironment.PROD

    app = FastAPI(
        title="Fraud Monitoring Gateway API",
        description=(
            "CRUD API for users, merchants, transactions, fraud rules and fraud flags. "
            "Risk scoring and rule evaluation run in the database's stored procedures."
        ),
        version=settings.app.version,
        lifespan=lifespan,
        docs_url="/docs" if public_docs else None,
        redoc_url="/redoc" if public_docs else None,
        openapi_url="/openapi.json" if public_docs else None,
    )

    # The dashboard is served from another origin
    security = settings.security
    app.add_middleware(
        CORSMiddleware,
        allow_origins=security.cors_allowed_origins,
        allow_credentials=security.cors_allow_credentials,
        allow_methods=security.cors_allow_methods,
        allow_headers=security.cors_allow_headers,
    )

    app.include_router(api_router, prefix=API_PREFIX)
    app.add_exception_handler(GatewayError, handle_gateway_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    configure_tracing(app, settings)

    return app


def configure_tracing(app: FastAPI, settings: Settings) -> None:
    """Export request spans over OTLP when an endpoint is configured."""
    observability = settings.observability
    if not observability.otlp_endpoint:
        return

    provider = TracerProvider(
        resource=Resource(attributes={SERVICE_NAME: observability.service_name})
    )
    provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(
                endpoint=observability.otlp_endpoint,
                insecure=observability.otlp_insecure,
            )
        )
    )
    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(app, excluded_urls=UNTRACED_URLS)
    logger.info("Tracing enabled", endpoint=observability.otlp_endpoint)


def run() -> None:
    """Serve the app with uvicorn using the server settings."""
    import uvicorn

    settings = get_settings()
    local = settings.app.env == AppEnvironment.LOCAL

    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        reload=local,
        workers=1 if local else settings.server.workers,
        log_level=settings.app.log_level.lower(),
    )


if __name__ == "__main__":
    run()

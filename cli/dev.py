def main() -> None:
    """Run development server with reload, honouring SERVER_* / PORT settings."""
    import uvicorn

    from app.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        reload=True,
        log_level="info",
    )

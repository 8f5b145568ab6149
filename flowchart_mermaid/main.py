"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, flowchart_mermaid.api, flowchart_mermaid.observability, flowchart_mermaid.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flowchart_mermaid import __version__
from flowchart_mermaid.api import api_router
from flowchart_mermaid.api.error_handlers import add_exception_handlers
from flowchart_mermaid.boundary.http_client import build_async_client
from flowchart_mermaid.configs import Settings, get_settings
from flowchart_mermaid.observability.logger import configure_logging, get_logger
from flowchart_mermaid.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and owns the shared outbound HTTP client.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    app.state.http_client = build_async_client(settings)
    logger.info(
        f"Application startup complete: openai_default_key={bool(settings.openai.api_key)} "
        f"gemini_default_key={bool(settings.gemini.api_key)}"
    )

    try:
        yield
    finally:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("Application shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Routes are served under /api (the path the browser client calls) and
    unprefixed.

    Args:
        settings: Application settings (defaults to the cached singleton)

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    app = FastAPI(
        title="Flowchart to Mermaid API",
        description="Converts flowchart images to Mermaid code via OpenAI or Gemini",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    add_exception_handlers(app)

    # Correlation wraps request logging so its records carry the ID
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")
    app.include_router(api_router, include_in_schema=False)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "flowchart_mermaid.main:app",
        host="localhost",
        port=8082,
        reload=True,
    )

"""
FoodShare API

FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from foodshare import __version__
from .schemas import HealthResponse
from .routes import auth, recipients, foods, payments, matching
from .middleware import (
    setup_cors,
    setup_logging,
    setup_exception_handlers,
    LoggingConfig,
    get_cors_config,
)
from .dependencies import (
    get_settings,
    ServiceContainer,
    Settings,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Application Lifespan
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Builds the service container (pool, scoring oracle, payment client),
    creates tables, and tears everything down on shutdown.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting FoodShare in {settings.environment} mode")

    services = ServiceContainer(settings)
    app.state.services = services

    try:
        await services.startup()
        logger.info("FoodShare started successfully")

        yield

    finally:
        logger.info("Shutting down FoodShare...")
        await services.aclose()
        logger.info("Shutdown complete")


# =============================================================================
# Application Factory
# =============================================================================

def create_app(settings: Settings = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads from environment.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="FoodShare",
        description="Surplus food redistribution backend.",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ==========================================================================
    # Middleware (order matters - first added = innermost)
    # ==========================================================================

    setup_logging(
        app,
        config=LoggingConfig(
            enabled=True,
            log_request_body=settings.debug,
        ),
        structured=settings.environment not in ("development", "test"),
    )

    setup_exception_handlers(app)

    setup_cors(app, config=get_cors_config(settings.environment))

    # ==========================================================================
    # Routers
    # ==========================================================================

    app.include_router(payments.router)
    app.include_router(auth.router)
    app.include_router(recipients.router)
    app.include_router(foods.router)
    app.include_router(matching.router)

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check(request: Request) -> HealthResponse:
        """Report database reachability and oracle configuration."""
        services: ServiceContainer = request.app.state.services

        components = {}
        database_ok = await services.database.ping()
        components["database"] = "healthy" if database_ok else "unhealthy"
        components["scoring_oracle"] = services.oracle.model or "configured"
        components["payments"] = (
            "configured" if settings.intasend_private_key else "not_configured"
        )

        return HealthResponse(
            status="healthy" if database_ok else "degraded",
            version=__version__,
            components=components,
        )

    # ==========================================================================
    # Static frontend (mounted last so API routes take precedence)
    # ==========================================================================

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.info(f"Static directory {static_dir} not found; frontend not served")

    return app


# =============================================================================
# Application Instance
# =============================================================================

app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

def main():
    """Run the application using uvicorn."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "foodshare.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()

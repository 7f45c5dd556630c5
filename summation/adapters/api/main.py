# summation\adapters\api\main.py
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from summation import __version__
from summation.adapters.api.errors import register_exception_handlers
from summation.shared.config import Settings, settings as default_settings
from summation.shared.container import container
from summation.shared.logging_config import configure_logging
from summation.shared.telemetry import instrument_fastapi, setup_telemetry

# Import Routers
# Note: We import the modules directly to ensure 'container.wire' works correctly
from summation.adapters.api.routers import health, sum as sum_routes

logger = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manages the application lifecycle.
    Nothing is held open between requests; this only reports startup/shutdown.
    """
    logger.info("app_startup", env=app.state.settings.APP_ENV.value, version=__version__)
    yield
    logger.info("app_shutdown")

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Factory function to create the FastAPI application."""
    settings = settings or default_settings

    configure_logging(settings)
    setup_telemetry(settings)

    # We must explicitly tell the container which modules use the @inject decorator.
    container.wire(modules=[health, sum_routes])

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Adds two numbers over HTTP (Hexagonal Architecture)",
        lifespan=lifespan,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )
    app.state.settings = settings
    app.state.container = container

    # Global Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    instrument_fastapi(app, settings)
    register_exception_handlers(app, settings)

    # Register Routers
    app.include_router(health.router)
    app.include_router(sum_routes.router, prefix=settings.api_root)

    return app

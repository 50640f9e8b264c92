"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, agrideck.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agrideck.api.deps.dependencies import get_service_cache
from agrideck.boundary.db import dispose_engine
from agrideck.configs import get_settings
from agrideck.observability import configure_logging
from agrideck.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    dashboard_router,
    edits_router,
    gemini_router,
    health_router,
    tables_router,
    translations_router,
    users_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    # Startup
    cache = get_service_cache()
    gateway = cache.gemini_gateway
    logger.info(
        f"{__name__}:lifespan - startup",
        extra={"environment": settings.environment, "gemini_configured": gateway.is_configured},
    )

    yield

    # Shutdown
    cache.clear()
    await dispose_engine()
    logger.info(f"{__name__}:lifespan - service cache cleared, engine disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title="AgriDeck Admin API",
        description="Admin backend for the agricultural marketplace: translations, tables and AI assistance",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Last added runs first: correlation id is set before request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router, prefix="/api")
    app.include_router(gemini_router, prefix="/api")
    app.include_router(edits_router, prefix="/api")
    app.include_router(tables_router, prefix="/api")
    app.include_router(translations_router, prefix="/api")
    app.include_router(users_router, prefix="/api")
    app.include_router(dashboard_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    server = get_settings().server
    uvicorn.run(
        "agrideck.api.main:app",
        host=server.host,
        port=server.port,
    )

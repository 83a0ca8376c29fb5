"""
FastAPI Application Factory & Configuration.

This module initializes the FastAPI application instance. It is responsible for:
1.  **Middleware Setup**: CORS for browser renderers.
2.  **Exception Handling**: Global handlers so every error returns structured JSON.
3.  **Routing**: Mounting the layout router and the health probe.

Design Pattern
--------------
We use an **Application Factory** pattern (`create_app`), so tests can spin
up separate app instances.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chronolane import __version__
from chronolane.api.routers import layout
from chronolane.api.schemas import HealthInfo
from chronolane.core.settings import get_logger, load_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """ASGI lifespan: log startup and shutdown."""
    logger.info("Chronolane API starting (env=%s)", load_settings().environment)
    yield
    logger.info("Chronolane API shutting down")


def create_app() -> FastAPI:
    """
    Construct and configure the Chronolane FastAPI application.

    Returns
    -------
    FastAPI
        The configured ASGI application ready to be served by Uvicorn.
    """
    app = FastAPI(
        title="Chronolane API",
        description="Two-lane timeline layout engine",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # -----------------------------------------------------------------------
    # Middleware
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Restrict to the renderer's origin in production.
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Global Exception Handlers
    # -----------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Return unhandled exceptions as a structured 500 payload."""
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc),
                "path": request.url.path,
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        """Map Python ValueErrors (including bad zoom scales) to HTTP 400."""
        return JSONResponse(
            status_code=400,
            content={
                "error": "Bad Request",
                "detail": str(exc),
            },
        )

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    app.include_router(layout.router)

    @app.get("/health", tags=["System"], response_model=HealthInfo)
    async def health_check() -> HealthInfo:
        """Simple liveness probe."""
        return HealthInfo(environment=load_settings().environment, version=__version__)

    return app


def get_app() -> FastAPI:
    """Build a fresh application instance (used by tests and the ASGI entry point)."""
    return create_app()


__all__ = ["create_app", "get_app"]

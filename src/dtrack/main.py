"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dtrack.app_context import AppContext
from dtrack.config.settings import Settings, get_settings
from dtrack.config.logging_config import setup_logging
from dtrack.api.routers import accounts_router, transactions_router, taxonomy_router
from dtrack.core.exceptions import (
    AppError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; subclasses map through their base.
ERROR_STATUS_CODES: list[tuple[type[AppError], int]] = [
    (ValidationError, 400),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
]


def status_code_for(exc: AppError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 400


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; the AppContext is created at startup."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        setup_logging(settings)
        context = AppContext(settings)
        context.initialize()
        app.state.context = context
        logger.info("%s %s started", settings.app_name, settings.app_version)
        yield
        context.close()

    app = FastAPI(
        title=settings.app_name,
        description="Per-user labeled accounts, transaction labels and custom transactions",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.include_router(accounts_router)
    app.include_router(transactions_router)
    app.include_router(taxonomy_router)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Global handler for application errors."""
        return JSONResponse(
            status_code=status_code_for(exc),
            content={"error": exc.code, "message": exc.message},
        )

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with API info."""
        return {
            "app": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


def run() -> None:
    """Serve the API with uvicorn using host and port from settings."""
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()

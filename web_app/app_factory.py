"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortener.exceptions import StorageConnectionError, StorageError, ValidationError

from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware


def create_app(
    storage_instance,
    service_instance,
    config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        storage_instance: Storage instance
        service_instance: Service instance
        config: Configuration instance
        logger: Optional logger shared with routes and middleware

    Returns:
        Configured FastAPI app
    """
    logger = logger or logging.getLogger("url_shortener.web")

    app = FastAPI(
        title="URL Shortener",
        description="Content-addressed URL shortening service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
    )

    # Store instances in app state for access in routes
    app.state.storage = storage_instance
    app.state.service = service_instance
    app.state.config = config
    app.state.logger = logger

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware, logger=logger)

    register_exception_handlers(app)

    # API routes first: the web router ends with catch-all paths
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Map errors to plain-text responses without leaking internals."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        request.app.state.logger.error(
            f"Storage failure on {request.method} {request.url.path}: {exc}"
        )
        if isinstance(exc, StorageConnectionError):
            return PlainTextResponse(
                "Storage backend unavailable",
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return PlainTextResponse(
            "Internal storage error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

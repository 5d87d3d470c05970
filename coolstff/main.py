"""coolstff API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from coolstff.api.admin import router as admin_router
from coolstff.api.catalog import router as catalog_router
from coolstff.api.engagement import router as engagement_router
from coolstff.api.health import router as health_router
from coolstff.api.middleware import setup_middleware
from coolstff.domain.exceptions import (
    DomainError,
    InvalidArgumentError,
    NotFoundError,
    StoreUnavailableError,
)
from coolstff.infrastructure.config import settings
from coolstff.infrastructure.content_store import get_content_store
from coolstff.infrastructure.logging import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging()
    logger.info(
        "Starting coolstff API",
        version=settings.api_version,
        debug=settings.debug,
        store_backend=settings.store_backend,
    )

    # Initialize the content store singleton
    get_content_store()

    yield

    logger.info("Shutting down coolstff API")


app = FastAPI(
    title="coolstff API",
    description="Curated gadgets and design catalog with community engagement",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, admin key auth, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(catalog_router)
app.include_router(engagement_router)
app.include_router(admin_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def _error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[dict] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details or [],
            "request_id": getattr(request.state, "request_id", None),
        },
    )


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    """Map contract violations to 400."""
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "INVALID_ARGUMENT",
        exc.message,
        [{"field": exc.argument, "message": exc.reason}],
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    """Map missing entities to 404 with an entity-specific code."""
    return _error_response(
        request,
        status.HTTP_404_NOT_FOUND,
        f"{exc.entity_type.upper()}_NOT_FOUND",
        exc.message,
    )


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
    """Map content store failures to 503."""
    logger.error(
        "Content store unavailable",
        path=request.url.path,
        operation=exc.operation,
        error=exc.message,
    )
    return _error_response(
        request,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "STORE_UNAVAILABLE",
        "Content store unavailable",
    )


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    """Handle any other domain error as a bad request."""
    return _error_response(
        request, status.HTTP_400_BAD_REQUEST, "DOMAIN_ERROR", exc.message
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return _error_response(request, exc.status_code, error_code, message, details)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions with consistent format."""
    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An internal error occurred",
    )

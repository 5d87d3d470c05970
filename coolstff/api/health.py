"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from coolstff.domain.exceptions import StoreUnavailableError
from coolstff.infrastructure.config import settings
from coolstff.infrastructure.content_store import get_content_store

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="coolstff-api",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Check if the content store can serve reads.

    Returns:
        200 "ready" or 503 "unavailable".
    """
    try:
        await get_content_store().list_categories()
    except StoreUnavailableError:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "backend": settings.store_backend},
        )
    return JSONResponse(content={"status": "ready", "backend": settings.store_backend})

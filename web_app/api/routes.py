"""API routes implementation."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from .schemas import HealthResponse

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        503: {"model": HealthResponse, "description": "Storage backend unhealthy"},
    },
    summary="Health check",
    description="Check if the service and its storage backend are healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service
    config = request.app.state.config

    health = await service.health_check()

    body = HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        storage="healthy" if health["storage"] else "unhealthy",
        backend=config.storage_backend,
        timestamp=datetime.now(timezone.utc),
    )
    code = status.HTTP_200_OK if health["overall"] else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(content=body.model_dump(mode="json"), status_code=code)

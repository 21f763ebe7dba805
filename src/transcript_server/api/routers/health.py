"""Health check router."""

from fastapi import APIRouter, Depends

from ...api.models.base import HealthResponse
from ...config import APIConfig
from ...dependencies import get_config

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(config: APIConfig = Depends(get_config)):
    """
    Health check endpoint.

    Returns:
        Health status response
    """
    return HealthResponse(
        status="healthy",
        version=config.version,
        variant=config.variant
    )

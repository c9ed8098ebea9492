"""API route for the health check."""
from fastapi import APIRouter

from weather_dashboard.schemas.weather import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint; never contacts the upstream provider."""
    return HealthResponse(status="OK", message="Weather API is running")

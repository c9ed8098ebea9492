"""API routes for current weather and forecasts."""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import ORJSONResponse

from weather_dashboard.schemas.weather import ErrorResponse
from weather_dashboard.services.weather_service import WeatherService
from weather_dashboard.api.dependencies import get_weather_service

router = APIRouter(prefix="/api/weather", tags=["weather"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "City parameter missing or blank"},
    404: {"model": ErrorResponse, "description": "City not found"},
    500: {"model": ErrorResponse, "description": "Upstream failure"},
}


@router.get("/current", responses=ERROR_RESPONSES)
async def get_current_weather(
    city: Optional[str] = Query(None, description="City name, e.g. London"),
    weather_service: WeatherService = Depends(get_weather_service),
) -> ORJSONResponse:
    """
    Get current weather for a city.

    The upstream OpenWeatherMap object is returned unmodified.
    """
    data = await weather_service.get_current_weather(city)
    return ORJSONResponse(data)


@router.get("/forecast", responses=ERROR_RESPONSES)
async def get_forecast(
    city: Optional[str] = Query(None, description="City name, e.g. London"),
    weather_service: WeatherService = Depends(get_weather_service),
) -> ORJSONResponse:
    """
    Get the 5-day forecast (3-hour steps) for a city.

    The upstream OpenWeatherMap object is returned unmodified.
    """
    data = await weather_service.get_forecast(city)
    return ORJSONResponse(data)

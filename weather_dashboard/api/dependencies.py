"""FastAPI dependencies for dependency injection."""
from fastapi import Request

from weather_dashboard.data.openweather_client import OpenWeatherClient
from weather_dashboard.services.weather_service import WeatherService


def get_weather_client(request: Request) -> OpenWeatherClient:
    """Get the app-wide upstream client."""
    return request.app.state.weather_client


def get_weather_service(request: Request) -> WeatherService:
    """Get weather service instance."""
    return WeatherService(client=get_weather_client(request))

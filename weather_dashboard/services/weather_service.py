"""Service for weather lookups."""
import logging
from typing import Any, Dict, Optional

from weather_dashboard.data.openweather_client import OpenWeatherClient
from weather_dashboard.exceptions import CityNotFoundError, MissingCityError, UpstreamError

logger = logging.getLogger(__name__)


def sanitize_city(city: Optional[str]) -> str:
    """
    Normalize a user-provided city string.

    Raises:
        MissingCityError: the city is missing or blank after trimming
    """
    city = (city or "").strip()
    if not city:
        raise MissingCityError()
    return city


class WeatherService:
    """Validates queries and forwards them to the upstream client."""

    def __init__(self, client: OpenWeatherClient):
        self.client = client

    async def get_current_weather(self, city: Optional[str]) -> Dict[str, Any]:
        """Get current weather for a city; the upstream body is returned unmodified."""
        city = sanitize_city(city)
        try:
            return await self.client.get_current_weather(city)
        except CityNotFoundError:
            logger.info("City not found: %s", city)
            raise
        except UpstreamError as exc:
            logger.error("Error fetching current weather: %s", exc.message)
            raise

    async def get_forecast(self, city: Optional[str]) -> Dict[str, Any]:
        """Get the 5-day forecast for a city; the upstream body is returned unmodified."""
        city = sanitize_city(city)
        try:
            return await self.client.get_forecast(city)
        except CityNotFoundError:
            logger.info("City not found: %s", city)
            raise
        except UpstreamError as exc:
            logger.error("Error fetching forecast: %s", exc.message)
            raise

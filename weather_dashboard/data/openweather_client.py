"""Client for the OpenWeatherMap REST API."""
import logging
from typing import Any, Dict, Optional

import httpx

from weather_dashboard.config import Settings
from weather_dashboard.exceptions import CityNotFoundError, UpstreamError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create the pooled upstream client with base URL and timeout applied."""
    return httpx.AsyncClient(
        base_url=settings.weather_api_base_url,
        timeout=httpx.Timeout(settings.upstream_timeout_seconds),
        headers={"Accept": "application/json"},
        transport=transport,
    )


class OpenWeatherClient:
    """Issues current-weather and forecast queries against OpenWeatherMap."""

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self.http_client = http_client or build_async_client(settings)

    async def get_current_weather(self, city: str) -> Dict[str, Any]:
        """Get current conditions for a city, as returned by the provider."""
        return await self._get("weather", city)

    async def get_forecast(self, city: str) -> Dict[str, Any]:
        """Get the 5-day / 3-hour forecast for a city, as returned by the provider."""
        return await self._get("forecast", city)

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def _get(self, resource: str, city: str) -> Dict[str, Any]:
        """
        GET one provider resource for a city.

        Raises:
            CityNotFoundError: provider answered 404
            UpstreamError: any other non-2xx status, timeout or transport failure
        """
        params = {
            "q": city,
            "units": self.settings.weather_units,
            "appid": self.settings.openweathermap_api_key.get_secret_value(),
        }
        try:
            response = await self.http_client.get(f"/{resource}", params=params)
        except httpx.TimeoutException as exc:
            raise UpstreamError(
                f"Upstream request timed out after {self.settings.upstream_timeout_seconds}s",
                resource=resource,
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(str(exc) or exc.__class__.__name__, resource=resource) from exc

        if response.status_code == 404:
            raise CityNotFoundError()
        if not response.is_success:
            raise UpstreamError(
                _upstream_message(response),
                resource=resource,
                status=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError("Upstream returned an invalid JSON body", resource=resource) from exc


def _upstream_message(response: httpx.Response) -> str:
    """Extract the provider's error message, falling back to the status line."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Request failed with status code {response.status_code}"

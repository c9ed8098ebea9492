"""Dashboard controller: the browser page's search flow, driven from Python."""
import logging
from datetime import tzinfo
from typing import Any, Dict, Optional

import httpx

from weather_dashboard.schemas.weather import DashboardState
from weather_dashboard.services.presenter import render_current, render_forecast

logger = logging.getLogger(__name__)

EMPTY_CITY_MESSAGE = "Please enter a city name"
CURRENT_FALLBACK_MESSAGE = "Failed to fetch current weather"
FORECAST_FALLBACK_MESSAGE = "Failed to fetch forecast"


class DashboardError(Exception):
    """A failed stage of a search; the message is what the error area shows."""


class WeatherDashboardAPI:
    """Thin client for the dashboard's own backend endpoints."""

    def __init__(self, http_client: httpx.AsyncClient):
        self.http_client = http_client

    async def get_current_weather(self, city: str) -> Dict[str, Any]:
        return await self._get("/api/weather/current", city, CURRENT_FALLBACK_MESSAGE)

    async def get_forecast(self, city: str) -> Dict[str, Any]:
        return await self._get("/api/weather/forecast", city, FORECAST_FALLBACK_MESSAGE)

    async def _get(self, path: str, city: str, fallback: str) -> Dict[str, Any]:
        response = await self.http_client.get(path, params={"city": city})
        if not response.is_success:
            try:
                body = response.json()
            except ValueError:
                body = {}
            message = body.get("error") if isinstance(body, dict) else None
            raise DashboardError(message or fallback)
        return response.json()


class DashboardController:
    """
    Search flow behind the city input.

    The two fetches are strictly sequential: the forecast is only requested
    after current weather succeeded. While a search is in flight, further
    searches are ignored and the current state is returned unchanged.
    """

    def __init__(self, api: WeatherDashboardAPI, tz: Optional[tzinfo] = None):
        self.api = api
        self.tz = tz
        self.state = DashboardState()
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def search(self, raw_city: str) -> DashboardState:
        """Run one search and return the resulting dashboard state."""
        if self._in_flight:
            logger.debug("Search for %r ignored, another search is in flight", raw_city)
            return self.state

        city = (raw_city or "").strip()
        if not city:
            self.state.error = EMPTY_CITY_MESSAGE
            return self.state

        self._in_flight = True
        self.state.loading = True
        self.state.current = None
        self.state.forecast = []
        self.state.error = ""
        try:
            current = await self.api.get_current_weather(city)
            self.state.current = render_current(current)
            self.state.loading = False

            forecast = await self.api.get_forecast(city)
            self.state.forecast = render_forecast(forecast, self.tz)
        except (DashboardError, httpx.HTTPError, KeyError, IndexError, TypeError, ValueError) as exc:
            # Forecast area keeps whatever it last showed
            self.state.error = str(exc)
            self.state.current = None
        finally:
            self.state.loading = False
            self._in_flight = False
        return self.state

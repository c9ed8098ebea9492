"""Shared fixtures: settings, a fake OpenWeatherMap and the app wired to it."""
from typing import Any, Dict, List, Tuple

import httpx
import pytest
from fastapi.testclient import TestClient

from weather_dashboard.config import Settings
from weather_dashboard.data.openweather_client import OpenWeatherClient, build_async_client
from weather_dashboard.main import create_app

LONDON_WEATHER = {
    "main": {"temp": 15.4, "humidity": 60},
    "weather": [{"description": "clear sky"}],
    "name": "London",
    "sys": {"country": "GB"},
    "wind": {"speed": 3.1},
}

# 2024-06-21 00:00 UTC, a Friday
FORECAST_START = 1718928000


def make_forecast(count: int = 40, start: int = FORECAST_START) -> Dict[str, Any]:
    """Build an upstream forecast object with `count` 3-hour samples."""
    return {
        "cod": "200",
        "cnt": count,
        "list": [
            {
                "dt": start + index * 3 * 3600,
                "main": {"temp": 10.0 + index * 0.5},
                "weather": [{"description": f"sample {index}"}],
            }
            for index in range(count)
        ],
        "city": {"name": "London", "country": "GB"},
    }


class FakeOpenWeatherMap:
    """MockTransport handler answering /weather and /forecast from a table."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: Dict[str, Tuple[int, Any]] = {
            "weather": (200, LONDON_WEATHER),
            "forecast": (200, make_forecast()),
        }

    def respond(self, resource: str, status: int, body: Any) -> None:
        self.responses[resource] = (status, body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        resource = request.url.path.rsplit("/", 1)[-1]
        status, body = self.responses.get(resource, (404, {"cod": "404", "message": "Not found"}))
        if isinstance(body, bytes):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, openweathermap_api_key="test-key", app_env="development")


@pytest.fixture
def upstream() -> FakeOpenWeatherMap:
    return FakeOpenWeatherMap()


@pytest.fixture
def weather_client(settings, upstream) -> OpenWeatherClient:
    http_client = build_async_client(settings, transport=httpx.MockTransport(upstream))
    return OpenWeatherClient(settings, http_client=http_client)


@pytest.fixture
def app(settings, weather_client):
    return create_app(settings, weather_client)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def london_weather() -> Dict[str, Any]:
    return LONDON_WEATHER


@pytest.fixture
def forecast_factory():
    return make_forecast

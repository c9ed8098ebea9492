"""Error types raised while serving weather queries."""
from typing import Any, Dict, Optional

FAILURE_LABELS = {
    "weather": "Failed to fetch weather data",
    "forecast": "Failed to fetch forecast data",
}


class WeatherAPIError(Exception):
    """Base error with the HTTP status and body it maps to."""

    status_code: int = 500
    error: str = "Server error"

    def payload(self) -> Dict[str, Any]:
        return {"error": self.error}


class MissingCityError(WeatherAPIError):
    """The city query parameter is missing or blank."""

    status_code = 400
    error = "City parameter is required"


class CityNotFoundError(WeatherAPIError):
    """The upstream provider does not know the requested city."""

    status_code = 404
    error = "City not found"


class UpstreamError(WeatherAPIError):
    """
    Any other upstream failure: non-2xx status, timeout or transport error.

    Attributes:
        message: Detail reported by the provider, or the transport error text
        resource: Upstream resource that failed ("weather" or "forecast")
    """

    status_code = 500

    def __init__(self, message: str, resource: str = "weather", status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.resource = resource
        self.status = status

    @property
    def error(self) -> str:
        return FAILURE_LABELS.get(self.resource, FAILURE_LABELS["weather"])

    def payload(self) -> Dict[str, Any]:
        return {"error": self.error, "message": self.message}

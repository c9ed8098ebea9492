"""Tests for the weather service."""
import asyncio

import pytest

from weather_dashboard.exceptions import MissingCityError
from weather_dashboard.services.weather_service import WeatherService, sanitize_city


class TestSanitizeCity:
    """Tests for sanitize_city."""

    def test_trims_whitespace(self):
        assert sanitize_city("  London ") == "London"

    @pytest.mark.parametrize("city", [None, "", " ", "\t\n"])
    def test_rejects_blank(self, city):
        with pytest.raises(MissingCityError):
            sanitize_city(city)


class TestWeatherService:
    """Tests for WeatherService."""

    def test_blank_city_never_reaches_upstream(self, weather_client, upstream):
        """Test validation happens before any network call."""
        service = WeatherService(client=weather_client)

        with pytest.raises(MissingCityError):
            asyncio.run(service.get_current_weather("   "))
        with pytest.raises(MissingCityError):
            asyncio.run(service.get_forecast(None))

        assert upstream.requests == []

    def test_trimmed_city_is_forwarded(self, weather_client, upstream):
        """Test the trimmed city is what the provider receives."""
        service = WeatherService(client=weather_client)

        asyncio.run(service.get_forecast("  Oslo  "))

        assert upstream.requests[0].url.params["q"] == "Oslo"

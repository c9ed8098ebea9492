"""Tests for application settings."""
from pathlib import Path

import weather_dashboard.config
from weather_dashboard.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is configured."""
        for name in ("PORT", "APP_ENV", "OPENWEATHERMAP_API_KEY", "UPSTREAM_TIMEOUT_SECONDS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.port == 3000
        assert settings.weather_api_base_url == "https://api.openweathermap.org/data/2.5"
        assert settings.weather_units == "metric"
        assert settings.upstream_timeout_seconds == 5.0
        assert settings.openweathermap_api_key.get_secret_value() == ""
        assert settings.is_production is False

    def test_environment_overrides(self, monkeypatch):
        """Test values are read from environment variables."""
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "abc123")
        monkeypatch.setenv("APP_ENV", "Production")

        settings = Settings(_env_file=None)

        assert settings.port == 8080
        assert settings.openweathermap_api_key.get_secret_value() == "abc123"
        assert settings.is_production is True

    def test_api_key_not_exposed_in_repr(self):
        """Test the API key stays masked when settings are printed."""
        settings = Settings(_env_file=None, openweathermap_api_key="super-secret")

        assert "super-secret" not in repr(settings)
        assert "super-secret" not in str(settings.model_dump())

    def test_env_file(self, tmp_path: Path, monkeypatch):
        """Test a .env file is honoured."""
        monkeypatch.delenv("PORT", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("PORT=4321\n")

        settings = Settings(_env_file=env_file)

        assert settings.port == 4321

    def test_upstream_constants_ignore_environment(self, monkeypatch):
        """Test the provider base URL and units cannot be overridden."""
        monkeypatch.setenv("WEATHER_API_BASE_URL", "http://evil.example.com")
        monkeypatch.setenv("WEATHER_UNITS", "imperial")

        settings = Settings(_env_file=None)

        assert settings.weather_api_base_url == "https://api.openweathermap.org/data/2.5"
        assert settings.weather_units == "metric"
        assert "weather_api_base_url" not in settings.model_dump()

    def test_public_dir_ships_inside_package(self, monkeypatch):
        """Test the frontend is found next to the package, not the checkout root."""
        monkeypatch.delenv("PUBLIC_DIR", raising=False)

        settings = Settings(_env_file=None)

        assert settings.public_dir == Path(weather_dashboard.config.__file__).parent / "public"
        assert (settings.public_dir / "index.html").is_file()
        assert (settings.public_dir / "app.js").is_file()

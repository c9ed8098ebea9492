"""Application configuration."""
from pathlib import Path
from typing import ClassVar, List

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read once at startup."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    app_env: str = "development"
    log_level: str = "INFO"

    # Static frontend
    public_dir: Path = Path(__file__).parent / "public"

    # Upstream provider
    openweathermap_api_key: SecretStr = SecretStr("")
    weather_api_base_url: ClassVar[str] = "https://api.openweathermap.org/data/2.5"
    weather_units: ClassVar[str] = "metric"
    upstream_timeout_seconds: float = 5.0

    # API settings
    api_title: str = "Weather Dashboard API"
    api_version: str = "1.0.0"
    cors_origins: List[str] = ["*"]
    cors_methods: List[str] = ["GET", "POST"]
    cors_headers: List[str] = ["Content-Type", "Authorization"]

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

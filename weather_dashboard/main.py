"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles

from weather_dashboard.config import Settings
from weather_dashboard.api.errors import register_exception_handlers
from weather_dashboard.api.routes import health, weather
from weather_dashboard.data.openweather_client import OpenWeatherClient
from weather_dashboard.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    weather_client: Optional[OpenWeatherClient] = None,
) -> FastAPI:
    """
    Build the API and static frontend.

    Args:
        settings: Configuration; read from the environment when omitted
        weather_client: Upstream client; built from settings when omitted
    """
    settings = settings or Settings()
    setup_logging(settings.log_level)
    weather_client = weather_client or OpenWeatherClient(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Announce the server on startup, release the upstream pool on shutdown."""
        if not settings.openweathermap_api_key.get_secret_value():
            logger.warning("OPENWEATHERMAP_API_KEY is not set; upstream calls will be rejected")
        logger.info("Weather Dashboard server running on port %s", settings.port)
        logger.info("Access the API at http://localhost:%s/api/health", settings.port)
        logger.info("Access the frontend at http://localhost:%s", settings.port)
        yield
        await weather_client.aclose()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
    )
    app.state.settings = settings
    app.state.weather_client = weather_client

    register_exception_handlers(app, settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )

    # API routes go first so the static mount only sees everything else
    app.include_router(health.router)
    app.include_router(weather.router)

    if settings.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")
    else:
        logger.warning("Public directory %s not found; frontend will not be served", settings.public_dir)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)

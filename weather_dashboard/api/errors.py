"""Exception handlers translating errors into JSON bodies."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from weather_dashboard.config import Settings
from weather_dashboard.exceptions import WeatherAPIError

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = {"error": "Not found", "message": "The requested resource does not exist"}

# Unknown method on a known path is reported like an unknown path
NOT_FOUND_STATUSES = (404, 405)


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """
    Attach the weather, HTTP and catch-all handlers to an app.

    Must run before CORSMiddleware is added: the catch-all is an HTTP
    middleware and has to sit inside the CORS layer so 500s carry CORS headers.
    """

    @app.exception_handler(WeatherAPIError)
    async def weather_error_handler(request: Request, exc: WeatherAPIError) -> ORJSONResponse:
        return ORJSONResponse(status_code=exc.status_code, content=exc.payload())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> ORJSONResponse:
        if exc.status_code in NOT_FOUND_STATUSES:
            return ORJSONResponse(status_code=404, content=NOT_FOUND_BODY)
        return ORJSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.middleware("http")
    async def unhandled_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            message = "An unexpected error occurred" if settings.is_production else str(exc)
            return ORJSONResponse(status_code=500, content={"error": "Server error", "message": message})

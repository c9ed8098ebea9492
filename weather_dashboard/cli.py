"""Command line entry point: run the server or look up a city."""
import argparse
import asyncio
import sys
from typing import List, Optional

import httpx

from weather_dashboard.config import Settings
from weather_dashboard.frontend import DashboardController, WeatherDashboardAPI
from weather_dashboard.logging_config import setup_logging
from weather_dashboard.schemas.weather import DashboardState


def format_state(state: DashboardState) -> str:
    """Render the dashboard areas as plain text."""
    lines = []
    if state.error:
        lines.append(f"Error: {state.error}")
    if state.current is not None:
        current = state.current
        lines.extend([
            current.location,
            current.temperature,
            current.description,
            current.humidity,
            current.wind,
        ])
    if state.forecast:
        lines.append("")
        for day in state.forecast:
            lines.append(f"{day.day_name:<4} {day.temperature:>6}  {day.description}")
    return "\n".join(lines)


async def lookup(city: str, api_url: str, timeout: float) -> DashboardState:
    """Run one dashboard search against a running backend."""
    async with httpx.AsyncClient(base_url=api_url, timeout=timeout) as http_client:
        controller = DashboardController(WeatherDashboardAPI(http_client))
        return await controller.search(city)


def serve(settings: Settings, host: Optional[str], port: Optional[int], reload: bool) -> None:
    import uvicorn

    uvicorn.run(
        "weather_dashboard.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings()

    parser = argparse.ArgumentParser(description="Weather dashboard server and lookup tool")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the API and static frontend")
    serve_parser.add_argument("--host", default=None, help=f"Bind address (default: {settings.host})")
    serve_parser.add_argument("--port", type=int, default=None, help=f"Port (default: {settings.port})")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    lookup_parser = subparsers.add_parser("lookup", help="Show current weather and forecast for a city")
    lookup_parser.add_argument("city", help="City name, e.g. London")
    lookup_parser.add_argument(
        "--api-url",
        default=f"http://localhost:{settings.port}",
        help="Base URL of a running weather dashboard server",
    )
    lookup_parser.add_argument("--timeout", type=float, default=10.0, help="Request timeout in seconds")

    args = parser.parse_args(argv)
    setup_logging(settings.log_level)

    if args.command == "serve":
        serve(settings, args.host, args.port, args.reload)
        return 0

    state = asyncio.run(lookup(args.city, args.api_url, args.timeout))
    print(format_state(state))
    return 1 if state.error else 0


if __name__ == "__main__":
    sys.exit(main())

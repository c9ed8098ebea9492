"""Rendering rules for current conditions and the daily forecast."""
import math
from datetime import datetime, tzinfo
from typing import Any, Dict, List, Optional, Sequence

from weather_dashboard.schemas.weather import CurrentConditions, DailyForecast

# Forecast samples are 3 hours apart, so every 8th one is roughly a day later
SAMPLES_PER_DAY = 8

WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def js_round(value: float) -> int:
    """Round half up, like JavaScript's Math.round (-2.5 -> -2, 2.5 -> 3)."""
    return math.floor(value + 0.5)


def format_number(value: Any) -> str:
    """Print a number the way the browser does: 3.0 -> "3", 3.1 -> "3.1"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_current(data: Dict[str, Any]) -> CurrentConditions:
    """Build the current-weather panel from an upstream weather object."""
    main = data["main"]
    return CurrentConditions(
        location=f"{data['name']}, {data['sys']['country']}",
        temperature=f"{js_round(main['temp'])}°C",
        description=data["weather"][0]["description"],
        humidity=f"Humidity: {format_number(main['humidity'])}%",
        wind=f"Wind: {format_number(data['wind']['speed'])} m/s",
    )


def sample_daily(items: Sequence[Any]) -> List[Any]:
    """Keep indices 0, 8, 16, ... of a 3-hourly forecast list."""
    return [item for index, item in enumerate(items) if index % SAMPLES_PER_DAY == 0]


def weekday_name(timestamp: int, tz: Optional[tzinfo] = None) -> str:
    """Abbreviated weekday for epoch seconds, in local time unless tz is given."""
    return WEEKDAY_ABBREVIATIONS[datetime.fromtimestamp(timestamp, tz).weekday()]


def render_forecast(data: Dict[str, Any], tz: Optional[tzinfo] = None) -> List[DailyForecast]:
    """
    Build one forecast block per sampled day.

    The sampling is positional, not a calendar-day boundary: with 40 samples
    (5 days of 3-hour steps) exactly 5 blocks are produced.
    """
    return [
        DailyForecast(
            day_name=weekday_name(item["dt"], tz),
            temperature=f"{js_round(item['main']['temp'])}°C",
            description=item["weather"][0]["description"],
        )
        for item in sample_daily(data["list"])
    ]

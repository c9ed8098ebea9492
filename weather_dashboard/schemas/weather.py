"""Pydantic schemas for the weather API and its rendered views."""
from pydantic import BaseModel
from typing import List, Optional


class HealthResponse(BaseModel):
    """Response schema for the health check."""

    status: str
    message: str


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str
    message: Optional[str] = None


class CurrentConditions(BaseModel):
    """Current-weather panel, ready for display."""

    location: str  # "London, GB"
    temperature: str  # "15°C"
    description: str
    humidity: str  # "Humidity: 60%"
    wind: str  # "Wind: 3.1 m/s"


class DailyForecast(BaseModel):
    """One sampled forecast day, ready for display."""

    day_name: str  # "Mon"
    temperature: str
    description: str


class DashboardState(BaseModel):
    """What the dashboard currently shows in each of its three areas."""

    loading: bool = False
    current: Optional[CurrentConditions] = None
    forecast: List[DailyForecast] = []
    error: str = ""

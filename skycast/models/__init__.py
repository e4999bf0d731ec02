"""Data models for weather lookups."""

from .config import ApiConfig, Config, Coordinates, DisplayConfig, Settings
from .weather import CurrentWeather, DayBucket, DaySummary, ForecastSample, WeatherReport

__all__ = [
    "ApiConfig",
    "Config",
    "Coordinates",
    "CurrentWeather",
    "DayBucket",
    "DaySummary",
    "DisplayConfig",
    "ForecastSample",
    "Settings",
    "WeatherReport",
]

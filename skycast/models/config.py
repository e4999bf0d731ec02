"""Configuration models using Pydantic for validation."""

import json
import os
from datetime import tzinfo
from pathlib import Path
from typing import Literal
from urllib.parse import urlparse
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from ..services.units import TemperatureUnit

API_KEY_ENV_VAR = "OWM_KEY"


class ApiConfig(BaseModel):
    """OpenWeatherMap API access settings."""

    base_url: str = "https://api.openweathermap.org/data/2.5"
    api_key: str = ""  # Prefer the OWM_KEY environment variable
    max_attempts: int = Field(default=3, ge=1, le=10)
    initial_delay: float = Field(default=0.4, ge=0)  # Seconds before the first retry
    http_timeout: float = Field(default=10.0, gt=0)
    request_timeout: float = Field(default=30.0, gt=0)  # Whole current+forecast join

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that URL is a valid HTTP/HTTPS URL."""
        try:
            parsed = urlparse(v)
            if parsed.scheme not in ("http", "https"):
                raise ValueError(f"URL must use http or https scheme, got '{parsed.scheme}'")
            if not parsed.netloc:
                raise ValueError("URL must have a valid host")
        except Exception as e:
            raise ValueError(f"Invalid URL '{v}': {e}")
        return v.rstrip("/")

    def resolved_api_key(self) -> str:
        """Return the API key, the environment variable taking precedence."""
        return os.environ.get(API_KEY_ENV_VAR, "").strip() or self.api_key.strip()


class DisplayConfig(BaseModel):
    """How results are bucketed and shown."""

    units: TemperatureUnit = TemperatureUnit.FAHRENHEIT
    timezone: str = "UTC"  # Reference zone for grouping forecast samples by day
    default_query: str = "Rexburg"
    forecast_days: int = Field(default=5, ge=1, le=5)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate that timezone is a known IANA zone name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{v}': {e}")
        return v

    @property
    def tzinfo(self) -> tzinfo:
        return ZoneInfo(self.timezone)


class Coordinates(BaseModel):
    """A latitude/longitude pair."""

    latitude: float
    longitude: float

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float) -> float:
        """Validate latitude is in valid range."""
        if not -90 <= v <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {v}")
        return v

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float) -> float:
        """Validate longitude is in valid range."""
        if not -180 <= v <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {v}")
        return v


class Settings(BaseModel):
    """General application settings."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    favorites_path: str = "favorites.json"


class Config(BaseModel):
    """Main configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    settings: Settings = Field(default_factory=Settings)

    @classmethod
    def load(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration or return default if file doesn't exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            return cls()

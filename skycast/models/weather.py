"""Weather data models parsed from OpenWeatherMap responses."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..services.errors import ParseError
from ..services.units import TemperatureUnit, convert


def _first_condition(data: dict) -> dict:
    """Return ``weather[0]`` or an empty dict when the list is missing or empty."""
    conditions = data.get("weather") or []
    if isinstance(conditions, list) and conditions and isinstance(conditions[0], dict):
        return conditions[0]
    return {}


class CurrentWeather(BaseModel):
    """Current conditions at the searched location."""

    model_config = ConfigDict(frozen=True)

    location_name: str = ""
    country_code: str | None = None
    timestamp: int
    temperature_kelvin: float
    feels_like_kelvin: float
    condition_description: str = "N/A"
    wind_speed: float = 0.0
    humidity_percent: int = Field(default=0, ge=0, le=100)
    icon_id: str | None = None

    @classmethod
    def from_api(cls, data: Any) -> "CurrentWeather":
        """Build from a ``/weather`` response body."""
        try:
            main = data["main"]
            condition = _first_condition(data)
            return cls(
                location_name=data.get("name") or "",
                country_code=(data.get("sys") or {}).get("country"),
                timestamp=data["dt"],
                temperature_kelvin=main["temp"],
                feels_like_kelvin=main["feels_like"],
                condition_description=condition.get("description") or "N/A",
                wind_speed=(data.get("wind") or {}).get("speed") or 0.0,
                humidity_percent=main.get("humidity") or 0,
                icon_id=condition.get("icon"),
            )
        except KeyError as e:
            raise ParseError(f"Unexpected current weather response: missing {e}") from e
        except (TypeError, AttributeError, ValidationError) as e:
            raise ParseError(f"Unexpected current weather response: {e}") from e

    @property
    def comfort(self) -> str:
        """Rough comfort rating from humidity and wind."""
        if self.humidity_percent < 65 and self.wind_speed < 7:
            return "Comfortable"
        if self.humidity_percent <= 80:
            return "Muggy"
        return "Humid"


class ForecastSample(BaseModel):
    """One 3-hour forecast data point."""

    model_config = ConfigDict(frozen=True)

    timestamp: int
    temperature_kelvin: float
    condition_description: str = "n/a"
    icon_id: str | None = None

    @classmethod
    def from_api(cls, item: Any) -> "ForecastSample":
        """Build from one record of a ``/forecast`` ``list``."""
        try:
            condition = _first_condition(item)
            return cls(
                timestamp=item["dt"],
                temperature_kelvin=item["main"]["temp"],
                condition_description=condition.get("description") or "n/a",
                icon_id=condition.get("icon"),
            )
        except KeyError as e:
            raise ParseError(f"Unexpected forecast entry: missing {e}") from e
        except (TypeError, AttributeError, ValidationError) as e:
            raise ParseError(f"Unexpected forecast entry: {e}") from e


def parse_forecast(data: Any) -> tuple[ForecastSample, ...]:
    """Parse a ``/forecast`` response body into samples, in response order."""
    items = data.get("list") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise ParseError("Unexpected forecast response: missing 'list'")
    return tuple(ForecastSample.from_api(item) for item in items)


class DayBucket(BaseModel):
    """Forecast samples that fall on the same calendar day."""

    model_config = ConfigDict(frozen=True)

    day_key: str
    samples: tuple[ForecastSample, ...] = ()


class DaySummary(BaseModel):
    """Reduced view of a single forecast day."""

    model_config = ConfigDict(frozen=True)

    day_key: str
    min_temperature: int
    max_temperature: int
    dominant_condition: str
    representative_icon_id: str | None = None

    @property
    def date(self) -> date:
        return date.fromisoformat(self.day_key)


class WeatherReport(BaseModel):
    """Everything a front end needs to render one search."""

    model_config = ConfigDict(frozen=True)

    label: str
    current: CurrentWeather
    days: tuple[DaySummary, ...] = ()
    samples: tuple[ForecastSample, ...] = ()
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT

    def temperature_series(self, limit: int = 16) -> list[float]:
        """Temperatures of the first ``limit`` samples for charting."""
        return [round(convert(s.temperature_kelvin, self.unit), 1) for s in self.samples[:limit]]

"""Weather service using the OpenWeatherMap 2.5 API."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from pydantic import ValidationError

from ..models.config import ApiConfig, Coordinates, DisplayConfig
from ..models.weather import CurrentWeather, WeatherReport, parse_forecast
from .errors import ConfigError, NetworkError
from .forecast import group_by_day, summarize_days
from .http import fetch_with_retry
from .labels import resolve_label

logger = logging.getLogger(__name__)


class WeatherService:
    """Fetches current weather and forecast together and shapes them into a report."""

    def __init__(
        self,
        api: ApiConfig | None = None,
        display: DisplayConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.api = api or ApiConfig()
        self.display = display or DisplayConfig()
        self._transport = transport
        self._sleep = sleep

    async def search_by_place(self, text: str) -> WeatherReport:
        """Look up weather for a city name or ZIP."""
        query = text.strip()
        if not query:
            raise ValueError("Enter a city or ZIP")
        return await self._search({"q": query}, fallback_label=query)

    async def search_by_coordinates(self, lat: float, lon: float) -> WeatherReport:
        """Look up weather for a latitude/longitude pair."""
        try:
            coords = Coordinates(latitude=lat, longitude=lon)
        except ValidationError as e:
            raise ValueError(f"Invalid coordinates: {e.errors()[0]['msg']}") from e
        return await self._search(
            {"lat": coords.latitude, "lon": coords.longitude},
            fallback_label=f"{coords.latitude}, {coords.longitude}",
        )

    async def _search(self, location: dict[str, Any], fallback_label: str) -> WeatherReport:
        api_key = self.api.resolved_api_key()
        if not api_key:
            raise ConfigError("Set OWM_KEY env var to your OpenWeatherMap API key.")

        params = {**location, "appid": api_key}
        logger.debug(f"Fetching weather for {location}")

        try:
            current_data, forecast_data = await asyncio.wait_for(
                self._fetch_both(params), timeout=self.api.request_timeout
            )
        except TimeoutError as e:
            raise NetworkError(f"Request timed out after {self.api.request_timeout:.0f}s") from e

        return self._build_report(current_data, forecast_data, fallback_label)

    async def _fetch_both(self, params: dict[str, Any]) -> tuple[Any, Any]:
        """Fetch /weather and /forecast concurrently; either failure propagates."""
        async with httpx.AsyncClient(
            timeout=self.api.http_timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            current, forecast = await asyncio.gather(
                self._fetch(client, "weather", params),
                self._fetch(client, "forecast", params),
            )
        return current, forecast

    def _fetch(self, client: httpx.AsyncClient, endpoint: str, params: dict[str, Any]):
        return fetch_with_retry(
            client,
            f"{self.api.base_url}/{endpoint}",
            params=params,
            max_attempts=self.api.max_attempts,
            initial_delay=self.api.initial_delay,
            sleep=self._sleep,
        )

    def _build_report(
        self, current_data: Any, forecast_data: Any, fallback_label: str
    ) -> WeatherReport:
        """Parse both responses and run the day bucketing and summary steps."""
        current = CurrentWeather.from_api(current_data)
        samples = parse_forecast(forecast_data)

        buckets = group_by_day(samples, self.display.tzinfo)
        days = summarize_days(buckets, self.display.units, limit=self.display.forecast_days)

        report = WeatherReport(
            label=resolve_label(current_data, fallback_label),
            current=current,
            days=tuple(days),
            samples=samples,
            unit=self.display.units,
        )
        logger.debug(f"Built report for {report.label}: {len(samples)} samples, {len(days)} days")
        return report

"""Services for fetching and shaping weather data."""

from .errors import ClientError, NetworkError, ParseError, ServerError, WeatherError

__all__ = ["ClientError", "NetworkError", "ParseError", "ServerError", "WeatherError"]

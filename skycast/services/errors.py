"""Error types raised by the weather pipeline."""


class WeatherError(Exception):
    """Base error for anything that stops a weather lookup."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(WeatherError):
    """Transport failure: no response was received."""


class HTTPStatusError(WeatherError):
    """The API answered with a non-success status code."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class ServerError(HTTPStatusError):
    """5xx response, may be transient."""


class ClientError(HTTPStatusError):
    """Any other failure status (4xx, unfollowed redirects). Never retried."""


class ParseError(WeatherError):
    """Malformed JSON or an unexpected response shape."""


class ConfigError(WeatherError):
    """Missing or invalid configuration, e.g. no API key."""


def is_retryable(error: Exception) -> bool:
    """Return True if a fetch that failed with ``error`` may be attempted again."""
    return isinstance(error, (NetworkError, ServerError))

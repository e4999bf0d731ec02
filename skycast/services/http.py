"""HTTP GET with bounded exponential-backoff retry."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from .errors import ClientError, NetworkError, ParseError, ServerError, WeatherError, is_retryable

logger = logging.getLogger(__name__)

# Retry configuration
MAX_ATTEMPTS = 3
INITIAL_DELAY = 0.4
BACKOFF_MULTIPLIER = 2.0


def _calculate_backoff(attempt: int, initial_delay: float) -> float:
    """Delay before the attempt following ``attempt`` (1-based): delay, 2x, 4x, ..."""
    return initial_delay * (BACKOFF_MULTIPLIER ** (attempt - 1))


async def _get_json(client: httpx.AsyncClient, url: str, params: dict | None) -> Any:
    """Single attempt. Maps every failure onto a WeatherError subclass."""
    try:
        response = await client.get(url, params=params)
    except httpx.TransportError as e:
        raise NetworkError(f"{type(e).__name__}: {e}" if str(e) else type(e).__name__) from e

    if response.status_code >= 500:
        raise ServerError(response.status_code, response.text or response.reason_phrase)
    if not response.is_success:
        raise ClientError(response.status_code, response.text or response.reason_phrase)

    try:
        return response.json()
    except ValueError as e:
        raise ParseError(f"Invalid JSON from {response.url.path}: {e}") from e


async def fetch_with_retry(
    client: httpx.AsyncClient,
    url: str,
    params: dict | None = None,
    max_attempts: int = MAX_ATTEMPTS,
    initial_delay: float = INITIAL_DELAY,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> Any:
    """GET ``url`` and decode the JSON body, retrying transient failures.

    Network errors and 5xx responses are retried up to ``max_attempts`` total
    attempts, sleeping ``initial_delay``, then twice that, and so on between
    attempts. Any other failure status raises ClientError straight away.

    Raises:
        NetworkError, ServerError: the last transient failure once attempts run out.
        ClientError: non-retryable failure status.
        ParseError: the body is not JSON.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    attempt = 1
    while True:
        try:
            return await _get_json(client, url, params)
        except WeatherError as e:
            if not is_retryable(e):
                raise
            if attempt >= max_attempts:
                logger.warning(f"Giving up on {url} after {attempt} attempts: {e.message}")
                raise
            backoff = _calculate_backoff(attempt, initial_delay)
            logger.debug(f"{e.message} from {url}, retry {attempt} in {backoff:.1f}s")
        await sleep(backoff)
        attempt += 1

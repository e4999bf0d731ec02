"""Tests for the retrying fetcher."""

import asyncio

import httpx
import pytest

from skycast.services.errors import ClientError, NetworkError, ParseError, ServerError
from skycast.services.http import fetch_with_retry

URL = "https://api.example.com/data/2.5/weather"


class FakeEndpoint:
    """MockTransport handler that replays a scripted list of outcomes."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        outcome = self.outcomes[min(self.calls, len(self.outcomes) - 1)]
        self.calls += 1
        if isinstance(outcome, Exception):
            raise outcome
        status, body = outcome
        if isinstance(body, (dict, list)):
            return httpx.Response(status, json=body)
        return httpx.Response(status, text=body)


def run_fetch(endpoint: FakeEndpoint, **kwargs):
    """Run fetch_with_retry against ``endpoint``; returns (result_or_error, delays)."""
    delays: list[float] = []

    async def fake_sleep(seconds: float) -> None:
        delays.append(seconds)

    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(endpoint)) as client:
            return await fetch_with_retry(client, URL, params={"q": "x"}, sleep=fake_sleep, **kwargs)

    try:
        return asyncio.run(go()), delays
    except Exception as e:
        return e, delays


class TestSuccess:
    """Tests for successful fetches."""

    def test_returns_decoded_json(self):
        """Test a 200 response returns the JSON document."""
        endpoint = FakeEndpoint((200, {"name": "Rexburg"}))
        result, delays = run_fetch(endpoint)
        assert result == {"name": "Rexburg"}
        assert endpoint.calls == 1
        assert delays == []

    def test_passes_query_params(self):
        """Test params are encoded into the request URL."""
        seen = []

        def handler(request):
            seen.append(request.url)
            return httpx.Response(200, json={})

        async def go():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                await fetch_with_retry(client, URL, params={"q": "new york", "appid": "k"})

        asyncio.run(go())
        assert seen[0].params["q"] == "new york"
        assert seen[0].params["appid"] == "k"


class TestRetry:
    """Tests for retry and backoff behavior."""

    def test_503_twice_then_success(self):
        """Test two 503s are retried with 0.4s then 0.8s delays."""
        endpoint = FakeEndpoint((503, "busy"), (503, "busy"), (200, {"ok": True}))
        result, delays = run_fetch(endpoint)
        assert result == {"ok": True}
        assert endpoint.calls == 3
        assert delays == [pytest.approx(0.4), pytest.approx(0.8)]
        assert delays[0] >= 0.4
        assert delays[1] >= 0.8

    def test_server_error_exhausts_attempts(self):
        """Test persistent 5xx raises ServerError after max_attempts."""
        endpoint = FakeEndpoint((500, "boom"))
        error, delays = run_fetch(endpoint)
        assert isinstance(error, ServerError)
        assert error.status_code == 500
        assert "HTTP 500: boom" in str(error)
        assert endpoint.calls == 3
        assert len(delays) == 2

    def test_network_error_retried(self):
        """Test transport failures are retried then succeed."""
        endpoint = FakeEndpoint(httpx.ConnectError("connection refused"), (200, {"ok": 1}))
        result, delays = run_fetch(endpoint)
        assert result == {"ok": 1}
        assert endpoint.calls == 2
        assert delays == [pytest.approx(0.4)]

    def test_network_error_exhausts_attempts(self):
        """Test persistent transport failure raises NetworkError."""
        endpoint = FakeEndpoint(httpx.ReadTimeout("timed out"))
        error, delays = run_fetch(endpoint)
        assert isinstance(error, NetworkError)
        assert "timed out" in str(error)
        assert endpoint.calls == 3

    def test_last_error_is_raised(self):
        """Test the error from the final attempt is the one surfaced."""
        endpoint = FakeEndpoint(httpx.ConnectError("down"), (502, "bad gateway"))
        error, _ = run_fetch(endpoint, max_attempts=2)
        assert isinstance(error, ServerError)
        assert error.status_code == 502

    def test_custom_attempts_and_delay(self):
        """Test backoff doubles from a custom initial delay."""
        endpoint = FakeEndpoint((503, ""))
        error, delays = run_fetch(endpoint, max_attempts=4, initial_delay=1.0)
        assert isinstance(error, ServerError)
        assert endpoint.calls == 4
        assert delays == [1.0, 2.0, 4.0]

    def test_single_attempt_never_sleeps(self):
        """Test max_attempts=1 disables retry."""
        endpoint = FakeEndpoint((503, ""))
        error, delays = run_fetch(endpoint, max_attempts=1)
        assert isinstance(error, ServerError)
        assert endpoint.calls == 1
        assert delays == []

    def test_zero_attempts_rejected(self):
        """Test max_attempts below 1 is a ValueError."""
        error, _ = run_fetch(FakeEndpoint((200, {})), max_attempts=0)
        assert isinstance(error, ValueError)


class TestNonRetryable:
    """Tests for failures that must not be retried."""

    def test_404_fails_after_one_attempt(self):
        """Test a 404 raises ClientError without retry."""
        endpoint = FakeEndpoint((404, '{"cod":"404","message":"city not found"}'))
        error, delays = run_fetch(endpoint)
        assert isinstance(error, ClientError)
        assert error.status_code == 404
        assert "city not found" in error.body
        assert str(error).startswith("HTTP 404: ")
        assert endpoint.calls == 1
        assert delays == []

    def test_401_not_retried(self):
        """Test a bad API key is not retried."""
        endpoint = FakeEndpoint((401, "Invalid API key"))
        error, _ = run_fetch(endpoint)
        assert isinstance(error, ClientError)
        assert endpoint.calls == 1

    def test_empty_body_uses_reason_phrase(self):
        """Test the reason phrase is used when the body is empty."""
        error, _ = run_fetch(FakeEndpoint((404, "")))
        assert str(error) == "HTTP 404: Not Found"

    def test_unfollowed_redirect_is_client_error(self):
        """Test a redirect status without follow-up fails immediately."""
        endpoint = FakeEndpoint((302, ""))
        error, _ = run_fetch(endpoint)
        assert isinstance(error, ClientError)
        assert error.status_code == 302
        assert endpoint.calls == 1

    def test_invalid_json_is_parse_error(self):
        """Test a 200 with a non-JSON body raises ParseError without retry."""
        endpoint = FakeEndpoint((200, "<html>oops</html>"))
        error, delays = run_fetch(endpoint)
        assert isinstance(error, ParseError)
        assert endpoint.calls == 1
        assert delays == []

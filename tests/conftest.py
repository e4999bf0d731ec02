"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import pytest

from payloads import HOUR, MAY_1_2024, kelvin, make_forecast, make_item


@pytest.fixture(autouse=True)
def no_env_api_key(monkeypatch):
    """Keep a developer's OWM_KEY from leaking into tests."""
    monkeypatch.delenv("OWM_KEY", raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def three_day_forecast():
    """16 samples at 3h spacing: 4 on May 1, 8 on May 2, 4 on May 3 (UTC)."""
    celsius = [10, 14, 12, 8] + [5, 3, 2, 4, 9, 15, 17, 11] + [6, 7, 12, 13]
    descriptions = (
        ["clear sky"] * 3 + ["few clouds"]
        + ["light rain"] * 5 + ["overcast clouds"] * 3
        + ["overcast clouds", "light rain", "light rain", "overcast clouds"]
    )
    start = MAY_1_2024 + 12 * HOUR
    items = [
        make_item(start + i * 3 * HOUR, kelvin(c), d, f"{i:02d}d")
        for i, (c, d) in enumerate(zip(celsius, descriptions))
    ]
    return make_forecast(items)


@pytest.fixture
def sample_config_data(temp_dir):
    """Sample configuration data for testing."""
    return {
        "api": {
            "base_url": "https://api.example.com/data/2.5",
            "api_key": "test-key",
            "max_attempts": 3,
            "initial_delay": 0.4,
        },
        "display": {
            "units": "celsius",
            "timezone": "UTC",
            "default_query": "Rexburg",
        },
        "settings": {
            "log_level": "INFO",
            "favorites_path": str(temp_dir / "favorites.json"),
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path

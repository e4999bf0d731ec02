"""Tests for temperature conversion."""

import pytest

from skycast.services.units import (
    TemperatureUnit,
    convert,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
    round_half_away,
)


class TestConversions:
    """Tests for Kelvin conversion functions."""

    def test_freezing_point(self):
        """Test 273.15 K is exactly 0 °C and 32 °F."""
        assert kelvin_to_celsius(273.15) == 0.0
        assert kelvin_to_fahrenheit(273.15) == 32.0

    def test_300_kelvin(self):
        """Test a typical summer reading."""
        assert kelvin_to_celsius(300) == pytest.approx(26.85)
        assert kelvin_to_fahrenheit(300) == pytest.approx(80.33)

    @pytest.mark.parametrize("k", [0.0, 233.15, 255.37, 273.15, 288.7, 310.93, 373.15])
    def test_fahrenheit_matches_formula(self, k):
        """Test Fahrenheit conversion follows (k - 273.15) * 9/5 + 32 exactly."""
        assert kelvin_to_fahrenheit(k) == (k - 273.15) * 9 / 5 + 32

    def test_minus_forty_is_shared(self):
        """Test -40 is the same in both scales."""
        k = 233.15
        assert kelvin_to_celsius(k) == pytest.approx(-40.0)
        assert kelvin_to_fahrenheit(k) == pytest.approx(-40.0)

    def test_convert_dispatches_on_unit(self):
        """Test convert picks the right function for each unit."""
        assert convert(300, TemperatureUnit.CELSIUS) == kelvin_to_celsius(300)
        assert convert(300, TemperatureUnit.FAHRENHEIT) == kelvin_to_fahrenheit(300)


class TestTemperatureUnit:
    """Tests for the TemperatureUnit enum."""

    def test_symbols(self):
        """Test display symbols."""
        assert TemperatureUnit.FAHRENHEIT.symbol == "°F"
        assert TemperatureUnit.CELSIUS.symbol == "°C"

    def test_from_string(self):
        """Test units can be built from config strings."""
        assert TemperatureUnit("celsius") is TemperatureUnit.CELSIUS


class TestRoundHalfAway:
    """Tests for the rounding used on daily min/max."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (2.5, 3),
            (3.5, 4),
            (0.5, 1),
            (-2.5, -3),
            (-0.5, -1),
            (2.49, 2),
            (-2.49, -2),
            (71.6, 72),
            (0.0, 0),
        ],
    )
    def test_rounding(self, value, expected):
        """Test halves round away from zero, unlike Python's round()."""
        assert round_half_away(value) == expected

    def test_returns_int(self):
        """Test the result is an int, not a float."""
        assert isinstance(round_half_away(1.2), int)

"""Temperature conversion from the API's Kelvin readings."""

import math
from enum import Enum


class TemperatureUnit(str, Enum):
    """Display unit for temperatures."""

    FAHRENHEIT = "fahrenheit"
    CELSIUS = "celsius"

    @property
    def symbol(self) -> str:
        return "°F" if self is TemperatureUnit.FAHRENHEIT else "°C"


def kelvin_to_celsius(k: float) -> float:
    return k - 273.15


def kelvin_to_fahrenheit(k: float) -> float:
    return kelvin_to_celsius(k) * 9 / 5 + 32


def convert(k: float, unit: TemperatureUnit) -> float:
    """Convert a Kelvin reading to ``unit``."""
    if unit is TemperatureUnit.CELSIUS:
        return kelvin_to_celsius(k)
    return kelvin_to_fahrenheit(k)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))

"""SkyCast - current weather and a five day forecast in the terminal."""

__version__ = "0.1.0"

"""UI components for the weather app."""

from .favorites_panel import FavoritesPanel
from .status_bar import StatusBar
from .weather_panel import WeatherPanel

__all__ = ["FavoritesPanel", "StatusBar", "WeatherPanel"]

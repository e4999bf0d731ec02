"""Text formatting shared by the CLI and the TUI panels."""

from datetime import UTC, date, datetime, tzinfo

# OpenWeatherMap icon ids are "<code><d|n>", e.g. "10d"
_ICON_EMOJI = {
    "01": "☀️",
    "02": "🌤️",
    "03": "☁️",
    "04": "☁️",
    "09": "🌧️",
    "10": "🌦️",
    "11": "⛈️",
    "13": "❄️",
    "50": "🌫️",
}


def format_observed(timestamp: int, tz: tzinfo = UTC) -> str:
    """Format an observation time like ``Wed, May 1 3:05 PM``."""
    dt = datetime.fromtimestamp(timestamp, tz)
    hour = dt.hour % 12 or 12
    return f"{dt:%a, %b} {dt.day} {hour}:{dt:%M %p}"


def format_day(day: date) -> str:
    """Format a forecast day like ``Wed, May 1``."""
    return f"{day:%a, %b} {day.day}"


def icon_emoji(icon_id: str | None) -> str:
    """Best-effort emoji for an OpenWeatherMap icon id."""
    if not icon_id:
        return ""
    return _ICON_EMOJI.get(icon_id[:2], "")

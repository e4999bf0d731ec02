"""Entry point: print a short multi-day forecast, or launch the interactive app."""

import argparse
import asyncio
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic import ValidationError

from .components.formatting import format_day, format_observed
from .models.config import Config
from .models.weather import WeatherReport
from .services.errors import WeatherError
from .services.favorites import FavoritesStore
from .services.labels import title_case
from .services.units import TemperatureUnit, convert
from .services.weather_service import WeatherService

_logger = logging.getLogger(__name__)


def setup_logging(
    log_level: str = "INFO", log_dir: Path | None = Path("logs"), console: bool = True
) -> None:
    """Configure logging with rotation support.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the rotating log file, or None to skip file logging
        console: Also log to stderr (off while the full-screen app owns the terminal)
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)] if console else []

    if log_dir is not None:
        try:
            log_dir.mkdir(exist_ok=True)
            # Rotate at 1MB, keep 3 backup files
            file_handler = RotatingFileHandler(
                log_dir / "skycast.log",
                maxBytes=1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
            handlers.append(file_handler)
        except (PermissionError, OSError):
            pass  # Skip file logging if we can't write

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skycast",
        description="SkyCast - current weather and a five day forecast from OpenWeatherMap",
    )
    parser.add_argument("query", nargs="*", help="City name or ZIP (default from config)")
    parser.add_argument("--lat", type=float, help="Latitude, use with --lon instead of a query")
    parser.add_argument("--lon", type=float, help="Longitude, use with --lat instead of a query")
    parser.add_argument(
        "--units",
        choices=[u.value for u in TemperatureUnit],
        help="Temperature display unit (default from config: fahrenheit)",
    )
    parser.add_argument("--tz", help="IANA time zone used to group forecast days (default UTC)")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Path to configuration file (default: config.json)",
    )
    parser.add_argument("--save", action="store_true", help="Save the location as a favorite")
    parser.add_argument("--favorites", action="store_true", help="List saved favorites and exit")
    parser.add_argument(
        "--clear-favorites", action="store_true", help="Remove all favorites and exit"
    )
    parser.add_argument("--tui", action="store_true", help="Launch the interactive app")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("-V", "--version", action="store_true", help="Show version and exit")
    return parser


def render_report(report: WeatherReport, config: Config) -> str:
    """Plain-text rendering of a report for the terminal."""
    unit = report.unit
    cur = report.current
    tz = config.display.tzinfo
    now = convert(cur.temperature_kelvin, unit)

    lines = [
        "",
        report.label,
        format_observed(cur.timestamp, tz),
        f"Now: {now:.1f} {unit.symbol}  {title_case(cur.condition_description)}",
        f"Wind: {cur.wind_speed} m/s  Humidity: {cur.humidity_percent}% ({cur.comfort})",
        "",
    ]
    for day in report.days:
        lines.append(
            f"{format_day(day.date)}: high {day.max_temperature} {unit.symbol}  "
            f"low {day.min_temperature} {unit.symbol}  {day.dominant_condition}"
        )
    lines.append("")
    return "\n".join(lines)


def _apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Return a copy of ``config`` with command-line overrides validated in."""
    display = config.display.model_dump()
    if args.units:
        display["units"] = args.units
    if args.tz:
        display["timezone"] = args.tz
    return Config.model_validate({**config.model_dump(), "display": display})


async def _lookup(
    service: WeatherService, args: argparse.Namespace, config: Config
) -> WeatherReport:
    if args.lat is not None and args.lon is not None:
        return await service.search_by_coordinates(args.lat, args.lon)
    query = " ".join(args.query) or config.display.default_query
    return await service.search_by_place(query)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        print(f"SkyCast v{__version__}")
        return 0

    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")

    try:
        config = _apply_overrides(Config.load_or_default(args.config), args)
    except (ValidationError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else config.settings.log_level, log_dir=None)

    favorites = FavoritesStore(config.settings.favorites_path)
    if args.favorites:
        for label in favorites.labels:
            print(label)
        return 0
    if args.clear_favorites:
        favorites.clear()
        print("Cleared favorites")
        return 0

    if args.tui:
        from .app import WeatherApp

        setup_logging("DEBUG" if args.verbose else config.settings.log_level, console=False)
        WeatherApp(config, favorites=favorites, initial_query=" ".join(args.query)).run()
        return 0

    service = WeatherService(config.api, config.display)
    try:
        report = asyncio.run(_lookup(service, args, config))
    except (WeatherError, ValueError) as e:
        _logger.debug(f"Lookup failed: {e!r}")
        print(str(e), file=sys.stderr)
        return 1

    print(render_report(report, config))

    if args.save:
        if favorites.add(report.label):
            print(f"Saved favorite: {report.label}")
        else:
            print("Already in favorites")
    return 0


if __name__ == "__main__":
    sys.exit(main())

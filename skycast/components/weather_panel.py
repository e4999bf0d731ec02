"""Weather panel component for displaying a weather report."""

from datetime import UTC, tzinfo

from textual.app import ComposeResult
from textual.widgets import Label, Sparkline, Static

from ..models.weather import WeatherReport
from ..services.labels import title_case
from ..services.units import TemperatureUnit, convert
from .formatting import format_day, format_observed, icon_emoji


def escape_markup(text: str) -> str:
    """Escape Rich markup characters in API-provided text."""
    return text.replace("[", r"\[").replace("]", r"\]")


class WeatherPanel(Static):
    """Panel displaying current conditions, daily tiles and a temperature chart."""

    DEFAULT_CSS = """
    WeatherPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }

    WeatherPanel #weather-error {
        color: $error;
        display: none;
    }

    WeatherPanel #weather-error.visible {
        display: block;
    }

    WeatherPanel #weather-chart {
        height: 3;
        margin-top: 1;
    }
    """

    def __init__(self, tz: tzinfo = UTC) -> None:
        super().__init__()
        self._tz = tz
        self._report: WeatherReport | None = None

    def compose(self) -> ComposeResult:
        yield Static("[bold]Weather[/bold]", id="weather-header")
        yield Label("", id="weather-error")
        yield Static("", id="weather-current")
        yield Static("", id="weather-forecast")
        yield Sparkline([], id="weather-chart")

    @property
    def report(self) -> WeatherReport | None:
        return self._report

    def set_loading(self) -> None:
        """Show the loading placeholder."""
        self.query_one("#weather-header", Static).update("[dim]Loading...[/dim]")
        self.query_one("#weather-error", Label).remove_class("visible")

    def set_error(self, error: str) -> None:
        """Display an error message, keeping the last report on screen."""
        self.query_one("#weather-header", Static).update("[bold]Weather[/bold]")
        error_label = self.query_one("#weather-error", Label)
        error_label.update(f"[red]Error: {escape_markup(error)}[/red]")
        error_label.add_class("visible")

    def _temp_color(self, temp: float, unit: TemperatureUnit) -> str:
        """Get color for temperature value."""
        celsius = temp if unit is TemperatureUnit.CELSIUS else (temp - 32) * 5 / 9
        if celsius <= 0:
            return "blue"
        elif celsius <= 10:
            return "cyan"
        elif celsius <= 20:
            return "green"
        elif celsius <= 30:
            return "yellow"
        return "red"

    def update_report(self, report: WeatherReport) -> None:
        """Update panel with a new report."""
        self._report = report
        self.query_one("#weather-error", Label).remove_class("visible")

        unit = report.unit
        cur = report.current
        temp = convert(cur.temperature_kelvin, unit)
        feels = convert(cur.feels_like_kelvin, unit)
        tc = self._temp_color(temp, unit)
        comfort_color = {"Comfortable": "green", "Muggy": "yellow"}.get(cur.comfort, "red")

        self.query_one("#weather-header", Static).update(
            f"[bold]{escape_markup(report.label)}[/bold]  {icon_emoji(cur.icon_id)}"
        )
        self.query_one("#weather-current", Static).update(
            f"[dim]{format_observed(cur.timestamp, self._tz)}[/dim]\n"
            f"Temp [{tc}]{temp:.1f} {unit.symbol}[/{tc}]  "
            f"Feels {feels:.1f} {unit.symbol}  "
            f"{escape_markup(title_case(cur.condition_description))}\n"
            f"Wind {cur.wind_speed} m/s  Humidity {cur.humidity_percent}% "
            f"[{comfort_color}]{cur.comfort}[/{comfort_color}]"
        )

        # "Wed, May 1 🌦️ 55/72° Light Rain" one tile per line
        if report.days:
            lines = []
            for day in report.days:
                mc = self._temp_color(day.min_temperature, unit)
                xc = self._temp_color(day.max_temperature, unit)
                lines.append(
                    f"{format_day(day.date)} {icon_emoji(day.representative_icon_id)} "
                    f"[{mc}]{day.min_temperature}[/{mc}]/[{xc}]{day.max_temperature}°[/{xc}] "
                    f"[dim]{escape_markup(day.dominant_condition)}[/dim]"
                )
            self.query_one("#weather-forecast", Static).update("\n".join(lines))
        else:
            self.query_one("#weather-forecast", Static).update("[dim]No forecast[/dim]")

        self.query_one("#weather-chart", Sparkline).data = report.temperature_series()

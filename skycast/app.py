"""Interactive terminal UI for searching weather and managing favorites."""

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, Input

from .components import FavoritesPanel, StatusBar, WeatherPanel
from .components.favorites_panel import FavoritesList
from .models.config import Config
from .services.errors import WeatherError
from .services.favorites import FavoritesStore
from .services.weather_service import WeatherService

logger = logging.getLogger(__name__)


class WeatherApp(App):
    """Search box, weather panel, favorites list and status line."""

    TITLE = "SkyCast"

    CSS = """
    #main {
        height: 1fr;
    }

    #left {
        width: 3fr;
    }

    #right {
        width: 1fr;
        min-width: 24;
    }
    """

    BINDINGS = [
        Binding("f", "add_favorite", "Save favorite"),
        Binding("x", "clear_favorites", "Clear favorites"),
        Binding("r", "refresh", "Refresh"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: Config | None = None,
        service: WeatherService | None = None,
        favorites: FavoritesStore | None = None,
        initial_query: str = "",
    ) -> None:
        super().__init__()
        self.config = config or Config()
        self.service = service or WeatherService(self.config.api, self.config.display)
        self.favorites = favorites or FavoritesStore(Path(self.config.settings.favorites_path))
        self._initial_query = initial_query
        self._last_query = ""
        self._current_label = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main"):
            with Vertical(id="left"):
                yield Input(placeholder="City or ZIP", id="query")
                yield WeatherPanel(tz=self.config.display.tzinfo)
            with Vertical(id="right"):
                yield FavoritesPanel(self.favorites.labels)
        yield StatusBar()
        yield Footer()

    def on_mount(self) -> None:
        if self._initial_query:
            self.query_one("#query", Input).value = self._initial_query
            self.search(self._initial_query)
        else:
            self.query_one(StatusBar).set_status("Enter a city or ZIP")

    def search(self, query: str) -> None:
        """Start a search in a worker, cancelling any search in flight."""
        query = query.strip()
        if not query:
            self.query_one(StatusBar).set_status("Enter a city or ZIP")
            return
        self._last_query = query
        self.run_worker(self._search(query), exclusive=True)

    async def _search(self, query: str) -> None:
        status = self.query_one(StatusBar)
        panel = self.query_one(WeatherPanel)
        status.set_status("Loading weather...")
        panel.set_loading()

        try:
            report = await self.service.search_by_place(query)
        except WeatherError as e:
            logger.error(f"Search for '{query}' failed: {e.message}")
            panel.set_error(e.message)
            status.set_status(f"Error: {e.message}", tone="error")
            return

        self._current_label = report.label
        panel.update_report(report)
        status.set_status(f"Loaded {report.label}")
        status.set_last_refresh()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.search(event.value)

    def on_favorites_list_favorite_selected(self, event: FavoritesList.FavoriteSelected) -> None:
        self.query_one("#query", Input).value = event.location
        self.search(event.location)

    def action_refresh(self) -> None:
        if self._last_query:
            self.search(self._last_query)

    def action_add_favorite(self) -> None:
        status = self.query_one(StatusBar)
        label = self._current_label or self.query_one("#query", Input).value.strip()
        if not label:
            status.set_status("Nothing to save", tone="error")
            return
        if self.favorites.add(label):
            self.query_one(FavoritesPanel).update_labels(self.favorites.labels)
            status.set_status(f"Saved favorite: {label}")
        else:
            status.set_status("Already in favorites")

    def action_clear_favorites(self) -> None:
        self.favorites.clear()
        self.query_one(FavoritesPanel).update_labels([])
        self.query_one(StatusBar).set_status("Cleared favorites")

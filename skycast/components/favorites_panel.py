"""Favorites panel listing saved locations."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Label, ListItem, ListView, Static

from .weather_panel import escape_markup


class FavoriteItem(ListItem):
    """A single saved location."""

    def __init__(self, label: str) -> None:
        super().__init__()
        self.location = label

    def compose(self) -> ComposeResult:
        yield Static(f"⭐ {escape_markup(self.location)}", markup=True)


class FavoritesList(ListView):
    """List view for favorites with keyboard navigation."""

    BINDINGS = [
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
        Binding("enter", "select_cursor", "Search", show=True),
    ]

    class FavoriteSelected(Message):
        """Message sent when a favorite is chosen."""

        def __init__(self, label: str) -> None:
            super().__init__()
            self.location = label

    def update_labels(self, labels: list[str]) -> None:
        """Replace the list contents."""
        self.clear()
        for label in labels:
            self.append(FavoriteItem(label))

    def action_select_cursor(self) -> None:
        """Handle item selection."""
        if self.highlighted_child and isinstance(self.highlighted_child, FavoriteItem):
            self.post_message(self.FavoriteSelected(self.highlighted_child.location))


class FavoritesPanel(Static):
    """Panel wrapping the favorites list with an empty state."""

    DEFAULT_CSS = """
    FavoritesPanel {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }

    FavoritesPanel ListItem.-highlight {
        background: $primary-darken-2;
    }

    FavoritesPanel #favorites-empty {
        color: $text-muted;
    }
    """

    def __init__(self, labels: list[str] | None = None) -> None:
        super().__init__()
        self._labels = labels or []

    def compose(self) -> ComposeResult:
        yield Label("[bold]Favorites[/bold]")
        yield Label("[dim]No favorites yet. Press f to save one.[/dim]", id="favorites-empty")
        yield FavoritesList(id="favorites-list")

    def on_mount(self) -> None:
        self.update_labels(self._labels)

    def update_labels(self, labels: list[str]) -> None:
        """Show the given favorites."""
        self._labels = labels
        self.query_one(FavoritesList).update_labels(labels)
        self.query_one("#favorites-empty", Label).display = not labels

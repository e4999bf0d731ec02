"""Status bar component showing the last action result and keyboard hints."""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

KEY_HINTS = (("f", "Save"), ("x", "Clear favorites"), ("r", "Refresh"), ("q", "Quit"))


class StatusBar(Horizontal):
    """One-line bar: status message on the left, refresh time and key hints on the right."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
    }

    StatusBar #status-message {
        width: 1fr;
    }

    StatusBar #status-refresh {
        width: auto;
        padding-right: 2;
    }

    StatusBar #status-hints {
        width: auto;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._last_refresh: datetime | None = None

    def compose(self) -> ComposeResult:
        hints = "  ".join(f"[dim]{key}[/dim] {label}" for key, label in KEY_HINTS)
        yield Static("", id="status-message")
        yield Static("", id="status-refresh")
        yield Static(hints, id="status-hints")

    def set_status(self, message: str, tone: str = "info") -> None:
        """Show a status message; tone "error" renders it in red."""
        text = message.replace("[", r"\[")
        self.query_one("#status-message", Static).update(
            f"[red]{text}[/red]" if tone == "error" else f"[dim]{text}[/dim]"
        )

    def set_last_refresh(self, time: datetime | None = None) -> None:
        """Update the last refresh timestamp."""
        self._last_refresh = time or datetime.now()
        self.query_one("#status-refresh", Static).update(
            f"[dim]Updated {self._last_refresh:%H:%M}[/dim]"
        )

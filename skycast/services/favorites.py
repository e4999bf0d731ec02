"""Saved favorite locations, persisted to a JSON file."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_FAVORITES_PATH = "favorites.json"


class FavoritesStore:
    """Ordered list of location labels the user wants to revisit."""

    def __init__(self, path: Path | str = DEFAULT_FAVORITES_PATH):
        self.path = Path(path)
        self._labels: list[str] = []
        self._loaded = False

    def load(self) -> None:
        """Load favorites from file."""
        self._labels = []
        self._loaded = True

        if not self.path.exists():
            logger.debug(f"No favorites file at {self.path}")
            return

        try:
            with open(self.path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON in favorites file, starting empty: {e}")
            return
        except OSError as e:
            logger.error(f"Error loading favorites: {e}")
            return

        labels = data.get("favorites", []) if isinstance(data, dict) else []
        self._labels = [label for label in labels if isinstance(label, str) and label.strip()]
        logger.debug(f"Loaded {len(self._labels)} favorites")

    def save(self) -> bool:
        """Save favorites to file."""
        try:
            with open(self.path, "w") as f:
                json.dump({"favorites": self._labels}, f, indent=2)

            logger.debug(f"Saved {len(self._labels)} favorites")
            return True

        except OSError as e:
            logger.error(f"Error saving favorites: {e}")
            return False

    def contains(self, label: str) -> bool:
        """Case-insensitive membership check."""
        if not self._loaded:
            self.load()
        wanted = label.strip().lower()
        return any(existing.lower() == wanted for existing in self._labels)

    def add(self, label: str) -> bool:
        """Add and persist a label. Returns False if blank or already saved."""
        label = label.strip()
        if not label or self.contains(label):
            return False
        self._labels.append(label)
        self.save()
        return True

    def clear(self) -> None:
        """Remove every favorite."""
        self._labels = []
        self._loaded = True
        self.save()

    @property
    def labels(self) -> list[str]:
        """Favorites in the order they were added."""
        if not self._loaded:
            self.load()
        return list(self._labels)

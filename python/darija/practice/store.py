"""Progress stores for review cards.

The scheduler never persists anything itself. A session loads the whole
map from a store when it starts and writes the whole map back after
every answer.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping
import json
import os
import tempfile

from .scheduler import ReviewCard


class ProgressStore(ABC):
    """Base class for review card storage."""

    @abstractmethod
    def load_all(self) -> dict[str, ReviewCard]:
        """Return every stored card keyed by entry id."""
        pass

    @abstractmethod
    def replace_all(self, progress: Mapping[str, ReviewCard]) -> None:
        """Replace the stored map with the given one."""
        pass


class MemoryProgressStore(ProgressStore):
    """Keeps cards in memory. Useful for tests and one-off sessions."""

    def __init__(self, progress: Mapping[str, ReviewCard] | None = None):
        self._progress: dict[str, ReviewCard] = dict(progress or {})
        self.writes = 0

    def load_all(self) -> dict[str, ReviewCard]:
        return dict(self._progress)

    def replace_all(self, progress: Mapping[str, ReviewCard]) -> None:
        self._progress = dict(progress)
        self.writes += 1


class JsonProgressStore(ProgressStore):
    """Stores cards in a JSON file, one object keyed by entry id."""

    def __init__(self, filepath: Path | str):
        self.filepath = Path(filepath)

    def load_all(self) -> dict[str, ReviewCard]:
        """Load cards from disk.

        A missing, unreadable or corrupt file loads as an empty map, so a
        damaged progress file never blocks practice.
        """
        if not self.filepath.exists():
            return {}
        try:
            with open(self.filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
            return {
                str(key): ReviewCard.from_dict(value)
                for key, value in data.items()
            }
        except (json.JSONDecodeError, OSError, AttributeError, KeyError, TypeError, ValueError):
            return {}

    def replace_all(self, progress: Mapping[str, ReviewCard]) -> None:
        """Write cards to disk, replacing the file atomically."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {key: card.to_dict() for key, card in sorted(progress.items())}

        fd, tmp_path = tempfile.mkstemp(
            dir=self.filepath.parent, prefix=".progress-", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.filepath)
        except BaseException:
            os.unlink(tmp_path)
            raise

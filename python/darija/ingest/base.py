"""Base ingestor interface for entry sources.

All ingestors inherit from Ingestor and implement the parse() method.
This provides a consistent API for loading entries from any source format.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Optional

from ..schema import Entry, EntryKind


@dataclass
class IngestResult:
    """Result of ingesting an entry source."""

    entries: list[Entry]
    source_path: str
    kind: EntryKind
    total_raw: int = 0          # Records in source
    total_valid: int = 0        # Entries kept
    total_duplicates: int = 0   # Repeated ids within this source
    errors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.kind.value}s: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{self.total_duplicates} dupes, {len(self.errors)} errors)"
        )


class Ingestor(ABC):
    """Base class for entry ingestors.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (record, position) tuples
        - file_extensions: list of supported extensions

    The ingest() method handles validation and Entry creation.
    """

    file_extensions: list[str] = []

    def __init__(
        self,
        kind: EntryKind = EntryKind.WORD,
        strict_categories: bool = True,
    ):
        """Initialize ingestor.

        Args:
            kind: Whether the source holds words or phrases.
            strict_categories: Reject entries whose category is not in
                the category table for this kind.
        """
        self.kind = kind
        self.strict_categories = strict_categories

    @abstractmethod
    def parse(self, filepath: Path) -> Iterator[tuple[Any, Optional[int]]]:
        """Parse source file and yield (record, position) tuples.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (raw_record, position).
        """
        pass

    def validate(self, entry: Entry) -> Optional[str]:
        """Return an error message for an unusable entry, else None."""
        if not entry.id:
            return "empty id"
        if not all(isinstance(h, str) for h in entry.headwords):
            return f"{entry.id}: headwords must be strings"
        if not entry.darija.strip():
            return f"{entry.id}: empty transliteration"
        if self.strict_categories and entry.category not in self.kind.categories:
            return f"{entry.id}: unknown category {entry.category!r}"
        return None

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest entries from file.

        Bad records are skipped and reported in IngestResult.errors. When
        an id repeats, the first record wins.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with entries in source order and statistics.
        """
        filepath = Path(filepath)
        filepath_str = str(filepath.resolve())

        entries: dict[str, Entry] = {}
        total_raw = 0
        duplicates = 0
        errors: list[str] = []

        for record, position in self.parse(filepath):
            total_raw += 1

            if not isinstance(record, dict):
                errors.append(f"#{position}: expected an object")
                continue
            try:
                entry = Entry.from_dict(record, self.kind)
            except KeyError as e:
                errors.append(f"#{position}: missing field {e}")
                continue
            except (TypeError, ValueError) as e:
                errors.append(f"#{position}: {e}")
                continue

            problem = self.validate(entry)
            if problem:
                errors.append(f"#{position}: {problem}")
                continue

            if entry.id in entries:
                duplicates += 1
                continue
            entries[entry.id] = entry

        return IngestResult(
            entries=list(entries.values()),
            source_path=filepath_str,
            kind=self.kind,
            total_raw=total_raw,
            total_valid=len(entries),
            total_duplicates=duplicates,
            errors=errors,
        )

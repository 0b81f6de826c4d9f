"""JSON entry source ingestors.

Formats:
    words.json      # JSON array of entry objects
    words.jsonl     # One entry object per line, blank lines ignored

Each object carries the entry fields: id, darija, arabic, english, french,
pronunciation, category, tags, order and optional extras.
"""

from pathlib import Path
from typing import Any, Iterator, Optional
import json

from .base import Ingestor


class JsonIngestor(Ingestor):
    """Ingestor for a JSON array of entries."""

    file_extensions = [".json"]

    def parse(self, filepath: Path) -> Iterator[tuple[Any, Optional[int]]]:
        """Parse JSON array file.

        Args:
            filepath: Path to .json file.

        Yields:
            Tuples of (record, index in array).

        Raises:
            ValueError: If the file is not a JSON array.
        """
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"{filepath}: expected a JSON array of entries")

        for index, record in enumerate(data):
            yield record, index


class JsonLinesIngestor(Ingestor):
    """Ingestor for JSON lines files."""

    file_extensions = [".jsonl", ".ndjson"]

    def parse(self, filepath: Path) -> Iterator[tuple[Any, Optional[int]]]:
        """Parse JSON lines file.

        Args:
            filepath: Path to .jsonl file.

        Yields:
            Tuples of (record, line_number). Lines that are not valid JSON
            yield None so they are reported as errors.
        """
        with open(filepath, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    yield json.loads(line), line_num
                except json.JSONDecodeError:
                    yield None, line_num


"""Entry source ingestion module.

Sources are read by ingestor classes kept in a registry. A file is routed
to the first registered ingestor whose file_extensions include its suffix,
so a custom format only needs a parse() method and a register call.

Usage:
    from darija.ingest import load_lexicon, register_ingestor

    lexicon, results = load_lexicon("data/words.json", "data/phrases.json")

    register_ingestor("csv", CsvIngestor)   # CsvIngestor.file_extensions = [".csv"]
    lexicon, results = load_lexicon("words.csv")
"""

from pathlib import Path
from typing import Optional

from ..schema import EntryKind, Lexicon
from .base import Ingestor, IngestResult
from .json_source import JsonIngestor, JsonLinesIngestor

# Lookup order is registration order
INGESTORS: dict[str, type[Ingestor]] = {
    "json": JsonIngestor,
    "jsonl": JsonLinesIngestor,
}


def get_ingestor(name: str) -> type[Ingestor]:
    """Get ingestor class by registry name."""
    try:
        return INGESTORS[name]
    except KeyError:
        raise ValueError(
            f"Unknown ingestor: {name}. Available: {list(INGESTORS)}"
        ) from None


def register_ingestor(name: str, ingestor_cls: type[Ingestor]) -> None:
    """Register an ingestor class; later lookups by extension will find it."""
    INGESTORS[name] = ingestor_cls


def ingestor_for(
    filepath: Path | str,
    kind: EntryKind = EntryKind.WORD,
    strict_categories: bool = True,
) -> Ingestor:
    """Instantiate the registered ingestor that handles a file's extension.

    Raises:
        ValueError: If no registered ingestor claims the extension.
    """
    suffix = Path(filepath).suffix.lower()
    for cls in INGESTORS.values():
        if suffix in cls.file_extensions:
            return cls(kind=kind, strict_categories=strict_categories)
    raise ValueError(f"Unsupported entry source: {filepath}")


def ingest(
    filepath: Path | str,
    kind: EntryKind = EntryKind.WORD,
    strict_categories: bool = True,
) -> IngestResult:
    """Ingest one entry source with the ingestor matching its extension."""
    return ingestor_for(filepath, kind, strict_categories).ingest(filepath)


def load_lexicon(
    words_path: Path | str,
    phrases_path: Optional[Path | str] = None,
    strict_categories: bool = True,
) -> tuple[Lexicon, list[IngestResult]]:
    """Load words and phrases into a Lexicon.

    Args:
        words_path: Word source file.
        phrases_path: Phrase source file; skipped when None or missing.
        strict_categories: Reject unknown categories.

    Returns:
        Tuple of (lexicon, ingest results) so callers can report errors.
    """
    results = [ingest(words_path, EntryKind.WORD, strict_categories)]
    phrases = ()
    if phrases_path is not None and Path(phrases_path).exists():
        phrase_result = ingest(phrases_path, EntryKind.PHRASE, strict_categories)
        results.append(phrase_result)
        phrases = tuple(phrase_result.entries)

    lexicon = Lexicon(words=tuple(results[0].entries), phrases=phrases)
    return lexicon, results


__all__ = [
    "INGESTORS",
    "Ingestor",
    "IngestResult",
    "JsonIngestor",
    "JsonLinesIngestor",
    "get_ingestor",
    "ingest",
    "ingestor_for",
    "load_lexicon",
    "register_ingestor",
]

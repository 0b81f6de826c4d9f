"""Pytest configuration and fixtures."""

import json
import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from darija.schema import Entry, EntryKind, Lexicon


def make_entry(
    entry_id: str,
    darija: str,
    english: str = "",
    french: str = "",
    arabic: str = "",
    category: str = "greetings",
    order: int = 0,
    tags: tuple[str, ...] = (),
    cultural_note: str | None = None,
    kind: EntryKind = EntryKind.WORD,
) -> Entry:
    """Helper to create a test entry."""
    return Entry(
        id=entry_id,
        darija=darija,
        arabic=arabic,
        english=english,
        french=french,
        category=category,
        order=order,
        tags=frozenset(tags),
        cultural_note=cultural_note,
        kind=kind,
    )


@pytest.fixture
def sample_words():
    """Small word collection covering several categories."""
    return (
        make_entry("w-salam", "salam", "hello", "bonjour", "سلام",
                   order=1, tags=("first-day", "essential"),
                   cultural_note="Short for as-salamu alaykum."),
        make_entry("w-shukran", "shukran", "thank you", "merci", "شكرا",
                   order=2, tags=("first-day", "essential")),
        make_entry("w-labas", "labas", "fine", "ça va", "لاباس",
                   order=3, tags=("first-day",)),
        make_entry("w-atay", "atay", "tea", "thé", "أتاي", category="food",
                   order=2, cultural_note="Mint tea is poured from height."),
        make_entry("w-khobz", "khobz", "bread", "pain", "خبز", category="food",
                   order=1),
        make_entry("w-wahed", "wahed", "one", "un", "واحد", category="numbers",
                   order=1, tags=("essential",)),
    )


@pytest.fixture
def sample_phrases():
    """Small phrase collection."""
    return (
        make_entry("p-bshhal", "bshhal hada?", "how much is this?",
                   "combien ça coûte ?", "بشحال هادا؟", category="souk",
                   order=1, kind=EntryKind.PHRASE),
        make_entry("p-honey", "li bgha l3sel ysber l9ris nhal",
                   "whoever wants honey must bear the stings",
                   category="proverbs", order=2, kind=EntryKind.PHRASE),
        make_entry("p-delay", "kol ta3tal fiha khir",
                   "every delay has some good in it",
                   category="proverbs", order=1, kind=EntryKind.PHRASE),
    )


@pytest.fixture
def sample_lexicon(sample_words, sample_phrases):
    """Lexicon built from the sample words and phrases."""
    return Lexicon(words=sample_words, phrases=sample_phrases)


@pytest.fixture
def data_files(tmp_path, sample_words, sample_phrases):
    """Sample words and phrases written as JSON source files."""
    words_path = tmp_path / "words.json"
    phrases_path = tmp_path / "phrases.json"
    words_path.write_text(
        json.dumps([w.to_dict() for w in sample_words], ensure_ascii=False),
        encoding="utf-8",
    )
    phrases_path.write_text(
        json.dumps([p.to_dict() for p in sample_phrases], ensure_ascii=False),
        encoding="utf-8",
    )
    return words_path, phrases_path

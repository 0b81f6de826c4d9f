"""Entry schema and data structures for darija.

Core concept:
    - Every word or phrase is one immutable Entry with four parallel
      headwords (Darija transliteration, Arabic, English, French)
    - A Lexicon holds the read-only collection loaded once at startup
    - Categories come from a fixed table; tags are free-form

Example:
    Entry(id="w-001", darija="shukran", arabic="شكرا",
          english="thank you", french="merci", category="greetings")
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Optional
import json


WORD_CATEGORIES: dict[str, str] = {
    "greetings": "Greetings",
    "food": "Food & Drink",
    "shopping": "Shopping",
    "transport": "Transport",
    "home": "Home & House",
    "emotions": "Feelings",
    "time": "Time",
    "numbers": "Numbers",
    "family": "Family & People",
    "city": "City & Medina",
    "money": "Money",
    "health": "Health",
    "religion": "Faith & Blessings",
    "slang": "Street Slang",
    "verbs": "Verbs",
    "directions": "Directions",
    "crafts": "Crafts & Materials",
    "animals": "Animals",
    "nature": "Nature & Weather",
    "clothing": "Clothing",
    "colors": "Colors",
    "music": "Music & Culture",
    "technology": "Technology",
    "education": "Education",
    "work": "Work & Professions",
    "pronouns": "Pronouns & Grammar",
    "culture": "Culture",
    "architecture": "Architecture",
    "blessings": "Blessings & Prayers",
    "compliments": "Compliments",
    "emergency": "Emergency",
    "adjectives": "Adjectives",
    "sports": "Sports",
    "survival": "Survival Kit",
}

PHRASE_CATEGORIES: dict[str, str] = {
    "survival": "Survival Kit",
    "souk": "In the Souk",
    "taxi": "Taxi Talk",
    "cafe": "Café Culture",
    "riad": "Riad Life",
    "restaurant": "Eating Out",
    "pharmacy": "At the Pharmacy",
    "compliments": "Compliments",
    "arguments": "Arguments",
    "proverbs": "Proverbs & Wisdom",
    "blessings": "Blessings",
    "daily": "Daily Life",
    "emergency": "Emergency",
    "hammam": "Hammam Guide",
    "medina": "Medina Life",
    "desert": "Desert Adventures",
    "love": "Love & Romance",
    "ramadan": "Ramadan",
    "wedding": "Weddings",
    "football": "Football",
    "family": "Family",
    "family_life": "Family Life",
    "weather": "Weather",
    "cooking": "Cooking",
    "atlas": "Atlas Mountains",
    "beach": "Beach & Coast",
    "phone": "Phone & Tech",
    "work": "Work & Business",
    "nightlife": "Nightlife",
    "health": "Health",
    "transport": "Transport",
    "photography": "Photography",
    "festivals": "Festivals",
    "garden": "Gardens & Nature",
}

SECONDS_PER_DAY = 86400


class EntryKind(Enum):
    """Whether an entry is a single word or a multi-word phrase."""

    WORD = "word"
    PHRASE = "phrase"

    @property
    def categories(self) -> dict[str, str]:
        """Category table for this kind."""
        return WORD_CATEGORIES if self is EntryKind.WORD else PHRASE_CATEGORIES


@dataclass(frozen=True)
class Example:
    """A usage example in all four languages."""

    darija: str
    arabic: str = ""
    english: str = ""
    french: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "darija": self.darija,
            "arabic": self.arabic,
            "english": self.english,
            "french": self.french,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Example":
        return cls(
            darija=data["darija"],
            arabic=data.get("arabic", ""),
            english=data.get("english", ""),
            french=data.get("french", ""),
        )


def _list_field(data: dict[str, Any], key: str) -> list:
    """Optional list field; a bare string would otherwise split into letters."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"{key} must be a list, got {type(value).__name__}")
    return list(value)


@dataclass(frozen=True)
class Entry:
    """A dictionary word or phrase."""

    id: str
    darija: str                             # Latin transliteration
    arabic: str
    english: str
    french: str
    category: str
    pronunciation: str = ""
    tags: frozenset[str] = frozenset()
    cultural_note: Optional[str] = None
    order: int = 0
    kind: EntryKind = EntryKind.WORD
    part_of_speech: Optional[str] = None    # Words only
    register: str = "neutral"               # e.g., "neutral", "informal"
    examples: tuple[Example, ...] = ()
    gender: Optional[str] = None
    plural: Optional[str] = None
    related_words: tuple[str, ...] = ()
    literal_translation: Optional[str] = None   # Phrases only
    situation: Optional[str] = None             # Phrases only

    @property
    def headwords(self) -> tuple[str, str, str, str]:
        """The four searchable headword fields, transliteration first."""
        return (self.darija, self.english, self.french, self.arabic)

    @property
    def category_name(self) -> str:
        """Display name of the category, falling back to its id."""
        return self.kind.categories.get(self.category, self.category)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {
            "id": self.id,
            "darija": self.darija,
            "arabic": self.arabic,
            "english": self.english,
            "french": self.french,
            "pronunciation": self.pronunciation,
            "category": self.category,
            "tags": sorted(self.tags),
            "cultural_note": self.cultural_note,
            "order": self.order,
            "register": self.register,
        }
        if self.kind is EntryKind.WORD:
            data.update({
                "part_of_speech": self.part_of_speech,
                "gender": self.gender,
                "plural": self.plural,
                "examples": [e.to_dict() for e in self.examples],
                "related_words": list(self.related_words),
            })
        else:
            data.update({
                "literal_translation": self.literal_translation,
                "situation": self.situation,
            })
        return data

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        kind: EntryKind = EntryKind.WORD,
    ) -> "Entry":
        """Create from dictionary.

        Raises:
            KeyError: If a required field is missing.
            ValueError: If order is not an integer.
            TypeError: If tags, examples or related_words is not a list.
        """
        return cls(
            id=str(data["id"]),
            darija=data["darija"],
            arabic=data.get("arabic") or "",
            english=data["english"],
            french=data.get("french") or "",
            category=data["category"],
            pronunciation=data.get("pronunciation") or "",
            tags=frozenset(_list_field(data, "tags")),
            cultural_note=data.get("cultural_note") or None,
            order=int(data.get("order", 0)),
            kind=kind,
            part_of_speech=data.get("part_of_speech"),
            register=data.get("register", "neutral"),
            examples=tuple(
                Example.from_dict(e) for e in _list_field(data, "examples")
            ),
            gender=data.get("gender"),
            plural=data.get("plural"),
            related_words=tuple(_list_field(data, "related_words")),
            literal_translation=data.get("literal_translation"),
            situation=data.get("situation"),
        )


@dataclass(frozen=True)
class CategoryCount:
    """A category with its display name and number of entries."""

    id: str
    name: str
    count: int


@dataclass(frozen=True)
class SearchResults:
    """Words and phrases matching one query."""

    words: list[Entry]
    phrases: list[Entry]


def _by_order(entries) -> list[Entry]:
    return sorted(entries, key=lambda e: e.order)


def _count_categories(entries: tuple[Entry, ...], names: dict[str, str]) -> list[CategoryCount]:
    counts: dict[str, int] = {}
    for entry in entries:
        counts[entry.category] = counts.get(entry.category, 0) + 1
    return sorted(
        (CategoryCount(id=c, name=names.get(c, c), count=n) for c, n in counts.items()),
        key=lambda c: -c.count,
    )


@dataclass(frozen=True)
class Lexicon:
    """The read-only collection of words and phrases."""

    words: tuple[Entry, ...] = ()
    phrases: tuple[Entry, ...] = ()
    generated_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def get_word(self, entry_id: str) -> Optional[Entry]:
        return next((w for w in self.words if w.id == entry_id), None)

    def get_phrase(self, entry_id: str) -> Optional[Entry]:
        return next((p for p in self.phrases if p.id == entry_id), None)

    def words_by_category(self, category: str) -> list[Entry]:
        """Words in a category, sorted by display order."""
        return _by_order(w for w in self.words if w.category == category)

    def words_by_tag(self, tag: str) -> list[Entry]:
        """Words carrying a tag, sorted by display order."""
        return _by_order(w for w in self.words if w.has_tag(tag))

    def phrases_by_category(self, category: str) -> list[Entry]:
        return _by_order(p for p in self.phrases if p.category == category)

    def proverbs(self) -> list[Entry]:
        return self.phrases_by_category("proverbs")

    def word_categories(self) -> list[CategoryCount]:
        """Word categories with counts, most populated first."""
        return _count_categories(self.words, WORD_CATEGORIES)

    def phrase_categories(self) -> list[CategoryCount]:
        """Phrase categories with counts, most populated first."""
        return _count_categories(self.phrases, PHRASE_CATEGORIES)

    def metadata(self) -> dict[str, int]:
        return {"total_words": len(self.words), "total_phrases": len(self.phrases)}

    def word_of_the_day(self, day: Optional[int] = None) -> Optional[Entry]:
        """Pick today's featured word.

        Only words with a cultural note qualify. The pick is stable for a
        whole UTC day and moves on at midnight.

        Args:
            day: Days since the Unix epoch. Defaults to today (UTC).

        Returns:
            The featured word, or None if no word has a cultural note.
        """
        if day is None:
            day = int(datetime.now(timezone.utc).timestamp() // SECONDS_PER_DAY)
        candidates = sorted(
            (w for w in self.words if w.cultural_note), key=lambda w: w.id
        )
        if not candidates:
            return None
        return candidates[day % len(candidates)]

    def search(
        self,
        query: str,
        word_limit: Optional[int] = None,
        phrase_limit: Optional[int] = None,
    ) -> SearchResults:
        """Search words (fuzzy) and phrases (substring only).

        Args:
            query: Raw user query in any of the four languages.
            word_limit: Maximum words returned; default 20.
            phrase_limit: Maximum phrases returned; default 15.
        """
        from .search import PHRASE_LIMIT, WORD_LIMIT, search_phrases, search_words

        if word_limit is None:
            word_limit = WORD_LIMIT
        if phrase_limit is None:
            phrase_limit = PHRASE_LIMIT
        return SearchResults(
            words=search_words(query, self.words, limit=word_limit),
            phrases=search_phrases(query, self.phrases, limit=phrase_limit),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "generated_at": self.generated_at,
            "metadata": self.metadata(),
            "words": [w.to_dict() for w in self.words],
            "phrases": [p.to_dict() for p in self.phrases],
        }

    def save(self, filepath: Path) -> None:
        """Save lexicon to JSON file."""
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, filepath: Path) -> "Lexicon":
        """Load lexicon from JSON file."""
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)

        return cls(
            words=tuple(
                Entry.from_dict(w, EntryKind.WORD) for w in data.get("words", [])
            ),
            phrases=tuple(
                Entry.from_dict(p, EntryKind.PHRASE) for p in data.get("phrases", [])
            ),
            generated_at=data.get("generated_at", ""),
        )

"""Practice decks, card directions and level labels."""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from ..schema import Entry, Lexicon
from .scheduler import ReviewCard

LEVEL_LABELS = ("New", "Learning", "Learning", "Reviewing", "Known", "Mastered")

LEARNED_LEVEL = 2


class DeckMode(Enum):
    """Which side of the card is shown first."""

    ARABIC_TO_ENGLISH = "arabic-to-english"
    ENGLISH_TO_ARABIC = "english-to-arabic"
    DARIJA_TO_ENGLISH = "darija-to-english"

    def prompt(self, entry: Entry) -> str:
        """Front of the card."""
        if self is DeckMode.ARABIC_TO_ENGLISH:
            return f"{entry.arabic} ({entry.darija})"
        if self is DeckMode.ENGLISH_TO_ARABIC:
            return entry.english
        return entry.darija

    def reveal(self, entry: Entry) -> str:
        """Back of the card."""
        if self is DeckMode.ENGLISH_TO_ARABIC:
            return f"{entry.arabic} ({entry.darija}) [{entry.pronunciation}]"
        return f"{entry.english} / {entry.french}"


@dataclass(frozen=True)
class Deck:
    """A named selection of words, by tag or by category."""

    id: str
    label: str
    tag: Optional[str] = None
    category: Optional[str] = None

    def select(self, lexicon: Lexicon) -> list[Entry]:
        """Words belonging to this deck, in display order."""
        if self.tag:
            return lexicon.words_by_tag(self.tag)
        if self.category:
            return lexicon.words_by_category(self.category)
        return []


DECKS: tuple[Deck, ...] = (
    Deck("first-day", "First Day Survival", tag="first-day"),
    Deck("essential", "Essential Words", tag="essential"),
    Deck("food", "Food & Drink", category="food"),
    Deck("greetings", "Greetings & Social", category="greetings"),
    Deck("shopping", "At the Souk", category="shopping"),
    Deck("transport", "Getting Around", category="transport"),
    Deck("religion", "Faith & Blessings", category="religion"),
    Deck("emotions", "Feelings", category="emotions"),
    Deck("family", "Family & People", category="family"),
    Deck("health", "Health & Body", category="health"),
    Deck("nature", "Nature & Weather", category="nature"),
    Deck("city", "City & Medina", category="city"),
    Deck("culture", "Culture", category="culture"),
    Deck("colors", "Colors", category="colors"),
    Deck("verbs", "Verbs", category="verbs"),
    Deck("numbers", "Numbers", category="numbers"),
)


def get_deck(deck_id: str) -> Deck:
    """Get deck by id."""
    for deck in DECKS:
        if deck.id == deck_id:
            return deck
    raise ValueError(f"Unknown deck: {deck_id}. Available: {[d.id for d in DECKS]}")


def level_label(card: Optional[ReviewCard]) -> str:
    """Human label for a card's level; unseen cards are "New"."""
    if card is None:
        return LEVEL_LABELS[0]
    return LEVEL_LABELS[max(0, min(card.level, len(LEVEL_LABELS) - 1))]


def learned_count(
    progress: Mapping[str, ReviewCard],
    entries: Optional[list[Entry]] = None,
    threshold: int = LEARNED_LEVEL,
) -> int:
    """Count cards at or above a level, optionally limited to some entries."""
    if entries is None:
        cards = progress.values()
    else:
        cards = (progress[e.id] for e in entries if e.id in progress)
    return sum(1 for card in cards if card.level >= threshold)


def level_histogram(
    progress: Mapping[str, ReviewCard],
    entries: list[Entry],
) -> dict[str, int]:
    """Number of entries per level label, unseen entries counted as New."""
    histogram = {label: 0 for label in LEVEL_LABELS}
    for entry in entries:
        histogram[level_label(progress.get(entry.id))] += 1
    return histogram

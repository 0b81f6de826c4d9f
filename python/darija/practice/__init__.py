"""Flashcard practice module for darija.

Provides the leveled review scheduler, session queue handling, decks and
pluggable progress stores.

Usage:
    from darija.practice import PracticeSession, JsonProgressStore, get_deck

    deck = get_deck("greetings").select(lexicon)
    session = PracticeSession(deck, JsonProgressStore("progress.json"))
    while not session.finished:
        entry = session.current
        session.answer(correct=True)
"""

from .decks import (
    DECKS,
    LEVEL_LABELS,
    Deck,
    DeckMode,
    get_deck,
    learned_count,
    level_histogram,
    level_label,
)
from .scheduler import (
    DEFAULT_INTERVALS,
    DEFAULT_TABLE,
    IntervalTable,
    ReviewCard,
    new_card,
    review,
)
from .session import (
    SESSION_CAP,
    AnswerResult,
    EmptyDeckError,
    PracticeSession,
    SessionStats,
    answer,
    start_session,
)
from .store import JsonProgressStore, MemoryProgressStore, ProgressStore

__all__ = [
    "DECKS",
    "DEFAULT_INTERVALS",
    "DEFAULT_TABLE",
    "LEVEL_LABELS",
    "SESSION_CAP",
    "AnswerResult",
    "Deck",
    "DeckMode",
    "EmptyDeckError",
    "IntervalTable",
    "JsonProgressStore",
    "MemoryProgressStore",
    "PracticeSession",
    "ProgressStore",
    "ReviewCard",
    "SessionStats",
    "answer",
    "get_deck",
    "learned_count",
    "level_histogram",
    "level_label",
    "new_card",
    "review",
    "start_session",
]

"""Leveled review scheduling for flashcard practice.

Each entry the learner has seen gets a ReviewCard holding a level from 0
to the top of the interval table. A correct answer moves the card one
level up, an incorrect one moves it one level down, and the card becomes
due again after the interval of its new level.
"""

from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional

DEFAULT_INTERVALS = (0, 60, 300, 1800, 86400, 259200)  # now, 1min, 5min, 30min, 1day, 3days


@dataclass(frozen=True)
class IntervalTable:
    """Seconds until the next review, indexed by level."""

    seconds: tuple[int, ...] = DEFAULT_INTERVALS

    def __post_init__(self):
        if not self.seconds:
            raise ValueError("Interval table cannot be empty")
        if any(s < 0 for s in self.seconds):
            raise ValueError("Intervals must be non-negative")
        if any(a > b for a, b in zip(self.seconds, self.seconds[1:])):
            raise ValueError("Intervals must be non-decreasing")

    @classmethod
    def from_list(cls, seconds: Iterable[int]) -> "IntervalTable":
        return cls(tuple(int(s) for s in seconds))

    @property
    def max_level(self) -> int:
        return len(self.seconds) - 1

    def clamp(self, level: int) -> int:
        return max(0, min(level, self.max_level))

    def interval(self, level: int) -> int:
        return self.seconds[self.clamp(level)]


DEFAULT_TABLE = IntervalTable()


@dataclass(frozen=True)
class ReviewCard:
    """Review state of one entry."""

    entry_id: str
    level: int = 0                  # 0 = new
    next_review: float = 0.0        # Epoch seconds
    correct: int = 0
    incorrect: int = 0

    @property
    def reviews(self) -> int:
        return self.correct + self.incorrect

    def is_due(self, now: float) -> bool:
        return self.next_review <= now

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "entry_id": self.entry_id,
            "level": self.level,
            "next_review": self.next_review,
            "correct": self.correct,
            "incorrect": self.incorrect,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReviewCard":
        """Create from dictionary.

        Also accepts the camelCase keys written by the browser version
        of the practice page (wordId, nextReview).
        """
        return cls(
            entry_id=str(data["entry_id"] if "entry_id" in data else data["wordId"]),
            level=int(data.get("level", 0)),
            next_review=float(data.get("next_review", data.get("nextReview", 0.0))),
            correct=int(data.get("correct", 0)),
            incorrect=int(data.get("incorrect", 0)),
        )


def new_card(entry_id: str, now: float) -> ReviewCard:
    """Card for an entry with no history: level 0, due immediately."""
    return ReviewCard(entry_id=entry_id, level=0, next_review=now)


def review(
    card: Optional[ReviewCard],
    entry_id: str,
    correct: bool,
    now: float,
    intervals: IntervalTable = DEFAULT_TABLE,
) -> ReviewCard:
    """Apply one answer to a card.

    Args:
        card: Current card, or None if the entry was never reviewed.
        entry_id: Entry the answer is for.
        correct: Whether the learner knew it.
        now: Current time in epoch seconds.
        intervals: Interval table to schedule with.

    Returns:
        A new card; the input card is left untouched.
    """
    if card is None:
        card = new_card(entry_id, now)

    if correct:
        level = intervals.clamp(card.level + 1)
    else:
        level = intervals.clamp(card.level - 1)

    return replace(
        card,
        level=level,
        next_review=now + intervals.interval(level),
        correct=card.correct + (1 if correct else 0),
        incorrect=card.incorrect + (0 if correct else 1),
    )

"""Practice sessions: building the card queue and recording answers.

A session queue holds due cards first, then never-seen cards, each group
shuffled, capped at a fixed size. When nothing is due and nothing is new
the whole deck is shuffled instead, so a non-empty deck never yields an
empty session. Cards answered incorrectly come back a few positions later.
"""

from dataclasses import dataclass, replace
from typing import Callable, Mapping, NamedTuple, Optional, Sequence
import random
import time

from ..schema import Entry
from .scheduler import DEFAULT_TABLE, IntervalTable, ReviewCard, review
from .store import ProgressStore

SESSION_CAP = 20

# Incorrect cards are reinserted this many slots after their position
REQUEUE_MIN_OFFSET = 3
REQUEUE_MAX_OFFSET = 5


class EmptyDeckError(ValueError):
    """Raised when a session is requested for a deck with no entries."""


@dataclass(frozen=True)
class SessionStats:
    """Answers given during one session."""

    correct: int = 0
    incorrect: int = 0
    total: int = 0

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total else 0.0

    def record(self, correct: bool) -> "SessionStats":
        return replace(
            self,
            correct=self.correct + (1 if correct else 0),
            incorrect=self.incorrect + (0 if correct else 1),
            total=self.total + 1,
        )


class AnswerResult(NamedTuple):
    """Updated state after one answer."""

    queue: list[Entry]
    progress: dict[str, ReviewCard]
    stats: SessionStats


def start_session(
    deck: Sequence[Entry],
    progress: Mapping[str, ReviewCard],
    now: float,
    cap: int = SESSION_CAP,
    rng: Optional[random.Random] = None,
) -> list[Entry]:
    """Build the card queue for a new session.

    Args:
        deck: Entries selected for practice.
        progress: Review cards keyed by entry id.
        now: Current time in epoch seconds.
        cap: Maximum queue length.
        rng: Random source for shuffling.

    Returns:
        Queue of min(cap, len(deck)) entries at most, never empty.

    Raises:
        EmptyDeckError: If the deck has no entries.
    """
    if not deck:
        raise EmptyDeckError("Deck has no entries to practice")
    if cap < 1:
        raise ValueError(f"Session cap must be positive, got {cap}")
    rng = rng or random.Random()

    due: list[Entry] = []
    fresh: list[Entry] = []
    for entry in deck:
        card = progress.get(entry.id)
        if card is None:
            fresh.append(entry)
        elif card.is_due(now):
            due.append(entry)

    rng.shuffle(due)
    rng.shuffle(fresh)
    queue = (due + fresh)[:cap]
    if queue:
        return queue

    # Everything reviewed and nothing due yet
    fallback = list(deck)
    rng.shuffle(fallback)
    return fallback[:cap]


def requeue_position(index: int, queue_length: int, rng: random.Random) -> int:
    """Slot to reinsert a missed card at, clamped to the queue end."""
    offset = rng.randint(REQUEUE_MIN_OFFSET, REQUEUE_MAX_OFFSET)
    return min(index + offset, queue_length)


def answer(
    queue: Sequence[Entry],
    index: int,
    correct: bool,
    progress: Mapping[str, ReviewCard],
    stats: SessionStats,
    now: float,
    rng: Optional[random.Random] = None,
    intervals: IntervalTable = DEFAULT_TABLE,
) -> AnswerResult:
    """Record an answer for the card at queue[index].

    Args:
        queue: Current session queue.
        index: Position of the answered card.
        correct: Whether the learner knew it.
        progress: Review cards keyed by entry id.
        stats: Session statistics so far.
        now: Current time in epoch seconds.
        rng: Random source for the requeue offset.
        intervals: Interval table to schedule with.

    Returns:
        AnswerResult with new queue, progress and stats. Inputs are not
        modified.

    Raises:
        IndexError: If index is outside the queue.
    """
    if not 0 <= index < len(queue):
        raise IndexError(f"Queue index {index} out of range (length {len(queue)})")
    rng = rng or random.Random()

    entry = queue[index]
    new_progress = dict(progress)
    new_progress[entry.id] = review(
        progress.get(entry.id), entry.id, correct, now, intervals
    )

    new_queue = list(queue)
    if not correct and index < len(queue) - 1:
        new_queue.insert(requeue_position(index, len(queue), rng), entry)

    return AnswerResult(new_queue, new_progress, stats.record(correct))


class PracticeSession:
    """A running practice session bound to a progress store.

    Loads all cards when the session starts and writes them all back after
    every answer.
    """

    def __init__(
        self,
        deck: Sequence[Entry],
        store: ProgressStore,
        cap: int = SESSION_CAP,
        intervals: IntervalTable = DEFAULT_TABLE,
        clock: Callable[[], float] = time.time,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.intervals = intervals
        self.clock = clock
        self.rng = rng or random.Random()

        self.progress = store.load_all()
        self.queue = start_session(
            deck, self.progress, now=clock(), cap=cap, rng=self.rng
        )
        self.index = 0
        self.stats = SessionStats()

    @property
    def finished(self) -> bool:
        return self.index >= len(self.queue)

    @property
    def current(self) -> Optional[Entry]:
        """Card being shown, or None once the session is over."""
        if self.finished:
            return None
        return self.queue[self.index]

    @property
    def remaining(self) -> int:
        return max(0, len(self.queue) - self.index)

    def card_for(self, entry: Entry) -> Optional[ReviewCard]:
        return self.progress.get(entry.id)

    def answer(self, correct: bool) -> Optional[Entry]:
        """Answer the current card and advance.

        Returns:
            The next card, or None if the session is finished.

        Raises:
            IndexError: If the session is already finished.
        """
        result = answer(
            self.queue,
            self.index,
            correct,
            self.progress,
            self.stats,
            now=self.clock(),
            rng=self.rng,
            intervals=self.intervals,
        )
        self.queue, self.progress, self.stats = result
        self.store.replace_all(self.progress)
        self.index += 1
        return self.current

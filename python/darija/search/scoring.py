"""Ranked search over dictionary entries.

Each entry is scored against the query on its four headwords. Raw
case-insensitive matches win outright; only when nothing matched raw does
the transliteration go through Darija normalization and fuzzy comparison.

Tiers:
    100  exact headword
     90  headword starts with query
     80  headword contains query
     75  normalized transliteration equals normalized query
    ≤65  normalized transliteration contains normalized query
    ≤60  normalized query contains a large enough transliteration
    ≤50  edit-distance similarity above threshold
"""

import math
from dataclasses import dataclass
from typing import Iterable, NamedTuple

from ..normalizer import is_arabic_script, normalize_darija
from ..schema import Entry
from .distance import similarity

WORD_LIMIT = 20
PHRASE_LIMIT = 15


@dataclass(frozen=True)
class ScoringPolicy:
    """Score constants for each match tier.

    The values are tuned against the live dictionary and kept as-is.
    """

    exact: int = 100
    prefix: int = 90
    contains: int = 80
    normalized_exact: int = 75
    normalized_contains: int = 65
    contains_floor: float = 0.5
    normalized_contained: int = 60
    coverage_threshold: float = 0.4
    fuzzy: int = 50
    similarity_threshold: float = 0.6


DEFAULT_POLICY = ScoringPolicy()


class Match(NamedTuple):
    """An entry with its score; 0 means excluded."""

    entry: Entry
    score: int


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def raw_score(query: str, entry: Entry, policy: ScoringPolicy = DEFAULT_POLICY) -> int:
    """Score an entry on raw headword matches.

    Args:
        query: Lowercased, trimmed query.
        entry: Entry to score.
        policy: Score constants.

    Returns:
        Best raw score across the four headwords, 0 if none matched.
    """
    score = 0
    for headword in entry.headwords:
        field = headword.lower()
        if field == query:
            return policy.exact
        if field.startswith(query):
            score = max(score, policy.prefix)
        elif query in field:
            score = max(score, policy.contains)
    return score


def fuzzy_score(
    normalized_query: str,
    transliteration: str,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> int:
    """Score a transliteration against an already-normalized query.

    Args:
        normalized_query: Output of normalize_darija for the query.
        transliteration: Raw transliteration of the entry.
        policy: Score constants.

    Returns:
        Fuzzy score, 0 if the entry should be excluded.
    """
    nq = normalized_query
    nd = normalize_darija(transliteration)
    if not nq or not nd:
        return 0

    if nd == nq:
        return policy.normalized_exact

    if nq in nd:
        # Short query matching deep inside a much longer word
        ratio = max(len(nq) / len(nd), policy.contains_floor)
        return round_half_up(policy.normalized_contains * ratio)

    if nd in nq:
        # Short word embedded in a longer query, e.g. "ra" in "shokran"
        coverage = len(nd) / len(nq)
        if coverage > policy.coverage_threshold:
            return round_half_up(policy.normalized_contained * coverage)
        return 0

    sim = similarity(nq, nd)
    if sim > policy.similarity_threshold:
        return round_half_up(sim * policy.fuzzy)
    return 0


def score_entry(
    query: str,
    entry: Entry,
    fuzzy: bool = True,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> int:
    """Score one entry against a raw query.

    Args:
        query: Raw user query.
        entry: Entry to score.
        fuzzy: Fall back to normalized comparison when no raw match.
        policy: Score constants.

    Returns:
        Non-negative score.
    """
    q = query.strip().lower()
    if not q:
        return 0
    score = raw_score(q, entry, policy)
    if score == 0 and fuzzy and not is_arabic_script(q):
        score = fuzzy_score(normalize_darija(q), entry.darija, policy)
    return score


def search_matches(
    query: str,
    entries: Iterable[Entry],
    limit: int = WORD_LIMIT,
    fuzzy: bool = True,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> list[Match]:
    """Score, filter and rank entries for a query.

    Args:
        query: Raw user query.
        entries: Collection to search, in its natural order.
        limit: Maximum number of matches to return.
        fuzzy: Enable the normalized fallback tiers.
        policy: Score constants.

    Returns:
        Matches with score > 0, best first. Ties keep collection order.
    """
    q = query.strip().lower()
    if not q:
        return []

    use_fuzzy = fuzzy and not is_arabic_script(q)
    nq = normalize_darija(q) if use_fuzzy else ""

    matches = []
    for entry in entries:
        score = raw_score(q, entry, policy)
        if score == 0 and use_fuzzy:
            score = fuzzy_score(nq, entry.darija, policy)
        if score > 0:
            matches.append(Match(entry, score))

    matches.sort(key=lambda m: m.score, reverse=True)
    return matches[:limit]


def search(
    query: str,
    entries: Iterable[Entry],
    limit: int = WORD_LIMIT,
    fuzzy: bool = True,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> list[Entry]:
    """Return ranked entries for a query. See search_matches."""
    return [m.entry for m in search_matches(query, entries, limit, fuzzy, policy)]


def search_words(query: str, words: Iterable[Entry], limit: int = WORD_LIMIT) -> list[Entry]:
    """Fuzzy search over single-word entries."""
    return search(query, words, limit=limit)


def search_phrases(query: str, phrases: Iterable[Entry], limit: int = PHRASE_LIMIT) -> list[Entry]:
    """Raw-match-only search over phrase entries."""
    return search(query, phrases, limit=limit, fuzzy=False)

"""Search module for darija.

Ranks dictionary entries against free-text queries in any of the four
languages, tolerating spelling variation in Darija transliterations.

Usage:
    from darija.search import search_words, search_phrases

    words = search_words("shokran", lexicon.words)
    phrases = search_phrases("merci", lexicon.phrases)
"""

from .distance import levenshtein, similarity
from .scoring import (
    DEFAULT_POLICY,
    PHRASE_LIMIT,
    WORD_LIMIT,
    Match,
    ScoringPolicy,
    score_entry,
    search,
    search_matches,
    search_phrases,
    search_words,
)

__all__ = [
    "DEFAULT_POLICY",
    "PHRASE_LIMIT",
    "WORD_LIMIT",
    "Match",
    "ScoringPolicy",
    "levenshtein",
    "similarity",
    "score_entry",
    "search",
    "search_matches",
    "search_phrases",
    "search_words",
]

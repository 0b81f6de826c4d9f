"""Tests for the search module."""

import pytest

from conftest import make_entry
from darija.schema import EntryKind
from darija.search import (
    DEFAULT_POLICY,
    PHRASE_LIMIT,
    WORD_LIMIT,
    ScoringPolicy,
    levenshtein,
    score_entry,
    search,
    search_matches,
    search_phrases,
    search_words,
    similarity,
)
from darija.search.scoring import round_half_up


class TestLevenshtein:
    """Tests for levenshtein and similarity."""

    def test_known_distances(self):
        """Test classic distance examples."""
        assert levenshtein("kitten", "sitting") == 3
        assert levenshtein("flaw", "lawn") == 2
        assert levenshtein("salam", "salem") == 1

    def test_identical_and_empty(self):
        """Test identity and empty strings."""
        assert levenshtein("shukran", "shukran") == 0
        assert levenshtein("", "abc") == 3
        assert levenshtein("abc", "") == 3
        assert levenshtein("", "") == 0

    def test_symmetric(self):
        """Test distance is symmetric."""
        assert levenshtein("khubz", "kubz") == levenshtein("kubz", "khubz")

    def test_similarity(self):
        """Test similarity ratio."""
        assert similarity("salam", "salem") == pytest.approx(0.8)
        assert similarity("", "") == 0.0
        assert similarity("abc", "xyz") == 0.0


class TestScoreEntry:
    """Tests for score tiers on a single entry."""

    @pytest.fixture
    def shukran(self):
        return make_entry("w-shukran", "shukran", "thank you", "merci", "شكرا")

    def test_exact_on_each_field(self, shukran):
        """Test exact match on any headword scores 100."""
        assert score_entry("shukran", shukran) == 100
        assert score_entry("Thank You", shukran) == 100
        assert score_entry("MERCI", shukran) == 100
        assert score_entry("شكرا", shukran) == 100

    def test_query_is_trimmed(self, shukran):
        """Test surrounding whitespace is ignored."""
        assert score_entry("  shukran  ", shukran) == 100

    def test_prefix(self, shukran):
        """Test prefix match scores 90."""
        assert score_entry("shuk", shukran) == 90
        assert score_entry("thank", shukran) == 90

    def test_substring(self, shukran):
        """Test substring match scores 80."""
        assert score_entry("ukra", shukran) == 80
        assert score_entry("you", shukran) == 80

    def test_normalized_exact(self, shukran):
        """Test spelling variant scores 75 via normalization."""
        assert score_entry("shokran", shukran) == 75
        assert score_entry("chukran", shukran) == 75
        assert score_entry("shoukran", shukran) == 75

    def test_normalized_contains(self):
        """Test normalized query inside a longer transliteration."""
        khobz = make_entry("w-khobz", "khobz", "bread", "pain")
        # "khub" in "khubz": 65 * 4/5
        assert score_entry("khub", khobz) == 52

    def test_normalized_contains_floor(self):
        """Test the length ratio never drops below the floor."""
        entry = make_entry("w-long", "choukrania", "gratitude")
        # "shu" in "shukrania": 65 * max(3/9, 0.5) = 32.5, rounded half up
        assert score_entry("shu", entry) == 33

    def test_normalized_contained(self):
        """Test short transliteration inside a longer query."""
        lma = make_entry("w-lma", "lma", "water", "eau")
        # "lma" covers 3/5 of "lmazz": 60 * 0.6
        assert score_entry("lmazz", lma) == 36

    def test_contained_below_coverage(self):
        """Test a tiny transliteration inside a long query is excluded."""
        ra = make_entry("w-ra", "ra", "saw")
        assert score_entry("shokran", ra) == 0

    def test_edit_distance(self):
        """Test near misses score by similarity."""
        salam = make_entry("w-salam", "salam", "hello", "bonjour")
        # similarity 0.8 * 50
        assert score_entry("salem", salam) == 40

    def test_edit_distance_below_threshold(self):
        """Test distant strings are excluded."""
        salam = make_entry("w-salam", "salam", "hello", "bonjour")
        assert score_entry("xyzzy", salam) == 0

    def test_no_fuzzy(self, shukran):
        """Test the raw-only policy skips normalization."""
        assert score_entry("shokran", shukran, fuzzy=False) == 0
        assert score_entry("shuk", shukran, fuzzy=False) == 90

    def test_arabic_query_skips_normalization(self):
        """Test Arabic queries only match raw."""
        entry = make_entry("w-x", "x", "thing", arabic="شي")
        assert score_entry("شكرا", entry) == 0
        assert score_entry("ش", entry) == 90

    def test_empty_query(self, shukran):
        """Test empty queries score 0."""
        assert score_entry("", shukran) == 0
        assert score_entry("   ", shukran) == 0

    def test_custom_policy(self, shukran):
        """Test scores come from the policy."""
        policy = ScoringPolicy(exact=10, normalized_exact=7)
        assert score_entry("shukran", shukran, policy=policy) == 10
        assert score_entry("shokran", shukran, policy=policy) == 7


class TestRoundHalfUp:
    """Tests for round_half_up."""

    def test_halves_round_up(self):
        """Test .5 always rounds up, unlike round()."""
        assert round_half_up(32.5) == 33
        assert round_half_up(42.5) == 43
        assert round_half_up(42.4) == 42


class TestSearch:
    """Tests for ranked search."""

    def test_empty_query(self, sample_words):
        """Test blank queries return nothing."""
        assert search_words("", sample_words) == []
        assert search_words("   ", sample_words) == []

    def test_ranking(self):
        """Test exact beats prefix beats substring."""
        entries = [
            make_entry("c", "wasalam", "x"),
            make_entry("a", "salamat", "y"),
            make_entry("b", "salam", "z"),
        ]
        assert [e.id for e in search("salam", entries)] == ["b", "a", "c"]

    def test_ties_keep_collection_order(self):
        """Test equal scores keep the original order."""
        entries = [
            make_entry("1", "bslama", "goodbye"),
            make_entry("2", "bsaha", "enjoy"),
            make_entry("3", "bstila", "pie"),
        ]
        assert [e.id for e in search("bs", entries)] == ["1", "2", "3"]

    def test_excludes_zero_scores(self, sample_words):
        """Test unrelated entries are dropped."""
        results = search_words("shokran", sample_words)
        assert [e.id for e in results] == ["w-shukran"]

    def test_matches_carry_scores(self, sample_words):
        """Test search_matches exposes scores."""
        matches = search_matches("tea", sample_words)
        assert matches[0].entry.id == "w-atay"
        assert matches[0].score == 100

    def test_exact_headword_always_found(self, sample_words):
        """Test every headword finds its own entry with the top score."""
        for entry in sample_words:
            for headword in entry.headwords:
                matches = search_matches(headword, sample_words)
                top = [m for m in matches if m.entry.id == entry.id]
                assert top and top[0].score == DEFAULT_POLICY.exact
                assert all(m.score <= top[0].score for m in matches)

    def test_word_limit(self):
        """Test word results are capped."""
        entries = [make_entry(f"w{i}", f"ba{i}", "x") for i in range(30)]
        assert len(search_words("ba", entries)) == WORD_LIMIT == 20

    def test_phrase_limit(self):
        """Test phrase results are capped."""
        entries = [
            make_entry(f"p{i}", f"ba {i}", "x", kind=EntryKind.PHRASE)
            for i in range(30)
        ]
        assert len(search_phrases("ba", entries)) == PHRASE_LIMIT == 15

    def test_phrases_raw_only(self, sample_phrases):
        """Test phrase search does not use fuzzy matching."""
        assert search_phrases("bshal hada", sample_phrases) == []
        assert [p.id for p in search_phrases("hada", sample_phrases)] == ["p-bshhal"]

    def test_phrase_search_finds_gloss(self, sample_phrases):
        """Test phrase search covers the translations."""
        results = search_phrases("honey", sample_phrases)
        assert [p.id for p in results] == ["p-honey"]

    def test_pure(self, sample_words):
        """Test repeated calls give identical results and leave input alone."""
        before = tuple(sample_words)
        first = search_words("sala", sample_words)
        second = search_words("sala", sample_words)
        assert first == second
        assert tuple(sample_words) == before

    def test_accepts_generators(self, sample_words):
        """Test any iterable of entries works."""
        results = search_words("bread", (w for w in sample_words))
        assert [e.id for e in results] == ["w-khobz"]

"""Tests for progress stores."""

import json
import tempfile
from pathlib import Path

from darija.practice import JsonProgressStore, MemoryProgressStore, ReviewCard


def sample_progress() -> dict:
    return {
        "w-salam": ReviewCard("w-salam", level=2, next_review=1000.0, correct=2),
        "w-atay": ReviewCard("w-atay", level=0, next_review=50.0, incorrect=1),
    }


class TestJsonProgressStore:
    """Tests for JsonProgressStore."""

    def test_roundtrip(self):
        """Test cards survive a write and reload."""
        with tempfile.TemporaryDirectory() as tmpdir:
            store = JsonProgressStore(Path(tmpdir) / "nested" / "progress.json")
            store.replace_all(sample_progress())
            assert store.load_all() == sample_progress()

    def test_file_is_keyed_by_id(self):
        """Test the on-disk layout."""
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir) / "progress.json"
            JsonProgressStore(filepath).replace_all(sample_progress())
            data = json.loads(filepath.read_text(encoding="utf-8"))
            assert list(data) == ["w-atay", "w-salam"]
            assert data["w-salam"]["level"] == 2

    def test_replace_drops_old_cards(self):
        """Test replace_all replaces rather than merges."""
        with tempfile.TemporaryDirectory() as tmpdir:
            store = JsonProgressStore(Path(tmpdir) / "progress.json")
            store.replace_all(sample_progress())
            store.replace_all({"w-1": ReviewCard("w-1")})
            assert list(store.load_all()) == ["w-1"]

    def test_no_temp_files_left(self):
        """Test atomic writes clean up after themselves."""
        with tempfile.TemporaryDirectory() as tmpdir:
            store = JsonProgressStore(Path(tmpdir) / "progress.json")
            store.replace_all(sample_progress())
            store.replace_all(sample_progress())
            assert [p.name for p in Path(tmpdir).iterdir()] == ["progress.json"]

    def test_missing_file(self):
        """Test a missing file loads as empty."""
        with tempfile.TemporaryDirectory() as tmpdir:
            store = JsonProgressStore(Path(tmpdir) / "progress.json")
            assert store.load_all() == {}

    def test_corrupt_file(self):
        """Test unparseable or malformed files load as empty."""
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir) / "progress.json"
            for content in ("{not json", "[1, 2, 3]", '{"w-1": {"level": 1}}'):
                filepath.write_text(content, encoding="utf-8")
                assert JsonProgressStore(filepath).load_all() == {}

    def test_browser_layout(self):
        """Test camelCase progress exported from the web app loads."""
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = Path(tmpdir) / "progress.json"
            filepath.write_text(json.dumps({
                "w-salam": {
                    "wordId": "w-salam",
                    "level": 3,
                    "nextReview": 1234.0,
                    "correct": 3,
                    "incorrect": 0,
                },
            }), encoding="utf-8")
            cards = JsonProgressStore(filepath).load_all()
            assert cards["w-salam"] == ReviewCard("w-salam", 3, 1234.0, 3, 0)


class TestMemoryProgressStore:
    """Tests for MemoryProgressStore."""

    def test_copies(self):
        """Test callers cannot change stored state by mutating maps."""
        initial = sample_progress()
        store = MemoryProgressStore(initial)
        initial.clear()

        loaded = store.load_all()
        loaded.pop("w-salam")
        assert set(store.load_all()) == {"w-salam", "w-atay"}

    def test_counts_writes(self):
        """Test writes are counted."""
        store = MemoryProgressStore()
        assert store.load_all() == {}
        store.replace_all(sample_progress())
        store.replace_all({})
        assert store.writes == 2
        assert store.load_all() == {}

"""Configuration loader for darija.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
from pathlib import Path
from typing import Any

from .practice.scheduler import DEFAULT_INTERVALS, IntervalTable

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "words_path": "data/words.json",
    "phrases_path": "data/phrases.json",
    "progress_path": ".darija/progress.json",
    "session_cap": 20,
    "word_limit": 20,
    "phrase_limit": 15,
    "intervals": list(DEFAULT_INTERVALS),
    "mode": "arabic-to-english",
}

_config: dict[str, Any] | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/darija -> root
        Path.cwd() / "config.json",
        Path.cwd().parent / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def project_root() -> Path:
    """Directory relative paths in config.json resolve against."""
    config_path = _find_config()
    if config_path:
        return config_path.parent
    return Path.cwd()


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path) as f:
                _config = json.load(f)
                return _config
        except (json.JSONDecodeError, OSError):
            pass

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    return _config


def reset() -> None:
    """Forget the cached configuration."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    return cfg.get("defaults", {}).get(key, fallback)


def _path(key: str) -> Path:
    path = Path(get_default(key, FALLBACK_DEFAULTS[key]))
    return path if path.is_absolute() else project_root() / path


# Convenience accessors
def default_words_path() -> Path:
    return _path("words_path")


def default_phrases_path() -> Path:
    return _path("phrases_path")


def default_progress_path() -> Path:
    return _path("progress_path")


def default_session_cap() -> int:
    return int(get_default("session_cap", FALLBACK_DEFAULTS["session_cap"]))


def default_word_limit() -> int:
    return int(get_default("word_limit", FALLBACK_DEFAULTS["word_limit"]))


def default_phrase_limit() -> int:
    return int(get_default("phrase_limit", FALLBACK_DEFAULTS["phrase_limit"]))


def default_intervals() -> IntervalTable:
    return IntervalTable.from_list(
        get_default("intervals", FALLBACK_DEFAULTS["intervals"])
    )


def default_mode() -> str:
    return get_default("mode", FALLBACK_DEFAULTS["mode"])

"""Data models for load options and load summaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(slots=True)
class LoadOptions:
    """Filtering options applied while loading a word list."""

    target_phrase: str | None = None
    min_word_size: int = 0

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> LoadOptions:
        """Build options from a config mapping, ignoring unknown keys."""
        phrase = config.get("target_phrase")
        if isinstance(phrase, str) and not phrase.strip():
            phrase = None
        return cls(
            target_phrase=phrase,
            min_word_size=int(config.get("min_word_size", 0) or 0),
        )


@dataclass(slots=True)
class LoadResult:
    """Summary returned after loading a word list into the index."""

    source: str
    total_lines: int
    accepted_words: int
    skipped_lines: int
    unique_signatures: int

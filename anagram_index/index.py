"""In-memory anagram index keyed by sorted-character signatures."""

from __future__ import annotations

import logging
import os
import threading
from typing import Any, Iterable, Mapping

from anagram_index.errors import InvalidArgumentError, IndexNotLoadedError
from anagram_index.models import LoadOptions, LoadResult
from anagram_index.utils import is_subset_of, letter_pool, load_config, normalize_word, read_wordlist, signature

logger = logging.getLogger(__name__)

WordSource = str | os.PathLike[str] | Iterable[str]


class AnagramIndex:
    """Group words by signature and answer single-word anagram lookups."""

    def __init__(self) -> None:
        self.index: dict[str, set[str]] = {}
        self.wordlist_path: str = ""
        self._loaded = False
        self._lock = threading.RLock()

    def load(self, source: WordSource) -> LoadResult:
        """Load every word from source."""
        return self.load_filtered(source, None, 0)

    def load_with_options(self, source: WordSource, options: LoadOptions) -> LoadResult:
        """Load words from source using the filter settings in options."""
        return self.load_filtered(source, options.target_phrase, options.min_word_size)

    def load_filtered(
        self,
        source: WordSource,
        target_phrase: str | None = None,
        min_word_size: int = 0,
    ) -> LoadResult:
        """
        Load words from a path or an iterable of lines.

        Each line is trimmed and lowercased before signing. When target_phrase
        is non-empty, only words of at least min_word_size letters whose
        letters fit inside the phrase (whitespace ignored) are kept. Without a
        target phrase, min_word_size is ignored.

        Read errors propagate. Words inserted before the error are kept and
        the loaded flag is left as it was.
        """
        if source is None:
            raise InvalidArgumentError("word list source is missing")
        if isinstance(source, (str, os.PathLike)):
            if not os.fspath(source):
                raise InvalidArgumentError("word list path is empty")
            label = os.fspath(source)
            lines: Iterable[str] = read_wordlist(source)
        else:
            label = "<iterable>"
            lines = source

        pool = letter_pool(target_phrase) if target_phrase else None
        if pool is None and min_word_size:
            logger.debug("min_word_size=%d has no effect without a target phrase", min_word_size)

        total_lines = 0
        accepted_words = 0
        with self._lock:
            try:
                for line in lines:
                    total_lines += 1
                    word = normalize_word(line)
                    sig = signature(word)
                    if not sig:
                        continue
                    if pool is not None and (len(sig) < min_word_size or not is_subset_of(sig, pool)):
                        continue
                    self.index.setdefault(sig, set()).add(word)
                    accepted_words += 1
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Failed reading word list %s after %d lines: %s", label, total_lines, exc)
                raise

            self._loaded = True
            if label != "<iterable>":
                self.wordlist_path = label
            unique_signatures = len(self.index)

        logger.info(
            "Loaded %d of %d lines from %s (%d signatures)",
            accepted_words,
            total_lines,
            label,
            unique_signatures,
        )
        return LoadResult(
            source=label,
            total_lines=total_lines,
            accepted_words=accepted_words,
            skipped_lines=total_lines - accepted_words,
            unique_signatures=unique_signatures,
        )

    def add_word(self, word: str) -> bool:
        """
        Add a single word exactly as given.

        Returns False for an empty word. Does not mark the index as loaded.
        """
        if not word:
            return False
        with self._lock:
            self.index.setdefault(signature(word), set()).add(word)
        return True

    def find_anagrams_of(self, word: str) -> list[str]:
        """Return the sorted words sharing word's signature, or [] if none."""
        with self._lock:
            if not self._loaded:
                raise IndexNotLoadedError("dictionary not loaded")
            if not word:
                raise InvalidArgumentError("word is missing or empty")
            return sorted(self.index.get(signature(word), ()))

    def has_signature_of(self, word: str) -> bool:
        """True if any word with the same signature as word is stored."""
        if not word:
            return False
        with self._lock:
            return signature(word) in self.index

    def keys(self) -> list[str]:
        """Snapshot of every stored signature in sorted order."""
        with self._lock:
            return sorted(self.index)

    def is_loaded(self) -> bool:
        with self._lock:
            return self._loaded

    def __len__(self) -> int:
        with self._lock:
            return len(self.index)

    def __repr__(self) -> str:
        with self._lock:
            words = sum(len(group) for group in self.index.values())
            return f"AnagramIndex(loaded={self._loaded}, signatures={len(self.index)}, words={words})"


def build_index_from_config(config: Mapping[str, Any] | None = None) -> tuple[AnagramIndex, LoadResult]:
    """Create an index from the saved config, or from the mapping given."""
    if config is None:
        config = load_config()
    wordlist_path = config.get("wordlist_path")
    if not wordlist_path:
        raise InvalidArgumentError("config has no wordlist_path")

    index = AnagramIndex()
    result = index.load_with_options(wordlist_path, LoadOptions.from_config(config))
    return index, result

"""Exception types raised by the anagram index."""

from __future__ import annotations


class AnagramIndexError(Exception):
    """Base class for anagram index errors."""


class InvalidArgumentError(AnagramIndexError, ValueError):
    """Raised for an absent or empty source, word, or config value."""


class IndexNotLoadedError(AnagramIndexError, RuntimeError):
    """Raised when the index is queried before a word list has been loaded."""

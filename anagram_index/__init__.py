"""In-memory anagram index grouping words by sorted-character signature."""

from anagram_index.errors import AnagramIndexError, IndexNotLoadedError, InvalidArgumentError
from anagram_index.index import AnagramIndex, build_index_from_config
from anagram_index.models import LoadOptions, LoadResult

__all__ = [
    "AnagramIndex",
    "AnagramIndexError",
    "IndexNotLoadedError",
    "InvalidArgumentError",
    "LoadOptions",
    "LoadResult",
    "build_index_from_config",
]

"""Signature helpers plus app directory, logging, config and word-list reading."""

from __future__ import annotations

import functools
import json
import logging
import os
import re
from collections import Counter
from pathlib import Path
from typing import Any, Iterator

from anagram_index.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

APP_DIR_NAME = ".anagram_index"
CONFIG_FILENAME = "config.json"
LOG_FILENAME = "app.log"

WHITESPACE_PATTERN = re.compile(r"\s+")


@functools.cache
def app_dir() -> Path:
    """
    Pick a writable app directory on first use.

    Preferred location is user home, with local workspace fallback when blocked.
    """
    preferred = Path.home() / APP_DIR_NAME
    try:
        preferred.mkdir(parents=True, exist_ok=True)
        return preferred
    except OSError:
        fallback = Path(APP_DIR_NAME)
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def config_path() -> Path:
    return app_dir() / CONFIG_FILENAME


def log_path() -> Path:
    return app_dir() / LOG_FILENAME


def ensure_app_dirs() -> None:
    """Create the app directory if it does not already exist."""
    app_dir().mkdir(parents=True, exist_ok=True)


def setup_logging() -> None:
    """Configure file logging once per app run."""
    ensure_app_dirs()
    logging.basicConfig(
        filename=str(log_path()),
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_config() -> dict[str, Any]:
    """Load config from the user home config file."""
    ensure_app_dirs()
    path = config_path()
    if not path.exists():
        return {}
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        logger.exception("Failed to load config from %s", path)
        return {}


def save_config(config: dict[str, Any]) -> None:
    """Persist config to disk."""
    ensure_app_dirs()
    path = config_path()
    try:
        path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except Exception:
        logger.exception("Failed to save config to %s", path)


def normalize_word(line: str) -> str:
    """Trim surrounding whitespace and lowercase a word-list line."""
    return line.strip().lower()


def letter_pool(phrase: str) -> str:
    """Letters of a target phrase with all whitespace removed, lowercased."""
    return WHITESPACE_PATTERN.sub("", phrase).lower()


def signature(word: str) -> str:
    """Canonical sorted-signature for an anagram token."""
    if word is None:
        raise InvalidArgumentError("cannot compute the signature of None")
    return "".join(sorted(word))


def is_subset_of(candidate: str, reference: str) -> bool:
    """
    Return True if every character of candidate is available in reference.

    Characters are counted, so "aab" fits in "aabb" but not in "ab".
    """
    return not Counter(candidate) - Counter(reference)


def read_wordlist(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield lines of a UTF-8 word list, one word per line."""
    with Path(path).open("r", encoding="utf-8") as handle:
        yield from handle

import json
from pathlib import Path

import pytest

from anagram_index import utils
from anagram_index.errors import InvalidArgumentError
from anagram_index.utils import is_subset_of, letter_pool, load_config, normalize_word, read_wordlist, save_config, signature


def test_signature_matches_for_anagrams_only() -> None:
    assert signature("listen") == signature("silent") == "eilnst"
    assert signature("listen") != signature("listens")
    assert signature("aab") != signature("abb")


def test_signature_of_empty_word_is_empty() -> None:
    assert signature("") == ""


def test_signature_rejects_none() -> None:
    with pytest.raises(InvalidArgumentError):
        signature(None)


def test_is_subset_of_counts_repeated_letters() -> None:
    assert is_subset_of("aab", "aabb")
    assert not is_subset_of("aab", "ab")
    assert is_subset_of("", "ab")
    assert not is_subset_of("z", "")


def test_letter_pool_strips_whitespace_and_lowercases() -> None:
    assert letter_pool(" Dear  Li\tsten\n") == "dearlisten"


def test_normalize_word_trims_and_lowercases() -> None:
    assert normalize_word("  HeLLo\n") == "hello"
    assert normalize_word("   ") == ""


def test_read_wordlist_yields_utf8_lines(tmp_path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("café\nface\n", encoding="utf-8")
    assert [line.strip() for line in read_wordlist(path)] == ["café", "face"]


def test_config_round_trip(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(utils, "app_dir", lambda: tmp_path)
    assert load_config() == {}

    save_config({"wordlist_path": "words.txt", "min_word_size": 3})
    assert json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))["min_word_size"] == 3
    assert load_config() == {"wordlist_path": "words.txt", "min_word_size": 3}


def test_load_config_returns_empty_for_corrupt_file(tmp_path, monkeypatch) -> None:
    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    monkeypatch.setattr(utils, "app_dir", lambda: tmp_path)
    assert load_config() == {}


def test_setup_logging_writes_to_app_log(tmp_path, monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(utils, "app_dir", lambda: tmp_path)
    monkeypatch.setattr(utils.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    utils.setup_logging()
    assert calls[0]["filename"] == str(tmp_path / "app.log")
    assert calls[0]["level"] == utils.logging.INFO


def test_app_dir_falls_back_to_working_directory(tmp_path, monkeypatch) -> None:
    home_file = tmp_path / "home"
    home_file.write_text("", encoding="utf-8")
    monkeypatch.setattr(utils.Path, "home", classmethod(lambda cls: home_file))
    monkeypatch.chdir(tmp_path)
    utils.app_dir.cache_clear()
    try:
        assert utils.app_dir() == Path(".anagram_index")
        assert (tmp_path / ".anagram_index").is_dir()
    finally:
        utils.app_dir.cache_clear()


def _record_opens(monkeypatch) -> list:
    handles = []
    real_open = Path.open

    def recording_open(self, *args, **kwargs):
        handle = real_open(self, *args, **kwargs)
        handles.append(handle)
        return handle

    monkeypatch.setattr(Path, "open", recording_open)
    return handles


def test_read_wordlist_closes_handle_when_exhausted(tmp_path, monkeypatch) -> None:
    path = tmp_path / "words.txt"
    path.write_text("listen\nsilent\n", encoding="utf-8")
    handles = _record_opens(monkeypatch)

    assert len(list(read_wordlist(path))) == 2
    assert handles[0].closed


def test_read_wordlist_closes_handle_when_abandoned(tmp_path, monkeypatch) -> None:
    path = tmp_path / "words.txt"
    path.write_text("listen\nsilent\n", encoding="utf-8")
    handles = _record_opens(monkeypatch)

    lines = read_wordlist(path)
    assert next(lines) == "listen\n"
    lines.close()
    assert handles[0].closed


def test_read_wordlist_closes_handle_on_decode_error(tmp_path, monkeypatch) -> None:
    path = tmp_path / "words.txt"
    path.write_bytes(b"listen\nsilent\n\xff\xfe\n")
    handles = _record_opens(monkeypatch)

    with pytest.raises(UnicodeDecodeError):
        list(read_wordlist(path))
    assert handles[0].closed

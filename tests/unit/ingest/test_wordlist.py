"""Unit tests for the word list reader."""

from io import StringIO
from pathlib import Path

import pytest
from unjumble.ingest.wordlist import can_open, iter_words


def test_reads_lines_in_order(dictionary_file: Path):
    assert list(iter_words(dictionary_file)) == ["tin", "silent", "lines", "enlist", "xyz"]


def test_strips_only_line_terminator(tmp_path: Path):
    path = tmp_path / "odd.txt"
    path.write_bytes(b"  padded \r\nMixedCase\n\nit's\nlast")
    assert list(iter_words(path)) == ["  padded ", "MixedCase", "", "it's", "last"]


def test_lone_carriage_return_stays_in_line(tmp_path: Path):
    path = tmp_path / "cr.txt"
    path.write_bytes(b"ti\rn\nnet\r\nlast\r")
    assert list(iter_words(path)) == ["ti\rn", "net", "last\r"]


def test_carriage_return_word_rejected(tmp_path: Path):
    from unjumble.match.engine import MatchEngine

    path = tmp_path / "cr.txt"
    path.write_bytes(b"ti\rn\nnet\n")
    assert MatchEngine("listen").scan(iter_words(path)) == ["net"]


def test_empty_file_yields_nothing(empty_dictionary: Path):
    assert list(iter_words(empty_dictionary)) == []


def test_injected_opener():
    my_open = lambda filename, mode, encoding, newline: StringIO("arch\nfuzz\nonline")
    assert list(iter_words("mock_file", open=my_open)) == ["arch", "fuzz", "online"]


def test_is_lazy(tmp_path: Path):
    """Nothing is opened until iteration starts."""
    words = iter_words(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        next(words)


def test_undecodable_line_raises(tmp_path: Path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"tin\ncaf\xe9\n")
    with pytest.raises(UnicodeDecodeError):
        list(iter_words(path, encoding="utf-8"))


def test_custom_encoding(tmp_path: Path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")
    assert list(iter_words(path, encoding="latin-1")) == ["café"]


class TestCanOpen:
    def test_existing_file(self, dictionary_file: Path):
        assert can_open(dictionary_file)

    def test_missing_file(self, tmp_path: Path):
        assert not can_open(tmp_path / "nope.txt")

    def test_directory(self, tmp_path: Path):
        assert not can_open(tmp_path)

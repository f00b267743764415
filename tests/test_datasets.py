from pathlib import Path

import pytest
from woordle.datasets import read_words, write_words


def test_read_words_cleans_and_dedupes(tmp_path: Path):
    p = tmp_path / "words_5.txt"
    p.write_text("Crane\n\n  raise \ncrane\nit's\nRAISE\n", encoding="utf-8")
    # malformed entries are kept; casing repeats collapse onto the first
    assert read_words(p) == ["crane", "raise", "it's"]


def test_read_words_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "nope.txt")


def test_write_words_creates_dirs(tmp_path: Path):
    out = tmp_path / "nested" / "picked.txt"
    assert write_words(["crane", "stare"], out) == str(out)
    assert out.read_text(encoding="utf-8") == "crane\nstare\n"
    assert read_words(out) == ["crane", "stare"]

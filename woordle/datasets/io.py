from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_words(p: Path | str) -> List[str]:
    """
    Load a one-word-per-line word list.
    Entries are stripped and lowercased; blanks are skipped and repeats
    collapse onto their first occurrence. Shape is NOT checked, so a list
    may carry malformed entries on purpose.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8") as f:
        words = (raw.strip().lower() for raw in f)
        return list(dict.fromkeys(w for w in words if w))


def write_words(words: Iterable[str], p: Path | str) -> str:
    """Save words one per line (parent dirs created); returns the path written."""
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        for w in words:
            f.write(f"{w}\n")
    return str(p)

"""
Offline dictionary backed by a word list.

Useful for tests, demos and running without an API key. Words are kept as
given (after strip/lowercase) so a list can deliberately contain malformed
entries, the same way a noisy remote source might.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from woordle.datasets import read_words


class WordListDictionary:
    def __init__(self, words: Iterable[str], *, seed: Optional[int] = None):
        cleaned = [w.strip().lower() for w in words if w and w.strip()]
        self.words = set(cleaned)
        self.by_length: Dict[int, List[str]] = {}
        for w in dict.fromkeys(cleaned):
            self.by_length.setdefault(len(w), []).append(w)
        self.rng = random.Random(seed)

    @classmethod
    def from_file(cls, path: Path | str, *, seed: Optional[int] = None) -> "WordListDictionary":
        return cls(read_words(path), seed=seed)

    def fetch_random_word(self, length: int, *, timeout: Optional[float] = None) -> Optional[str]:
        pool = self.by_length.get(length)
        if not pool:
            return None
        return self.rng.choice(pool)

    def word_exists(self, word: str, *, timeout: Optional[float] = None) -> bool:
        return word.strip().lower() in self.words

"""
Word normalization and shape checks.

Conventions:
  - A normalized word is trimmed and lowercased with an ASCII-only mapping
    (A-Z -> a-z). Other characters pass through untouched so the alphabetic
    check can reject them, instead of being folded by Unicode casing rules.
  - Word lengths are bounded to [MIN_WORD_LENGTH, MAX_WORD_LENGTH], the range
    the dictionary source can serve.
"""

from __future__ import annotations

import re
import string

from woordle.errors import InvalidArgumentError, InvalidInputError

# A normalized word: lowercase a-z only, length 1..15
NormalizedWord = str

MIN_WORD_LENGTH = 1
MAX_WORD_LENGTH = 15

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ALPHABETIC_RE = re.compile(r"[a-zA-Z]+")


def normalize(raw) -> NormalizedWord:
    """
    Trim surrounding whitespace and lowercase (ASCII only).

    Raises:
      InvalidInputError if `raw` is None, not a string, or blank.

    Examples:
      normalize("  Crane ") -> "crane"
      normalize("AP3LE")    -> "ap3le"   (shape is checked separately)
    """
    if raw is None:
        raise InvalidInputError("Word to normalize cannot be null.")
    if not isinstance(raw, str):
        raise InvalidInputError(f"Word to normalize must be a string, got {type(raw).__name__}.")

    w = raw.strip()
    if not w:
        raise InvalidInputError("Word to normalize cannot be empty.", word=raw)
    return w.translate(_ASCII_LOWER)


def is_alphabetic(word: str) -> bool:
    """True iff every character of `word` is an ASCII letter."""
    if not word:
        raise InvalidInputError("Word passed to alphabetic validation cannot be null or empty.",
                                word=word)
    return _ALPHABETIC_RE.fullmatch(word) is not None


def check_length(length) -> int:
    """Guardrail for requested word lengths; returns `length` unchanged."""
    # bool is an int subclass; reject it explicitly
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgumentError(f"Length must be an integer, got {length!r}.")
    if not MIN_WORD_LENGTH <= length <= MAX_WORD_LENGTH:
        raise InvalidArgumentError(
            f"Length must be between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH}; got {length}.",
            length=length,
        )
    return length

"""
Error taxonomy for woordle.

Every error raised by the engine or the word pipeline derives from
`WoordleError` and carries:
  - kind   : an `ErrorKind`, so callers can branch without isinstance checks
  - word   : the offending word (if any)
  - length : the offending/requested length (if any)

`GatewayError` is different: it is what dictionary adapters raise for
transport problems. The core never lets it escape; it is always re-raised
as `DictionaryUnavailableError` with the original chained as __cause__.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    UNRECOGNIZED_WORD = "unrecognized_word"
    INVALID_ARGUMENT = "invalid_argument"
    LENGTH_MISMATCH = "length_mismatch"
    NO_WORD_AVAILABLE = "no_word_available"
    DICTIONARY_UNAVAILABLE = "dictionary_unavailable"


class WoordleError(Exception):
    """Base class; `kind` is fixed per subclass unless overridden."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(
            self,
            message: str,
            *,
            word: Optional[str] = None,
            length: Optional[int] = None,
            kind: Optional[ErrorKind] = None,
    ):
        super().__init__(message)
        self.message = message
        self.word = word
        self.length = length
        if kind is not None:
            self.kind = kind


class InvalidInputError(WoordleError, ValueError):
    """Null/empty/non-alphabetic word, or a guess the dictionary doesn't know."""
    kind = ErrorKind.INVALID_INPUT


class InvalidArgumentError(WoordleError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENT


class LengthMismatchError(WoordleError, ValueError):
    kind = ErrorKind.LENGTH_MISMATCH


class NoWordAvailableError(WoordleError):
    kind = ErrorKind.NO_WORD_AVAILABLE


class DictionaryUnavailableError(WoordleError):
    """Transport failure, exhausted retries or timeout. Safe to retry later."""
    kind = ErrorKind.DICTIONARY_UNAVAILABLE


class GatewayError(Exception):
    """Raised by dictionary adapters when the source can't be reached."""

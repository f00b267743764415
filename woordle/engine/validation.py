"""
Guess validation.

This module answers the question: "May this guess be scored?"
A guess is accepted iff:
  - it is a non-empty sequence of characters
  - after normalization it is ASCII a-z only
  - it has exact length `length`
  - the dictionary recognizes it

The dictionary is consulted last, and only once: a negative answer is
authoritative, so it is never retried.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from woordle.errors import DictionaryUnavailableError, ErrorKind, GatewayError, InvalidInputError
from woordle.dictionary.gateway import DictionaryGateway
from .normalize import NormalizedWord, check_length, is_alphabetic, normalize

logger = logging.getLogger(__name__)


def concatenate(characters: Optional[Iterable[str]]) -> str:
    """Join a player's characters into one raw string."""
    if characters is None:
        raise InvalidInputError("Guessed characters cannot be null.")
    try:
        chars = list(characters)
    except TypeError as e:
        raise InvalidInputError(
            f"Guessed characters must be a sequence, got {type(characters).__name__}.") from e
    for i, ch in enumerate(chars):
        if not isinstance(ch, str):
            raise InvalidInputError(
                f"Guessed character at position {i} must be a string, got {type(ch).__name__}.")
    raw = "".join(chars)
    if not raw:
        raise InvalidInputError("Guessed characters cannot be empty.")
    return raw


def validate_guess(
        gateway: DictionaryGateway,
        characters: Iterable[str],
        length: int,
        *,
        timeout: Optional[float] = None,
) -> NormalizedWord:
    """
    Return the normalized guess, or raise why it can't be scored.

    Args:
      gateway    : DictionaryGateway used for the membership check
      characters : the player's characters (a str works too)
      length     : required word length (the answer's length)
      timeout    : seconds allowed for the dictionary call

    Raises:
      InvalidArgumentError       : `length` outside 1..15
      InvalidInputError          : empty, non-alphabetic, wrong length, or
                                   unknown word (kind=UNRECOGNIZED_WORD)
      DictionaryUnavailableError : the dictionary couldn't be reached
    """
    check_length(length)
    guess = normalize(concatenate(characters))

    if not is_alphabetic(guess):
        raise InvalidInputError(f"Guess \"{guess}\" must contain letters only.", word=guess)
    if len(guess) != length:
        raise InvalidInputError(
            f"Guess \"{guess}\" has {len(guess)} letters; expected {length}.",
            word=guess, length=length,
        )

    try:
        exists = gateway.word_exists(guess, timeout=timeout)
    except (GatewayError, TimeoutError) as e:
        raise DictionaryUnavailableError(f"Failed to validate word \"{guess}\": {e}",
                                         word=guess) from e

    if not exists:
        logger.debug("dictionary does not recognize %r", guess)
        raise InvalidInputError(f"\"{guess}\" is not a recognized word.", word=guess,
                                kind=ErrorKind.UNRECOGNIZED_WORD)
    return guess

"""
Random answer-word acquisition.

The remote source is noisy: now and then it hands back a candidate with
punctuation, spaces or the wrong length. Those are retried with a fresh
fetch, up to `max_attempts` (and, when given, within `timeout` seconds).
Everything else is final on first occurrence:
  - no word of that length    -> NoWordAvailableError
  - transport failure/timeout -> DictionaryUnavailableError
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from tenacity import RetryError, Retrying, retry_if_exception_type, stop_after_attempt, stop_after_delay

from woordle.config import DEFAULT_MAX_ATTEMPTS
from woordle.engine.normalize import NormalizedWord, check_length, is_alphabetic, normalize
from woordle.errors import (
    DictionaryUnavailableError,
    GatewayError,
    InvalidArgumentError,
    InvalidInputError,
    NoWordAvailableError,
)
from .gateway import DictionaryGateway

logger = logging.getLogger(__name__)

# The original MVP only ever asked for five-letter words
DEFAULT_WORD_LENGTH = 5


class MalformedCandidateError(Exception):
    """A fetched word failed normalization/shape checks; fetch another."""

    def __init__(self, candidate):
        super().__init__(f"malformed candidate {candidate!r}")
        self.candidate = candidate


def _fetch_once(gateway: DictionaryGateway, length: int, timeout: Optional[float]) -> NormalizedWord:
    try:
        raw = gateway.fetch_random_word(length, timeout=timeout)
    except (GatewayError, TimeoutError) as e:
        raise DictionaryUnavailableError(
            f"Failed to fetch a random {length}-letter word: {e}", length=length) from e

    if raw is None:
        raise NoWordAvailableError(f"No words of length {length} available", length=length)

    try:
        word = normalize(raw)
    except InvalidInputError as e:
        raise MalformedCandidateError(raw) from e
    if not is_alphabetic(word) or len(word) != length:
        raise MalformedCandidateError(raw)
    return word


def acquire_random_word(
        gateway: DictionaryGateway,
        length: int = DEFAULT_WORD_LENGTH,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        timeout: Optional[float] = None,
) -> NormalizedWord:
    """
    Fetch a random, normalized, alphabetic word of exactly `length` letters.

    Args:
      gateway      : dictionary source
      length       : 1..15
      max_attempts : cap on fetches when candidates come back malformed
      timeout      : overall budget in seconds; None = no overall limit

    Raises:
      InvalidArgumentError       : bad length / max_attempts
      NoWordAvailableError       : source has nothing of that length
      DictionaryUnavailableError : transport failure, timeout, or retries exhausted
    """
    check_length(length)
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
        raise InvalidArgumentError(f"max_attempts must be a positive integer, got {max_attempts!r}")

    stop = stop_after_attempt(max_attempts)
    if timeout is not None:
        stop = stop | stop_after_delay(timeout)
    started = time.monotonic()

    def remaining() -> Optional[float]:
        if timeout is None:
            return None
        left = timeout - (time.monotonic() - started)
        if left <= 0:
            raise DictionaryUnavailableError(
                f"Timed out after {timeout:.1f}s fetching a {length}-letter word", length=length)
        return left

    word: NormalizedWord = ""
    try:
        for attempt in Retrying(stop=stop, retry=retry_if_exception_type(MalformedCandidateError)):
            with attempt:
                n = attempt.retry_state.attempt_number
                try:
                    word = _fetch_once(gateway, length, remaining())
                except MalformedCandidateError as e:
                    logger.debug("attempt %d/%d: rejected %r", n, max_attempts, e.candidate)
                    raise
    except RetryError as e:
        tries = e.last_attempt.attempt_number
        logger.warning("giving up on %d-letter word after %d malformed candidate(s)", length, tries)
        raise DictionaryUnavailableError(
            f"Dictionary returned {tries} malformed candidate(s) for length {length}",
            length=length,
        ) from e.last_attempt.exception()

    return word

import time

import pytest
from fakes import ScriptedGateway

from woordle.dictionary import WordListDictionary, acquire_random_word, DEFAULT_WORD_LENGTH
from woordle.errors import (
    DictionaryUnavailableError,
    ErrorKind,
    GatewayError,
    InvalidArgumentError,
    NoWordAvailableError,
)


def test_acquire_normalizes():
    gw = ScriptedGateway(["  Crane "])
    assert acquire_random_word(gw, 5) == "crane"
    assert gw.fetch_calls == [(5, None)]


def test_acquire_default_length_is_five():
    gw = ScriptedGateway(["crane"])
    assert acquire_random_word(gw) == "crane"
    assert gw.fetch_calls[0][0] == DEFAULT_WORD_LENGTH == 5


def test_acquire_retries_malformed_candidates():
    gw = ScriptedGateway(["cr-ne", "cr ne", "", "crane"])
    assert acquire_random_word(gw, 5) == "crane"
    assert len(gw.fetch_calls) == 4


def test_acquire_retries_wrong_length_candidate():
    gw = ScriptedGateway(["cranes", "crane"])
    assert acquire_random_word(gw, 5) == "crane"


def test_acquire_retry_bound():
    gw = ScriptedGateway(["it's"] * 10)
    with pytest.raises(DictionaryUnavailableError) as ei:
        acquire_random_word(gw, 4, max_attempts=3)
    assert len(gw.fetch_calls) == 3
    assert ei.value.kind is ErrorKind.DICTIONARY_UNAVAILABLE
    assert ei.value.length == 4


def test_no_word_available_is_not_retried():
    gw = ScriptedGateway([None, "crane"])
    with pytest.raises(NoWordAvailableError) as ei:
        acquire_random_word(gw, 5)
    assert len(gw.fetch_calls) == 1
    assert "5" in str(ei.value)


@pytest.mark.parametrize("exc", [GatewayError("connection reset"), TimeoutError("slow")])
def test_transport_failure_is_wrapped_not_retried(exc):
    gw = ScriptedGateway([exc, "crane"])
    with pytest.raises(DictionaryUnavailableError) as ei:
        acquire_random_word(gw, 5)
    assert ei.value.__cause__ is exc
    assert len(gw.fetch_calls) == 1


@pytest.mark.parametrize("length", [0, 16, -3, True, "5"])
def test_length_bounds(length):
    gw = ScriptedGateway(["crane"])
    with pytest.raises(InvalidArgumentError):
        acquire_random_word(gw, length)
    assert gw.fetch_calls == []


@pytest.mark.parametrize("word", ["a", "abcdefghijklmno"])
def test_length_edges_accepted(word):
    gw = WordListDictionary([word])
    assert acquire_random_word(gw, len(word)) == word


@pytest.mark.parametrize("max_attempts", [0, -1, 2.5])
def test_bad_max_attempts(max_attempts):
    with pytest.raises(InvalidArgumentError):
        acquire_random_word(ScriptedGateway(["crane"]), 5, max_attempts=max_attempts)


def test_timeout_budget_passed_to_gateway():
    gw = ScriptedGateway(["crane"])
    acquire_random_word(gw, 5, timeout=30.0)
    (_, t), = gw.fetch_calls
    assert t is not None and 0 < t <= 30.0


def test_expired_timeout_surfaces_as_unavailable():
    gw = ScriptedGateway(["crane"])
    with pytest.raises(DictionaryUnavailableError):
        acquire_random_word(gw, 5, timeout=0)
    assert gw.fetch_calls == []


def test_wordlist_skips_malformed_entries():
    # only one clean 5-letter word; the malformed ones get retried past
    gw = WordListDictionary(["it's", "ab-cd", "crane"], seed=1)
    for _ in range(5):
        assert acquire_random_word(gw, 5, max_attempts=50) == "crane"


class SlowMalformedGateway:
    """Every fetch takes a while and comes back unusable."""

    def __init__(self, delay):
        self.delay = delay
        self.timeouts = []

    def fetch_random_word(self, length, *, timeout=None):
        self.timeouts.append(timeout)
        time.sleep(self.delay)
        return "x-" * length

    def word_exists(self, word, *, timeout=None):
        return False


def test_timeout_expires_during_retries():
    gw = SlowMalformedGateway(delay=0.05)
    started = time.monotonic()
    with pytest.raises(DictionaryUnavailableError):
        acquire_random_word(gw, 5, max_attempts=1000, timeout=0.2)
    assert time.monotonic() - started < 2.0
    # stopped by the time budget, well before the attempt cap
    assert 1 < len(gw.timeouts) < 1000
    # each fetch is handed a shrinking share of the budget
    assert all(t is not None and 0 < t <= 0.2 for t in gw.timeouts)
    assert gw.timeouts == sorted(gw.timeouts, reverse=True)

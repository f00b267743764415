"""
Core-facing API for a presentation layer.

`WordService` wires a dictionary gateway and its config to the three core
operations and returns `Result` values instead of raising, so a caller
handles every outcome with one `result.kind` switch.

Typical use:
    svc = WordService.from_env()
    answer = svc.random_word(5).unwrap()
    res = svc.handle_guess(list("crane"), answer)
    if res.ok:
        print(pattern(res.value))
    elif res.kind is ErrorKind.UNRECOGNIZED_WORD:
        ...
"""

from __future__ import annotations

from typing import Iterable, Optional

from woordle.config import DictionaryConfig
from woordle.dictionary import DEFAULT_WORD_LENGTH, DictionaryGateway, WordsApiDictionary, acquire_random_word
from woordle.engine import evaluate, normalize, validate_guess
from woordle.engine.normalize import NormalizedWord
from woordle.engine.scoring import Feedback
from woordle.result import Result, capture


class WordService:
    def __init__(self, gateway: DictionaryGateway, config: Optional[DictionaryConfig] = None):
        self.gateway = gateway
        self.config = config or DictionaryConfig()

    @classmethod
    def from_env(cls) -> "WordService":
        """Build a service talking to WordsAPI with settings from the environment."""
        config = DictionaryConfig.from_env()
        return cls(WordsApiDictionary(config), config)

    def random_word(self, length: int = DEFAULT_WORD_LENGTH, *,
                    timeout: Optional[float] = None) -> Result[NormalizedWord]:
        return capture(acquire_random_word, self.gateway, length,
                       max_attempts=self.config.max_attempts, timeout=timeout)

    def validate_guess(self, characters: Iterable[str], length: int, *,
                       timeout: Optional[float] = None) -> Result[NormalizedWord]:
        return capture(validate_guess, self.gateway, characters, length, timeout=timeout)

    def evaluate(self, guess: NormalizedWord, answer: NormalizedWord) -> Result[Feedback]:
        return capture(evaluate, guess, answer)

    def handle_guess(self, characters: Iterable[str], answer: str, *,
                     timeout: Optional[float] = None) -> Result[Feedback]:
        """Validate the player's characters, then score them against `answer`."""
        def _run() -> Feedback:
            target = normalize(answer)
            guess = validate_guess(self.gateway, characters, len(target), timeout=timeout)
            return evaluate(guess, target)

        return capture(_run)

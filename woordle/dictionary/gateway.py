from __future__ import annotations

from typing import Optional, Protocol


class DictionaryGateway(Protocol):
    """
    Interface every dictionary source implements.

    Adapters report, the core interprets:
      - fetch_random_word returns None when the source has no word of that
        length; anything else it returns is a raw, unvalidated candidate.
      - word_exists returns False for any negative answer.
      - transport problems raise woordle.errors.GatewayError.

    `timeout` is the caller's remaining budget in seconds (None = adapter
    default).
    """

    def fetch_random_word(self, length: int, *, timeout: Optional[float] = None) -> Optional[str]:
        ...

    def word_exists(self, word: str, *, timeout: Optional[float] = None) -> bool:
        ...

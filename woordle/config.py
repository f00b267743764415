"""
Runtime configuration, read from the environment (and a local .env file).

Variables:
  WOORDLE_DICTIONARY_BASE_URL  WordsAPI base URL
  WOORDLE_DICTIONARY_HOST      value for the x-rapidapi-host header
  WOORDLE_DICTIONARY_API_KEY   value for the x-rapidapi-key header
  WOORDLE_HTTP_TIMEOUT         per-request timeout in seconds (default 10)
  WOORDLE_MAX_FETCH_ATTEMPTS   cap on malformed-candidate retries (default 10)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_BASE_URL = "https://wordsapiv1.p.rapidapi.com/words"
DEFAULT_HOST = "wordsapiv1.p.rapidapi.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_ATTEMPTS = 10


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class DictionaryConfig:
    base_url: str = DEFAULT_BASE_URL
    host: str = DEFAULT_HOST
    api_key: str = ""
    timeout: float = DEFAULT_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "DictionaryConfig":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        return cls(
            base_url=os.getenv("WOORDLE_DICTIONARY_BASE_URL") or DEFAULT_BASE_URL,
            host=os.getenv("WOORDLE_DICTIONARY_HOST") or DEFAULT_HOST,
            api_key=os.getenv("WOORDLE_DICTIONARY_API_KEY", ""),
            timeout=_env_number("WOORDLE_HTTP_TIMEOUT", DEFAULT_TIMEOUT, float),
            max_attempts=_env_number("WOORDLE_MAX_FETCH_ATTEMPTS", DEFAULT_MAX_ATTEMPTS, int),
        )

"""
WordsAPI (RapidAPI) dictionary adapter.

Endpoints used:
  - GET {base_url}/?letters=N&random=true  -> {"word": "..."}
  - GET {base_url}/{word}                  -> 2xx if the word exists

Status handling:
  - 2xx : success
  - 404 : "no" (no candidate / word unknown); the source answered
  - anything else (401/403 bad key, 429 rate limit, 5xx), connection
    errors, timeouts : GatewayError, so an auth or quota problem is never
    mistaken for an unknown word
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import requests

from woordle.config import DictionaryConfig
from woordle.errors import GatewayError

logger = logging.getLogger(__name__)

NOT_FOUND = 404


class WordsApiDictionary:
    def __init__(self, config: DictionaryConfig, session: Optional[requests.Session] = None):
        if not config.api_key:
            raise ValueError("WOORDLE_DICTIONARY_API_KEY is not set; cannot reach WordsAPI")
        self.config = config
        self.session = session or requests.Session()
        # RapidAPI authenticates with these two headers on every request
        self.session.headers.update({
            "x-rapidapi-host": config.host,
            "x-rapidapi-key": config.api_key,
        })

    def _get(self, url: str, timeout: Optional[float], **params) -> requests.Response:
        """GET `url`; returns only 2xx or 404 responses, raises GatewayError otherwise."""
        t = self.config.timeout if timeout is None else timeout
        logger.debug("GET %s params=%s timeout=%.1fs", url, params, t)
        try:
            r = self.session.get(url, params=params or None, timeout=t)
        except requests.RequestException as e:
            logger.warning("dictionary request failed: %s", e)
            raise GatewayError(f"Request to {url} failed: {e}") from e
        if r.status_code != NOT_FOUND and not 200 <= r.status_code < 300:
            logger.warning("dictionary returned HTTP %d for %s", r.status_code, url)
            raise GatewayError(f"Dictionary API returned HTTP {r.status_code} for {url}")
        return r

    def fetch_random_word(self, length: int, *, timeout: Optional[float] = None) -> Optional[str]:
        r = self._get(self.config.base_url.rstrip("/") + "/", timeout,
                      letters=length, random="true")
        if r.status_code == NOT_FOUND or not r.content:
            return None

        try:
            data = r.json()
        except ValueError:
            # Unparseable body: hand back an empty candidate, the caller retries
            logger.debug("non-JSON body from random-word endpoint: %r", r.text[:80])
            return ""
        word = data.get("word") if isinstance(data, dict) else None
        return word if isinstance(word, str) else ""

    def word_exists(self, word: str, *, timeout: Optional[float] = None) -> bool:
        url = f"{self.config.base_url.rstrip('/')}/{quote(word, safe='')}"
        return self._get(url, timeout).status_code != NOT_FOUND

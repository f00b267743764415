"""Deterministic stand-ins for dictionary gateways and HTTP sessions."""

import json


class ScriptedGateway:
    """Replays canned fetch results; exceptions in the script are raised."""

    def __init__(self, fetches=(), exists=True):
        self.fetches = list(fetches)
        self.exists = exists
        self.fetch_calls = []
        self.exists_calls = []

    def fetch_random_word(self, length, *, timeout=None):
        self.fetch_calls.append((length, timeout))
        r = self.fetches.pop(0)
        if isinstance(r, BaseException):
            raise r
        return r

    def word_exists(self, word, *, timeout=None):
        self.exists_calls.append((word, timeout))
        if isinstance(self.exists, BaseException):
            raise self.exists
        return self.exists


class FakeResponse:
    def __init__(self, status_code=200, body=""):
        if not isinstance(body, str):
            body = json.dumps(body)
        self.status_code = status_code
        self.text = body
        self.content = body.encode("utf-8")

    def json(self):
        return json.loads(self.text)


class FakeSession:
    def __init__(self, *responses):
        self.headers = {}
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        r = self.responses.pop(0)
        if isinstance(r, BaseException):
            raise r
        return r

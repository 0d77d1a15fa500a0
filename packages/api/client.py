"""
HTTP client for the words API (https://words.dev-apis.com).

Endpoints:
  - GET  /word-of-the-day        -> {"word": "...", "puzzleNumber": n}
    (add ?random=1 for a random word instead of today's)
  - POST /validate-word          -> {"word": "...", "validWord": bool}
    body: {"word": "..."}

Calls are sequential and never retried; any transport or protocol problem
surfaces as ApiError so the caller can decide what to do.
"""

from __future__ import annotations

from typing import Any, Dict

import requests

DEFAULT_BASE_URL = "https://words.dev-apis.com"
DEFAULT_TIMEOUT = 10.0


class ApiError(RuntimeError):
    """The words API could not be reached or returned something unusable."""


class WordsApiClient:
    def __init__(
            self,
            base_url: str = DEFAULT_BASE_URL,
            *,
            timeout: float = DEFAULT_TIMEOUT,
            session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self.session = session or requests.Session()
        self.last_puzzle_number: int | None = None

    def __enter__(self) -> "WordsApiClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _json(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            r = self.session.request(method, url, timeout=self.timeout, **kwargs)
            r.raise_for_status()
        except requests.RequestException as e:
            raise ApiError(f"{method} {url} failed: {e}") from e
        try:
            payload = r.json()
        except ValueError as e:
            raise ApiError(f"{method} {url} returned a non-JSON body") from e
        if not isinstance(payload, dict):
            raise ApiError(f"{method} {url} returned {type(payload).__name__}, expected an object")
        return payload

    def word_of_the_day(self, *, random: bool = False) -> str:
        """
        Fetch today's word (or a random one) upper-cased.
        """
        params = {"random": "1"} if random else None
        payload = self._json("GET", "/word-of-the-day", params=params)
        word = payload.get("word")
        if not isinstance(word, str) or not word:
            raise ApiError(f"word-of-the-day response has no word: {payload!r}")
        puzzle = payload.get("puzzleNumber")
        self.last_puzzle_number = puzzle if isinstance(puzzle, int) else None
        return word.strip().upper()

    def validate_word(self, word: str) -> bool:
        """
        Ask the remote dictionary whether `word` is a real word.
        """
        payload = self._json("POST", "/validate-word", json={"word": word})
        valid = payload.get("validWord")
        if not isinstance(valid, bool):
            raise ApiError(f"validate-word response has no boolean validWord: {payload!r}")
        return valid

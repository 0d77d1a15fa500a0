"""
Offline word source.

Drop-in replacement for WordsApiClient when there is no network: the daily
word is picked deterministically by date from a local answers list, and
guesses are checked against a local dictionary.
"""

from __future__ import annotations

import datetime as dt
import random as _random
from pathlib import Path
from typing import Iterable, List, Set

from packages.engine.validation import is_well_formed, normalize_word
from .io import read_words

# Day zero of the daily rotation
EPOCH = dt.date(2021, 6, 19)


class LocalWordSource:
    def __init__(
            self,
            answers: Iterable[str],
            allowed: Iterable[str] = (),
            *,
            N: int = 5,
            today: dt.date | None = None,
            seed: int | None = None,
    ):
        self.N = N
        self.answers: List[str] = [normalize_word(w) for w in answers if is_well_formed(w, N)]
        if not self.answers:
            raise ValueError(f"no usable {N}-letter answers")
        # Every answer is always a valid guess.
        self._dictionary: Set[str] = set(self.answers)
        self._dictionary.update(normalize_word(w) for w in allowed if is_well_formed(w, N))
        self.today = today
        self.rng = _random.Random(seed)

    @classmethod
    def from_files(cls, answers_path: Path | str, allowed_path: Path | str | None = None,
                   **kwargs) -> "LocalWordSource":
        N = kwargs.get("N", 5)
        allowed = read_words(allowed_path, N) if allowed_path else []
        return cls(read_words(answers_path, N), allowed, **kwargs)

    def word_of_the_day(self, *, random: bool = False) -> str:
        if random:
            return self.rng.choice(self.answers)
        today = self.today or dt.date.today()
        idx = (today - EPOCH).days % len(self.answers)
        return self.answers[idx]

    def validate_word(self, word: str) -> bool:
        return is_well_formed(word, self.N) and normalize_word(word) in self._dictionary

    def __len__(self) -> int:
        return len(self._dictionary)

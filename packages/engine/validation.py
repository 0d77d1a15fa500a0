"""
Lightweight guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is well formed iff:
  - it is a string
  - it is ASCII letters only (case-insensitive)
  - it has exact length N

The remote dictionary check lives in packages.api; `validate_guess` is the
offline equivalent that checks membership in a local word list.
"""

from typing import Iterable, Set


def normalize_word(word: str) -> str:
    """Canonical form used across the game: stripped and upper-cased."""
    return word.strip().upper()


def is_well_formed(word: str, N: int) -> bool:
    if not isinstance(word, str):
        return False
    w = normalize_word(word)
    return len(w) == N and w.isascii() and w.isalpha()


def validate_guess(word: str, allowed: Iterable[str], N: int) -> bool:
    """
    Return True if `word` is well formed and present in `allowed`.

    Args:
      word    : proposed guess
      allowed : iterable of allowed words (any case)
      N       : required word length

    Notes:
      - `allowed` may be a large list; a set is built on every call here.
        LocalWordSource keeps its own precomputed set instead.
    """
    if not is_well_formed(word, N):
        return False

    allowed_set: Set[str] = {normalize_word(a) for a in allowed}
    return normalize_word(word) in allowed_set

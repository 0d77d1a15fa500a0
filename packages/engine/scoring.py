"""
Guess evaluation for a single (guess, target) pair.

Labels:
  - "correct" : right letter in the right position
  - "close"   : letter is in the target but somewhere else
  - "wrong"   : letter is absent (or guessed more times than the target has it)

Algorithm (two-pass, duplicate-safe):
  1) Count every letter of the target.
  2) First pass marks exact matches and consumes one count per match.
  3) Second pass walks the remaining positions left to right and marks
     "close" only while the letter still has a remaining count.

Exact matches are consumed first, so a duplicate guessed letter can never
steal the single occurrence that another position matches exactly.
"""

from collections import Counter
from typing import List, Literal, Sequence

Mark = Literal["correct", "close", "wrong"]

CORRECT: Mark = "correct"
CLOSE: Mark = "close"
WRONG: Mark = "wrong"

# Compact one-char rendering used in CSV records
_PATTERN_CHARS = {CORRECT: "G", CLOSE: "Y", WRONG: "-"}


class InvalidInput(ValueError):
    """Raised when a guess/target pair is not two equal-length letter words."""


def _normalize(word: str) -> str:
    if not isinstance(word, str):
        raise InvalidInput(f"expected a string, got {type(word).__name__}")
    w = word.strip().upper()
    if not (w.isascii() and w.isalpha()):
        raise InvalidInput(f"not a letter-only word: {word!r}")
    return w


def evaluate(guess: str, target: str) -> List[Mark]:
    """
    Classify each position of `guess` against `target`.

    Raises:
      InvalidInput if either word has non-letters or the lengths differ.

    Examples:
      evaluate("lolly", "allow") -> ["close", "close", "correct", "wrong", "wrong"]
      evaluate("crane", "crane") -> ["correct"] * 5
    """
    guess = _normalize(guess)
    target = _normalize(target)
    if len(guess) != len(target):
        raise InvalidInput(
            f"guess and target must be the same length ({len(guess)} != {len(target)})")

    marks: List[Mark] = [WRONG] * len(guess)
    remaining = Counter(target)

    # Pass 1: exact matches
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            marks[i] = CORRECT
            remaining[g] -= 1

    # Pass 2: remaining positions, left to right
    for i, g in enumerate(guess):
        if marks[i] == CORRECT:
            continue
        if remaining[g] > 0:
            marks[i] = CLOSE
            remaining[g] -= 1

    return marks


def to_pattern(marks: Sequence[Mark]) -> str:
    """["correct", "close", "wrong"] -> "GY-" """
    return "".join(_PATTERN_CHARS[m] for m in marks)


def is_solved(marks: Sequence[Mark]) -> bool:
    return bool(marks) and all(m == CORRECT for m in marks)

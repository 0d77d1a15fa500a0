"""
One game of daily word guessing.

The session owns everything the player can change: the letters typed into
the current row, the committed rows with their marks, and the end-of-game
flags. Network access goes through a word source with two methods:

    source.word_of_the_day(random=False) -> str
    source.validate_word(word) -> bool

(packages.api.WordsApiClient online, packages.datasets.LocalWordSource
offline). While either call is in flight `is_loading` is True and key
presses are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Tuple

from packages.engine import (
    CORRECT, CLOSE, WRONG, InvalidInput, evaluate, is_solved, is_well_formed, normalize_word,
    to_pattern,
)
from packages.engine.scoring import Mark

NUM_ROUNDS = 6
ANSWER_LENGTH = 5

CommitStatus = Literal["incomplete", "invalid", "scored"]

# Higher rank wins when the same letter was seen with different marks
_MARK_RANK = {WRONG: 0, CLOSE: 1, CORRECT: 2}


@dataclass
class Commit:
    status: CommitStatus
    guess: str = ""
    marks: List[Mark] = field(default_factory=list)


class GameSession:
    def __init__(self, source, *, rounds: int = NUM_ROUNDS, length: int = ANSWER_LENGTH):
        self.source = source
        self.rounds = rounds
        self.length = length

        self.answer: str | None = None
        self.current_row = 0
        self.current_guess = ""
        self.rows: List[Tuple[str, List[Mark]]] = []
        self.is_loading = False
        self.finished = False
        self.won = False

    def start(self, *, random: bool = False) -> str:
        """
        Fetch the word for this game. Blocks key input until it arrives.
        """
        self.is_loading = True
        try:
            word = self.source.word_of_the_day(random=random)
        finally:
            self.is_loading = False
        if not is_well_formed(word, self.length):
            raise InvalidInput(f"fetched word is not {self.length} letters: {word!r}")
        self.answer = normalize_word(word)
        return self.answer

    # ---- typing ----

    def add_letter(self, letter: str) -> None:
        if not (isinstance(letter, str) and len(letter) == 1 and letter.isascii() and letter.isalpha()):
            raise InvalidInput(f"not a single letter: {letter!r}")
        letter = letter.upper()
        if len(self.current_guess) < self.length:
            self.current_guess += letter
        else:
            # Row is full: overwrite the last cell
            self.current_guess = self.current_guess[:-1] + letter

    def backspace(self) -> None:
        self.current_guess = self.current_guess[:-1]

    def commit(self) -> Commit:
        """
        Submit the current row.

        incomplete: fewer than `length` letters typed, nothing happens.
        invalid:    not a dictionary word; the row stays editable.
        scored:     the row is evaluated and locked in.
        """
        if self.answer is None:
            raise RuntimeError("game not started; call start() first")
        if self.finished:
            raise RuntimeError("game is over; start a new session")
        if len(self.current_guess) != self.length:
            return Commit("incomplete", self.current_guess)

        guess = self.current_guess
        self.is_loading = True
        try:
            valid = self.source.validate_word(guess)
        finally:
            self.is_loading = False
        if not valid:
            return Commit("invalid", guess)

        marks = evaluate(guess, self.answer)
        self.rows.append((guess, marks))
        self.current_row += 1

        if is_solved(marks):
            self.won = True
            self.finished = True
        elif self.current_row == self.rounds:
            self.finished = True
        else:
            self.current_guess = ""
        return Commit("scored", guess, marks)

    def handle_key(self, key: str) -> Optional[Commit]:
        """
        Route one key press. Returns the Commit for Enter, otherwise None.
        """
        if self.finished or self.is_loading:
            return None
        if key == "Enter":
            return self.commit()
        if key == "Backspace":
            self.backspace()
        elif len(key) == 1 and key.isascii() and key.isalpha():
            self.add_letter(key)
        return None

    # ---- views ----

    def grid(self) -> List[List[Tuple[str, Optional[Mark]]]]:
        """
        rounds x length cells of (letter, mark). Unscored cells have mark None;
        blank cells have letter "".
        """
        out: List[List[Tuple[str, Optional[Mark]]]] = []
        for guess, marks in self.rows:
            out.append(list(zip(guess, marks)))
        if not self.finished and len(out) < self.rounds:
            typed = [(ch, None) for ch in self.current_guess]
            out.append(typed + [("", None)] * (self.length - len(typed)))
        while len(out) < self.rounds:
            out.append([("", None)] * self.length)
        return out

    def keyboard(self) -> Dict[str, Mark]:
        """Best mark seen so far for every guessed letter."""
        best: Dict[str, Mark] = {}
        for guess, marks in self.rows:
            for ch, m in zip(guess, marks):
                if ch not in best or _MARK_RANK[m] > _MARK_RANK[best[ch]]:
                    best[ch] = m
        return best

    def result(self) -> Dict:
        """Summary dict for packages.game.records."""
        return {
            "answer": self.answer,
            "success": self.won,
            "guesses": len(self.rows),
            "history": [(g, to_pattern(m)) for g, m in self.rows],
        }

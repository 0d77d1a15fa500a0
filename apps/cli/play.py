# apps/cli/play.py
"""
CLI entry point for playing the daily word game in a terminal.

This script:
  1) Fetches the word of the day from the words API (or a local list with
     --offline).
  2) Reads one guess per line, checks it against the dictionary and prints
     the colored board plus the keyboard hints.
  3) Ends on a win or after 6 guesses and optionally appends the game to a
     CSV record (--record) for apps.cli.stats.
"""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional, Tuple

from packages.api import WordsApiClient, ApiError, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from packages.datasets import LocalWordSource, validate_wordlists, pretty_summary
from packages.engine import CORRECT, CLOSE, WRONG, InvalidInput
from packages.engine.scoring import Mark
from packages.game import GameSession, append_result, NUM_ROUNDS, ANSWER_LENGTH


class Ansi:
    RESET = "\033[0m"; BOLD = "\033[1m"; WHITE = "\033[37m"
    BG_GREEN = "\033[42m"; BG_YELLOW = "\033[43m"; BG_GREY = "\033[100m"


_BG = {CORRECT: Ansi.BG_GREEN, CLOSE: Ansi.BG_YELLOW, WRONG: Ansi.BG_GREY}
_PLAIN = {CORRECT: "[{}]", CLOSE: "({})", WRONG: " {} "}
QWERTY_ROWS = ["QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM"]


def _cell(letter: str, mark: Optional[Mark], color: bool) -> str:
    ch = letter or "_"
    if mark is None:
        return f" {ch} "
    if color:
        return f"{_BG[mark]}{Ansi.WHITE} {ch} {Ansi.RESET}"
    return _PLAIN[mark].format(ch)


def render_board(grid: List[List[Tuple[str, Optional[Mark]]]], color: bool) -> str:
    return "\n".join("".join(_cell(ch, m, color) for ch, m in row) for row in grid)


def render_keyboard(hints: Dict[str, Mark], color: bool) -> str:
    rows = []
    for keys in QWERTY_ROWS:
        rows.append("".join(
            _cell(k, hints.get(k), color) for k in keys))
    return "\n".join(rows)


def _build_source(args):
    if not args.offline:
        return WordsApiClient(args.api_url, timeout=args.timeout), "api"

    rep = validate_wordlists(ANSWER_LENGTH, args.answers, args.allowed)
    sys.stderr.write(pretty_summary(rep) + "\n")
    for msg in rep["issues"]:
        sys.stderr.write(f"  - {msg}\n")
    source = LocalWordSource.from_files(args.answers, args.allowed, N=ANSWER_LENGTH)
    sys.stderr.write(f"Offline: {len(source.answers)} answers, {len(source)} accepted guesses\n")
    return source, "local"


def play(session: GameSession, *, color: bool = True, random: bool = False) -> bool:
    """
    Run one interactive game on stdin/stdout. Returns True on a win.
    """
    print("Loading...", end="\r", flush=True)
    session.start(random=random)
    title = f"Guess the word in {session.rounds} tries."
    puzzle = getattr(session.source, "last_puzzle_number", None)
    if puzzle is not None:
        title = f"Puzzle #{puzzle}. " + title
    print(Ansi.BOLD + title + Ansi.RESET if color else title)
    print(render_board(session.grid(), color))

    while not session.finished:
        line = input(f"[{session.current_row + 1}/{session.rounds}] > ").strip()
        if len(line) != session.length or not (line.isascii() and line.isalpha()):
            print(f"Type a {session.length}-letter word.")
            continue

        # Replay the line as key presses, clearing whatever was left in the row
        while session.current_guess:
            session.backspace()
        for ch in line:
            session.handle_key(ch)
        commit = session.handle_key("Enter")

        if commit is None or commit.status == "incomplete":
            continue
        if commit.status == "invalid":
            print(f"Not in word list: {commit.guess}")
            continue

        print(render_board(session.grid(), color))
        print(render_keyboard(session.keyboard(), color))

    if session.won:
        print("Congrats! You got it right!")
    else:
        print(f"Sorry. You lost! The word was {session.answer}.")
    return session.won


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Play the daily 5-letter word game")
    ap.add_argument("--api-url", default=DEFAULT_BASE_URL, help="words API base URL")
    ap.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                    help="HTTP timeout in seconds")
    ap.add_argument("--random", action="store_true",
                    help="play a random word instead of today's")
    ap.add_argument("--offline", action="store_true",
                    help="use local word lists instead of the API")
    ap.add_argument("--answers", default="data/answers_5.txt",
                    help="offline: list of possible answers")
    ap.add_argument("--allowed", default="data/allowed_5.txt",
                    help="offline: list of accepted guesses")
    ap.add_argument("--record", help="append the finished game to this CSV file")
    ap.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    args = ap.parse_args(argv)

    try:
        source, source_id = _build_source(args)
    except (FileNotFoundError, ValueError) as e:
        sys.stderr.write(f"Cannot load word lists: {e}\n")
        return 1

    session = GameSession(source, rounds=NUM_ROUNDS, length=ANSWER_LENGTH)
    try:
        play(session, color=not args.no_color, random=args.random)
    except (ApiError, InvalidInput) as e:
        sys.stderr.write(f"Cannot play: {e}\n")
        return 1
    except (KeyboardInterrupt, EOFError):
        sys.stderr.write("\nBye.\n")
        return 130
    finally:
        if isinstance(source, WordsApiClient):
            source.close()

    if args.record:
        path = append_result(session.result(), args.record, source=source_id)
        print(f"Recorded: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

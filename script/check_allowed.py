"""
Cross-check a local word list against the remote dictionary.

What it does:
- Loads a word list (one word per line, any case) for offline play.
- Asks the words API whether each word is valid, with a progress bar.
- Writes the words the API rejects to --out so they can be pruned.

Usage:
    python -m script.check_allowed --allowed data/allowed_5.txt --out reports/rejected.txt
"""

import argparse
import sys

from tqdm import tqdm

from packages.api import WordsApiClient, ApiError, DEFAULT_BASE_URL
from packages.datasets import read_words, write_lines


def find_rejected(words, client, progress: bool = True) -> list[str]:
    rejected = []
    for w in tqdm(words, ncols=80, desc="Checking", unit="word", disable=not progress):
        if not client.validate_word(w):
            rejected.append(w)
    return rejected


def main():
    ap = argparse.ArgumentParser(description="Find local words the remote dictionary rejects")
    ap.add_argument("--allowed", required=True, help="word list to check")
    ap.add_argument("--out", default="reports/rejected_5.txt")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--api-url", default=DEFAULT_BASE_URL)
    ap.add_argument("--no-progress", action="store_true")
    args = ap.parse_args()

    words = read_words(args.allowed, args.N)
    with WordsApiClient(args.api_url) as client:
        try:
            rejected = find_rejected(words, client, progress=not args.no_progress)
        except ApiError as e:
            sys.stderr.write(f"Aborted: {e}\n")
            return 1

    write_lines(rejected, args.out)
    print(f"Checked {len(words)} words, {len(rejected)} rejected -> {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

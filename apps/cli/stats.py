# apps/cli/stats.py
"""
Print win statistics from a CSV written by `apps.cli.play --record`.
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from packages.game import load_results, summarize, pretty_stats


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Show statistics for recorded games")
    ap.add_argument("--record", default="reports/games.csv", help="CSV file of recorded games")
    args = ap.parse_args(argv)

    try:
        results = load_results(args.record)
    except FileNotFoundError:
        sys.stderr.write(f"No games recorded yet ({args.record} not found)\n")
        return 1

    print(pretty_stats(summarize(results)))
    return 0


if __name__ == "__main__":
    sys.exit(main())

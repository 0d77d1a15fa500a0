"""
Game history on disk.

Responsibilities:
- append_result: add one finished game to a CSV file (one row per game).
- load_results:  read the rows back as dicts.
- summarize:     played / win rate / streaks / guess distribution.
- pretty_stats:  console rendering of a summary.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import datetime as dt

from .session import NUM_ROUNDS


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def _fields(max_turns: int) -> List[str]:
    fields = ["played_at", "source", "answer", "success", "guesses"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}"]
    return fields


def append_result(result: Dict, path: str, *, source: str = "api",
                  max_turns: int = NUM_ROUNDS) -> str:
    """
    Append a game result (GameSession.result()) to the CSV at `path`.
    The header is written only when the file is new or empty.
    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    new_file = not p.exists() or p.stat().st_size == 0

    row = {
        "played_at": dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "source": source,
        "answer": result["answer"],
        "success": result["success"],
        "guesses": result["guesses"],
    }
    hist = result.get("history", [])
    for i in range(1, max_turns + 1):
        if i <= len(hist):
            g, patt = hist[i - 1]
            row[f"guess_{i}"] = g
            row[f"patt_{i}"] = _excel_safe_pattern(patt)
        else:
            row[f"guess_{i}"] = ""
            row[f"patt_{i}"] = ""

    with p.open("a", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=_fields(max_turns))
        if new_file:
            w.writeheader()
        w.writerow(row)

    return str(p)


def load_results(path: str) -> List[Dict]:
    """
    Read rows written by append_result. `success` comes back as bool,
    `guesses` as int, and patterns without the apostrophe.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    out: List[Dict] = []
    with p.open("r", newline="", encoding="utf-8") as f:
        for row in csv.DictReader(f):
            row["success"] = row["success"] == "True"
            row["guesses"] = int(row["guesses"])
            for k, v in row.items():
                if k.startswith("patt_") and v:
                    row[k] = v.lstrip("'")
            out.append(row)
    return out


def summarize(results: List[Dict], max_turns: int = NUM_ROUNDS) -> Dict:
    """
    Aggregate stats over games in play order.

    Returns:
      dict with played, wins, win_rate (0..100), current_streak, max_streak,
      distribution {1: n, ..., max_turns: n} counting wins by guesses used.
    """
    distribution = {i: 0 for i in range(1, max_turns + 1)}
    wins = streak = best = 0
    for r in results:
        if r["success"]:
            wins += 1
            streak += 1
            best = max(best, streak)
            if r["guesses"] in distribution:
                distribution[r["guesses"]] += 1
        else:
            streak = 0
    played = len(results)
    return {
        "played": played,
        "wins": wins,
        "win_rate": round(100.0 * wins / played, 1) if played else 0.0,
        "current_streak": streak,
        "max_streak": best,
        "distribution": distribution,
    }


def pretty_stats(summary: Dict) -> str:
    lines = [
        f"Played: {summary['played']} | Win %: {summary['win_rate']} "
        f"| Current streak: {summary['current_streak']} | Max streak: {summary['max_streak']}",
    ]
    dist = summary["distribution"]
    top = max(dist.values()) if dist else 0
    for k, n in dist.items():
        bar = "#" * (round(20 * n / top) if top else 0)
        lines.append(f"{k}: {bar} {n}")
    return "\n".join(lines)

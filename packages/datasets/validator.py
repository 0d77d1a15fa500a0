"""
Word list validator for offline play.

What this module does:
- Validate a pair of word lists: answers (possible daily words) and allowed
  (every word accepted as a guess).
- Enforce formatting rules (letters only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that answers ⊆ allowed, so the daily word can always be guessed.
- Return a plain dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "data/answers.txt", "data/allowed.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class ListReport:
    """Per-file diagnostics."""
    path: str
    exists: bool
    count: int           # valid words, duplicates included
    unique_count: int
    invalid_lines: int
    sha256: str          # empty string if the file is missing


@dataclass
class ValidationReport:
    N: int
    answers: ListReport
    allowed: ListReport
    answers_subset_allowed: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Split a list file into valid upper-cased words and a count of bad lines.
    Blank lines count as invalid.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if len(w) == N and w.isascii() and w.isalpha():
                valid.append(w.upper())
            else:
                invalid += 1

    return valid, invalid


def _report(path: Path, N: int) -> Tuple[ListReport, List[str], int]:
    if not path.exists():
        return ListReport(str(path), False, 0, 0, 0, ""), [], 0
    words, invalid = _scan(path, N)
    rep = ListReport(
        path=str(path),
        exists=True,
        count=len(words),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        sha256=_sha256_file(path),
    )
    return rep, words, invalid


def validate_wordlists(N: int, answers_path: str, allowed_path: str) -> Dict:
    """
    Validate the answers/allowed word lists for length N.

    Returns a JSON-serializable dict (ValidationReport schema). `passed` is
    strict: both files exist and are non-empty, no invalid lines, and every
    answer is also an allowed guess.
    """
    issues: List[str] = []

    ans_rep, answers, ans_invalid = _report(Path(answers_path), N)
    all_rep, allowed, all_invalid = _report(Path(allowed_path), N)

    for name, rep in (("answers", ans_rep), ("allowed", all_rep)):
        if not rep.exists:
            issues.append(f"{name} file not found: {rep.path}")
        elif rep.count == 0:
            issues.append(f"{name} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{name} has {rep.invalid_lines} invalid line(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{name} contains duplicate lines")

    subset_ok = ans_rep.exists and all_rep.exists and set(answers) <= set(allowed)
    if ans_rep.exists and all_rep.exists and not subset_ok:
        missing = sorted(set(answers) - set(allowed))[:5]
        issues.append(f"answers not subset of allowed (e.g., {missing})")

    passed = (
            subset_ok
            and ans_invalid == 0
            and all_invalid == 0
            and ans_rep.count > 0
            and all_rep.count > 0
    )

    return asdict(ValidationReport(
        N=N,
        answers=ans_rep,
        allowed=all_rep,
        answers_subset_allowed=subset_ok,
        passed=passed,
        issues=issues,
    ))


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console, e.g.
        N=5 | answers=2315 (uniq=2315, sha=abc123...) | allowed=10657 (...) | answers⊆allowed=True | OK
    """
    a = report["answers"]
    b = report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | answers={a['count']} (uniq={a['unique_count']}, sha={a['sha256'][:12]}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b['sha256'][:12]}) "
        f"| answers⊆allowed={report['answers_subset_allowed']} | {status}"
    )

from pathlib import Path
from packages.datasets import validate_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(allw, ["CRANE", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(5, str(ans), str(allw))
    assert rep["passed"] is True
    assert rep["answers_subset_allowed"] is True
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "answers⊆allowed=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    ans = tmp_path / "answers_6.txt"
    allw = tmp_path / "allowed_6.txt"
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'raiser' is fine
    ans.write_text("raiser\ncrane\n???\n", encoding="utf-8")
    allw.write_text("raiser\nplanet\npalate\n", encoding="utf-8")

    rep = validate_wordlists(6, str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["answers"]["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(allw, ["crane", "stare"])  # missing 'raise'

    rep = validate_wordlists(5, str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["answers_subset_allowed"] is False
    assert any("subset" in msg and "RAISE" in msg for msg in rep["issues"])


def test_validate_wordlists_duplicates_and_missing(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    _write(ans, ["crane", "crane"])

    rep = validate_wordlists(5, str(ans), str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert rep["allowed"]["exists"] is False
    assert rep["allowed"]["sha256"] == ""
    assert "answers contains duplicate lines" in rep["issues"]
    assert any("not found" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)

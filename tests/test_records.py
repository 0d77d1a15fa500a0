from pathlib import Path

import pytest

from packages.game import append_result, load_results, summarize, pretty_stats


def _result(success, guesses, answer="ALLOW"):
    hist = [("STARE", "-----")] * (guesses - 1)
    hist.append((answer, "GGGGG") if success else ("LOLLY", "YYG--"))
    return {"answer": answer, "success": success, "guesses": guesses, "history": hist}


def test_append_and_load_roundtrip(tmp_path: Path):
    path = tmp_path / "games.csv"
    append_result(_result(True, 3), str(path))
    append_result(_result(False, 6), str(path), source="local")

    text = path.read_text(encoding="utf-8")
    assert text.count("played_at") == 1  # header written once
    assert "'GGGGG" in text              # excel-safe patterns on disk

    rows = load_results(str(path))
    assert [r["success"] for r in rows] == [True, False]
    assert rows[0]["guesses"] == 3
    assert rows[0]["patt_3"] == "GGGGG"
    assert rows[0]["guess_4"] == ""
    assert rows[1]["source"] == "local"
    assert rows[1]["patt_6"] == "YYG--"


def test_load_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_results(str(tmp_path / "nope.csv"))


def test_summarize_streaks_and_distribution():
    results = [_result(True, 3), _result(True, 4), _result(False, 6),
               _result(True, 3), _result(True, 2), _result(True, 5)]
    s = summarize(results)
    assert s["played"] == 6
    assert s["wins"] == 5
    assert s["win_rate"] == 83.3
    assert s["current_streak"] == 3
    assert s["max_streak"] == 3
    assert s["distribution"] == {1: 0, 2: 1, 3: 2, 4: 1, 5: 1, 6: 0}


def test_summarize_empty():
    s = summarize([])
    assert s["played"] == 0 and s["win_rate"] == 0.0
    assert "Played: 0" in pretty_stats(s)


def test_pretty_stats_bars():
    out = pretty_stats(summarize([_result(True, 3), _result(True, 3), _result(True, 1)]))
    lines = out.splitlines()
    assert lines[0].startswith("Played: 3 | Win %: 100.0")
    assert lines[3] == "3: " + "#" * 20 + " 2"
    assert lines[1] == "1: " + "#" * 10 + " 1"

import pytest
from packages.engine import (
    evaluate, to_pattern, is_solved, InvalidInput, validate_guess, is_well_formed,
    CORRECT, CLOSE, WRONG,
)


def test_evaluate_allow_lolly():
    assert evaluate("LOLLY", "ALLOW") == [CLOSE, CLOSE, CORRECT, WRONG, WRONG]


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,target,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    ("evade", "abode", "--YGG"),
    ("bxxbb", "abbey", "Y--Y-"),
])
def test_evaluate_n5_golden(guess, target, expected):
    assert to_pattern(evaluate(guess, target)) == expected


@pytest.mark.parametrize("word", ["CRANE", "LLAMA", "EERIE", "allow"])
def test_identical_words_are_all_correct(word):
    marks = evaluate(word, word)
    assert marks == [CORRECT] * len(word)
    assert is_solved(marks)


def test_exact_match_wins_over_earlier_duplicate():
    # ABODE has one E; the exact E at the end consumes it
    marks = evaluate("EVADE", "ABODE")
    assert marks[4] == CORRECT
    assert marks[0] == WRONG


def test_close_capped_by_target_count():
    # ABBEY has two B's, guess has three misplaced B's
    marks = evaluate("BXXBB", "ABBEY")
    b_marks = [m for ch, m in zip("BXXBB", marks) if ch == "B"]
    assert b_marks.count(CLOSE) == 2
    assert b_marks.count(WRONG) == 1
    # left-to-right: the last B loses
    assert marks[4] == WRONG


def test_absent_letter_always_wrong():
    assert evaluate("ZZZZZ", "CRANE") == [WRONG] * 5


def test_case_insensitive():
    assert evaluate("lolly", "allow") == evaluate("LOLLY", "ALLOW")


def test_output_length_matches_input():
    assert len(evaluate("planet", "palate")) == 6


@pytest.mark.parametrize("guess,target", [
    ("cranes", "crane"),
    ("cr4ne", "crane"),
    ("", "crane"),
])
def test_evaluate_rejects_malformed_input(guess, target):
    with pytest.raises(InvalidInput):
        evaluate(guess, target)


def test_invalid_input_is_value_error():
    assert issubclass(InvalidInput, ValueError)


def test_is_solved_false_for_partial():
    assert not is_solved([CORRECT, CLOSE, CORRECT, CORRECT, CORRECT])
    assert not is_solved([])


def test_validate_guess_n5():
    allowed = ["crane", "raise", "stare"]
    assert validate_guess("CRANE", allowed, N=5) is True
    assert validate_guess("cranes", allowed, N=5) is False
    assert validate_guess("???", allowed, N=5) is False
    assert validate_guess("trace", allowed, N=5) is False


def test_is_well_formed():
    assert is_well_formed(" crane ", 5)
    assert not is_well_formed("crané", 5)
    assert not is_well_formed(12345, 5)


# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,target,expected", [
    ("settle", "letter", "-GGGYY"),
    ("little", "letter", "G-GG-Y"),
    ("planet", "palate", "GYY-YY"),
    ("kitten", "tinket", "YGYYGY"),
])
def test_evaluate_n6_samples(guess, target, expected):
    assert to_pattern(evaluate(guess, target)) == expected

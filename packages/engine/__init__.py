from .scoring import evaluate, to_pattern, is_solved, InvalidInput, CORRECT, CLOSE, WRONG
from .validation import normalize_word, is_well_formed, validate_guess

__all__ = [
    "evaluate", "to_pattern", "is_solved", "InvalidInput",
    "CORRECT", "CLOSE", "WRONG",
    "normalize_word", "is_well_formed", "validate_guess",
]

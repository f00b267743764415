from .normalize import normalize, is_alphabetic, check_length, MIN_WORD_LENGTH, MAX_WORD_LENGTH
from .scoring import Mark, evaluate, pattern, is_solved
from .validation import validate_guess

__all__ = [
    "normalize",
    "is_alphabetic",
    "check_length",
    "MIN_WORD_LENGTH",
    "MAX_WORD_LENGTH",
    "Mark",
    "evaluate",
    "pattern",
    "is_solved",
    "validate_guess",
]

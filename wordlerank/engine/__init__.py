from .feedback import (
    ABSENT_SENTINEL,
    Feedback,
    LetterStatus,
    compute_feedback,
    feedback_from_pattern,
    parse_pattern,
)
from .constraints import ConstraintSet, filter_candidates, history_from_pairs, is_valid
from .scoring import ScoreRecord, expected_value, score_guesses
from .validation import normalize_word, validate_guess

__all__ = [
    "ABSENT_SENTINEL",
    "Feedback",
    "LetterStatus",
    "compute_feedback",
    "feedback_from_pattern",
    "parse_pattern",
    "ConstraintSet",
    "filter_candidates",
    "history_from_pairs",
    "is_valid",
    "ScoreRecord",
    "expected_value",
    "score_guesses",
    "normalize_word",
    "validate_guess",
]

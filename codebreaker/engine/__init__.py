from .types import (
    Code, Feedback, Observation, GameSettings,
    DEFAULT_ALPHABET, DEFAULT_LENGTH, MAX_TRIES, EXACT_MARKER, PARTIAL_MARKER,
)
from .errors import (
    CodebreakerError, InvalidLength, InvalidParameters, InvalidFeedback,
    EmptyCandidateSet, Contradiction,
)
from .scoring import score, score_matrix, encode_feedback, decode_feedback
from .constraints import (
    iter_codes, generate_codes, random_code, symbols_of, filter_candidates, filter_history,
)
from .validation import validate_code, normalize_code, format_feedback, parse_feedback
from .pool import CandidatePool, PoolState, select_next_guess

__all__ = [
    "Code", "Feedback", "Observation", "GameSettings",
    "DEFAULT_ALPHABET", "DEFAULT_LENGTH", "MAX_TRIES", "EXACT_MARKER", "PARTIAL_MARKER",
    "CodebreakerError", "InvalidLength", "InvalidParameters", "InvalidFeedback",
    "EmptyCandidateSet", "Contradiction",
    "score", "score_matrix", "encode_feedback", "decode_feedback",
    "iter_codes", "generate_codes", "random_code", "symbols_of", "filter_candidates", "filter_history",
    "validate_code", "normalize_code", "format_feedback", "parse_feedback",
    "CandidatePool", "PoolState", "select_next_guess",
]

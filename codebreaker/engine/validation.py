"""
Lightweight checks and text codecs for whatever UI drives the engine.

This module answers two questions:
  - "Is this code acceptable?"  A code is valid iff it is a string of exactly
    N pegs, every peg drawn from the alphabet.
  - "What feedback does this text mean?"  Canonical feedback text is some
    'b's followed by some 'w's, at most N characters in total ("bbw").

The engine itself assumes its inputs already passed these checks.
"""

from __future__ import annotations

from .errors import InvalidFeedback
from .types import Code, EXACT_MARKER, Feedback, PARTIAL_MARKER


def normalize_code(text: str) -> Code:
    """Strip whitespace and uppercase, so ' gRby ' -> 'GRBY'."""
    return text.strip().upper()


def validate_code(code: Code, alphabet: str, N: int) -> bool:
    """
    Return True if `code` is a valid guess/secret for this board.

    No normalization happens here; call normalize_code first for raw input.
    """
    if not isinstance(code, str):
        return False
    if len(code) != N:
        return False
    return all(ch in alphabet for ch in code)


def format_feedback(fb: Feedback) -> str:
    return fb.render(EXACT_MARKER, PARTIAL_MARKER)


def parse_feedback(text: str, N: int) -> Feedback:
    """
    Parse canonical feedback text, case-insensitively.

    Examples (N=4):
      "bbw"  -> Feedback(2, 1)
      ""     -> Feedback(0, 0)
      "wb"   -> InvalidFeedback (exact markers must come first)
      "bbbbw"-> InvalidFeedback (more than N pegs)
    """
    t = text.strip().lower()
    if len(t) > N:
        raise InvalidFeedback(f"feedback {text!r} has more than {N} pegs")

    exact = len(t) - len(t.lstrip(EXACT_MARKER))
    rest = t[exact:]
    if rest.strip(PARTIAL_MARKER):
        raise InvalidFeedback(
            f"feedback {text!r} must be '{EXACT_MARKER}'s followed by '{PARTIAL_MARKER}'s")

    fb = Feedback(exact, len(rest))
    # N-1 exact pegs plus one partial peg cannot happen on a real board.
    if fb.exact == N - 1 and fb.partial == 1:
        raise InvalidFeedback(f"feedback {text!r} is impossible for {N} pegs")
    return fb

"""
Shared value types for the codebreaker engine.

Conventions:
  - A Code is a plain string, one character per peg (e.g. "GRBY").
  - Feedback is (exact, partial): black pegs first, then white pegs.
  - Observation is one recorded round: the guess and the feedback it got.

Defaults follow the classic board: 6 colours, 4 pegs, 10 attempts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from .errors import InvalidParameters

DEFAULT_ALPHABET = "GRBYOP"
DEFAULT_LENGTH = 4
MAX_TRIES = 10

# Canonical text markers: 'b' = exact (black peg), 'w' = partial (white peg)
EXACT_MARKER = "b"
PARTIAL_MARKER = "w"

Symbol = str
Code = str


class Feedback(NamedTuple):
    exact: int
    partial: int

    def render(self, exact_marker: str = EXACT_MARKER, partial_marker: str = PARTIAL_MARKER) -> str:
        """All exact markers first, then all partial markers. Feedback(2, 1) -> 'bbw'."""
        return exact_marker * self.exact + partial_marker * self.partial

    def is_win(self, N: int) -> bool:
        return self.exact == N


@dataclass(frozen=True)
class Observation:
    """One round: the guess that was played and the feedback it received."""
    guess: Code
    feedback: Feedback


@dataclass(frozen=True)
class GameSettings:
    alphabet: str = DEFAULT_ALPHABET
    length: int = DEFAULT_LENGTH
    max_tries: int = MAX_TRIES

    def __post_init__(self):
        if not self.alphabet:
            raise InvalidParameters("alphabet must not be empty")
        if len(set(self.alphabet)) != len(self.alphabet):
            raise InvalidParameters(f"alphabet has repeated symbols: {self.alphabet!r}")
        if self.length <= 0:
            raise InvalidParameters(f"length must be positive; got {self.length}")
        if self.max_tries <= 0:
            raise InvalidParameters(f"max_tries must be positive; got {self.max_tries}")

    @property
    def universe_size(self) -> int:
        return len(self.alphabet) ** self.length

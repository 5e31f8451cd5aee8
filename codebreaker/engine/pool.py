"""
Candidate pool: the per-session owner of the candidate set.

Lifecycle:
    UNINITIALIZED --initialize()--> ACTIVE --record_observation()--> ACTIVE
                                           \\-> SOLVED     (one candidate left, or an all-exact answer)
                                           \\-> EXHAUSTED  (no candidate left: contradictory feedback)
                                           \\-> ABANDONED  (abandon(): attempt budget ran out)

A SOLVED pool still accepts rounds: the guesser may not have played the
last candidate yet. Feedback that contradicts it moves the pool to EXHAUSTED.

Contradictory feedback is not a crash. The pool lands in EXHAUSTED and the
caller decides what to tell the user; ensure_consistent() turns that state
into a Contradiction error for callers that prefer exceptions.
"""

from __future__ import annotations

import enum
import logging
from typing import List, Optional

from .constraints import filter_candidates, generate_codes, symbols_of
from .errors import (
    Contradiction, EmptyCandidateSet, InvalidFeedback, InvalidLength, InvalidParameters,
)
from .types import Code, Feedback, Observation

logger = logging.getLogger(__name__)


class PoolState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    ABANDONED = "abandoned"


def select_next_guess(
        candidates: List[Code],
        strategy,
        *,
        alphabet: Optional[str] = None,
        state: Optional[dict] = None,
) -> Code:
    """
    Ask `strategy` (anything with next_guess(state)) for the next guess.

    The strategy always sees "alphabet" and "N". Without an explicit
    alphabet they come from the candidates themselves.

    Raises:
      EmptyCandidateSet if no candidates remain.
    """
    if not candidates:
        raise EmptyCandidateSet("no candidate secret remains; check for contradictory feedback")
    solver_state = dict(state or {})
    solver_state["candidates"] = candidates
    if alphabet:
        solver_state["alphabet"] = alphabet
    solver_state.setdefault("alphabet", symbols_of(candidates))
    solver_state.setdefault("N", len(candidates[0]))
    return strategy.next_guess(solver_state)


class CandidatePool:
    def __init__(self):
        self.alphabet: str = ""
        self.N: int = 0
        self.state: PoolState = PoolState.UNINITIALIZED
        self._candidates: List[Code] = []
        self._observations: List[Observation] = []

    @property
    def candidates(self) -> List[Code]:
        return list(self._candidates)

    @property
    def observations(self) -> List[Observation]:
        return list(self._observations)

    @property
    def solution(self) -> Optional[Code]:
        if self.state is PoolState.SOLVED:
            return self._candidates[0]
        return None

    def __len__(self) -> int:
        return len(self._candidates)

    def initialize(self, alphabet: str, length: int) -> List[Code]:
        """Build the full K ** N universe and start a fresh session."""
        self._candidates = generate_codes(alphabet, length)
        self.alphabet = alphabet
        self.N = int(length)
        self._observations = []
        self._transition(PoolState.ACTIVE)
        return self.candidates

    def record_observation(self, guess: Code, feedback: Feedback) -> PoolState:
        """
        Log one round and narrow the candidate set to match it.

        Returns the resulting state so turn loops can branch on it directly.
        """
        if self.state is PoolState.UNINITIALIZED:
            raise InvalidParameters("initialize() the pool before recording observations")
        if self.state in (PoolState.EXHAUSTED, PoolState.ABANDONED):
            raise InvalidParameters(f"session already ended in state {self.state.value}")

        if len(guess) != self.N:
            raise InvalidLength(f"guess {guess!r} has {len(guess)} pegs; the board has {self.N}")
        fb = Feedback(*feedback)
        if fb.exact < 0 or fb.partial < 0 or fb.exact + fb.partial > self.N:
            raise InvalidFeedback(f"feedback {tuple(fb)} is impossible on a {self.N}-peg board")

        obs = Observation(guess, fb)
        self._observations.append(obs)

        before = len(self._candidates)
        self._candidates = filter_candidates(self._candidates, obs)
        logger.debug("guess %s -> %s: %d -> %d candidates",
                     guess, obs.feedback, before, len(self._candidates))

        if not self._candidates:
            logger.warning("feedback history admits no secret after %d observation(s)",
                           len(self._observations))
            self._transition(PoolState.EXHAUSTED)
        elif obs.feedback.is_win(self.N) or len(self._candidates) == 1:
            self._transition(PoolState.SOLVED)
        return self.state

    def select_next_guess(self, strategy) -> Code:
        state = {
            "turn": len(self._observations) + 1,
            "history": self.observations,
            "alphabet": self.alphabet,
            "N": self.N,
        }
        return select_next_guess(self._candidates, strategy, state=state)

    def abandon(self) -> None:
        """Attempt budget exhausted: close an ACTIVE session without a solution."""
        if self.state is PoolState.ACTIVE:
            self._transition(PoolState.ABANDONED)

    def ensure_consistent(self) -> None:
        if self.state is PoolState.EXHAUSTED:
            raise Contradiction(
                f"no {self.N}-peg code over {self.alphabet!r} fits the "
                f"{len(self._observations)} recorded observation(s)")

    def _transition(self, new_state: PoolState) -> None:
        if new_state is self.state:
            return
        logger.debug("pool state %s -> %s", self.state.value, new_state.value)
        self.state = new_state

"""
Candidate generation and filtering.

Given:
  - an alphabet and a code length N, the universe is every N-peg code
    (K ** N of them, generated in lexicographic alphabet order)
  - a history of Observations (guess, feedback)

Return:
  - the codes that would have produced exactly the recorded feedback for
    every guess seen so far.

This is the step that turns feedback into a shrinking candidate set.
Order is always preserved, so "first candidate" means "first in generation
order" everywhere downstream.
"""

from __future__ import annotations

import random
from typing import Iterable, Iterator, List

from .errors import InvalidParameters
from .scoring import score
from .types import Code, Observation


def _check_board(alphabet: str, length: int) -> None:
    if not alphabet:
        raise InvalidParameters("alphabet must not be empty")
    if len(set(alphabet)) != len(alphabet):
        raise InvalidParameters(f"alphabet has repeated symbols: {alphabet!r}")
    if length <= 0:
        raise InvalidParameters(f"length must be positive; got {length}")


def iter_codes(alphabet: str, length: int) -> Iterator[Code]:
    """
    Yield every code over `alphabet` with `length` pegs.

    Works like an odometer over a fixed-size list of alphabet indices: the
    last position ticks fastest, and a wrap carries into the position to
    its left. "GR", 2 -> GG, GR, RG, RR.
    """
    _check_board(alphabet, length)

    K = len(alphabet)
    digits = [0] * length
    while True:
        yield "".join(alphabet[d] for d in digits)

        pos = length - 1
        while pos >= 0:
            digits[pos] += 1
            if digits[pos] < K:
                break
            digits[pos] = 0
            pos -= 1
        if pos < 0:
            return  # every position wrapped: universe exhausted


def generate_codes(alphabet: str, length: int) -> List[Code]:
    return list(iter_codes(alphabet, length))


def random_code(alphabet: str, length: int, rng: random.Random) -> Code:
    """Draw one code uniformly from the universe, pegs independent."""
    _check_board(alphabet, length)
    return "".join(rng.choice(alphabet) for _ in range(length))


def symbols_of(codes: Iterable[Code]) -> str:
    """Distinct symbols used by `codes`, in order of first appearance."""
    seen: List[str] = []
    for code in codes:
        for ch in code:
            if ch not in seen:
                seen.append(ch)
    return "".join(seen)


def is_consistent(candidate: Code, observation: Observation) -> bool:
    """Would `candidate`, as the secret, have answered this guess the same way?"""
    return score(candidate, observation.guess) == observation.feedback


def filter_candidates(candidates: Iterable[Code], observation: Observation) -> List[Code]:
    """
    Keep only candidates consistent with one observation.

    Pure: the input is not modified. The result is always a subset of the
    input, in the same order.
    """
    return [c for c in candidates if is_consistent(c, observation)]


def filter_history(candidates: Iterable[Code], history: Iterable[Observation]) -> List[Code]:
    """Keep only candidates consistent with ALL observations in `history`."""
    history = list(history)
    out: List[Code] = []
    for c in candidates:
        # First mismatching observation rules the candidate out.
        if all(is_consistent(c, obs) for obs in history):
            out.append(c)
    return out

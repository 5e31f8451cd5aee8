"""
Mastermind-style scoring (feedback) for a single (secret, guess) pair.

Conventions:
  - exact   : black peg = right colour in the right position
  - partial : white peg = right colour in the wrong position

This implementation is:
  - N-aware (any code length)
  - duplicate-safe (each physical peg is consumed at most once per side)
  - deterministic and symmetric: score(a, b) == score(b, a)

Algorithm (two-pass):
  1) First pass marks every exact match and consumes that position in both
     the secret and the guess.
  2) Second pass walks the unconsumed secret positions; each one consumes
     the first unconsumed guess position holding the same symbol.

`score_matrix` is the vectorized version used by search strategies that
need every (guess, candidate) pair at once.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .errors import InvalidLength, InvalidParameters
from .types import Code, Feedback


def score(secret: Code, guess: Code) -> Feedback:
    """
    Compute feedback for `guess` against `secret`.

    Raises:
      InvalidLength if the two codes differ in length.

    Examples:
      score("GRBY", "GBRY") -> Feedback(exact=2, partial=2)
      score("GGRR", "RRGG") -> Feedback(exact=0, partial=4)
    """
    n = len(secret)
    if len(guess) != n:
        raise InvalidLength(f"secret has {n} pegs but guess has {len(guess)}")

    secret_used = [False] * n
    guess_used = [False] * n

    # Pass 1: exact matches consume the position on both sides.
    exact = 0
    for i in range(n):
        if secret[i] == guess[i]:
            exact += 1
            secret_used[i] = True
            guess_used[i] = True

    # Pass 2: each leftover secret peg takes the first free matching guess peg.
    partial = 0
    for i in range(n):
        if secret_used[i]:
            continue
        for j in range(n):
            if not guess_used[j] and secret[i] == guess[j]:
                partial += 1
                guess_used[j] = True
                break  # this secret peg is spent

    return Feedback(exact, partial)


def encode_feedback(fb: Feedback, N: int) -> int:
    """Pack feedback into one int: exact * (N + 1) + partial."""
    return fb.exact * (N + 1) + fb.partial


def decode_feedback(value: int, N: int) -> Feedback:
    exact, partial = divmod(int(value), N + 1)
    return Feedback(exact, partial)


def _as_index_array(codes: Sequence[Code], alphabet: str, N: int) -> np.ndarray:
    index = {sym: k for k, sym in enumerate(alphabet)}
    rows: List[List[int]] = []
    for code in codes:
        if len(code) != N:
            raise InvalidLength(f"code {code!r} has {len(code)} pegs, expected {N}")
        try:
            rows.append([index[sym] for sym in code])
        except KeyError as e:
            raise InvalidParameters(f"code {code!r} uses a symbol outside {alphabet!r}") from e
    return np.asarray(rows, dtype=np.int16).reshape(len(codes), N)


def score_matrix(
        guesses: Sequence[Code],
        candidates: Sequence[Code],
        alphabet: str,
        *,
        chunk_rows: int = 256,
) -> np.ndarray:
    """
    Encoded feedback for every (guess, candidate) pair.

    Returns:
      int array of shape (len(guesses), len(candidates)); entry [i, j] is
      encode_feedback(score(candidates[j], guesses[i]), N).

    Partial pegs come from the colour-count identity:
      exact + partial == sum over colours of min(count_in_guess, count_in_candidate)
    which is the same consume-once rule `score` applies peg by peg.
    Rows are processed `chunk_rows` at a time to bound memory.
    """
    if not guesses or not candidates:
        return np.zeros((len(guesses), len(candidates)), dtype=np.int16)

    N = len(guesses[0])
    K = len(alphabet)
    G = _as_index_array(guesses, alphabet, N)
    C = _as_index_array(candidates, alphabet, N)

    colours = np.arange(K, dtype=np.int16)
    G_counts = (G[:, :, None] == colours).sum(axis=1)  # (g, K)
    C_counts = (C[:, :, None] == colours).sum(axis=1)  # (c, K)

    out = np.empty((len(guesses), len(candidates)), dtype=np.int16)
    step = max(1, int(chunk_rows))
    for lo in range(0, len(guesses), step):
        hi = min(lo + step, len(guesses))
        exact = (G[lo:hi, None, :] == C[None, :, :]).sum(axis=2)
        common = np.minimum(G_counts[lo:hi, None, :], C_counts[None, :, :]).sum(axis=2)
        out[lo:hi] = exact * (N + 1) + (common - exact)
    return out

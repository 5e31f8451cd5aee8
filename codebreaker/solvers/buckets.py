"""
Feedback partitions shared by the search solvers.

For a guess g, the CURRENT candidates split into buckets by the feedback g
would receive from each of them. Bucket sizes are all a solver needs to
rank guesses: the largest bucket is the worst case, sum of squares over n
is the expected number of survivors.
"""

from __future__ import annotations

from typing import List

import numpy as np

from codebreaker.engine import score_matrix


def partition_counts(guesses: List[str], candidates: List[str], alphabet: str,
                     *, chunk_rows: int = 256) -> np.ndarray:
    """
    Return an int array of shape (len(guesses), (N + 1) ** 2): row i holds
    the bucket sizes for guesses[i], indexed by encoded feedback.
    """
    if not guesses:
        return np.zeros((0, 0), dtype=np.int64)
    N = len(guesses[0])
    F = (N + 1) * (N + 1)
    out = np.zeros((len(guesses), F), dtype=np.int64)

    for lo in range(0, len(guesses), chunk_rows):
        hi = min(lo + chunk_rows, len(guesses))
        table = score_matrix(guesses[lo:hi], candidates, alphabet, chunk_rows=chunk_rows)
        rows = hi - lo
        # offset each row into its own block of F bins, then one bincount
        flat = (np.arange(rows)[:, None] * F + table).ravel()
        out[lo:hi] = np.bincount(flat, minlength=rows * F).reshape(rows, F)
    return out


def worst_bucket_sizes(guesses: List[str], candidates: List[str], alphabet: str,
                       *, chunk_rows: int = 256) -> np.ndarray:
    """Size of the largest feedback bucket for each guess."""
    if not guesses:
        return np.zeros(0, dtype=np.int64)
    return partition_counts(guesses, candidates, alphabet, chunk_rows=chunk_rows).max(axis=1)

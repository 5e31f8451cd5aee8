"""
Expected Remaining Candidates (ERC).

Idea:
  For guess g, if CURRENT candidates partition into buckets of sizes {c_i},
  the expected leftover after seeing the feedback is:
      E[left | g] = sum_i ( (c_i / n) * c_i ) = (1/n) * sum_i c_i^2
  Minimize sum_i c_i^2 (equivalently E[left]). Tie-break: smaller worst
  bucket, then seeded RNG.

Tracks minimax closely on average but trades a slightly worse tail for a
lower mean.
"""

from __future__ import annotations
from typing import List

import numpy as np

from .base import BaseSolver, register
from .buckets import partition_counts


@register
class ExpectedLeftSolver(BaseSolver):
    id = "expected_left"
    name = "Expected Remaining Candidates"
    version = "1.0.0"

    CHUNK_ROWS = 256

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        if len(candidates) <= 2:
            return candidates[0]

        alphabet = self.board_alphabet(state)
        counts = partition_counts(candidates, candidates, alphabet, chunk_rows=self.CHUNK_ROWS)
        sum_c2 = (counts * counts).sum(axis=1)
        worst = counts.max(axis=1)

        # lexicographic (sum_c2, worst) minimum, keeping every tied index
        best_sum = sum_c2.min()
        tied = np.flatnonzero(sum_c2 == best_sum)
        best_worst = worst[tied].min()
        best = tied[worst[tied] == best_worst]

        return candidates[int(best[self.rng.randrange(len(best))])]

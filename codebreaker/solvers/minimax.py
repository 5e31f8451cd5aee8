"""
Minimax solver (Knuth-style worst-case partition).

Idea:
  For each CURRENT candidate g as a hypothetical guess, partition the
  candidates by the feedback g would get from each of them. The largest
  bucket is how many candidates could survive in the worst case.
  Play the g whose largest bucket is smallest.
Tie-break:
  generation order (the first minimizer wins), so results are reproducible
  and independent of the seed.

Cost is O(|candidates|^2) scores per turn, done with numpy in row chunks.
The opening move is cached per full universe: a candidate list that is
still every K ** N code always gets the same answer.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np

from .base import BaseSolver, register
from .buckets import worst_bucket_sizes


@register
class MinimaxSolver(BaseSolver):
    id = "minimax"
    name = "Minimax (worst-case partition)"
    version = "1.0.0"

    CHUNK_ROWS = 256

    def __init__(self):
        super().__init__()
        self._openings: Dict[Tuple[str, ...], str] = {}

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        if len(candidates) <= 2:
            return candidates[0]

        alphabet = self.board_alphabet(state)
        # Only a full, untouched universe can reuse a cached opening.
        key = None
        if len(candidates) == len(alphabet) ** len(candidates[0]):
            key = tuple(candidates)
            if key in self._openings:
                return self._openings[key]

        worst = worst_bucket_sizes(candidates, candidates, alphabet, chunk_rows=self.CHUNK_ROWS)
        best = candidates[int(np.argmin(worst))]  # argmin keeps the first minimizer

        if key is not None:
            self._openings[key] = best
        return best

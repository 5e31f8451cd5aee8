"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (codes still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - No better than naive on average, but not exploitable by an oracle that
    knows the generation order.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        i = self.rng.randrange(len(candidates))
        return candidates[i]

"""
Naive solver.

Strategy:
  - Always play the FIRST remaining candidate in generation order.

Cheapest possible consistent strategy and fully deterministic; the seed has
no effect. Useful as a reproducible baseline.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class NaiveSolver(BaseSolver):
    id = "naive"
    name = "Naive (first consistent)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        return candidates[0]

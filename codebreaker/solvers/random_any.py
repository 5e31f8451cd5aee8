"""
Random Any solver ("easy" opponent).

Strategy:
  - Ignore feedback entirely; draw every peg uniformly from the alphabet.

Guesses may repeat and need not be consistent with the history, so this
solver usually runs out of attempts on a 6-colour, 4-peg board. It exists
as the weakest difficulty tier.
"""

from __future__ import annotations

from .base import BaseSolver, register


@register
class RandomAnySolver(BaseSolver):
    id = "random_any"
    name = "Random Any (ignores feedback)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        alphabet = self.board_alphabet(state)
        N = state.get("N") or self.N
        return "".join(self.rng.choice(alphabet) for _ in range(N))

from __future__ import annotations
import random
from typing import Dict, Type

from codebreaker.engine import DEFAULT_ALPHABET, DEFAULT_LENGTH, symbols_of

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = DEFAULT_LENGTH
        self.alphabet: str = DEFAULT_ALPHABET
        self.rng = random.Random()

    def reset(self, *, alphabet: str, N: int, seed: int | None = None) -> None:
        self.alphabet = alphabet
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        """
        Args:
            state: dict with keys:
                - "candidates": codes still consistent with all feedback (generation order)
                - "turn":       1-based turn number
                - "history":    list of Observation so far
                - "alphabet", "N"
        """
        raise NotImplementedError("Override in subclass")

    def board_alphabet(self, state: dict) -> str:
        """Alphabet to score with: the state's, else the symbols the candidates use."""
        if state.get("alphabet"):
            return state["alphabet"]
        candidates = state.get("candidates")
        return symbols_of(candidates) if candidates else self.alphabet

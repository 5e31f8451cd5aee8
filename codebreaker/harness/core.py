"""
Experiment harness core primitives.

- run_case:  play one session (one hidden secret) with a given solver.
- run_batch: play many sessions in sequence (optionally a sample prefix).
- summarize: aggregate a batch into win rate and guess-count statistics.

The harness is the automated oracle: it knows the secret, scores each guess
with the engine and feeds the result to a CandidatePool. The attempt budget
lives here, not in the engine.

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or tests without changes.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, Iterable, List

import numpy as np

from codebreaker.engine import (
    CandidatePool, GameSettings, PoolState, format_feedback, score,
)

logger = logging.getLogger(__name__)


def run_case(
        solver,
        secret: str,
        *,
        settings: GameSettings | None = None,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver wins or the attempt budget is exhausted.

    Args:
        solver:    an object implementing BaseSolver with next_guess(state)
        secret:    the hidden code for this case
        settings:  board + budget (defaults: GRBYOP, 4 pegs, 10 tries)
        seed:      RNG seed to make solver choices reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, feedback_text)]), secret (str),
            state (final pool state), remaining (candidates left)
    """
    settings = settings or GameSettings()
    N = settings.length

    solver.reset(alphabet=settings.alphabet, N=N, seed=seed)
    pool = CandidatePool()
    pool.initialize(settings.alphabet, N)

    history: List[tuple] = []
    success = False

    t0 = time.perf_counter()
    for _ in range(settings.max_tries):
        guess = pool.select_next_guess(solver)

        fb = score(secret, guess)
        history.append((guess, format_feedback(fb)))

        # A SOLVED pool keeps going until the solver actually plays the code.
        pool.record_observation(guess, fb)

        if fb.is_win(N):
            success = True
            break
        if pool.state is PoolState.EXHAUSTED:
            break
    else:
        pool.abandon()

    dt = (time.perf_counter() - t0) * 1000.0
    logger.debug("secret %s: %s in %d guess(es), pool %s",
                 secret, "solved" if success else "failed", len(history), pool.state.value)
    return {
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "secret": secret,
        "state": pool.state.value,
        "remaining": len(pool),
    }


def run_batch(
        solver,
        secrets: Iterable[str],
        *,
        settings: GameSettings | None = None,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, secret, settings=settings, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate statistics over a batch. Guess statistics cover wins only.
    """
    n = len(results)
    wins = np.array([r["guesses"] for r in results if r["success"]], dtype=float)
    times = np.array([r["time_ms"] for r in results], dtype=float)
    return {
        "cases": n,
        "wins": int(wins.size),
        "win_rate": (wins.size / n) if n else 0.0,
        "mean_guesses": float(wins.mean()) if wins.size else None,
        "median_guesses": float(np.median(wins)) if wins.size else None,
        "max_guesses": int(wins.max()) if wins.size else None,
        "mean_time_ms": float(times.mean()) if times.size else None,
    }

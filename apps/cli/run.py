# apps/cli/run.py
"""
CLI entry point for running codebreaker experiments.

This script:
  1) Builds the board (alphabet, code length, attempt budget) from flags.
  2) Enumerates every possible secret, optionally a seeded sample of them.
     With --random-secrets the computer picks the secrets at random instead.
  3) Runs a batch of games with the requested solver and a live progress
     indicator, then writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, summary statistics, git commit, etc.

Usage:
    python -m apps.cli.run --solver minimax
    python -m apps.cli.run --solver random_consistent --sample 200 --seed 7
    python -m apps.cli.run --solver expected_left --random-secrets 50
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from codebreaker.engine import (
    DEFAULT_ALPHABET, DEFAULT_LENGTH, MAX_TRIES, GameSettings, generate_codes, random_code,
)
from codebreaker.harness import run_case, summarize, write_run
from codebreaker.solvers import create_solver, get_solver_ids


def add_board_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--alphabet", default=DEFAULT_ALPHABET,
                    help="peg colours, one character each (default: %(default)s)")
    ap.add_argument("--length", type=int, default=DEFAULT_LENGTH, help="pegs per code")
    ap.add_argument("--max-tries", type=int, default=MAX_TRIES, help="attempt budget per game")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of secrets (deterministic by seed)")
    ap.add_argument("--random-secrets", type=int, metavar="K",
                    help="play K secrets chosen at random by the computer (repeats allowed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])


def pick_cases(settings: GameSettings, sample: int | None, seed: int,
               random_secrets: int | None = None) -> List[str]:
    """
    Secrets to play, all deterministic by seed:
      - random_secrets=K: K codes drawn independently with random_code
      - sample=K:         K distinct codes of the board, shuffled
      - otherwise:        the whole board in generation order
    """
    rng = random.Random(seed)
    if random_secrets:
        return [random_code(settings.alphabet, settings.length, rng)
                for _ in range(random_secrets)]
    secrets = generate_codes(settings.alphabet, settings.length)
    if sample and sample < settings.universe_size:
        rng.shuffle(secrets)
        return secrets[:sample]
    return secrets


def progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def play_cases(solver, cases: List[str], *, settings: GameSettings, base_seed: int,
               progress: str, label: str) -> List[Dict]:
    """Run every case with `solver`, reporting progress on stderr."""
    mode = progress_mode(progress)
    total = len(cases)
    iterator = tqdm(cases, ncols=80, desc=label, unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0
    for idx, secret in enumerate(iterator, 1):
        # Derive a per-game seed so runs are reproducible and independent
        per_seed = base_seed + idx * 1013904223
        r = run_case(solver, secret, settings=settings, seed=per_seed)
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{label}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()
    return results


def format_summary(solver_id: str, s: Dict) -> str:
    mean = f"{s['mean_guesses']:.3f}" if s["mean_guesses"] is not None else "-"
    worst = s["max_guesses"] if s["max_guesses"] is not None else "-"
    return (f"{solver_id} | cases={s['cases']} | win_rate={s['win_rate']:.3f} "
            f"| mean_guesses={mean} | max_guesses={worst}")


def main():
    """
    Parse CLI args, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="codebreaker — run solver experiments")
    ap.add_argument("--solver", default="minimax",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    add_board_args(ap)
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    settings = GameSettings(args.alphabet, args.length, args.max_tries)
    solver = create_solver(args.solver)
    cases = pick_cases(settings, args.sample, args.seed, args.random_secrets)

    results = play_cases(solver, cases, settings=settings, base_seed=args.seed,
                         progress=args.progress, label=solver.id)

    csv_path, manifest_path = write_run(
        results, Path(args.outdir), settings=settings, config=vars(args),
        solver_id=solver.id,
    )
    print(format_summary(solver.id, summarize(results)))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

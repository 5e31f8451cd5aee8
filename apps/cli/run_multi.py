# apps/cli/run_multi.py
"""
Run multiple solvers in one shot with shared sampling and progress.

Writes per-solver outputs to: <outdir>/<solver_id>/run_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations
import argparse
import logging
from pathlib import Path

from codebreaker.engine import GameSettings
from codebreaker.harness import summarize, write_run
from codebreaker.solvers import create_solver, get_solver_ids

from apps.cli.run import add_board_args, format_summary, pick_cases, play_cases


def main():
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="codebreaker — run many solvers at once")
    ap.add_argument("--solvers", nargs="+", required=True,
                    help=f"list of solver ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="solver ids to skip (only if --solvers ALL)")
    ap.add_argument("--outdir", default="reports/batch")
    add_board_args(ap)
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    settings = GameSettings(args.alphabet, args.length, args.max_tries)

    # 1) shared cases (deterministic by seed)
    cases = pick_cases(settings, args.sample, args.seed, args.random_secrets)

    # 2) expand solvers
    if len(args.solvers) == 1 and args.solvers[0].lower() == "all":
        todo = [s for s in registered if s not in set(args.exclude)]
    else:
        todo = args.solvers
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown solver ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    # 3) run each solver sequentially (shared cases) with progress
    summaries = []
    for sid in todo:
        if args.progress != "off":
            print(f"\n=== Running {sid} on {len(cases)} cases "
                  f"({args.length} pegs, {len(args.alphabet)} colours) ===")
        solver = create_solver(sid)
        results = play_cases(solver, cases, settings=settings, base_seed=args.seed,
                             progress=args.progress, label=sid)
        config = dict(vars(args), solver=sid)
        csv_path, manifest_path = write_run(
            results, outdir / sid, settings=settings, config=config, solver_id=sid,
        )
        summaries.append(format_summary(sid, summarize(results)))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    print()
    for line in summaries:
        print(line)


if __name__ == "__main__":
    main()

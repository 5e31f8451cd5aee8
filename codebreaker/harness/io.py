"""
Report files for a batch of games.

A run writes two files into its output directory:
  run_<id>.csv            one row per game; turn i fills guess_i / fb_i
  run_<id>_manifest.json  CLI config, board, summary and source revision

An empty fb_i next to a filled guess_i is a guess that scored no pegs at
all. Turns that were never played leave both cells empty.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from codebreaker.engine import GameSettings

from .core import summarize

BASE_FIELDS = ["solver", "N", "secret", "success", "guesses", "time_ms", "state"]


def history_fields(max_tries: int) -> List[str]:
    fields: List[str] = []
    for i in range(1, max_tries + 1):
        fields += [f"guess_{i}", f"fb_{i}"]
    return fields


def history_cells(history: Sequence[Tuple[str, str]], max_tries: int) -> Dict[str, str]:
    """Spread (guess, feedback_text) pairs over the fixed per-turn columns."""
    cells = dict.fromkeys(history_fields(max_tries), "")
    for i, (guess, fb) in enumerate(history[:max_tries], start=1):
        cells[f"guess_{i}"] = guess
        cells[f"fb_{i}"] = fb
    return cells


def write_csv(results: List[Dict], path: Path, settings: GameSettings) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=BASE_FIELDS + history_fields(settings.max_tries))
        w.writeheader()
        for r in results:
            w.writerow({
                "solver": r.get("solver_id", "?"),
                "N": settings.length,
                "secret": r["secret"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "state": r.get("state", ""),
                **history_cells(r.get("history", []), settings.max_tries),
            })
    return path


def write_manifest(manifest: Dict, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return path


def write_run(
        results: List[Dict],
        outdir: Path,
        *,
        settings: GameSettings,
        config: Dict,
        solver_id: str,
) -> Tuple[Path, Path]:
    """
    Write the CSV and manifest for one solver's batch under `outdir`.

    Returns (csv_path, manifest_path).
    """
    run_id = timestamp_id()
    csv_path = write_csv(results, outdir / f"run_{run_id}.csv", settings)
    manifest = {
        "run_id": run_id,
        "solver_id": solver_id,
        "git_commit": source_revision(),
        "board": {
            "alphabet": settings.alphabet,
            "length": settings.length,
            "max_tries": settings.max_tries,
            "universe_size": settings.universe_size,
        },
        "config": config,
        "summary": summarize(results),
    }
    manifest_path = write_manifest(manifest, outdir / f"run_{run_id}_manifest.json")
    return csv_path, manifest_path


def timestamp_id() -> str:
    """UTC second-resolution id for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def source_revision() -> str:
    """Short git hash of the working tree, or 'unknown' outside a checkout."""
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True, text=True, check=False,
        )
    except OSError:
        return "unknown"
    return proc.stdout.strip() if proc.returncode == 0 else "unknown"

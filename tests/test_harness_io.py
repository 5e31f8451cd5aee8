import csv
import json
from pathlib import Path

from codebreaker.engine import GameSettings
from codebreaker.harness import run_case, write_csv, write_run
from codebreaker.harness.io import history_cells, timestamp_id
from codebreaker.solvers import create_solver


def test_history_cells_fill_played_turns_only():
    cells = history_cells([("GGRR", ""), ("BBYY", "bw")], max_tries=3)
    assert cells["guess_1"] == "GGRR" and cells["fb_1"] == ""
    assert cells["guess_2"] == "BBYY" and cells["fb_2"] == "bw"
    assert cells["guess_3"] == "" and cells["fb_3"] == ""
    assert len(cells) == 6


def test_write_csv_flattens_history(tmp_path: Path):
    solver = create_solver("naive")
    r = run_case(solver, "GRBY", settings=GameSettings(), seed=0)
    r["solver_id"] = solver.id

    out = write_csv([r], tmp_path / "runs" / "run.csv", GameSettings())
    with out.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))

    assert len(rows) == 1
    row = rows[0]
    assert row["solver"] == "naive" and row["secret"] == "GRBY" and row["N"] == "4"
    assert row["success"] == "True"
    assert row["guess_1"] == "GGGG" and row["fb_1"] == "b"
    last = int(row["guesses"])
    assert row[f"fb_{last}"] == "bbbb"
    if last < 10:
        assert row["guess_10"] == "" and row["fb_10"] == ""


def test_write_run_pairs_csv_with_manifest(tmp_path: Path):
    settings = GameSettings("GR", 2, 5)
    solver = create_solver("minimax")
    results = [dict(run_case(solver, s, settings=settings, seed=0), solver_id="minimax")
               for s in ("GR", "RR")]

    csv_path, manifest_path = write_run(results, tmp_path / "minimax", settings=settings,
                                        config={"seed": 0}, solver_id="minimax")
    assert csv_path.parent == manifest_path.parent == tmp_path / "minimax"
    assert csv_path.name.startswith("run_") and csv_path.suffix == ".csv"
    assert manifest_path.name == csv_path.stem + "_manifest.json"

    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    assert manifest["solver_id"] == "minimax"
    assert manifest["board"] == {"alphabet": "GR", "length": 2, "max_tries": 5, "universe_size": 4}
    assert manifest["config"] == {"seed": 0}
    assert manifest["summary"]["cases"] == 2 and manifest["summary"]["wins"] == 2
    assert isinstance(manifest["git_commit"], str)

    with csv_path.open(newline="", encoding="utf-8") as f:
        assert [row["secret"] for row in csv.DictReader(f)] == ["GR", "RR"]


def test_timestamp_id_is_utc_compact():
    run_id = timestamp_id()
    assert len(run_id) == 16 and run_id[8] == "T" and run_id.endswith("Z")

import csv
import json
import logging
from pathlib import Path

import pytest
from scripts.solve import main as solve_main
from scripts.run_batch import main as batch_main

EXAMPLES = Path(__file__).resolve().parent.parent / "levels" / "examples"


@pytest.fixture(autouse=True)
def _drop_handlers():
    yield
    for name in ("pushblock_search", "pushblock_core"):
        logging.getLogger(name).handlers.clear()


def test_solve_prints_trace_and_cost(tmp_path, capsys):
    dump = tmp_path / "out" / "trace.jsonl"
    rc = solve_main([f"{EXAMPLES / 'classic.txt'}#1", "--equivalence", "exact",
                     "--log-level", "error", "--dump-trace", str(dump)])
    assert rc == 0
    out = capsys.readouterr().out
    lines = out.rstrip("\n").splitlines()
    assert lines[-1] == "9"
    assert lines[0] == "xxxxxxxx"
    assert out.count("\n\n") == 6  # six states in the trace

    recs = [json.loads(ln) for ln in dump.read_text(encoding="utf-8").splitlines()]
    assert recs[0]["parent"] is None
    assert all("blocks" in r for r in recs)


def test_solve_builtin_level(capsys):
    assert solve_main(["--log-level", "error"]) == 0
    assert capsys.readouterr().out.strip().splitlines()[-1].isdigit()


def test_solve_reports_failure(tmp_path, capsys):
    p = tmp_path / "stuck.txt"
    p.write_text("11111\n18201\n11111\n10041\n11111\n", encoding="utf-8")
    assert solve_main([str(p), "--log-level", "error"]) == 1
    assert "failed to solve" in capsys.readouterr().out


def test_run_batch_writes_csv(tmp_path, capsys):
    lst = tmp_path / "list.txt"
    lst.write_text(
        "# two levels and a broken id\n"
        f"{EXAMPLES / 'classic.txt'}#1\n"
        f"{EXAMPLES / 'glyphs.txt'}#0\n"
        f"{EXAMPLES / 'classic.txt'}#99\n",
        encoding="utf-8",
    )
    out = tmp_path / "res" / "batch.csv"
    batch_main(["--list", str(lst), "--out", str(out), "--jobs", "1"])
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    by_id = {r["level_id"]: r for r in rows}
    assert by_id[f"{EXAMPLES / 'classic.txt'}#1"]["total_cost"] == "9"
    assert by_id[f"{EXAMPLES / 'glyphs.txt'}#0"]["success"] == "True"
    assert by_id[f"{EXAMPLES / 'classic.txt'}#99"]["success"] == "False"
    assert "done: 2/3 solved" in capsys.readouterr().out

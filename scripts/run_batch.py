from __future__ import annotations
import argparse, csv, os, time
from typing import Dict
from multiprocessing import Pool, cpu_count
from tqdm import tqdm

from pushblock_core.levels.resolve import load_level_by_id, read_level_ids
from pushblock_search.ucs import uniform_cost_search

FIELDS = ["level_id", "equivalence", "status", "success", "total_cost", "pushes", "expanded", "generated", "runtime"]


def _run_one(args_tuple) -> Dict[str, object]:
    level_id, equivalence, time_limit, node_limit = args_tuple
    try:
        s = load_level_by_id(level_id)
        res = uniform_cost_search(s, equivalence=equivalence, node_limit=node_limit, time_limit_s=time_limit)
        row = res.as_dict()
    except (OSError, ValueError, IndexError) as e:
        row = {"status": f"error: {e}", "success": False, "total_cost": -1, "pushes": -1,
               "expanded": 0, "generated": 0, "runtime": 0.0}
    row["level_id"] = level_id
    row["equivalence"] = equivalence
    return row


def main(argv=None):
    p = argparse.ArgumentParser(description="Batch solver runs → CSV (parallel over levels)")
    p.add_argument("--list", required=True, help="file with one level id (path#idx) per line")
    p.add_argument("--equivalence", default="component", choices=["component", "exact"])
    p.add_argument("--out", default="results/batch.csv")
    p.add_argument("--time_limit", type=float, default=10.0)
    p.add_argument("--node_limit", type=int, default=200000)
    p.add_argument("--jobs", type=int, default=0, help="processes (0→cpu_count)")
    args = p.parse_args(argv)

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    level_ids = read_level_ids(args.list)
    jobs = args.jobs or cpu_count()
    payload = [(lid, args.equivalence, args.time_limit, args.node_limit) for lid in level_ids]

    started = time.time()
    if jobs == 1:
        rows = [_run_one(t) for t in tqdm(payload, desc="Solving", unit="level")]
    else:
        with Pool(processes=jobs) as pool:
            rows = list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload), desc="Solving", unit="level"))

    with open(args.out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    solved = sum(1 for r in rows if r["success"])
    print(f"done: {solved}/{len(rows)} solved → {args.out}; total_time={time.time()-started:.2f}s; jobs={jobs}")


if __name__ == "__main__":
    main()

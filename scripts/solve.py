from __future__ import annotations
import argparse
import json
import os
import sys

from pushblock_core.parser import parse_level_str
from pushblock_core.levels.resolve import load_level_by_id
from pushblock_core.render import render_trace
from pushblock_core.utils.logging_utils import setup_logger, get_level_from_string
from pushblock_search.config import load_config
from pushblock_search.ucs import uniform_cost_search

LVL = """
1111111
1801001
1021001
1000041
1111111
"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Solve one push-block puzzle (cheapest walk + push sequence)")
    p.add_argument("level_id", nargs="?", default=None,
                   help="Level id like 'path/to/pack.txt#idx'; built-in level if omitted.")
    p.add_argument("--config", type=str, default=None, help="YAML config (see configs/solve.yaml)")
    p.add_argument("--equivalence", choices=["component", "exact"], default=None,
                   help="state dedup: same player area (component) or same player cell (exact)")
    p.add_argument("--node-limit", type=int, default=None)
    p.add_argument("--time-limit", type=float, default=None, help="seconds")
    p.add_argument("--log-level", type=str, default=None, help="debug|info|warning|error")
    p.add_argument("--dump-trace", type=str, default=None,
                   help="write every generated state to this JSONL file")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)

    level = args.log_level or cfg.logging.level
    setup_logger("pushblock_search", get_level_from_string(level), cfg.logging.file)
    setup_logger("pushblock_core", get_level_from_string(level), cfg.logging.file)

    if args.level_id is not None:
        s = load_level_by_id(args.level_id)
    else:
        s = parse_level_str(LVL)

    res = uniform_cost_search(
        s,
        equivalence=args.equivalence or cfg.search.equivalence,
        node_limit=args.node_limit if args.node_limit is not None else cfg.search.node_limit,
        time_limit_s=args.time_limit if args.time_limit is not None else cfg.search.time_limit_s,
    )

    if args.dump_trace and res.arena is not None:
        out_dir = os.path.dirname(args.dump_trace)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.dump_trace, "w", encoding="utf-8") as f:
            for rec in res.arena.to_records():
                f.write(json.dumps(rec) + "\n")

    if not res.solved:
        print(f"failed to solve ({res.status.value}, expanded={res.expanded})")
        return 1

    sys.stdout.write(render_trace(res.trace))
    print(res.total_cost)
    return 0


if __name__ == "__main__":
    sys.exit(main())

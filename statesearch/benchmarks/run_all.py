# statesearch/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..algorithms import STRATEGIES
from ..core.logs import configure_logging
from ..core.problem import State
from ..problems.graph import romania
from ..problems.grid import make_grid_world

logger = logging.getLogger(__name__)

# ---- Tunables (overridable via environment variables) -----------------------
MAX_EXPANSIONS = os.getenv("STATESEARCH_MAX_EXPANSIONS")       # unset = unbounded
TIME_LIMIT_S   = os.getenv("STATESEARCH_TIME_LIMIT")           # seconds, unset = unbounded
LOG_LEVEL      = os.getenv("STATESEARCH_LOG_LEVEL", "WARNING")

PROBLEMS: Dict[str, Callable[[], State]] = {
    "romania": romania,
    "grid": lambda: make_grid_world().start((0, 0)),
}

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _opt_int(v: Optional[str]) -> Optional[int]:
    return int(v) if v not in (None, "") else None

def _opt_float(v: Optional[str]) -> Optional[float]:
    return float(v) if v not in (None, "") else None

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="statesearch-bench",
        description="Run every search strategy on the bundled example problems.",
    )
    p.add_argument("--problem", choices=sorted(PROBLEMS), action="append",
                   help="problem to run (repeatable; default: all)")
    p.add_argument("--strategy", choices=sorted(STRATEGIES), action="append",
                   help="strategy to run (repeatable; default: all)")
    p.add_argument("--max-expansions", type=int, default=_opt_int(MAX_EXPANSIONS))
    p.add_argument("--time-limit", type=float, default=_opt_float(TIME_LIMIT_S),
                   help="wall-clock seconds per run")
    p.add_argument("--indexed", action="store_true",
                   help="use heap/hash containers instead of linear scans")
    p.add_argument("--dedup-frontier", action="store_true",
                   help="also drop children already waiting in the frontier")
    p.add_argument("--trace-memory", action="store_true",
                   help="record peak memory with tracemalloc")
    p.add_argument("--out", type=Path, default=Path("results.json"),
                   help="where to write the JSON results")
    p.add_argument("--log-level", default=LOG_LEVEL)
    p.add_argument("--log-file", default=None)
    return p

def run_benchmarks(args: argparse.Namespace) -> List[dict]:
    problems = args.problem or sorted(PROBLEMS)
    strategies = args.strategy or list(STRATEGIES)
    options = dict(
        max_expansions=args.max_expansions,
        time_limit_s=args.time_limit,
        indexed=args.indexed,
        dedup_frontier=args.dedup_frontier,
        trace_memory=args.trace_memory,
    )

    rows = []
    for pname in problems:
        for sname in strategies:
            print(f"→ Running {sname} on {pname} ...")
            r = STRATEGIES[sname](PROBLEMS[pname](), **options)
            print(
                f"  {r.algo}: "
                f"{'OK' if r.success else r.outcome.value.upper()} "
                f"cost={r.cost} "
                f"expanded={r.nodes_expanded}, "
                f"time={_fmt_time(r.time_s)}s"
            )
            row = r.to_row()
            row["problem"] = pname
            rows.append(row)
    return rows

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    rows = run_benchmarks(args)
    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    try:
        args.out.write_text(json.dumps(out, indent=2))
    except OSError as e:
        logger.error("could not write %s: %s", args.out, e)
        return 1
    logger.info("wrote %s", args.out)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

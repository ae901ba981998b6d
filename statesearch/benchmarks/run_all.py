# statesearch/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import os
import time
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

import numpy as np

from ..algorithms.astar import a_star
from ..algorithms.bfs import breadth_first
from ..algorithms.branch_and_bound import branch_and_bound_max
from ..algorithms.dfs import depth_first
from ..algorithms.ucs import dijkstra
from ..core.filters import hash_filter, id_filter
from ..core.metrics import SearchResult, counted, measure_run
from ..core.search import find
from ..problems.grid import make_grid_problem
from ..problems.knapsack import random_knapsack
from ..problems.romania import romania_problem

# ---- Tunables (overridable via environment variables) -----------------------
REPEATS        = int(os.getenv("BENCH_REPEATS", "3"))     # timing repeats per run
GRID_ROWS      = int(os.getenv("GRID_ROWS", "20"))
GRID_COLS      = int(os.getenv("GRID_COLS", "30"))
KNAPSACK_ITEMS = int(os.getenv("KNAPSACK_ITEMS", "14"))
KNAPSACK_SEED  = int(os.getenv("KNAPSACK_SEED", "7"))

# A run returns (cost or None, states visited)
Run = Callable[[], Tuple[Optional[float], int]]

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _path_runs(problem) -> List[Tuple[str, Run]]:
    """The four traversals, each stopping at the first goal state."""
    def run(make_states):
        def go():
            states = counted(make_states())
            goal = find(states, problem.is_goal)
            return (None if goal is None else problem.cost(goal)), states.count
        return go

    start, expand, key = problem.start_state(), problem.expand, problem.key
    return [
        ("BFS", run(lambda: breadth_first(start, expand, hash_filter(key)))),
        ("DFS", run(lambda: depth_first(start, expand, hash_filter(key)))),
        ("Dijkstra", run(lambda: dijkstra(start, expand, hash_filter(key), problem.cost))),
        ("A*", run(lambda: a_star(start, expand, hash_filter(key), problem.cost, problem.heuristic))),
    ]

def _knapsack_runs(problem) -> List[Tuple[str, Run]]:
    def run(bound):
        def go():
            seen = id_filter()
            best = branch_and_bound_max(
                problem.start_state(), problem.expand, seen, problem.value, bound,
            )
            return problem.value(best), len(seen)
        return go

    return [
        ("B&B(additive)", run(problem.additive_bound)),
        ("B&B(fits)", run(problem.upper_bound)),
    ]

def _load_runs() -> List[Tuple[str, str, Run]]:
    runs: List[Tuple[str, str, Run]] = []
    grid = make_grid_problem(GRID_ROWS, GRID_COLS)
    for name, fn in _path_runs(grid):
        runs.append((name, f"grid{GRID_ROWS}x{GRID_COLS}", fn))
    for name, fn in _path_runs(romania_problem()):
        runs.append((name, "romania", fn))
    for name, fn in _knapsack_runs(random_knapsack(KNAPSACK_ITEMS, KNAPSACK_SEED)):
        runs.append((name, f"knapsack{KNAPSACK_ITEMS}", fn))
    return runs

def measure(name: str, problem: str, fn: Run, repeats: int = REPEATS) -> SearchResult:
    """Runs fn `repeats` times; reports median time and worst peak memory."""
    ms = [measure_run(fn) for _ in range(max(1, repeats))]
    last = ms[-1]
    return SearchResult(
        algo=name,
        problem=problem,
        success=last.cost is not None,
        cost=last.cost,
        states_visited=last.states_visited,
        time_s=float(np.median([m.time_s for m in ms])),
        peak_kb=int(np.max([m.peak_kb for m in ms])),
    )

def main(argv: Optional[List[str]] = None, out_path: Optional[Path] = None) -> int:
    ap = argparse.ArgumentParser(description="Run every search on the sample problems.")
    ap.add_argument("--out", type=Path, default=None, help="results JSON (default: next to this script)")
    ap.add_argument("--repeats", type=int, default=REPEATS)
    args = ap.parse_args(argv)

    runs = _load_runs()

    rows: List[dict] = []
    for name, problem, fn in runs:
        print(f"→ Running {name} on {problem} ...")
        try:
            r = measure(name, problem, fn, repeats=args.repeats)
            print(
                f"  {r.algo}: "
                f"{'OK' if r.success else 'FAIL'} "
                f"cost={r.cost} "
                f"visited={r.states_visited}, "
                f"time={_fmt_time(r.time_s)}s"
            )
        except Exception as e:
            print(f"  {name}: ERROR {repr(e)}")
            r = SearchResult(name, problem, False, None, 0, 0.0, 0, error=repr(e))
        rows.append(r.to_row())

    out: dict[str, Any] = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    # Save JSON next to this script unless told otherwise
    out_path = out_path or args.out or Path(__file__).with_name("results.json")
    out_path.write_text(json.dumps(out, indent=2))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

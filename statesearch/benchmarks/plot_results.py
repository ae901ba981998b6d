# statesearch/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

HERE = Path(__file__).parent

def _load_rows(results_json: Path):
    if not results_json.exists():
        raise SystemExit(f"Missing {results_json}. Run: python -m statesearch.benchmarks.run_all")
    data = json.loads(results_json.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)

def _bar(ax, rows, metric, title, ylabel):
    labels = [r["algo"] for r in rows]
    vals = [r.get(metric) for r in rows]

    # Positions for bars and ticks
    x = list(range(len(labels)))
    ax.bar(x, [v or 0 for v in vals])
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=20, ha="right")

    top = max((v for v in vals if v is not None), default=1) or 1
    for xi, v in zip(x, vals):
        if v is None:
            label, y = "n/a", 0
        elif isinstance(v, float):
            label, y = (f"{v:.4f}" if v < 0.01 else f"{v:.3f}"), v
        else:
            label, y = f"{v}", v
        ax.text(xi, y + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def _fmt_table(rows):
    # Markdown table
    lines = [
        "| Algorithm | Problem | Cost | States Visited | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)):
            return f"{x:.6f}" if isinstance(x, float) else f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {r['problem']} | {fnum(r.get('cost'))} | "
            f"{fnum(r.get('states_visited'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def _by_problem(rows):
    groups = {}
    for r in rows:
        groups.setdefault(r["problem"], []).append(r)
    return groups

def _metric_figure(rows, metric, title, ylabel):
    """One panel per problem, so grid steps, road km and knapsack values never share an axis."""
    groups = _by_problem(rows)
    fig, axs = plt.subplots(1, len(groups), figsize=(4 * len(groups), 4), squeeze=False)
    for ax, (problem, group) in zip(axs[0], groups.items()):
        _bar(ax, _sorted(group, metric), metric, problem, ylabel)
    fig.suptitle(title)
    fig.tight_layout()
    return fig

def _fig_to_png_bytes(fig):
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    plt.close(fig)
    return buf.getvalue()

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Tabulate and plot benchmark results.")
    ap.add_argument("--results", type=Path, default=HERE / "results.json")
    ap.add_argument("--out-dir", type=Path, default=HERE)
    args = ap.parse_args(argv)

    rows = _load_rows(args.results)
    out_dir = args.out_dir
    out_dir.mkdir(parents=True, exist_ok=True)

    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(rows))
    print(f"Wrote {md_path}")

    for metric, title, ylabel, fname in (
        ("states_visited", "States Visited (lower is better)", "states", "states_visited.png"),
        ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
        ("cost", "Path Cost / Knapsack Value", "cost", "cost.png"),
    ):
        fig = _metric_figure(rows, metric, title, ylabel)
        (out_dir / fname).write_bytes(_fig_to_png_bytes(fig))
        print(f"Wrote {out_dir / fname}")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())

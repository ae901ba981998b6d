from __future__ import annotations

import json

from statesearch.benchmarks import plot_results, run_all
from statesearch.core.metrics import measure_run
from statesearch.problems.knapsack import random_knapsack


def small_run(monkeypatch, tmp_path):
    monkeypatch.setattr(run_all, "GRID_ROWS", 6)
    monkeypatch.setattr(run_all, "GRID_COLS", 8)
    monkeypatch.setattr(run_all, "KNAPSACK_ITEMS", 8)
    out = tmp_path / "results.json"
    assert run_all.main(["--out", str(out), "--repeats", "1"]) == 0
    return json.loads(out.read_text())["results"]


def test_run_all_writes_a_row_per_run(monkeypatch, tmp_path, capsys):
    rows = small_run(monkeypatch, tmp_path)
    assert len(rows) == 4 + 4 + 2
    assert all(r["success"] and r["error"] is None for r in rows)
    assert "→ Running BFS on grid6x8" in capsys.readouterr().out

    by_key = {(r["algo"], r["problem"]): r for r in rows}
    for algo in ("BFS", "Dijkstra", "A*"):
        assert by_key[(algo, "grid6x8")]["cost"] == 12
    for algo in ("Dijkstra", "A*"):
        assert by_key[(algo, "romania")]["cost"] == 418

    best = random_knapsack(8, run_all.KNAPSACK_SEED).brute_force_best()
    assert by_key[("B&B(additive)", "knapsack8")]["cost"] == best
    assert by_key[("B&B(fits)", "knapsack8")]["cost"] == best


def test_run_all_explicit_out_path_wins(monkeypatch, tmp_path):
    monkeypatch.setattr(run_all, "KNAPSACK_ITEMS", 6)
    out = tmp_path / "direct.json"
    assert run_all.main(["--repeats", "1"], out_path=out) == 0
    assert json.loads(out.read_text())["results"]


def test_measure_run_reports_answer_count_and_costs():
    m = measure_run(lambda: (42, 7))
    assert (m.cost, m.states_visited) == (42, 7)
    assert m.time_s >= 0.0
    assert m.peak_kb >= 0


def test_measure_run_sees_allocations_made_by_the_search():
    def run():
        block = [0] * 200_000
        return len(block), 1

    assert measure_run(run).peak_kb >= 1000


def test_measure_records_failure_as_unsuccessful():
    r = run_all.measure("noop", "none", lambda: (None, 3), repeats=2)
    assert not r.success
    assert r.states_visited == 3
    assert r.time_s >= 0.0


def test_metric_figure_gives_each_problem_its_own_axes():
    rows = [
        {"algo": "BFS", "problem": "grid", "cost": 12},
        {"algo": "A*", "problem": "grid", "cost": 12},
        {"algo": "A*", "problem": "romania", "cost": 418},
        {"algo": "B&B(fits)", "problem": "knapsack", "cost": 90},
    ]
    fig = plot_results._metric_figure(rows, "cost", "Cost", "cost")
    axes = fig.get_axes()
    assert [ax.get_title() for ax in axes] == ["grid", "romania", "knapsack"]
    assert [len(ax.patches) for ax in axes] == [2, 1, 1]


def test_plot_results_writes_table_and_charts(monkeypatch, tmp_path):
    small_run(monkeypatch, tmp_path)
    out_dir = tmp_path / "plots"
    rc = plot_results.main(["--results", str(tmp_path / "results.json"), "--out-dir", str(out_dir)])
    assert rc == 0
    table = (out_dir / "results.md").read_text()
    assert "| A* | romania |" in table
    for name in ("states_visited.png", "time.png", "cost.png"):
        assert (out_dir / name).stat().st_size > 0

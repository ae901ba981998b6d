# statesearch/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple
import time, tracemalloc

@dataclass
class SearchResult:
    algo: str
    problem: str
    success: bool
    cost: Optional[float]
    states_visited: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None

    def to_row(self) -> dict:
        return asdict(self)


class counted:
    """Pass-through iterator that counts how many states were pulled."""
    def __init__(self, states: Iterable[Any]):
        self._it = iter(states)
        self.count = 0

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        s = next(self._it)
        self.count += 1
        return s


@dataclass
class RunMeasurement:
    """One search run: its answer, how many states it touched, and what it cost to get there."""
    cost: Optional[Any]
    states_visited: int
    time_s: float
    peak_kb: int


def measure_run(run: Callable[[], Tuple[Optional[Any], int]]) -> RunMeasurement:
    """
    Calls run() once under tracemalloc. run returns (cost or None, states visited).
    Peak memory covers only allocations made during the search.
    """
    tracemalloc.start()
    try:
        t0 = time.perf_counter()
        cost, visited = run()
        elapsed = time.perf_counter() - t0
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    return RunMeasurement(cost, visited, elapsed, peak // 1024)

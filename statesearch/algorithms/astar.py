# statesearch/algorithms/astar.py
from __future__ import annotations
from typing import Any, Callable, Iterator
from .ucs import dijkstra
from ..core.search import Expand, Filter

def a_star(
    start: Any,
    expand: Expand,
    filter: Filter,
    cost: Callable[[Any], Any],
    heuristic: Callable[[Any], Any],
) -> Iterator[Any]:
    """
    Search a state space min cost-plus-heuristic first.
    Optimal only if heuristic never overestimates; that is not checked.
    """
    def f(state):
        return cost(state) + heuristic(state)
    return dijkstra(start, expand, filter, f)

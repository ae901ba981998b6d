# statesearch/algorithms/ucs.py
# Uniform Cost Search (Dijkstra) on the generic driver with a cost-ordered frontier.
from __future__ import annotations
from typing import Any, Callable, Iterator
from ..core.frontiers import CostQueue
from ..core.search import Expand, Filter, search

def dijkstra(start: Any, expand: Expand, filter: Filter, cost: Callable[[Any], Any]) -> Iterator[Any]:
    """
    Search a state space min-cost first.

    cost(state) is the total cost accumulated to reach state, so states must
    carry it (e.g. a running sum). With non-negative edge weights states come
    out in non-decreasing cost order.
    """
    return search(CostQueue(cost), start, expand, filter)

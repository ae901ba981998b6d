# statesearch/algorithms/bfs.py
from __future__ import annotations
from typing import Any, Iterator
from ..core.filters import no_filter
from ..core.frontiers import FIFOQueue
from ..core.search import Expand, Filter, search

def breadth_first(start: Any, expand: Expand, filter: Filter = no_filter) -> Iterator[Any]:
    """
    Search a state space breadth first.

    On an unweighted graph with a dedup filter, states come out in
    non-decreasing distance from start. Without one, cycles repeat forever.
    """
    return search(FIFOQueue(), start, expand, filter)

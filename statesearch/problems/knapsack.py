# statesearch/problems/knapsack.py
# 0/1 knapsack as a binary decision tree: at depth i, item i is skipped or taken.
from __future__ import annotations
import itertools
from dataclasses import dataclass
from typing import Callable, List, Sequence

import numpy as np


@dataclass(frozen=True)
class Item:
    weight: int
    value: int


@dataclass(frozen=True)
class KnapsackState:
    index: int = 0
    weight: int = 0
    value: int = 0


class KnapsackProblem:
    def __init__(self, items: Sequence[Item], capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        for it in items:
            if it.weight < 0 or it.value < 0:
                raise ValueError(f"item weights and values must be non-negative: {it!r}")
        self.items = list(items)
        self.capacity = capacity
        # suffix[i] = total value of items[i:]
        self._suffix = [0] * (len(self.items) + 1)
        for i in range(len(self.items) - 1, -1, -1):
            self._suffix[i] = self._suffix[i + 1] + self.items[i].value

    def start_state(self) -> KnapsackState:
        return KnapsackState()

    def expand(self, state: KnapsackState, emit: Callable[[KnapsackState], None]) -> None:
        if state.index == len(self.items):
            return
        it = self.items[state.index]
        emit(KnapsackState(state.index + 1, state.weight, state.value))
        if state.weight + it.weight <= self.capacity:
            emit(KnapsackState(state.index + 1, state.weight + it.weight, state.value + it.value))

    def value(self, state: KnapsackState) -> int:
        return state.value

    def additive_bound(self, state: KnapsackState) -> int:
        """Current value plus everything still undecided, ignoring capacity."""
        return state.value + self._suffix[state.index]

    def upper_bound(self, state: KnapsackState) -> int:
        """Current value plus every remaining item that fits on its own."""
        room = self.capacity - state.weight
        return state.value + sum(it.value for it in self.items[state.index:] if it.weight <= room)

    def brute_force_best(self) -> int:
        best = 0
        for mask in itertools.product((False, True), repeat=len(self.items)):
            chosen = [it for it, take in zip(self.items, mask) if take]
            if sum(it.weight for it in chosen) <= self.capacity:
                best = max(best, sum(it.value for it in chosen))
        return best


def random_items(n: int, seed: int = 0, max_weight: int = 20, max_value: int = 50) -> List[Item]:
    rng = np.random.default_rng(seed)
    weights = rng.integers(1, max_weight + 1, size=n)
    values = rng.integers(1, max_value + 1, size=n)
    return [Item(int(w), int(v)) for w, v in zip(weights, values)]


def random_knapsack(n: int, seed: int = 0) -> KnapsackProblem:
    """n random items; capacity is half their total weight."""
    items = random_items(n, seed)
    return KnapsackProblem(items, capacity=sum(it.weight for it in items) // 2)

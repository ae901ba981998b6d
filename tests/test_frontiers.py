from __future__ import annotations

import pytest

from statesearch.core.frontiers import CostQueue, FIFOQueue, LIFOStack


class Opaque:
    """No ordering defined, so the cost queue must never compare these."""

    def __init__(self, tag: str, cost: int):
        self.tag = tag
        self.cost = cost


def test_fifo_pops_in_insertion_order():
    q = FIFOQueue()
    for x in [3, 1, 2]:
        q.push(x)
    assert [q.pop() for _ in range(3)] == [3, 1, 2]
    assert not q


def test_lifo_pops_most_recent_first():
    s = LIFOStack()
    for x in [3, 1, 2]:
        s.push(x)
    assert [s.pop() for _ in range(3)] == [2, 1, 3]


def test_cost_queue_pops_minimum_cost():
    q = CostQueue(lambda x: x % 10)
    for x in [15, 21, 9, 33, 40]:
        q.push(x)
    assert len(q) == 5
    assert [q.pop() for _ in range(5)] == [40, 21, 33, 15, 9]


def test_cost_queue_evaluates_cost_once_per_push():
    calls = []

    def cost(x):
        calls.append(x)
        return x

    q = CostQueue(cost)
    for x in [5, 2, 8, 1]:
        q.push(x)
    while q:
        q.pop()
    assert sorted(calls) == [1, 2, 5, 8]


def test_cost_queue_ties_do_not_compare_states():
    q = CostQueue(lambda s: s.cost)
    items = [Opaque("a", 1), Opaque("b", 1), Opaque("c", 0), Opaque("d", 1)]
    for it in items:
        q.push(it)
    out = [q.pop() for _ in range(4)]
    assert out[0].tag == "c"
    # tie order among equal costs is unspecified
    assert {o.tag for o in out[1:]} == {"a", "b", "d"}


@pytest.mark.parametrize("make", [FIFOQueue, LIFOStack, lambda: CostQueue(lambda x: x)])
def test_pop_from_empty_raises_index_error(make):
    with pytest.raises(IndexError):
        make().pop()

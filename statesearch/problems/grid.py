# statesearch/problems/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Set, Tuple

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}

@dataclass(frozen=True)
class GridState:
    pos: Coord
    steps: int = 0

class GridProblem:
    """
    4-neighbor grid pathfinding with unit costs.

    - State: GridState(pos, steps); steps is the path length so far
    - expand(s, emit): one successor per in-bounds, non-wall neighbour
    - key(s): s.pos, for hash_filter dedup
    - cost(s): s.steps
    - heuristic(s): Manhattan distance (admissible on 4-neighbor grid)
    """
    def __init__(self, rows: int, cols: int, start: Coord, goal: Coord, walls: Set[Coord] | None = None):
        self.rows = rows
        self.cols = cols
        self.walls = walls or set()
        for name, c in (("start", start), ("goal", goal)):
            if not self.open(c):
                raise ValueError(f"{name} {c!r} is off the grid or on a wall")
        self.start = start
        self.goal = goal

    def open(self, c: Coord) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols and c not in self.walls

    def start_state(self) -> GridState:
        return GridState(self.start)

    def expand(self, state: GridState, emit: Callable[[GridState], None]) -> None:
        r, c = state.pos
        for dr, dc in _MOVES.values():
            nxt = (r + dr, c + dc)
            if self.open(nxt):
                emit(GridState(nxt, state.steps + 1))

    def key(self, state: GridState) -> Coord:
        return state.pos

    def cost(self, state: GridState) -> int:
        return state.steps

    def heuristic(self, state: GridState) -> int:
        r, c = state.pos
        gr, gc = self.goal
        return abs(r - gr) + abs(c - gc)

    def is_goal(self, state: GridState) -> bool:
        return state.pos == self.goal

def make_grid_problem(rows: int = 5, cols: int = 7) -> GridProblem:
    if (rows, cols) == (5, 7):
        # Example: 5x7 grid, a few walls
        walls = {(1,3), (2,3), (3,3), (3,4)}
    else:
        # Wall down the middle column, open only on the top row
        walls = {(r, cols // 2) for r in range(1, rows)} if cols >= 3 else set()
    return GridProblem(rows=rows, cols=cols, start=(0,0), goal=(rows-1, cols-1), walls=walls)

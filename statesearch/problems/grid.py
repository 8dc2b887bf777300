# statesearch/problems/grid.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from ..core.problem import Expansion

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}


@dataclass(frozen=True)
class GridWorld:
    """
    4-neighbour grid pathfinding with unit costs.

    - State: (row, col) plus the moves taken so far
    - moves: subset of {'Up','Down','Left','Right'} that stay in-bounds and off walls
    - goal: the single goal cell
    - heuristic: Manhattan distance (admissible and consistent on a 4-neighbour grid)
    """
    rows: int
    cols: int
    goal: Coord
    walls: FrozenSet[Coord] = field(default_factory=frozenset)

    def passable(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols and cell not in self.walls

    def start(self, cell: Coord) -> "GridState":
        if not self.passable(cell):
            raise ValueError(f"start cell {cell} is outside the grid or a wall")
        return GridState(self, cell)


@dataclass(frozen=True)
class GridState:
    world: GridWorld = field(repr=False)
    cell: Coord
    moves: Tuple[str, ...] = ()

    def expand(self) -> Expansion:
        if self.cell == self.world.goal:
            return Expansion.goal()
        r, c = self.cell
        children = []
        for name, (dr, dc) in _MOVES.items():
            nxt = (r + dr, c + dc)
            if self.world.passable(nxt):
                children.append(GridState(self.world, nxt, self.moves + (name,)))
        return Expansion.successors(children)

    def heuristic(self) -> float:
        r, c = self.cell
        gr, gc = self.world.goal
        return float(abs(r - gr) + abs(c - gc))

    def path(self) -> Tuple[str, ...]:
        return self.moves

    def cost(self) -> float:
        return float(len(self.moves))

    def equals(self, other) -> bool:
        return isinstance(other, GridState) and other.cell == self.cell

    def key(self) -> Coord:
        return self.cell


def make_grid_world() -> GridWorld:
    # Example: 5x7 grid, a few walls
    walls = frozenset({(1, 3), (2, 3), (3, 3), (3, 4)})
    return GridWorld(rows=5, cols=7, goal=(4, 6), walls=walls)

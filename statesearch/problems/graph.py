# statesearch/problems/graph.py
# Explicit weighted-graph states: a small collaborator used by the tests and
# benchmarks to exercise the capability contract. Actions are neighbour names.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Hashable, Iterable, Mapping, Optional, Tuple

from ..core.problem import Expansion


@dataclass(frozen=True)
class Graph:
    """Directed weighted graph with goal nodes and an optional heuristic table."""
    edges: Mapping[Hashable, Mapping[Hashable, float]]
    goals: FrozenSet[Hashable] = frozenset()
    h: Mapping[Hashable, float] = field(default_factory=dict)

    @classmethod
    def undirected(cls, edges: Mapping[Hashable, Mapping[Hashable, float]],
                   goals: Iterable[Hashable] = (), h: Optional[Mapping[Hashable, float]] = None) -> "Graph":
        both: Dict[Hashable, Dict[Hashable, float]] = {}
        for a, nbrs in edges.items():
            both.setdefault(a, {})
            for b, w in nbrs.items():
                both[a][b] = w
                both.setdefault(b, {})[a] = w
        return cls(both, frozenset(goals), dict(h or {}))

    def neighbours(self, node: Hashable) -> Iterable[Tuple[Hashable, float]]:
        return self.edges.get(node, {}).items()

    def start(self, node: Hashable) -> "GraphState":
        return GraphState(self, node)


class GraphState:
    """Position in a Graph plus the path and cost taken to reach it."""
    __slots__ = ("graph", "node", "_path", "_cost")

    def __init__(self, graph: Graph, node: Hashable, path: Tuple[Hashable, ...] = (), cost: float = 0.0):
        self.graph = graph
        self.node = node
        self._path = path
        self._cost = float(cost)

    def expand(self) -> Expansion:
        if self.node in self.graph.goals:
            return Expansion.goal()
        return Expansion.successors(
            GraphState(self.graph, nbr, self._path + (nbr,), self._cost + float(w))
            for nbr, w in self.graph.neighbours(self.node)
        )

    def heuristic(self) -> float:
        return float(self.graph.h.get(self.node, 0.0))

    def path(self) -> Tuple[Hashable, ...]:
        return self._path

    def cost(self) -> float:
        return self._cost

    def equals(self, other) -> bool:
        return isinstance(other, GraphState) and other.graph is self.graph and other.node == self.node

    def key(self) -> Hashable:
        return self.node

    def __repr__(self) -> str:
        return f"GraphState({self.node!r}, cost={self._cost:g})"


# --- Romania road map (AIMA Fig. 3.1) ------------------------------------------

# Road distances (bidirectional)
ROMANIA_ROADS: Dict[str, Dict[str, int]] = {
    "Arad": {"Zerind": 75, "Sibiu": 140, "Timisoara": 118},
    "Zerind": {"Oradea": 71},
    "Oradea": {"Sibiu": 151},
    "Sibiu": {"Fagaras": 99, "Rimnicu Vilcea": 80},
    "Timisoara": {"Lugoj": 111},
    "Lugoj": {"Mehadia": 70},
    "Mehadia": {"Drobeta": 75},
    "Drobeta": {"Craiova": 120},
    "Craiova": {"Rimnicu Vilcea": 146, "Pitesti": 138},
    "Rimnicu Vilcea": {"Pitesti": 97},
    "Fagaras": {"Bucharest": 211},
    "Pitesti": {"Bucharest": 101},
    "Bucharest": {"Giurgiu": 90, "Urziceni": 85},
    "Urziceni": {"Vaslui": 142, "Hirsova": 98},
    "Hirsova": {"Eforie": 86},
    "Vaslui": {"Iasi": 92},
    "Iasi": {"Neamt": 87},
}

# Straight-line distance to Bucharest (AIMA Fig. 3.16)
SLD_TO_BUCHAREST: Dict[str, int] = {
    "Arad": 366, "Zerind": 374, "Oradea": 380, "Sibiu": 253, "Timisoara": 329,
    "Lugoj": 244, "Mehadia": 241, "Drobeta": 242, "Craiova": 160, "Rimnicu Vilcea": 193,
    "Fagaras": 176, "Pitesti": 100, "Bucharest": 0, "Giurgiu": 77, "Urziceni": 80,
    "Hirsova": 151, "Eforie": 161, "Vaslui": 199, "Iasi": 226, "Neamt": 234,
}


def romania(start: str = "Arad", goal: str = "Bucharest") -> GraphState:
    """Start state for the route-finding problem. The straight-line heuristic
    is only admissible for goal == "Bucharest"; other goals get h = 0."""
    h = SLD_TO_BUCHAREST if goal == "Bucharest" else {}
    graph = Graph.undirected(ROMANIA_ROADS, goals=[goal], h=h)
    if start not in graph.edges:
        raise ValueError(f"unknown city {start!r}")
    return graph.start(start)

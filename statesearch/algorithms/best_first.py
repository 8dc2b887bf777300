# statesearch/algorithms/best_first.py
from __future__ import annotations
from typing import Callable
from ..core.errors import ContractViolation, InconsistentHeuristicError
from ..core.frontiers import make_min_frontier
from ..core.metrics import SearchResult
from ..core.problem import State, fscore
from ..core.session import SearchSession

# float slack for the consistency check
_EPS = 1e-9

def check_consistent_edge(parent: State, child: State) -> None:
    """Raise if h(parent) > edge_cost + h(child) or either heuristic is negative."""
    h_parent = float(parent.heuristic())
    h_child = float(child.heuristic())
    if h_parent < 0 or h_child < 0:
        raise ContractViolation(
            f"negative heuristic (parent={h_parent}, child={h_child}) for {child!r}"
        )
    edge_cost = float(child.cost()) - float(parent.cost())
    if h_parent > edge_cost + h_child + _EPS:
        raise InconsistentHeuristicError(parent, child, h_parent, edge_cost, h_child)

def best_first_search(
    start: State,
    f: Callable[[State], float] = fscore,
    name: str = "BestFirst",
    *,
    check_consistency: bool = False,
    indexed: bool = False,
    **options,
) -> SearchResult:
    """
    Expands the frontier state minimising f(state), earliest-inserted first on ties.

    A visited state is never reopened, even if it is later reached more cheaply.
    check_consistency turns on a debug assertion on every generated edge.
    """
    frontier = make_min_frontier(f, indexed=indexed)
    on_child = check_consistent_edge if check_consistency else None
    session = SearchSession(name, start, frontier, indexed=indexed, on_child=on_child, **options)
    return session.run()

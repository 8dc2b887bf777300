# statesearch/algorithms/bfs.py
from __future__ import annotations
from ..core.frontiers import make_min_frontier
from ..core.metrics import SearchResult
from ..core.problem import State, depth
from ..core.session import SearchSession

def breadth_first_search(start: State, *, indexed: bool = False, **options) -> SearchResult:
    """
    Breadth-First Search: expands the frontier state with the shortest path(),
    earliest-inserted first on ties.

    Returns a path with the fewest actions. It is also the cheapest path only
    when every step costs the same; that is the caller's precondition.
    """
    frontier = make_min_frontier(depth, indexed=indexed)
    return SearchSession("BFS", start, frontier, indexed=indexed, **options).run()

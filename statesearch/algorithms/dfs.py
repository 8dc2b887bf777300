# statesearch/algorithms/dfs.py
# Depth-First Search: always expands the most recently added frontier state (LIFO).
# No optimality guarantee; on infinite state spaces it relies on the visited
# set or a budget (max_expansions / time_limit_s) to terminate.
from __future__ import annotations
from ..core.frontiers import LIFOStack
from ..core.metrics import SearchResult
from ..core.problem import State
from ..core.session import SearchSession

def depth_first_search(start: State, *, indexed: bool = False, **options) -> SearchResult:
    frontier = LIFOStack(indexed=indexed)
    return SearchSession("DFS", start, frontier, indexed=indexed, **options).run()

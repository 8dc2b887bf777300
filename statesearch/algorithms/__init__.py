"""Search strategies and the solve() convenience entry point."""
from __future__ import annotations
from typing import Any, Callable, Dict, List

from .astar import a_star_search
from .best_first import best_first_search
from .bfs import breadth_first_search
from .dfs import depth_first_search
from ..core.errors import NoSolutionError, SearchBudgetExceeded
from ..core.metrics import Outcome, SearchResult
from ..core.problem import State

STRATEGIES: Dict[str, Callable[..., SearchResult]] = {
    "dfs": depth_first_search,
    "bfs": breadth_first_search,
    "astar": a_star_search,
}


def solve(start: State, strategy: str = "astar", **options) -> List[Any]:
    """Run one strategy and return the action path.

    Raises NoSolutionError when the frontier empties and SearchBudgetExceeded
    when a budget stops the search first.
    """
    try:
        search = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"unknown strategy {strategy!r}; expected one of {sorted(STRATEGIES)}"
        ) from None
    result = search(start, **options)
    if result.outcome is Outcome.NO_SOLUTION:
        raise NoSolutionError(result.algo, result.nodes_expanded)
    if result.outcome is Outcome.BUDGET_EXHAUSTED:
        raise SearchBudgetExceeded(result.algo, result.nodes_expanded, result.error)
    return result.actions


__all__ = [
    "STRATEGIES",
    "a_star_search",
    "best_first_search",
    "breadth_first_search",
    "depth_first_search",
    "solve",
]

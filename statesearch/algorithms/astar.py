# statesearch/algorithms/astar.py
# A*: best-first on f = cost() + heuristic(). Returns a minimum-cost path
# iff heuristic() is admissible for every state (not verified here).
from __future__ import annotations
from .best_first import best_first_search
from ..core.metrics import SearchResult
from ..core.problem import State, fscore

def a_star_search(start: State, **options) -> SearchResult:
    return best_first_search(start, f=fscore, name="A*", **options)

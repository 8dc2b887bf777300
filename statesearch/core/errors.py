# statesearch/core/errors.py
from __future__ import annotations
from typing import Optional


class SearchError(Exception):
    """Base class for every error raised by statesearch."""


class NoSolutionError(SearchError):
    """The frontier was exhausted before a goal state was expanded."""
    def __init__(self, algo: str, nodes_expanded: int):
        super().__init__(f"{algo}: no solution after {nodes_expanded} expansions")
        self.algo = algo
        self.nodes_expanded = nodes_expanded


class SearchBudgetExceeded(SearchError):
    """An expansion, time or cancellation budget stopped the search."""
    def __init__(self, algo: str, nodes_expanded: int, reason: Optional[str] = None):
        msg = f"{algo}: search budget exhausted after {nodes_expanded} expansions"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
        self.algo = algo
        self.nodes_expanded = nodes_expanded
        self.reason = reason


class ContractViolation(SearchError):
    """A state broke the capability contract in a way the engine can observe."""


class InconsistentHeuristicError(ContractViolation):
    def __init__(self, parent, child, h_parent: float, edge_cost: float, h_child: float):
        super().__init__(
            f"inconsistent heuristic: h(parent)={h_parent} > "
            f"edge_cost={edge_cost} + h(child)={h_child} "
            f"(parent={parent!r}, child={child!r})"
        )
        self.parent = parent
        self.child = child

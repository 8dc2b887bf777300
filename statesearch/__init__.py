"""Generic state-space search: depth-first, breadth-first and best-first/A*."""
from .algorithms import (
    STRATEGIES,
    a_star_search,
    best_first_search,
    breadth_first_search,
    depth_first_search,
    solve,
)
from .core import (
    ContractViolation,
    Expansion,
    ExpansionKind,
    InconsistentHeuristicError,
    KeyedState,
    NoSolutionError,
    Outcome,
    SearchBudgetExceeded,
    SearchError,
    SearchProgress,
    SearchResult,
    SearchSession,
    State,
)
from .core.logs import configure_logging
from .problems.checks import check_state_contract

__version__ = "0.1.0"

__all__ = [
    "STRATEGIES",
    "ContractViolation",
    "Expansion",
    "ExpansionKind",
    "InconsistentHeuristicError",
    "KeyedState",
    "NoSolutionError",
    "Outcome",
    "SearchBudgetExceeded",
    "SearchError",
    "SearchProgress",
    "SearchResult",
    "SearchSession",
    "State",
    "a_star_search",
    "best_first_search",
    "breadth_first_search",
    "check_state_contract",
    "configure_logging",
    "depth_first_search",
    "solve",
]

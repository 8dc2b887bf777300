"""Capability contract, containers, metrics and the shared search loop."""
from .errors import (
    ContractViolation,
    InconsistentHeuristicError,
    NoSolutionError,
    SearchBudgetExceeded,
    SearchError,
)
from .metrics import MeasuredRun, Outcome, SearchProgress, SearchResult
from .problem import Expansion, ExpansionKind, KeyedState, State
from .session import SearchSession

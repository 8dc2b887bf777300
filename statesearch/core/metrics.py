# statesearch/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional
import time, tracemalloc


class Outcome(str, Enum):
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"
    BUDGET_EXHAUSTED = "budget_exhausted"


@dataclass
class SearchResult:
    algo: str
    outcome: Outcome
    actions: List[Any]
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int = 0
    max_frontier: int = 0
    goal: Optional[Any] = field(default=None, repr=False)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.SOLVED

    def to_row(self) -> dict:
        """Flat JSON-friendly record (what the benchmark runner writes)."""
        return {
            "algo": self.algo,
            "success": self.success,
            "outcome": self.outcome.value,
            "cost": self.cost if self.success else None,
            "path_len": len(self.actions) if self.success else None,
            "nodes_expanded": self.nodes_expanded,
            "max_frontier": self.max_frontier,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "error": self.error,
        }


@dataclass(frozen=True)
class SearchProgress:
    """Snapshot handed to an observer once per loop iteration."""
    algo: str
    expansions: int
    frontier_size: int
    visited_size: int
    state: Any


class MeasuredRun:
    """
    Context manager for timing and (optionally) approximate peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.

    tracemalloc is process-global, so memory tracing is opt-in and a run never
    stops tracing it did not start.
    """
    def __init__(self, trace_memory: bool = False) -> None:
        self.trace_memory = trace_memory
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owns_trace: bool = False

    def __enter__(self) -> "MeasuredRun":
        if self.trace_memory:
            self._tracing = True
            if not tracemalloc.is_tracing():
                tracemalloc.start()
                self._owns_trace = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            if self._owns_trace:
                tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB (0 unless trace_memory). Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb

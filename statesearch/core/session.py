# statesearch/core/session.py
# The expansion loop shared by every strategy. A SearchSession owns its
# frontier and visited set for the lifetime of one search call.
from __future__ import annotations
import logging
from typing import Callable, Generic, Optional, TypeVar

from .errors import ContractViolation
from .frontiers import make_visited
from .metrics import MeasuredRun, Outcome, SearchProgress, SearchResult
from .problem import Expansion, State

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=State)

Observer = Callable[[SearchProgress], None]
ChildHook = Callable[[S, S], None]


class SearchSession(Generic[S]):
    """One search invocation.

    The strategy supplies the frontier (its selection policy); everything else
    is shared:
      1. frontier = [start], visited = []
      2. empty frontier -> NO_SOLUTION; spent budget -> BUDGET_EXHAUSTED
      3. select a member, move it from frontier to visited
      4. expand it; GOAL -> SOLVED with its path
      5. push each child not equal to a visited state
         (and, with dedup_frontier, not equal to a frontier member that is
         at least as cheap)
    """

    def __init__(
        self,
        name: str,
        start: S,
        frontier,
        *,
        max_expansions: Optional[int] = None,
        time_limit_s: Optional[float] = None,
        should_stop: Optional[Callable[[], bool]] = None,
        observer: Optional[Observer] = None,
        dedup_frontier: bool = False,
        indexed: bool = False,
        trace_memory: bool = False,
        on_child: Optional[ChildHook] = None,
    ):
        if max_expansions is not None and max_expansions < 0:
            raise ValueError(f"max_expansions must be >= 0, got {max_expansions}")
        if time_limit_s is not None and time_limit_s < 0:
            raise ValueError(f"time_limit_s must be >= 0, got {time_limit_s}")
        self.name = name
        self.start = start
        self.frontier = frontier
        self.visited = make_visited(indexed)
        self.max_expansions = max_expansions
        self.time_limit_s = time_limit_s
        self.should_stop = should_stop
        self.observer = observer
        self.dedup_frontier = dedup_frontier
        self.trace_memory = trace_memory
        self.on_child = on_child
        self.expanded = 0
        self.max_frontier = 0

    def _budget_spent(self, meter: MeasuredRun) -> Optional[str]:
        if self.max_expansions is not None and self.expanded >= self.max_expansions:
            return f"max_expansions={self.max_expansions}"
        if self.time_limit_s is not None and meter.elapsed >= self.time_limit_s:
            return f"time_limit_s={self.time_limit_s}"
        if self.should_stop is not None and self.should_stop():
            return "stopped by caller"
        return None

    def _admit(self, child: S) -> bool:
        if child in self.visited:
            return False
        if self.dedup_frontier:
            best = self.frontier.best_cost(child)
            if best is not None and best <= float(child.cost()):
                return False
        return True

    def _result(self, outcome: Outcome, meter: MeasuredRun, goal: Optional[S] = None,
                error: Optional[str] = None) -> SearchResult:
        if goal is not None:
            actions, cost = list(goal.path()), float(goal.cost())
        else:
            actions, cost = [], float("inf")
        return SearchResult(
            self.name, outcome, actions, cost, self.expanded, meter.elapsed,
            meter.peak_kb, self.max_frontier, goal, error,
        )

    def run(self) -> SearchResult:
        frontier, visited = self.frontier, self.visited
        frontier.push(self.start)
        self.max_frontier = len(frontier)

        with MeasuredRun(self.trace_memory) as meter:
            while True:
                if not frontier:
                    logger.info("%s: frontier exhausted after %d expansions, no solution",
                                self.name, self.expanded)
                    return self._result(Outcome.NO_SOLUTION, meter)

                reason = self._budget_spent(meter)
                if reason is not None:
                    logger.info("%s: budget exhausted after %d expansions (%s)",
                                self.name, self.expanded, reason)
                    return self._result(Outcome.BUDGET_EXHAUSTED, meter, error=reason)

                state = frontier.pop()
                visited.add(state)
                self.expanded += 1

                logger.debug("%s: expansion %d, frontier=%d visited=%d",
                             self.name, self.expanded, len(frontier), len(visited))
                if self.observer is not None:
                    self.observer(SearchProgress(self.name, self.expanded, len(frontier),
                                                 len(visited), state))

                expansion = state.expand()
                if not isinstance(expansion, Expansion):
                    raise ContractViolation(
                        f"{type(state).__name__}.expand() returned {type(expansion).__name__}, "
                        "expected an Expansion"
                    )

                if expansion.is_goal:
                    logger.info("%s: goal reached after %d expansions (path length %d)",
                                self.name, self.expanded, len(state.path()))
                    return self._result(Outcome.SOLVED, meter, goal=state)

                for child in expansion.children:
                    if self.on_child is not None:
                        self.on_child(state, child)
                    if self._admit(child):
                        frontier.push(child)

                self.max_frontier = max(self.max_frontier, len(frontier))

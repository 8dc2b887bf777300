# statesearch/core/frontiers.py
# Frontier and visited-set containers shared by all strategies.
# Linear-scan variants are the default; the indexed variants trade the O(n)
# scans for a heap / hash lookup and require states to provide key().
from __future__ import annotations
import heapq
from typing import Callable, Dict, Generic, Hashable, List, Optional, Tuple, TypeVar

from .errors import ContractViolation
from .problem import State

S = TypeVar("S", bound=State)


def state_key(state) -> Hashable:
    key = getattr(state, "key", None)
    if not callable(key):
        raise ContractViolation(
            f"indexed containers need a key() method on states; {type(state).__name__} has none"
        )
    return key()


class _Frontier(Generic[S]):
    """Membership bookkeeping common to every frontier.

    With indexed=False, lookups scan with State.equals; with indexed=True
    they go through a per-key multiset of member costs.
    """
    def __init__(self, indexed: bool = False):
        self.indexed = indexed
        self._costs: Dict[Hashable, List[float]] = {}

    def _added(self, x: S) -> None:
        if self.indexed:
            self._costs.setdefault(state_key(x), []).append(float(x.cost()))

    def _removed(self, x: S) -> None:
        if self.indexed:
            k = state_key(x)
            costs = self._costs[k]
            costs.remove(float(x.cost()))
            if not costs:
                del self._costs[k]

    def contains(self, x: S) -> bool:
        if self.indexed:
            return state_key(x) in self._costs
        return any(s.equals(x) for s in self)

    def best_cost(self, x: S) -> Optional[float]:
        """Lowest cost() among members equal to x, or None if there are none."""
        if self.indexed:
            costs = self._costs.get(state_key(x))
            return min(costs) if costs else None
        return min((float(s.cost()) for s in self if s.equals(x)), default=None)

    def __bool__(self) -> bool:
        return len(self) > 0


class LIFOStack(_Frontier[S]):
    """Most recently added member first (depth-first)."""
    def __init__(self, indexed: bool = False):
        super().__init__(indexed)
        self.q: List[S] = []
    def push(self, x: S) -> None:
        self.q.append(x)
        self._added(x)
    def pop(self) -> S:
        x = self.q.pop()
        self._removed(x)
        return x
    def peek(self) -> S: return self.q[-1]
    def __len__(self): return len(self.q)
    def __iter__(self): return iter(self.q)


class MinScanFrontier(_Frontier[S]):
    """Linear scan for the minimum of key(x); the first minimum found wins,
    so ties go to the earliest inserted member."""
    def __init__(self, key: Callable[[S], float], indexed: bool = False):
        super().__init__(indexed)
        self.key = key
        self.q: List[S] = []
    def push(self, x: S) -> None:
        self.q.append(x)
        self._added(x)
    def _argmin(self) -> int:
        best_i, best = 0, self.key(self.q[0])
        for i in range(1, len(self.q)):
            v = self.key(self.q[i])
            if v < best:
                best_i, best = i, v
        return best_i
    def pop(self) -> S:
        x = self.q.pop(self._argmin())
        self._removed(x)
        return x
    def peek(self) -> S: return self.q[self._argmin()]
    def __len__(self): return len(self.q)
    def __iter__(self): return iter(self.q)


class PriorityQueue(_Frontier[S]):
    """Min-heap by key(x). The insertion counter keeps equal keys in
    insertion order, matching MinScanFrontier's tie-break."""
    def __init__(self, key: Callable[[S], float], indexed: bool = True):
        super().__init__(indexed)
        self.key = key
        self.h: List[Tuple[float, int, S]] = []
        self.counter = 0
    def push(self, x: S) -> None:
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
        self._added(x)
    def pop(self) -> S:
        x = heapq.heappop(self.h)[2]
        self._removed(x)
        return x
    def peek(self) -> S: return self.h[0][2]
    def __len__(self): return len(self.h)
    def __iter__(self): return (entry[2] for entry in self.h)


class VisitedList(Generic[S]):
    """Already-expanded states, membership by State.equals (O(n))."""
    def __init__(self):
        self.items: List[S] = []
    def add(self, x: S) -> None:
        self.items.append(x)
    def __contains__(self, x: S) -> bool:
        return any(s.equals(x) for s in self.items)
    def __len__(self): return len(self.items)


class VisitedIndex(Generic[S]):
    """Already-expanded states, membership by state key() (O(1))."""
    def __init__(self):
        self.keys: set = set()
    def add(self, x: S) -> None:
        self.keys.add(state_key(x))
    def __contains__(self, x: S) -> bool:
        return state_key(x) in self.keys
    def __len__(self): return len(self.keys)


def make_visited(indexed: bool = False):
    return VisitedIndex() if indexed else VisitedList()


def make_min_frontier(key: Callable[[S], float], indexed: bool = False):
    """Frontier choosing the member with the smallest key, earliest first on ties."""
    if indexed:
        return PriorityQueue(key, indexed=True)
    return MinScanFrontier(key)

# Defines the capability contract every search strategy consumes (states, actions, expansion outcomes).
# statesearch/core/problem.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Hashable, Iterable, Protocol, Sequence, Tuple, TypeVar, runtime_checkable

A = TypeVar("A")              # action type: opaque to the engine
S = TypeVar("S", bound="State")


class ExpansionKind(str, Enum):
    GOAL = "goal"
    SUCCESSORS = "successors"
    DEAD_END = "dead_end"


@dataclass(frozen=True)
class Expansion(Generic[S]):
    """Outcome of State.expand().

    Exactly one of three kinds:
    - GOAL: the expanded state is a goal; search stops and returns its path.
    - SUCCESSORS: non-empty tuple of child states, each already carrying the
      path and cost of the edge taken.
    - DEAD_END: no successors and not a goal; search continues elsewhere.
    """
    kind: ExpansionKind
    children: Tuple[S, ...] = ()

    @classmethod
    def goal(cls) -> "Expansion[S]":
        return cls(ExpansionKind.GOAL)

    @classmethod
    def dead_end(cls) -> "Expansion[S]":
        return cls(ExpansionKind.DEAD_END)

    @classmethod
    def successors(cls, children: Iterable[S]) -> "Expansion[S]":
        kids = tuple(children)
        if not kids:
            return cls.dead_end()
        return cls(ExpansionKind.SUCCESSORS, kids)

    @property
    def is_goal(self) -> bool:
        return self.kind is ExpansionKind.GOAL

    @property
    def is_dead_end(self) -> bool:
        return self.kind is ExpansionKind.DEAD_END


@runtime_checkable
class State(Protocol[A]):
    """Canonical search state interface (implicit graph view).

    - expand(): Expansion.goal(), Expansion.successors(children) or Expansion.dead_end()
    - heuristic(): non-negative estimate of remaining cost; admissible for A* optimality
    - path(): actions taken from the start state to reach this state
    - cost(): accumulated cost from the start state
    - equals(other): state identity, must be an equivalence relation

    Implementations that want indexed containers (indexed=True) also provide
    key() returning a hashable canonical representation consistent with equals().
    """
    def expand(self) -> Expansion: ...
    def heuristic(self) -> float: ...
    def path(self) -> Sequence[A]: ...
    def cost(self) -> float: ...
    def equals(self, other: "State[A]") -> bool: ...


class KeyedState(State[A], Protocol[A]):
    def key(self) -> Hashable: ...


def depth(state: State) -> int:
    """Number of actions on the state's path (breadth-first selection key)."""
    return len(state.path())


def fscore(state: State) -> float:
    """cost() + heuristic() (best-first selection key)."""
    return float(state.cost()) + float(state.heuristic())

# statesearch/problems/checks.py
from __future__ import annotations
from collections import deque
from typing import List

from ..core.errors import ContractViolation
from ..core.problem import Expansion, State


def check_state_contract(start: State, max_states: int = 10_000) -> str:
    """Walks states breadth-first from start and checks the capability contract.

    - expand() returns an Expansion
    - equals() is reflexive, and symmetric between each parent and its children
    - each child's path is the parent's path plus one action
    - costs never decrease along an edge
    - heuristics are non-negative

    Raises ContractViolation on the first failure. Equality is only checked
    for reachable pairs, so a pass is evidence, not proof.
    """
    seen: List[State] = []
    q = deque([start])
    steps = 0
    while q and steps < max_states:
        s = q.popleft()
        if any(v.equals(s) for v in seen):
            continue
        if not s.equals(s):
            raise ContractViolation(f"equals() is not reflexive for {s!r}")
        if s.heuristic() < 0:
            raise ContractViolation(f"negative heuristic {s.heuristic()} for {s!r}")
        seen.append(s)
        steps += 1

        expansion = s.expand()
        if not isinstance(expansion, Expansion):
            raise ContractViolation(f"expand() returned {type(expansion).__name__} for {s!r}")

        parent_path = list(s.path())
        for child in expansion.children:
            child_path = list(child.path())
            if len(child_path) != len(parent_path) + 1 or child_path[:-1] != parent_path:
                raise ContractViolation(
                    f"child {child!r} path {child_path} does not extend parent path {parent_path}"
                )
            if child.cost() < s.cost():
                raise ContractViolation(f"cost decreased from {s!r} to {child!r}")
            if child.equals(s) != s.equals(child):
                raise ContractViolation(f"equals() is not symmetric for {s!r} and {child!r}")
            q.append(child)
    return f"OK: visited {len(seen)} states; contract holds."

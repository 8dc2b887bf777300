"""Shared fixtures for the statesearch test-suite."""
import pytest

from statesearch.problems.graph import Graph


@pytest.fixture
def detour_graph():
    """S -> A -> G (1 + 1) and S -> G (10), heuristic 0 everywhere."""
    return Graph({"S": {"A": 1, "G": 10}, "A": {"G": 1}}, goals=frozenset({"G"}))


@pytest.fixture
def diamond_graph():
    """S -> A, S -> B, A -> C, B -> C, C -> G, all unit cost."""
    return Graph(
        {"S": {"A": 1, "B": 1}, "A": {"C": 1}, "B": {"C": 1}, "C": {"G": 1}},
        goals=frozenset({"G"}),
    )

"""Example states implementing the capability contract (tests and benchmarks)."""
from .checks import check_state_contract
from .graph import Graph, GraphState, romania
from .grid import GridState, GridWorld, make_grid_world

__all__ = [
    "Graph",
    "GraphState",
    "GridState",
    "GridWorld",
    "check_state_contract",
    "make_grid_world",
    "romania",
]

"""
Behaviour of the three strategies: optimality guarantees, exhausted search,
tie-breaking and repeatability.
"""
import pytest

from statesearch import (
    Outcome,
    a_star_search,
    breadth_first_search,
    depth_first_search,
)
from statesearch.problems.graph import Graph, romania
from statesearch.problems.grid import make_grid_world

from graphs import dijkstra, hops, is_valid_path, path_cost, random_graph, reverse

ALL = [depth_first_search, breadth_first_search, a_star_search]
SEEDS = range(25)


class TestWorkedExamples:

    def test_astar_prefers_cheap_detour(self, detour_graph):
        r = a_star_search(detour_graph.start("S"))
        assert r.outcome is Outcome.SOLVED
        assert r.actions == ["A", "G"]
        assert r.cost == 2.0

    def test_bfs_prefers_fewest_edges(self, detour_graph):
        r = breadth_first_search(detour_graph.start("S"))
        assert r.success
        assert r.actions == ["G"]
        assert r.cost == 10.0

    @pytest.mark.parametrize("search", ALL)
    def test_dead_end_start_reports_no_solution(self, search):
        g = Graph({"S": {}}, goals=frozenset({"G"}))
        r = search(g.start("S"))
        assert r.outcome is Outcome.NO_SOLUTION
        assert r.nodes_expanded == 1
        assert r.actions == []
        assert r.cost == float("inf")
        assert r.goal is None

    @pytest.mark.parametrize("search", ALL)
    def test_goal_start_returns_empty_path(self, search):
        g = Graph({"S": {"A": 1}}, goals=frozenset({"S"}))
        r = search(g.start("S"))
        assert r.success
        assert r.actions == []
        assert r.cost == 0.0
        assert r.nodes_expanded == 1
        assert r.goal.node == "S"

    def test_dfs_follows_last_child_first(self):
        g = Graph({"S": {"A": 1, "B": 1}, "A": {"G": 1}, "B": {"G": 1}}, goals=frozenset({"G"}))
        r = depth_first_search(g.start("S"))
        assert r.actions == ["B", "G"]

    def test_bfs_ties_go_to_earliest_inserted(self):
        g = Graph({"S": {"A": 1, "B": 1}, "A": {"G": 1}, "B": {"G": 1}}, goals=frozenset({"G"}))
        r = breadth_first_search(g.start("S"))
        assert r.actions == ["A", "G"]

    def test_astar_ties_go_to_earliest_inserted(self):
        g = Graph({"S": {"A": 2, "B": 2}, "A": {"G": 1}, "B": {"G": 1}}, goals=frozenset({"G"}))
        r = a_star_search(g.start("S"))
        assert r.actions == ["A", "G"]

    def test_romania_astar_is_optimal(self):
        r = a_star_search(romania("Arad"))
        assert r.actions == ["Sibiu", "Rimnicu Vilcea", "Pitesti", "Bucharest"]
        assert r.cost == 418.0

    def test_romania_bfs_is_shortest_in_steps(self):
        r = breadth_first_search(romania("Arad"))
        assert r.actions == ["Sibiu", "Fagaras", "Bucharest"]
        assert r.cost == 450.0

    def test_grid_bfs_and_astar_agree_on_unit_costs(self):
        world = make_grid_world()
        bfs = breadth_first_search(world.start((0, 0)))
        astar = a_star_search(world.start((0, 0)))
        assert bfs.success and astar.success
        assert len(bfs.actions) == len(astar.actions) == bfs.cost == astar.cost

    def test_unreachable_goal_in_grid(self):
        world = make_grid_world()
        sealed = type(world)(rows=world.rows, cols=world.cols, goal=(4, 6),
                             walls=world.walls | {(3, 6), (4, 5)})
        for search in ALL:
            assert search(sealed.start((0, 0))).outcome is Outcome.NO_SOLUTION


class TestProperties:
    """Checked against reference solvers on seeded random graphs."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_dfs_finds_a_valid_path_on_dags(self, seed):
        edges = random_graph(seed, acyclic=True, p=0.3)
        goals = {11}
        if 11 not in hops(edges, 0):
            pytest.skip("goal unreachable for this seed")
        r = depth_first_search(Graph(edges, frozenset(goals)).start(0))
        assert r.success
        assert is_valid_path(edges, 0, goals, r.actions)
        assert r.cost == path_cost(edges, 0, r.actions)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_bfs_minimises_step_count(self, seed):
        edges = random_graph(seed)
        goals = {7, 9}
        reach = hops(edges, 0)
        best = min((reach[g] for g in goals if g in reach), default=None)
        r = breadth_first_search(Graph(edges, frozenset(goals)).start(0))
        if best is None:
            assert r.outcome is Outcome.NO_SOLUTION
        else:
            assert r.success
            assert is_valid_path(edges, 0, goals, r.actions)
            assert len(r.actions) == best

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("scale", [0.0, 0.5, 1.0])
    def test_astar_minimises_cost_with_admissible_heuristic(self, seed, scale):
        edges = random_graph(seed)
        goals = {7, 9}
        to_goal = dijkstra(reverse(edges), goals)
        h = {n: scale * d for n, d in to_goal.items()}
        best = dijkstra(edges, [0])
        optimum = min((best[g] for g in goals if g in best), default=None)
        r = a_star_search(Graph(edges, frozenset(goals), h).start(0))
        if optimum is None:
            assert r.outcome is Outcome.NO_SOLUTION
        else:
            assert r.success
            assert is_valid_path(edges, 0, goals, r.actions)
            assert r.cost == pytest.approx(optimum)

    @pytest.mark.parametrize("seed", SEEDS)
    @pytest.mark.parametrize("search", ALL)
    def test_unreachable_goal_terminates(self, seed, search):
        edges = random_graph(seed, p=0.4)
        r = search(Graph(edges, frozenset({"nowhere"})).start(0))
        assert r.outcome is Outcome.NO_SOLUTION
        assert r.nodes_expanded >= len(hops(edges, 0))

    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("search", ALL)
    def test_rerun_on_equal_start_gives_same_length_and_cost(self, seed, search):
        edges = random_graph(seed)
        graph = Graph(edges, frozenset({7}))
        first, second = search(graph.start(0)), search(graph.start(0))
        assert first.outcome is second.outcome
        assert len(first.actions) == len(second.actions)
        assert first.cost == second.cost

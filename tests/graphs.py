"""Graph builders and reference solvers used by the tests."""
import heapq
import random
from collections import deque

from statesearch.core.problem import Expansion


def random_graph(seed, n=12, p=0.25, acyclic=False, max_w=9):
    """Directed graph on nodes 0..n-1 with integer weights in [1, max_w]."""
    rng = random.Random(seed)
    edges = {}
    for a in range(n):
        edges[a] = {}
        for b in range(n):
            if a == b or (acyclic and b <= a):
                continue
            if rng.random() < p:
                edges[a][b] = rng.randint(1, max_w)
    return edges


def dijkstra(edges, sources):
    dist = {s: 0 for s in sources}
    heap = [(0, s) for s in sources]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist.get(u, float("inf")):
            continue
        for v, w in edges.get(u, {}).items():
            nd = d + w
            if nd < dist.get(v, float("inf")):
                dist[v] = nd
                heapq.heappush(heap, (nd, v))
    return dist


def hops(edges, start):
    seen = {start: 0}
    q = deque([start])
    while q:
        u = q.popleft()
        for v in edges.get(u, {}):
            if v not in seen:
                seen[v] = seen[u] + 1
                q.append(v)
    return seen


def reverse(edges):
    rev = {}
    for a, nbrs in edges.items():
        for b, w in nbrs.items():
            rev.setdefault(b, {})[a] = w
    return rev


def path_cost(edges, start, actions):
    node, total = start, 0
    for nxt in actions:
        total += edges[node][nxt]
        node = nxt
    return total


def is_valid_path(edges, start, goals, actions):
    node = start
    for nxt in actions:
        if nxt not in edges.get(node, {}):
            return False
        node = nxt
    return node in goals


class CounterState:
    """Infinite chain 0 -> 1 -> 2 -> ...; a goal only when goal is set. No key()."""

    def __init__(self, n=0, goal=None, path=()):
        self.n = n
        self.goal = goal
        self._path = path

    def expand(self):
        if self.goal is not None and self.n == self.goal:
            return Expansion.goal()
        return Expansion.successors([CounterState(self.n + 1, self.goal, self._path + ("inc",))])

    def heuristic(self):
        return 0.0

    def path(self):
        return self._path

    def cost(self):
        return float(len(self._path))

    def equals(self, other):
        return isinstance(other, CounterState) and other.n == self.n

# tests/conftest.py
from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, Hashable, List, Optional, Tuple

import pytest

from grid_astar.core.environment import Environment, Successor, state_key
from grid_astar.terrain.terrain_map import TerrainMap


class GraphEnvironment(Environment):
    """Explicit weighted digraph used to pin down engine edge cases."""

    def __init__(
        self,
        start: str,
        goal: str,
        edges: Dict[str, List[Tuple[str, float]]],
        h: Optional[Dict[str, float]] = None,
    ) -> None:
        self.start = start
        self.goal = goal
        self.edges = edges
        self.h = h or {}

    def initial_state(self) -> str:
        return self.start

    def is_goal(self, state: str) -> bool:
        return state == self.goal

    def heuristic(self, state: str) -> float:
        return self.h.get(state, 0)

    def successors(self, state: str) -> List[Successor]:
        return [
            Successor(f"{state}-{nxt}", nxt, cost)
            for nxt, cost in self.edges.get(state, [])
        ]


def dijkstra(env: Environment) -> Optional[float]:
    """Return the cheapest cost from the initial state to a goal, or ``None``."""

    start = env.initial_state()
    tie = count()
    dist: Dict[Hashable, float] = {state_key(start): 0}
    heap = [(0, next(tie), start)]
    while heap:
        d, _, state = heappop(heap)
        if d > dist[state_key(state)]:
            continue
        if env.is_goal(state):
            return d
        for _, nxt, cost in env.successors(state):
            nd = d + cost
            key = state_key(nxt)
            if key not in dist or nd < dist[key]:
                dist[key] = nd
                heappush(heap, (nd, next(tie), nxt))
    return None


@pytest.fixture
def open_grid() -> TerrainMap:
    """3×3 grass grid from the top-left to the bottom-right corner."""
    return TerrainMap.from_rows(["S . .", ". . .", ". . G"])


@pytest.fixture
def detour_grid() -> TerrainMap:
    """Straight route crosses mud; the grass detour costs 6."""
    return TerrainMap.from_rows(["S ~ G", ". ~ .", ". . ."])


@pytest.fixture
def walled_goal_grid() -> TerrainMap:
    """Goal sealed off by blocked cells and the grid edge."""
    return TerrainMap.from_rows(["S . .", ". # #", ". # G"])


@pytest.fixture
def stale_graph() -> GraphEnvironment:
    """C is first pushed at cost 5, then improved to 2 through B."""
    return GraphEnvironment(
        "A",
        "G",
        {
            "A": [("C", 5), ("B", 1)],
            "B": [("C", 1)],
            "C": [("G", 10)],
        },
    )


@pytest.fixture
def graph_env():
    """Factory for :class:`GraphEnvironment` instances."""
    return GraphEnvironment


@pytest.fixture
def reference_cost():
    """Independent Dijkstra used as the optimality oracle."""
    return dijkstra

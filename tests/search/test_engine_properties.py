"""Randomised checks of the engine's guarantees on generated terrain."""

from random import Random

import pytest

from grid_astar.core.coordinate import Coordinate
from grid_astar.search.engine import SearchEngine, SearchSuccess
from grid_astar.terrain.generator import random_mud
from grid_astar.terrain.terrain_map import TerrainMap


def _random_map(seed: int, with_walls: bool = False) -> TerrainMap:
    rng = Random(seed)
    width, height = rng.randint(2, 8), rng.randint(2, 8)
    start = Coordinate(rng.randrange(width), rng.randrange(height))
    goal = Coordinate(rng.randrange(width), rng.randrange(height))
    mud = random_mud(width, height, 0.35, rng, exclude=(start, goal))
    blocked = ()
    if with_walls:
        blocked = random_mud(width, height, 0.25, rng, exclude=(start, goal))
        mud = mud - blocked
    return TerrainMap(
        width,
        height,
        start,
        goal,
        mud=mud,
        blocked=blocked,
        mud_cost=rng.choice([2, 5, 10]),
    )


def _reachable(terrain: TerrainMap) -> int:
    seen = {terrain.start}
    todo = [terrain.start]
    while todo:
        loc = todo.pop()
        for _, nxt, _ in terrain.successors(loc):
            if nxt not in seen:
                seen.add(nxt)
                todo.append(nxt)
    return len(seen)


@pytest.mark.parametrize("seed", range(40))
def test_first_goal_pop_is_optimal(seed, reference_cost):
    terrain = _random_map(seed)
    result = SearchEngine(terrain).run()
    assert isinstance(result, SearchSuccess)
    assert result.cost == reference_cost(terrain)


@pytest.mark.parametrize("seed", range(40))
def test_walls_found_iff_reachable(seed, reference_cost):
    terrain = _random_map(seed, with_walls=True)
    result = SearchEngine(terrain).run()
    expected = reference_cost(terrain)
    if expected is None:
        assert not result.found
    else:
        assert result.found
        assert result.cost == expected


@pytest.mark.parametrize("seed", range(40))
def test_replayed_path_matches_cost(seed):
    terrain = _random_map(seed)
    result = SearchEngine(terrain).run()
    visited, cost = terrain.replay(result.actions)
    assert visited[-1] == terrain.goal
    assert cost == result.node.g_cost
    assert result.path_length == len(result.actions) == result.node.depth


@pytest.mark.parametrize("seed", range(40))
def test_terminates_within_pushed_nodes(seed):
    terrain = _random_map(seed, with_walls=True)
    engine = SearchEngine(terrain)
    result = engine.run()
    pushes = sum(len(engine.best_costs.history(k)) for k in engine.best_costs)
    assert result.steps <= pushes
    assert result.total_explored <= _reachable(terrain)
    assert len(engine.best_costs) <= _reachable(terrain)


@pytest.mark.parametrize("seed", range(20))
def test_best_costs_never_increase(seed):
    terrain = _random_map(seed, with_walls=True)
    engine = SearchEngine(terrain)
    previous: dict = {}

    def check(_obs):
        for key in engine.best_costs:
            value = engine.best_costs.get(key)
            if key in previous:
                assert value <= previous[key]
            previous[key] = value

    engine.run(on_step=check)
    for key in engine.best_costs:
        history = engine.best_costs.history(key)
        assert all(a > b for a, b in zip(history, history[1:]))

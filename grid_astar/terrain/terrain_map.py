"""Weighted grid environment with grass and mud terrain."""

from __future__ import annotations

import logging
from random import Random
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.coordinate import Coordinate
from ..core.environment import Environment, Successor
from ..core.errors import EnvironmentContractViolation
from .generator import random_mud

logger = logging.getLogger(__name__)

# (dx, dy, label) in the order successors are enumerated. ``y`` grows down.
DIRECTIONS: Tuple[Tuple[int, int, str], ...] = (
    (0, 1, "Down"),
    (0, -1, "Up"),
    (1, 0, "Right"),
    (-1, 0, "Left"),
)
_OFFSETS = {label: (dx, dy) for dx, dy, label in DIRECTIONS}

GRASS_GLYPH = "."
MUD_GLYPH = "~"
BLOCKED_GLYPH = "#"
START_GLYPH = "S"
GOAL_GLYPH = "G"


class TerrainMap(Environment):
    """A ``width`` × ``height`` grid where entering a cell costs its terrain.

    Movement is 4-directional. Cells are grass (``COST_GRASS``) or mud
    (``COST_MUD``); ``blocked`` cells cannot be entered at all. The Manhattan
    heuristic is admissible only while every terrain cost is at least 1, so
    cheaper terrain logs a warning at construction.
    """

    COST_GRASS: float = 1
    COST_MUD: float = 10

    def __init__(
        self,
        width: int,
        height: int,
        start: Coordinate,
        goal: Coordinate,
        mud: Iterable[Coordinate] = (),
        blocked: Iterable[Coordinate] = (),
        grass_cost: Optional[float] = None,
        mud_cost: Optional[float] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height
        self.start = start
        self.goal = goal
        self.grass_cost = self.COST_GRASS if grass_cost is None else grass_cost
        self.mud_cost = self.COST_MUD if mud_cost is None else mud_cost
        self.mud_tiles: frozenset[Coordinate] = frozenset(mud)
        self.blocked: frozenset[Coordinate] = frozenset(blocked)

        for name, loc in (("start", start), ("goal", goal)):
            if not self.in_bounds(loc):
                raise EnvironmentContractViolation(
                    f"{name} {loc} is outside the {width}x{height} grid"
                )
        if self.grass_cost < 0 or self.mud_cost < 0:
            raise EnvironmentContractViolation("terrain costs must not be negative")
        if min(self.grass_cost, self.mud_cost) < 1:
            logger.warning(
                "Terrain cost below 1 makes the Manhattan heuristic inadmissible; "
                "returned paths may not be optimal"
            )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        start: Coordinate,
        goal: Coordinate,
        mud_probability: float = 0.3,
        rng: Random | None = None,
        **kwargs,
    ) -> TerrainMap:
        """Return a map with mud scattered at random, never on start or goal."""

        mud = random_mud(width, height, mud_probability, rng, exclude=(start, goal))
        return cls(width, height, start, goal, mud=mud, **kwargs)

    @classmethod
    def from_rows(cls, rows: Sequence[str], **kwargs) -> TerrainMap:
        """Build a map from text rows.

        ``.`` grass, ``~`` mud, ``#`` blocked, ``S`` start and ``G`` goal
        (both on grass). Whitespace inside a row is ignored.
        """

        grid = ["".join(row.split()) for row in rows]
        if not grid or any(len(row) != len(grid[0]) for row in grid):
            raise ValueError("rows must be non-empty and of equal length")

        start = goal = None
        mud: List[Coordinate] = []
        blocked: List[Coordinate] = []
        for y, row in enumerate(grid):
            for x, ch in enumerate(row):
                loc = Coordinate(x, y)
                if ch == START_GLYPH:
                    start = loc
                elif ch == GOAL_GLYPH:
                    goal = loc
                elif ch == MUD_GLYPH:
                    mud.append(loc)
                elif ch == BLOCKED_GLYPH:
                    blocked.append(loc)
                elif ch != GRASS_GLYPH:
                    raise ValueError(f"unknown terrain glyph {ch!r} at {loc}")
        if start is None or goal is None:
            raise ValueError("rows must contain an S and a G")
        return cls(len(grid[0]), len(grid), start, goal, mud=mud, blocked=blocked, **kwargs)

    # ------------------------------------------------------------------
    # Environment interface
    # ------------------------------------------------------------------
    def initial_state(self) -> Coordinate:
        return self.start

    def is_goal(self, state: Coordinate) -> bool:
        return state == self.goal

    def heuristic(self, state: Coordinate) -> float:
        return state.dist(self.goal)

    def successors(self, state: Coordinate) -> List[Successor]:
        moves: List[Successor] = []
        for dx, dy, label in DIRECTIONS:
            nxt = state.offset(dx, dy)
            if self.in_bounds(nxt) and nxt not in self.blocked:
                moves.append(Successor(label, nxt, self.terrain_cost(nxt)))
        return moves

    # ------------------------------------------------------------------
    # Terrain queries
    # ------------------------------------------------------------------
    def in_bounds(self, loc: Coordinate) -> bool:
        return 0 <= loc.x < self.width and 0 <= loc.y < self.height

    def is_mud(self, loc: Coordinate) -> bool:
        return loc in self.mud_tiles

    def is_blocked(self, loc: Coordinate) -> bool:
        return loc in self.blocked

    def terrain_cost(self, loc: Coordinate) -> float:
        """Return the cost of stepping into ``loc``."""

        return self.mud_cost if loc in self.mud_tiles else self.grass_cost

    def move(self, loc: Coordinate, action: str) -> Coordinate:
        """Return the cell reached from ``loc`` by ``action``."""

        try:
            dx, dy = _OFFSETS[action]
        except KeyError:
            raise ValueError(f"Unknown action: {action}") from None
        return loc.offset(dx, dy)

    def replay(self, actions: Iterable[str]) -> Tuple[List[Coordinate], float]:
        """Walk ``actions`` from the start; return visited cells and total cost."""

        loc = self.start
        visited = [loc]
        cost: float = 0
        for action in actions:
            loc = self.move(loc, action)
            if not self.in_bounds(loc) or loc in self.blocked:
                raise ValueError(f"{action} leads off the walkable grid at {loc}")
            cost += self.terrain_cost(loc)
            visited.append(loc)
        return visited, cost


__all__ = ["TerrainMap", "DIRECTIONS"]

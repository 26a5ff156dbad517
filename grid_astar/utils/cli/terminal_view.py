"""Plain-text renderer for search progress on a :class:`TerrainMap`."""

from __future__ import annotations

import sys
from typing import Dict, Hashable, Iterable, Sequence, TextIO

from ...core.coordinate import Coordinate
from ...core.node import SearchNode, reconstruct_path
from ...search.engine import SearchExhausted, SearchResult, SearchSuccess, StepObservation
from ...terrain.terrain_map import TerrainMap


# Arrow glyphs for path cells: light on grass, heavy on mud
_ARROWS = {
    "Up": (" ↑ ", " ⬆ "),
    "Down": (" ↓ ", " ⬇ "),
    "Left": (" ← ", " ⬅ "),
    "Right": (" → ", " ➡ "),
}
_AGENT = " ● "
_GOAL = " ★ "
_START = " ○ "
_FRONTIER = " F "
_FRONTIER_MUD = " M "
_CLOSED = " - "
_MUD = " ~ "
_GRASS = " . "
_BLOCKED = " # "

_RULE_WIDTH = 30
_SUMMARY_WIDTH = 50


def _num(value: float) -> str:
    """Format a cost without a trailing ``.0`` for whole numbers."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _terrain_label(terrain: TerrainMap, loc: Coordinate) -> str:
    return "(MUD)" if terrain.is_mud(loc) else "(GRASS)"


def render_grid(
    terrain: TerrainMap,
    agent: Coordinate,
    path_actions: Sequence[str],
    frontier: Iterable[SearchNode],
    closed: Iterable[Hashable],
) -> str:
    """Return the grid drawn with agent, path, frontier and closed cells.

    ``closed`` holds state keys as recorded by the engine, not coordinates.
    """

    path_cells: Dict[Coordinate, str] = {}
    curr = terrain.start
    for action in path_actions:
        curr = terrain.move(curr, action)
        if curr != agent:
            path_cells[curr] = _ARROWS[action][1 if terrain.is_mud(curr) else 0]

    frontier_cells = {
        node.state
        for node in frontier
        if node.state != agent and node.state not in path_cells
    }
    closed_keys = set(closed)

    lines = ["", "=" * _RULE_WIDTH, "A* GRID STATE", "-" * _RULE_WIDTH]
    for y in range(terrain.height):
        row: list[str] = []
        for x in range(terrain.width):
            p = Coordinate(x, y)
            if p == agent:
                row.append(_AGENT)
            elif p == terrain.goal:
                row.append(_GOAL)
            elif p == terrain.start:
                row.append(_START)
            elif p in path_cells:
                row.append(path_cells[p])
            elif p in frontier_cells:
                row.append(_FRONTIER_MUD if terrain.is_mud(p) else _FRONTIER)
            elif p.key() in closed_keys:
                row.append(_CLOSED)
            elif terrain.is_blocked(p):
                row.append(_BLOCKED)
            elif terrain.is_mud(p):
                row.append(_MUD)
            else:
                row.append(_GRASS)
        lines.append("".join(row))
    lines.append("-" * _RULE_WIDTH)
    return "\n".join(lines) + "\n"


def format_step_header(obs: StepObservation, terrain: TerrainMap) -> str:
    act_text = f"Moved {obs.action}" if obs.action else "Started"
    lines = [
        "",
        f"STEP {obs.step}:",
        f"  CHOSEN: {act_text} to {obs.state} {_terrain_label(terrain, obs.state)}",
        f"  COST DETAIL: f={_num(obs.f_cost)} (g={_num(obs.g_cost)} + h={_num(obs.h_cost)})",
    ]
    if obs.stale:
        lines.append("  SKIPPED: a cheaper path to this cell is already known")
    return "\n".join(lines) + "\n"


def format_menu(frontier: Iterable[SearchNode]) -> str:
    """Return the frontier sorted by ``f_cost`` with the next pick marked."""

    nodes = sorted(frontier, key=lambda n: n.f_cost)
    lines = ["  MENU FOR NEXT STEP (Current Frontier):"]
    if not nodes:
        lines.append("    (Empty)")
    for i, n in enumerate(nodes):
        marker = " -> " if i == 0 else "    "
        lines.append(
            f"{marker} {n.state}: f={_num(n.f_cost)} (g={_num(n.g_cost)} + h={_num(n.h_cost)})"
        )
    return "\n".join(lines) + "\n"


def format_result(result: SearchResult, terrain: TerrainMap) -> str:
    rule = "-" * _SUMMARY_WIDTH
    if isinstance(result, SearchSuccess):
        lines = [
            "",
            f"SUCCESS! Goal reached at {result.node.state}.",
            rule,
            "EXPLORATION DIAGNOSTICS:",
            f"  Path Length:       {result.path_length} steps",
            f"  Path Cost:         {_num(result.cost)}",
            f"  Total Explored:    {result.total_explored} points",
            f"  Search Efficiency: {result.efficiency:.2f}%",
            rule,
        ]
    else:
        assert isinstance(result, SearchExhausted)
        lines = [
            "",
            f"NO PATH! {terrain.goal} cannot be reached from {terrain.start}.",
            rule,
            f"  Total Explored:    {result.total_explored} points",
            f"  Steps Taken:       {result.steps}",
            rule,
        ]
    return "\n".join(lines) + "\n"


class TerminalView:
    """Write a step-by-step search transcript to ``out``."""

    def __init__(
        self, terrain: TerrainMap, out: TextIO | None = None, show_menu: bool = True
    ) -> None:
        self.terrain = terrain
        self.out = out if out is not None else sys.stdout
        self.show_menu = show_menu

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render_step(self, obs: StepObservation) -> None:
        terrain = self.terrain
        self.out.write(format_step_header(obs, terrain))
        self.out.write(
            render_grid(
                terrain,
                obs.state,
                reconstruct_path(obs.node),
                obs.frontier,
                obs.closed,
            )
        )
        if obs.is_goal:
            return
        self.out.write(f"CURRENT LOCATION: {obs.state} {_terrain_label(terrain, obs.state)}\n")
        if self.show_menu:
            self.out.write(format_menu(obs.frontier))

    def render_result(self, result: SearchResult) -> None:
        self.out.write(format_result(result, self.terrain))
        self.out.flush()


__all__ = [
    "TerminalView",
    "render_grid",
    "format_step_header",
    "format_menu",
    "format_result",
]

import io

from grid_astar.core.coordinate import Coordinate
from grid_astar.core.node import SearchNode
from grid_astar.search.engine import SearchEngine, SearchExhausted
from grid_astar.terrain.terrain_map import TerrainMap
from grid_astar.utils.cli import terminal_view
from grid_astar.utils.cli.terminal_view import TerminalView


RULE = "-" * 30


def test_render_grid_glyphs():
    terrain = TerrainMap.from_rows(["S . ~", ". . .", ". . G"])
    frontier = [
        SearchNode(state=Coordinate(2, 0), g_cost=11, h_cost=2),
        SearchNode(state=Coordinate(1, 1), g_cost=2, h_cost=2),
    ]
    text = terminal_view.render_grid(
        terrain, Coordinate(1, 0), ["Right"], frontier, {(0, 0), (1, 0)}
    )
    assert text == (
        "\n" + "=" * 30 + "\nA* GRID STATE\n" + RULE + "\n"
        " ○  ●  M \n"
        " .  F  . \n"
        " .  .  ★ \n" + RULE + "\n"
    )


def test_render_grid_path_arrows_and_closed():
    terrain = TerrainMap.from_rows(["S . ~ .", ". . . G", "# . . ."])
    text = terminal_view.render_grid(
        terrain, Coordinate(3, 0), ["Right", "Right", "Right"], [], {(0, 1)}
    )
    first, second, third = text.splitlines()[4:7]
    assert first == " ○  →  ➡  ● "
    assert second == " -  .  .  ★ "
    assert third == " #  .  .  . "


def test_format_menu_sorted_with_marker():
    nodes = [
        SearchNode(state=Coordinate(0, 1), g_cost=3, h_cost=3),
        SearchNode(state=Coordinate(1, 0), g_cost=1, h_cost=3),
    ]
    lines = terminal_view.format_menu(nodes).splitlines()
    assert lines[0] == "  MENU FOR NEXT STEP (Current Frontier):"
    assert lines[1] == " ->  (Col 1, Row 0): f=4 (g=1 + h=3)"
    assert lines[2] == "     (Col 0, Row 1): f=6 (g=3 + h=3)"
    assert "(Empty)" in terminal_view.format_menu([])


def test_step_header_for_root_and_moves(open_grid):
    steps = SearchEngine(open_grid).steps()
    root = next(steps)
    header = terminal_view.format_step_header(root, open_grid)
    assert "STEP 1:" in header
    assert "CHOSEN: Started to (Col 0, Row 0) (GRASS)" in header
    assert "COST DETAIL: f=4 (g=0 + h=4)" in header
    moved = terminal_view.format_step_header(next(steps), open_grid)
    assert "CHOSEN: Moved " in moved


def test_float_costs_render_without_trailing_zero():
    terrain = TerrainMap.from_rows(["S ~ G"], grass_cost=1.0, mud_cost=2.5)
    result = SearchEngine(terrain).run()
    text = terminal_view.format_result(result, terrain)
    assert "Path Cost:         3.5" in text


def test_view_writes_full_transcript(open_grid):
    out = io.StringIO()
    view = TerminalView(open_grid, out, show_menu=True)
    engine = SearchEngine(open_grid)
    result = engine.run(on_step=view.render_step)
    view.render_result(result)
    text = out.getvalue()
    assert text.count("A* GRID STATE") == result.steps
    assert "MENU FOR NEXT STEP" in text
    assert "CURRENT LOCATION: (Col 0, Row 0) (GRASS)" in text
    assert "SUCCESS! Goal reached at (Col 2, Row 2)." in text
    assert "Path Length:       4 steps" in text
    assert f"Search Efficiency: {result.efficiency:.2f}%" in text


def test_view_without_menu_and_exhausted(walled_goal_grid):
    out = io.StringIO()
    view = TerminalView(walled_goal_grid, out, show_menu=False)
    result = SearchEngine(walled_goal_grid).run(on_step=view.render_step)
    assert isinstance(result, SearchExhausted)
    view.render_result(result)
    text = out.getvalue()
    assert "MENU FOR NEXT STEP" not in text
    assert "NO PATH!" in text
    assert "Total Explored:    5 points" in text

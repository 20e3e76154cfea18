import io
import random

from mazerunner.cli import MazeRunnerApp
from mazerunner.generator import generate_maze
from mazerunner.world import (
    ACACIA_WOOD_PLANK,
    AIR,
    BLUE_CARPET,
    Coordinate,
    MemoryWorld,
)

BASE = Coordinate(10, 1, 10)

VALID_MAZE = "x.xxx\nx...x\nxxx.x\nx...x\nxxxxx\n"
ISOLATED_MAZE = "x.xxx\nx.xxx\nx.x.x\nx.xxx\nxxxxx\n"


def run_app(script, seed=1):
    world = MemoryWorld(player_position=BASE, ground_level=0)
    out = io.StringIO()
    app = MazeRunnerApp(world, io.StringIO(script), out, random.Random(seed))
    app.builder.delay = 0
    status = app.run()
    return app, world, out.getvalue(), status


def printed_maze(text, heading):
    lines = text.splitlines()
    start = lines.index(heading) + 1
    end = lines.index("**End of Printing Maze**", start)
    return lines[start:end]


def test_exit_from_main_menu():
    _, world, text, status = run_app("5\n")
    assert status == 0
    assert "Welcome to MineCraft MazeRunner!" in text
    assert "The End!" in text
    assert world.commands == ["time set day"]


def test_end_of_input_stops_without_exit_message():
    _, _, text, status = run_app("")
    assert status == 0
    assert "------------- MAIN MENU -------------" in text
    assert "The End!" not in text


def test_invalid_main_menu_choice():
    _, _, text, _ = run_app("9\n5\n")
    assert "Error: please input a valid number between 1 and 5..." in text


def test_team_information():
    _, _, text, _ = run_app("4\n5\n")
    assert "Team members:" in text


def test_read_valid_maze():
    app, _, text, _ = run_app("1\n1\ndone\n5\n5\n" + VALID_MAZE + "1\n")
    assert "Maze read successfully" in text
    assert printed_maze(text, "Structure: ") == VALID_MAZE.split()
    assert "The maze is valid maze" in text
    assert app.maze == [list(row) for row in VALID_MAZE.split()]


def test_read_maze_with_isolated_cell_and_fix():
    app, _, text, _ = run_app("1\n1\ndone\n5\n5\n" + ISOLATED_MAZE + "1\n1\n")
    assert "The maze is not valid. Reason(s):" in text
    assert "The maze has isolated cell(s)." in text
    assert app.maze[2][3] == "x"
    assert app.maze[2][1] == "."


def test_read_maze_rejected_fix_discards_maze():
    app, _, text, _ = run_app("1\n1\ndone\n5\n5\n" + ISOLATED_MAZE + "1\n2\n2\n")
    assert "The maze has been terminated. Please try again." in text
    assert app.maze is None
    assert "Sorry there is no maze saved." in text


def test_read_maze_requires_done():
    app, _, text, _ = run_app("1\n1\nlater\n5\n")
    assert "Input Error: Unknown input, please type - done" in text
    assert app.maze is None


def test_generate_reprompts_invalid_dimensions_and_matches_generator():
    app, _, text, _ = run_app("1\n2\ndone\n4\n101\n5\n2\n5\n", seed=7)
    assert text.count("Invalid input.") == 3
    rows = printed_maze(text, "Structure:")
    expected = generate_maze(5, 5, random.Random(7))
    assert rows == ["".join(row) for row in expected]
    assert (app.xlen, app.zlen) == (5, 5)


def test_generate_menu_invalid_choice():
    _, _, text, _ = run_app("1\n9\n3\n5\n")
    assert "Error: please input a valid number between 1 and 3..." in text


def test_build_without_maze():
    _, world, text, _ = run_app("2\n5\n")
    assert "Sorry there is no maze saved." in text
    assert world.get_block(BASE) == AIR


def test_build_generated_maze_places_gate_and_walls():
    _, world, text, _ = run_app("1\n2\ndone\n5\n5\n2\n")
    assert "The maze is built! Thank you for bearing with us." in text
    # Gate cell (0, 1) lands at mirrored z offset 3.
    assert world.get_block(BASE.offset(0, 0, 3)) == BLUE_CARPET
    # Corner cell (0, 0) is a wall three blocks tall.
    for dy in range(3):
        assert world.get_block(BASE.offset(0, dy, 4)) == ACACIA_WOOD_PLANK


def test_exit_cleans_up_built_maze():
    app, world, _, _ = run_app("1\n2\ndone\n5\n5\n2\n5\n")
    assert app.builder.is_clean()
    assert world.get_block(BASE.offset(0, 0, 3)) == AIR
    assert world.get_block(BASE.offset(0, 2, 4)) == AIR


def test_escape_extension_finds_exit():
    _, _, text, _ = run_app("1\n2\ndone\n5\n5\n2\n3\n1\n2\n2\n3\n")
    assert "Exit has been found!" in text


def test_basic_solver_finds_exit():
    _, _, text, _ = run_app("1\n2\ndone\n7\n7\n2\n3\n1\n2\n1\n3\n", seed=3)
    assert "Exit found!" in text


def test_manual_solve_places_player_on_open_cell():
    _, world, _, _ = run_app("1\n2\ndone\n5\n5\n2\n3\n1\n3\n")
    position = world.get_player_position()
    assert position != BASE
    assert world.get_block(position) == AIR
    assert 0 <= position.x - BASE.x < 5 and 0 <= position.z - BASE.z < 5


def test_solve_menu_invalid_choice():
    _, _, text, _ = run_app("3\n7\n5\n")
    assert "Input Error: please input a valid number between 1 and 3..." in text


def test_escape_submenu_invalid_choice():
    _, _, text, _ = run_app("3\n2\n9\n3\n5\n")
    assert "Error: please input a valid number between 1 and 2..." in text
from mazerunner.escape import EscapeSolver
from mazerunner.world import (
    ACACIA_WOOD_PLANK,
    AIR,
    BLUE_CARPET,
    LIME_CARPET,
    Coordinate,
    MemoryWorld,
)

Y = 1


def make_world(rows):
    world = MemoryWorld(ground_level=0)
    for x, row in enumerate(rows):
        for z, cell in enumerate(row):
            if cell == "x":
                world.set_block(Coordinate(x, Y, z), ACACIA_WOOD_PLANK)
            elif cell == "C":
                world.set_block(Coordinate(x, Y, z), BLUE_CARPET)
    return world


CORRIDOR = [
    "xxxxx",
    "x...C",
    "xxxxx",
]

SEALED = [
    "xxxx",
    "x..x",
    "xxxx",
]


def test_finds_exit_in_corridor():
    world = make_world(CORRIDOR)
    solver = EscapeSolver(world, Coordinate(0, Y, 0))
    assert solver.find_path(1, 1) is True
    assert world.get_block(Coordinate(1, Y, 4)) == BLUE_CARPET
    for z in (1, 2, 3):
        assert world.get_block(Coordinate(1, Y, z)) == LIME_CARPET


def test_starting_on_exit_marks_nothing():
    world = make_world(CORRIDOR)
    solver = EscapeSolver(world, Coordinate(0, Y, 0))
    assert solver.find_path(1, 4) is True
    assert world.get_block(Coordinate(1, Y, 3)) == AIR


def test_sealed_area_has_no_path_and_is_fully_marked():
    world = make_world(SEALED)
    solver = EscapeSolver(world, Coordinate(0, Y, 0))
    assert solver.find_path(1, 1) is False
    assert world.get_block(Coordinate(1, Y, 1)) == LIME_CARPET
    assert world.get_block(Coordinate(1, Y, 2)) == LIME_CARPET
    assert world.get_block(Coordinate(0, Y, 1)) == ACACIA_WOOD_PLANK


def test_walls_are_never_carpeted():
    world = make_world(CORRIDOR)
    EscapeSolver(world, Coordinate(0, Y, 0)).find_path(1, 1)
    for x, row in enumerate(CORRIDOR):
        for z, cell in enumerate(row):
            if cell == "x":
                assert world.get_block(Coordinate(x, Y, z)) == ACACIA_WOOD_PLANK


def test_search_uses_base_point_height():
    world = make_world(CORRIDOR)
    solver = EscapeSolver(world, Coordinate(0, Y, 0))
    solver.find_path(1, 1)
    assert world.get_block(Coordinate(1, Y + 1, 1)) == AIR


def test_show_escape_reports_success(capsys):
    world = make_world(CORRIDOR)
    assert EscapeSolver(world, Coordinate(0, Y, 0)).show_escape(1, 2) is True
    assert capsys.readouterr().out == "Exit has been found!\n"


def test_show_escape_reports_failure(capsys):
    world = make_world(SEALED)
    assert EscapeSolver(world, Coordinate(0, Y, 0)).show_escape(1, 2) is False
    assert capsys.readouterr().out == "Path not found.\n"
# mazerunner

An interactive maze tool for a Minecraft world. It can:

- read a maze from the terminal or generate a random one by recursive backtracking;
- check a maze for loops, isolated cells and the number of exits, and optionally fix it by turning the offending cells into walls;
- flatten the ground and build the maze in the world from acacia planks three blocks high, with a blue carpet on each exit;
- put the player on a random open cell inside the maze;
- show the way out, either by following the right-hand wall or by a breadth-first search; both lay lime carpet on the floor they cover;
- put back every block it changed when you leave.

## Installing

```
pip install .
```

## Running

Start a Minecraft server that accepts remote commands over its line-based text
protocol, then run:

```
mazerunner
```

By default it connects to `localhost` on port `4711`; use `--host` and `--port`
to choose another server. If the connection fails, the command prints the error
and exits with status 1.

A menu appears:

```
1) Generate Maze
2) Build Maze in MineCraft
3) Solve Maze
4) Show Team Information
5) Exit
```

- **Generate Maze** first asks you to walk to where the maze should stand and
  type `done`; that spot becomes the base point. Then give the length (x) and
  width (z), each an odd number from 3 to 99; other values are asked for again.
  You can then type the maze in (`x` for walls, `.` for paths, `x`-length rows
  of `z` characters; whitespace between characters is ignored) and optionally
  validate and fix it, or have a random one generated.
- **Build Maze in MineCraft** marks open border cells as exits, undoes any
  earlier build, flattens the area and builds the maze.
- **Solve Maze** offers *Solve Manually*, which places the player on a random
  open cell, and *Show Escape Route*, which offers *Basic* (right-hand wall
  following from the player's position) or *Extension* (breadth-first search
  from the player's position).
- **Exit** puts back every block the build and the flattening changed.

The menu also ends when input runs out.

## Use from Python

The pieces also work without a server. `MemoryWorld` is a flat world held in
memory: grass up to the given ground level, air above it.

```python
import random

from mazerunner.generator import generate_maze
from mazerunner.validator import MazeValidator
from mazerunner.builder import MazeBuilder, mark_exits
from mazerunner.escape import EscapeSolver
from mazerunner.world import Coordinate, MemoryWorld

maze = generate_maze(7, 9, random.Random(1))
report = MazeValidator(maze).validate()
print(report.is_valid(), report.reasons())

base = Coordinate(0, 64, 0)
world = MemoryWorld(base, 63)
builder = MazeBuilder(world, base, 7, 9, 0)
builder.flatten_area(7, 9)
builder.build(mark_exits(maze))

print(EscapeSolver(world, base).find_path(1, 1))
builder.clean_up()
print(builder.is_clean())
```

The modules:

- `mazerunner.world` — `Coordinate`, `BlockType`, the abstract `World`,
  `MemoryWorld`, and `MinecraftConnection` (a context manager for a live server).
- `mazerunner.generator` — `MazeGenerator` and `generate_maze`.
- `mazerunner.validator` — `MazeValidator` and `ValidationReport`.
- `mazerunner.builder` — `MazeBuilder`, `ChangedBlock` and `mark_exits`.
  The `delay` argument sets the pause in seconds after each block placed (0.05 by default).
- `mazerunner.escape` — `EscapeSolver`, breadth-first search for the blue carpet.
- `mazerunner.agent` — `Agent` and `Heading`, the right-hand wall follower;
  `Agent.walk` raises `RuntimeError` when no exit can be reached.
- `mazerunner.cli` — `MazeRunnerApp`, the menu, and `main`, the command.

## Running the tests

```
pip install ".[test]"
pytest
```
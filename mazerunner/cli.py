"""Interactive menu for generating, building and solving mazes in a block world."""

from __future__ import annotations

import argparse
import random
import sys
from contextlib import redirect_stdout
from enum import Enum, auto

from .agent import Agent
from .builder import MazeBuilder, mark_exits
from .escape import EscapeSolver
from .generator import MazeGenerator
from .validator import MazeValidator
from .world import MinecraftConnection

MIN_SIZE = 3
MAX_SIZE = 99


class State(Enum):
    """The screens of the menu."""

    MAIN = auto()
    GET_MAZE = auto()
    BUILD_MAZE = auto()
    SOLVE_MAZE = auto()
    CREATORS = auto()
    EXIT = auto()


class _InputEnded(Exception):
    """Input ran out or could not be read as the expected value."""


class _Tokens:
    """Whitespace-separated reading from a text stream."""

    def __init__(self, stream):
        self._stream = stream
        self._pending = ""

    def _fill(self):
        self._pending = self._pending.lstrip()
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise _InputEnded
            self._pending = line.lstrip()

    def token(self):
        self._fill()
        parts = self._pending.split(maxsplit=1)
        self._pending = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def char(self):
        self._fill()
        first, self._pending = self._pending[0], self._pending[1:]
        return first

    def integer(self):
        try:
            return int(self.token())
        except ValueError:
            raise _InputEnded from None


_MAIN_MENU = (
    "",
    "------------- MAIN MENU -------------",
    "1) Generate Maze",
    "2) Build Maze in MineCraft",
    "3) Solve Maze",
    "4) Show Team Information",
    "5) Exit",
    "",
    "Enter Menu item to continue: ",
)

_GENERATE_MENU = (
    "",
    "------------- GENERATE MAZE -------------",
    "1) Read Maze from terminal",
    "2) Generate Random Maze",
    "3) Back",
    "",
    "Enter Menu item to continue: ",
)

_SOLVE_MENU = (
    "",
    "------------- SOLVE MAZE -------------",
    "1) Solve Manually",
    "2) Show Escape Route",
    "3) Back",
    "",
    "Enter Menu item to continue: ",
)

_NO_MAZE = ("Sorry there is no maze saved.", "Please allocate a new maze.")


class MazeRunnerApp:
    """The menu-driven maze runner, reading commands from a text stream."""

    def __init__(self, world, stdin=None, stdout=None, rng=None):
        self.world = world
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self._input = _Tokens(self.stdin)
        self.base_point = world.get_player_position()
        self.maze = None
        self.xlen = 0
        self.zlen = 0
        self.builder = MazeBuilder(world, self.base_point)
        self.agent = Agent(world, self.base_point, rng=self.rng)
        self._handlers = {
            State.MAIN: self._main_menu,
            State.GET_MAZE: self._get_maze,
            State.BUILD_MAZE: self._build_maze,
            State.SOLVE_MAZE: self._solve_maze,
            State.CREATORS: self._creators,
        }

    def _say(self, *lines):
        for line in lines:
            self.stdout.write(f"{line}\n")

    def run(self):
        """Run the menu until the user exits or input ends; returns the exit status."""
        self.world.do_command("time set day")
        self._say("", "Welcome to MineCraft MazeRunner!", "--------------------------------")
        state = State.MAIN
        try:
            while state is not State.EXIT:
                state = self._handlers[state]()
        except _InputEnded:
            pass
        return 0

    def _main_menu(self):
        self._say(*_MAIN_MENU)
        choice = self._input.token()
        if choice == "1":
            return State.GET_MAZE
        if choice == "2":
            return State.BUILD_MAZE
        if choice == "3":
            return State.SOLVE_MAZE
        if choice == "4":
            return State.CREATORS
        if choice == "5":
            self.builder.clean_up()
            self.maze = None
            self._say("", "The End!", "")
            return State.EXIT
        self._say("Error: please input a valid number between 1 and 5...")
        return State.MAIN

    def _take_base_point(self):
        self.base_point = self.world.get_player_position()

    def _read_dimension(self, prompt):
        self._say(prompt)
        value = self._input.integer()
        while value % 2 == 0 or not MIN_SIZE <= value <= MAX_SIZE:
            self._say("Invalid input.")
            value = self._input.integer()
        return value

    def _read_dimensions(self):
        self._say(
            "Enter the length and width of the maze "
            f"(odd numbers only, minimum {MIN_SIZE}, and maximum {MAX_SIZE})."
        )
        self.xlen = self._read_dimension("Enter the length (x length)")
        self.zlen = self._read_dimension("Enter the width (z length)")

    def _print_maze(self, heading, show_base=True):
        self._say("**Printing Maze**")
        if show_base:
            base = self.base_point
            self._say(f"BasePoint: ({base.x}, {base.y}, {base.z})")
        self._say(heading)
        self._say(*("".join(row) for row in self.maze))
        self._say("**End of Printing Maze**")

    def _get_maze(self):
        self._say(*_GENERATE_MENU)
        choice = self._input.token()
        if choice == "1":
            self._read_maze()
            return State.MAIN
        if choice == "2":
            self._generate_maze()
            return State.MAIN
        if choice == "3":
            return State.MAIN
        self._say("Error: please input a valid number between 1 and 3...")
        return State.GET_MAZE

    def _read_maze(self):
        self._say(
            "In Minecraft, please navigate to where you need the maze",
            "to be built in Minecraft and type - done:",
        )
        if self._input.token() != "done":
            self._say("Input Error: Unknown input, please type - done")
            return
        self._take_base_point()
        self.maze = None
        self._read_dimensions()
        self.builder.reset(self.base_point, self.xlen, self.zlen)

        self._say("Please enter the structure of the maze:")
        self.maze = [
            [self._input.char() for _ in range(self.zlen)] for _ in range(self.xlen)
        ]
        self._say("Maze read successfully")
        self._print_maze("Structure: ")
        self._say("")

        self._say("Do you want to validate the maze? (Please select 1 or 2)", "1)Yes", "2)No")
        if self._input.token() == "1":
            self._validate_maze()

    def _validate_maze(self):
        validator = MazeValidator(self.maze)
        report = validator.validate()
        if report.is_valid():
            self._say("The maze is valid maze")
            return
        self._say("The maze is not valid. Reason(s):", *report.reasons())
        self._say("", "Do you want to fix the maze? (Please select 1 or 2)", "", "1)Yes", "2)No")
        if self._input.token() == "1":
            self.maze = validator.fixed_structure()
            self._print_maze("Structure: ", show_base=False)
        else:
            self._say("", "The maze has been terminated. Please try again.")
            self.maze = None

    def _generate_maze(self):
        self._say(
            "In Minecraft, Please navigate to where you need the maze",
            "to be built in Minecraft and type - done",
        )
        if self._input.token() != "done":
            return
        self._take_base_point()
        self._say("")
        self._read_dimensions()
        self.builder.reset(self.base_point, self.xlen, self.zlen)
        self.maze = MazeGenerator(self.xlen, self.zlen, self.rng).generate()
        self._print_maze("Structure:")
        self._say("")

    def _build_maze(self):
        if self.maze is None:
            self._say(*_NO_MAZE)
            return State.MAIN
        self._say("The maze is being built. Please standby!")
        self.maze = mark_exits(self.maze)
        if not self.builder.is_clean():
            self.builder.clean_up()
        self._say("Flattening the earth...", "Readying the area...")
        self.builder.flatten_area(self.xlen, self.zlen)
        self._say("Building the maze...")
        self.builder.build(self.maze)
        self._say("The maze is built! Thank you for bearing with us.")
        return State.MAIN

    def _solve_maze(self):
        self._say(*_SOLVE_MENU)
        choice = self._input.token()
        if choice == "1":
            if self.maze is None:
                self._say(*_NO_MAZE)
                return State.MAIN
            self.maze = mark_exits(self.maze)
            self.agent.reset(self.base_point, self.xlen, self.zlen)
            try:
                self.agent.place_randomly(self.maze)
            except ValueError as error:
                self._say(f"Error: {error}.")
            return State.SOLVE_MAZE
        if choice == "2":
            self._show_escape()
            return State.SOLVE_MAZE
        if choice == "3":
            return State.MAIN
        self._say("Input Error: please input a valid number between 1 and 3...")
        return State.MAIN

    def _show_escape(self):
        self._say("Select how you want to solve the maze: ", "1) Basic", "2) Extension")
        choice = self._input.token()
        if choice == "1":
            with redirect_stdout(self.stdout):
                try:
                    self.agent.initialise()
                    self.agent.walk()
                except RuntimeError as error:
                    print(f"Error: {error}.")
        elif choice == "2":
            position = self.world.get_player_position()
            solver = EscapeSolver(self.world, self.base_point)
            with redirect_stdout(self.stdout):
                solver.show_escape(position.x, position.z)
        else:
            self._say("Error: please input a valid number between 1 and 2...")

    def _creators(self):
        self._say("", "Team members:", "\t [1] The MazeRunner team", "")
        return State.MAIN


def main(argv=None):
    """Connect to a game server and run the interactive maze runner."""
    parser = argparse.ArgumentParser(
        prog="mazerunner", description="Generate, build and solve mazes in a block world."
    )
    parser.add_argument("--host", default="localhost", help="server host name")
    parser.add_argument("--port", type=int, default=4711, help="server port")
    args = parser.parse_args(argv)
    try:
        world = MinecraftConnection(args.host, args.port)
    except OSError as error:
        print(f"Could not connect to {args.host}:{args.port}: {error}", file=sys.stderr)
        return 1
    with world:
        return MazeRunnerApp(world).run()


if __name__ == "__main__":
    sys.exit(main())
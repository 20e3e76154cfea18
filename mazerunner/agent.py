"""An agent that finds the exit carpet by keeping a wall on its right."""

from __future__ import annotations

import random
from enum import Enum

from .world import ACACIA_WOOD_PLANK, BLUE_CARPET, LIME_CARPET, Coordinate

PATH = "."


class Heading(Enum):
    """The way the agent faces, as an (x, z) step; each turn right follows the next."""

    SOUTH = (0, 1)
    WEST = (1, 0)
    NORTH = (0, -1)
    EAST = (-1, 0)

    @property
    def forward(self):
        """The (x, z) step taken when moving ahead."""
        return self.value

    @property
    def right(self):
        """The (x, z) offset of the cell on the agent's right."""
        return self.turned_right().value

    def turned_right(self):
        """The heading after a quarter turn to the right."""
        order = list(Heading)
        return order[(order.index(self) + 1) % len(order)]

    def turned_left(self):
        """The heading after a quarter turn to the left."""
        return self.turned_right().turned_right().turned_right()


class Agent:
    """Walks the floor at the base point's height following the right-hand wall."""

    def __init__(self, world, base_point, xlen=0, zlen=0, rng=None):
        self.world = world
        self.base_point = base_point
        self.xlen = xlen
        self.zlen = zlen
        self.rng = rng if rng is not None else random.Random()
        self.location = None
        self.heading = None

    def reset(self, base_point, xlen, zlen):
        """Point the agent at a new maze and forget where it was."""
        self.base_point = base_point
        self.xlen = xlen
        self.zlen = zlen
        self.location = None
        self.heading = None

    def place_randomly(self, maze):
        """Put the player on a random open cell of the maze and return that cell.

        The z axis is mirrored in the same way the maze is built.
        """
        candidates = [
            self.base_point.offset(x, 0, len(row) - 1 - z)
            for x, row in enumerate(maze)
            for z, cell in enumerate(row)
            if cell == PATH
        ]
        if not candidates:
            raise ValueError("maze has no open cell to place the agent on")
        chosen = candidates[self.rng.randrange(len(candidates))]
        self.location = chosen
        self.heading = None
        self.world.set_player_tile_position(chosen)
        return chosen

    def _require_location(self):
        if self.location is None:
            raise RuntimeError("agent has no location; call initialise() first")
        return self.location

    def _require_heading(self):
        if self.heading is None:
            raise RuntimeError("agent has no heading; call initialise() first")
        return self.heading

    def step(self, heading):
        """Move one cell in the given heading and return the new location."""
        dx, dz = heading.forward
        self.location = self._require_location().offset(dx, 0, dz)
        return self.location

    def _is_wall(self, position, offset):
        dx, dz = offset
        return self.world.get_block(position.offset(dx, 0, dz)) == ACACIA_WOOD_PLANK

    def _follows_wall(self, position, heading):
        return not self._is_wall(position, heading.forward) and self._is_wall(
            position, heading.right
        )

    def initialise(self):
        """Take the player's position and find a heading with a wall on the right.

        If no neighbouring wall fits, the agent sets off in a random heading,
        turning left at walls, until one does. Returns the chosen heading.
        """
        player = self.world.get_player_position()
        print(player)
        self.location = Coordinate(player.x, self.base_point.y, player.z)

        match = None
        for heading in Heading:
            if self._follows_wall(self.location, heading):
                match = heading

        if match is None:
            headings = list(Heading)
            heading = headings[self.rng.randrange(len(headings))]
            seen = set()
            while not self._follows_wall(self.location, heading):
                state = (self.location, heading)
                if state in seen:
                    raise RuntimeError("could not initialise: no wall to follow")
                seen.add(state)
                if self._is_wall(self.location, heading.forward):
                    heading = heading.turned_left()
                else:
                    self.step(heading)
            match = heading

        self.heading = match
        return match

    def turn_right(self):
        """Turn a quarter to the right."""
        self.heading = self._require_heading().turned_right()

    def walk(self):
        """Follow the right-hand wall to the exit, laying lime carpet on the way.

        Returns every location the agent stood on, ending on the exit carpet.
        Raises RuntimeError if the walk would go round for ever.
        """
        self._require_heading()
        position = self._require_location()
        path = [position]
        seen = set()
        while self.world.get_block(position) != BLUE_CARPET:
            state = (position, self.heading)
            if state in seen:
                raise RuntimeError("no exit reachable from the agent's position")
            seen.add(state)

            if self.world.get_block(position) != ACACIA_WOOD_PLANK:
                self.world.set_block(position, LIME_CARPET)

            if not self._is_wall(position, self.heading.right):
                self.turn_right()
                position = self.step(self.heading)
            elif not self._is_wall(position, self.heading.forward):
                position = self.step(self.heading)
            else:
                self.heading = self.heading.turned_left()
                continue
            print(position)
            path.append(position)

        print("Exit found!")
        return path
"""Flattening terrain, building a maze in the world and undoing every change."""

from __future__ import annotations

import time
from dataclasses import dataclass

from .world import ACACIA_WOOD_PLANK, AIR, BLUE_CARPET, BlockType, Coordinate

WALL = "x"
PATH = "."
EXIT = "C"

WALL_HEIGHT = 3
DEFAULT_DELAY = 0.05


@dataclass(frozen=True)
class ChangedBlock:
    """A block position together with what it held before it was changed."""

    position: Coordinate
    block: BlockType = AIR


def mark_exits(maze):
    """Return a copy of the maze with every open border cell turned into an exit."""
    grid = [list(row) for row in maze]
    if not grid or not grid[0]:
        return grid
    last_x = len(grid) - 1
    last_z = len(grid[0]) - 1
    for x, row in enumerate(grid):
        for z, cell in enumerate(row):
            if cell == PATH and (x in (0, last_x) or z in (0, last_z)):
                row[z] = EXIT
    return grid


class MazeBuilder:
    """Builds a maze at a base point and remembers every block it touches."""

    def __init__(self, world, base_point, xlen=0, zlen=0, delay=DEFAULT_DELAY):
        self.world = world
        self.base_point = base_point
        self.xlen = xlen
        self.zlen = zlen
        self.delay = delay
        self._flattened: list[ChangedBlock] = []
        self._built: list[ChangedBlock] = []

    @property
    def flattened(self):
        """Changes made while flattening, oldest first."""
        return tuple(self._flattened)

    @property
    def built(self):
        """Changes made while building, oldest first."""
        return tuple(self._built)

    def _pause(self):
        if self.delay > 0:
            time.sleep(self.delay)

    def reset(self, base_point, xlen, zlen):
        """Point the builder at a new base point and size."""
        self.base_point = base_point
        self.xlen = xlen
        self.zlen = zlen

    def teleport_to_base_point(self):
        """Move the player onto the base point."""
        self.world.set_player_tile_position(self.base_point)

    def flatten_area(self, xlen, zlen):
        """Level the area so its surface sits just below the base point."""
        self.xlen = xlen
        self.zlen = zlen
        base = self.base_point
        world = self.world

        fill = world.get_block(base.offset(dy=-1))
        if fill == AIR:
            fill = ACACIA_WOOD_PLANK

        columns = [
            (x, z)
            for x in range(base.x, base.x + xlen)
            for z in range(base.z, base.z + zlen)
        ]

        for x, z in columns:
            height = world.get_height(x, z)
            for y in range(height, base.y - 1, -1):
                position = Coordinate(x, y, z)
                self._flattened.append(ChangedBlock(position, world.get_block(position)))
                world.set_block(position, AIR)
                self._pause()

        for x, z in columns:
            if world.get_height(x, z) >= base.y - 1:
                continue
            top = Coordinate(x, base.y - 1, z)
            under = Coordinate(x, base.y - 2, z)
            if world.get_block(under).id != AIR.id:
                self._flattened.append(ChangedBlock(top))
                world.set_block(top, fill)
                self._pause()
            else:
                world.set_block(under, fill)
                self._pause()
                self._flattened.append(ChangedBlock(top))
                world.set_block(top, fill)
                self._pause()
                self._flattened.append(ChangedBlock(under))

    def build(self, maze):
        """Place walls and exit carpets; the z axis of the map is mirrored."""
        base = self.base_point
        zlen = len(maze[0]) if maze else 0
        for i, row in enumerate(maze):
            for j, cell in enumerate(row):
                position = base.offset(i, 0, zlen - 1 - j)
                if cell == WALL:
                    for dy in range(WALL_HEIGHT):
                        block_position = position.offset(dy=dy)
                        self.world.set_block(block_position, ACACIA_WOOD_PLANK)
                        self._pause()
                        self._built.append(ChangedBlock(block_position))
                elif cell == EXIT:
                    self.world.set_block(position, BLUE_CARPET)
                    self._pause()
                    self._built.append(ChangedBlock(position))

    def _restore(self, changes):
        for change in changes:
            self.world.set_block(change.position, change.block)

    def clean_up_building(self):
        """Put back what the maze replaced."""
        self._restore(self._built)

    def clean_up_flatten(self):
        """Put back what flattening replaced."""
        self._restore(self._flattened)

    def clean_up(self):
        """Undo the maze and the flattening, then forget both."""
        self.clean_up_building()
        self.clean_up_flatten()
        self._built.clear()
        self._flattened.clear()

    def is_clean(self):
        """True when no changes are left to undo."""
        return not self._flattened and not self._built
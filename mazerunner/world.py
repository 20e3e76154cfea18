"""Block worlds the maze runner can work in: an in-memory one and a live server."""

from __future__ import annotations

import math
import socket
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """An integer block position."""

    x: int = 0
    y: int = 0
    z: int = 0

    def offset(self, dx=0, dy=0, dz=0):
        """Return the coordinate moved by the given deltas."""
        return Coordinate(self.x + dx, self.y + dy, self.z + dz)

    def __str__(self):
        return f"({self.x}, {self.y}, {self.z})"


@dataclass(frozen=True)
class BlockType:
    """A block identifier with its data value."""

    id: int
    data: int = 0


AIR = BlockType(0)
GRASS = BlockType(2)
ACACIA_WOOD_PLANK = BlockType(5, 4)
LIME_CARPET = BlockType(171, 5)
BLUE_CARPET = BlockType(171, 11)

MIN_Y = -64


class World(ABC):
    """The operations the maze runner needs from a block world."""

    @abstractmethod
    def get_block(self, position):
        """Return the block at a position."""

    @abstractmethod
    def set_block(self, position, block):
        """Place a block at a position."""

    @abstractmethod
    def get_height(self, x, z):
        """Return the y of the highest non-air block in a column."""

    @abstractmethod
    def get_player_position(self):
        """Return the player's tile position."""

    @abstractmethod
    def set_player_tile_position(self, position):
        """Move the player to a tile position."""

    @abstractmethod
    def do_command(self, command):
        """Run a server command."""


class MemoryWorld(World):
    """A flat world kept in memory: grass up to ``ground_level``, air above."""

    def __init__(self, player_position=None, ground_level=0):
        self.ground_level = ground_level
        self.player_position = (
            player_position
            if player_position is not None
            else Coordinate(0, ground_level + 1, 0)
        )
        self.commands: list[str] = []
        self._columns: dict[tuple[int, int], dict[int, BlockType]] = {}

    def get_block(self, position):
        column = self._columns.get((position.x, position.z))
        if column is not None and position.y in column:
            return column[position.y]
        if MIN_Y <= position.y <= self.ground_level:
            return GRASS
        return AIR

    def set_block(self, position, block):
        self._columns.setdefault((position.x, position.z), {})[position.y] = block

    def get_height(self, x, z):
        column = self._columns.get((x, z), {})
        top = max([self.ground_level, *column])
        for y in range(top, MIN_Y - 1, -1):
            if self.get_block(Coordinate(x, y, z)) != AIR:
                return y
        return MIN_Y - 1

    def get_player_position(self):
        return self.player_position

    def set_player_tile_position(self, position):
        self.player_position = Coordinate(position.x, position.y, position.z)

    def do_command(self, command):
        self.commands.append(command)


_TIMEOUT = 10.0


class MinecraftConnection(World):
    """A world reached over the line-based text protocol of a game server."""

    def __init__(self, host="localhost", port=4711):
        self._sock = socket.create_connection((host, port), timeout=_TIMEOUT)
        self._reader = self._sock.makefile("r", encoding="utf-8", newline="\n")

    def close(self):
        self._reader.close()
        self._sock.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def _send(self, method, *args):
        line = f"{method}({','.join(str(arg) for arg in args)})\n"
        self._sock.sendall(line.encode("utf-8"))

    def _query(self, method, *args):
        self._send(method, *args)
        reply = self._reader.readline()
        if not reply:
            raise ConnectionError("connection closed by server")
        reply = reply.rstrip("\r\n")
        if reply == "Fail":
            raise RuntimeError(f"server could not run {method}")
        return reply

    def get_block(self, position):
        reply = self._query(
            "world.getBlockWithData", position.x, position.y, position.z
        )
        parts = [int(part) for part in reply.split(",")]
        return BlockType(parts[0], parts[1] if len(parts) > 1 else 0)

    def set_block(self, position, block):
        self._send(
            "world.setBlock", position.x, position.y, position.z, block.id, block.data
        )

    def get_height(self, x, z):
        return int(self._query("world.getHeight", x, z))

    def get_player_position(self):
        reply = self._query("player.getPos")
        x, y, z = (math.floor(float(part)) for part in reply.split(","))
        return Coordinate(x, y, z)

    def set_player_tile_position(self, position):
        self._send("player.setTile", position.x, position.y, position.z)

    def do_command(self, command):
        self._send("player.doCommand", command)
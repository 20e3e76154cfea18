"""Breadth-first search for the exit carpet, marking the explored floor."""

from __future__ import annotations

from collections import deque

from .world import ACACIA_WOOD_PLANK, BLUE_CARPET, LIME_CARPET, Coordinate

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class EscapeSolver:
    """Searches the floor at the base point's height for the blue exit carpet."""

    def __init__(self, world, base_point):
        self.world = world
        self.base_point = base_point

    def find_path(self, x, z):
        """Search outward from (x, z), laying lime carpet; True if the exit is reached."""
        y = self.base_point.y
        queue = deque([Coordinate(x, y, z)])
        seen = set()
        while queue:
            current = queue.popleft()
            if current in seen:
                continue
            seen.add(current)
            if self.world.get_block(current) == BLUE_CARPET:
                return True
            self.world.set_block(current, LIME_CARPET)
            for dx, dz in _STEPS:
                neighbour = current.offset(dx, 0, dz)
                block = self.world.get_block(neighbour)
                if block != ACACIA_WOOD_PLANK and block != LIME_CARPET:
                    queue.append(neighbour)
        return False

    def show_escape(self, x, z):
        """Run the search and report the outcome on standard output."""
        found = self.find_path(x, z)
        print("Exit has been found!" if found else "Path not found.")
        return found
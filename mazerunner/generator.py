"""Random perfect mazes carved by recursive backtracking."""

from __future__ import annotations

import random

WALL = "x"
PATH = "."

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class MazeGenerator:
    """Carves a maze of ``length`` rows by ``width`` columns, indexed ``[x][z]``."""

    def __init__(self, length, width, rng=None):
        if length < 2 or width < 2:
            raise ValueError("maze must be at least 2 by 2")
        self.length = length
        self.width = width
        self.rng = rng if rng is not None else random.Random()

    def _directions(self):
        turn = [0, 1, 2, 3]
        for i in range(4):
            j = self.rng.randrange(4)
            turn[i], turn[j] = turn[j], turn[i]
        return iter([_STEPS[t] for t in turn])

    def generate(self):
        """Return a fresh maze: walls everywhere, paths from (1, 1), gate at (0, 1)."""
        grid = [[WALL] * self.width for _ in range(self.length)]

        grid[1][1] = PATH
        stack = [(1, 1, self._directions())]
        while stack:
            x, z, directions = stack[-1]
            for dx, dz in directions:
                nx, nz = x + 2 * dx, z + 2 * dz
                if (
                    0 < nx < self.length - 1
                    and 0 < nz < self.width - 1
                    and grid[nx][nz] != PATH
                ):
                    grid[x + dx][z + dz] = PATH
                    grid[nx][nz] = PATH
                    stack.append((nx, nz, self._directions()))
                    break
            else:
                stack.pop()

        grid[0][1] = PATH
        return grid


def generate_maze(length, width, rng=None):
    """Return a random maze of the given size."""
    return MazeGenerator(length, width, rng).generate()
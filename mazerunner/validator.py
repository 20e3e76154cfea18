"""Checks a maze for loops, unreachable cells and the number of exits."""

from __future__ import annotations

from dataclasses import dataclass

WALL = "x"
PATH = "."
_VISITED = "v"

# Right, down, left, up.
_LOOP_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_FLOOD_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class ValidationReport:
    """The outcome of validating a maze."""

    has_loops: bool
    has_isolated_cells: bool
    gates: int

    def is_valid(self):
        """True when the maze has no loops, no isolated cells and one exit."""
        return not self.has_loops and not self.has_isolated_cells and self.gates == 1

    def reasons(self):
        """Human-readable reasons the maze is not valid, in report order."""
        messages = []
        if self.has_loops:
            messages.append("The maze has loop(s).")
        if self.has_isolated_cells:
            messages.append("The maze has isolated cell(s).")
        if self.gates == 0:
            messages.append("The maze has no way out.")
        if self.gates > 1:
            messages.append("The maze has more than 1 way out.")
        return messages


def _to_grid(structure):
    grid = [list(row) for row in structure]
    if not grid or not grid[0]:
        raise ValueError("maze must have at least one row and one column")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("maze rows must all have the same length")
    return grid


class MazeValidator:
    """Validates a maze indexed ``[x][z]`` and collects the walls that fix it."""

    def __init__(self, structure):
        self._original = _to_grid(structure)
        self.xlen = len(self._original)
        self.zlen = len(self._original[0])
        self._fixed = self._copy()

    def _copy(self):
        return [row[:] for row in self._original]

    def _inside(self, x, z):
        return 0 <= x < self.xlen and 0 <= z < self.zlen

    def count_gates(self):
        """Count open border cells; an open corner counts once per side."""
        grid = self._original
        return (
            sum(row[0] != WALL for row in grid)
            + sum(row[-1] != WALL for row in grid)
            + sum(cell != WALL for cell in grid[0])
            + sum(cell != WALL for cell in grid[-1])
        )

    def _walk_paths(self, grid, start, reached):
        """Walk every simple path from ``start``; wall off cells that close a loop."""
        found = False
        grid[start[0]][start[1]] = _VISITED
        reached.add(start)
        stack = [(start, None, iter(_LOOP_STEPS))]
        while stack:
            (x, z), parent, steps = stack[-1]
            for dx, dz in steps:
                nx, nz = x + dx, z + dz
                if not self._inside(nx, nz):
                    continue
                cell = grid[nx][nz]
                if cell == _VISITED:
                    if (nx, nz) != parent:
                        found = True
                        self._fixed[x][z] = WALL
                elif cell == PATH:
                    grid[nx][nz] = _VISITED
                    reached.add((nx, nz))
                    stack.append(((nx, nz), (x, z), iter(_LOOP_STEPS)))
                    break
            else:
                grid[x][z] = PATH
                stack.pop()
        return found

    def has_loops(self):
        """True if the paths contain a loop; loop cells are walled in the fix."""
        grid = self._copy()
        reached: set[tuple[int, int]] = set()
        for x, row in enumerate(grid):
            for z, cell in enumerate(row):
                if cell == PATH and (x, z) not in reached:
                    if self._walk_paths(grid, (x, z), reached):
                        return True
        return False

    def has_isolated_cells(self):
        """True if some path cell is cut off from the first one; those are walled."""
        grid = self._copy()
        start = next(
            ((x, z) for x, row in enumerate(grid)
             for z, cell in enumerate(row) if cell == PATH),
            None,
        )
        if start is not None:
            pending = [start]
            while pending:
                x, z = pending.pop()
                if not self._inside(x, z) or grid[x][z] != PATH:
                    continue
                grid[x][z] = _VISITED
                pending.extend((x + dx, z + dz) for dx, dz in _FLOOD_STEPS)

        stray = [
            (x, z)
            for x, row in enumerate(grid)
            for z, cell in enumerate(row)
            if cell == PATH
        ]
        for x, z in stray:
            self._fixed[x][z] = WALL
        return bool(stray)

    def fixed_structure(self):
        """The maze with every flagged cell turned into a wall."""
        return [row[:] for row in self._fixed]

    def validate(self):
        """Run every check and return the report."""
        return ValidationReport(
            has_loops=self.has_loops(),
            has_isolated_cells=self.has_isolated_cells(),
            gates=self.count_gates(),
        )
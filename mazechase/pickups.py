"""
Pickup field - which maze cells still hold a pickup.
NO UI DEPENDENCIES.
"""
from typing import Iterator, List, Tuple

from .maze import Maze, TileKind


class PickupField:
    """
    Boolean mask over the maze, True where a pickup remains.

    Built from the maze's pickup tiles. A cell can only go from True to
    False; the only way back is building a fresh field.
    """

    def __init__(self, maze: Maze):
        self.maze = maze
        self._mask: List[List[bool]] = [[False] * maze.width for _ in range(maze.height)]
        self._remaining = 0

        for x, y in maze.iter_pickup_cells():
            self._mask[y][x] = True
            self._remaining += 1

        self.total = self._remaining

    @property
    def remaining(self) -> int:
        """Number of pickups not yet consumed."""
        return self._remaining

    def is_empty(self) -> bool:
        return self._remaining == 0

    def has_pickup(self, x: int, y: int) -> bool:
        """True if an uncollected pickup sits at (x, y). False out of bounds."""
        if not self.maze.in_bounds(x, y):
            return False
        return self._mask[y][x]

    def is_power(self, x: int, y: int) -> bool:
        """True if the cell's original tile was a power pickup."""
        return self.maze.tile_at(x, y) == TileKind.POWER_PICKUP

    def consume(self, x: int, y: int) -> bool:
        """
        Consume the pickup at (x, y).
        Returns True if one was there, False otherwise.
        """
        if not self.has_pickup(x, y):
            return False
        self._mask[y][x] = False
        self._remaining -= 1
        return True

    def iter_remaining(self) -> Iterator[Tuple[int, int]]:
        """Iterate over cells that still hold a pickup."""
        for y, row in enumerate(self._mask):
            for x, present in enumerate(row):
                if present:
                    yield x, y

    def snapshot(self) -> Tuple[Tuple[bool, ...], ...]:
        """Immutable copy of the mask, row by row."""
        return tuple(tuple(row) for row in self._mask)

    def __repr__(self) -> str:
        return f"PickupField({self._remaining}/{self.total} remaining)"

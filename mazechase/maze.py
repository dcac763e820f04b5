"""
Maze model - static tile classification and coordinate rules.
NO UI DEPENDENCIES.
"""
from collections import deque
from enum import Enum, auto
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .constants import (
    MAZE_LAYOUT, WRAP_ROW,
    CODE_OPEN, CODE_WALL, CODE_PICKUP, CODE_RESTRICTED, CODE_POWER_PICKUP,
)


class MazeLayoutError(ValueError):
    """Raised when a raw layout cannot be turned into a Maze."""


class Direction(Enum):
    """Cardinal directions, declared in tie-break order."""
    UP = (0, -1, 270)
    DOWN = (0, 1, 90)
    LEFT = (-1, 0, 180)
    RIGHT = (1, 0, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        """Return (dx, dy) for this direction."""
        return self.value[0], self.value[1]

    @property
    def angle(self) -> int:
        """Display angle in degrees, clockwise from +x with y pointing down."""
        return self.value[2]

    def opposite(self) -> 'Direction':
        """Return the opposite direction."""
        opposites = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return opposites[self]


class TileKind(Enum):
    """Classification of a single maze tile."""
    OPEN = auto()
    WALL = auto()
    PICKUP = auto()
    POWER_PICKUP = auto()
    RESTRICTED_ZONE = auto()   # pursuer enclosure, only pursuers avoid it


TILE_CODES: Dict[int, TileKind] = {
    CODE_OPEN: TileKind.OPEN,
    CODE_WALL: TileKind.WALL,
    CODE_PICKUP: TileKind.PICKUP,
    CODE_RESTRICTED: TileKind.RESTRICTED_ZONE,
    CODE_POWER_PICKUP: TileKind.POWER_PICKUP,
}

PICKUP_KINDS = (TileKind.PICKUP, TileKind.POWER_PICKUP)


class Maze:
    """
    The fixed maze the agents move through.

    Coordinate system:
    - (0, 0) is top-left
    - x increases to the right
    - y increases downward

    One row is a tunnel: stepping off either end of it lands on the
    opposite end. Any other out-of-range coordinate blocks like a wall.
    """

    def __init__(self, tiles: Sequence[Sequence[TileKind]], wrap_row: int):
        self.height = len(tiles)
        self.width = len(tiles[0]) if tiles else 0
        self.wrap_row = wrap_row
        self._tiles: Tuple[Tuple[TileKind, ...], ...] = tuple(tuple(row) for row in tiles)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], wrap_row: int = WRAP_ROW) -> 'Maze':
        """Build a maze from raw integer tile codes."""
        if not rows or not rows[0]:
            raise MazeLayoutError("layout has no tiles")

        width = len(rows[0])
        tiles: List[List[TileKind]] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise MazeLayoutError(f"row {y} has {len(row)} tiles, expected {width}")
            try:
                tiles.append([TILE_CODES[code] for code in row])
            except KeyError as e:
                raise MazeLayoutError(f"unknown tile code {e.args[0]!r} in row {y}") from None

        if not 0 <= wrap_row < len(rows):
            raise MazeLayoutError(f"wrap row {wrap_row} is outside the layout")

        return cls(tiles, wrap_row)

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if coordinates are within grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Optional[TileKind]:
        """Get tile kind at coordinates, or None if out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self._tiles[y][x]

    def is_wrap_coordinate(self, x: int, y: int) -> bool:
        """True for the two cells just past either end of the tunnel row."""
        return y == self.wrap_row and x in (-1, self.width)

    def is_wall(self, x: int, y: int) -> bool:
        """
        True if the cell blocks movement.
        Out-of-range cells block, except the tunnel's wrap coordinates.
        """
        if not self.in_bounds(x, y):
            return not self.is_wrap_coordinate(x, y)
        return self._tiles[y][x] == TileKind.WALL

    def is_restricted(self, x: int, y: int) -> bool:
        """True if the cell belongs to the pursuer enclosure."""
        return self.tile_at(x, y) == TileKind.RESTRICTED_ZONE

    # =========================================================================
    # MOVEMENT HELPERS
    # =========================================================================

    def wrap(self, x: int, y: int) -> Tuple[int, int]:
        """Map a wrap coordinate to the opposite end of the tunnel."""
        if y == self.wrap_row:
            if x == -1:
                return self.width - 1, y
            if x == self.width:
                return 0, y
        return x, y

    def neighbor(self, x: int, y: int, direction: Direction) -> Tuple[int, int]:
        """The raw neighbouring coordinate, before wrapping."""
        dx, dy = direction.delta
        return x + dx, y + dy

    def step(self, x: int, y: int, direction: Direction) -> Tuple[int, int]:
        """The neighbouring coordinate with the tunnel rule applied."""
        return self.wrap(*self.neighbor(x, y, direction))

    def iter_tiles(self) -> Iterator[Tuple[int, int, TileKind]]:
        """Iterate over (x, y, kind) for every tile, row by row."""
        for y, row in enumerate(self._tiles):
            for x, kind in enumerate(row):
                yield x, y, kind

    def iter_pickup_cells(self) -> Iterator[Tuple[int, int]]:
        """Iterate over cells that start the session holding a pickup."""
        for x, y, kind in self.iter_tiles():
            if kind in PICKUP_KINDS:
                yield x, y

    def __repr__(self) -> str:
        return f"Maze({self.width}x{self.height}, wrap_row={self.wrap_row})"


def create_default_maze() -> Maze:
    """The fixed reference layout."""
    return Maze.from_rows(MAZE_LAYOUT, WRAP_ROW)


def validate_layout(maze: Maze, spawn: Tuple[int, int]) -> List[str]:
    """
    Offline layout check.

    Flood-fills the cells the player can reach from `spawn` and returns
    a list of human-readable problems. An empty list means the layout
    is playable.
    """
    problems: List[str] = []
    sx, sy = spawn

    if maze.is_wall(sx, sy) or not maze.in_bounds(sx, sy):
        problems.append(f"spawn {spawn} is not walkable")
        return problems

    reachable = {spawn}
    frontier = deque([spawn])
    while frontier:
        x, y = frontier.popleft()
        for direction in Direction:
            nx, ny = maze.neighbor(x, y, direction)
            if maze.is_wall(nx, ny):
                continue
            cell = maze.wrap(nx, ny)
            if cell not in reachable:
                reachable.add(cell)
                frontier.append(cell)

    for cell in maze.iter_pickup_cells():
        if cell not in reachable:
            problems.append(f"pickup at {cell} is unreachable from spawn")

    wrap_ends = [(0, maze.wrap_row), (maze.width - 1, maze.wrap_row)]
    for x, y in wrap_ends:
        if maze.is_wall(x, y):
            problems.append(f"tunnel end {(x, y)} is a wall")

    return problems

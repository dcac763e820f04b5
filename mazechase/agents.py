"""
Agent records - the player and the pursuers.
NO UI DEPENDENCIES.

Agents are immutable. Each tick produces new records instead of
mutating the old ones, so movement rules stay plain functions.
"""
from dataclasses import dataclass, replace
from typing import List, Tuple

from .maze import Direction
from .constants import PLAYER_SPAWN, PLAYER_SPAWN_DIRECTION, PURSUER_SPAWNS

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class PlayerAgent:
    """The player-controlled agent."""
    x: int
    y: int
    direction: Direction

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def moved_to(self, x: int, y: int, direction: Direction) -> 'PlayerAgent':
        """Return a copy at a new cell and facing."""
        return replace(self, x=x, y=y, direction=direction)


@dataclass(frozen=True)
class PursuerAgent:
    """
    A pursuing agent.

    `name` identifies the pursuer for the renderer; `color` is carried
    as plain data so the core never needs to know how it is drawn.
    """
    name: str
    x: int
    y: int
    direction: Direction
    color: Color

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def moved_to(self, x: int, y: int, direction: Direction) -> 'PursuerAgent':
        """Return a copy at a new cell and facing."""
        return replace(self, x=x, y=y, direction=direction)


def spawn_player() -> PlayerAgent:
    """Create the player at its spawn tile."""
    x, y = PLAYER_SPAWN
    return PlayerAgent(x, y, Direction[PLAYER_SPAWN_DIRECTION])


def spawn_pursuers() -> List[PursuerAgent]:
    """Create the pursuers at their spawn tiles, in fixed order."""
    return [
        PursuerAgent(name, x, y, Direction[facing], color)
        for name, x, y, facing, color in PURSUER_SPAWNS
    ]

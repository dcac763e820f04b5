"""
Maze Chase simulation core.
NO UI DEPENDENCIES.
"""
from .maze import Direction, Maze, MazeLayoutError, TileKind, create_default_maze, validate_layout
from .agents import PlayerAgent, PursuerAgent, spawn_player, spawn_pursuers
from .pickups import PickupField
from .movement import next_player_state
from .pursuit import choose_pursuer_direction, next_pursuer_state
from .game import (
    Game, GameEvent, GameSnapshot, PhaseChangedEvent, PickupConsumedEvent,
    PursuersMovedEvent, SessionState, check_termination,
)

__all__ = [
    "Direction", "Maze", "MazeLayoutError", "TileKind", "create_default_maze", "validate_layout",
    "PlayerAgent", "PursuerAgent", "spawn_player", "spawn_pursuers",
    "PickupField",
    "next_player_state",
    "choose_pursuer_direction", "next_pursuer_state",
    "Game", "GameEvent", "GameSnapshot", "PhaseChangedEvent", "PickupConsumedEvent",
    "PursuersMovedEvent", "SessionState", "check_termination",
]

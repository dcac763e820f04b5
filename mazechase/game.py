"""
Main Game class - owns the session and sequences each tick.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

from .maze import Maze, Direction, create_default_maze
from .agents import PlayerAgent, PursuerAgent, spawn_player, spawn_pursuers
from .pickups import PickupField
from .movement import next_player_state
from .pursuit import next_pursuer_state
from .scheduler import IntervalTimer
from .animation import MouthAnimation
from .constants import (
    PICKUP_REWARD, PURSUER_SPEED_RATIO, PLAYER_SPAWN_DIRECTION,
    TICK_INTERVAL_MS, ANIMATION_INTERVAL_MS,
)

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Current state of the session."""
    PLAYING = auto()
    WON = auto()     # every pickup consumed
    LOST = auto()    # a pursuer caught the player


@dataclass
class GameEvent:
    """An event that occurred during a tick (for UI to react to)."""
    pass


@dataclass
class PickupConsumedEvent(GameEvent):
    """The player consumed a pickup."""
    x: int
    y: int
    power: bool
    score: int


@dataclass
class PursuersMovedEvent(GameEvent):
    """Every pursuer took one step."""
    tick: int


@dataclass
class PhaseChangedEvent(GameEvent):
    """Session state changed."""
    old_state: SessionState
    new_state: SessionState


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable copy of everything the session owns."""
    player: PlayerAgent
    pursuers: Tuple[PursuerAgent, ...]
    pickups: Tuple[Tuple[bool, ...], ...]
    score: int
    state: SessionState
    tick_count: int
    requested_direction: Direction


def check_termination(
    player: PlayerAgent,
    pursuers: Iterable[PursuerAgent],
    pickups: PickupField
) -> SessionState:
    """
    Decide the session state after an update.
    A catch is checked before the clear, so it wins when both happen.
    """
    for pursuer in pursuers:
        if pursuer.position == player.position:
            return SessionState.LOST
    if pickups.is_empty():
        return SessionState.WON
    return SessionState.PLAYING


class Game:
    """
    The main game class.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as plain data and accepts commands as method calls.

    Usage:
        game = Game()
        game.set_requested_direction(Direction.UP)
        while game.state == SessionState.PLAYING:
            events = game.update(dt)
            # UI reads game state and renders
    """

    def __init__(
        self,
        maze: Optional[Maze] = None,
        tick_interval: float = TICK_INTERVAL_MS / 1000.0,
        animation_interval: float = ANIMATION_INTERVAL_MS / 1000.0
    ):
        self.maze = maze if maze else create_default_maze()

        # Timers are owned here; the host loop only supplies frame deltas
        self.tick_timer = IntervalTimer(tick_interval)
        self.animation_timer = IntervalTimer(animation_interval)
        self.animation = MouthAnimation()

        self._events: List[GameEvent] = []
        self._init_session()

    def _init_session(self) -> None:
        """Set every piece of session state to its starting value."""
        self.player: PlayerAgent = spawn_player()
        self.pursuers: List[PursuerAgent] = spawn_pursuers()
        self.pickups = PickupField(self.maze)
        self.score = 0
        self.state = SessionState.PLAYING
        self.tick_count = 0
        self.requested_direction = Direction[PLAYER_SPAWN_DIRECTION]

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def set_requested_direction(self, direction: Direction) -> None:
        """
        Queue a turn for the next tick.
        Not validated here; the movement rule decides if it can be taken.
        """
        if not isinstance(direction, Direction):
            raise TypeError(f"expected Direction, got {type(direction).__name__}")
        self.requested_direction = direction

    def reset(self) -> None:
        """Start a fresh session. Safe to call at any time between ticks."""
        self._init_session()
        self.tick_timer.reset()
        self._events = []
        logger.info("Session reset")

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def tick(self) -> List[GameEvent]:
        """
        Run one simulation tick.
        Does nothing once the session has been won or lost.
        """
        self._events = []
        if self.state != SessionState.PLAYING:
            return self._events

        self.tick_count += 1

        self.player = next_player_state(self.player, self.requested_direction, self.maze)
        self._consume_pickup()

        if self.tick_count % PURSUER_SPEED_RATIO == 0:
            self._move_pursuers()

        new_state = check_termination(self.player, self.pursuers, self.pickups)
        if new_state != self.state:
            self._change_state(new_state)

        return self._events

    def update(self, dt: float) -> List[GameEvent]:
        """
        Advance both timers by dt seconds.
        Runs one tick per elapsed tick interval and returns their events.
        """
        steps = self.animation_timer.advance(dt)
        if steps:
            self.animation.step(steps)

        events: List[GameEvent] = []
        for _ in range(self.tick_timer.advance(dt)):
            events.extend(self.tick())
            if self.state != SessionState.PLAYING:
                break
        return events

    def _consume_pickup(self) -> None:
        x, y = self.player.position
        if not self.pickups.consume(x, y):
            return
        self.score += PICKUP_REWARD
        self._events.append(PickupConsumedEvent(x, y, self.pickups.is_power(x, y), self.score))

    def _move_pursuers(self) -> None:
        # Pursuers chase the position the player reached this tick
        target = self.player.position
        self.pursuers = [next_pursuer_state(p, target, self.maze) for p in self.pursuers]
        self._events.append(PursuersMovedEvent(self.tick_count))

    def _change_state(self, new_state: SessionState) -> None:
        old_state = self.state
        self.state = new_state
        self._events.append(PhaseChangedEvent(old_state, new_state))

        if new_state != SessionState.PLAYING:
            self.tick_timer.stop()
            logger.info(
                f"Session {new_state.name.lower()} at tick {self.tick_count} "
                f"with score {self.score}"
            )

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    @property
    def grid_size(self) -> Tuple[int, int]:
        """(width, height) of the maze in tiles."""
        return (self.maze.width, self.maze.height)

    @property
    def mouth_angle(self) -> float:
        return self.animation.angle

    @property
    def is_over(self) -> bool:
        return self.state != SessionState.PLAYING

    def get_pursuer(self, name: str) -> Optional[PursuerAgent]:
        """Look up a pursuer by name."""
        for pursuer in self.pursuers:
            if pursuer.name == name:
                return pursuer
        return None

    def snapshot(self) -> GameSnapshot:
        """Copy of the full session state."""
        return GameSnapshot(
            player=self.player,
            pursuers=tuple(self.pursuers),
            pickups=self.pickups.snapshot(),
            score=self.score,
            state=self.state,
            tick_count=self.tick_count,
            requested_direction=self.requested_direction,
        )

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, ticks: int) -> List[GameEvent]:
        """
        Run up to `ticks` ticks, stopping early if the session ends.
        Returns all events that occurred.
        """
        all_events: List[GameEvent] = []
        for _ in range(ticks):
            if self.state != SessionState.PLAYING:
                break
            all_events.extend(self.tick())
        return all_events

"""
END-TO-END GAMEPLAY TESTS

These tests demonstrate complete session behaviour:
- Player movement and pickup consumption each tick
- Pursuers moving every fourth tick
- Win/lose conditions triggering, and their precedence
- Terminal states freezing the simulation
- Reset restoring the initial state

NO UI DEPENDENCIES - pure gameplay logic testing.
"""
import itertools

import pytest
from mazechase.game import (
    Game, SessionState, GameSnapshot, PhaseChangedEvent, PickupConsumedEvent,
    PursuersMovedEvent, check_termination
)
from mazechase.agents import PlayerAgent, PursuerAgent, spawn_pursuers
from mazechase.maze import Maze, Direction
from mazechase.pickups import PickupField
from mazechase.pursuit import next_pursuer_state
from mazechase.constants import PICKUP_REWARD, PURSUER_SPEED_RATIO, PLAYER_SPAWN


def clear_all_pickups_except(game, keep):
    """Consume every pickup except the one at `keep`."""
    for x, y in list(game.pickups.iter_remaining()):
        if (x, y) != keep:
            game.pickups.consume(x, y)


def place_pursuer(game, index, x, y):
    game.pursuers[index] = game.pursuers[index].moved_to(x, y, Direction.UP)


class TestInitialState:
    """A new session starts from the documented state."""

    def test_initial_state(self):
        game = Game()
        assert game.player == PlayerAgent(*PLAYER_SPAWN, Direction.LEFT)
        assert game.pursuers == spawn_pursuers()
        assert [p.name for p in game.pursuers] == ["blinky", "pinky", "inky", "clyde"]
        assert game.pickups.remaining == game.pickups.total
        assert game.score == 0
        assert game.state == SessionState.PLAYING
        assert game.tick_count == 0
        assert game.requested_direction == Direction.LEFT

    def test_grid_size(self):
        game = Game()
        assert game.grid_size == (19, 21)


class TestTick:
    """Tests for a single tick."""

    def test_first_tick_consumes_pickup(self):
        """The player eats the dot next to spawn on the first tick."""
        game = Game()
        events = game.tick()

        assert game.player.position == (8, 16)
        assert game.score == PICKUP_REWARD
        assert not game.pickups.has_pickup(8, 16)
        assert game.tick_count == 1

        consumed = [e for e in events if isinstance(e, PickupConsumedEvent)]
        assert consumed == [PickupConsumedEvent(8, 16, False, PICKUP_REWARD)]

    def test_spawn_cell_pickup_not_consumed_by_leaving(self):
        """Consumption uses the cell the player moves to."""
        game = Game()
        game.tick()
        assert game.pickups.has_pickup(*PLAYER_SPAWN)

    def test_no_consumption_when_standing_still(self):
        """A blocked player eats nothing further."""
        game = Game()
        game.simulate(4)          # reaches (5, 16), wall to the left
        score = game.score
        game.simulate(2)
        assert game.player.position == (5, 16)
        assert game.score == score

    def test_pursuers_wait_for_speed_ratio(self):
        """Pursuers don't move before the fourth tick."""
        game = Game()
        start = list(game.pursuers)
        for _ in range(PURSUER_SPEED_RATIO - 1):
            events = game.tick()
            assert not any(isinstance(e, PursuersMovedEvent) for e in events)
        assert game.pursuers == start

    def test_pursuers_move_on_fourth_tick(self):
        """On tick 4 every pursuer makes exactly one move towards the player."""
        game = Game()
        game.simulate(PURSUER_SPEED_RATIO - 1)
        before = list(game.pursuers)

        events = game.tick()
        assert PursuersMovedEvent(PURSUER_SPEED_RATIO) in events

        # Target is where the player ended up this tick
        assert game.player.position == (5, 16)
        expected = [next_pursuer_state(p, (5, 16), game.maze) for p in before]
        assert game.pursuers == expected
        assert [p.position for p in game.pursuers] == [(9, 8), (7, 10), (9, 11), (11, 10)]

    def test_requested_direction_is_held(self):
        """A request stays queued until it can be taken."""
        game = Game()
        game.tick()                             # (8, 16)
        game.set_requested_direction(Direction.DOWN)
        game.tick()                             # (8, 17) is a wall, continue left
        assert game.player.position == (7, 16)
        game.tick()                             # (7, 17) is open
        assert game.player.position == (7, 17)
        assert game.player.direction == Direction.DOWN

    def test_requested_direction_rejects_garbage(self):
        game = Game()
        with pytest.raises(TypeError):
            game.set_requested_direction("UP")


class TestTermination:
    """Tests for win/lose detection."""

    def test_check_termination_playing(self):
        field = PickupField(Maze.from_rows([[2, 0]], wrap_row=0))
        player = PlayerAgent(1, 0, Direction.LEFT)
        assert check_termination(player, [], field) == SessionState.PLAYING

    def test_check_termination_won(self):
        field = PickupField(Maze.from_rows([[0, 0]], wrap_row=0))
        player = PlayerAgent(1, 0, Direction.LEFT)
        assert check_termination(player, [], field) == SessionState.WON

    def test_check_termination_lost_beats_won(self):
        """A catch takes priority over an empty field."""
        field = PickupField(Maze.from_rows([[0, 0]], wrap_row=0))
        player = PlayerAgent(1, 0, Direction.LEFT)
        pursuer = PursuerAgent("p", 1, 0, Direction.UP, (0, 0, 0))
        assert check_termination(player, [pursuer], field) == SessionState.LOST

    def test_caught_by_pursuer(self):
        """Player walking onto a pursuer loses."""
        game = Game()
        place_pursuer(game, 0, 8, 16)

        events = game.tick()
        assert game.state == SessionState.LOST
        assert PhaseChangedEvent(SessionState.PLAYING, SessionState.LOST) in events

    def test_win_by_clearing_pickups(self):
        """Eating the last pickup wins."""
        game = Game()
        clear_all_pickups_except(game, (8, 16))

        events = game.tick()
        assert game.pickups.is_empty()
        assert game.state == SessionState.WON
        assert PhaseChangedEvent(SessionState.PLAYING, SessionState.WON) in events

    def test_loss_takes_precedence(self):
        """Eating the last pickup onto a pursuer still loses."""
        game = Game()
        clear_all_pickups_except(game, (8, 16))
        place_pursuer(game, 2, 8, 16)

        game.tick()
        assert game.pickups.is_empty()
        assert game.state == SessionState.LOST

    def test_terminal_state_freezes_simulation(self):
        """Ticks after the session ends change nothing."""
        game = Game()
        place_pursuer(game, 0, 8, 16)
        game.tick()
        frozen = game.snapshot()

        for _ in range(10):
            assert game.tick() == []
        assert game.update(5.0) == []
        assert game.simulate(10) == []
        assert game.snapshot() == frozen

    def test_won_state_freezes_simulation(self):
        """A cleared board stays exactly as it was won."""
        game = Game()
        clear_all_pickups_except(game, (8, 16))
        game.tick()
        assert game.state == SessionState.WON
        assert not game.tick_timer.running
        frozen = game.snapshot()

        for _ in range(10):
            assert game.tick() == []
        assert game.update(5.0) == []
        assert game.simulate(10) == []
        assert game.snapshot() == frozen

    def test_terminal_state_ignores_input(self):
        """Requests are stored but never applied while frozen."""
        game = Game()
        place_pursuer(game, 0, 8, 16)
        game.tick()
        position = game.player.position

        game.set_requested_direction(Direction.RIGHT)
        game.tick()
        assert game.player.position == position


class TestPickupMonotonicity:
    """Pickups only disappear, and each one is worth exactly the reward."""

    def test_monotonic_over_long_play(self):
        game = Game()
        requests = itertools.cycle([
            Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.UP,
            Direction.LEFT, Direction.DOWN, Direction.RIGHT, Direction.DOWN,
        ])

        previous = game.snapshot()
        for step in range(600):
            if step % 7 == 0:
                game.set_requested_direction(next(requests))
            game.tick()
            current = game.snapshot()

            newly_cleared = 0
            for old_row, new_row in zip(previous.pickups, current.pickups):
                for old, new in zip(old_row, new_row):
                    assert not (new and not old), "a pickup reappeared"
                    if old and not new:
                        newly_cleared += 1

            assert newly_cleared <= 1
            assert current.score - previous.score == PICKUP_REWARD * newly_cleared
            previous = current

            if game.is_over:
                break


class TestReset:
    """Tests for reset."""

    def test_reset_restores_initial_state(self):
        """Reset from mid-game equals a fresh session."""
        game = Game()
        game.set_requested_direction(Direction.UP)
        game.simulate(25)
        game.set_requested_direction(Direction.RIGHT)
        game.simulate(10)

        game.reset()
        assert game.snapshot() == Game().snapshot()

    def test_reset_after_loss(self):
        """Reset re-arms a frozen session."""
        game = Game(tick_interval=1.0)
        place_pursuer(game, 0, 8, 16)
        game.tick()
        assert game.state == SessionState.LOST
        assert not game.tick_timer.running

        game.reset()
        assert game.snapshot() == Game().snapshot()
        assert game.tick_timer.running

        game.update(1.0)
        assert game.tick_count == 1
        assert game.score == PICKUP_REWARD

    def test_reset_drops_carried_time(self):
        """No stale partial tick applies to a fresh session."""
        game = Game(tick_interval=1.0)
        game.update(0.9)
        game.reset()
        game.update(0.2)
        assert game.tick_count == 0

    def test_reset_clears_requested_direction(self):
        game = Game()
        game.set_requested_direction(Direction.DOWN)
        game.reset()
        assert game.requested_direction == Direction.LEFT

    def test_snapshot_type(self):
        assert isinstance(Game().snapshot(), GameSnapshot)


class TestUpdateLoop:
    """Tests for time-driven updates."""

    def test_tick_per_interval(self):
        """One tick fires per whole interval."""
        game = Game(tick_interval=1.0, animation_interval=0.5)
        game.update(0.5)
        assert game.tick_count == 0
        game.update(0.5)
        assert game.tick_count == 1
        game.update(3.0)
        assert game.tick_count == 4

    def test_update_returns_tick_events(self):
        game = Game(tick_interval=1.0)
        events = game.update(1.0)
        assert any(isinstance(e, PickupConsumedEvent) for e in events)

    def test_update_stops_at_terminal_state(self):
        """Remaining intervals in a long frame are dropped once the session ends."""
        game = Game(tick_interval=1.0)
        place_pursuer(game, 0, 8, 16)
        game.update(5.0)
        assert game.state == SessionState.LOST
        assert game.tick_count == 1

    def test_animation_runs_independently(self):
        """The mouth keeps moving without touching simulation state."""
        game = Game(tick_interval=1.0, animation_interval=0.5)
        place_pursuer(game, 0, 8, 16)
        game.tick()
        frozen = game.snapshot()
        angle = game.mouth_angle

        game.update(0.5)
        assert game.mouth_angle != angle
        assert game.snapshot() == frozen

    def test_get_pursuer(self):
        game = Game()
        assert game.get_pursuer("inky").position == (9, 10)
        assert game.get_pursuer("nobody") is None

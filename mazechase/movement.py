"""
Player movement rule.
NO UI DEPENDENCIES.
"""
from .agents import PlayerAgent
from .maze import Direction, Maze


def next_player_state(player: PlayerAgent, requested: Direction, maze: Maze) -> PlayerAgent:
    """
    Advance the player by one tick.

    The requested direction is tried first; if it leads into a wall the
    player keeps going the way it already faces. If that is blocked too
    the player stays put. A queued turn is therefore taken as soon as the
    corridor allows it.

    Only walls block the player. The pursuer enclosure does not.
    """
    x, y = maze.neighbor(player.x, player.y, requested)
    if not maze.is_wall(x, y):
        x, y = maze.wrap(x, y)
        return player.moved_to(x, y, requested)

    x, y = maze.neighbor(player.x, player.y, player.direction)
    if maze.is_wall(x, y):
        return player

    x, y = maze.wrap(x, y)
    return player.moved_to(x, y, player.direction)

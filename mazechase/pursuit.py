"""
Pursuer decision rule.
NO UI DEPENDENCIES.

Each pursuer looks one step ahead and takes the move that ends closest
(straight-line) to its target. There is no pathfinding: pursuers can be
led around loops.
"""
import logging
import math
from typing import List, Tuple

from .agents import PursuerAgent
from .maze import Direction, Maze

logger = logging.getLogger(__name__)


def legal_pursuer_moves(pursuer: PursuerAgent, maze: Maze) -> List[Direction]:
    """
    Directions the pursuer may take this step, in tie-break order.

    Reversing is never offered here; walls and the enclosure are skipped.
    """
    reverse = pursuer.direction.opposite()
    moves: List[Direction] = []
    for direction in Direction:
        if direction == reverse:
            continue
        x, y = maze.neighbor(pursuer.x, pursuer.y, direction)
        if maze.is_wall(x, y) or maze.is_restricted(x, y):
            continue
        moves.append(direction)
    return moves


def choose_pursuer_direction(
    pursuer: PursuerAgent,
    target: Tuple[int, int],
    maze: Maze
) -> Direction:
    """
    Pick the pursuer's next direction.

    Ties keep the first candidate in UP, DOWN, LEFT, RIGHT order.
    At a dead end the pursuer turns around.
    """
    moves = legal_pursuer_moves(pursuer, maze)
    if not moves:
        logger.debug(f"Pursuer {pursuer.name} reversing out of dead end at {pursuer.position}")
        return pursuer.direction.opposite()

    tx, ty = target
    best = moves[0]
    best_distance = math.inf
    for direction in moves:
        x, y = maze.neighbor(pursuer.x, pursuer.y, direction)
        distance = math.hypot(x - tx, y - ty)
        if distance < best_distance:
            best_distance = distance
            best = direction
    return best


def next_pursuer_state(
    pursuer: PursuerAgent,
    target: Tuple[int, int],
    maze: Maze
) -> PursuerAgent:
    """Advance one pursuer by one step towards `target`."""
    direction = choose_pursuer_direction(pursuer, target, maze)
    x, y = maze.step(pursuer.x, pursuer.y, direction)
    return pursuer.moved_to(x, y, direction)

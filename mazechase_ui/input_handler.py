"""
Input Handler - Translates key presses to gameplay commands.
This is a THIN ADAPTER - no game logic here.
"""
import pygame

from mazechase.game import Game
from mazechase.maze import Direction


DIRECTION_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

RESET_KEYS = (pygame.K_r,)
# Extra keys that restart, but only from the win/lose screen
PLAY_AGAIN_KEYS = (pygame.K_SPACE, pygame.K_RETURN)


class InputHandler:
    """
    Handles keyboard input and translates to game commands.

    Direction keys only write the game's requested direction;
    everything else about movement is decided on the next tick.
    """

    def __init__(self, game: Game):
        self.game = game

    def handle_key(self, key: int) -> bool:
        """
        Handle a single key press.
        Returns True if the game should quit.
        """
        if key == pygame.K_ESCAPE:
            return True

        if key in DIRECTION_KEYS:
            self.game.set_requested_direction(DIRECTION_KEYS[key])
        elif key in RESET_KEYS:
            self.game.reset()
        elif key in PLAY_AGAIN_KEYS and self.game.is_over:
            self.game.reset()

        # Unrecognised keys are ignored
        return False

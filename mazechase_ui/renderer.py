"""
Renderer - Reads gameplay state and renders to pyunicodegame windows.
This is a THIN ADAPTER - no game logic here.
"""
import pyunicodegame

from mazechase.game import Game, SessionState
from mazechase.maze import Direction, TileKind
from mazechase_ui.layout import (
    BANNER_COLUMN, BANNER_WIDTH, board_origin, required_screen_size
)


# Colors
COLOR_WALL = (16, 16, 255)
COLOR_PICKUP = (255, 215, 0)
COLOR_ENCLOSURE = (255, 184, 255)
COLOR_PLAYER = (255, 60, 60)
COLOR_HUD = (200, 200, 200)
COLOR_WON = (100, 255, 100)
COLOR_LOST = (255, 100, 100)

WALL_CHAR = '█'
PICKUP_CHAR = '·'
POWER_PICKUP_CHAR = '●'
ENCLOSURE_CHAR = '─'
PURSUER_CHAR = 'ᗣ'

# Player glyphs with the mouth open, by facing
PLAYER_OPEN_CHARS = {
    Direction.UP: 'ᗢ',
    Direction.DOWN: 'ᗜ',
    Direction.LEFT: 'ᗤ',
    Direction.RIGHT: 'ᗧ',
}
PLAYER_CLOSED_CHAR = '◉'

# Mouth angle (degrees) at which the open glyph is shown
MOUTH_OPEN_THRESHOLD = 20.0


class Renderer:
    """
    Renders game state to pyunicodegame windows.

    This class reads from Game but never modifies it.
    """

    def __init__(self, game: Game, screen_width: int, screen_height: int):
        self.game = game

        cols, rows = game.grid_size
        min_width, min_height = required_screen_size(cols, rows)
        self.screen_width = max(screen_width, min_width)
        self.screen_height = max(screen_height, min_height)
        self.origin_x, self.origin_y = board_origin(
            self.screen_width, self.screen_height, cols, rows
        )

        # Windows will be created in init_windows()
        self.board_window = None
        self.hud_window = None

    def init_windows(self):
        """Initialize pyunicodegame windows."""
        cols, rows = self.game.grid_size

        self.board_window = pyunicodegame.create_window(
            "board", self.origin_x, self.origin_y, cols, rows,
            z_index=0, bg=(0, 0, 0, 255)
        )

        # HUD overlay (fixed, on top)
        self.hud_window = pyunicodegame.create_window(
            "hud", 0, 0, self.screen_width, self.screen_height,
            z_index=10, bg=None, fixed=True
        )

    def render(self):
        """Render entire game state."""
        self.render_board()
        self.render_agents()
        self.render_hud()

    def render_board(self):
        """Render walls and remaining pickups (overwrites previous frame)."""
        maze = self.game.maze
        pickups = self.game.pickups

        for x, y, kind in maze.iter_tiles():
            if kind == TileKind.WALL:
                self.board_window.put(x, y, WALL_CHAR, COLOR_WALL)
            elif pickups.has_pickup(x, y):
                char = POWER_PICKUP_CHAR if pickups.is_power(x, y) else PICKUP_CHAR
                self.board_window.put(x, y, char, COLOR_PICKUP)
            elif kind == TileKind.RESTRICTED_ZONE:
                self.board_window.put(x, y, ENCLOSURE_CHAR, COLOR_ENCLOSURE)
            else:
                self.board_window.put(x, y, ' ', COLOR_HUD)

    def render_agents(self):
        """Render the pursuers, then the player on top."""
        for pursuer in self.game.pursuers:
            self.board_window.put(pursuer.x, pursuer.y, PURSUER_CHAR, pursuer.color)

        player = self.game.player
        if self.game.mouth_angle >= MOUTH_OPEN_THRESHOLD:
            char = PLAYER_OPEN_CHARS[player.direction]
        else:
            char = PLAYER_CLOSED_CHAR
        self.board_window.put(player.x, player.y, char, COLOR_PLAYER)

    def render_hud(self):
        """Render title, score and the end-of-session banner."""
        self.hud_window.put_string(1, 0, "MAZE CHASE", COLOR_HUD)
        self.hud_window.put_string(1, 1, f"SCORE: {self.game.score:<6}", COLOR_HUD)
        banner, color = hud_banner(self.game.state)
        self.hud_window.put_string(BANNER_COLUMN, 1, banner, color)


def hud_banner(state: SessionState):
    """Banner text and color for a session state, padded to BANNER_WIDTH."""
    if state == SessionState.WON:
        text, color = "YOU WIN!  R to play again", COLOR_WON
    elif state == SessionState.LOST:
        text, color = "GAME OVER  R to play again", COLOR_LOST
    else:
        text, color = "", COLOR_HUD
    return text.ljust(BANNER_WIDTH), color

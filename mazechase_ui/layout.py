"""
Layout helpers - fit the maze onto the available display surface.
This is a THIN ADAPTER - it only ever sees static grid dimensions.
"""
from typing import Tuple

# Rows reserved above the board for title and score
HEADER_ROWS = 2

# The HUD's score line: score at column 1, banner from BANNER_COLUMN on
BANNER_COLUMN = 14
BANNER_WIDTH = 26
HUD_WIDTH = BANNER_COLUMN + BANNER_WIDTH


def board_origin(screen_cols: int, screen_rows: int, cols: int, rows: int,
                 header_rows: int = HEADER_ROWS) -> Tuple[int, int]:
    """
    Top-left cell of the board when centred below a header, in screen cells.
    Clamped so the board never starts off-screen.
    """
    x = max(0, (screen_cols - cols) // 2)
    y = header_rows + max(0, (screen_rows - header_rows - rows) // 2)
    return x, y


def required_screen_size(cols: int, rows: int, header_rows: int = HEADER_ROWS,
                         hud_width: int = HUD_WIDTH) -> Tuple[int, int]:
    """Smallest screen, in cells, that holds the HUD and the board."""
    return max(cols, hud_width), rows + header_rows

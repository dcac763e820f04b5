"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# MAZE
# =============================================================================
MAZE_WIDTH = 19   # columns
MAZE_HEIGHT = 21  # rows

# Raw tile codes used by MAZE_LAYOUT
CODE_OPEN = 0
CODE_WALL = 1
CODE_PICKUP = 2
CODE_RESTRICTED = 3   # pursuer enclosure
CODE_POWER_PICKUP = 4

MAZE_LAYOUT = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 2, 1, 1, 1, 2, 1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1, 2, 1),
    (1, 4, 1, 1, 1, 2, 1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1, 4, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 2, 1, 1, 1, 2, 1, 2, 1, 1, 1, 2, 1, 2, 1, 1, 1, 2, 1),
    (1, 2, 2, 2, 2, 2, 1, 2, 2, 1, 2, 2, 1, 2, 2, 2, 2, 2, 1),
    (1, 1, 1, 1, 1, 2, 1, 1, 1, 0, 1, 1, 1, 2, 1, 1, 1, 1, 1),
    (0, 0, 0, 0, 1, 2, 1, 0, 0, 0, 0, 0, 1, 2, 1, 0, 0, 0, 0),
    (1, 1, 1, 1, 1, 2, 1, 0, 1, 1, 1, 0, 1, 2, 1, 1, 1, 1, 1),
    (2, 2, 2, 2, 2, 2, 0, 0, 1, 3, 1, 0, 0, 2, 2, 2, 2, 2, 2),
    (1, 1, 1, 1, 1, 2, 1, 0, 1, 1, 1, 0, 1, 2, 1, 1, 1, 1, 1),
    (0, 0, 0, 0, 1, 2, 1, 0, 0, 0, 0, 0, 1, 2, 1, 0, 0, 0, 0),
    (1, 1, 1, 1, 1, 2, 1, 0, 1, 1, 1, 0, 1, 2, 1, 1, 1, 1, 1),
    (1, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 2, 2, 1),
    (1, 2, 1, 1, 1, 2, 1, 1, 1, 1, 1, 1, 1, 2, 1, 1, 1, 2, 1),
    (1, 4, 2, 2, 1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 1, 2, 2, 4, 1),
    (1, 1, 1, 2, 1, 2, 1, 2, 1, 1, 1, 2, 1, 2, 1, 2, 1, 1, 1),
    (1, 2, 2, 2, 2, 2, 1, 2, 2, 1, 2, 2, 1, 2, 2, 2, 2, 2, 1),
    (1, 2, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)

# The horizontal corridor whose two ends form a tunnel
WRAP_ROW = 10

# =============================================================================
# PLAYER
# =============================================================================
PLAYER_SPAWN = (9, 16)
PLAYER_SPAWN_DIRECTION = "LEFT"

# =============================================================================
# PURSUERS
# =============================================================================
# (name, spawn x, spawn y, facing, color)
PURSUER_SPAWNS = (
    ("blinky", 9, 9, "LEFT", (255, 0, 0)),
    ("pinky", 8, 10, "UP", (255, 184, 255)),
    ("inky", 9, 10, "UP", (0, 255, 255)),
    ("clyde", 10, 10, "UP", (255, 184, 82)),
)

# Player ticks per pursuer decision (4 = pursuers move at quarter speed)
PURSUER_SPEED_RATIO = 4

# =============================================================================
# SCORING
# =============================================================================
PICKUP_REWARD = 10

# =============================================================================
# TIMING (milliseconds)
# =============================================================================
TICK_INTERVAL_MS = 180
ANIMATION_INTERVAL_MS = 60

# =============================================================================
# MOUTH ANIMATION
# =============================================================================
MOUTH_PHASE_STEP = 0.2     # phase advance per animation step
MOUTH_MAX_ANGLE = 40.0     # degrees

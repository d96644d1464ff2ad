"""
Game constants for the snake engine.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Unit deltas in screen coordinates: (0, 0) is the top-left cell
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Engine status
IDLE = "IDLE"
RUNNING = "RUNNING"
PAUSED = "PAUSED"
GAME_OVER = "GAME_OVER"

# Game-over reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_OBSTACLE = "obstacle"
DEATH_BOARD_FULL = "board_full"

# Game settings
DEFAULT_GRID_WIDTH = 30
DEFAULT_GRID_HEIGHT = 30
DEFAULT_OBSTACLE_COUNT = 12
DEFAULT_SPEED_MS = 110
SPEED_FLOOR_MS = 40
SPEEDUP_EVERY = 4          # apples between speed-ups
SPEEDUP_FACTOR = 0.9
RESERVED_MARGIN = 5        # cells kept free of obstacles for food/movement
MAX_OBSTACLE_ATTEMPTS = 5000
MAX_FOOD_ATTEMPTS = 5000
HIGH_SCORE_KEY = "snake-high"


def is_reverse(direction, current) -> bool:
    """True when `direction` would turn the snake straight back on itself."""
    if direction is None or current is None:
        return False
    return OPPOSITES.get(current) == direction


def parse_direction(value):
    """Normalize a direction name; returns None for anything unrecognized."""
    if not isinstance(value, str):
        return None
    move = value.strip().upper()
    return move if move in VALID_MOVES else None

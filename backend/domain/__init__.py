"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (scheduling, persistence, rendering, input).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_DELTAS,
    IDLE, RUNNING, PAUSED, GAME_OVER,
    SPEED_FLOOR_MS, RESERVED_MARGIN,
    is_reverse, parse_direction,
)
from .errors import SnakeEngineError, ConfigurationError, PlacementExhausted
from .grid import Grid
from .snake import Snake
from .game_state import GameState
from .placement import PlacementGenerator, effective_obstacle_count

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_DELTAS',
    'IDLE', 'RUNNING', 'PAUSED', 'GAME_OVER',
    'SPEED_FLOOR_MS', 'RESERVED_MARGIN',
    'is_reverse', 'parse_direction',
    'SnakeEngineError', 'ConfigurationError', 'PlacementExhausted',
    'Grid',
    'Snake',
    'GameState',
    'PlacementGenerator', 'effective_obstacle_count',
]

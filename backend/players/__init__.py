"""
Input sources for the snake engine.

Automatic players choose a direction from a GameState; the keyboard
module maps key presses onto engine commands.
"""

from .base import Player
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .keyboard import KEY_BINDINGS, handle_key

PLAYER_TYPES = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'KEY_BINDINGS',
    'handle_key',
    'PLAYER_TYPES',
]

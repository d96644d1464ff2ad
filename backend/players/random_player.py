"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from domain.constants import VALID_MOVES, is_reverse
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction avoiding walls, obstacles and its own body.
    """

    def __init__(self, name: Optional[str] = None, rng: Optional[random.Random] = None):
        super().__init__(name)
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        valid_moves = [move for move, _ in self.safe_moves(game_state)]

        # If no valid moves, keep going in a non-reversing direction (we'll die anyway)
        if not valid_moves:
            valid_moves = sorted(m for m in VALID_MOVES if not is_reverse(m, game_state.direction))

        self.last_move = self.rng.choice(valid_moves)
        return self.last_move

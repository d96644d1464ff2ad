"""
Greedy player - heads for the food along the shortest safe step.
"""

from domain.constants import VALID_MOVES, is_reverse
from domain.game_state import GameState
from .base import Player


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest to the food.

    Distances respect wrapping boards. Ties are broken by move name so the
    player is deterministic.
    """

    def _distance(self, cell, target, game_state: GameState) -> int:
        dx = abs(cell[0] - target[0])
        dy = abs(cell[1] - target[1])
        if game_state.wrap:
            dx = min(dx, game_state.width - dx)
            dy = min(dy, game_state.height - dy)
        return dx + dy

    def get_move(self, game_state: GameState) -> str:
        candidates = self.safe_moves(game_state)
        if not candidates:
            fallback = sorted(m for m in VALID_MOVES if not is_reverse(m, game_state.direction))
            self.last_move = fallback[0]
            return self.last_move

        if game_state.food is None:
            self.last_move = sorted(move for move, _ in candidates)[0]
            return self.last_move

        self.last_move = min(
            candidates,
            key=lambda item: (self._distance(item[1], game_state.food, game_state), item[0]),
        )[0]
        return self.last_move

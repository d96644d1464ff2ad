"""
Base player interface for the game engine.
"""

from typing import List, Optional, Tuple

from domain.constants import DIRECTION_DELTAS, is_reverse
from domain.game_state import GameState


class Player:
    """
    Base class/interface for automatic input sources.

    A player looks at the current game state and returns the direction it
    wants the engine to take next; the engine decides whether to accept it.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or self.__class__.__name__
        self.last_move: Optional[str] = None

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError

    def safe_moves(self, game_state: GameState) -> List[Tuple[str, Tuple[int, int]]]:
        """
        List (move, next_head) pairs that do not end the game on the next tick.

        A move is unsafe when it leaves a non-wrapping board, hits an
        obstacle, reverses the applied direction, or runs into the body. The tail
        counts as free unless the move eats the food, because the tail only
        moves away when the snake does not grow.
        """
        head_x, head_y = game_state.snake[0]
        body = game_state.snake
        obstacles = set(game_state.obstacles)

        moves = []
        for move, (dx, dy) in DIRECTION_DELTAS.items():
            if is_reverse(move, game_state.direction):
                continue
            new_x, new_y = head_x + dx, head_y + dy
            if game_state.wrap:
                new_x %= game_state.width
                new_y %= game_state.height
            elif not (0 <= new_x < game_state.width and 0 <= new_y < game_state.height):
                continue
            cell = (new_x, new_y)
            if cell in obstacles:
                continue
            blocking = body if cell == game_state.food else body[:-1]
            if cell in blocking:
                continue
            moves.append((move, cell))
        return moves

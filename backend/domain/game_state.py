"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Optional, Tuple


class GameState:
    """
    A snapshot of the engine at a specific tick.

    Attributes:
        tick_number: how many moving ticks have been played this episode
        snake: list of (x, y), head first
        food: (x, y) of the food, or None
        obstacles: sorted list of (x, y) obstacle cells
        score, high_score: current and best scores
        status: IDLE, RUNNING, PAUSED or GAME_OVER
        speed_ms: current tick interval in milliseconds
        width, height, wrap: board dimensions and topology
        game_over_reason: 'wall', 'self', 'obstacle', 'board_full' or None
        direction: direction applied on the last tick, None before start
    """

    def __init__(
        self,
        tick_number: int,
        snake: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        obstacles: List[Tuple[int, int]],
        score: int,
        high_score: int,
        status: str,
        speed_ms: int,
        width: int,
        height: int,
        wrap: bool = False,
        game_over_reason: Optional[str] = None,
        direction: Optional[str] = None
    ):
        self.tick_number = tick_number
        self.snake = snake
        self.food = food
        self.obstacles = obstacles
        self.score = score
        self.high_score = high_score
        self.status = status
        self.speed_ms = speed_ms
        self.width = width
        self.height = height
        self.wrap = wrap
        self.game_over_reason = game_over_reason
        self.direction = direction

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        # = obstacle
        H = snake head
        S = snake body
        Row 0 is printed first (top), with x-axis labels at the bottom.
        """
        # Create empty board
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for ox, oy in self.obstacles:
            board[oy][ox] = '#'

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        # Body first so the head wins when it sits on an obstacle after a crash
        for x, y in self.snake[1:]:
            board[y][x] = 'S'
        hx, hy = self.snake[0]
        board[hy][hx] = 'H'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # x-axis labels use the last digit so wide boards stay aligned
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form; tuples become lists."""
        return {
            "tick_number": self.tick_number,
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "obstacles": [list(cell) for cell in self.obstacles],
            "score": self.score,
            "high_score": self.high_score,
            "status": self.status,
            "speed_ms": self.speed_ms,
            "width": self.width,
            "height": self.height,
            "wrap": self.wrap,
            "game_over_reason": self.game_over_reason,
            "direction": self.direction,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, status={self.status}, "
            f"score={self.score}, food={self.food}, length={len(self.snake)}>"
        )

"""
Grid model: the bounded or wrapping board the snake moves on.
"""

import random
from typing import Iterator, Tuple

Cell = Tuple[int, int]


class Grid:
    """
    A COLS x ROWS board.

    When `wrap` is set, leaving one edge re-enters from the opposite edge;
    otherwise cells outside the board are simply out of bounds.
    """

    def __init__(self, width: int, height: int, wrap: bool = False):
        self.width = width
        self.height = height
        self.wrap = wrap

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def normalize(self, cell: Cell) -> Cell:
        """Wrap coordinates modulo the board size when wrapping is enabled."""
        if not self.wrap:
            return cell
        x, y = cell
        return (x % self.width, y % self.height)

    def step(self, cell: Cell, delta: Tuple[int, int]) -> Cell:
        """Return the neighbouring cell in direction `delta`, before normalization."""
        return (cell[0] + delta[0], cell[1] + delta[1])

    def center(self) -> Cell:
        return (self.width // 2, self.height // 2)

    def random_cell(self, rng: random.Random) -> Cell:
        return (rng.randrange(self.width), rng.randrange(self.height))

    def cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def __repr__(self):
        return f"<Grid {self.width}x{self.height} wrap={self.wrap}>"

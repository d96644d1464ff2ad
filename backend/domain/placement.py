"""
Procedural placement of food and obstacles on free cells.
"""

import logging
import random
from typing import Collection, FrozenSet, Iterable, Optional, Set, Tuple

from .constants import MAX_FOOD_ATTEMPTS, MAX_OBSTACLE_ATTEMPTS, RESERVED_MARGIN
from .errors import PlacementExhausted
from .grid import Grid
from .occupancy import is_any_occupied

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


def effective_obstacle_count(total_cells: int, snake_length: int, target_count: int) -> int:
    """
    Clamp the requested obstacle count so the board keeps room for the
    snake plus a small margin of free cells.
    """
    return min(target_count, max(0, total_cells - snake_length - RESERVED_MARGIN))


class PlacementGenerator:
    """
    Picks uniformly random unoccupied cells on a grid.

    Args:
        grid: the board to place on
        rng: random source; pass a seeded random.Random for reproducible runs
        max_food_attempts: random draws before falling back to a scan of the
            remaining free cells
        max_obstacle_attempts: random draws allowed for one obstacle layout
    """

    def __init__(
        self,
        grid: Grid,
        rng: Optional[random.Random] = None,
        max_food_attempts: int = MAX_FOOD_ATTEMPTS,
        max_obstacle_attempts: int = MAX_OBSTACLE_ATTEMPTS,
    ):
        self.grid = grid
        self.rng = rng or random.Random()
        self.max_food_attempts = max_food_attempts
        self.max_obstacle_attempts = max_obstacle_attempts

    def place_food(self, snake: Iterable[Cell], obstacles: Collection[Cell]) -> Cell:
        """
        Return a random cell free of snake and obstacles.

        Raises:
            PlacementExhausted: if every cell on the board is occupied
        """
        body = set(snake)
        for _ in range(self.max_food_attempts):
            cell = self.grid.random_cell(self.rng)
            if not is_any_occupied(cell, body, None, obstacles):
                return cell

        # Crowded board: choose among whatever is left instead of drawing blind
        free = [
            cell for cell in self.grid.cells()
            if not is_any_occupied(cell, body, None, obstacles)
        ]
        if not free:
            raise PlacementExhausted(
                self.max_food_attempts,
                f"Board {self.grid.width}x{self.grid.height} is full; "
                f"no cell left for food after {self.max_food_attempts} attempts",
            )
        logger.debug(
            "Food placement fell back to scanning %d free cells", len(free)
        )
        return self.rng.choice(free)

    def place_obstacles(
        self,
        snake: Iterable[Cell],
        food: Optional[Cell],
        target_count: int,
    ) -> FrozenSet[Cell]:
        """
        Return up to `target_count` distinct cells free of snake and food.

        The count is clamped by effective_obstacle_count(). If the attempt
        budget runs out first, the partial layout is returned.
        """
        body = set(snake)
        wanted = effective_obstacle_count(self.grid.total_cells, len(body), target_count)

        obstacles: Set[Cell] = set()
        attempts = 0
        while len(obstacles) < wanted and attempts < self.max_obstacle_attempts:
            attempts += 1
            cell = self.grid.random_cell(self.rng)
            if not is_any_occupied(cell, body, food, obstacles):
                obstacles.add(cell)

        if len(obstacles) < wanted:
            logger.warning(
                "Placed only %d of %d obstacles after %d attempts",
                len(obstacles), wanted, attempts,
            )
        return frozenset(obstacles)

"""
Occupancy queries shared by collision checks and procedural placement.

All functions are stateless: the caller passes whichever snake body it
means (before or after the head is prepended / the tail is popped).
"""

from typing import Collection, Iterable, Optional, Tuple

Cell = Tuple[int, int]


def is_snake_cell(cell: Cell, snake: Iterable[Cell]) -> bool:
    return cell in snake


def is_food_cell(cell: Cell, food: Optional[Cell]) -> bool:
    return food is not None and cell == food


def is_obstacle_cell(cell: Cell, obstacles: Collection[Cell]) -> bool:
    return cell in obstacles


def is_any_occupied(
    cell: Cell,
    snake: Iterable[Cell],
    food: Optional[Cell] = None,
    obstacles: Collection[Cell] = (),
) -> bool:
    """True when the cell holds a snake segment, the food, or an obstacle."""
    return (
        is_snake_cell(cell, snake)
        or is_food_cell(cell, food)
        or is_obstacle_cell(cell, obstacles)
    )

"""
Tests for the domain package - grid, occupancy, snake and snapshots.
"""

import sys
import os
from collections import deque

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    UP, DOWN, LEFT, RIGHT,
    Grid,
    Snake,
    GameState,
    is_reverse,
    parse_direction,
)
from domain.occupancy import (
    is_snake_cell,
    is_food_cell,
    is_obstacle_cell,
    is_any_occupied,
)


class TestDirections:
    """Tests for direction helpers."""

    def test_reverse_pairs(self):
        assert is_reverse(LEFT, RIGHT)
        assert is_reverse(RIGHT, LEFT)
        assert is_reverse(UP, DOWN)
        assert is_reverse(DOWN, UP)

    def test_perpendicular_and_same_are_not_reverse(self):
        assert not is_reverse(UP, RIGHT)
        assert not is_reverse(RIGHT, RIGHT)

    def test_nothing_reverses_the_pre_start_direction(self):
        assert not is_reverse(LEFT, None)

    def test_parse_direction_is_case_insensitive(self):
        assert parse_direction("up") == UP
        assert parse_direction(" Left ") == LEFT

    @pytest.mark.parametrize("value", ["north", "", None, 3, (1, 0)])
    def test_parse_direction_rejects_unknown_values(self, value):
        assert parse_direction(value) is None


class TestGrid:
    """Tests for the Grid model."""

    def test_in_bounds(self):
        grid = Grid(10, 8)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((9, 7))
        assert not grid.in_bounds((10, 0))
        assert not grid.in_bounds((0, 8))
        assert not grid.in_bounds((-1, 3))

    def test_normalize_without_wrap_is_identity(self):
        grid = Grid(10, 10, wrap=False)
        assert grid.normalize((10, -1)) == (10, -1)

    def test_normalize_with_wrap(self):
        grid = Grid(10, 8, wrap=True)
        assert grid.normalize((10, 3)) == (0, 3)
        assert grid.normalize((-1, 3)) == (9, 3)
        assert grid.normalize((4, 8)) == (4, 0)
        assert grid.normalize((4, -1)) == (4, 7)

    def test_center_and_total_cells(self):
        grid = Grid(30, 30)
        assert grid.center() == (15, 15)
        assert grid.total_cells == 900

    def test_cells_covers_board_once(self):
        grid = Grid(4, 3)
        cells = list(grid.cells())
        assert len(cells) == 12
        assert len(set(cells)) == 12


class TestOccupancy:
    """Tests for the occupancy queries."""

    def test_queries(self):
        snake = [(5, 5), (4, 5)]
        obstacles = {(1, 1)}
        assert is_snake_cell((4, 5), snake)
        assert is_food_cell((2, 2), (2, 2))
        assert not is_food_cell((2, 2), None)
        assert is_obstacle_cell((1, 1), obstacles)
        assert is_any_occupied((1, 1), snake, (2, 2), obstacles)
        assert is_any_occupied((2, 2), snake, (2, 2), obstacles)
        assert not is_any_occupied((3, 3), snake, (2, 2), obstacles)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_head_and_tail(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)
        assert len(snake) == 3

    def test_snake_positions_is_deque(self):
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_grow_then_drop_tail_moves_one_cell(self):
        snake = Snake([(5, 5), (4, 5)])
        snake.grow_to((6, 5))
        assert len(snake) == 3
        assert snake.drop_tail() == (4, 5)
        assert list(snake) == [(6, 5), (5, 5)]

    def test_empty_snake_rejected(self):
        with pytest.raises(ValueError):
            Snake([])


class TestGameState:
    """Tests for the GameState snapshot."""

    def _state(self, **overrides):
        values = dict(
            tick_number=3,
            snake=[(2, 1), (1, 1)],
            food=(3, 3),
            obstacles=[(0, 0)],
            score=1,
            high_score=4,
            status="RUNNING",
            speed_ms=110,
            width=5,
            height=4,
        )
        values.update(overrides)
        return GameState(**values)

    def test_print_board_marks_every_entity(self):
        board = self._state().print_board()
        lines = board.split("\n")
        assert lines[0] == " 0 # . . . ."
        assert lines[1] == " 1 . S H . ."
        assert lines[3] == " 3 . . . F ."
        assert lines[-1] == "   0 1 2 3 4"

    def test_print_board_head_drawn_over_obstacle(self):
        board = self._state(snake=[(0, 0), (1, 0)], food=None).print_board()
        assert board.split("\n")[0] == " 0 H S . . ."

    def test_to_dict_is_json_friendly(self):
        data = self._state().to_dict()
        assert data["snake"] == [[2, 1], [1, 1]]
        assert data["food"] == [3, 3]
        assert data["obstacles"] == [[0, 0]]
        assert data["game_over_reason"] is None

    def test_repr(self):
        repr_str = repr(self._state())
        assert "tick=3" in repr_str
        assert "score=1" in repr_str

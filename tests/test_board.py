import copy
import random

import pytest

from tiles2048.board import (
    Direction,
    add_number,
    format_grid,
    is_game_over,
    move,
    new_grid,
)


def _random_grid(seed, size=4):
    rng = random.Random(seed)
    return [[rng.choice([0, 0, 2, 4, 8]) for _ in range(size)] for _ in range(size)]


def _transpose(grid):
    return [list(col) for col in zip(*grid)]


@pytest.mark.parametrize("size", [2, 4, 9])
def test_new_grid_has_two_tiles_of_two(size):
    grid = new_grid(size, random.Random(size))
    assert len(grid) == size
    assert all(len(row) == size for row in grid)
    values = sorted(value for row in grid for value in row if value)
    assert values == [2, 2]


def test_new_grid_rejects_tiny_board():
    with pytest.raises(ValueError):
        new_grid(1, random.Random(0))


def test_new_grid_is_reproducible_with_seed():
    first = new_grid(4, random.Random(5))
    second = new_grid(4, random.Random(5))
    first_cells = [(r, c) for r, row in enumerate(first) for c, v in enumerate(row) if v]
    second_cells = [(r, c) for r, row in enumerate(second) for c, v in enumerate(row) if v]
    assert len(first_cells) == 2
    assert first_cells == second_cells
    assert all(first[r][c] == 2 for r, c in first_cells)


def test_format_grid_empty_four_by_four():
    text = format_grid([[0] * 4 for _ in range(4)])
    lines = text.splitlines()
    assert lines[0] == "+----+----+----+----+"
    assert lines[1] == "|    |    |    |    |"
    assert len(lines) == 9


def test_format_grid_right_aligns_values():
    text = format_grid([[2, 0], [0, 2048]])
    lines = text.splitlines()
    assert lines[1] == "|   2|    |"
    assert lines[3] == "|    |2048|"


def test_move_left_pairs_merge():
    grid = [[2, 2, 2, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]
    result = move(grid, Direction.LEFT)
    assert grid[0] == [4, 4, 0, 0]
    assert result.moved is True
    assert result.points == 8


def test_move_without_change_reports_nothing():
    grid = [[2, 4], [8, 16]]
    before = copy.deepcopy(grid)
    for direction in Direction:
        result = move(grid, direction)
        assert result.moved is False
        assert result.points == 0
        assert grid == before


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("direction", list(Direction))
def test_move_preserves_total(seed, direction):
    grid = _random_grid(seed)
    total = sum(map(sum, grid))
    move(grid, direction)
    assert sum(map(sum, grid)) == total


@pytest.mark.parametrize("seed", range(20))
def test_right_is_mirror_of_left(seed):
    left = _random_grid(seed)
    right = [row[::-1] for row in left]
    left_result = move(left, Direction.LEFT)
    right_result = move(right, Direction.RIGHT)
    assert [row[::-1] for row in right] == left
    assert right_result == left_result


@pytest.mark.parametrize("seed", range(20))
def test_up_is_transpose_of_left(seed):
    left = _random_grid(seed)
    up = _transpose(left)
    left_result = move(left, Direction.LEFT)
    up_result = move(up, Direction.UP)
    assert _transpose(up) == left
    assert up_result == left_result


@pytest.mark.parametrize("seed", range(20))
def test_down_is_flip_of_up(seed):
    up = _random_grid(seed)
    down = up[::-1]
    down = [list(row) for row in down]
    up_result = move(up, Direction.UP)
    down_result = move(down, Direction.DOWN)
    assert down[::-1] == up
    assert down_result == up_result


def test_move_accepts_plain_integers():
    grid = [[0, 2], [0, 0]]
    assert move(grid, 2).moved is True
    assert grid == [[2, 0], [0, 0]]


def test_move_rejects_unknown_direction():
    with pytest.raises(ValueError):
        move([[0, 2], [0, 0]], 7)


@pytest.mark.parametrize("seed", range(10))
def test_add_number_fills_one_empty_cell(seed):
    grid = _random_grid(seed)
    empty_before = sum(value == 0 for row in grid for value in row)
    before = copy.deepcopy(grid)
    row, col = add_number(grid, random.Random(seed))
    assert before[row][col] == 0
    assert grid[row][col] in (2, 4)
    assert sum(value == 0 for row_ in grid for value in row_) == empty_before - 1


def test_add_number_on_full_board_raises():
    with pytest.raises(ValueError):
        add_number([[2, 4], [8, 16]], random.Random(0))


def test_is_game_over_with_empty_cell():
    assert is_game_over([[2, 4], [8, 0]]) is False


def test_is_game_over_when_stuck():
    assert is_game_over([[2, 4], [4, 2]]) is True


def test_is_game_over_with_equal_neighbours():
    assert is_game_over([[2, 2], [4, 8]]) is False
    assert is_game_over([[2, 4], [2, 8]]) is False
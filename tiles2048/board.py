"""Board state and move rules for the sliding-tile game."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import NamedTuple

Grid = list[list[int]]


class Direction(IntEnum):
    """Direction in which the tiles are pushed."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class MoveResult(NamedTuple):
    """Outcome of a move: whether any tile changed and the points earned."""

    moved: bool
    points: int


def new_grid(size: int, rng: random.Random | None = None) -> Grid:
    """Create a ``size`` x ``size`` board holding two tiles of value 2."""
    if size < 2:
        raise ValueError(f"board size must be at least 2, got {size}")
    rng = rng or random.Random()
    grid = [[0] * size for _ in range(size)]
    grid[rng.randrange(size)][rng.randrange(size)] = 2
    while True:
        row, col = rng.randrange(size), rng.randrange(size)
        if grid[row][col] == 0:
            grid[row][col] = 2
            return grid


def format_grid(grid: Grid) -> str:
    """Render the board as plain text with ruled cells four characters wide."""
    border = "+" + "----+" * len(grid)
    lines = [border]
    for row in grid:
        cells = "".join("    |" if value == 0 else f"{value:>4}|" for value in row)
        lines.append("|" + cells)
        lines.append(border)
    return "\n".join(lines) + "\n"


def _slide_line(line: list[int]) -> tuple[list[int], bool, int]:
    """Push the tiles of ``line`` towards its start, merging equal neighbours.

    Tiles are handled one by one from the start of the line; a tile that
    lands next to an equal one merges with it, even if that one was itself
    just produced by a merge.
    """
    cells = list(line)
    moved = False
    points = 0
    for start in range(1, len(cells)):
        if cells[start] == 0:
            continue
        pos = start
        while pos > 0 and cells[pos - 1] == 0:
            cells[pos - 1], cells[pos] = cells[pos], 0
            pos -= 1
            moved = True
        if pos > 0 and cells[pos - 1] == cells[pos]:
            cells[pos - 1] *= 2
            points += cells[pos - 1]
            cells[pos] = 0
            moved = True
    return cells, moved, points


def move(grid: Grid, direction: Direction | int) -> MoveResult:
    """Move every tile of ``grid`` in place towards ``direction``."""
    direction = Direction(direction)
    size = len(grid)
    moved = False
    points = 0

    if direction in (Direction.UP, Direction.DOWN):
        for col in range(size):
            line = [row[col] for row in grid]
            if direction is Direction.DOWN:
                line.reverse()
            cells, line_moved, line_points = _slide_line(line)
            if direction is Direction.DOWN:
                cells.reverse()
            for row, value in zip(grid, cells):
                row[col] = value
            moved |= line_moved
            points += line_points
    else:
        for row in grid:
            line = row[::-1] if direction is Direction.RIGHT else list(row)
            cells, line_moved, line_points = _slide_line(line)
            if direction is Direction.RIGHT:
                cells.reverse()
            row[:] = cells
            moved |= line_moved
            points += line_points

    return MoveResult(moved, points)


def add_number(grid: Grid, rng: random.Random | None = None) -> tuple[int, int]:
    """Place a new tile on a random empty cell and return its position.

    The new tile is 2 with probability 7/10 and 4 otherwise.
    """
    if not any(value == 0 for row in grid for value in row):
        raise ValueError("the board has no empty cell")
    rng = rng or random.Random()
    size = len(grid)
    while True:
        row, col = rng.randrange(size), rng.randrange(size)
        if grid[row][col] == 0:
            break
    grid[row][col] = 2 if rng.randrange(10) < 7 else 4
    return row, col


def is_game_over(grid: Grid) -> bool:
    """Return True when the board is full and no two neighbours are equal."""
    size = len(grid)
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if value == 0:
                return False
            if j != size - 1 and value == row[j + 1]:
                return False
            if i != size - 1 and value == grid[i + 1][j]:
                return False
    return True
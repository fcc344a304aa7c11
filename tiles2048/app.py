"""Game session state: menus, moves, end-of-game prompts and settings."""

from __future__ import annotations

import random
import re
from enum import Enum, IntEnum
from pathlib import Path

from .board import Direction, Grid, add_number, is_game_over, move, new_grid
from .scores import DEFAULT_SCORES_PATH, ScoreEntry, load_scores, save_score

MENU_ENTRIES = ("Mängi", "Seaded", "Edetabel", "Sulge")
COLOR_SCHEMES = ("Värviskeem 1", "värviskeem 2", "värviskeem 3")
DEFAULT_PLAYER_NAME = "Mängija"
NAME_MAX_LENGTH = 20
MIN_BOARD_SIZE = 2
MAX_BOARD_SIZE = 9
DEFAULT_BOARD_SIZE = 4

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class View(IntEnum):
    """The screen currently shown."""

    MENU = 0
    GAME = 1
    SETTINGS = 2
    LEADERBOARD = 3


class Prompt(Enum):
    """The question shown below the board once a game has ended."""

    NONE = "none"
    SAVE = "save"
    NAME = "name"
    NEW_GAME = "new_game"


def clamp_board_size(text: str) -> int:
    """Parse the leading integer of ``text`` and clamp it to 2..9.

    Raises ValueError when ``text`` does not start with a number.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a board size: {text!r}")
    return max(MIN_BOARD_SIZE, min(MAX_BOARD_SIZE, int(match.group(1))))


class GameApp:
    """Everything the interface shows and changes, without any drawing."""

    def __init__(
        self,
        rng: random.Random | None = None,
        scores_path: str | Path = DEFAULT_SCORES_PATH,
    ) -> None:
        self.rng = rng or random.Random()
        self.scores_path = scores_path
        self.grid: Grid = []
        self.size = DEFAULT_BOARD_SIZE
        self.size_text = str(DEFAULT_BOARD_SIZE)
        self.color_scheme = 0
        self.view = View.MENU
        self.prompt = Prompt.NONE
        self.points = 0
        self.game_over = False
        self.name = ""
        self.running = True
        self.menu_cursor = 0
        self.button_cursor = 0
        self.settings_focus = 0

    def select_menu(self, index: int) -> None:
        """Activate a main-menu entry: play, settings, leaderboard or quit."""
        if not 0 <= index < len(MENU_ENTRIES):
            raise ValueError(f"no menu entry {index}")
        if index == 3:
            self.running = False
            return
        if index == 0:
            self.game_over = False
            self.grid = new_grid(self.size, self.rng)
        self.view = View(index + 1)

    def press_arrow(self, direction: Direction | int) -> bool:
        """Push the tiles; return True when the board changed."""
        if self.view is not View.GAME or self.game_over:
            return False
        result = move(self.grid, direction)
        self.points += result.points
        if result.moved:
            add_number(self.grid, self.rng)
            if is_game_over(self.grid):
                self._finish()
        return result.moved

    def escape(self) -> None:
        """End a running game, or leave settings and the leaderboard."""
        if self.view is View.GAME:
            if not self.game_over:
                self._finish()
        elif self.view is View.SETTINGS:
            if not self.size_text:
                self.size_text = str(self.size)
            self.view = View.MENU
        elif self.view is View.LEADERBOARD:
            self.view = View.MENU

    def _finish(self) -> None:
        self.game_over = True
        self.prompt = Prompt.SAVE
        self.name = ""
        self.button_cursor = 0

    def answer_save(self, yes: bool) -> None:
        """Answer whether the finished game's score should be saved."""
        if self.prompt is not Prompt.SAVE:
            raise RuntimeError("no save question is pending")
        self.prompt = Prompt.NAME if yes else Prompt.NEW_GAME
        self.button_cursor = 0

    def submit_name(self) -> None:
        """Save the score under the entered name, then ask about a new game."""
        if self.prompt is not Prompt.NAME:
            raise RuntimeError("no name is being asked for")
        if not self.name:
            self.name = DEFAULT_PLAYER_NAME
        save_score(self.name, self.points, self.size, self.scores_path)
        self.prompt = Prompt.NEW_GAME
        self.button_cursor = 0

    def answer_new_game(self, yes: bool) -> None:
        """Start over on a fresh board, or go back to the main menu."""
        if self.prompt is not Prompt.NEW_GAME:
            raise RuntimeError("no new-game question is pending")
        self.points = 0
        self.game_over = False
        self.prompt = Prompt.NONE
        self.button_cursor = 0
        if yes:
            self.grid = new_grid(self.size, self.rng)
        else:
            self.view = View.MENU

    def edit_size_text(self, text: str) -> None:
        """Update the board-size field; a valid number takes effect at once."""
        self.size_text = text
        try:
            size = clamp_board_size(text)
        except ValueError:
            return
        self.size_text = str(size)
        self.size = size

    def commit_size_text(self) -> None:
        """Confirm the board-size field, falling back to 4 if it is not a number."""
        try:
            size = clamp_board_size(self.size_text)
        except ValueError:
            size = DEFAULT_BOARD_SIZE
        self.size_text = str(size)
        self.size = size

    def set_color_scheme(self, index: int) -> None:
        """Choose one of the tile colour schemes."""
        if not 0 <= index < len(COLOR_SCHEMES):
            raise ValueError(f"no colour scheme {index}")
        self.color_scheme = index

    def leaderboard(self) -> list[ScoreEntry]:
        """Return the saved results, best first."""
        return load_scores(self.scores_path)
"""Full-screen terminal interface."""

from __future__ import annotations

import argparse
import random
import sys

import blessed

from .app import (
    COLOR_SCHEMES,
    MENU_ENTRIES,
    NAME_MAX_LENGTH,
    GameApp,
    Prompt,
    View,
)
from .board import Direction
from .colors import (
    AQUAMARINE3,
    BLUE,
    BLUE_LIGHT,
    CYAN,
    GREEN,
    PALE_GREEN3,
    YELLOW,
    tile_color,
)
from .scores import DEFAULT_SCORES_PATH

_CELL_WIDTH = 7
_CELL_HEIGHT = 3
_MIN_ROWS = 35
_MIN_COLUMNS = 90

_TITLE = (
    (r" ___   ___   _  _    ___  ", GREEN),
    (r"|_  ) / _ \ | || |  ( _ ) ", YELLOW),
    (r" / / | (_) ||_  _| / _ \ ", PALE_GREEN3),
    (r"/___| \___/   |_|  \___/ ", AQUAMARINE3),
    (r"                          ", CYAN),
    (r"                          ", BLUE_LIGHT),
    (r"                          ", BLUE),
)

_ARROWS = {
    "KEY_UP": Direction.UP,
    "KEY_DOWN": Direction.DOWN,
    "KEY_LEFT": Direction.LEFT,
    "KEY_RIGHT": Direction.RIGHT,
}


def render_board(app: GameApp, term: blessed.Terminal) -> str:
    """Draw the board as bordered, coloured cells."""
    lines: list[str] = []
    edge = "─" * _CELL_WIDTH
    for row in app.grid:
        parts: list[list[str]] = [[] for _ in range(_CELL_HEIGHT + 2)]
        for value in row:
            fill = term.on_color(tile_color(value, app.color_scheme)) + term.white
            label = str(value) if value else ""
            blank = "│" + fill + " " * _CELL_WIDTH + term.normal + "│"
            parts[0].append("┌" + edge + "┐")
            parts[1].append(blank)
            parts[2].append("│" + fill + label.center(_CELL_WIDTH) + term.normal + "│")
            parts[3].append(blank)
            parts[4].append("└" + edge + "┘")
        lines.extend("".join(part) for part in parts)
    return "\n".join(lines)


def _button(term: blessed.Terminal, label: str, focused: bool) -> str:
    text = f"[ {label} ]"
    return term.reverse + text + term.normal if focused else text


def _separator(term: blessed.Terminal) -> str:
    return "─" * min(term.width or _MIN_COLUMNS, _MIN_COLUMNS)


def _render_menu(app: GameApp, term: blessed.Terminal) -> list[str]:
    lines = [term.color(colour) + text + term.normal for text, colour in _TITLE]
    lines += ["", ""]
    for index, entry in enumerate(MENU_ENTRIES):
        if index == app.menu_cursor:
            lines.append(term.white + term.on_color(22) + f"> {entry:<10}" + term.normal)
        else:
            lines.append(term.color(8) + f"  {entry:<10}" + term.normal)
    return lines


def _render_game(app: GameApp, term: blessed.Terminal) -> list[str]:
    lines = [f"Punktid: {app.points}", _separator(term), render_board(app, term)]
    if app.prompt is Prompt.SAVE:
        lines += [
            _separator(term),
            f"Mäng läbi! Sinu skoor: {app.points}",
            "",
            "Kas soovid salvestada oma tulemuse?",
            _button(term, "Jah", app.button_cursor == 0)
            + " "
            + _button(term, "Ei", app.button_cursor == 1),
        ]
    elif app.prompt is Prompt.NAME:
        lines += [_separator(term), "Sisesta oma nimi:", "> " + app.name]
    elif app.prompt is Prompt.NEW_GAME:
        lines += [
            _separator(term),
            "Kas soovid alustada uut mängu?",
            _button(term, "Jah", app.button_cursor == 0)
            + " "
            + _button(term, "Ei", app.button_cursor == 1),
        ]
    return lines


def _render_settings(app: GameApp, term: blessed.Terminal) -> list[str]:
    def marker(index: int) -> str:
        return "> " if app.settings_focus == index else "  "

    lines = [
        "Seaded:",
        _separator(term),
        f"{marker(0)}Mängulaua suurus: [{app.size_text:<1}]  {app.size}x{app.size}",
    ]
    schemes = "  ".join(
        ("(•) " if index == app.color_scheme else "( ) ") + name
        for index, name in enumerate(COLOR_SCHEMES)
    )
    lines.append(f"{marker(1)}Värviskeem: {schemes}")
    lines.append(_separator(term))
    lines.append(marker(2) + _button(term, "Tagasi", app.settings_focus == 2))
    return lines


def _render_leaderboard(app: GameApp, term: blessed.Terminal) -> list[str]:
    rows = [f"{'Nimi':<26}{'Skoor':<10}Mängulaua suurus", _separator(term)]
    entries = app.leaderboard()
    for entry in entries:
        name = entry.name.ljust(21)
        size = f"{entry.board_size}x{entry.board_size}"
        rows.append(f"{name:<26}{entry.score:<10}{size}")
    if not entries:
        rows.append("Edetabelis pole veel tulemusi!")
    return [
        "Edetabel:",
        _separator(term),
        *rows,
        _separator(term),
        _button(term, "Tagasi", True),
    ]


def render(app: GameApp, term: blessed.Terminal) -> str:
    """Draw the whole screen for the current view."""
    renderers = {
        View.MENU: _render_menu,
        View.GAME: _render_game,
        View.SETTINGS: _render_settings,
        View.LEADERBOARD: _render_leaderboard,
    }
    return "\n".join(renderers[app.view](app, term))


def _handle_prompt_key(app: GameApp, name: str | None, char: str) -> None:
    if app.prompt is Prompt.NAME:
        if name == "KEY_ENTER":
            app.submit_name()
        elif name in ("KEY_BACKSPACE", "KEY_DELETE"):
            app.name = app.name[:-1]
        elif name is None and char.isprintable() and len(app.name) < NAME_MAX_LENGTH:
            app.name += char
        return
    if name == "KEY_LEFT":
        app.button_cursor = 0
    elif name == "KEY_RIGHT":
        app.button_cursor = 1
    elif name == "KEY_ENTER":
        yes = app.button_cursor == 0
        if app.prompt is Prompt.SAVE:
            app.answer_save(yes)
        else:
            app.answer_new_game(yes)


def _handle_settings_key(app: GameApp, name: str | None, char: str) -> None:
    if name == "KEY_ESCAPE":
        app.escape()
    elif name in ("KEY_DOWN", "KEY_TAB"):
        app.settings_focus = (app.settings_focus + 1) % 3
    elif name == "KEY_UP":
        app.settings_focus = (app.settings_focus - 1) % 3
    elif app.settings_focus == 0:
        if name == "KEY_ENTER":
            app.commit_size_text()
        elif name in ("KEY_BACKSPACE", "KEY_DELETE"):
            app.edit_size_text(app.size_text[:-1])
        elif name is None and char.isdigit() and not app.size_text:
            app.edit_size_text(char)
    elif app.settings_focus == 1:
        if name == "KEY_LEFT" and app.color_scheme > 0:
            app.set_color_scheme(app.color_scheme - 1)
        elif name == "KEY_RIGHT" and app.color_scheme < len(COLOR_SCHEMES) - 1:
            app.set_color_scheme(app.color_scheme + 1)
    elif name == "KEY_ENTER":
        app.escape()


def _handle_key(app: GameApp, name: str | None, char: str = "") -> None:
    """Apply one key press; ``name`` is the key's sequence name or None."""
    if app.view is View.MENU:
        if name == "KEY_UP":
            app.menu_cursor = max(0, app.menu_cursor - 1)
        elif name == "KEY_DOWN":
            app.menu_cursor = min(len(MENU_ENTRIES) - 1, app.menu_cursor + 1)
        elif name == "KEY_ENTER":
            app.select_menu(app.menu_cursor)
    elif app.view is View.GAME:
        if app.prompt is not Prompt.NONE:
            _handle_prompt_key(app, name, char)
        elif name in _ARROWS:
            app.press_arrow(_ARROWS[name])
        elif name == "KEY_ESCAPE":
            app.escape()
    elif app.view is View.SETTINGS:
        _handle_settings_key(app, name, char)
    elif name in ("KEY_ESCAPE", "KEY_ENTER"):
        app.escape()


def _resize(rows: int, columns: int) -> None:
    sys.stdout.write(f"\x1b[8;{rows};{columns}t")
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Run the game in the terminal."""
    parser = argparse.ArgumentParser(description="Sliding-tile puzzle game.")
    parser.add_argument("--scores", default=DEFAULT_SCORES_PATH, help="leaderboard file")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    term = blessed.Terminal()
    app = GameApp(random.Random(args.seed), args.scores)

    rows, columns = term.height, term.width
    _resize(max(rows, _MIN_ROWS), max(columns, _MIN_COLUMNS))
    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            while app.running:
                sys.stdout.write(term.home + term.clear + render(app, term))
                sys.stdout.flush()
                key = term.inkey()
                if key.is_sequence:
                    _handle_key(app, key.name, "")
                elif str(key):
                    _handle_key(app, None, str(key))
    finally:
        sys.stdout.write(term.clear)
        _resize(rows, columns)
    return 0


if __name__ == "__main__":
    sys.exit(main())
import random

import blessed
import pytest

from tiles2048.app import GameApp, Prompt, View
from tiles2048.tui import _handle_key, render, render_board


@pytest.fixture
def term():
    return blessed.Terminal(force_styling=None)


@pytest.fixture
def app(tmp_path):
    return GameApp(random.Random(3), tmp_path / "scores.txt")


def test_board_shows_values(app, term):
    app.grid = [[2048, 0], [0, 4]]
    text = render_board(app, term)
    assert "2048" in text
    assert " 4 " in text
    assert len(text.splitlines()) == 5 * 2


def test_empty_board_cells_hold_no_digits(app, term):
    app.grid = [[0, 0], [0, 0]]
    text = render_board(app, term)
    assert not any(ch.isdigit() for ch in text)


def test_menu_lists_entries(app, term):
    text = render(app, term)
    for entry in ("Mängi", "Seaded", "Edetabel", "Sulge"):
        assert entry in text


def test_game_shows_points(app, term):
    app.select_menu(0)
    text = render(app, term)
    assert "Punktid: 0" in text


def test_game_over_prompt(app, term):
    app.select_menu(0)
    app.escape()
    text = render(app, term)
    assert "Kas soovid salvestada oma tulemuse?" in text


def test_empty_leaderboard(app, term):
    app.select_menu(2)
    assert "Edetabelis pole veel tulemusi!" in render(app, term)


def test_menu_keys_start_game(app):
    _handle_key(app, "KEY_DOWN")
    _handle_key(app, "KEY_UP")
    _handle_key(app, "KEY_ENTER")
    assert app.view is View.GAME


def test_menu_cursor_stays_in_range(app):
    for _ in range(10):
        _handle_key(app, "KEY_DOWN")
    assert app.menu_cursor == 3
    _handle_key(app, "KEY_ENTER")
    assert not app.running


def test_settings_keys_change_size(app, term):
    app.select_menu(1)
    _handle_key(app, "KEY_BACKSPACE")
    _handle_key(app, None, "6")
    assert app.size == 6
    assert "6x6" in render(app, term)


def test_settings_ignore_second_digit(app):
    app.select_menu(1)
    _handle_key(app, None, "7")
    assert app.size == 4
    assert app.size_text == "4"


def test_name_entry_saved_to_leaderboard(app, term):
    app.select_menu(0)
    app.points = 64
    _handle_key(app, "KEY_ESCAPE")
    _handle_key(app, "KEY_ENTER")
    assert app.prompt is Prompt.NAME
    for ch in "kai":
        _handle_key(app, None, ch)
    _handle_key(app, "KEY_ENTER")
    _handle_key(app, "KEY_RIGHT")
    _handle_key(app, "KEY_ENTER")
    assert app.view is View.MENU
    app.select_menu(2)
    text = render(app, term)
    assert "kai" in text
    assert "4x4" in text


def test_name_length_is_capped(app):
    app.select_menu(0)
    app.escape()
    app.answer_save(True)
    for _ in range(30):
        _handle_key(app, None, "a")
    assert app.name == "a" * 20
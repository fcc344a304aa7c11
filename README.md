# tiles2048

The 2048 puzzle in the terminal. Slide the tiles with the arrow keys. When two
tiles with the same number meet they merge into one, and the merged value is
added to your score. The game ends when the board is full and no neighbouring
tiles match. The interface text is in Estonian.

## Installing

```
pip install .
```

## Playing

```
tiles2048
tiles2048 --scores path/to/scores.txt --seed 42
```

Options:

- `--scores PATH`: the leaderboard file (default `skoorid.txt` in the current
  directory).
- `--seed N`: seed for the random number generator, for repeatable games.

On start the terminal is asked to grow to at least 35 rows by 90 columns; the
original size is requested again on exit.

The main menu (Up/Down to choose, Enter to confirm) has four entries:

- **Mängi**: starts a new game on the current board size.
- **Seaded**: settings for the board size (2 to 9, default 4) and one of three
  colour schemes.
- **Edetabel**: the leaderboard, highest score first.
- **Sulge**: quits.

While playing:

| Key        | Action               |
|------------|----------------------|
| Arrow keys | slide the tiles      |
| Escape     | end the current game |

A new tile appears after every move that changes the board: a 2 seven times
out of ten, otherwise a 4.

When a game ends you are asked whether to save your score (Left/Right choose
between the buttons, Enter confirms). If you say yes you type a name of at most
20 characters and press Enter; an empty name is saved as "Mängija". You are
then asked whether to start a new game; answering no returns to the main menu.

In the settings screen Up/Down or Tab move between the size field, the colour
scheme and the back button. In the size field Backspace clears the digit, a
digit can be typed into the empty field, and Enter confirms it (a field that is
not a number falls back to 4). Left/Right change the colour scheme. Escape, or
Enter on the back button, returns to the main menu. In the leaderboard Escape
or Enter returns to the main menu.

## Scores

Scores are appended to the leaderboard file, one line per game, holding the
name, the score and the board size separated by spaces. Reading stops at the
first line that cannot be parsed; a missing file is an empty leaderboard.

## Using the game logic from Python

```python
import random

from tiles2048.board import Direction, add_number, format_grid, is_game_over, move, new_grid

rng = random.Random(1)
grid = new_grid(4, rng)          # ValueError for a size below 2
result = move(grid, Direction.LEFT)
if result.moved:
    add_number(grid, rng)        # ValueError if the board is full
print(result.points, is_game_over(grid))
print(format_grid(grid))
```

- `tiles2048.board`: `new_grid`, `move` (returns a `MoveResult` with `moved`
  and `points`), `add_number` (returns the new tile's position),
  `is_game_over`, `format_grid` and the `Direction` enum.
- `tiles2048.scores`: `save_score`, `load_scores` and the `ScoreEntry`
  dataclass.
- `tiles2048.colors`: `tile_color(number, scheme)` returns a tile's colour as
  an xterm 256-colour index.
- `tiles2048.app`: `GameApp`, the whole game session without drawing (menu,
  moves, end-of-game prompts, settings, leaderboard), and
  `clamp_board_size`.
- `tiles2048.tui`: `render`, `render_board` and `main`, the terminal front end.

## Running the tests

```
pip install .[test]
pytest
```
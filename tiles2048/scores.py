"""Leaderboard storage in a whitespace-separated text file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_SCORES_PATH = "skoorid.txt"


@dataclass(frozen=True)
class ScoreEntry:
    """One finished game on the leaderboard."""

    name: str
    score: int
    board_size: int


def save_score(
    name: str,
    score: int,
    board_size: int,
    path: str | Path = DEFAULT_SCORES_PATH,
) -> None:
    """Append a result as ``name score board_size`` on its own line."""
    with open(path, "a", encoding="utf-8") as file:
        file.write(f"{name} {score} {board_size}\n")


def load_scores(path: str | Path = DEFAULT_SCORES_PATH) -> list[ScoreEntry]:
    """Read all results, best score first.

    Reading stops at the first record that cannot be parsed. A missing
    file gives an empty leaderboard.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []

    tokens = iter(text.split())
    entries: list[ScoreEntry] = []
    for name in tokens:
        try:
            score = int(next(tokens))
            board_size = int(next(tokens))
        except (StopIteration, ValueError):
            break
        entries.append(ScoreEntry(name, score, board_size))

    return sorted(entries, key=lambda entry: entry.score, reverse=True)
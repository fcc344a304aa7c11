[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tiles2048"
version = "1.0.0"
description = "The 2048 sliding-tile puzzle in the terminal, with a configurable board size, colour schemes and a leaderboard."
requires-python = ">=3.10"
keywords = ["2048", "puzzle", "game", "terminal", "tui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Estonian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tiles2048 = "tiles2048.tui:main"

[tool.hatch.build.targets.wheel]
packages = ["tiles2048"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

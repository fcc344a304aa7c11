"""Tile colours as xterm 256-colour palette indices."""

from __future__ import annotations

BLACK = 0
RED = 1
GREEN = 2
YELLOW = 3
BLUE = 4
MAGENTA = 5
CYAN = 6
WHITE = 7
GRAY_DARK = 8
RED_LIGHT = 9
GREEN_LIGHT = 10
BLUE_LIGHT = 12
MAGENTA_LIGHT = 13
CYAN_LIGHT = 14
DARK_GREEN = 22
TURQUOISE2 = 45
DARK_RED = 52
CADET_BLUE_BIS = 73
PALE_GREEN3 = 77
AQUAMARINE3 = 79
DEEP_PINK1 = 198
ORANGE_RED1 = 202
ORANGE1 = 214
GOLD1 = 220

# Colours for tiles 2, 4, 8, ... 2048, followed by the colour for anything larger.
_SCHEMES: dict[int, tuple[int, ...]] = {
    0: (
        YELLOW, GREEN, CADET_BLUE_BIS, CYAN, MAGENTA, RED_LIGHT,
        GREEN_LIGHT, BLUE_LIGHT, CYAN_LIGHT, MAGENTA_LIGHT, ORANGE_RED1, RED,
    ),
    1: (
        CYAN, BLUE_LIGHT, BLUE, MAGENTA_LIGHT, MAGENTA, RED_LIGHT,
        RED, DARK_RED, ORANGE_RED1, ORANGE1, YELLOW, GOLD1,
    ),
    2: (
        RED, RED_LIGHT, ORANGE_RED1, ORANGE1, YELLOW, PALE_GREEN3,
        CYAN_LIGHT, TURQUOISE2, CYAN, BLUE_LIGHT, BLUE, DEEP_PINK1,
    ),
}


def tile_color(number: int, scheme: int = 0) -> int:
    """Return the background colour for a tile of value ``number``.

    Empty cells are black. Schemes 1 and 2 are the alternative palettes;
    any other scheme number selects the default palette.
    """
    if number == 0:
        return BLACK
    palette = _SCHEMES.get(scheme, _SCHEMES[0])
    exponent = number.bit_length() - 1 if number > 1 else 0
    if 1 <= exponent <= 11:
        return palette[exponent - 1]
    return palette[-1]
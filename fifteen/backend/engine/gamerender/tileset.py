"""Tile indices, palette bands and screen layout of the tile display."""

SCREEN_W = 20
SCREEN_H = 18

# Each puzzle cell is a 3×3 block of display tiles.
CELL_W = 3
CELL_H = 3

# Grid origin in tile coordinates.
GRID_X = 4
GRID_Y = 3

HUD_Y = GRID_Y + 4 * CELL_H + 2
HUD_WIDTH = 8

# -- tile indices ------------------------------------------------------------

T_BLANK = 0
T_BORDER_TL = 1
T_BORDER_T = 2
T_BORDER_TR = 3
T_BORDER_L = 4
T_BORDER_R = 5
T_BORDER_BL = 6
T_BORDER_B = 7
T_BORDER_BR = 8
T_CELL_BG = 9
T_NUM_START = 10  # digits 1-9
T_NUM10_L = 19  # pairs for 10-15: tens at 19 + 2k, ones at 20 + 2k
T_DIGIT_ZERO = T_NUM10_L + 1
T_EMPTY_CELL = 31
T_TILE_TL = 32
T_TILE_T = 33
T_TILE_TR = 34
T_TILE_L = 35
T_TILE_R = 36
T_TILE_BL = 37
T_TILE_B = 38
T_TILE_BR = 39

TILE_COUNT = 40

# -- palette bands -----------------------------------------------------------

BAND_UI = 0
BAND_BLUE = 1
BAND_GREEN = 2
BAND_ORANGE = 3
BAND_PURPLE = 4
BAND_EMPTY = 5
BAND_WIN = 6
BAND_TEXT = 7

BAND_COUNT = 8


def band_for(tile_num: int) -> int:
    """Palette band for a tile identifier."""
    if tile_num == 0:
        return BAND_EMPTY
    if tile_num <= 4:
        return BAND_BLUE
    if tile_num <= 8:
        return BAND_GREEN
    if tile_num <= 12:
        return BAND_ORANGE
    return BAND_PURPLE


def digit_tile(digit: int) -> int:
    """Glyph tile for a single decimal digit."""
    if digit == 0:
        return T_DIGIT_ZERO
    return T_NUM_START + digit - 1


def cell_origin(row: int, col: int) -> tuple[int, int]:
    """Top-left screen tile of a grid cell."""
    return GRID_X + col * CELL_W, GRID_Y + row * CELL_H

"""Projects board, cursor and HUD state onto the two-layer tile display."""

from __future__ import annotations

from collections.abc import Iterator

from fifteen.backend.drivers import Display
from fifteen.backend.engine.gamerender.tileset import (
    BAND_BLUE,
    BAND_EMPTY,
    BAND_GREEN,
    BAND_ORANGE,
    BAND_TEXT,
    BAND_UI,
    BAND_WIN,
    CELL_H,
    CELL_W,
    GRID_X,
    GRID_Y,
    HUD_WIDTH,
    HUD_Y,
    SCREEN_H,
    SCREEN_W,
    T_BLANK,
    T_BORDER_B,
    T_BORDER_BL,
    T_BORDER_BR,
    T_BORDER_L,
    T_BORDER_R,
    T_BORDER_T,
    T_BORDER_TL,
    T_BORDER_TR,
    T_EMPTY_CELL,
    T_NUM10_L,
    T_NUM_START,
    T_TILE_B,
    T_TILE_BL,
    T_TILE_BR,
    T_TILE_L,
    T_TILE_R,
    T_TILE_T,
    T_TILE_TL,
    T_TILE_TR,
    band_for,
    cell_origin,
    digit_tile,
)
from fifteen.backend.models.board import GRID_SIZE, Board

FLASH_BEATS = 6
FLASH_BEAT_FRAMES = 20
HUD_MAX = 999

# Eight-piece frame of a numbered tile, as (dx, dy, tile).
_TILE_FRAME = (
    (0, 0, T_TILE_TL),
    (1, 0, T_TILE_T),
    (2, 0, T_TILE_TR),
    (0, 1, T_TILE_L),
    (2, 1, T_TILE_R),
    (0, 2, T_TILE_BL),
    (1, 2, T_TILE_B),
    (2, 2, T_TILE_BR),
)

_ICON_BANDS = {
    (8, 8): BAND_BLUE,
    (9, 8): BAND_GREEN,
    (8, 9): BAND_ORANGE,
    (9, 9): BAND_EMPTY,
}

_CORNERS = ((0, 0), (CELL_W - 1, 0), (0, CELL_H - 1), (CELL_W - 1, CELL_H - 1))


class RenderMapper:
    """Writes the tiles and attributes that represent one session.

    Only reads the board; every method is a projection of current state
    onto ``display`` and touches the smallest region that changed.
    """

    def __init__(self, display: Display, board: Board) -> None:
        self.display = display
        self.board = board

    # -- cells ----------------------------------------------------------------

    def _fill_attributes(self, row: int, col: int, band: int) -> None:
        sx, sy = cell_origin(row, col)
        for dy in range(CELL_H):
            for dx in range(CELL_W):
                self.display.write_attribute(sx + dx, sy + dy, band)

    def draw_cell(self, row: int, col: int) -> None:
        tile_num = self.board.get_tile(row, col)
        sx, sy = cell_origin(row, col)
        self._fill_attributes(row, col, band_for(tile_num))

        if tile_num == 0:
            for dy in range(CELL_H):
                for dx in range(CELL_W):
                    self.display.write_content(sx + dx, sy + dy, T_EMPTY_CELL)
            return

        for dx, dy, tile in _TILE_FRAME:
            self.display.write_content(sx + dx, sy + dy, tile)

        if tile_num <= 9:
            self.display.write_content(sx + 1, sy + 1, T_NUM_START + tile_num - 1)
        else:
            # Tens glyph in the centre, ones glyph over the right frame piece.
            pair = T_NUM10_L + (tile_num - 10) * 2
            self.display.write_content(sx + 1, sy + 1, pair)
            self.display.write_content(sx + 2, sy + 1, pair + 1)

    def draw_board(self) -> None:
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                self.draw_cell(row, col)

    def draw_cursor(self, row: int, col: int, show: bool) -> None:
        """Highlight or restore the four corner attributes of a cell."""
        band = BAND_WIN if show else band_for(self.board.get_tile(row, col))
        sx, sy = cell_origin(row, col)
        for dx, dy in _CORNERS:
            self.display.write_attribute(sx + dx, sy + dy, band)

    # -- frame and HUD --------------------------------------------------------

    def draw_border(self) -> None:
        x1, y1 = GRID_X - 1, GRID_Y - 1
        x2, y2 = GRID_X + GRID_SIZE * CELL_W, GRID_Y + GRID_SIZE * CELL_H
        write = self.display.write_content

        for x in range(x1, x2 + 1):
            self.display.write_attribute(x, y1, BAND_UI)
            self.display.write_attribute(x, y2, BAND_UI)
        for y in range(y1, y2 + 1):
            self.display.write_attribute(x1, y, BAND_UI)
            self.display.write_attribute(x2, y, BAND_UI)

        write(x1, y1, T_BORDER_TL)
        write(x2, y1, T_BORDER_TR)
        write(x1, y2, T_BORDER_BL)
        write(x2, y2, T_BORDER_BR)
        for x in range(x1 + 1, x2):
            write(x, y1, T_BORDER_T)
            write(x, y2, T_BORDER_B)
        for y in range(y1 + 1, y2):
            write(x1, y, T_BORDER_L)
            write(x2, y, T_BORDER_R)

    def draw_hud(self, move_count: int) -> None:
        """Right-aligned three-digit move counter, leading positions blank."""
        for x in range(GRID_X, GRID_X + HUD_WIDTH):
            self.display.write_attribute(x, HUD_Y, BAND_TEXT)

        shown = min(move_count, HUD_MAX)
        digits = (shown // 100, (shown // 10) % 10, shown % 10)
        leading = True
        for i, digit in enumerate(digits):
            x = GRID_X + 1 + i
            if leading and digit == 0 and i < len(digits) - 1:
                self.display.write_content(x, HUD_Y, T_BLANK)
                continue
            leading = False
            self.display.write_content(x, HUD_Y, digit_tile(digit))

    def clear(self) -> None:
        for y in range(SCREEN_H):
            for x in range(SCREEN_W):
                self.display.write_content(x, y, T_BLANK)
                self.display.write_attribute(x, y, BAND_UI)

    def draw_title(self) -> None:
        """Title screen: a large "15" over a small 2×2 puzzle icon."""
        for y in range(SCREEN_H):
            for x in range(SCREEN_W):
                self.display.write_content(x, y, T_BLANK)
                self.display.write_attribute(x, y, BAND_TEXT)

        write = self.display.write_content
        write(7, 5, digit_tile(1))
        write(9, 5, digit_tile(5))

        icon = (
            (T_TILE_TL, T_TILE_T, T_TILE_T, T_TILE_TR),
            (T_TILE_L, digit_tile(1), digit_tile(2), T_TILE_R),
            (T_TILE_L, digit_tile(3), T_EMPTY_CELL, T_TILE_R),
            (T_TILE_BL, T_TILE_B, T_TILE_B, T_TILE_BR),
        )
        for dy, row in enumerate(icon):
            for dx, tile in enumerate(row):
                write(7 + dx, 7 + dy, tile)

        for (x, y), band in _ICON_BANDS.items():
            self.display.write_attribute(x, y, band)

    # -- win ------------------------------------------------------------------

    def win_flash(self) -> Iterator[int]:
        """Alternate the whole board between the win band and normal bands.

        Each step paints one beat and yields how many ticks to hold it.
        """
        for beat in range(FLASH_BEATS):
            for row in range(GRID_SIZE):
                for col in range(GRID_SIZE):
                    band = (
                        band_for(self.board.get_tile(row, col))
                        if beat % 2
                        else BAND_WIN
                    )
                    self._fill_attributes(row, col, band)
            yield FLASH_BEAT_FRAMES

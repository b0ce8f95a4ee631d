"""Colours and glyph art for drawing tile indices on real screens."""

from __future__ import annotations

from dataclasses import dataclass

from fifteen.backend.engine.gamerender import tileset as ts

RGB = tuple[int, int, int]


def _rgb5(r: int, g: int, b: int) -> RGB:
    return (r * 255 // 31, g * 255 // 31, b * 255 // 31)


# Four colours per band, lightest first.
BANDS: tuple[tuple[RGB, RGB, RGB, RGB], ...] = (
    # UI / border
    (_rgb5(31, 31, 31), _rgb5(16, 20, 28), _rgb5(6, 10, 18), _rgb5(0, 0, 0)),
    # 1-4 blue
    (_rgb5(20, 24, 31), _rgb5(4, 8, 24), _rgb5(12, 16, 28), _rgb5(0, 0, 4)),
    # 5-8 green
    (_rgb5(20, 31, 20), _rgb5(4, 20, 4), _rgb5(12, 24, 12), _rgb5(0, 4, 0)),
    # 9-12 orange
    (_rgb5(31, 24, 20), _rgb5(24, 8, 4), _rgb5(28, 16, 12), _rgb5(4, 0, 0)),
    # 13-15 purple
    (_rgb5(28, 20, 31), _rgb5(16, 4, 24), _rgb5(22, 12, 28), _rgb5(4, 0, 4)),
    # empty
    (_rgb5(8, 8, 12), _rgb5(4, 4, 8), _rgb5(2, 2, 4), _rgb5(0, 0, 0)),
    # win / cursor
    (_rgb5(31, 31, 16), _rgb5(24, 20, 0), _rgb5(16, 12, 0), _rgb5(0, 0, 0)),
    # text
    (_rgb5(31, 31, 31), _rgb5(20, 20, 20), _rgb5(10, 10, 10), _rgb5(0, 0, 0)),
)


@dataclass(frozen=True)
class TileArt:
    """How one tile index looks.

    ``cells`` is the two-column terminal rendering, ``edges`` the sides
    (subset of "TBLR") a GUI draws a frame line on, ``text`` the glyph and
    its horizontal ``align`` inside the tile. Colours index into the band.
    """

    cells: str = "  "
    edges: str = ""
    text: str = ""
    align: str = "center"
    fill: int = 3
    ink: int = 1


def _frame(cells: str, edges: str, fill: int, ink: int) -> TileArt:
    return TileArt(cells=cells, edges=edges, fill=fill, ink=ink)


def _build() -> dict[int, TileArt]:
    art: dict[int, TileArt] = {
        ts.T_BLANK: TileArt(),
        ts.T_CELL_BG: TileArt(fill=0),
        ts.T_EMPTY_CELL: TileArt(cells="░░", fill=0, ink=1),
    }

    outer = (
        (ts.T_BORDER_TL, "╔═", "TL"),
        (ts.T_BORDER_T, "══", "T"),
        (ts.T_BORDER_TR, "═╗", "TR"),
        (ts.T_BORDER_L, "║ ", "L"),
        (ts.T_BORDER_R, " ║", "R"),
        (ts.T_BORDER_BL, "╚═", "BL"),
        (ts.T_BORDER_B, "══", "B"),
        (ts.T_BORDER_BR, "═╝", "BR"),
    )
    for tile, cells, edges in outer:
        art[tile] = _frame(cells, edges, fill=3, ink=1)

    frame = (
        (ts.T_TILE_TL, "┌─", "TL"),
        (ts.T_TILE_T, "──", "T"),
        (ts.T_TILE_TR, "─┐", "TR"),
        (ts.T_TILE_L, "│ ", "L"),
        (ts.T_TILE_R, " │", "R"),
        (ts.T_TILE_BL, "└─", "BL"),
        (ts.T_TILE_B, "──", "B"),
        (ts.T_TILE_BR, "─┘", "BR"),
    )
    for tile, cells, edges in frame:
        art[tile] = _frame(cells, edges, fill=0, ink=2)

    for digit in range(1, 10):
        art[ts.T_NUM_START + digit - 1] = TileArt(
            cells=f"{digit} ", text=str(digit), fill=0, ink=1
        )

    for k in range(6):
        tens = ts.T_NUM10_L + 2 * k
        art[tens] = TileArt(cells=" 1", text="1", align="right", fill=0, ink=1)
        art[tens + 1] = TileArt(
            cells=f"{k} ", text=str(k), align="left", fill=0, ink=1
        )

    return art


TILE_ART: dict[int, TileArt] = _build()


def colours(tile: int, band: int) -> tuple[TileArt, RGB, RGB]:
    """Art plus (fill, ink) colours for a tile drawn in a palette band."""
    art = TILE_ART.get(tile, TILE_ART[ts.T_BLANK])
    pal = BANDS[band % len(BANDS)]
    return art, pal[art.fill], pal[art.ink]

"""In-memory tile display and the colour/glyph tables frontends draw from."""

from __future__ import annotations

import pytest

from fifteen.backend.engine.gamerender import tileset as ts
from fifteen.frontend.display import TileDisplay
from fifteen.frontend.palette import BANDS, TILE_ART, colours


def test_writes_mark_tiles_dirty() -> None:
    display = TileDisplay()
    display.write_content(1, 2, ts.T_TILE_TL)
    display.write_attribute(3, 4, ts.BAND_WIN)

    assert display.tile_at(1, 2) == (ts.T_TILE_TL, 0)
    assert display.tile_at(3, 4) == (ts.T_BLANK, ts.BAND_WIN)
    assert display.take_dirty() == {(1, 2), (3, 4)}
    assert display.take_dirty() == set()


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (20, 0), (0, 18)])
def test_out_of_screen_writes_raise(x: int, y: int) -> None:
    display = TileDisplay()
    with pytest.raises(ValueError):
        display.write_content(x, y, 0)
    with pytest.raises(ValueError):
        display.write_attribute(x, y, 0)


def test_power_and_visibility() -> None:
    display = TileDisplay()
    assert not display.lit

    display.show()
    display.power_on()
    assert display.lit
    assert len(display.take_dirty()) == ts.SCREEN_W * ts.SCREEN_H

    display.power_off()
    assert not display.lit
    display.power_on()
    display.hide()
    assert not display.lit


def test_every_tile_index_has_art() -> None:
    for i in range(ts.TILE_COUNT):
        assert i in TILE_ART, i


def test_two_digit_art_reads_as_number() -> None:
    for value in range(10, 16):
        tens = ts.T_NUM10_L + (value - 10) * 2
        assert TILE_ART[tens].text + TILE_ART[tens + 1].text == str(value)


def test_colours_come_from_the_band() -> None:
    art, fill, ink = colours(ts.T_NUM_START, ts.BAND_GREEN)
    assert art.text == "1"
    assert fill == BANDS[ts.BAND_GREEN][art.fill]
    assert ink == BANDS[ts.BAND_GREEN][art.ink]
    assert len(BANDS) == ts.BAND_COUNT

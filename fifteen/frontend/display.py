"""In-memory two-layer tile display shared by every frontend."""

from __future__ import annotations

import time

from fifteen.backend.engine.gamerender.tileset import SCREEN_H, SCREEN_W, T_BLANK

FPS = 60


class TileDisplay:
    """Content and attribute layers plus the set of tiles changed since the
    last ``take_dirty()``. Frontends repaint from it; the core only writes."""

    def __init__(self, width: int = SCREEN_W, height: int = SCREEN_H) -> None:
        self.width = width
        self.height = height
        self.content: list[list[int]] = [[T_BLANK] * width for _ in range(height)]
        self.attributes: list[list[int]] = [[0] * width for _ in range(height)]
        self.visible = False
        self.powered = False
        self._dirty: set[tuple[int, int]] = set()

    # -- writes ---------------------------------------------------------------

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"Tile ({x}, {y}) is outside the {self.width}×{self.height} screen.")

    def write_content(self, x: int, y: int, tile: int) -> None:
        self._check(x, y)
        self.content[y][x] = tile
        self._dirty.add((x, y))

    def write_attribute(self, x: int, y: int, band: int) -> None:
        self._check(x, y)
        self.attributes[y][x] = band
        self._dirty.add((x, y))

    # -- toggles --------------------------------------------------------------

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def power_on(self) -> None:
        # Everything is repainted when the screen comes back.
        self.powered = True
        self.mark_all_dirty()

    def power_off(self) -> None:
        self.powered = False

    # -- frontend side --------------------------------------------------------

    @property
    def lit(self) -> bool:
        return self.powered and self.visible

    def mark_all_dirty(self) -> None:
        self._dirty.update(
            (x, y) for y in range(self.height) for x in range(self.width)
        )

    def take_dirty(self) -> set[tuple[int, int]]:
        """Return and reset the tiles changed since the previous call."""
        dirty, self._dirty = self._dirty, set()
        return dirty

    def tile_at(self, x: int, y: int) -> tuple[int, int]:
        return self.content[y][x], self.attributes[y][x]


class IntervalClock:
    """Sleeps until the next 1/fps boundary."""

    def __init__(self, fps: int = FPS) -> None:
        self.interval = 1.0 / fps
        self._next = time.monotonic() + self.interval

    def wait(self) -> None:
        now = time.monotonic()
        if self._next > now:
            time.sleep(self._next - now)
            self._next += self.interval
        else:
            # Fell behind; resync instead of bursting.
            self._next = now + self.interval

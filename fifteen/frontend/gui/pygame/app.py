"""Pygame GUI frontend.

Draws the tile map into a window, repainting only tiles the display marks
dirty, and samples held keys once per frame.
"""

from __future__ import annotations

import pygame

from fifteen.backend.drivers import Button
from fifteen.backend.engine.gamesession import SessionController
from fifteen.frontend.display import FPS, TileDisplay
from fifteen.frontend.keys import fold_buttons
from fifteen.frontend.palette import colours

TILE_PX = 8

_KEYS: dict[int, Button] = {
    pygame.K_UP: Button.UP,
    pygame.K_w: Button.UP,
    pygame.K_DOWN: Button.DOWN,
    pygame.K_s: Button.DOWN,
    pygame.K_LEFT: Button.LEFT,
    pygame.K_a: Button.LEFT,
    pygame.K_RIGHT: Button.RIGHT,
    pygame.K_d: Button.RIGHT,
    pygame.K_SPACE: Button.PRIMARY,
    pygame.K_z: Button.PRIMARY,
    pygame.K_x: Button.ALTERNATE,
    pygame.K_RETURN: Button.START,
}


class PygameScreen:
    """Window, input source and frame clock in one."""

    def __init__(self, display: TileDisplay, scale: int = 4, fps: int = FPS) -> None:
        self._display = display
        self._fps = fps
        self._tile = TILE_PX * scale
        self._line = max(1, scale)
        self._closed = False

        pygame.init()
        self._surf = pygame.display.set_mode(
            (display.width * self._tile, display.height * self._tile)
        )
        pygame.display.set_caption("Fifteen")
        self._clock = pygame.time.Clock()
        self._font = pygame.font.SysFont("Helvetica", int(self._tile * 0.8), bold=True)

    # -- input ----------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def poll(self) -> Button:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT or (
                ev.type == pygame.KEYDOWN and ev.key in (pygame.K_ESCAPE, pygame.K_q)
            ):
                self._closed = True

        pressed = pygame.key.get_pressed()
        return fold_buttons((key for key in _KEYS if pressed[key]), _KEYS)

    # -- drawing --------------------------------------------------------------

    def _draw_tile(self, x: int, y: int) -> None:
        tile, band = self._display.tile_at(x, y)
        art, fill, ink = colours(tile, band)
        t = self._tile
        rect = pygame.Rect(x * t, y * t, t, t)
        pygame.draw.rect(self._surf, fill, rect)

        half = self._line // 2
        if "T" in art.edges:
            pygame.draw.line(self._surf, ink, (rect.left, rect.top + half), (rect.right - 1, rect.top + half), self._line)
        if "B" in art.edges:
            pygame.draw.line(self._surf, ink, (rect.left, rect.bottom - 1 - half), (rect.right - 1, rect.bottom - 1 - half), self._line)
        if "L" in art.edges:
            pygame.draw.line(self._surf, ink, (rect.left + half, rect.top), (rect.left + half, rect.bottom - 1), self._line)
        if "R" in art.edges:
            pygame.draw.line(self._surf, ink, (rect.right - 1 - half, rect.top), (rect.right - 1 - half, rect.bottom - 1), self._line)

        if art.text:
            glyph = self._font.render(art.text, True, ink)
            gr = glyph.get_rect(centery=rect.centery)
            if art.align == "left":
                gr.left = rect.left
            elif art.align == "right":
                gr.right = rect.right
            else:
                gr.centerx = rect.centerx
            self._surf.blit(glyph, gr)

    # -- frame clock ----------------------------------------------------------

    def wait(self) -> None:
        dirty = self._display.take_dirty()
        if not self._display.lit:
            if dirty:
                self._surf.fill((0, 0, 0))
                pygame.display.flip()
        elif dirty:
            for x, y in dirty:
                self._draw_tile(x, y)
            pygame.display.flip()
        self._clock.tick(self._fps)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(seed: int | None = None, fps: int = FPS, scale: int = 4) -> None:
    """Launch the Pygame window."""
    display = TileDisplay()
    screen = PygameScreen(display, scale=scale, fps=fps)
    controller = SessionController(display, seed=seed)
    try:
        controller.run(screen, screen)
    finally:
        pygame.quit()

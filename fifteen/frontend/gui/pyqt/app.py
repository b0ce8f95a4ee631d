"""PyQt6 GUI frontend.

A single widget paints the tile map; held keys are tracked from
press/release events and a ``QTimer`` advances the controller one tick
per frame.
"""

from __future__ import annotations

import sys

from PyQt6.QtCore import QRect, Qt, QTimer
from PyQt6.QtGui import QColor, QFont, QKeyEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QApplication, QMainWindow, QWidget

from fifteen.backend.drivers import Button
from fifteen.backend.engine.gamesession import SessionController
from fifteen.frontend.display import FPS, TileDisplay
from fifteen.frontend.keys import fold_buttons
from fifteen.frontend.palette import colours

TILE_PX = 8

_KEYS: dict[Qt.Key, Button] = {
    Qt.Key.Key_Up: Button.UP,
    Qt.Key.Key_W: Button.UP,
    Qt.Key.Key_Down: Button.DOWN,
    Qt.Key.Key_S: Button.DOWN,
    Qt.Key.Key_Left: Button.LEFT,
    Qt.Key.Key_A: Button.LEFT,
    Qt.Key.Key_Right: Button.RIGHT,
    Qt.Key.Key_D: Button.RIGHT,
    Qt.Key.Key_Space: Button.PRIMARY,
    Qt.Key.Key_Z: Button.PRIMARY,
    Qt.Key.Key_X: Button.ALTERNATE,
    Qt.Key.Key_Return: Button.START,
    Qt.Key.Key_Enter: Button.START,
}

_ALIGN = {
    "left": Qt.AlignmentFlag.AlignLeft,
    "right": Qt.AlignmentFlag.AlignRight,
    "center": Qt.AlignmentFlag.AlignHCenter,
}


class _TileView(QWidget):
    """Paints every tile of the display."""

    def __init__(self, display: TileDisplay, scale: int) -> None:
        super().__init__()
        self._display = display
        self._tile = TILE_PX * scale
        self._line = max(1, scale)
        self._font = QFont("Helvetica", int(self._tile * 0.6), QFont.Weight.Bold)
        self.setFixedSize(display.width * self._tile, display.height * self._tile)

    def paintEvent(self, event: QPaintEvent | None) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setFont(self._font)
        if not self._display.lit:
            painter.fillRect(self.rect(), QColor(0, 0, 0))
            painter.end()
            return

        t = self._tile
        for y in range(self._display.height):
            for x in range(self._display.width):
                tile, band = self._display.tile_at(x, y)
                art, fill, ink = colours(tile, band)
                rect = QRect(x * t, y * t, t, t)
                painter.fillRect(rect, QColor(*fill))

                pen = QPen(QColor(*ink))
                pen.setWidth(self._line)
                painter.setPen(pen)
                if "T" in art.edges:
                    painter.drawLine(rect.topLeft(), rect.topRight())
                if "B" in art.edges:
                    painter.drawLine(rect.bottomLeft(), rect.bottomRight())
                if "L" in art.edges:
                    painter.drawLine(rect.topLeft(), rect.bottomLeft())
                if "R" in art.edges:
                    painter.drawLine(rect.topRight(), rect.bottomRight())
                if art.text:
                    painter.drawText(
                        rect,
                        _ALIGN[art.align] | Qt.AlignmentFlag.AlignVCenter,
                        art.text,
                    )
        painter.end()


class _MainWindow(QMainWindow):
    def __init__(self, seed: int | None, fps: int, scale: int) -> None:
        super().__init__()
        self.setWindowTitle("Fifteen")

        self._display = TileDisplay()
        self._keys: set[int] = set()
        self._controller = SessionController(self._display, seed=seed)
        self._view = _TileView(self._display, scale)
        self.setCentralWidget(self._view)

        self._controller.start()

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._frame)
        self._timer.start(max(1, 1000 // fps))

    # -- frame ---

    def _frame(self) -> None:
        self._controller.tick(fold_buttons(self._keys, _KEYS))
        if self._display.take_dirty():
            self._view.update()

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        elif key in _KEYS and not event.isAutoRepeat():
            self._keys.add(key)
        else:
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key in _KEYS and not event.isAutoRepeat():
            self._keys.discard(key)
        else:
            super().keyReleaseEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(seed: int | None = None, fps: int = FPS, scale: int = 4) -> None:
    """Launch the PyQt6 window."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(seed, fps, scale)
    window.show()
    qapp.exec()

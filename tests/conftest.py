"""Shared fixtures: a display that records every write."""

from __future__ import annotations

import pytest

from fifteen.backend.models.board import Board
from fifteen.frontend.display import TileDisplay


class RecordingDisplay(TileDisplay):
    """``TileDisplay`` that also logs writes as ``(layer, x, y, value)``."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[tuple[str, int, int, int]] = []
        self.toggles: list[str] = []

    def write_content(self, x: int, y: int, tile: int) -> None:
        super().write_content(x, y, tile)
        self.writes.append(("content", x, y, tile))

    def write_attribute(self, x: int, y: int, band: int) -> None:
        super().write_attribute(x, y, band)
        self.writes.append(("attribute", x, y, band))

    def show(self) -> None:
        super().show()
        self.toggles.append("show")

    def hide(self) -> None:
        super().hide()
        self.toggles.append("hide")

    def power_on(self) -> None:
        super().power_on()
        self.toggles.append("on")

    def power_off(self) -> None:
        super().power_off()
        self.toggles.append("off")

    def reset(self) -> None:
        self.writes.clear()
        self.toggles.clear()

    def touched(self) -> set[tuple[int, int]]:
        return {(x, y) for _, x, y, _ in self.writes}


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def solved() -> Board:
    return Board.solved()

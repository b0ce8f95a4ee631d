"""Player-selected cell."""

from __future__ import annotations

from dataclasses import dataclass

from fifteen.backend.drivers import Button
from fifteen.backend.models.board import GRID_SIZE, Cell


@dataclass
class Cursor:
    row: int = 0
    col: int = 0

    @property
    def pos(self) -> Cell:
        return (self.row, self.col)

    def step(self, buttons: Button) -> None:
        """Move one cell per held axis, clamped to the grid.

        Opposing directions held together are applied in turn, so up+down
        on the top row lands one row lower.
        """
        if Button.UP in buttons and self.row > 0:
            self.row -= 1
        if Button.DOWN in buttons and self.row < GRID_SIZE - 1:
            self.row += 1
        if Button.LEFT in buttons and self.col > 0:
            self.col -= 1
        if Button.RIGHT in buttons and self.col < GRID_SIZE - 1:
            self.col += 1

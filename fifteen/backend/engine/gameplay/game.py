"""Core gameplay logic — validates and applies tile slides."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fifteen.backend.engine.gamestate import GameState
from fifteen.backend.models.board import Cell, in_grid

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    """The two cells whose displayed content changed."""

    old_empty: Cell
    new_empty: Cell

    @property
    def dirty(self) -> tuple[Cell, Cell]:
        return (self.old_empty, self.new_empty)


class MoveEngine:
    """Applies player moves to the board held by a ``GameState``."""

    def __init__(self, state: GameState) -> None:
        self.state = state

    def try_move(self, row: int, col: int) -> Move | None:
        """Slide the tile at (row, col) into the adjacent empty cell.

        Returns the resulting ``Move`` or ``None`` if the target is not
        cardinally adjacent to the empty cell; a failed attempt leaves the
        board and move counter untouched.
        """
        board = self.state.board
        er, ec = board.empty_pos

        if not in_grid(row, col) or abs(row - er) + abs(col - ec) != 1:
            log.debug("rejected move (%d, %d), empty at (%d, %d)", row, col, er, ec)
            return None

        board.swap((er, ec), (row, col))
        self.state.increment_moves()
        return Move(old_empty=(er, ec), new_empty=(row, col))

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

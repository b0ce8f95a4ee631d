"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from fifteen.backend.models.board import Board
from fifteen.backend.models.cursor import Cursor


class GameState:
    """Holds the current board, cursor, move counter and input cooldown.

    One instance per session; nothing is carried over to the next one.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.cursor = Cursor()
        self.moves: int = 0
        self.won: bool = False
        self.cooldown: int = 0

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def mark_won(self) -> None:
        self.won = True

    # -- input debounce -------------------------------------------------------

    def cooling_down(self) -> bool:
        """Consume one tick of cooldown; True if input must be ignored."""
        if self.cooldown > 0:
            self.cooldown -= 1
            return True
        return False

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()

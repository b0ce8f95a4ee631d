"""Solvability check for the 15-puzzle."""

from __future__ import annotations

from fifteen.backend.models.board import EMPTY, GRID_SIZE, Board


class Solver:
    """Stateless — all methods are static."""

    @staticmethod
    def inversions(board: Board) -> int:
        values = [v for v in board.flat() if v != EMPTY]
        return sum(
            1
            for i, a in enumerate(values)
            for b in values[i + 1 :]
            if a > b
        )

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state by legal slides.

        On an even-width grid the inversion count plus the empty cell's row
        counted from the bottom (1-based) must be odd.
        """
        row_from_bottom = GRID_SIZE - board.empty_pos[0]
        return (Solver.inversions(board) + row_from_bottom) % 2 == 1
